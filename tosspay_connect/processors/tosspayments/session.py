from typing import Dict, Any, Optional, Union
from .schemas import PaymentStatus


class SessionStore:
    """
    The one payment intent a processor instance works on, plus the last
    gateway status it saw. Not shared between instances and not locked:
    callers serialize calls per session.
    """

    def __init__(self):
        self.status: Optional[PaymentStatus] = None
        self.intent: Optional[Dict[str, Any]] = None

    def initialize(self, id: str, email: Optional[str], amount: int) -> Dict[str, Any]:
        self.status = PaymentStatus.READY
        self.intent = {"id": id, "email": email, "amount": amount}
        return self.intent

    def update(self, data: Dict[str, Any]) -> Dict[str, Any]:
        self.intent = {**data}
        return self.intent

    def merge(self, fields: Dict[str, Any]) -> Dict[str, Any]:
        self.intent = {**(self.intent or {}), **fields}
        return self.intent

    def retrieve(self) -> Optional[Dict[str, Any]]:
        return self.intent

    def set_status(self, status: Union[PaymentStatus, str, None]) -> None:
        # unknown strings are kept as-is and translate to PENDING
        try:
            self.status = PaymentStatus(status)
        except ValueError:
            self.status = status
