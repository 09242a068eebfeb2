from typing import Optional, Union
from ...schemas.host import PaymentSessionStatus
from .schemas import PaymentStatus

_STATUS_MAP = {
    PaymentStatus.READY: PaymentSessionStatus.PENDING,
    PaymentStatus.CANCELED: PaymentSessionStatus.CANCELED,
    PaymentStatus.PARTIAL_CANCELED: PaymentSessionStatus.CANCELED,
    PaymentStatus.ABORTED: PaymentSessionStatus.ERROR,
    PaymentStatus.EXPIRED: PaymentSessionStatus.ERROR,
    PaymentStatus.IN_PROGRESS: PaymentSessionStatus.AUTHORIZED,
    PaymentStatus.WAITING_FOR_DEPOSIT: PaymentSessionStatus.AUTHORIZED,
    PaymentStatus.DONE: PaymentSessionStatus.AUTHORIZED,
}


def to_session_status(status: Optional[Union[PaymentStatus, str]]) -> PaymentSessionStatus:
    """Gateway payment status -> host session status. Anything unmapped is PENDING."""
    try:
        key = PaymentStatus(status)
    except ValueError:
        return PaymentSessionStatus.PENDING
    return _STATUS_MAP.get(key, PaymentSessionStatus.PENDING)
