from typing import Protocol, Union, Dict, Any, runtime_checkable
from ..schemas.host import (
    AuthorizePaymentResult,
    PaymentProcessorContext,
    PaymentProcessorError,
    PaymentProcessorSessionResponse,
    PaymentSessionStatus,
)

SessionDataOrError = Union[Dict[str, Any], PaymentProcessorError]


@runtime_checkable
class PaymentProcessor(Protocol):
    identifier: str

    # ---- Storefront ----
    async def initiate_payment(
        self, context: PaymentProcessorContext
    ) -> Union[PaymentProcessorSessionResponse, PaymentProcessorError]:
        ...

    async def update_payment(
        self, context: PaymentProcessorContext
    ) -> Union[PaymentProcessorSessionResponse, PaymentProcessorError]:
        ...

    async def update_payment_data(self, session_id: str, data: Dict[str, Any]) -> SessionDataOrError:
        ...

    async def get_payment_status(self, session_data: Dict[str, Any]) -> PaymentSessionStatus:
        ...

    async def authorize_payment(
        self, session_data: Dict[str, Any], context: Dict[str, Any]
    ) -> Union[AuthorizePaymentResult, PaymentProcessorError]:
        ...

    async def retrieve_payment(self, session_data: Dict[str, Any]) -> SessionDataOrError:
        ...

    # ---- Admin ----
    async def refund_payment(self, session_data: Dict[str, Any], refund_amount: int) -> SessionDataOrError:
        ...

    async def capture_payment(self, session_data: Dict[str, Any]) -> SessionDataOrError:
        ...

    async def cancel_payment(self, session_data: Dict[str, Any]) -> SessionDataOrError:
        ...

    async def delete_payment(self, session_data: Dict[str, Any]) -> SessionDataOrError:
        ...
