from enum import Enum
from pydantic import BaseModel, Field
from typing import Optional, Any, Dict


# ====== Host session vocabulary ======

class PaymentSessionStatus(str, Enum):
    AUTHORIZED = "authorized"
    PENDING = "pending"
    REQUIRES_MORE = "requires_more"
    ERROR = "error"
    CANCELED = "canceled"


class ProcessorErrorType(str, Enum):
    # codes the host understands for failures raised before any gateway call
    NOT_ALLOWED = "NOT_ALLOWED"
    INVALID_DATA = "INVALID_DATA"
    INVALID_ARGUMENT = "INVALID_ARGUMENT"


# ====== Input from the host ======

class PaymentProcessorContext(BaseModel):
    resource_id: str
    email: Optional[str] = None
    amount: int
    currency_code: Optional[str] = None
    payment_session_data: Dict[str, Any] = Field(default_factory=dict)
    context: Dict[str, Any] = Field(default_factory=dict)
    model_config = {"extra": "allow"}


class AuthorizePaymentRequest(BaseModel):
    session_data: Dict[str, Any]
    context: Dict[str, Any] = Field(default_factory=dict)


class RefundPaymentRequest(BaseModel):
    session_data: Dict[str, Any]
    refund_amount: int


# ====== Output to the host ======

class PaymentProcessorSessionResponse(BaseModel):
    session_data: Dict[str, Any]
    update_requests: Optional[Dict[str, Any]] = None


class AuthorizePaymentResult(BaseModel):
    status: PaymentSessionStatus
    data: Dict[str, Any]


class PaymentProcessorError(BaseModel):
    """
    The uniform failure shape handed back to the host instead of an exception.
    `error` holds the static description of the call that failed, `detail`
    the causal chain (newline separated when errors are wrapped again).
    """
    error: str
    code: str = ""
    detail: Optional[str] = None

    @property
    def message(self) -> str:
        return self.error
