from enum import Enum
from pydantic import BaseModel
from typing import Optional, Any, Dict, List

# Only the fields the processor inspects are typed; the gateway's Payment object
# carries many more (virtualAccount, easyPay, cashReceipts, ...) which pass
# through as extras.

SUPPORTED_API_VERSION = "2022-11-16"


class PaymentStatus(str, Enum):
    READY = "READY"
    IN_PROGRESS = "IN_PROGRESS"
    WAITING_FOR_DEPOSIT = "WAITING_FOR_DEPOSIT"
    DONE = "DONE"
    CANCELED = "CANCELED"
    PARTIAL_CANCELED = "PARTIAL_CANCELED"
    ABORTED = "ABORTED"
    EXPIRED = "EXPIRED"


class Receipt(BaseModel):
    url: Optional[str] = None


class Checkout(BaseModel):
    url: Optional[str] = None


class Failure(BaseModel):
    code: str
    message: str


class Payment(BaseModel):
    paymentKey: Optional[str] = None
    orderId: Optional[str] = None
    status: Optional[str] = None
    method: Optional[str] = None
    totalAmount: Optional[int] = None
    balanceAmount: Optional[int] = None
    receipt: Optional[Receipt] = None
    checkout: Optional[Checkout] = None
    card: Optional[Dict[str, Any]] = None
    cancels: Optional[List[Dict[str, Any]]] = None
    failure: Optional[Failure] = None
    model_config = {"extra": "allow"}


class ErrorBody(BaseModel):
    code: str
    message: str = ""
    model_config = {"extra": "allow"}


# ====== Gateway error taxonomies ======

CONFIRM_ERROR_CODES = frozenset({
    "ALREADY_PROCESSED_PAYMENT",
    "PROVIDER_ERROR",
    "EXCEED_MAX_CARD_INSTALLMENT_PLAN",
    "INVALID_REQUEST",
    "NOT_ALLOWED_POINT_USE",
    "INVALID_API_KEY",
    "INVALID_REJECT_CARD",
    "BELOW_MINIMUM_AMOUNT",
    "INVALID_CARD_EXPIRATION",
    "INVALID_STOPPED_CARD",
    "EXCEED_MAX_DAILY_PAYMENT_COUNT",
    "NOT_SUPPORTED_INSTALLMENT_PLAN_CARD_OR_MERCHANT",
    "INVALID_CARD_INSTALLMENT_PLAN",
    "NOT_SUPPORTED_MONTHLY_INSTALLMENT_PLAN",
    "EXCEED_MAX_PAYMENT_AMOUNT",
    "NOT_FOUND_TERMINAL_ID",
    "INVALID_AUTHORIZE_AUTH",
    "INVALID_CARD_LOST_OR_STOLEN",
    "RESTRICTED_TRANSFER_ACCOUNT",
    "INVALID_CARD_NUMBER",
    "INVALID_UNREGISTERED_SUBMALL",
    "NOT_REGISTERED_BUSINESS",
    "EXCEED_MAX_ONE_DAY_WITHDRAW_AMOUNT",
    "EXCEED_MAX_ONE_TIME_WITHDRAW_AMOUNT",
    "CARD_PROCESSING_ERROR",
    "EXCEED_MAX_AMOUNT",
    "INVALID_ACCOUNT_INFO_RE_REGISTER",
    "NOT_AVAILABLE_PAYMENT",
    "UNAPPROVED_ORDER_ID",
    "EXCEED_MAX_MONTHLY_PAYMENT_AMOUNT",
    "UNAUTHORIZED_KEY",
    "REJECT_ACCOUNT_PAYMENT",
    "REJECT_CARD_PAYMENT",
    "REJECT_CARD_COMPANY",
    "FORBIDDEN_REQUEST",
    "REJECT_TOSSPAY_INVALID_ACCOUNT",
    "EXCEED_MAX_AUTH_COUNT",
    "EXCEED_MAX_ONE_DAY_AMOUNT",
    "NOT_AVAILABLE_BANK",
    "INVALID_PASSWORD",
    "INCORRECT_BASIC_AUTH_FORMAT",
    "FDS_ERROR",
    "NOT_FOUND_PAYMENT",
    "NOT_FOUND_PAYMENT_SESSION",
    "FAILED_PAYMENT_INTERNAL_SYSTEM_PROCESSING",
    "FAILED_INTERNAL_SYSTEM_PROCESSING",
    "UNKNOWN_PAYMENT_ERROR",
})

INQUIRY_ERROR_CODES = frozenset({
    "NOT_SUPPORTED_MONTHLY_INSTALLMENT_PLAN_BELOW_AMOUNT",
    "UNAUTHORIZED_KEY",
    "FORBIDDEN_CONSECUTIVE_REQUEST",
    "INCORRECT_BASIC_AUTH_FORMAT",
    "NOT_FOUND_PAYMENT",
    "NOT_FOUND",
    "FAILED_PAYMENT_INTERNAL_SYSTEM_PROCESSING",
})

CANCEL_ERROR_CODES = frozenset({
    "ALREADY_CANCELED_PAYMENT",
    "INVALID_REFUND_ACCOUNT_INFO",
    "EXCEED_CANCEL_AMOUNT_DISCOUNT_AMOUNT",
    "INVALID_REQUEST",
    "INVALID_REFUND_ACCOUNT_NUMBER",
    "INVALID_BANK",
    "NOT_MATCHES_REFUNDABLE_AMOUNT",
    "PROVIDER_ERROR",
    "REFUND_REJECTED",
    "UNAUTHORIZED_KEY",
    "NOT_CANCELABLE_AMOUNT",
    "FORBIDDEN_CONSECUTIVE_REQUEST",
    "FORBIDDEN_REQUEST",
    "NOT_CANCELABLE_PAYMENT",
    "EXCEED_MAX_REFUND_DUE",
    "NOT_ALLOWED_PARTIAL_REFUND_WAITING_DEPOSIT",
    "NOT_ALLOWED_PARTIAL_REFUND",
    "NOT_AVAILABLE_BANK",
    "INCORRECT_BASIC_AUTH_FORMAT",
    "NOT_CANCELABLE_PAYMENT_FOR_DORMANT_USER",
    "NOT_FOUND_PAYMENT",
    "FAILED_INTERNAL_SYSTEM_PROCESSING",
    "FAILED_REFUND_PROCESS",
    "FAILED_METHOD_HANDLING_CANCEL",
    "FAILED_PARTIAL_REFUND",
    "COMMON_ERROR",
    "FAILED_PAYMENT_INTERNAL_SYSTEM_PROCESSING",
})

_ERROR_CODES_BY_OPERATION = {
    "confirm": CONFIRM_ERROR_CODES,
    "inquire": INQUIRY_ERROR_CODES,
    "cancel": CANCEL_ERROR_CODES,
}


def is_known_error_code(operation: str, code: str) -> bool:
    return code in _ERROR_CODES_BY_OPERATION.get(operation, frozenset())
