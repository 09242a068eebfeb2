from enum import Enum
from typing import Any, Optional, Union

from ..schemas.host import PaymentProcessorError, ProcessorErrorType


class TossConnectError(Exception):
    """Base class for everything the connector raises internally."""


class ConfigurationError(TossConnectError):
    """Missing credentials or an unsupported API version. Fatal at construction."""


class ValidationError(TossConnectError):
    def __init__(self, message: str, code: Union[ProcessorErrorType, str]):
        super().__init__(message)
        self.message = message
        self.code = code.value if isinstance(code, Enum) else str(code)


class GatewayError(TossConnectError):
    """Non-2xx answer from the gateway, carrying its own code/message pair."""

    def __init__(self, status_code: int, code: str, message: str, operation: Optional[str] = None):
        self.status_code = status_code
        self.code = code
        self.message = message
        self.operation = operation
        super().__init__(f"TossPayments API Error with status code {status_code}: {code} {message}")


class TransportError(TossConnectError):
    """The request never produced an HTTP response."""

    def __init__(self, message: str, operation: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.operation = operation


def is_processor_error(obj: Any) -> bool:
    return isinstance(obj, PaymentProcessorError)


def build_error(message: str, e: Union[PaymentProcessorError, BaseException]) -> PaymentProcessorError:
    """
    Normalize any failure into the host error shape.
    An already-normalized error is chained: its `error` and `detail` become the new detail.
    """
    if is_processor_error(e):
        return PaymentProcessorError(
            error=message,
            code=e.code,
            detail=f"{e.error}\n{e.detail or ''}",
        )

    code = getattr(e, "code", None) or ""
    detail = getattr(e, "detail", None)
    if detail is None:
        detail = str(e)
    return PaymentProcessorError(error=message, code=str(code), detail=detail)
