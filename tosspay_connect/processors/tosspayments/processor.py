from typing import Dict, Any, Optional, Union
from pydantic import BaseModel, ValidationError as OptionsValidationError
from ...schemas.host import (
    AuthorizePaymentResult,
    PaymentProcessorContext,
    PaymentProcessorError,
    PaymentProcessorSessionResponse,
    PaymentSessionStatus,
    ProcessorErrorType,
)
from ...utils.errors import ConfigurationError, ValidationError, build_error, is_processor_error
from ...utils.log import get_logger
from .client import TossPaymentsClient
from .session import SessionStore
from .status import to_session_status

logger = get_logger(__name__)


class TossPaymentsOptions(BaseModel):
    secret_key: Optional[str] = None
    api_version: Optional[str] = None
    debug: bool = False
    base_url: str = "https://api.tosspayments.com"
    timeout_sec: int = 15

    @classmethod
    def from_host_options(cls, options: Dict[str, Any]) -> "TossPaymentsOptions":
        """Accepts both our own names and the host plugin config names."""
        picked = {
            "secret_key": options.get("secret_key", options.get("tosspayments_key")),
            "api_version": options.get("api_version", options.get("tosspayments_version")),
            "debug": options.get("debug", options.get("is_debug")) or False,
        }
        for key in ("base_url", "timeout_sec"):
            if options.get(key) is not None:
                picked[key] = options[key]
        return cls(**picked)

    @classmethod
    def from_settings(cls, s) -> "TossPaymentsOptions":
        return cls(
            secret_key=s.TOSSPAYMENTS_SECRET_KEY,
            api_version=s.TOSSPAYMENTS_API_VERSION,
            debug=s.TOSSPAYMENTS_DEBUG,
            base_url=s.TOSSPAYMENTS_BASE_URL,
            timeout_sec=s.TOSSPAYMENTS_TIMEOUT_SEC,
        )


class TossPaymentsProcessor:
    """
    Host payment-processor contract on top of TossPayments.

    Storefront: initiate_payment, update_payment, update_payment_data,
                get_payment_status, authorize_payment, retrieve_payment
    Admin:      refund_payment, capture_payment, cancel_payment, delete_payment

    One instance follows one payment session at a time (see SessionStore).
    None of the operations raise: failures come back as PaymentProcessorError.
    Only construction raises, with ConfigurationError.
    """

    identifier = "tosspayments"

    def __init__(
        self,
        options: Union[TossPaymentsOptions, Dict[str, Any], None] = None,
        client: Optional[TossPaymentsClient] = None,
    ):
        try:
            if isinstance(options, TossPaymentsOptions):
                self.options = options
            else:
                self.options = TossPaymentsOptions.from_host_options(options or {})
        except OptionsValidationError as e:
            raise ConfigurationError(f"Invalid TossPayments processor options: {e}") from e

        if not self.options.secret_key or not self.options.api_version:
            raise ConfigurationError(
                "TossPayments processor needs secret_key and api_version in its options"
            )

        self.tosspayments_ = client or TossPaymentsClient(
            self.options.secret_key,
            self.options.api_version,
            base_url=self.options.base_url,
            timeout_sec=self.options.timeout_sec,
        )
        self.session = SessionStore()

    # ---- Utils ----
    def _debug(self, event: str, **kw: Any) -> None:
        if self.options.debug:
            logger.info(f"tosspayments.{event}", **kw)

    def _error(self, operation: str, message: str, e: Union[PaymentProcessorError, Exception]) -> PaymentProcessorError:
        err = build_error(message, e)
        logger.warning(f"tosspayments.{operation}.failed", code=err.code, detail=err.detail)
        return err

    @staticmethod
    def _context(context: Union[PaymentProcessorContext, Dict[str, Any]]) -> PaymentProcessorContext:
        if isinstance(context, PaymentProcessorContext):
            return context
        return PaymentProcessorContext.model_validate(context)

    # ---- Storefront ----
    async def initiate_payment(
        self, context: Union[PaymentProcessorContext, Dict[str, Any]]
    ) -> Union[PaymentProcessorSessionResponse, PaymentProcessorError]:
        try:
            ctx = self._context(context)
            self._debug("initiate_payment", context=ctx.model_dump())
            intent = self.session.initialize(ctx.resource_id, ctx.email, ctx.amount)
            return PaymentProcessorSessionResponse(session_data=dict(intent))
        except Exception as e:
            return self._error(
                "initiate_payment", "Error in initiate_payment when initializing TossPayments", e
            )

    async def update_payment(
        self, context: Union[PaymentProcessorContext, Dict[str, Any]]
    ) -> Union[PaymentProcessorSessionResponse, PaymentProcessorError]:
        try:
            ctx = self._context(context)
            intent = self.session.retrieve()
            self._debug("update_payment", context=ctx.model_dump(), intent=intent)

            # a different resource means a different payment: start over
            if not intent or intent.get("id") != ctx.resource_id:
                reinitiated = await self.initiate_payment(ctx)
                if is_processor_error(reinitiated):
                    return self._error(
                        "update_payment",
                        "Error in update_payment during the re-initiate of the new payment for new customer",
                        reinitiated,
                    )
                return reinitiated

            # the host's amount always wins over cached session data
            if not intent.get("email") or intent.get("amount") != ctx.amount:
                updated = self.session.merge({"email": ctx.email, "amount": ctx.amount})
                return PaymentProcessorSessionResponse(session_data=dict(updated))

            updated = self.session.update(ctx.payment_session_data)
            self._debug("update_payment.updated", intent=updated)
            return PaymentProcessorSessionResponse(session_data=dict(updated))
        except Exception as e:
            return self._error("update_payment", "Error in update_payment during the retrieve of the cart", e)

    async def update_payment_data(
        self, session_id: str, data: Dict[str, Any]
    ) -> Union[Dict[str, Any], PaymentProcessorError]:
        self._debug("update_payment_data", session_id=session_id, data=data)
        try:
            intent = self.session.retrieve() or {}
            if data.get("amount") != intent.get("amount"):
                raise ValidationError(
                    "Can not update amount from update_payment_data", ProcessorErrorType.INVALID_DATA
                )
            return {**data}
        except Exception as e:
            return self._error(
                "update_payment_data",
                "Error in update_payment_data during the retrieve of the custom data",
                e,
            )

    async def get_payment_status(self, session_data: Dict[str, Any]) -> PaymentSessionStatus:
        self._debug("get_payment_status", session_data=session_data, gateway_status=self.session.status)
        if not session_data.get("id"):
            return PaymentSessionStatus.PENDING
        return to_session_status(self.session.status)

    async def authorize_payment(
        self, session_data: Dict[str, Any], context: Optional[Dict[str, Any]] = None
    ) -> Union[AuthorizePaymentResult, PaymentProcessorError]:
        self._debug("authorize_payment", session_data=session_data, context=context)
        try:
            payment_key = session_data.get("paymentKey")
            order_id = session_data.get("orderId")
            amount = session_data.get("amount")
            if not payment_key or not order_id or not amount:
                raise ValidationError(
                    "Can not find necessary keys in authorize_payment", ProcessorErrorType.NOT_ALLOWED
                )

            payment = await self.tosspayments_.confirm(payment_key, order_id, amount)
            self._debug("authorize_payment.confirmed", payment=payment.model_dump(exclude_none=True))

            self.session.set_status(payment.status)
            status = await self.get_payment_status(session_data)

            return AuthorizePaymentResult(
                status=status,
                data={
                    **session_data,
                    "receipt": payment.receipt.url if payment.receipt else None,
                    "checkout": payment.checkout.url if payment.checkout else None,
                    "method": payment.method,
                    "card": payment.card,
                },
            )
        except Exception as e:
            return self._error(
                "authorize_payment",
                "Error in authorize_payment during the request to tosspayments api",
                e,
            )

    async def retrieve_payment(self, session_data: Dict[str, Any]) -> Union[Dict[str, Any], PaymentProcessorError]:
        self._debug("retrieve_payment", session_data=session_data)
        try:
            payment_key = session_data.get("paymentKey")
            if not payment_key:
                raise ValidationError(
                    "Can not find necessary keys in retrieve_payment", ProcessorErrorType.INVALID_DATA
                )

            # TODO: reconcile self.session.status from the inquiry so deposits on
            # virtual accounts show up; today the record is only logged.
            payment = await self.tosspayments_.inquire(payment_key)
            self._debug("retrieve_payment.inquired", payment=payment.model_dump(exclude_none=True))
            return {**session_data}
        except Exception as e:
            return self._error(
                "retrieve_payment",
                "Error in retrieve_payment getting payment information from tosspayments api",
                e,
            )

    # ---- Admin ----
    async def refund_payment(
        self, session_data: Dict[str, Any], refund_amount: int
    ) -> Union[Dict[str, Any], PaymentProcessorError]:
        self._debug("refund_payment", session_data=session_data, refund_amount=refund_amount)
        try:
            payment_key = session_data.get("paymentKey")
            if not payment_key:
                raise ValidationError(
                    "Can not find necessary keys in refund_payment", ProcessorErrorType.INVALID_ARGUMENT
                )

            # full cancellation; refund_amount is not forwarded
            payment = await self.tosspayments_.cancel(payment_key, "")
            self._debug("refund_payment.canceled", payment=payment.model_dump(exclude_none=True))
            return {**session_data}
        except Exception as e:
            return self._error("refund_payment", "Error in refund_payment", e)

    async def capture_payment(self, session_data: Dict[str, Any]) -> Dict[str, Any]:
        # TossPayments settles at confirmation, there is no separate capture
        return session_data

    async def cancel_payment(self, session_data: Dict[str, Any]) -> Dict[str, Any]:
        return session_data

    async def delete_payment(self, session_data: Dict[str, Any]) -> Dict[str, Any]:
        return session_data
