from typing import Dict, Any, Optional
import httpx
from ...utils.http import client
from ...utils.errors import ConfigurationError, GatewayError, TransportError
from ...utils.log import get_logger
from .schemas import Payment, ErrorBody, SUPPORTED_API_VERSION, is_known_error_code

logger = get_logger(__name__)


class TossPaymentsClient:
    """
    TossPayments REST API (v1):
    - POST /v1/payments/confirm             (approve an authenticated payment)
    - GET  /v1/payments/{paymentKey}        (inquiry by payment key)
    - GET  /v1/payments/orders/{orderId}    (inquiry by merchant order id)
    - POST /v1/payments/{paymentKey}/cancel (full or partial cancel)
    Every call is made exactly once; a non-2xx answer raises GatewayError,
    a request that never got an answer raises TransportError.
    """

    name = "tosspayments"

    def __init__(
        self,
        secret_key: Any,
        api_version: Any,
        base_url: str = "https://api.tosspayments.com",
        timeout_sec: int = 15,
    ):
        if not isinstance(secret_key, str) or not isinstance(api_version, str) or not secret_key:
            raise ConfigurationError("Failed to detect secret key or api version")
        if api_version != SUPPORTED_API_VERSION:
            raise ConfigurationError(
                f"TossPayments api version {api_version!r} is not supported, "
                f"only version {SUPPORTED_API_VERSION} is"
            )
        self.api_version = api_version
        self.base_url = base_url.rstrip("/")
        self.timeout_sec = timeout_sec
        self._secret_key = secret_key

    def _headers(self, idempotency_key: Optional[str] = None) -> Dict[str, str]:
        headers = {"Authorization": f"Basic {self._secret_key}", "Content-Type": "application/json"}
        if idempotency_key:
            headers["Idempotency-Key"] = idempotency_key
        return headers

    async def _request(
        self,
        operation: str,
        method: str,
        path: str,
        json_payload: Optional[Dict[str, Any]] = None,
        idempotency_key: Optional[str] = None,
    ) -> Payment:
        try:
            async with client(self.base_url, self._headers(idempotency_key), self.timeout_sec) as c:
                resp = await c.request(method, path, json=json_payload)
        except httpx.HTTPError as e:
            logger.debug("tosspayments.request", operation=operation, method=method, path=path, status=None)
            raise TransportError(str(e) or e.__class__.__name__, operation=operation) from e

        logger.debug("tosspayments.request", operation=operation, method=method, path=path, status=resp.status_code)

        if resp.is_error:
            raise self._gateway_error(operation, resp)
        return Payment.model_validate(resp.json())

    def _gateway_error(self, operation: str, resp: httpx.Response) -> GatewayError:
        try:
            body = ErrorBody.model_validate(resp.json())
            code, message = body.code, body.message
        except ValueError:
            # not JSON, or JSON without a code
            code, message = "UNKNOWN_PAYMENT_ERROR", resp.text or ""

        if not is_known_error_code(operation, code):
            logger.warning("tosspayments.unknown_error_code", operation=operation, code=code, status=resp.status_code)
        return GatewayError(resp.status_code, code, message, operation=operation)

    # ---- TossPayments API ----
    async def confirm(self, payment_key: str, order_id: str, amount: int) -> Payment:
        """
        Approve a payment the customer has already authenticated.
        Must be called within the 10 minute authentication window, and the
        amount must equal the one requested client-side.
        """
        body = {"paymentKey": payment_key, "orderId": order_id, "amount": amount}
        return await self._request("confirm", "POST", "/v1/payments/confirm", json_payload=body)

    async def inquire(self, payment_key: str) -> Payment:
        return await self._request("inquire", "GET", f"/v1/payments/{payment_key}")

    async def inquire_by_order_id(self, order_id: str) -> Payment:
        return await self._request("inquire", "GET", f"/v1/payments/orders/{order_id}")

    async def cancel(
        self,
        payment_key: str,
        reason: str,
        amount: Optional[int] = None,
        idempotency_key: Optional[str] = None,
    ) -> Payment:
        """
        Cancel a confirmed payment. Without `amount` the whole payment is
        canceled; with it only that part. Requests sharing an idempotency key
        are processed once by the gateway.
        """
        body: Dict[str, Any] = {"cancelReason": reason}
        if amount:
            body["cancelAmount"] = amount
        return await self._request(
            "cancel", "POST", f"/v1/payments/{payment_key}/cancel",
            json_payload=body, idempotency_key=idempotency_key,
        )
