"""
Shared fixtures for the TossPayments connector tests.
"""

from typing import Any, Dict
from unittest.mock import AsyncMock

import pytest

from tosspay_connect.processors.registry import reset_registry
from tosspay_connect.processors.tosspayments.client import TossPaymentsClient
from tosspay_connect.processors.tosspayments.processor import TossPaymentsProcessor
from tosspay_connect.processors.tosspayments.schemas import Payment

API_VERSION = "2022-11-16"


@pytest.fixture(autouse=True)
def _clean_registry():
    reset_registry()
    yield
    reset_registry()


@pytest.fixture
def host_options() -> Dict[str, Any]:
    """Options as the host platform passes them to the plugin."""
    return {"tosspayments_key": "test_sk_123", "tosspayments_version": API_VERSION}


@pytest.fixture
def gateway() -> AsyncMock:
    """Stub gateway client; every API method is an AsyncMock."""
    return AsyncMock(spec=TossPaymentsClient)


@pytest.fixture
def processor(host_options, gateway) -> TossPaymentsProcessor:
    return TossPaymentsProcessor(host_options, client=gateway)


@pytest.fixture
def done_payment() -> Payment:
    return Payment.model_validate(
        {
            "paymentKey": "pk1",
            "orderId": "order_1",
            "status": "DONE",
            "method": "카드",
            "totalAmount": 1000,
            "receipt": {"url": "https://r"},
            "checkout": {"url": "https://c"},
            "card": {"issuerCode": "61", "number": "12345678****000*", "cardType": "신용"},
            "currency": "KRW",
        }
    )
