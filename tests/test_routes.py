"""
HTTP surface tests: the ten host operations exposed through FastAPI.
"""

import pytest
from fastapi.testclient import TestClient

from tosspay_connect.main import app
from tosspay_connect.processors.registry import register_processor
from tosspay_connect.processors.tosspayments.schemas import Payment
from tosspay_connect.settings import settings
from tosspay_connect.utils.errors import GatewayError


@pytest.fixture
def api(processor):
    register_processor("tosspayments", processor)
    with TestClient(app) as client:
        yield client


def test_health(api):
    resp = api.get("/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


def test_initiate_and_status(api):
    resp = api.post("/sessions/initiate", json={"resource_id": "order_1", "email": "a@b.com", "amount": 1000})
    assert resp.status_code == 200
    assert resp.json()["session_data"] == {"id": "order_1", "email": "a@b.com", "amount": 1000}

    resp = api.post("/sessions/status", json={"id": "order_1"})
    assert resp.json() == {"status": "pending"}


def test_update_with_new_resource(api):
    api.post("/sessions/initiate", json={"resource_id": "order_1", "email": "a@b.com", "amount": 1000})

    resp = api.post(
        "/sessions/update",
        json={"resource_id": "order_2", "email": "a@b.com", "amount": 1000, "payment_session_data": {"id": "order_1"}},
    )

    assert resp.json()["session_data"]["id"] == "order_2"


def test_update_data_rejects_amount_change(api):
    api.post("/sessions/initiate", json={"resource_id": "order_1", "email": "a@b.com", "amount": 1000})

    resp = api.post("/sessions/ps_1/data", json={"amount": 2000})

    assert resp.status_code == 200
    body = resp.json()
    assert body["error"] == "Error in update_payment_data during the retrieve of the custom data"
    assert body["code"] == "INVALID_DATA"


def test_authorize(api, gateway, done_payment):
    gateway.confirm.return_value = done_payment
    api.post("/sessions/initiate", json={"resource_id": "order_1", "email": "a@b.com", "amount": 1000})

    resp = api.post(
        "/sessions/authorize",
        json={"session_data": {"id": "order_1", "paymentKey": "pk1", "orderId": "order_1", "amount": 1000}},
    )

    body = resp.json()
    assert body["status"] == "authorized"
    assert body["data"]["receipt"] == "https://r"
    assert body["data"]["method"] == "카드"


def test_authorize_gateway_error_is_a_body(api, gateway):
    gateway.confirm.side_effect = GatewayError(400, "EXCEED_MAX_AMOUNT", "limit", operation="confirm")

    resp = api.post(
        "/sessions/authorize",
        json={"session_data": {"paymentKey": "pk1", "orderId": "order_1", "amount": 1000}},
    )

    assert resp.status_code == 200
    assert resp.json()["code"] == "EXCEED_MAX_AMOUNT"


def test_retrieve_and_refund(api, gateway):
    gateway.inquire.return_value = Payment(paymentKey="pk1", status="DONE")
    gateway.cancel.return_value = Payment(paymentKey="pk1", status="CANCELED")

    assert api.post("/sessions/retrieve", json={"paymentKey": "pk1"}).json() == {"paymentKey": "pk1"}

    resp = api.post("/sessions/refund", json={"session_data": {"paymentKey": "pk1"}, "refund_amount": 500})
    assert resp.json() == {"paymentKey": "pk1"}
    gateway.cancel.assert_awaited_once_with("pk1", "")


@pytest.mark.parametrize("path", ["/sessions/capture", "/sessions/cancel", "/sessions/delete"])
def test_pass_throughs(api, gateway, path):
    resp = api.post(path, json={"paymentKey": "pk1", "id": "order_1"})
    assert resp.json() == {"paymentKey": "pk1", "id": "order_1"}
    assert not gateway.mock_calls


def test_unconfigured_processor_is_503(monkeypatch):
    monkeypatch.setattr(settings, "TOSSPAYMENTS_SECRET_KEY", None)
    monkeypatch.setattr(settings, "TOSSPAYMENTS_API_VERSION", None)

    with TestClient(app) as client:
        resp = client.post("/sessions/initiate", json={"resource_id": "order_1", "amount": 1000})

    assert resp.status_code == 503
    assert "secret_key" in resp.json()["detail"]
