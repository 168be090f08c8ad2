# -*- coding: utf-8 -*-
"""
backend/tests/modules/payments/test_razorpay_gateway.py

Tests del cliente HTTP de órdenes de Razorpay usando httpx.MockTransport
(sin red).

Autor: Campus Connect
Fecha: 2026-10-12
"""

import base64
import json

import httpx
import pytest

from app.modules.payments.errors import GatewayUnavailable
from app.modules.payments.gateways import RazorpayGateway, StubGateway, build_gateway
from app.shared.config.settings_payments import PaymentsSettings

BASE_URL = "https://api.razorpay.test/v1"


def _gateway(handler) -> RazorpayGateway:
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return RazorpayGateway(
        key_id="k1",
        key_secret="s3cret",
        base_url=BASE_URL,
        client=client,
    )


@pytest.mark.asyncio
async def test_create_order_success():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["url"] = str(request.url)
        seen["auth"] = request.headers.get("authorization")
        seen["body"] = json.loads(request.content)
        return httpx.Response(
            200,
            json={"id": "order_abc", "amount": 50000, "currency": "INR", "status": "created"},
        )

    gateway = _gateway(handler)
    order = await gateway.create_order(50000, "INR", "rcpt_1", {"student_id": "42"})

    assert order.order_id == "order_abc"
    assert order.amount == 50000
    assert order.currency == "INR"
    assert order.key == "k1"

    assert seen["url"] == f"{BASE_URL}/orders"
    expected_auth = base64.b64encode(b"k1:s3cret").decode()
    assert seen["auth"] == f"Basic {expected_auth}"
    assert seen["body"] == {
        "amount": 50000,
        "currency": "INR",
        "receipt": "rcpt_1",
        "notes": {"student_id": "42"},
    }


@pytest.mark.asyncio
async def test_create_order_rejected_by_gateway():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500, json={"error": {"description": "boom"}})

    with pytest.raises(GatewayUnavailable) as exc:
        await _gateway(handler).create_order(50000, "INR", "rcpt_1")

    assert exc.value.status_code == 500
    assert exc.value.retryable is True
    assert exc.value.to_dict()["gateway_status"] == 500


@pytest.mark.asyncio
async def test_create_order_timeout():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    with pytest.raises(GatewayUnavailable, match="timed out"):
        await _gateway(handler).create_order(50000, "INR", "rcpt_1")


@pytest.mark.asyncio
async def test_create_order_connection_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    with pytest.raises(GatewayUnavailable, match="unreachable"):
        await _gateway(handler).create_order(50000, "INR", "rcpt_1")


@pytest.mark.asyncio
async def test_create_order_invalid_json():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, content=b"<html>oops</html>")

    with pytest.raises(GatewayUnavailable, match="invalid response"):
        await _gateway(handler).create_order(50000, "INR", "rcpt_1")


@pytest.mark.asyncio
async def test_create_order_without_id():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"amount": 50000, "currency": "INR"})

    with pytest.raises(GatewayUnavailable, match="without id"):
        await _gateway(handler).create_order(50000, "INR", "rcpt_1")


@pytest.mark.asyncio
@pytest.mark.parametrize("amount", ["fifty", None, {"value": 50000}])
async def test_create_order_non_numeric_amount(amount):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"id": "order_abc", "amount": amount, "currency": "INR"})

    with pytest.raises(GatewayUnavailable, match="invalid amount") as exc:
        await _gateway(handler).create_order(50000, "INR", "rcpt_1")

    assert exc.value.retryable is True


@pytest.mark.asyncio
async def test_aclose_keeps_injected_client_open():
    client = httpx.AsyncClient(transport=httpx.MockTransport(lambda r: httpx.Response(204)))
    gateway = RazorpayGateway(key_id="k1", key_secret="s", client=client)

    await gateway.aclose()

    assert client.is_closed is False
    await client.aclose()


@pytest.mark.asyncio
async def test_stub_gateway_unavailable_records_call():
    gateway = StubGateway(key_id="k1", unavailable=True)

    with pytest.raises(GatewayUnavailable):
        await gateway.create_order(50000, "INR", "rcpt_1", {"student_id": "42"})

    assert len(gateway.calls) == 1
    assert gateway.calls[0].notes == {"student_id": "42"}


def test_build_gateway_selects_stub_or_razorpay():
    stub_settings = PaymentsSettings(_env_file=None, razorpay_key_id="k1", use_payment_stubs=True)
    real_settings = PaymentsSettings(
        _env_file=None,
        razorpay_key_id="k1",
        razorpay_key_secret="s3cret",
        use_payment_stubs=False,
    )

    assert isinstance(build_gateway(stub_settings), StubGateway)
    assert isinstance(build_gateway(real_settings), RazorpayGateway)

# Fin del archivo backend/tests/modules/payments/test_razorpay_gateway.py
