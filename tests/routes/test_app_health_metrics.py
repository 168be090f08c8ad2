# -*- coding: utf-8 -*-
"""
backend/tests/routes/test_app_health_metrics.py

Tests a nivel de aplicación: health check, /metrics, middleware de
excepciones JSON y cierre ordenado del lifespan.

Autor: Campus Connect
Fecha: 2026-10-14
"""

import pytest
from asgi_lifespan import LifespanManager
from httpx import ASGITransport, AsyncClient


@pytest.mark.asyncio
async def test_health_reports_database_and_gateway(async_client):
    resp = await async_client.get("/health")

    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == "ok"
    assert body["environment"] == "test"
    assert body["database"]["reachable"] is True
    assert body["payments"]["gateway"] == "stub"


@pytest.mark.asyncio
async def test_root(async_client):
    resp = await async_client.get("/")
    assert resp.json() == {"service": "Campus Connect Backend", "status": "active"}


@pytest.mark.asyncio
async def test_metrics_exposes_payment_counters(async_client):
    await async_client.post(
        "/payments/orders",
        json={
            "student_id": 42,
            "event_id": 7,
            "subevent_id": 3,
            "student_name": "Asha Rao",
            "student_email": "asha.rao@college.edu",
            "fee": 50000,
        },
    )

    resp = await async_client.get("/metrics")

    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/plain")
    assert "campus_payments_orders_total" in resp.text


class TestHttpMetrics:
    @pytest.fixture
    def test_settings(self, test_settings):
        return test_settings.model_copy(update={"http_metrics_enabled": True})

    @pytest.mark.asyncio
    async def test_http_metrics_use_route_templates(self, async_client, admin_headers):
        await async_client.get("/admin/events/7", headers=admin_headers)

        resp = await async_client.get("/metrics")

        assert 'route="/admin/events/{event_id}"' in resp.text
        assert 'route="/admin/events/7"' not in resp.text


@pytest.mark.asyncio
async def test_request_id_header_is_propagated(async_client):
    resp = await async_client.get("/health", headers={"X-Request-ID": "req-123"})
    assert resp.headers["x-request-id"] == "req-123"


@pytest.mark.asyncio
async def test_unhandled_exception_returns_json_500(app):
    @app.get("/boom")
    async def boom():
        raise RuntimeError("kaboom")

    async with LifespanManager(app):
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://testserver") as client:
            resp = await client.get("/boom", headers={"X-Request-ID": "req-500"})

    assert resp.status_code == 500
    detail = resp.json()["detail"]
    assert detail["error_code"] == "internal_error"
    assert detail["retryable"] is True
    assert detail["request_id"] == "req-500"
    assert "kaboom" not in resp.text


@pytest.mark.asyncio
async def test_injected_gateway_is_not_closed_on_shutdown(app, gateway, monkeypatch):
    closed = []

    async def fake_aclose():
        closed.append(True)

    monkeypatch.setattr(gateway, "aclose", fake_aclose)

    async with LifespanManager(app):
        assert app.state.gateway is gateway

    assert closed == []

# Fin del archivo backend/tests/routes/test_app_health_metrics.py
