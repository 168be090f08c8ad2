# -*- coding: utf-8 -*-
"""
backend/app/observability/prom.py

Métricas HTTP y endpoint /metrics.

Las series de pagos (campus_payments_*) se definen en
app.modules.payments.metrics y se exponen por este mismo endpoint, ya que
comparten el registry global de prometheus_client. Con varios workers
uvicorn y PROMETHEUS_MULTIPROC_DIR definido, /metrics agrega los archivos
de todos los procesos.

Autor: Campus Connect
Fecha: 2026-10-09
"""
from __future__ import annotations

import os
from time import perf_counter
from typing import Optional

from fastapi import FastAPI
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
from starlette.routing import Match
from prometheus_client import (
    CollectorRegistry, multiprocess, generate_latest, CONTENT_TYPE_LATEST,
    Counter, Histogram,
)

HTTP_LABELS = ["method", "route", "status"]

campus_http_requests_total = Counter(
    "campus_http_requests_total",
    "HTTP requests by route template and status",
    HTTP_LABELS,
)
campus_http_request_seconds = Histogram(
    "campus_http_request_seconds",
    "HTTP request latency by route template (s)",
    HTTP_LABELS,
)


def route_template(request: Request) -> str:
    """/admin/events/{event_id} en lugar de /admin/events/7; 'unmatched' si no hay ruta."""
    for route in request.app.routes:
        match, _ = route.matches(request.scope)
        if match == Match.FULL:
            return getattr(route, "path", "unmatched")
    return "unmatched"


class HttpMetricsMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request, call_next):
        labels = (request.method, route_template(request))

        start = perf_counter()
        resp = await call_next(request)
        elapsed = perf_counter() - start

        campus_http_request_seconds.labels(*labels, str(resp.status_code)).observe(elapsed)
        campus_http_requests_total.labels(*labels, str(resp.status_code)).inc()
        return resp


def _multiprocess_registry() -> Optional[CollectorRegistry]:
    if not os.environ.get("PROMETHEUS_MULTIPROC_DIR"):
        return None
    registry = CollectorRegistry()
    multiprocess.MultiProcessCollector(registry)
    return registry


def setup_observability(app: FastAPI, *, http_metrics_enabled: bool = True, path: str = "/metrics") -> None:
    """Monta /metrics; el middleware HTTP es opcional (HTTP_METRICS_ENABLED)."""
    if http_metrics_enabled:
        app.add_middleware(HttpMetricsMiddleware)

    registry = _multiprocess_registry()

    @app.get(path, include_in_schema=False)
    def metrics():
        data = generate_latest(registry) if registry else generate_latest()
        return Response(content=data, media_type=CONTENT_TYPE_LATEST)


__all__ = ["setup_observability", "route_template"]

# Fin del archivo backend/app/observability/prom.py
