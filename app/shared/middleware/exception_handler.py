# -*- coding: utf-8 -*-
"""
backend/app/shared/middleware/exception_handler.py

Middleware ASGI para capturar excepciones no manejadas y responder JSON.

Garantiza que cualquier error 500 devuelva JSON estructurado en lugar de
text/plain, con el mismo formato de error que el resto de la API:
{"detail": {"error_code", "message", "retryable", "request_id"}}.

Autor: Campus Connect
Fecha: 2026-10-09
"""

from __future__ import annotations

import logging
import uuid
from typing import Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

logger = logging.getLogger(__name__)

# Headers de request ID (proxy / balanceador)
REQUEST_ID_HEADERS = ["x-request-id", "x-correlation-id"]


def get_request_id(request: Request) -> str:
    """Extrae request_id de headers o genera uno nuevo."""
    for header in REQUEST_ID_HEADERS:
        value = request.headers.get(header)
        if value:
            return value
    return uuid.uuid4().hex[:16]


class JSONExceptionMiddleware(BaseHTTPMiddleware):
    """
    Middleware que captura excepciones no manejadas y devuelve JSON.

    Garantiza:
    - Content-Type: application/json (nunca text/plain)
    - error_code estable para la UI
    - request_id para correlación de logs (también en X-Request-ID)
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = get_request_id(request)
        request.state.request_id = request_id

        try:
            response = await call_next(request)
        except Exception as e:
            logger.exception(
                "unhandled_exception request_id=%s method=%s path=%s error=%r",
                request_id,
                request.method,
                request.url.path,
                e,
            )
            return JSONResponse(
                status_code=500,
                content={
                    "detail": {
                        "error_code": "internal_error",
                        "message": "Internal server error",
                        "retryable": True,
                        "request_id": request_id,
                    }
                },
                headers={"X-Request-ID": request_id},
            )

        response.headers.setdefault("X-Request-ID", request_id)
        return response


__all__ = ["JSONExceptionMiddleware", "get_request_id"]
