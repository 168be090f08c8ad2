# -*- coding: utf-8 -*-
"""
backend/app/shared/utils/json_response.py

Respuestas JSON con charset UTF-8 explícito y handlers de error comunes.

Este módulo proporciona:
1. UTF8JSONResponse: clase para usar como default_response_class en FastAPI
2. http_exception_handler: HTTPException → JSON UTF-8 (conserva headers)
3. request_validation_handler: errores de validación de entrada con el
   mismo formato que los errores de dominio (error_code=validation_error)

Autor: Campus Connect
Fecha: 2026-10-09
"""

from typing import Any, Dict, Optional

from fastapi import HTTPException, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse


class UTF8JSONResponse(JSONResponse):
    """
    JSONResponse con Content-Type: application/json; charset=utf-8.

    Evita mojibake en nombres de estudiantes o eventos con acentos cuando
    el cliente/proxy no asume UTF-8.
    """
    media_type = "application/json; charset=utf-8"


def json_response_utf8(
    content: Any,
    status_code: int = 200,
    headers: Optional[Dict[str, str]] = None,
) -> UTF8JSONResponse:
    return UTF8JSONResponse(
        content=content,
        status_code=status_code,
        headers=headers,
    )


async def http_exception_handler(request: Request, exc: HTTPException) -> UTF8JSONResponse:
    return json_response_utf8(
        content={"detail": exc.detail},
        status_code=exc.status_code,
        headers=getattr(exc, "headers", None),
    )


async def request_validation_handler(request: Request, exc: RequestValidationError) -> UTF8JSONResponse:
    """422 con el formato {"detail": {"error_code", "message", "retryable", "errors"}}."""
    errors = jsonable_encoder(exc.errors())
    first = errors[0] if errors else {}
    field = ".".join(str(p) for p in first.get("loc", ()) if p != "body") or None
    message = first.get("msg", "Invalid request")

    detail: Dict[str, Any] = {
        "error_code": "validation_error",
        "message": f"{field}: {message}" if field else message,
        "retryable": False,
        "errors": errors,
    }
    if field:
        detail["field"] = field
    return json_response_utf8(content={"detail": detail}, status_code=422)


__all__ = [
    "UTF8JSONResponse",
    "json_response_utf8",
    "http_exception_handler",
    "request_validation_handler",
]
