# -*- coding: utf-8 -*-
"""
backend/app/shared/utils/__init__.py

Exportación de utilidades comunes.

Autor: Campus Connect
Fecha: 2026-10-09
"""

from .json_response import (
    UTF8JSONResponse,
    http_exception_handler,
    json_response_utf8,
    request_validation_handler,
)

__all__ = [
    "UTF8JSONResponse",
    "http_exception_handler",
    "json_response_utf8",
    "request_validation_handler",
]
