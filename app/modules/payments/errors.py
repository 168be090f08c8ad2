# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/errors.py

Errores de dominio del flujo de inscripción + conciliación de pagos.

Cada error lleva un `kind` (ReconciliationErrorKind) que determina el
código HTTP, si el cliente puede reintentar y el `error_code` estable que
consume la UI. Los servicios no dependen de FastAPI; las rutas traducen
estas excepciones con `to_http_exception()`.

| kind                | HTTP | retryable |
|---------------------|------|-----------|
| validation_error    | 422  | no        |
| already_registered  | 409  | no        |
| invalid_signature   | 400  | no        |
| gateway_unavailable | 503  | sí        |
| storage_error       | 500  | sí        |

Autor: Campus Connect
Fecha: 2026-10-06
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any, Optional

from fastapi import HTTPException


class ReconciliationErrorKind(StrEnum):
    VALIDATION_ERROR = "validation_error"
    ALREADY_REGISTERED = "already_registered"
    INVALID_SIGNATURE = "invalid_signature"
    GATEWAY_UNAVAILABLE = "gateway_unavailable"
    STORAGE_ERROR = "storage_error"

    @property
    def http_status(self) -> int:
        return _HTTP_STATUS[self]

    @property
    def retryable(self) -> bool:
        return self in (
            ReconciliationErrorKind.GATEWAY_UNAVAILABLE,
            ReconciliationErrorKind.STORAGE_ERROR,
        )


_HTTP_STATUS: dict[ReconciliationErrorKind, int] = {
    ReconciliationErrorKind.VALIDATION_ERROR: 422,
    ReconciliationErrorKind.ALREADY_REGISTERED: 409,
    ReconciliationErrorKind.INVALID_SIGNATURE: 400,
    ReconciliationErrorKind.GATEWAY_UNAVAILABLE: 503,
    ReconciliationErrorKind.STORAGE_ERROR: 500,
}


class ReconciliationError(Exception):
    """Error base del flujo de pagos."""

    kind: ReconciliationErrorKind = ReconciliationErrorKind.STORAGE_ERROR

    def __init__(self, message: str, **fields: Any) -> None:
        super().__init__(message)
        self.message = message
        self.fields = fields

    @property
    def retryable(self) -> bool:
        return self.kind.retryable

    def to_dict(self) -> dict[str, Any]:
        return {
            "error_code": self.kind.value,
            "message": self.message,
            "retryable": self.retryable,
            **self.fields,
        }

    def to_http_exception(self) -> HTTPException:
        headers = {"Retry-After": "5"} if self.retryable else None
        return HTTPException(
            status_code=self.kind.http_status,
            detail=self.to_dict(),
            headers=headers,
        )


class ValidationError(ReconciliationError):
    """Intento de inscripción o confirmación con datos inválidos."""

    kind = ReconciliationErrorKind.VALIDATION_ERROR

    def __init__(self, message: str, *, field: Optional[str] = None) -> None:
        if field is None:
            super().__init__(message)
        else:
            super().__init__(message, field=field)
        self.field = field


class AlreadyRegistered(ReconciliationError):
    """Ya existe una inscripción pagada para (student, event, subevent)."""

    kind = ReconciliationErrorKind.ALREADY_REGISTERED

    def __init__(self, *, student_id: int, event_id: int, subevent_id: int) -> None:
        super().__init__(
            "Student is already registered for this sub-event",
            student_id=student_id,
            event_id=event_id,
            subevent_id=subevent_id,
        )
        self.student_id = student_id
        self.event_id = event_id
        self.subevent_id = subevent_id


class InvalidSignature(ReconciliationError):
    """La firma de la confirmación no corresponde a (order_id, payment_id)."""

    kind = ReconciliationErrorKind.INVALID_SIGNATURE

    def __init__(self, *, order_id: str, payment_id: str) -> None:
        super().__init__(
            "Payment signature verification failed",
            order_id=order_id,
        )
        self.order_id = order_id
        self.payment_id = payment_id


class GatewayUnavailable(ReconciliationError):
    """El gateway no pudo crear la orden (red, timeout, respuesta inválida)."""

    kind = ReconciliationErrorKind.GATEWAY_UNAVAILABLE

    def __init__(self, message: str = "Payment gateway unavailable", *, status_code: Optional[int] = None) -> None:
        if status_code is None:
            super().__init__(message)
        else:
            super().__init__(message, gateway_status=status_code)
        self.status_code = status_code


class StorageError(ReconciliationError):
    """Fallo de almacenamiento no relacionado con unicidad."""

    kind = ReconciliationErrorKind.STORAGE_ERROR

    def __init__(self, message: str = "Registration storage failed") -> None:
        super().__init__(message)


__all__ = [
    "ReconciliationErrorKind",
    "ReconciliationError",
    "ValidationError",
    "AlreadyRegistered",
    "InvalidSignature",
    "GatewayUnavailable",
    "StorageError",
]

# Fin del archivo backend/app/modules/payments/errors.py
