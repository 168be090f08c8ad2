# -*- coding: utf-8 -*-
"""
backend/app/modules/events/errors.py

Errores de dominio del catálogo de eventos y de la gestión administrativa
de inscripciones (asistencia, ranking).

Los ruteadores traducen estas excepciones a respuestas HTTP sin que los
servicios dependan de FastAPI.

Autor: Campus Connect
Fecha: 2026-10-03
"""

from __future__ import annotations

from typing import Any, Optional

from fastapi import HTTPException


class EventsError(Exception):
    """Error base para el módulo Events."""

    error_code = "events_error"
    http_status = 400

    def to_dict(self) -> dict[str, Any]:
        return {
            "error_code": self.error_code,
            "message": str(self),
            "retryable": False,
        }

    def to_http_exception(self) -> HTTPException:
        return HTTPException(status_code=self.http_status, detail=self.to_dict())


class EventNotFound(EventsError):
    """El evento solicitado no existe."""

    error_code = "event_not_found"
    http_status = 404

    def __init__(self, event_id: int) -> None:
        self.event_id = event_id
        super().__init__(f"Event {event_id} not found")


class SubeventNotFound(EventsError):
    """El sub-evento no existe o no pertenece al evento indicado."""

    error_code = "subevent_not_found"
    http_status = 404

    def __init__(self, subevent_id: int, event_id: Optional[int] = None) -> None:
        self.subevent_id = subevent_id
        self.event_id = event_id
        if event_id is None:
            message = f"Subevent {subevent_id} not found"
        else:
            message = f"Subevent {subevent_id} not found in event {event_id}"
        super().__init__(message)


class RegistrationNotFound(EventsError):
    error_code = "registration_not_found"
    http_status = 404

    def __init__(self, registration_id: int) -> None:
        self.registration_id = registration_id
        super().__init__(f"Registration {registration_id} not found")


class RegistrationNotPaid(EventsError):
    """
    La inscripción no está pagada: no se puede marcar asistencia
    ni asignar ranking.
    """

    error_code = "registration_not_paid"
    http_status = 409

    def __init__(self, registration_id: int, payment_status: str) -> None:
        self.registration_id = registration_id
        self.payment_status = payment_status
        super().__init__(
            f"Registration {registration_id} has payment_status={payment_status}; "
            "only paid registrations can be marked"
        )


class InvalidAdminInput(EventsError):
    """Datos administrativos inconsistentes (fechas, rank, etc.)."""

    error_code = "validation_error"
    http_status = 422

    def __init__(self, message: str) -> None:
        super().__init__(message)


__all__ = [
    "EventsError",
    "EventNotFound",
    "SubeventNotFound",
    "RegistrationNotFound",
    "RegistrationNotPaid",
    "InvalidAdminInput",
]

# Fin del archivo backend/app/modules/events/errors.py
