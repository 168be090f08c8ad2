# -*- coding: utf-8 -*-
"""
backend/app/modules/registrations/routes/status_routes.py

GET /registrations/status: el cliente consulta si el estudiante ya tiene
una inscripción pagada antes de mostrar el botón de pago.

Autor: Campus Connect
Fecha: 2026-10-08
"""

from __future__ import annotations

from fastapi import APIRouter, Query

from app.modules.payments.dependencies import ReconciliationServiceDep
from app.modules.payments.errors import ReconciliationError
from app.modules.registrations.schemas import RegistrationStatusOut

router = APIRouter(prefix="/registrations", tags=["registrations"])


@router.get("/status", response_model=RegistrationStatusOut)
async def registration_status(
    service: ReconciliationServiceDep,
    student_id: int = Query(gt=0),
    event_id: int = Query(gt=0),
    subevent_id: int = Query(gt=0),
) -> RegistrationStatusOut:
    try:
        registered = await service.is_registered(student_id, event_id, subevent_id)
    except ReconciliationError as e:
        raise e.to_http_exception() from e

    return RegistrationStatusOut(
        student_id=student_id,
        event_id=event_id,
        subevent_id=subevent_id,
        is_registered=registered,
    )


__all__ = ["router"]
