# -*- coding: utf-8 -*-
"""
backend/app/modules/registrations/schemas/registration_schemas.py

Esquemas Pydantic de salida para inscripciones.

Autor: Campus Connect
Fecha: 2026-10-04
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from app.modules.registrations.enums import PaymentStatus


class RegistrationOut(BaseModel):
    """Inscripción persistida."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    student_id: int
    event_id: int
    subevent_id: int
    student_name: str
    student_email: str
    fee: int = Field(description="Monto cobrado en unidades menores.")
    payment_status: PaymentStatus
    gateway_order_id: Optional[str] = None
    gateway_payment_id: Optional[str] = None
    attendance: bool = False
    rank: Optional[int] = None
    registration_date: datetime


class RegistrationStatusOut(BaseModel):
    """Respuesta de GET /registrations/status."""

    student_id: int
    event_id: int
    subevent_id: int
    is_registered: bool


__all__ = ["RegistrationOut", "RegistrationStatusOut"]

# Fin del archivo backend/app/modules/registrations/schemas/registration_schemas.py
