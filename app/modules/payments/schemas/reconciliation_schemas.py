# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/schemas/reconciliation_schemas.py

Esquemas Pydantic del flujo de inscripción + pago.

- RegistrationIntent: quién se inscribe, a qué y por cuánto (unidades menores).
- PaymentConfirmation: respuesta firmada del widget del gateway.
- OrderCreatedResponse: datos que el cliente necesita para abrir el widget.

Las reglas de negocio (fee > 0, identidad completa, coherencia con el
catálogo) viven en services/validators.py; aquí solo se tipan los datos.

Autor: Campus Connect
Fecha: 2026-10-06
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, EmailStr, Field

from app.modules.registrations.enums import CheckoutState


class RegistrationIntent(BaseModel):
    student_id: int = Field(description="ID del estudiante que se inscribe.")
    event_id: int
    subevent_id: int
    student_name: str
    student_email: EmailStr
    fee: int = Field(description="Cuota en unidades menores (paise para INR).")


class PaymentConfirmation(BaseModel):
    order_id: str = Field(min_length=1, max_length=64)
    payment_id: str = Field(min_length=1, max_length=64)
    signature: str = Field(min_length=1, max_length=256)
    registration_intent: RegistrationIntent


class OrderCreatedResponse(BaseModel):
    order_id: str
    key: str = Field(description="Key id público del gateway para el widget.")
    amount: int
    currency: str


class CancelCheckoutRequest(BaseModel):
    reason: Optional[str] = Field(default=None, max_length=500)


class CancelCheckoutResponse(BaseModel):
    order_id: str
    status: CheckoutState = CheckoutState.ABANDONED


__all__ = [
    "RegistrationIntent",
    "PaymentConfirmation",
    "OrderCreatedResponse",
    "CancelCheckoutRequest",
    "CancelCheckoutResponse",
]

# Fin del archivo backend/app/modules/payments/schemas/reconciliation_schemas.py
