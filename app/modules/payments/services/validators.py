# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/services/validators.py

Validadores de negocio para el flujo de inscripción + pago.

Se ejecutan antes de cualquier llamada al gateway o al almacenamiento.

Autor: Campus Connect
Fecha: 2026-10-06
"""

from __future__ import annotations

from app.modules.payments.errors import ValidationError
from app.modules.payments.schemas import PaymentConfirmation, RegistrationIntent


def validate_registration_intent(
    intent: RegistrationIntent,
    *,
    max_amount_minor: int | None = None,
) -> None:
    """Identidad completa y cuota positiva (y acotada, si se indica)."""
    for field in ("student_id", "event_id", "subevent_id"):
        if getattr(intent, field) <= 0:
            raise ValidationError(f"{field} must be a positive integer", field=field)

    if not intent.student_name.strip():
        raise ValidationError("student_name is required", field="student_name")

    if not str(intent.student_email).strip():
        raise ValidationError("student_email is required", field="student_email")

    if intent.fee <= 0:
        raise ValidationError("fee must be greater than 0", field="fee")

    if max_amount_minor is not None and intent.fee > max_amount_minor:
        raise ValidationError(
            f"fee exceeds the maximum allowed amount ({max_amount_minor})",
            field="fee",
        )


def validate_confirmation(confirmation: PaymentConfirmation) -> None:
    for field in ("order_id", "payment_id", "signature"):
        if not getattr(confirmation, field).strip():
            raise ValidationError(f"{field} is required", field=field)


__all__ = ["validate_registration_intent", "validate_confirmation"]

# Fin del archivo backend/app/modules/payments/services/validators.py
