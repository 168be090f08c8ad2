# -*- coding: utf-8 -*-
"""
backend/app/modules/registrations/enums/attempt_state_enum.py

Estados registrados en la tabla de auditoría payment_attempts.

A diferencia de CheckoutState, incluye REJECTED: confirmaciones con firma
inválida o datos inconsistentes que nunca producen una inscripción.

Autor: Campus Connect
Fecha: 2026-10-03
"""

from enum import StrEnum


class AttemptState(StrEnum):
    ORDER_CREATED = "order_created"
    CONFIRMED = "confirmed"
    ABANDONED = "abandoned"
    REJECTED = "rejected"

    __db_enum_name__ = "payment_attempt_state_enum"


__all__ = ["AttemptState"]
