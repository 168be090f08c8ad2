# -*- coding: utf-8 -*-
"""
backend/app/modules/registrations/enums/payment_status_enum.py

Estado de pago de una inscripción.

Solo `paid` participa en la restricción de unicidad por
(student_id, event_id, subevent_id).

Autor: Campus Connect
Fecha: 2026-10-03
"""

from enum import StrEnum


class PaymentStatus(StrEnum):
    PENDING = "pending"
    PAID = "paid"
    FAILED = "failed"

    __db_enum_name__ = "payment_status_enum"


__all__ = ["PaymentStatus"]
