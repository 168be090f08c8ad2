# -*- coding: utf-8 -*-
"""
backend/app/modules/registrations/enums/__init__.py

Superficie de exportación de enums del módulo Registrations.

Autor: Campus Connect
Fecha: 2026-10-03
"""

from .attempt_state_enum import AttemptState
from .checkout_state_enum import CheckoutState
from .payment_status_enum import PaymentStatus

__all__ = [
    "AttemptState",
    "CheckoutState",
    "PaymentStatus",
]

# Fin del archivo backend/app/modules/registrations/enums/__init__.py
