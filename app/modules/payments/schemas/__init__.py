# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/schemas/__init__.py

Superficie de exportación de esquemas del módulo Payments.
"""

from .reconciliation_schemas import (
    CancelCheckoutRequest,
    CancelCheckoutResponse,
    OrderCreatedResponse,
    PaymentConfirmation,
    RegistrationIntent,
)

__all__ = [
    "CancelCheckoutRequest",
    "CancelCheckoutResponse",
    "OrderCreatedResponse",
    "PaymentConfirmation",
    "RegistrationIntent",
]
