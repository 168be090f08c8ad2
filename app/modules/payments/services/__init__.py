# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/services/__init__.py

Superficie de exportación de servicios del módulo Payments.

Incluye:
- PaymentReconciliationService
- compute_signature / verify_signature
- validate_registration_intent / validate_confirmation

Autor: Campus Connect
Fecha: 2026-10-07
"""

from .signature import compute_signature, verify_signature
from .validators import validate_confirmation, validate_registration_intent
from .reconciliation_service import PaymentReconciliationService

__all__ = [
    "PaymentReconciliationService",
    "compute_signature",
    "verify_signature",
    "validate_confirmation",
    "validate_registration_intent",
]

# Fin del archivo backend/app/modules/payments/services/__init__.py
