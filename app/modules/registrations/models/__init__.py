# -*- coding: utf-8 -*-
"""
backend/app/modules/registrations/models/__init__.py

Modelos ORM del módulo Registrations.
"""

from .registration_models import Registration
from .payment_attempt_models import PaymentAttempt

__all__ = ["Registration", "PaymentAttempt"]
