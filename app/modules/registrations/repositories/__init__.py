# -*- coding: utf-8 -*-
"""
backend/app/modules/registrations/repositories/__init__.py
"""

from .registration_repository import RegistrationRepository
from .payment_attempt_repository import PaymentAttemptRepository

__all__ = ["RegistrationRepository", "PaymentAttemptRepository"]
