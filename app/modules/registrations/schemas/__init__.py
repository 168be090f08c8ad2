# -*- coding: utf-8 -*-
"""
backend/app/modules/registrations/schemas/__init__.py
"""

from .registration_schemas import RegistrationOut, RegistrationStatusOut

__all__ = ["RegistrationOut", "RegistrationStatusOut"]
