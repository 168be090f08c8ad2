# -*- coding: utf-8 -*-
"""
backend/app/shared/config/__init__.py

Punto único de acceso a la configuración:
    from app.shared.config import get_settings, get_payments_settings
"""

from .config_loader import get_settings
from .logging_config import setup_logging
from .settings_base import BaseAppSettings
from .settings_payments import PaymentsSettings, get_payments_settings

__all__ = [
    "BaseAppSettings",
    "PaymentsSettings",
    "get_settings",
    "get_payments_settings",
    "setup_logging",
]
# Fin del archivo backend/app/shared/config/__init__.py
