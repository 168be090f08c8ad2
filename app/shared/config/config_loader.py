# -*- coding: utf-8 -*-
"""
backend/app/shared/config/config_loader.py

Selecciona la clase de settings por PYTHON_ENV y la valida una sola vez
por proceso. En producción además exige la pasarela real de Razorpay:
sin stubs y con RAZORPAY_KEY_SECRET, porque sin secreto no hay forma de
verificar la firma de checkout.

Autor: Campus Connect
Fecha: 2026-10-02
"""

from functools import lru_cache
import os
from typing import Dict, Type

from .settings_base import BaseAppSettings
from .settings_dev import DevSettings
from .settings_testing import EnvTestingSettings
from .settings_prod import ProdSettings
from .settings_payments import PaymentsSettings, get_payments_settings

_SETTINGS_BY_ENV: Dict[str, Type[BaseAppSettings]] = {
    "production": ProdSettings,
    "test": EnvTestingSettings,
    "development": DevSettings,
}


def _require_live_gateway(payments: PaymentsSettings) -> None:
    if payments.use_payment_stubs:
        raise ValueError("USE_PAYMENT_STUBS no está permitido en producción")
    if not payments.razorpay_key_secret.get_secret_value():
        raise ValueError("RAZORPAY_KEY_SECRET es requerido en producción")


@lru_cache(maxsize=1)
def get_settings() -> BaseAppSettings:
    """Settings del entorno actual; un PYTHON_ENV desconocido cae en desarrollo."""
    env = os.getenv("PYTHON_ENV", "development").lower()
    settings = _SETTINGS_BY_ENV.get(env, DevSettings)()

    settings._security_and_payments_checks()
    if settings.is_prod:
        _require_live_gateway(get_payments_settings())

    return settings


__all__ = ["get_settings"]
# Fin del archivo backend/app/shared/config/config_loader.py
