# -*- coding: utf-8 -*-
"""
backend/app/shared/config/settings_payments.py

Configuración de la pasarela de pagos (Razorpay) para Campus Connect.

Descripción:
    Centraliza credenciales del gateway, moneda, límites de monto,
    timeouts HTTP y el interruptor de stubs para desarrollo/pruebas.

Autor: Campus Connect
Fecha: 02/10/2026
"""

from __future__ import annotations

from typing import Optional

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class PaymentsSettings(BaseSettings):
    """Configuración del sistema de pagos."""

    # =========================================================================
    # RAZORPAY
    # =========================================================================

    razorpay_key_id: str = Field(
        default="rzp_test_dummy",
        description="Key id público (se entrega al widget del cliente)",
    )

    razorpay_key_secret: SecretStr = Field(
        default=SecretStr(""),
        description="Key secret; firma HMAC de las confirmaciones y Basic auth de la API",
    )

    razorpay_api_base_url: str = Field(
        default="https://api.razorpay.com/v1",
        description="URL base de la API REST del gateway",
    )

    payments_currency: str = Field(
        default="INR",
        description="Moneda ISO 4217 de los cobros (montos en unidades menores)",
    )

    # =========================================================================
    # LÍMITES Y TIMEOUTS
    # =========================================================================

    max_payment_amount_minor: int = Field(
        default=10_000_000,
        description="Monto máximo de una inscripción en unidades menores (100,000 INR)",
    )

    gateway_timeout_seconds: float = Field(
        default=10.0,
        description="Timeout total de las llamadas HTTP al gateway",
    )

    # =========================================================================
    # STUBS
    # =========================================================================

    use_payment_stubs: bool = Field(
        default=False,
        description="Usa un gateway stub en memoria (solo desarrollo/pruebas)",
    )

    @field_validator("payments_currency", mode="before")
    @classmethod
    def _normalize_currency(cls, v: Optional[str]) -> str:
        return (v or "INR").strip().upper()

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


# Singleton global
_payments_settings: Optional[PaymentsSettings] = None


def get_payments_settings() -> PaymentsSettings:
    """
    Obtiene la instancia global de configuración de pagos.

    Returns:
        PaymentsSettings: Configuración de pagos
    """
    global _payments_settings
    if _payments_settings is None:
        _payments_settings = PaymentsSettings()
    return _payments_settings


def reset_payments_settings() -> None:
    """Descarta el singleton (útil para tests que cambian el entorno)."""
    global _payments_settings
    _payments_settings = None


__all__ = [
    "PaymentsSettings",
    "get_payments_settings",
    "reset_payments_settings",
]
# Fin del archivo backend/app/shared/config/settings_payments.py
