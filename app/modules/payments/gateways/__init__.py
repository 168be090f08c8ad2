# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/gateways/__init__.py

Clientes del gateway de pagos y selección según configuración.

Autor: Campus Connect
Fecha: 2026-10-06
"""

from __future__ import annotations

import logging

from app.shared.config.settings_payments import PaymentsSettings

from .base import GatewayOrder, PaymentGateway
from .razorpay_gateway import RazorpayGateway
from .stub_gateway import StubGateway

logger = logging.getLogger(__name__)


def build_gateway(settings: PaymentsSettings) -> PaymentGateway:
    """Construye el gateway real o el stub según USE_PAYMENT_STUBS."""
    if settings.use_payment_stubs:
        logger.warning("payment_gateway_stub_enabled key_id=%s", settings.razorpay_key_id)
        return StubGateway(key_id=settings.razorpay_key_id)

    return RazorpayGateway(
        key_id=settings.razorpay_key_id,
        key_secret=settings.razorpay_key_secret.get_secret_value(),
        base_url=settings.razorpay_api_base_url,
        timeout_seconds=settings.gateway_timeout_seconds,
    )


__all__ = [
    "GatewayOrder",
    "PaymentGateway",
    "RazorpayGateway",
    "StubGateway",
    "build_gateway",
]
