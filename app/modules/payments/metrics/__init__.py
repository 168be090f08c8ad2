# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/metrics/__init__.py

Métricas Prometheus del módulo de pagos.
"""

from .reconciliation_metrics import (
    payments_checkouts_abandoned_total,
    payments_confirmations_total,
    payments_order_latency_seconds,
    payments_orders_total,
    payments_signature_rejections_total,
)

__all__ = [
    "payments_checkouts_abandoned_total",
    "payments_confirmations_total",
    "payments_order_latency_seconds",
    "payments_orders_total",
    "payments_signature_rejections_total",
]
