# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/metrics/reconciliation_metrics.py

Colectores Prometheus del flujo de inscripción + pago.

Registra en el REGISTRY global (el mismo que expone /metrics):
- Órdenes creadas / fallidas en el gateway
- Confirmaciones por outcome (confirmed, already_registered, ...)
- Firmas rechazadas (posible manipulación)
- Checkouts abandonados
- Latencia de creación de órdenes

Autor: Campus Connect
Fecha: 2026-10-06
"""
from prometheus_client import Counter, Histogram

NAMESPACE = "campus"
SUBSYSTEM = "payments"

payments_orders_total = Counter(
    f"{NAMESPACE}_{SUBSYSTEM}_orders_total",
    "Órdenes de pago solicitadas al gateway por resultado",
    labelnames=("gateway", "result"),  # created|gateway_unavailable|already_registered|validation_error
)

payments_confirmations_total = Counter(
    f"{NAMESPACE}_{SUBSYSTEM}_confirmations_total",
    "Confirmaciones de pago procesadas por outcome",
    labelnames=("outcome",),  # confirmed|<ReconciliationErrorKind>
)

payments_signature_rejections_total = Counter(
    f"{NAMESPACE}_{SUBSYSTEM}_signature_rejections_total",
    "Confirmaciones rechazadas por firma inválida",
)

payments_checkouts_abandoned_total = Counter(
    f"{NAMESPACE}_{SUBSYSTEM}_checkouts_abandoned_total",
    "Checkouts cancelados por el usuario",
)

payments_order_latency_seconds = Histogram(
    f"{NAMESPACE}_{SUBSYSTEM}_order_latency_seconds",
    "Latencia de creación de órdenes en el gateway (segundos)",
    labelnames=("gateway",),
)


__all__ = [
    "payments_orders_total",
    "payments_confirmations_total",
    "payments_signature_rejections_total",
    "payments_checkouts_abandoned_total",
    "payments_order_latency_seconds",
]

# Fin del archivo backend/app/modules/payments/metrics/reconciliation_metrics.py
