# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/gateways/razorpay_gateway.py

Cliente de la API de órdenes de Razorpay sobre httpx.

    POST {api_base}/orders
    Authorization: Basic key_id:key_secret
    {"amount": <minor units>, "currency": "INR", "receipt": "...", "notes": {...}}
    → {"id": "order_...", "amount": ..., "currency": "INR", "status": "created", ...}

Errores de transporte, timeouts, respuestas no-2xx, JSON inválido o una
respuesta sin `id` se reportan como GatewayUnavailable.

Autor: Campus Connect
Fecha: 2026-10-06
"""

from __future__ import annotations

import logging
from typing import Mapping, Optional

import httpx

from app.modules.payments.errors import GatewayUnavailable
from .base import GatewayOrder, PaymentGateway

logger = logging.getLogger(__name__)

# Límites del cliente HTTP compartido por proceso
RAZORPAY_HTTP_LIMITS = httpx.Limits(
    max_keepalive_connections=10,
    max_connections=20,
    keepalive_expiry=30.0,
)


class RazorpayGateway(PaymentGateway):
    name = "razorpay"

    def __init__(
        self,
        *,
        key_id: str,
        key_secret: str,
        base_url: str = "https://api.razorpay.com/v1",
        timeout_seconds: float = 10.0,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.key_id = key_id
        self._auth = httpx.BasicAuth(key_id, key_secret)
        self._orders_url = f"{base_url.rstrip('/')}/orders"
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            timeout=httpx.Timeout(timeout_seconds, connect=min(5.0, timeout_seconds)),
            limits=RAZORPAY_HTTP_LIMITS,
        )

    async def create_order(
        self,
        amount_minor_units: int,
        currency: str,
        receipt: str,
        notes: Optional[Mapping[str, str]] = None,
    ) -> GatewayOrder:
        payload = {
            "amount": amount_minor_units,
            "currency": currency,
            "receipt": receipt,
            "notes": dict(notes or {}),
        }

        try:
            response = await self._client.post(self._orders_url, json=payload, auth=self._auth)
        except httpx.TimeoutException as e:
            logger.warning("razorpay_order_timeout receipt=%s error=%r", receipt, e)
            raise GatewayUnavailable("Payment gateway timed out") from e
        except httpx.HTTPError as e:
            logger.warning("razorpay_order_transport_error receipt=%s error=%r", receipt, e)
            raise GatewayUnavailable("Payment gateway unreachable") from e

        if response.status_code >= 400:
            logger.error(
                "razorpay_order_rejected receipt=%s status=%s body=%s",
                receipt,
                response.status_code,
                response.text[:500],
            )
            raise GatewayUnavailable(
                "Payment gateway rejected the order request",
                status_code=response.status_code,
            )

        try:
            data = response.json()
        except ValueError as e:
            logger.error("razorpay_order_invalid_json receipt=%s", receipt)
            raise GatewayUnavailable("Payment gateway returned an invalid response") from e

        order_id = data.get("id") if isinstance(data, dict) else None
        if not order_id:
            logger.error("razorpay_order_missing_id receipt=%s", receipt)
            raise GatewayUnavailable("Payment gateway returned an order without id")

        try:
            amount = int(data.get("amount", amount_minor_units))
        except (TypeError, ValueError) as e:
            logger.error("razorpay_order_invalid_amount receipt=%s amount=%r", receipt, data.get("amount"))
            raise GatewayUnavailable("Payment gateway returned an invalid amount") from e

        order = GatewayOrder(
            order_id=str(order_id),
            amount=amount,
            currency=str(data.get("currency", currency)),
            key=self.key_id,
        )
        logger.info(
            "razorpay_order_created order_id=%s amount=%s currency=%s receipt=%s",
            order.order_id,
            order.amount,
            order.currency,
            receipt,
        )
        return order

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()


__all__ = ["RazorpayGateway"]

# Fin del archivo backend/app/modules/payments/gateways/razorpay_gateway.py
