# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/gateways/stub_gateway.py

Gateway en memoria para desarrollo y pruebas (USE_PAYMENT_STUBS=true).

No realiza llamadas de red. Registra cada llamada en `calls` para que las
pruebas puedan verificar si el gateway fue contactado.

Autor: Campus Connect
Fecha: 2026-10-06
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from typing import Iterable, Mapping, Optional

from app.modules.payments.errors import GatewayUnavailable
from .base import GatewayOrder, PaymentGateway

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StubOrderCall:
    amount: int
    currency: str
    receipt: str
    notes: dict


class StubGateway(PaymentGateway):
    name = "stub"

    def __init__(
        self,
        key_id: str = "rzp_test_stub",
        *,
        order_ids: Optional[Iterable[str]] = None,
        unavailable: bool = False,
    ) -> None:
        self.key_id = key_id
        self._order_ids = list(order_ids or [])
        self.unavailable = unavailable
        self.calls: list[StubOrderCall] = []

    def _next_order_id(self) -> str:
        if self._order_ids:
            return self._order_ids.pop(0)
        return f"order_{uuid.uuid4().hex[:14]}"

    async def create_order(
        self,
        amount_minor_units: int,
        currency: str,
        receipt: str,
        notes: Optional[Mapping[str, str]] = None,
    ) -> GatewayOrder:
        self.calls.append(
            StubOrderCall(
                amount=amount_minor_units,
                currency=currency,
                receipt=receipt,
                notes=dict(notes or {}),
            )
        )
        if self.unavailable:
            raise GatewayUnavailable("Stub gateway configured as unavailable")

        order = GatewayOrder(
            order_id=self._next_order_id(),
            amount=amount_minor_units,
            currency=currency,
            key=self.key_id,
        )
        logger.debug("stub_order_created order_id=%s amount=%s", order.order_id, order.amount)
        return order


__all__ = ["StubGateway", "StubOrderCall"]

# Fin del archivo backend/app/modules/payments/gateways/stub_gateway.py
