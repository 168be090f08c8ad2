# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/gateways/base.py

Interfaz estrecha hacia el gateway de pagos.

El servidor solo necesita crear órdenes; la captura del pago ocurre en el
widget del cliente y vuelve firmada (ver services/signature.py).

Autor: Campus Connect
Fecha: 2026-10-06
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Mapping, Optional


@dataclass(frozen=True)
class GatewayOrder:
    """Orden creada en el gateway (efímera: no se persiste como inscripción)."""

    order_id: str
    amount: int
    currency: str
    key: str


class PaymentGateway(ABC):
    """Cliente del gateway de pagos."""

    name: str = "gateway"

    @abstractmethod
    async def create_order(
        self,
        amount_minor_units: int,
        currency: str,
        receipt: str,
        notes: Optional[Mapping[str, str]] = None,
    ) -> GatewayOrder:
        """
        Crea una orden por `amount_minor_units` en `currency`.

        Raises:
            GatewayUnavailable: error de red, timeout o respuesta inválida.
        """

    async def aclose(self) -> None:
        """Libera recursos (clientes HTTP). Por defecto no hace nada."""
        return None


__all__ = ["GatewayOrder", "PaymentGateway"]

# Fin del archivo backend/app/modules/payments/gateways/base.py
