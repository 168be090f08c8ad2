# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/routes/checkout.py

Rutas del checkout de inscripciones.

Endpoints:
- POST /payments/orders                    → crea la orden en el gateway
- POST /payments/confirm                   → concilia la confirmación firmada
- POST /payments/orders/{order_id}/cancel  → el usuario abandonó el checkout

Los errores de dominio (ReconciliationError) se traducen a HTTP con
`to_http_exception()`: {"detail": {"error_code", "message", "retryable", ...}}.

Autor: Campus Connect
Fecha: 2026-10-08
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Body, Path, status

from app.modules.payments.dependencies import ReconciliationServiceDep
from app.modules.payments.errors import ReconciliationError
from app.modules.payments.schemas import (
    CancelCheckoutRequest,
    CancelCheckoutResponse,
    OrderCreatedResponse,
    PaymentConfirmation,
    RegistrationIntent,
)
from app.modules.registrations.schemas import RegistrationOut

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/payments",
    tags=["payments:checkout"],
)


@router.post(
    "/orders",
    response_model=OrderCreatedResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Crear orden de pago para una inscripción",
)
async def create_order(
    intent: RegistrationIntent,
    service: ReconciliationServiceDep,
) -> OrderCreatedResponse:
    try:
        order = await service.create_order(intent)
    except ReconciliationError as e:
        raise e.to_http_exception() from e

    return OrderCreatedResponse(
        order_id=order.order_id,
        key=order.key,
        amount=order.amount,
        currency=order.currency,
    )


@router.post(
    "/confirm",
    response_model=RegistrationOut,
    status_code=status.HTTP_201_CREATED,
    summary="Confirmar pago y registrar inscripción",
)
async def confirm_payment(
    confirmation: PaymentConfirmation,
    service: ReconciliationServiceDep,
) -> RegistrationOut:
    try:
        registration = await service.confirm_payment(confirmation)
    except ReconciliationError as e:
        raise e.to_http_exception() from e

    return RegistrationOut.model_validate(registration)


@router.post(
    "/orders/{order_id}/cancel",
    response_model=CancelCheckoutResponse,
    summary="Registrar checkout abandonado",
)
async def cancel_checkout(
    service: ReconciliationServiceDep,
    order_id: str = Path(min_length=1, max_length=64),
    body: Optional[CancelCheckoutRequest] = Body(default=None),
) -> CancelCheckoutResponse:
    try:
        state = await service.cancel(order_id, reason=body.reason if body else None)
    except ReconciliationError as e:
        raise e.to_http_exception() from e

    return CancelCheckoutResponse(order_id=order_id, status=state)


__all__ = ["router"]

# Fin del archivo backend/app/modules/payments/routes/checkout.py
