# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/dependencies.py

Dependencias FastAPI del módulo Payments.

El servicio se construye una sola vez en el lifespan y vive en app.state.

Autor: Campus Connect
Fecha: 2026-10-08
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from app.modules.payments.services import PaymentReconciliationService


def get_reconciliation_service(request: Request) -> PaymentReconciliationService:
    return request.app.state.reconciliation_service


ReconciliationServiceDep = Annotated[
    PaymentReconciliationService,
    Depends(get_reconciliation_service),
]


__all__ = ["get_reconciliation_service", "ReconciliationServiceDep"]
