# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/routes/__init__.py

Ensamblador de rutas del módulo Payments.

Incluye:
- /payments/orders
- /payments/confirm
- /payments/orders/{order_id}/cancel

Autor: Campus Connect
Fecha: 2026-10-08
"""

from fastapi import APIRouter

from .checkout import router as checkout_router

router = APIRouter()
router.include_router(checkout_router)

__all__ = ["router"]

# Fin del archivo backend/app/modules/payments/routes/__init__.py
