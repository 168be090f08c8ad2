# -*- coding: utf-8 -*-
"""
backend/app/routes/__init__.py

Ensamblador principal de ruteadores de la API de Campus Connect.

Responsabilidades:
- Incluir el router de health (/health).
- Montar los routers de cada módulo (payments, registrations, events, admin).

Autor: Campus Connect
Fecha: 2026-10-09
"""

from fastapi import APIRouter

from app.modules.admin.routes import get_admin_routers
from app.modules.events.routes import router as events_router
from app.modules.payments.routes import router as payments_router
from app.modules.registrations.routes import router as registrations_router

from .health_routes import router as health_router

router = APIRouter()

# Health check sin prefijo adicional
router.include_router(health_router)

router.include_router(payments_router)
router.include_router(registrations_router)
router.include_router(events_router)

for admin_router in get_admin_routers():
    router.include_router(admin_router)

__all__ = ["router"]

# Fin del archivo backend/app/routes/__init__.py
