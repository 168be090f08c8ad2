# -*- coding: utf-8 -*-
"""
backend/app/modules/admin/routes/__init__.py

Punto de entrada de rutas del módulo Admin.

Expone una función helper `get_admin_routers()` para ser usada por la app principal.

Autor: Campus Connect
Fecha: 2026-10-08
"""

from .events_routes import router as events_router


def get_admin_routers():
    """
    Retorna la lista de routers del módulo Admin.

    Returns:
        Lista de APIRouter
    """
    return [events_router]


__all__ = ["get_admin_routers", "events_router"]
