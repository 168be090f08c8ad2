# -*- coding: utf-8 -*-
"""
backend/app/routes/health_routes.py

Endpoint básico de health check para el backend de Campus Connect.

Autor: Campus Connect
Fecha: 2026-10-09
"""

from datetime import datetime, timezone

from fastapi import APIRouter, Request

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    summary="Health check del backend",
    description=(
        "Devuelve el estado básico del backend, incluyendo verificación "
        "simple de conectividad a la base de datos."
    ),
)
async def health_check(request: Request) -> dict:
    """
    Health check básico del backend.

    Returns:
        dict: información mínima de estado de la aplicación.
    """
    settings = request.app.state.settings
    db_ok = await request.app.state.db.check_health(timeout_s=2.0)

    return {
        "status": "ok" if db_ok else "degraded",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "environment": settings.python_env,
        "database": {
            "reachable": db_ok,
        },
        "payments": {
            "gateway": request.app.state.gateway.name,
        },
        "service": {
            "name": "campus-connect-backend",
            "version": settings.app_version,
        },
    }

# Fin del archivo backend/app/routes/health_routes.py
