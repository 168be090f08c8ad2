# -*- coding: utf-8 -*-
"""
backend/app/shared/admin_auth.py

Autenticación de las rutas administrativas (/admin/...).

Contrato pasa/no-pasa: el request debe traer `Authorization: Bearer <token>`
igual a ADMIN_API_TOKEN. La gestión de sesiones de administrador queda
fuera de este backend.

Uso:
    from app.shared.admin_auth import AdminAuth, require_admin_token

Autor: Campus Connect
Fecha: 2026-10-08
"""

from __future__ import annotations

import logging
import secrets
from typing import Annotated

from fastapi import Depends, Header, HTTPException, Request, status

logger = logging.getLogger(__name__)


async def require_admin_token(
    request: Request,
    authorization: Annotated[str | None, Header()] = None,
) -> bool:
    """
    Valida el token Bearer de administrador.

    Lee la configuración de `request.app.state.settings` (la misma instancia
    con la que se construyó la app).

    Raises:
        HTTPException 401: Si no hay Authorization header o el formato es inválido.
        HTTPException 403: Si el token es inválido.
        HTTPException 500: Si el token no está configurado en el backend.
    """
    settings = request.app.state.settings

    if not settings.admin_api_token or not settings.admin_api_token.get_secret_value():
        logger.error("admin_api_token_not_configured: ADMIN_API_TOKEN must be set for /admin routes")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Admin token not configured",
        )

    if not authorization:
        logger.warning("admin_auth_missing_header path=%s", request.url.path)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authorization header required",
            headers={"WWW-Authenticate": "Bearer"},
        )

    parts = authorization.split()
    if len(parts) != 2 or parts[0].lower() != "bearer":
        logger.warning("admin_auth_invalid_format path=%s", request.url.path)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid authorization format. Use: Bearer <token>",
            headers={"WWW-Authenticate": "Bearer"},
        )

    expected_token = settings.admin_api_token.get_secret_value()

    # Comparación timing-safe
    if not secrets.compare_digest(parts[1].encode("utf-8"), expected_token.encode("utf-8")):
        logger.warning("admin_auth_invalid_token path=%s", request.url.path)
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Invalid admin token",
        )

    logger.debug("admin_auth_success path=%s", request.url.path)
    return True


AdminAuth = Annotated[bool, Depends(require_admin_token)]


__all__ = [
    "require_admin_token",
    "AdminAuth",
]
