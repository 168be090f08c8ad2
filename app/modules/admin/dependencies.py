# -*- coding: utf-8 -*-
"""
backend/app/modules/admin/dependencies.py

Dependencias FastAPI del servicio administrativo de eventos.

Autor: Campus Connect
Fecha: 2026-10-08
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from app.modules.admin.services import EventAdminService


def get_event_admin_service(request: Request) -> EventAdminService:
    return request.app.state.event_admin_service


EventAdminServiceDep = Annotated[EventAdminService, Depends(get_event_admin_service)]


__all__ = ["get_event_admin_service", "EventAdminServiceDep"]
