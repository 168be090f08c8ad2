# -*- coding: utf-8 -*-
"""
backend/app/modules/admin/routes/events_routes.py

Endpoints administrativos de eventos, sub-eventos e inscripciones.
Requieren `Authorization: Bearer <ADMIN_API_TOKEN>`.

Autor: Campus Connect
Fecha: 2026-10-08
"""
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Path, status

from app.modules.admin.dependencies import EventAdminServiceDep
from app.modules.events.errors import EventsError
from app.modules.events.schemas import (
    AttendanceUpdate,
    EventCreate,
    EventDeletedOut,
    EventOut,
    EventUpdate,
    RankUpdate,
    SubeventCreate,
    SubeventOut,
)
from app.modules.registrations.schemas import RegistrationOut
from app.shared.admin_auth import require_admin_token

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/admin",
    tags=["admin-events"],
    dependencies=[Depends(require_admin_token)],
)


# ─────────────────────────────────────────────────────────────────────────────
# Eventos
# ─────────────────────────────────────────────────────────────────────────────

@router.post("/events", response_model=EventOut, status_code=status.HTTP_201_CREATED)
async def create_event(payload: EventCreate, service: EventAdminServiceDep) -> EventOut:
    event = await service.create_event(payload)
    return EventOut.model_validate(event)


@router.get("/events/{event_id}", response_model=EventOut)
async def get_event(service: EventAdminServiceDep, event_id: int = Path(gt=0)) -> EventOut:
    try:
        event = await service.get_event(event_id)
    except EventsError as e:
        raise e.to_http_exception() from e
    return EventOut.model_validate(event)


@router.patch("/events/{event_id}", response_model=EventOut)
async def update_event(
    payload: EventUpdate,
    service: EventAdminServiceDep,
    event_id: int = Path(gt=0),
) -> EventOut:
    try:
        event = await service.update_event(event_id, payload)
    except EventsError as e:
        raise e.to_http_exception() from e
    return EventOut.model_validate(event)


@router.delete("/events/{event_id}", response_model=EventDeletedOut)
async def delete_event(service: EventAdminServiceDep, event_id: int = Path(gt=0)) -> EventDeletedOut:
    try:
        deletion = await service.delete_event(event_id)
    except EventsError as e:
        raise e.to_http_exception() from e
    return EventDeletedOut(
        event_id=deletion.event_id,
        deleted_subevents=deletion.deleted_subevents,
        deleted_registrations=deletion.deleted_registrations,
    )


@router.post(
    "/events/{event_id}/subevents",
    response_model=SubeventOut,
    status_code=status.HTTP_201_CREATED,
)
async def create_subevent(
    payload: SubeventCreate,
    service: EventAdminServiceDep,
    event_id: int = Path(gt=0),
) -> SubeventOut:
    try:
        subevent = await service.create_subevent(event_id, payload)
    except EventsError as e:
        raise e.to_http_exception() from e
    return SubeventOut.model_validate(subevent)


@router.get("/events/{event_id}/registrations", response_model=list[RegistrationOut])
async def list_event_registrations(
    service: EventAdminServiceDep,
    event_id: int = Path(gt=0),
) -> list[RegistrationOut]:
    try:
        registrations = await service.list_event_registrations(event_id)
    except EventsError as e:
        raise e.to_http_exception() from e
    return [RegistrationOut.model_validate(r) for r in registrations]


# ─────────────────────────────────────────────────────────────────────────────
# Asistencia / ranking
# ─────────────────────────────────────────────────────────────────────────────

@router.patch("/registrations/{registration_id}/attendance", response_model=RegistrationOut)
async def mark_attendance(
    payload: AttendanceUpdate,
    service: EventAdminServiceDep,
    registration_id: int = Path(gt=0),
) -> RegistrationOut:
    try:
        registration = await service.mark_attendance(registration_id, present=payload.present)
    except EventsError as e:
        raise e.to_http_exception() from e
    return RegistrationOut.model_validate(registration)


@router.post(
    "/events/{event_id}/subevents/{subevent_id}/attendance",
    response_model=list[RegistrationOut],
)
async def mark_bulk_attendance(
    payload: AttendanceUpdate,
    service: EventAdminServiceDep,
    event_id: int = Path(gt=0),
    subevent_id: int = Path(gt=0),
) -> list[RegistrationOut]:
    try:
        registrations = await service.mark_bulk_attendance(event_id, subevent_id, payload.present)
    except EventsError as e:
        raise e.to_http_exception() from e
    return [RegistrationOut.model_validate(r) for r in registrations]


@router.patch("/registrations/{registration_id}/rank", response_model=RegistrationOut)
async def assign_rank(
    payload: RankUpdate,
    service: EventAdminServiceDep,
    registration_id: int = Path(gt=0),
) -> RegistrationOut:
    try:
        registration = await service.assign_rank(registration_id, payload.rank)
    except EventsError as e:
        raise e.to_http_exception() from e
    return RegistrationOut.model_validate(registration)


__all__ = ["router"]

# Fin del archivo backend/app/modules/admin/routes/events_routes.py
