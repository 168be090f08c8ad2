# -*- coding: utf-8 -*-
"""
backend/app/modules/events/routes/public_routes.py

Lecturas públicas derivadas de las inscripciones pagadas:
- GET /events/{event_id}/leaderboard
- GET /events/{event_id}/participants/count

Autor: Campus Connect
Fecha: 2026-10-08
"""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Path, Query

from app.modules.admin.dependencies import EventAdminServiceDep
from app.modules.events.errors import EventsError
from app.modules.events.schemas import LeaderboardOut, ParticipantsCountOut

router = APIRouter(prefix="/events", tags=["events"])


@router.get("/{event_id}/leaderboard", response_model=LeaderboardOut)
async def get_leaderboard(
    service: EventAdminServiceDep,
    event_id: int = Path(gt=0),
    subevent_id: Optional[int] = Query(default=None, gt=0),
) -> LeaderboardOut:
    try:
        entries = await service.leaderboard(event_id, subevent_id)
    except EventsError as e:
        raise e.to_http_exception() from e
    return LeaderboardOut(event_id=event_id, subevent_id=subevent_id, entries=entries)


@router.get("/{event_id}/participants/count", response_model=ParticipantsCountOut)
async def get_participants_count(
    service: EventAdminServiceDep,
    event_id: int = Path(gt=0),
    subevent_id: Optional[int] = Query(default=None, gt=0),
) -> ParticipantsCountOut:
    try:
        count = await service.participants_count(event_id, subevent_id)
    except EventsError as e:
        raise e.to_http_exception() from e
    return ParticipantsCountOut(event_id=event_id, subevent_id=subevent_id, count=count)


__all__ = ["router"]
