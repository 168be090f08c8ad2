# -*- coding: utf-8 -*-
"""
backend/app/modules/events/repositories/event_repository.py

Repositorios para las tablas events y subevents.

Autor: Campus Connect
Fecha: 2026-10-03
"""

from typing import Optional, Sequence

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.shared.database.repository import BaseRepository
from app.modules.events.models import Event, Subevent


class EventRepository(BaseRepository[Event]):
    def __init__(self) -> None:
        super().__init__(Event)

    async def list_recent(self, session: AsyncSession) -> Sequence[Event]:
        stmt = select(Event).order_by(Event.created_at.desc(), Event.id.desc())
        result = await session.execute(stmt)
        return result.scalars().all()

    async def delete_by_id(self, session: AsyncSession, event_id: int) -> int:
        """Borra el evento (sin cargarlo en la sesión). Retorna filas afectadas."""
        result = await session.execute(delete(Event).where(Event.id == event_id))
        return result.rowcount or 0


class SubeventRepository(BaseRepository[Subevent]):
    def __init__(self) -> None:
        super().__init__(Subevent)

    async def get_for_event(
        self,
        session: AsyncSession,
        event_id: int,
        subevent_id: int,
    ) -> Optional[Subevent]:
        """Obtiene el sub-evento solo si pertenece al evento indicado."""
        stmt = select(Subevent).where(
            Subevent.id == subevent_id,
            Subevent.event_id == event_id,
        )
        result = await session.execute(stmt)
        return result.scalars().first()

    async def list_by_event(self, session: AsyncSession, event_id: int) -> Sequence[Subevent]:
        stmt = select(Subevent).where(Subevent.event_id == event_id).order_by(Subevent.id)
        result = await session.execute(stmt)
        return result.scalars().all()

    async def delete_by_event(self, session: AsyncSession, event_id: int) -> int:
        result = await session.execute(delete(Subevent).where(Subevent.event_id == event_id))
        return result.rowcount or 0

# Fin del archivo backend/app/modules/events/repositories/event_repository.py
