# -*- coding: utf-8 -*-
"""
backend/app/modules/admin/services/event_admin_service.py

Servicio administrativo de eventos e inscripciones.

Responsabilidades:
- CRUD de eventos y alta de sub-eventos
- Listado de inscripciones por evento
- Marcado de asistencia (individual y masivo) y asignación de ranking
- Conteo de participantes y leaderboard (también expuestos públicamente)

Reglas:
- Cada mutación corre en su propia transacción.
- Asistencia y ranking solo aplican a inscripciones pagadas.
- Borrar un evento elimina sus sub-eventos e inscripciones (único camino
  de borrado de inscripciones).

Autor: Campus Connect
Fecha: 2026-10-05
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.modules.events.errors import (
    RegistrationNotPaid,
    EventNotFound,
    InvalidAdminInput,
    RegistrationNotFound,
    SubeventNotFound,
)
from app.modules.events.models import Event, Subevent
from app.modules.events.repositories import EventRepository, SubeventRepository
from app.modules.events.schemas import (
    EventCreate,
    EventUpdate,
    LeaderboardEntry,
    SubeventCreate,
)
from app.modules.registrations.enums import PaymentStatus
from app.modules.registrations.models import Registration
from app.modules.registrations.repositories import RegistrationRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EventDeletion:
    event_id: int
    deleted_subevents: int
    deleted_registrations: int


class EventAdminService:
    """Operaciones administrativas sobre eventos, sub-eventos e inscripciones."""

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        *,
        event_repo: Optional[EventRepository] = None,
        subevent_repo: Optional[SubeventRepository] = None,
        registration_repo: Optional[RegistrationRepository] = None,
    ) -> None:
        self._session_factory = session_factory
        self.event_repo = event_repo or EventRepository()
        self.subevent_repo = subevent_repo or SubeventRepository()
        self.registration_repo = registration_repo or RegistrationRepository()

    # ------------------------------------------------------------------
    # Eventos
    # ------------------------------------------------------------------
    async def create_event(self, data: EventCreate) -> Event:
        async with self._session_factory() as session, session.begin():
            event = await self.event_repo.create(session, **data.model_dump())
        logger.info("event_created event_id=%s name=%r", event.id, event.event_name)
        return event

    async def get_event(self, event_id: int) -> Event:
        async with self._session_factory() as session:
            return await self._require_event(session, event_id)

    async def update_event(self, event_id: int, data: EventUpdate) -> Event:
        fields = data.model_dump(exclude_unset=True)
        async with self._session_factory() as session, session.begin():
            event = await self._require_event(session, event_id)

            start = fields.get("start_date", event.start_date)
            end = fields.get("end_date", event.end_date)
            if start and end and end < start:
                raise InvalidAdminInput("end_date must not be before start_date")

            event = await self.event_repo.update(session, event, **fields)
        logger.info("event_updated event_id=%s fields=%s", event_id, sorted(fields))
        return event

    async def delete_event(self, event_id: int) -> EventDeletion:
        """Borra el evento junto con sus sub-eventos e inscripciones."""
        async with self._session_factory() as session, session.begin():
            await self._require_event(session, event_id)
            deleted_registrations = await self.registration_repo.delete_by_event(session, event_id)
            deleted_subevents = await self.subevent_repo.delete_by_event(session, event_id)
            await self.event_repo.delete_by_id(session, event_id)

        logger.warning(
            "event_deleted event_id=%s subevents=%s registrations=%s",
            event_id,
            deleted_subevents,
            deleted_registrations,
        )
        return EventDeletion(
            event_id=event_id,
            deleted_subevents=deleted_subevents,
            deleted_registrations=deleted_registrations,
        )

    async def create_subevent(self, event_id: int, data: SubeventCreate) -> Subevent:
        async with self._session_factory() as session, session.begin():
            await self._require_event(session, event_id)
            subevent = await self.subevent_repo.create(session, event_id=event_id, **data.model_dump())
        logger.info(
            "subevent_created event_id=%s subevent_id=%s fee=%s",
            event_id,
            subevent.id,
            subevent.fee,
        )
        return subevent

    async def list_event_registrations(self, event_id: int) -> Sequence[Registration]:
        async with self._session_factory() as session:
            await self._require_event(session, event_id)
            return await self.registration_repo.list_by_event(session, event_id)

    # ------------------------------------------------------------------
    # Asistencia / ranking
    # ------------------------------------------------------------------
    async def mark_attendance(self, registration_id: int, present: bool = True) -> Registration:
        async with self._session_factory() as session, session.begin():
            registration = await self._require_paid_registration(session, registration_id)
            registration = await self.registration_repo.update(session, registration, attendance=present)
        logger.info("attendance_marked registration_id=%s present=%s", registration_id, present)
        return registration

    async def mark_bulk_attendance(
        self,
        event_id: int,
        subevent_id: int,
        present: bool,
    ) -> Sequence[Registration]:
        """Marca asistencia de todas las inscripciones pagadas del sub-evento."""
        async with self._session_factory() as session, session.begin():
            await self._require_event(session, event_id)
            if await self.subevent_repo.get_for_event(session, event_id, subevent_id) is None:
                raise SubeventNotFound(subevent_id, event_id)

            registrations = await self.registration_repo.list_paid_by_subevent(
                session,
                event_id=event_id,
                subevent_id=subevent_id,
            )
            for registration in registrations:
                registration.attendance = present
            await session.flush()

        logger.info(
            "bulk_attendance_marked event_id=%s subevent_id=%s present=%s count=%s",
            event_id,
            subevent_id,
            present,
            len(registrations),
        )
        return registrations

    async def assign_rank(self, registration_id: int, rank: Optional[int]) -> Registration:
        if rank is not None and rank < 1:
            raise InvalidAdminInput("rank must be >= 1 or null")

        async with self._session_factory() as session, session.begin():
            registration = await self._require_paid_registration(session, registration_id)
            registration = await self.registration_repo.update(session, registration, rank=rank)
        logger.info("rank_assigned registration_id=%s rank=%s", registration_id, rank)
        return registration

    # ------------------------------------------------------------------
    # Lecturas públicas
    # ------------------------------------------------------------------
    async def participants_count(self, event_id: int, subevent_id: Optional[int] = None) -> int:
        async with self._session_factory() as session:
            await self._require_event(session, event_id)
            return await self.registration_repo.count_paid(
                session,
                event_id=event_id,
                subevent_id=subevent_id,
            )

    async def leaderboard(
        self,
        event_id: int,
        subevent_id: Optional[int] = None,
    ) -> list[LeaderboardEntry]:
        async with self._session_factory() as session:
            await self._require_event(session, event_id)
            ranked = await self.registration_repo.list_ranked(
                session,
                event_id=event_id,
                subevent_id=subevent_id,
            )

        return [
            LeaderboardEntry(
                registration_id=r.id,
                student_id=r.student_id,
                student_name=r.student_name,
                subevent_id=r.subevent_id,
                rank=r.rank,
                attendance=r.attendance,
                participation_type="Merit" if r.rank else "Participation",
            )
            for r in ranked
        ]

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    async def _require_event(self, session: AsyncSession, event_id: int) -> Event:
        event = await self.event_repo.get(session, event_id)
        if event is None:
            raise EventNotFound(event_id)
        return event

    async def _require_paid_registration(
        self,
        session: AsyncSession,
        registration_id: int,
    ) -> Registration:
        registration = await self.registration_repo.get(session, registration_id)
        if registration is None:
            raise RegistrationNotFound(registration_id)
        if registration.payment_status != PaymentStatus.PAID:
            raise RegistrationNotPaid(registration_id, str(registration.payment_status))
        return registration


__all__ = ["EventAdminService", "EventDeletion"]

# Fin del archivo backend/app/modules/admin/services/event_admin_service.py
