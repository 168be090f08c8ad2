# -*- coding: utf-8 -*-
"""
backend/app/modules/registrations/repositories/registration_repository.py

Repositorio para la tabla registrations.

Responsabilidades:
- Pre-check de inscripción pagada por (student_id, event_id, subevent_id)
- Guarda anti-replay por gateway_payment_id
- Listados administrativos, conteo de participantes y leaderboard

Autor: Campus Connect
Fecha: 2026-10-03
"""

from typing import Optional, Sequence

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.shared.database.repository import BaseRepository
from app.modules.registrations.enums import PaymentStatus
from app.modules.registrations.models import Registration


class RegistrationRepository(BaseRepository[Registration]):
    def __init__(self) -> None:
        super().__init__(Registration)

    # -----------------------------------------------------------
    # Unicidad / idempotencia
    # -----------------------------------------------------------
    async def get_paid_registration(
        self,
        session: AsyncSession,
        *,
        student_id: int,
        event_id: int,
        subevent_id: int,
    ) -> Optional[Registration]:
        """Inscripción pagada del estudiante para el sub-evento, si existe."""
        stmt = select(Registration).where(
            Registration.student_id == student_id,
            Registration.event_id == event_id,
            Registration.subevent_id == subevent_id,
            Registration.payment_status == PaymentStatus.PAID,
        )
        result = await session.execute(stmt)
        return result.scalars().first()

    async def get_by_gateway_payment_id(
        self,
        session: AsyncSession,
        gateway_payment_id: str,
    ) -> Optional[Registration]:
        stmt = select(Registration).where(Registration.gateway_payment_id == gateway_payment_id)
        result = await session.execute(stmt)
        return result.scalars().first()

    # -----------------------------------------------------------
    # Listados
    # -----------------------------------------------------------
    async def list_by_event(self, session: AsyncSession, event_id: int) -> Sequence[Registration]:
        """Inscripciones del evento, más recientes primero."""
        stmt = (
            select(Registration)
            .where(Registration.event_id == event_id)
            .order_by(Registration.registration_date.desc(), Registration.id.desc())
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def list_paid_by_subevent(
        self,
        session: AsyncSession,
        *,
        event_id: int,
        subevent_id: int,
    ) -> Sequence[Registration]:
        stmt = (
            select(Registration)
            .where(
                Registration.event_id == event_id,
                Registration.subevent_id == subevent_id,
                Registration.payment_status == PaymentStatus.PAID,
            )
            .order_by(Registration.id)
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def count_paid(
        self,
        session: AsyncSession,
        *,
        event_id: int,
        subevent_id: Optional[int] = None,
    ) -> int:
        stmt = select(func.count(Registration.id)).where(
            Registration.event_id == event_id,
            Registration.payment_status == PaymentStatus.PAID,
        )
        if subevent_id is not None:
            stmt = stmt.where(Registration.subevent_id == subevent_id)
        result = await session.execute(stmt)
        return int(result.scalar_one())

    async def list_ranked(
        self,
        session: AsyncSession,
        *,
        event_id: int,
        subevent_id: Optional[int] = None,
    ) -> Sequence[Registration]:
        """Inscripciones pagadas con rank, ordenadas por rank y fecha."""
        stmt = select(Registration).where(
            Registration.event_id == event_id,
            Registration.payment_status == PaymentStatus.PAID,
            Registration.rank.is_not(None),
        )
        if subevent_id is not None:
            stmt = stmt.where(Registration.subevent_id == subevent_id)
        stmt = stmt.order_by(
            Registration.rank.asc(),
            Registration.registration_date.asc(),
            Registration.id.asc(),
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def delete_by_event(self, session: AsyncSession, event_id: int) -> int:
        result = await session.execute(delete(Registration).where(Registration.event_id == event_id))
        return result.rowcount or 0

# Fin del archivo backend/app/modules/registrations/repositories/registration_repository.py
