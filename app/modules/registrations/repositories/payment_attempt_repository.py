# -*- coding: utf-8 -*-
"""
backend/app/modules/registrations/repositories/payment_attempt_repository.py

Repositorio para la tabla de auditoría payment_attempts.

Autor: Campus Connect
Fecha: 2026-10-03
"""

from typing import Optional, Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.shared.database.repository import BaseRepository
from app.modules.registrations.enums import AttemptState
from app.modules.registrations.models import PaymentAttempt


class PaymentAttemptRepository(BaseRepository[PaymentAttempt]):
    def __init__(self) -> None:
        super().__init__(PaymentAttempt)

    async def get_order_created(
        self,
        session: AsyncSession,
        order_id: str,
    ) -> Optional[PaymentAttempt]:
        """Intento 'order_created' registrado al crear la orden en el gateway."""
        stmt = (
            select(PaymentAttempt)
            .where(
                PaymentAttempt.order_id == order_id,
                PaymentAttempt.state == AttemptState.ORDER_CREATED,
            )
            .order_by(PaymentAttempt.id.desc())
        )
        result = await session.execute(stmt)
        return result.scalars().first()

    async def list_by_order(self, session: AsyncSession, order_id: str) -> Sequence[PaymentAttempt]:
        stmt = (
            select(PaymentAttempt)
            .where(PaymentAttempt.order_id == order_id)
            .order_by(PaymentAttempt.id)
        )
        result = await session.execute(stmt)
        return result.scalars().all()

# Fin del archivo backend/app/modules/registrations/repositories/payment_attempt_repository.py
