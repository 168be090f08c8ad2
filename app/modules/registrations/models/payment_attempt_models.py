# -*- coding: utf-8 -*-
"""
backend/app/modules/registrations/models/payment_attempt_models.py

Tabla de auditoría payment_attempts.

Cada transición relevante de un checkout (orden creada, confirmada,
abandonada o rechazada) deja una fila. Se escribe fuera de la transacción
de la inscripción y nunca se consulta para la unicidad de pagos.

Autor: Campus Connect
Fecha: 2026-10-03
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import DateTime, Index, Integer, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from app.shared.database.base import Base, as_db_enum
from app.modules.registrations.enums import AttemptState


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class PaymentAttempt(Base):
    """Evento de auditoría de un intento de pago."""

    __tablename__ = "payment_attempts"
    __table_args__ = (
        Index("ix_payment_attempts_order_state", "order_id", "state"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    order_id: Mapped[str] = mapped_column(String(64), nullable=False)
    payment_id: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)

    student_id: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    event_id: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    subevent_id: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)

    amount: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    currency: Mapped[Optional[str]] = mapped_column(String(3), nullable=True)

    state: Mapped[AttemptState] = mapped_column(as_db_enum(AttemptState), nullable=False)
    reason: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
        server_default=func.now(),
    )

    def __repr__(self) -> str:
        return f"<PaymentAttempt id={self.id} order={self.order_id} state={self.state}>"


__all__ = ["PaymentAttempt"]

# Fin del archivo backend/app/modules/registrations/models/payment_attempt_models.py
