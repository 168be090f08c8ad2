# -*- coding: utf-8 -*-
"""
backend/app/modules/registrations/models/registration_models.py

Modelo ORM para la tabla registrations.

Una fila se crea únicamente cuando una confirmación de pago fue verificada
(firma HMAC válida), siempre con payment_status = 'paid'. Después solo se
modifica por marcado de asistencia y asignación de ranking, y solo se
elimina en cascada al borrar su evento.

Restricciones:
- uq_registrations_paid_triple: índice único PARCIAL sobre
  (student_id, event_id, subevent_id) WHERE payment_status = 'paid'.
  Intentos pending/failed nunca bloquean un pago exitoso posterior.
- uq_registrations_gateway_payment_id: un pago del gateway se concilia
  en a lo sumo una inscripción.

Autor: Campus Connect
Fecha: 2026-10-03
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    String,
    UniqueConstraint,
    false,
    func,
    text,
)
from sqlalchemy.orm import Mapped, mapped_column

from app.shared.database.base import Base, as_db_enum
from app.modules.registrations.enums import PaymentStatus

PAID_ONLY = text("payment_status = 'paid'")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Registration(Base):
    """Inscripción de un estudiante a un sub-evento."""

    __tablename__ = "registrations"
    __table_args__ = (
        Index(
            "uq_registrations_paid_triple",
            "student_id",
            "event_id",
            "subevent_id",
            unique=True,
            postgresql_where=PAID_ONLY,
            sqlite_where=PAID_ONLY,
        ),
        UniqueConstraint("gateway_payment_id", name="uq_registrations_gateway_payment_id"),
        CheckConstraint("fee >= 0", name="fee_non_negative"),
        CheckConstraint("rank IS NULL OR rank >= 1", name="rank_positive"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    student_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)

    event_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("events.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    subevent_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("subevents.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    student_name: Mapped[str] = mapped_column(String(200), nullable=False)
    student_email: Mapped[str] = mapped_column(String(320), nullable=False)

    # Monto cobrado en unidades menores
    fee: Mapped[int] = mapped_column(Integer, nullable=False)

    payment_status: Mapped[PaymentStatus] = mapped_column(
        as_db_enum(PaymentStatus),
        nullable=False,
        default=PaymentStatus.PENDING,
    )

    gateway_order_id: Mapped[Optional[str]] = mapped_column(
        String(64),
        nullable=True,
        index=True,
        doc="ID de la orden en el gateway (order_...).",
    )

    gateway_payment_id: Mapped[Optional[str]] = mapped_column(
        String(64),
        nullable=True,
        doc="ID del pago en el gateway (pay_...).",
    )

    attendance: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
        server_default=false(),
    )

    rank: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)

    registration_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
        server_default=func.now(),
    )

    @property
    def is_paid(self) -> bool:
        return self.payment_status == PaymentStatus.PAID

    def __repr__(self) -> str:
        return (
            f"<Registration id={self.id} student={self.student_id} "
            f"event={self.event_id} subevent={self.subevent_id} "
            f"status={self.payment_status}>"
        )


__all__ = ["Registration", "PAID_ONLY"]

# Fin del archivo backend/app/modules/registrations/models/registration_models.py
