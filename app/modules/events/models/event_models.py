# -*- coding: utf-8 -*-
"""
backend/app/modules/events/models/event_models.py

Modelos ORM del catálogo de eventos: events y subevents.

Un evento agrupa uno o más sub-eventos; cada sub-evento define su cuota
de inscripción (en unidades menores de la moneda) y, opcionalmente, un
cupo máximo de participantes.

Autor: Campus Connect
Fecha: 2026-10-03
"""

from __future__ import annotations

from datetime import date, datetime, timezone
from typing import List, Optional

from sqlalchemy import (
    CheckConstraint,
    Date,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Text,
    func,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.shared.database.base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Event(Base):
    """Evento del campus (festival, simposio, torneo...)."""

    __tablename__ = "events"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    event_name: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    nature_of_activity: Mapped[Optional[str]] = mapped_column(
        String(100),
        nullable=True,
        doc="Naturaleza de la actividad (técnica, cultural, deportiva...).",
    )
    venue: Mapped[Optional[str]] = mapped_column(String(200), nullable=True)

    start_date: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
    end_date: Mapped[Optional[date]] = mapped_column(Date, nullable=True)

    created_by: Mapped[Optional[str]] = mapped_column(
        String(100),
        nullable=True,
        doc="Identificador del administrador que creó el evento.",
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
        server_default=func.now(),
    )

    subevents: Mapped[List["Subevent"]] = relationship(
        back_populates="event",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="Subevent.id",
    )

    def __repr__(self) -> str:
        return f"<Event id={self.id} name={self.event_name!r}>"


class Subevent(Base):
    """Sub-evento inscribible con cuota propia."""

    __tablename__ = "subevents"
    __table_args__ = (CheckConstraint("fee >= 0", name="fee_non_negative"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    event_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("events.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    title: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    # Cuota en unidades menores (paise para INR)
    fee: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=0,
        server_default="0",
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
        server_default=func.now(),
    )

    event: Mapped["Event"] = relationship(back_populates="subevents")

    def __repr__(self) -> str:
        return f"<Subevent id={self.id} event_id={self.event_id} fee={self.fee}>"


__all__ = ["Event", "Subevent"]

# Fin del archivo backend/app/modules/events/models/event_models.py
