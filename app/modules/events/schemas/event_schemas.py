# -*- coding: utf-8 -*-
"""
backend/app/modules/events/schemas/event_schemas.py

Esquemas Pydantic para el catálogo de eventos y la gestión administrativa
(asistencia, ranking, leaderboard).

Autor: Campus Connect
Fecha: 2026-10-04
"""

from __future__ import annotations

from datetime import date, datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


# ─────────────────────────────────────────────────────────────────────────────
# Eventos
# ─────────────────────────────────────────────────────────────────────────────

class EventCreate(BaseModel):
    event_name: str = Field(min_length=1, max_length=200)
    description: Optional[str] = None
    nature_of_activity: Optional[str] = Field(default=None, max_length=100)
    venue: Optional[str] = Field(default=None, max_length=200)
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    created_by: Optional[str] = Field(default=None, max_length=100)

    @model_validator(mode="after")
    def _check_dates(self) -> "EventCreate":
        if self.start_date and self.end_date and self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        return self


class EventUpdate(BaseModel):
    """Actualización parcial: solo se aplican los campos enviados."""

    event_name: Optional[str] = Field(default=None, min_length=1, max_length=200)
    description: Optional[str] = None
    nature_of_activity: Optional[str] = Field(default=None, max_length=100)
    venue: Optional[str] = Field(default=None, max_length=200)
    start_date: Optional[date] = None
    end_date: Optional[date] = None


class SubeventCreate(BaseModel):
    title: str = Field(min_length=1, max_length=200)
    description: Optional[str] = None
    fee: int = Field(default=0, ge=0, description="Cuota en unidades menores.")


class SubeventOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    event_id: int
    title: str
    description: Optional[str] = None
    fee: int
    created_at: datetime


class EventOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    event_name: str
    description: Optional[str] = None
    nature_of_activity: Optional[str] = None
    venue: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    created_by: Optional[str] = None
    created_at: datetime


class EventDeletedOut(BaseModel):
    event_id: int
    deleted_subevents: int
    deleted_registrations: int


# ─────────────────────────────────────────────────────────────────────────────
# Asistencia / ranking
# ─────────────────────────────────────────────────────────────────────────────

class AttendanceUpdate(BaseModel):
    present: bool = True


class RankUpdate(BaseModel):
    """rank >= 1 asigna posición; null la elimina."""

    rank: Optional[int] = Field(default=None, ge=1)


# ─────────────────────────────────────────────────────────────────────────────
# Leaderboard / conteos (público)
# ─────────────────────────────────────────────────────────────────────────────

class LeaderboardEntry(BaseModel):
    registration_id: int
    student_id: int
    student_name: str
    subevent_id: int
    rank: int
    attendance: bool
    participation_type: Literal["Merit", "Participation"]


class LeaderboardOut(BaseModel):
    event_id: int
    subevent_id: Optional[int] = None
    entries: List[LeaderboardEntry]


class ParticipantsCountOut(BaseModel):
    event_id: int
    subevent_id: Optional[int] = None
    count: int


__all__ = [
    "EventCreate",
    "EventUpdate",
    "EventOut",
    "EventDeletedOut",
    "SubeventCreate",
    "SubeventOut",
    "AttendanceUpdate",
    "RankUpdate",
    "LeaderboardEntry",
    "LeaderboardOut",
    "ParticipantsCountOut",
]

# Fin del archivo backend/app/modules/events/schemas/event_schemas.py
