# -*- coding: utf-8 -*-
"""
backend/app/modules/events/schemas/__init__.py
"""

from .event_schemas import (
    AttendanceUpdate,
    EventCreate,
    EventDeletedOut,
    EventOut,
    EventUpdate,
    LeaderboardEntry,
    LeaderboardOut,
    ParticipantsCountOut,
    RankUpdate,
    SubeventCreate,
    SubeventOut,
)

__all__ = [
    "AttendanceUpdate",
    "EventCreate",
    "EventDeletedOut",
    "EventOut",
    "EventUpdate",
    "LeaderboardEntry",
    "LeaderboardOut",
    "ParticipantsCountOut",
    "RankUpdate",
    "SubeventCreate",
    "SubeventOut",
]
