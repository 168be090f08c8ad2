# -*- coding: utf-8 -*-
"""
backend/app/modules/events/repositories/__init__.py
"""

from .event_repository import EventRepository, SubeventRepository

__all__ = ["EventRepository", "SubeventRepository"]
