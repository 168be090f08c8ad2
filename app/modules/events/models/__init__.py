# -*- coding: utf-8 -*-
"""
backend/app/modules/events/models/__init__.py

Modelos ORM del módulo Events.
"""

from .event_models import Event, Subevent

__all__ = ["Event", "Subevent"]
