# -*- coding: utf-8 -*-
"""
backend/app/modules/admin/services/__init__.py
"""

from .event_admin_service import EventAdminService, EventDeletion

__all__ = ["EventAdminService", "EventDeletion"]
