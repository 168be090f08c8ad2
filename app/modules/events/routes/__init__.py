# -*- coding: utf-8 -*-
"""
backend/app/modules/events/routes/__init__.py
"""

from .public_routes import router

__all__ = ["router"]
