# -*- coding: utf-8 -*-
"""
backend/app/modules/registrations/routes/__init__.py
"""

from .status_routes import router

__all__ = ["router"]
