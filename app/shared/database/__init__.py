# -*- coding: utf-8 -*-
"""
backend/app/shared/database/__init__.py

Re-exporta utilidades comunes de base de datos.

Autor: Campus Connect
Fecha: 2026-10-02
"""

from __future__ import annotations

from .base import Base, NAMING_CONVENTION, as_db_enum
from .database import Database, get_async_session
from .repository import BaseRepository

__all__ = [
    "Base",
    "NAMING_CONVENTION",
    "as_db_enum",
    "Database",
    "get_async_session",
    "BaseRepository",
]

# Fin del archivo backend/app/shared/database/__init__.py
