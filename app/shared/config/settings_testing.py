# -*- coding: utf-8 -*-
"""
backend/app/shared/config/settings_testing.py

Overrides para entorno de PRUEBAS (test) usando Pydantic v2.
Busca ser determinista y seguro: logging moderado, base de datos SQLite
en memoria y token de administración fijo.

Autor: Campus Connect
Fecha: 02/10/2026
"""

from typing import Optional

from pydantic import SecretStr
from pydantic_settings import SettingsConfigDict

from .settings_base import BaseAppSettings


class EnvTestingSettings(BaseAppSettings):
    # --- Identidad de entorno ---
    python_env: str = "test"

    # --- Logging en test: menos ruido ---
    log_level: str = "WARNING"
    log_format: str = "pretty"

    # --- Base de datos aislada (SQLite en memoria) ---
    db_url: Optional[str] = "sqlite+aiosqlite:///:memory:"
    db_create_all: bool = True

    # --- Admin ---
    admin_api_token: Optional[SecretStr] = SecretStr("test-admin-token")

    # --- Sin middleware de métricas HTTP (registro global de prometheus) ---
    http_metrics_enabled: bool = False

    model_config = SettingsConfigDict(
        env_file=".env.test",
        env_file_encoding="utf-8",
        populate_by_name=True,
        extra="ignore",
    )


__all__ = ["EnvTestingSettings"]
# Fin del archivo backend/app/shared/config/settings_testing.py
