# -*- coding: utf-8 -*-
"""
backend/app/shared/config/settings_prod.py

Settings de producción: sin archivo .env (todo llega por variables de
entorno), logs en JSON, Postgres con SSL y esquema gestionado por
migraciones SQL en lugar de create_all.

Las reglas que dependen de valores (token admin, CORS, pasarela real)
se validan en BaseAppSettings._security_and_payments_checks y en
config_loader.

Autor: Campus Connect
Fecha: 2026-10-02
"""

from typing import Literal

from pydantic_settings import SettingsConfigDict

from .settings_base import BaseAppSettings


class ProdSettings(BaseAppSettings):
    python_env: Literal["development", "test", "production"] = "production"

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_format: Literal["json", "pretty", "plain"] = "json"

    db_sslmode: str = "require"
    db_create_all: bool = False

    model_config = SettingsConfigDict(
        env_file=None,
        populate_by_name=True,
        extra="ignore",
    )


__all__ = ["ProdSettings"]
# Fin del archivo backend/app/shared/config/settings_prod.py
