# -*- coding: utf-8 -*-
"""
backend/app/shared/config/logging_config.py

Logging de Campus Connect vía dictConfig. Los servicios registran eventos
como `payment_confirmed order_id=... student_id=...`; en producción esos
mensajes salen como JSON (python-json-logger) para el agregador de logs.

LOG_FORMAT:
- plain  → "INFO [app.modules.payments...]: payment_confirmed ..."
- pretty → igual, con timestamp
- json   → un objeto JSON por línea

Autor: Campus Connect
Fecha: 2026-10-02
"""

import logging.config
from typing import Literal

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
LogFormat = Literal["plain", "pretty", "json"]

_FORMATTERS = {
    "plain": {
        "format": "%(levelname)s [%(name)s]: %(message)s",
    },
    "pretty": {
        "format": "%(asctime)s - %(levelname)s - %(name)s - %(message)s",
        "datefmt": "%Y-%m-%d %H:%M:%S",
    },
    "json": {
        "()": "pythonjsonlogger.json.JsonFormatter",
        "format": "%(asctime)s %(name)s %(levelname)s %(message)s",
    },
}

# Bibliotecas ruidosas. httpx loguea cada POST /orders a Razorpay en INFO
# y el engine ya registra SQL con DB_ECHO_SQL.
_QUIET_LOGGERS = ("httpx", "httpcore", "sqlalchemy.engine")


def setup_logging(level: LogLevel = "INFO", fmt: LogFormat = "plain") -> None:
    formatter = fmt if fmt in _FORMATTERS else "plain"

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {formatter: _FORMATTERS[formatter]},
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": formatter,
                    "stream": "ext://sys.stdout",
                }
            },
            "root": {"handlers": ["console"], "level": level.upper()},
            "loggers": {name: {"level": "WARNING"} for name in _QUIET_LOGGERS},
        }
    )


__all__ = ["setup_logging", "LogLevel", "LogFormat"]
# Fin del archivo backend/app/shared/config/logging_config.py
