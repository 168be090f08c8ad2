# -*- coding: utf-8 -*-
"""
backend/app/main.py

Punto de entrada principal del backend de Campus Connect.

Ajustes clave:
- Fábrica `create_app()`: settings, gateway y base de datos se construyen
  explícitamente y se cuelgan de app.state (sin sesiones globales).
- Lifespan: crea el cliente de base de datos, el gateway de pagos y los
  servicios; en shutdown cierra el cliente HTTP del gateway y el engine.
- Observabilidad Prometheus (/metrics) vía app.observability.prom
- Errores: JSONExceptionMiddleware (500 JSON con request_id) y handlers
  UTF-8 para HTTPException / validación de entrada.

Ejecución:
    uvicorn app.main:app --host 0.0.0.0 --port 8000

Autor: Campus Connect
Fecha: 2026-10-09
"""

import logging
import os
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

# ---------------------------------------------------------------------------
# Cargar .env ANTES de instanciar settings
# En DEV: override=True para que .env mande sobre variables del entorno
# En TEST/PROD: override=False para respetar variables del entorno
# ---------------------------------------------------------------------------
from dotenv import load_dotenv

_ENV_PATH = Path(__file__).resolve().parents[1] / ".env"
_PYTHON_ENV = os.getenv("PYTHON_ENV", "development").strip().strip('"').strip("'").lower()
load_dotenv(dotenv_path=_ENV_PATH, override=_PYTHON_ENV == "development")

import anyio
from fastapi import FastAPI, HTTPException
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from app.modules.admin.services import EventAdminService
from app.modules.payments.gateways import PaymentGateway, build_gateway
from app.modules.payments.services import PaymentReconciliationService
from app.observability.prom import setup_observability
from app.shared.config import (
    BaseAppSettings,
    PaymentsSettings,
    get_payments_settings,
    get_settings,
    setup_logging,
)
from app.shared.database import Database
from app.shared.middleware import JSONExceptionMiddleware
from app.shared.utils.json_response import (
    UTF8JSONResponse,
    http_exception_handler,
    request_validation_handler,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # ────────── STARTUP ──────────
    settings: BaseAppSettings = app.state.settings
    payments_settings: PaymentsSettings = app.state.payments_settings

    db = Database(settings.database_url, echo=settings.db_echo_sql)
    if settings.db_create_all:
        await db.create_all()
        logger.info("🗄️ Tablas creadas (DB_CREATE_ALL=true)")

    injected_gateway: Optional[PaymentGateway] = app.state.gateway_override
    gateway = injected_gateway or build_gateway(payments_settings)

    app.state.db = db
    app.state.gateway = gateway
    app.state.reconciliation_service = PaymentReconciliationService(
        db.sessionmaker,
        gateway,
        signing_secret=payments_settings.razorpay_key_secret.get_secret_value(),
        currency=payments_settings.payments_currency,
        max_amount_minor=payments_settings.max_payment_amount_minor,
    )
    app.state.event_admin_service = EventAdminService(db.sessionmaker)

    logger.info(
        "🟢 Backend de Campus Connect iniciado (env=%s, gateway=%s, currency=%s)",
        settings.python_env,
        gateway.name,
        payments_settings.payments_currency,
    )
    try:
        yield
    finally:
        # ────────── SHUTDOWN ──────────
        logger.info("🔴 Iniciando shutdown ordenado...")
        with anyio.CancelScope(shield=True):
            if injected_gateway is None:
                await gateway.aclose()
            await db.dispose()
        logger.info("🔴 Backend de Campus Connect apagado.")


openapi_tags = [
    {"name": "payments:checkout", "description": "Órdenes de pago y confirmación de inscripciones"},
    {"name": "registrations", "description": "Estado de inscripción"},
    {"name": "events", "description": "Leaderboard y conteo de participantes"},
    {"name": "admin-events", "description": "Gestión administrativa de eventos"},
]


def _configure_cors(app_instance: FastAPI, settings: BaseAppSettings) -> dict:
    """
    Configura CORS middleware.

    Returns:
        dict con la configuración aplicada para logging.
    """
    origins_list = settings.get_cors_origins()
    is_wildcard_only = origins_list == ["*"]

    cors_config = {
        "allow_origins": origins_list,
        # "*" con allow_credentials=True es inválido en navegadores
        "allow_credentials": not is_wildcard_only,
        "allow_methods": ["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
        "allow_headers": ["*"],
        "expose_headers": ["X-Request-ID"],
        "max_age": 600,
    }
    if is_wildcard_only:
        logger.warning("⚠️ CORS WILDCARD MODE: allow_credentials=False")

    app_instance.add_middleware(CORSMiddleware, **cors_config)
    logger.info("🌐 CORS habilitado para %s", origins_list)
    return cors_config


def create_app(
    settings: Optional[BaseAppSettings] = None,
    payments_settings: Optional[PaymentsSettings] = None,
    gateway: Optional[PaymentGateway] = None,
) -> FastAPI:
    """
    Construye la aplicación FastAPI.

    Args:
        settings: Configuración de la app (default: get_settings()).
        payments_settings: Configuración de pagos (default: get_payments_settings()).
        gateway: Gateway de pagos ya construido (tests); si no se pasa, se
            construye en el lifespan según USE_PAYMENT_STUBS.
    """
    settings = settings or get_settings()
    payments_settings = payments_settings or get_payments_settings()

    setup_logging(settings.log_level, settings.log_format)

    app = FastAPI(
        title=settings.app_name,
        description="API de eventos, inscripciones y pagos de Campus Connect",
        version=settings.app_version,
        lifespan=lifespan,
        openapi_tags=openapi_tags,
        default_response_class=UTF8JSONResponse,
    )
    app.state.settings = settings
    app.state.payments_settings = payments_settings
    app.state.gateway_override = gateway

    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)

    # El orden real de ejecución de middlewares en Starlette es inverso al registro:
    # CORS se registra al final para ejecutarse primero (outermost).
    app.add_middleware(JSONExceptionMiddleware)
    setup_observability(app, http_metrics_enabled=settings.http_metrics_enabled)
    _configure_cors(app, settings)

    from app.routes import router as main_router

    app.include_router(main_router)

    @app.get("/", include_in_schema=False)
    async def root():
        return {"service": "Campus Connect Backend", "status": "active"}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    _settings = get_settings()
    uvicorn.run("app.main:app", host=_settings.app_host, port=_settings.app_port)

# Fin del archivo backend/app/main.py
