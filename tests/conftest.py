# backend/tests/conftest.py
# -*- coding: utf-8 -*-
"""
Config global de tests para Campus Connect.

- Fuerza PYTHON_ENV=test y un secreto de firma conocido ANTES de importar la app
- Base de datos SQLite en memoria (aiosqlite + StaticPool) por test
- Catálogo sembrado: evento 7 con sub-evento 3 (cuota 50000)
- Gateway stub en memoria (sin red)
- App FastAPI + cliente httpx con ciclo de vida (asgi-lifespan)
"""

import os
import pathlib
import sys
from collections.abc import AsyncIterator

# -----------------------------------------------------------------------------
# 0) Variables de entorno mínimas (antes de cualquier import de app.*)
# -----------------------------------------------------------------------------
os.environ["PYTHON_ENV"] = "test"
os.environ.setdefault("RAZORPAY_KEY_ID", "k1")
os.environ.setdefault("RAZORPAY_KEY_SECRET", "test_signing_secret")
os.environ.setdefault("USE_PAYMENT_STUBS", "true")

# Asegura la raíz del repo en sys.path
BACKEND_ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(BACKEND_ROOT) not in sys.path:
    sys.path.insert(0, str(BACKEND_ROOT))

import pytest
from asgi_lifespan import LifespanManager
from httpx import ASGITransport, AsyncClient
from pydantic import SecretStr

from app.modules.admin.services import EventAdminService
from app.modules.events.models import Event, Subevent
from app.modules.payments.gateways import StubGateway
from app.modules.payments.schemas import PaymentConfirmation, RegistrationIntent
from app.modules.payments.services import PaymentReconciliationService, compute_signature
from app.shared.config.settings_payments import PaymentsSettings
from app.shared.config.settings_testing import EnvTestingSettings
from app.shared.database import Database

SIGNING_SECRET = "test_signing_secret"
ADMIN_TOKEN = "test-admin-token"
SQLITE_MEMORY_URL = "sqlite+aiosqlite:///:memory:"

EVENT_ID = 7
SUBEVENT_ID = 3
FEE = 50000


# -----------------------------------------------------------------------------
# Helpers
# -----------------------------------------------------------------------------
def _make_intent(**overrides) -> RegistrationIntent:
    data = {
        "student_id": 42,
        "event_id": EVENT_ID,
        "subevent_id": SUBEVENT_ID,
        "student_name": "Asha Rao",
        "student_email": "asha.rao@college.edu",
        "fee": FEE,
    }
    data.update(overrides)
    return RegistrationIntent(**data)


def _sign(order_id: str, payment_id: str, secret: str = SIGNING_SECRET) -> str:
    return compute_signature(order_id, payment_id, secret)


def _make_confirmation(
    order_id: str = "order_abc",
    payment_id: str = "pay_xyz",
    signature: str | None = None,
    **intent_overrides,
) -> PaymentConfirmation:
    return PaymentConfirmation(
        order_id=order_id,
        payment_id=payment_id,
        signature=signature if signature is not None else _sign(order_id, payment_id),
        registration_intent=_make_intent(**intent_overrides),
    )


async def seed_catalog(database: Database) -> None:
    """Evento 7 con sub-evento 3 (cuota 50000) y sub-evento 4 (cuota 20000)."""
    async with database.session_scope() as session:
        session.add(Event(id=EVENT_ID, event_name="TechFest 2026", venue="Main Auditorium"))
        await session.flush()
        session.add_all(
            [
                Subevent(id=SUBEVENT_ID, event_id=EVENT_ID, title="Hackathon", fee=FEE),
                Subevent(id=4, event_id=EVENT_ID, title="Quiz", fee=20000),
            ]
        )
        await session.commit()


@pytest.fixture
def make_intent():
    return _make_intent


@pytest.fixture
def make_confirmation():
    return _make_confirmation


@pytest.fixture
def sign():
    return _sign


# -----------------------------------------------------------------------------
# Base de datos y servicios
# -----------------------------------------------------------------------------
@pytest.fixture
async def db() -> AsyncIterator[Database]:
    database = Database(SQLITE_MEMORY_URL)
    await database.create_all()
    await seed_catalog(database)
    try:
        yield database
    finally:
        await database.dispose()


@pytest.fixture
def gateway() -> StubGateway:
    return StubGateway(key_id="k1", order_ids=["order_abc"])


@pytest.fixture
def service(db: Database, gateway: StubGateway) -> PaymentReconciliationService:
    return PaymentReconciliationService(
        db.sessionmaker,
        gateway,
        signing_secret=SIGNING_SECRET,
        currency="INR",
        max_amount_minor=10_000_000,
    )


@pytest.fixture
def admin_service(db: Database) -> EventAdminService:
    return EventAdminService(db.sessionmaker)


# -----------------------------------------------------------------------------
# App FastAPI y cliente httpx (con ciclo de vida)
# -----------------------------------------------------------------------------
@pytest.fixture
def test_settings() -> EnvTestingSettings:
    return EnvTestingSettings(
        _env_file=None,
        db_url=SQLITE_MEMORY_URL,
        admin_api_token=SecretStr(ADMIN_TOKEN),
        allowed_origins="http://localhost:5173",
    )


@pytest.fixture
def test_payments_settings() -> PaymentsSettings:
    return PaymentsSettings(
        _env_file=None,
        razorpay_key_id="k1",
        razorpay_key_secret=SecretStr(SIGNING_SECRET),
        payments_currency="INR",
        use_payment_stubs=True,
    )


@pytest.fixture
def app(test_settings, test_payments_settings, gateway):
    """App construida con settings de prueba y el gateway stub del test."""
    from app.main import create_app

    return create_app(
        settings=test_settings,
        payments_settings=test_payments_settings,
        gateway=gateway,
    )


@pytest.fixture
async def async_client(app) -> AsyncIterator[AsyncClient]:
    """
    Cliente HTTP asíncrono contra la app con ASGITransport y gestión de
    startup/shutdown mediante asgi-lifespan. Siembra el catálogo base.
    """
    async with LifespanManager(app):
        await seed_catalog(app.state.db)
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://testserver") as client:
            yield client


@pytest.fixture
def admin_headers() -> dict:
    return {"Authorization": f"Bearer {ADMIN_TOKEN}"}
