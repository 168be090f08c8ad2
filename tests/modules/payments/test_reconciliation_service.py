# -*- coding: utf-8 -*-
"""
backend/tests/modules/payments/test_reconciliation_service.py

Tests del servicio de conciliación de pagos (SQLite en memoria + gateway stub).

Cubre:
- Escenario feliz: orden → confirmación firmada → inscripción pagada
- Duplicados (mismo sub-evento, mismo payment_id) → AlreadyRegistered
- Firma manipulada → InvalidSignature, sin fila y con auditoría 'rejected'
- Pre-check en create_order sin contactar al gateway
- Cuota / sub-evento inconsistentes con el catálogo
- Carrera resuelta por el índice único (IntegrityError → AlreadyRegistered)
- Fallo de almacenamiento → StorageError sin escrituras parciales
- Cancelación de checkout

Autor: Campus Connect
Fecha: 2026-10-12
"""

import pytest
from sqlalchemy import func, select
from sqlalchemy.exc import OperationalError

from app.modules.payments.errors import (
    AlreadyRegistered,
    GatewayUnavailable,
    InvalidSignature,
    StorageError,
    ValidationError,
)
from app.modules.payments.gateways import StubGateway
from app.modules.payments.services import PaymentReconciliationService
from app.modules.registrations.enums import AttemptState, CheckoutState, PaymentStatus
from app.modules.registrations.models import PaymentAttempt, Registration
from app.modules.registrations.repositories import PaymentAttemptRepository


async def _count_registrations(db) -> int:
    async with db.sessionmaker() as session:
        result = await session.execute(select(func.count(Registration.id)))
        return int(result.scalar_one())


async def _attempts(db, order_id: str) -> list[PaymentAttempt]:
    async with db.sessionmaker() as session:
        return list(await PaymentAttemptRepository().list_by_order(session, order_id))


# ---------------------------------------------------------------------------
# create_order
# ---------------------------------------------------------------------------
class TestCreateOrder:
    @pytest.mark.asyncio
    async def test_creates_order_for_fee(self, service, gateway, db, make_intent):
        order = await service.create_order(make_intent())

        assert order.order_id == "order_abc"
        assert order.key == "k1"
        assert order.amount == 50000
        assert order.currency == "INR"

        assert len(gateway.calls) == 1
        call = gateway.calls[0]
        assert call.amount == 50000
        assert call.currency == "INR"
        assert call.notes == {"student_id": "42", "event_id": "7", "subevent_id": "3"}

        # Crear la orden no crea inscripción
        assert await _count_registrations(db) == 0

        attempts = await _attempts(db, "order_abc")
        assert [a.state for a in attempts] == [AttemptState.ORDER_CREATED]
        assert attempts[0].amount == 50000

    @pytest.mark.asyncio
    async def test_already_registered_does_not_contact_gateway(
        self, service, gateway, make_intent, make_confirmation
    ):
        await service.confirm_payment(make_confirmation())

        with pytest.raises(AlreadyRegistered) as exc:
            await service.create_order(make_intent())

        assert exc.value.to_dict()["student_id"] == 42
        assert gateway.calls == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize("fee", [0, -1])
    async def test_non_positive_fee(self, service, gateway, make_intent, fee):
        with pytest.raises(ValidationError) as exc:
            await service.create_order(make_intent(fee=fee))

        assert exc.value.field == "fee"
        assert gateway.calls == []

    @pytest.mark.asyncio
    async def test_fee_must_match_catalog(self, service, gateway, make_intent):
        with pytest.raises(ValidationError) as exc:
            await service.create_order(make_intent(fee=100))

        assert exc.value.field == "fee"
        assert gateway.calls == []

    @pytest.mark.asyncio
    async def test_subevent_must_belong_to_event(self, service, gateway, make_intent):
        with pytest.raises(ValidationError) as exc:
            await service.create_order(make_intent(subevent_id=99))

        assert exc.value.field == "subevent_id"
        assert gateway.calls == []

    @pytest.mark.asyncio
    async def test_fee_above_configured_maximum(self, db, gateway, make_intent):
        service = PaymentReconciliationService(
            db.sessionmaker,
            gateway,
            signing_secret="test_signing_secret",
            max_amount_minor=1000,
        )
        with pytest.raises(ValidationError):
            await service.create_order(make_intent())
        assert gateway.calls == []

    @pytest.mark.asyncio
    async def test_gateway_unavailable(self, db, make_intent):
        down = StubGateway(key_id="k1", unavailable=True)
        service = PaymentReconciliationService(
            db.sessionmaker,
            down,
            signing_secret="test_signing_secret",
        )

        with pytest.raises(GatewayUnavailable) as exc:
            await service.create_order(make_intent())

        assert exc.value.retryable is True
        assert len(down.calls) == 1
        assert await _count_registrations(db) == 0


# ---------------------------------------------------------------------------
# confirm_payment
# ---------------------------------------------------------------------------
class TestConfirmPayment:
    @pytest.mark.asyncio
    async def test_happy_path(self, service, db, make_intent, make_confirmation):
        order = await service.create_order(make_intent())
        registration = await service.confirm_payment(
            make_confirmation(order_id=order.order_id, payment_id="pay_xyz")
        )

        assert registration.id is not None
        assert registration.payment_status == PaymentStatus.PAID
        assert registration.student_id == 42
        assert registration.event_id == 7
        assert registration.subevent_id == 3
        assert registration.fee == 50000
        assert registration.gateway_order_id == "order_abc"
        assert registration.gateway_payment_id == "pay_xyz"
        assert registration.attendance is False
        assert registration.rank is None

        assert await service.is_registered(42, 7, 3) is True
        assert await _count_registrations(db) == 1

        states = [a.state for a in await _attempts(db, "order_abc")]
        assert states == [AttemptState.ORDER_CREATED, AttemptState.CONFIRMED]

    @pytest.mark.asyncio
    async def test_confirm_without_prior_order_record(self, service, db, make_confirmation):
        registration = await service.confirm_payment(make_confirmation())

        assert registration.is_paid
        assert registration.fee == 50000
        assert await _count_registrations(db) == 1

    @pytest.mark.asyncio
    async def test_fee_must_match_catalog_without_order_record(self, service, db, make_confirmation):
        confirmation = make_confirmation(order_id="order_foreign", payment_id="pay_1", fee=1)

        with pytest.raises(ValidationError) as exc:
            await service.confirm_payment(confirmation)

        assert exc.value.field == "fee"
        assert await _count_registrations(db) == 0
        assert await service.is_registered(42, 7, 3) is False

        states = [a.state for a in await _attempts(db, "order_foreign")]
        assert states == [AttemptState.REJECTED]

    @pytest.mark.asyncio
    async def test_duplicate_confirmation(self, service, db, make_confirmation):
        await service.confirm_payment(make_confirmation(payment_id="pay_1"))

        with pytest.raises(AlreadyRegistered) as exc:
            await service.confirm_payment(make_confirmation(order_id="order_2", payment_id="pay_2"))

        assert exc.value.kind.http_status == 409
        assert exc.value.retryable is False
        assert await _count_registrations(db) == 1

    @pytest.mark.asyncio
    async def test_replayed_payment_id_on_other_subevent(self, service, db, make_confirmation):
        await service.confirm_payment(make_confirmation(payment_id="pay_xyz"))

        replay = make_confirmation(
            order_id="order_other",
            payment_id="pay_xyz",
            subevent_id=4,
            fee=20000,
        )
        with pytest.raises(AlreadyRegistered):
            await service.confirm_payment(replay)

        assert await _count_registrations(db) == 1

    @pytest.mark.asyncio
    async def test_tampered_payment_id(self, service, db, sign, make_confirmation):
        confirmation = make_confirmation(
            payment_id="pay_xyZ",
            signature=sign("order_abc", "pay_xyz"),
        )

        with pytest.raises(InvalidSignature) as exc:
            await service.confirm_payment(confirmation)

        assert exc.value.to_dict()["error_code"] == "invalid_signature"
        assert await _count_registrations(db) == 0
        assert await service.is_registered(42, 7, 3) is False

        attempts = await _attempts(db, "order_abc")
        assert [a.state for a in attempts] == [AttemptState.REJECTED]
        assert attempts[0].reason == "invalid_signature"
        assert attempts[0].payment_id == "pay_xyZ"

    @pytest.mark.asyncio
    async def test_signature_with_wrong_secret(self, service, db, sign, make_confirmation):
        confirmation = make_confirmation(signature=sign("order_abc", "pay_xyz", "wrong_secret"))

        with pytest.raises(InvalidSignature):
            await service.confirm_payment(confirmation)
        assert await _count_registrations(db) == 0

    @pytest.mark.asyncio
    async def test_intent_must_match_created_order(self, service, db, make_intent, make_confirmation):
        await service.create_order(make_intent())

        with pytest.raises(ValidationError) as exc:
            await service.confirm_payment(make_confirmation(student_id=43))

        assert exc.value.field == "registration_intent"
        assert await _count_registrations(db) == 0

        states = [a.state for a in await _attempts(db, "order_abc")]
        assert states == [AttemptState.ORDER_CREATED, AttemptState.REJECTED]

    @pytest.mark.asyncio
    async def test_unknown_subevent_is_rejected(self, service, db, make_confirmation):
        with pytest.raises(ValidationError) as exc:
            await service.confirm_payment(make_confirmation(subevent_id=99))

        assert exc.value.field == "subevent_id"
        assert await _count_registrations(db) == 0

    @pytest.mark.asyncio
    async def test_blank_signature_is_validation_error(self, service, make_confirmation):
        with pytest.raises(ValidationError):
            await service.confirm_payment(make_confirmation(signature="  "))

    @pytest.mark.asyncio
    async def test_unique_index_conflict_maps_to_already_registered(
        self, service, db, make_confirmation, monkeypatch
    ):
        """Simula una carrera: el re-check no ve la fila y el índice único la rechaza."""
        await service.confirm_payment(make_confirmation(payment_id="pay_1"))

        original = service.registration_repo.get_paid_registration
        calls = {"n": 0}

        async def stale_first_read(session, **kwargs):
            calls["n"] += 1
            if calls["n"] == 1:
                return None
            return await original(session, **kwargs)

        monkeypatch.setattr(service.registration_repo, "get_paid_registration", stale_first_read)

        with pytest.raises(AlreadyRegistered):
            await service.confirm_payment(make_confirmation(order_id="order_2", payment_id="pay_2"))

        assert calls["n"] >= 2
        assert await _count_registrations(db) == 1

    @pytest.mark.asyncio
    async def test_storage_failure_rolls_back(self, service, db, make_confirmation, monkeypatch):
        async def broken_create(session, **fields):
            raise OperationalError("INSERT INTO registrations", {}, Exception("disk I/O error"))

        monkeypatch.setattr(service.registration_repo, "create", broken_create)

        with pytest.raises(StorageError) as exc:
            await service.confirm_payment(make_confirmation())

        assert exc.value.retryable is True
        assert await _count_registrations(db) == 0

    @pytest.mark.asyncio
    async def test_audit_failure_does_not_change_outcome(self, service, db, make_confirmation, monkeypatch):
        async def broken_audit(session, **fields):
            raise OperationalError("INSERT INTO payment_attempts", {}, Exception("locked"))

        monkeypatch.setattr(service.attempt_repo, "create", broken_audit)

        registration = await service.confirm_payment(make_confirmation())

        assert registration.is_paid
        assert await _count_registrations(db) == 1


# ---------------------------------------------------------------------------
# cancel / is_registered
# ---------------------------------------------------------------------------
class TestCancel:
    @pytest.mark.asyncio
    async def test_cancel_created_order(self, service, db, make_intent):
        await service.create_order(make_intent())

        state = await service.cancel("order_abc", reason="closed widget")

        assert state == CheckoutState.ABANDONED
        attempts = await _attempts(db, "order_abc")
        assert [a.state for a in attempts] == [AttemptState.ORDER_CREATED, AttemptState.ABANDONED]
        assert attempts[-1].student_id == 42
        assert attempts[-1].reason == "closed widget"
        assert await _count_registrations(db) == 0

    @pytest.mark.asyncio
    async def test_cancel_twice_is_noop(self, service, db, make_intent):
        await service.create_order(make_intent())
        await service.cancel("order_abc")

        assert await service.cancel("order_abc") == CheckoutState.ABANDONED
        states = [a.state for a in await _attempts(db, "order_abc")]
        assert states.count(AttemptState.ABANDONED) == 1

    @pytest.mark.asyncio
    async def test_cancel_after_confirmation_keeps_registration(
        self, service, db, make_intent, make_confirmation
    ):
        await service.create_order(make_intent())
        await service.confirm_payment(make_confirmation())

        assert await service.cancel("order_abc") == CheckoutState.CONFIRMED
        assert await service.is_registered(42, 7, 3) is True

    @pytest.mark.asyncio
    async def test_cancel_requires_order_id(self, service):
        with pytest.raises(ValidationError):
            await service.cancel("  ")


@pytest.mark.asyncio
async def test_is_registered_false_for_unknown_student(service):
    assert await service.is_registered(1, 7, 3) is False

# Fin del archivo backend/tests/modules/payments/test_reconciliation_service.py
