# -*- coding: utf-8 -*-
"""
backend/tests/modules/registrations/test_registration_state.py

Máquina de estados del checkout y restricciones de la tabla registrations.

Autor: Campus Connect
Fecha: 2026-10-14
"""

import pytest
from sqlalchemy.exc import IntegrityError

from app.modules.registrations.enums import CheckoutState, PaymentStatus
from app.modules.registrations.models import Registration


class TestCheckoutState:
    def test_happy_path_transitions(self):
        assert CheckoutState.INITIATED.can_transition_to(CheckoutState.ORDER_CREATED)
        assert CheckoutState.ORDER_CREATED.can_transition_to(CheckoutState.CONFIRMED)
        assert CheckoutState.ORDER_CREATED.can_transition_to(CheckoutState.ABANDONED)

    @pytest.mark.parametrize("state", [CheckoutState.CONFIRMED, CheckoutState.ABANDONED])
    def test_terminal_states(self, state):
        assert state.is_terminal
        assert not any(state.can_transition_to(target) for target in CheckoutState)

    def test_cannot_confirm_without_order(self):
        assert not CheckoutState.INITIATED.can_transition_to(CheckoutState.CONFIRMED)


def _registration(**overrides) -> Registration:
    data = dict(
        student_id=42,
        event_id=7,
        subevent_id=3,
        student_name="Asha Rao",
        student_email="asha.rao@college.edu",
        fee=50000,
        payment_status=PaymentStatus.PAID,
    )
    data.update(overrides)
    return Registration(**data)


class TestRegistrationConstraints:
    @pytest.mark.asyncio
    async def test_second_paid_row_violates_unique_index(self, db):
        async with db.sessionmaker() as session, session.begin():
            session.add(_registration(gateway_payment_id="pay_1"))

        with pytest.raises(IntegrityError):
            async with db.sessionmaker() as session, session.begin():
                session.add(_registration(gateway_payment_id="pay_2"))

    @pytest.mark.asyncio
    async def test_failed_attempts_do_not_block_paid_row(self, db):
        async with db.sessionmaker() as session, session.begin():
            session.add(_registration(payment_status=PaymentStatus.FAILED))
            session.add(_registration(payment_status=PaymentStatus.PENDING))
            session.add(_registration(gateway_payment_id="pay_1"))

    @pytest.mark.asyncio
    async def test_payment_id_is_unique(self, db):
        async with db.sessionmaker() as session, session.begin():
            session.add(_registration(gateway_payment_id="pay_1"))

        with pytest.raises(IntegrityError):
            async with db.sessionmaker() as session, session.begin():
                session.add(_registration(subevent_id=4, fee=20000, gateway_payment_id="pay_1"))

    @pytest.mark.asyncio
    async def test_subevent_must_exist(self, db):
        with pytest.raises(IntegrityError):
            async with db.sessionmaker() as session, session.begin():
                session.add(_registration(subevent_id=99, gateway_payment_id="pay_1"))

# Fin del archivo backend/tests/modules/registrations/test_registration_state.py
