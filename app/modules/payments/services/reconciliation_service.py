# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/services/reconciliation_service.py

Servicio de conciliación de pagos de inscripciones.

Flujo:
    create_order(intent)          → orden en el gateway (sin fila de inscripción)
    (widget del gateway en el cliente)
    confirm_payment(confirmation) → verifica firma HMAC y persiste, en una
                                    sola transacción, exactamente una
                                    inscripción pagada
    cancel(order_id)              → el usuario abandonó el checkout

Garantías:
- A lo sumo una inscripción pagada por (student_id, event_id, subevent_id):
  re-check transaccional + índice único parcial. La violación del índice
  en una carrera se traduce a AlreadyRegistered.
- Un mismo payment_id del gateway se concilia a lo sumo una vez.
- Ningún error deja una inscripción en un estado distinto de pagada o
  inexistente.
- La auditoría (payment_attempts) se escribe fuera de la transacción de la
  inscripción y nunca altera el resultado del flujo.

Autor: Campus Connect
Fecha: 2026-10-07
"""

from __future__ import annotations

import logging
import uuid
from time import perf_counter
from typing import Optional, Sequence

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.modules.events.repositories import SubeventRepository
from app.modules.payments.errors import (
    AlreadyRegistered,
    GatewayUnavailable,
    InvalidSignature,
    StorageError,
    ValidationError,
)
from app.modules.payments.gateways import GatewayOrder, PaymentGateway
from app.modules.payments.metrics import (
    payments_checkouts_abandoned_total,
    payments_confirmations_total,
    payments_order_latency_seconds,
    payments_orders_total,
    payments_signature_rejections_total,
)
from app.modules.payments.schemas import PaymentConfirmation, RegistrationIntent
from app.modules.payments.services.signature import verify_signature
from app.modules.payments.services.validators import (
    validate_confirmation,
    validate_registration_intent,
)
from app.modules.registrations.enums import AttemptState, CheckoutState, PaymentStatus
from app.modules.registrations.models import PaymentAttempt, Registration
from app.modules.registrations.repositories import (
    PaymentAttemptRepository,
    RegistrationRepository,
)

logger = logging.getLogger(__name__)


class PaymentReconciliationService:
    """
    Orquesta la creación de órdenes y la conciliación de confirmaciones.

    Se construye explícitamente con la fábrica de sesiones, el cliente del
    gateway, el secreto compartido de firma y la moneda del gateway.
    """

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        gateway: PaymentGateway,
        *,
        signing_secret: str,
        currency: str = "INR",
        max_amount_minor: Optional[int] = None,
        registration_repo: Optional[RegistrationRepository] = None,
        attempt_repo: Optional[PaymentAttemptRepository] = None,
        subevent_repo: Optional[SubeventRepository] = None,
    ) -> None:
        self._session_factory = session_factory
        self.gateway = gateway
        self._signing_secret = signing_secret
        self.currency = currency
        self.max_amount_minor = max_amount_minor
        self.registration_repo = registration_repo or RegistrationRepository()
        self.attempt_repo = attempt_repo or PaymentAttemptRepository()
        self.subevent_repo = subevent_repo or SubeventRepository()

    # ------------------------------------------------------------------
    # create_order
    # ------------------------------------------------------------------
    async def create_order(self, intent: RegistrationIntent) -> GatewayOrder:
        """
        Crea una orden en el gateway por `intent.fee` unidades menores.

        Raises:
            ValidationError: intent inválido o cuota distinta a la del catálogo.
            AlreadyRegistered: ya existe inscripción pagada (no contacta al gateway).
            GatewayUnavailable: el gateway no pudo crear la orden.
            StorageError: fallo consultando el almacenamiento.
        """
        try:
            validate_registration_intent(intent, max_amount_minor=self.max_amount_minor)
        except ValidationError:
            payments_orders_total.labels(self.gateway.name, "validation_error").inc()
            raise

        try:
            async with self._session_factory() as session:
                await self._check_catalog(session, intent)
                existing = await self.registration_repo.get_paid_registration(
                    session,
                    student_id=intent.student_id,
                    event_id=intent.event_id,
                    subevent_id=intent.subevent_id,
                )
        except ValidationError:
            payments_orders_total.labels(self.gateway.name, "validation_error").inc()
            raise
        except SQLAlchemyError as e:
            logger.exception("create_order_storage_error student_id=%s", intent.student_id)
            raise StorageError() from e

        if existing is not None:
            payments_orders_total.labels(self.gateway.name, "already_registered").inc()
            logger.info(
                "create_order_already_registered student_id=%s event_id=%s subevent_id=%s registration_id=%s",
                intent.student_id,
                intent.event_id,
                intent.subevent_id,
                existing.id,
            )
            raise AlreadyRegistered(
                student_id=intent.student_id,
                event_id=intent.event_id,
                subevent_id=intent.subevent_id,
            )

        receipt = f"rcpt_{intent.student_id}_{intent.subevent_id}_{uuid.uuid4().hex[:10]}"
        notes = {
            "student_id": str(intent.student_id),
            "event_id": str(intent.event_id),
            "subevent_id": str(intent.subevent_id),
        }

        start = perf_counter()
        try:
            order = await self.gateway.create_order(intent.fee, self.currency, receipt, notes)
        except GatewayUnavailable:
            payments_orders_total.labels(self.gateway.name, "gateway_unavailable").inc()
            raise
        finally:
            payments_order_latency_seconds.labels(self.gateway.name).observe(perf_counter() - start)

        payments_orders_total.labels(self.gateway.name, "created").inc()
        logger.info(
            "payment_order_created order_id=%s student_id=%s event_id=%s subevent_id=%s amount=%s currency=%s",
            order.order_id,
            intent.student_id,
            intent.event_id,
            intent.subevent_id,
            order.amount,
            order.currency,
        )

        await self._record_attempt(
            order_id=order.order_id,
            state=AttemptState.ORDER_CREATED,
            intent=intent,
            amount=order.amount,
            currency=order.currency,
        )
        return order

    # ------------------------------------------------------------------
    # confirm_payment
    # ------------------------------------------------------------------
    async def confirm_payment(self, confirmation: PaymentConfirmation) -> Registration:
        """
        Verifica la confirmación firmada y persiste la inscripción pagada.

        Raises:
            ValidationError: datos inválidos o que no corresponden a la orden.
            InvalidSignature: la firma no corresponde (posible manipulación).
            AlreadyRegistered: ya existe inscripción pagada o el pago ya fue conciliado.
            StorageError: fallo de almacenamiento (rollback completo).
        """
        intent = confirmation.registration_intent
        try:
            validate_confirmation(confirmation)
            validate_registration_intent(intent, max_amount_minor=self.max_amount_minor)
        except ValidationError:
            payments_confirmations_total.labels("validation_error").inc()
            raise

        if not verify_signature(
            confirmation.order_id,
            confirmation.payment_id,
            confirmation.signature,
            self._signing_secret,
        ):
            payments_signature_rejections_total.inc()
            payments_confirmations_total.labels("invalid_signature").inc()
            logger.warning(
                "payment_signature_rejected potential_tampering order_id=%s payment_id=%s student_id=%s",
                confirmation.order_id,
                confirmation.payment_id,
                intent.student_id,
            )
            await self._record_attempt(
                order_id=confirmation.order_id,
                payment_id=confirmation.payment_id,
                state=AttemptState.REJECTED,
                intent=intent,
                amount=intent.fee,
                reason="invalid_signature",
            )
            raise InvalidSignature(order_id=confirmation.order_id, payment_id=confirmation.payment_id)

        try:
            registration = await self._persist_paid_registration(confirmation)
        except ValidationError as e:
            payments_confirmations_total.labels("validation_error").inc()
            await self._record_attempt(
                order_id=confirmation.order_id,
                payment_id=confirmation.payment_id,
                state=AttemptState.REJECTED,
                intent=intent,
                amount=intent.fee,
                reason=e.message,
            )
            raise
        except AlreadyRegistered:
            payments_confirmations_total.labels("already_registered").inc()
            raise
        except StorageError:
            payments_confirmations_total.labels("storage_error").inc()
            raise

        payments_confirmations_total.labels("confirmed").inc()
        logger.info(
            "registration_confirmed registration_id=%s order_id=%s payment_id=%s student_id=%s event_id=%s subevent_id=%s",
            registration.id,
            confirmation.order_id,
            confirmation.payment_id,
            registration.student_id,
            registration.event_id,
            registration.subevent_id,
        )
        await self._record_attempt(
            order_id=confirmation.order_id,
            payment_id=confirmation.payment_id,
            state=AttemptState.CONFIRMED,
            intent=intent,
            amount=registration.fee,
        )
        return registration

    async def _persist_paid_registration(self, confirmation: PaymentConfirmation) -> Registration:
        intent = confirmation.registration_intent
        async with self._session_factory() as session:
            try:
                async with session.begin():
                    await self._check_order_binding(session, confirmation)
                    # Sin fila order_created el catálogo es la única referencia de la cuota
                    await self._check_catalog(session, intent)
                    await self._ensure_not_reconciled(session, confirmation)

                    return await self.registration_repo.create(
                        session,
                        student_id=intent.student_id,
                        event_id=intent.event_id,
                        subevent_id=intent.subevent_id,
                        student_name=intent.student_name.strip(),
                        student_email=str(intent.student_email),
                        fee=intent.fee,
                        payment_status=PaymentStatus.PAID,
                        gateway_order_id=confirmation.order_id,
                        gateway_payment_id=confirmation.payment_id,
                    )
            except IntegrityError as e:
                # Carrera perdida contra otra confirmación: el índice único decide
                logger.info(
                    "registration_unique_conflict order_id=%s payment_id=%s",
                    confirmation.order_id,
                    confirmation.payment_id,
                )
                await self._raise_conflict_or_storage_error(session, confirmation, e)
            except SQLAlchemyError as e:
                logger.exception(
                    "registration_storage_error order_id=%s payment_id=%s",
                    confirmation.order_id,
                    confirmation.payment_id,
                )
                raise StorageError() from e

        raise StorageError()  # pragma: no cover

    async def _ensure_not_reconciled(
        self,
        session: AsyncSession,
        confirmation: PaymentConfirmation,
    ) -> None:
        intent = confirmation.registration_intent
        existing = await self.registration_repo.get_paid_registration(
            session,
            student_id=intent.student_id,
            event_id=intent.event_id,
            subevent_id=intent.subevent_id,
        )
        if existing is None:
            existing = await self.registration_repo.get_by_gateway_payment_id(
                session, confirmation.payment_id
            )
        if existing is not None:
            logger.info(
                "registration_already_reconciled registration_id=%s order_id=%s payment_id=%s",
                existing.id,
                confirmation.order_id,
                confirmation.payment_id,
            )
            raise AlreadyRegistered(
                student_id=intent.student_id,
                event_id=intent.event_id,
                subevent_id=intent.subevent_id,
            )

    async def _raise_conflict_or_storage_error(
        self,
        session: AsyncSession,
        confirmation: PaymentConfirmation,
        error: IntegrityError,
    ) -> None:
        """Tras un IntegrityError: AlreadyRegistered si hay conflicto real, si no StorageError."""
        intent = confirmation.registration_intent
        try:
            async with session.begin():
                await self._ensure_not_reconciled(session, confirmation)
        except AlreadyRegistered:
            raise
        except SQLAlchemyError as e:
            logger.exception("registration_conflict_recheck_failed order_id=%s", confirmation.order_id)
            raise StorageError() from e

        logger.error(
            "registration_integrity_error_without_conflict order_id=%s student_id=%s error=%s",
            confirmation.order_id,
            intent.student_id,
            error,
        )
        raise StorageError() from error

    # ------------------------------------------------------------------
    # cancel / consultas
    # ------------------------------------------------------------------
    async def cancel(self, order_id: str, reason: Optional[str] = None) -> CheckoutState:
        """
        El usuario abandonó el checkout. Ninguna inscripción cambia.

        Returns:
            Estado del checkout tras la cancelación (ABANDONED, o el estado
            terminal previo si ya estaba confirmado/abandonado).
        """
        if not order_id or not order_id.strip():
            raise ValidationError("order_id is required", field="order_id")

        try:
            async with self._session_factory() as session:
                attempts = await self.attempt_repo.list_by_order(session, order_id)
        except SQLAlchemyError as e:
            logger.exception("checkout_cancel_storage_error order_id=%s", order_id)
            raise StorageError() from e

        current = _checkout_state(attempts)
        if not current.can_transition_to(CheckoutState.ABANDONED):
            logger.info("checkout_cancel_ignored order_id=%s state=%s", order_id, current)
            return current

        created = next((a for a in attempts if a.state == AttemptState.ORDER_CREATED), None)
        payments_checkouts_abandoned_total.inc()
        logger.info("checkout_abandoned order_id=%s reason=%s", order_id, reason or "-")
        await self._record_attempt(
            order_id=order_id,
            state=AttemptState.ABANDONED,
            reason=reason,
            student_id=created.student_id if created else None,
            event_id=created.event_id if created else None,
            subevent_id=created.subevent_id if created else None,
            amount=created.amount if created else None,
            currency=created.currency if created else None,
        )
        return CheckoutState.ABANDONED

    async def is_registered(self, student_id: int, event_id: int, subevent_id: int) -> bool:
        try:
            async with self._session_factory() as session:
                existing = await self.registration_repo.get_paid_registration(
                    session,
                    student_id=student_id,
                    event_id=event_id,
                    subevent_id=subevent_id,
                )
        except SQLAlchemyError as e:
            logger.exception("registration_status_storage_error student_id=%s", student_id)
            raise StorageError() from e
        return existing is not None

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    async def _check_catalog(self, session: AsyncSession, intent: RegistrationIntent) -> None:
        """El sub-evento existe, pertenece al evento y la cuota coincide."""
        subevent = await self.subevent_repo.get_for_event(session, intent.event_id, intent.subevent_id)
        if subevent is None:
            raise ValidationError("subevent does not belong to event", field="subevent_id")
        if intent.fee != subevent.fee:
            logger.warning(
                "registration_fee_mismatch student_id=%s subevent_id=%s fee=%s expected=%s",
                intent.student_id,
                intent.subevent_id,
                intent.fee,
                subevent.fee,
            )
            raise ValidationError("fee does not match the sub-event fee", field="fee")

    async def _check_order_binding(
        self,
        session: AsyncSession,
        confirmation: PaymentConfirmation,
    ) -> None:
        """Si la orden fue creada por este servidor, el intent debe coincidir con ella."""
        attempt = await self.attempt_repo.get_order_created(session, confirmation.order_id)
        if attempt is None:
            return

        intent = confirmation.registration_intent
        expected = (attempt.student_id, attempt.event_id, attempt.subevent_id, attempt.amount)
        received = (intent.student_id, intent.event_id, intent.subevent_id, intent.fee)
        if expected != received:
            logger.warning(
                "registration_order_mismatch order_id=%s expected=%s received=%s",
                confirmation.order_id,
                expected,
                received,
            )
            raise ValidationError("registration intent does not match the order", field="registration_intent")

    async def _record_attempt(
        self,
        *,
        order_id: str,
        state: AttemptState,
        intent: Optional[RegistrationIntent] = None,
        payment_id: Optional[str] = None,
        amount: Optional[int] = None,
        currency: Optional[str] = None,
        reason: Optional[str] = None,
        student_id: Optional[int] = None,
        event_id: Optional[int] = None,
        subevent_id: Optional[int] = None,
    ) -> None:
        """Escribe una fila de auditoría. Un fallo aquí se registra y no se propaga."""
        if intent is not None:
            student_id, event_id, subevent_id = intent.student_id, intent.event_id, intent.subevent_id
        try:
            async with self._session_factory() as session, session.begin():
                await self.attempt_repo.create(
                    session,
                    order_id=order_id,
                    payment_id=payment_id,
                    student_id=student_id,
                    event_id=event_id,
                    subevent_id=subevent_id,
                    amount=amount,
                    currency=currency or self.currency,
                    state=state,
                    reason=reason[:500] if reason else None,
                )
        except SQLAlchemyError:
            logger.exception("payment_attempt_audit_failed order_id=%s state=%s", order_id, state)


def _checkout_state(attempts: Sequence[PaymentAttempt]) -> CheckoutState:
    states = {a.state for a in attempts}
    if AttemptState.CONFIRMED in states:
        return CheckoutState.CONFIRMED
    if AttemptState.ABANDONED in states:
        return CheckoutState.ABANDONED
    # Sin auditoría la orden pudo crearse igual (la escritura es best-effort)
    return CheckoutState.ORDER_CREATED


__all__ = ["PaymentReconciliationService"]

# Fin del archivo backend/app/modules/payments/services/reconciliation_service.py
