# -*- coding: utf-8 -*-
"""
backend/app/modules/registrations/enums/checkout_state_enum.py

Estados de un intento de checkout (orden de pago + confirmación).

Máquina de estados:
    INITIATED → ORDER_CREATED → {CONFIRMED | ABANDONED}

CONFIRMED corresponde a exactamente una inscripción pagada persistida.

Autor: Campus Connect
Fecha: 2026-10-03
"""

from enum import StrEnum


class CheckoutState(StrEnum):
    INITIATED = "initiated"
    ORDER_CREATED = "order_created"
    CONFIRMED = "confirmed"
    ABANDONED = "abandoned"

    @property
    def is_terminal(self) -> bool:
        return self in (CheckoutState.CONFIRMED, CheckoutState.ABANDONED)

    def can_transition_to(self, target: "CheckoutState") -> bool:
        return target in _TRANSITIONS[self]


_TRANSITIONS: dict[CheckoutState, frozenset[CheckoutState]] = {
    CheckoutState.INITIATED: frozenset({CheckoutState.ORDER_CREATED}),
    CheckoutState.ORDER_CREATED: frozenset({CheckoutState.CONFIRMED, CheckoutState.ABANDONED}),
    CheckoutState.CONFIRMED: frozenset(),
    CheckoutState.ABANDONED: frozenset(),
}


__all__ = ["CheckoutState"]
