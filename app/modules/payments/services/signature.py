# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/services/signature.py

Firma HMAC-SHA256 de las confirmaciones de pago del gateway.

El widget del gateway devuelve (order_id, payment_id, signature) donde
signature = hex(HMAC-SHA256(key_secret, f"{order_id}|{payment_id}")).
El servidor recalcula la firma con el secreto compartido y compara en
tiempo constante.

Autor: Campus Connect
Fecha: 2026-10-06
"""

from __future__ import annotations

import hashlib
import hmac
import logging

logger = logging.getLogger(__name__)


def compute_signature(order_id: str, payment_id: str, secret: str) -> str:
    """Firma hexadecimal (minúsculas) de `order_id|payment_id`."""
    message = f"{order_id}|{payment_id}".encode("utf-8")
    return hmac.new(secret.encode("utf-8"), message, hashlib.sha256).hexdigest()


def verify_signature(order_id: str, payment_id: str, signature: str, secret: str) -> bool:
    """
    Verifica la firma de una confirmación.

    Returns:
        True si la firma corresponde exactamente a (order_id, payment_id).
    """
    if not secret:
        logger.error("payment_signature_secret_not_configured")
        return False
    if not signature:
        logger.warning("payment_signature_missing order_id=%s", order_id)
        return False

    expected = compute_signature(order_id, payment_id, secret)
    if hmac.compare_digest(expected.encode("ascii"), signature.encode("utf-8")):
        logger.debug("payment_signature_verified order_id=%s", order_id)
        return True

    logger.warning(
        "payment_signature_mismatch order_id=%s payment_id=%s",
        order_id,
        payment_id,
    )
    return False


__all__ = ["compute_signature", "verify_signature"]

# Fin del archivo backend/app/modules/payments/services/signature.py
