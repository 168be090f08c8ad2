# -*- coding: utf-8 -*-
"""
backend/tests/modules/payments/test_signature.py

Tests de la firma HMAC-SHA256 de confirmaciones de pago.

Autor: Campus Connect
Fecha: 2026-10-12
"""

import hashlib
import hmac

import pytest

from app.modules.payments.services import compute_signature, verify_signature

SECRET = "test_signing_secret"


def _flip_last_char(value: str) -> str:
    last = value[-1]
    return value[:-1] + ("0" if last != "0" else "1")


class TestComputeSignature:
    def test_matches_hmac_sha256_hex(self):
        expected = hmac.new(SECRET.encode(), b"order_abc|pay_xyz", hashlib.sha256).hexdigest()
        assert compute_signature("order_abc", "pay_xyz", SECRET) == expected

    def test_is_deterministic(self):
        first = compute_signature("order_abc", "pay_xyz", SECRET)
        second = compute_signature("order_abc", "pay_xyz", SECRET)
        assert first == second
        assert len(first) == 64
        assert first == first.lower()

    def test_separator_is_part_of_message(self):
        """"order_a|bc" y "order_ab|c" no deben firmar igual."""
        assert compute_signature("order_a", "bc", SECRET) != compute_signature("order_ab", "c", SECRET)


class TestVerifySignature:
    def test_valid_signature(self):
        signature = compute_signature("order_abc", "pay_xyz", SECRET)
        assert verify_signature("order_abc", "pay_xyz", signature, SECRET) is True

    def test_tampered_payment_id(self):
        signature = compute_signature("order_abc", "pay_xyz", SECRET)
        assert verify_signature("order_abc", "pay_xyZ", signature, SECRET) is False

    def test_tampered_order_id(self):
        signature = compute_signature("order_abc", "pay_xyz", SECRET)
        assert verify_signature("order_abd", "pay_xyz", signature, SECRET) is False

    def test_single_char_mutation_in_signature(self):
        signature = compute_signature("order_abc", "pay_xyz", SECRET)
        assert verify_signature("order_abc", "pay_xyz", _flip_last_char(signature), SECRET) is False

    def test_uppercase_signature_is_rejected(self):
        signature = compute_signature("order_abc", "pay_xyz", SECRET)
        assert verify_signature("order_abc", "pay_xyz", signature.upper(), SECRET) is False

    def test_wrong_secret(self):
        signature = compute_signature("order_abc", "pay_xyz", "other_secret")
        assert verify_signature("order_abc", "pay_xyz", signature, SECRET) is False

    @pytest.mark.parametrize(
        "signature,secret",
        [
            ("", SECRET),
            ("abc", ""),
        ],
    )
    def test_empty_values_are_rejected(self, signature, secret):
        assert verify_signature("order_abc", "pay_xyz", signature, secret) is False

    def test_non_ascii_signature_is_rejected(self):
        assert verify_signature("order_abc", "pay_xyz", "é" * 64, SECRET) is False

# Fin del archivo backend/tests/modules/payments/test_signature.py
