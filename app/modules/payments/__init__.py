# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/__init__.py

Módulo de pagos de Campus Connect.

Gestiona el flujo de inscripción pagada:
- gateways: cliente de órdenes (Razorpay) y stub en memoria
- services: firma HMAC, validaciones y servicio de conciliación
- schemas: intent de inscripción, confirmación firmada, orden creada
- routes: /payments/orders, /payments/confirm, cancelación
- errors: ReconciliationErrorKind y excepciones tipadas

Autor: Campus Connect
Fecha: 2026-10-06
"""
