# -*- coding: utf-8 -*-
"""
backend/app/modules/registrations/__init__.py

Inscripciones de estudiantes y auditoría de intentos de pago.

Autor: Campus Connect
Fecha: 2026-10-03
"""
