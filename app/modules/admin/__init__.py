# -*- coding: utf-8 -*-
"""
backend/app/modules/admin/__init__.py

Módulo de administración de Campus Connect.

Proporciona endpoints administrativos para:
- Alta, edición y borrado de eventos y sub-eventos
- Consulta de inscripciones por evento
- Marcado de asistencia y asignación de ranking

Autor: Campus Connect
Fecha: 2026-10-08
"""
