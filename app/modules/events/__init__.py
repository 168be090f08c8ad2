# -*- coding: utf-8 -*-
"""
backend/app/modules/events/__init__.py

Catálogo de eventos de Campus Connect.

Estructura:
- models: Event, Subevent
- repositories: acceso a events/subevents
- schemas: entrada/salida del catálogo, leaderboard y conteos
- routes: lecturas públicas (leaderboard, participantes)
- errors: errores de dominio (EventNotFound, RegistrationNotPaid, ...)

Autor: Campus Connect
Fecha: 2026-10-03
"""
