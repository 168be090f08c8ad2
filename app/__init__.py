# -*- coding: utf-8 -*-
"""
backend/app/__init__.py

Paquete principal 'app' del backend de Campus Connect.

Permite que los módulos internos se importen como 'app.*' cuando la raíz
del repositorio está en PYTHONPATH (o tras `pip install -e .`).

Autor: Campus Connect
Fecha: 2026-10-02
"""

# Fin del archivo backend/app/__init__.py
