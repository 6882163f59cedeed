# -*- coding: utf-8 -*-
"""
backend/app/shared/core/__init__.py

Utilidades core compartidas del backend de Hitos.
Por ahora solo los helpers idempotentes de métricas Prometheus.

Autor: Ixchel Beristain
Fecha: 24/10/2025
"""

from .metrics_helpers import get_or_create_counter, get_or_create_histogram

__all__ = [
    "get_or_create_counter",
    "get_or_create_histogram",
]
