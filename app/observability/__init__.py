# -*- coding: utf-8 -*-
"""
backend/app/observability/__init__.py

Observabilidad HTTP (Prometheus) del backend de Hitos.
"""

from .prom import setup_observability, mount_metrics

__all__ = ["setup_observability", "mount_metrics"]
