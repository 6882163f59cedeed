# -*- coding: utf-8 -*-
"""
backend/app/modules/milestones/metrics/__init__.py

Métricas Prometheus del módulo de hitos.
"""
