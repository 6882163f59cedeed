# -*- coding: utf-8 -*-
"""
backend/app/routes/__init__.py

Ensamblador principal de ruteadores de la API de Hitos.

Responsabilidades:
- Incluir el router de health (/health).
- Incluir el router del módulo de hitos (/teams).

Autor: Ixchel Beristain
Fecha: 2025-11-17
"""

from fastapi import APIRouter

from app.modules.milestones.routes import get_milestones_router
from .health_routes import router as health_router

router = APIRouter()

# Health check sin prefijo adicional
router.include_router(health_router)

# Módulo de hitos (/teams/...)
router.include_router(get_milestones_router())

__all__ = ["router"]

# Fin del archivo backend/app/routes/__init__.py
