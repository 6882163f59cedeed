# -*- coding: utf-8 -*-
"""
backend/app/modules/milestones/routes/__init__.py

Router principal del módulo de hitos.
Compone subrouters de:
- milestones_queries (tablero global, colas, grupo, tablero del grupo)
- milestones_commands (propuestas, revisiones, autoservicio, etiqueta)

Autor: Ixchel Beristain
Fecha: 2026-02-12
"""
from fastapi import APIRouter

from .milestones_queries import router as queries_router
from .milestones_commands import router as commands_router
from .errors import install_error_handlers

PREFIX = "/teams"


def get_milestones_router() -> APIRouter:
    """
    Devuelve el router del módulo con el prefijo /teams.

    Orden de ensamblado:
      1. Consultas (incluye /pending-reviews y /pending-proposals antes de /{team_id})
      2. Comandos
    """
    router = APIRouter(
        tags=["milestones"],
        responses={404: {"description": "No encontrado"}},
    )
    # GET /teams tiene path vacío: el prefijo va en cada subrouter
    router.include_router(queries_router, prefix=PREFIX)
    router.include_router(commands_router, prefix=PREFIX)
    return router


__all__ = ["get_milestones_router", "install_error_handlers"]

# Fin del archivo backend/app/modules/milestones/routes/__init__.py
