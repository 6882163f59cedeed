# -*- coding: utf-8 -*-
"""
backend/app/shared/database/__init__.py

Re-exporta utilidades comunes de base de datos.

Autor: Ixchel Beristain
Fecha: 2025-10-18 (Consolidación modular; ajustado 2026-02-11)
"""

from __future__ import annotations

from .base import Base, NAMING_CONVENTION
from .database import (
    build_engine,
    get_engine,
    get_session_factory,
    get_db,
    init_db,
    check_database_health,
)

__all__ = [
    "Base",
    "NAMING_CONVENTION",
    "build_engine",
    "get_engine",
    "get_session_factory",
    "get_db",
    "init_db",
    "check_database_health",
]

# Fin del archivo backend/app/shared/database/__init__.py
