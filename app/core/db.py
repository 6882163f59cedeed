# -*- coding: utf-8 -*-
"""
backend/app/core/db.py

Fachada de base de datos: reexpone engine, sesiones y Base desde
`app.shared.database` bajo un punto de entrada estable en `app.core`.

Autor: Ixchel Beristain
Fecha: 2025-11-17
"""

from app.shared.database import (
    Base,
    get_engine,
    get_session_factory,
    get_db,
    init_db,
    check_database_health,
)

__all__ = [
    "Base",
    "get_engine",
    "get_session_factory",
    "get_db",
    "init_db",
    "check_database_health",
]

# Fin del archivo backend\app\core\db.py
