# -*- coding: utf-8 -*-
"""
backend/app/routes/health_routes.py

Endpoint básico de health check del backend de Hitos.

Autor: Ixchel Beristain
Fecha: 2025-11-17
"""

from datetime import datetime, timezone

from fastapi import APIRouter

from app.core.settings import get_settings
from app.core.db import check_database_health

router = APIRouter()


@router.get(
    "/health",
    summary="Health check del backend",
    description=(
        "Devuelve el estado básico del backend, incluyendo conectividad a la "
        "base de datos cuando el repositorio de hitos es SQL."
    ),
)
def health_check() -> dict:
    settings = get_settings()

    if settings.milestones_repository == "sql":
        db_ok = check_database_health()
    else:
        db_ok = None

    return {
        "status": "degraded" if db_ok is False else "ok",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "environment": settings.python_env,
        "repository": settings.milestones_repository,
        "database": {
            "reachable": db_ok,
        },
        "service": {
            "name": settings.app_name,
            "version": settings.app_version,
        },
    }

# Fin del archivo backend/app/routes/health_routes.py
