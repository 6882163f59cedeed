# -*- coding: utf-8 -*-
"""
backend/app/main.py

Punto de entrada principal del backend de Hitos.

Ajustes clave:
- Uso de app.core.settings como fachada de configuración.
- Logging configurado desde settings (plain/pretty/json) al startup.
- Tablas creadas al startup cuando MILESTONES_REPOSITORY=sql.
- Montaje de observabilidad Prometheus (/metrics) vía app.observability.prom
- Handlers de errores de dominio → HTTP (app.modules.milestones.routes.errors)
- Health principal /health delegado al paquete app.routes (health_routes.py)

Autor: Ixchel Beristain
Fecha: 17/11/2025
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware

from app.core.logging import setup_logging
from app.core.settings import get_settings
from app.core.db import init_db
from app.modules.milestones.metrics.collectors import init_review_collectors
from app.modules.milestones.routes import install_error_handlers
from app.observability.prom import setup_observability
from app.shared.utils.json_response import UTF8JSONResponse, json_response_utf8

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # ────────── STARTUP ──────────
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)

    if settings.milestones_repository == "sql":
        init_db()
        logger.info("db_tables_ready: backend=sql")

    if settings.metrics_enabled:
        init_review_collectors()

    logger.info(
        "app_started: name=%s env=%s repository=%s",
        settings.app_name,
        settings.python_env,
        settings.milestones_repository,
    )
    try:
        yield
    finally:
        # ────────── SHUTDOWN ──────────
        logger.info("app_stopped: name=%s", settings.app_name)


openapi_tags = [
    {"name": "milestones", "description": "Ciclo de vida de hitos y progreso por grupo"},
]


def _configure_cors(app_instance: FastAPI) -> dict:
    """Configura CORS desde CORS_ORIGINS ('*' abre a cualquier origen sin credenciales)."""
    settings = get_settings()
    origins = settings.get_cors_origins()
    wildcard = origins == ["*"]

    cors_config = {
        "allow_origins": origins,
        "allow_credentials": not wildcard,
        "allow_methods": ["GET", "POST", "PUT", "OPTIONS"],
        "allow_headers": ["Content-Type", "Authorization", settings.actor_role_header],
        "max_age": 600,
    }
    logger.info("cors_configured: origins=%s credentials=%s", origins, cors_config["allow_credentials"])
    app_instance.add_middleware(CORSMiddleware, **cors_config)
    return cors_config


async def http_exception_handler(request: Request, exc: HTTPException):
    """HTTPException con charset UTF-8 (mensajes con acentos)."""
    return json_response_utf8(
        content={"detail": exc.detail},
        status_code=exc.status_code,
        headers=getattr(exc, "headers", None),
    )


def create_app() -> FastAPI:
    """Construye la app FastAPI con rutas, handlers y middlewares."""
    settings = get_settings()

    app_instance = FastAPI(
        title=f"{settings.app_name} API",
        description="API de ciclo de vida de hitos y progreso por grupo",
        version=settings.app_version,
        lifespan=lifespan,
        openapi_tags=openapi_tags,
        default_response_class=UTF8JSONResponse,
    )

    # Observabilidad Prometheus (/metrics)
    # El orden real de ejecución de middlewares en Starlette es inverso al registro:
    # CORS se registra al final para ejecutarse primero (outermost).
    if settings.metrics_enabled:
        setup_observability(app_instance)
    _configure_cors(app_instance)

    app_instance.add_exception_handler(HTTPException, http_exception_handler)
    install_error_handlers(app_instance)

    # Router maestro
    from app.routes import router as main_router

    app_instance.include_router(main_router)
    return app_instance


app = create_app()


if __name__ == "__main__":
    settings = get_settings()
    uvicorn.run(
        "app.main:app",
        host=settings.app_host,
        port=int(settings.app_port),
        reload=settings.is_dev,
    )

# Fin del archivo backend/app/main.py
