# -*- coding: utf-8 -*-
"""
backend/app/shared/database/database.py

SQLAlchemy síncrono para el repositorio SQL de grupos/hitos.

Provee:
- get_engine() (lazy, cacheado; respeta DB_URL / DB_ECHO_SQL)
- get_session_factory()
- Dependencia FastAPI: get_db
- init_db() / check_database_health()

Notas:
- SQLite en memoria usa StaticPool para compartir la misma conexión
  entre sesiones (tests y desarrollo).
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Generator

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.shared.config import get_settings
from app.shared.database.base import Base

logger = logging.getLogger(__name__)


def build_engine(url: str, *, echo: bool = False, pool_pre_ping: bool = True) -> Engine:
    """Crea el engine aplicando los ajustes propios de SQLite cuando aplica."""
    kwargs: dict = {"echo": echo, "future": True}
    if url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        if ":memory:" in url or url.rstrip("/").endswith("sqlite:"):
            kwargs["poolclass"] = StaticPool
    else:
        kwargs["pool_pre_ping"] = pool_pre_ping
    return create_engine(url, **kwargs)


@lru_cache(maxsize=1)
def get_engine() -> Engine:
    settings = get_settings()
    engine = build_engine(
        settings.database_url,
        echo=settings.db_echo_sql,
        pool_pre_ping=settings.db_pool_pre_ping,
    )
    logger.info("db_engine_created: dialect=%s", engine.dialect.name)
    return engine


@lru_cache(maxsize=1)
def get_session_factory() -> sessionmaker:
    return sessionmaker(bind=get_engine(), expire_on_commit=False, future=True)


def get_db() -> Generator[Session, None, None]:
    """Dependencia FastAPI: una sesión por request, cerrada al final."""
    session = get_session_factory()()
    try:
        yield session
    finally:
        session.close()


def init_db(engine: Engine | None = None) -> None:
    """Crea las tablas declaradas (teams, milestones) si no existen."""
    # Importa los modelos para registrarlos en Base.metadata
    from app.modules.milestones import models  # noqa: F401

    Base.metadata.create_all(bind=engine or get_engine())


def check_database_health() -> bool:
    try:
        with get_engine().connect() as conn:
            conn.execute(text("SELECT 1"))
        return True
    except SQLAlchemyError as e:
        logger.error("db_health_check_failed: %s", e)
        return False


__all__ = [
    "build_engine",
    "get_engine",
    "get_session_factory",
    "get_db",
    "init_db",
    "check_database_health",
]
