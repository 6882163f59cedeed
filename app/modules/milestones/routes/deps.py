# -*- coding: utf-8 -*-
"""
backend/app/modules/milestones/routes/deps.py

Dependencias inyectables de las rutas de hitos.

- get_team_repository: memoria (singleton de proceso) o SQL según
  MILESTONES_REPOSITORY
- get_command_service / get_query_service
- get_current_actor: rol del actor desde el header configurado
  (ACTOR_ROLE_HEADER). Sustituye a la capa de autenticación externa;
  los tests pueden overridearla.
- require_role: guarda de autorización por rol

Autor: Ixchel Beristain
Fecha: 2026-02-12
"""

from functools import lru_cache
from typing import Iterator

from fastapi import Depends, HTTPException, Request, status

from app.core.settings import get_settings
from app.shared.database.database import get_db
from app.modules.milestones.enums import ActorRole
from app.modules.milestones.repositories import (
    InMemoryTeamRepository,
    SqlTeamRepository,
    TeamRepository,
)
from app.modules.milestones.services import (
    MilestonesCommandService,
    MilestonesQueryService,
)


@lru_cache(maxsize=1)
def get_memory_repository() -> InMemoryTeamRepository:
    """Repositorio in-memory compartido por todo el proceso."""
    return InMemoryTeamRepository()


def get_team_repository() -> Iterator[TeamRepository]:
    """
    Devuelve el repositorio configurado.
    Con backend SQL abre una sesión por request y la cierra al final.
    """
    settings = get_settings()
    if settings.milestones_repository == "memory":
        yield get_memory_repository()
        return

    sessions = get_db()
    try:
        yield SqlTeamRepository(next(sessions))
    finally:
        sessions.close()


def get_command_service(
    repository: TeamRepository = Depends(get_team_repository),
) -> MilestonesCommandService:
    return MilestonesCommandService(repository)


def get_query_service(
    repository: TeamRepository = Depends(get_team_repository),
) -> MilestonesQueryService:
    return MilestonesQueryService(repository)


def get_current_actor(request: Request) -> ActorRole:
    """Lee el rol del actor; 401 si falta o no es reconocido."""
    header = get_settings().actor_role_header
    raw = (request.headers.get(header) or "").strip().lower()
    try:
        return ActorRole(raw)
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Rol de actor ausente o inválido en {header}",
        ) from None


def require_role(role: ActorRole):
    """Fábrica de dependencias: 403 si el actor no tiene `role`."""

    def _guard(actor: ActorRole = Depends(get_current_actor)) -> ActorRole:
        if actor != role:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"Acción reservada al rol '{role.value}'",
            )
        return actor

    return _guard


__all__ = [
    "get_memory_repository",
    "get_team_repository",
    "get_command_service",
    "get_query_service",
    "get_current_actor",
    "require_role",
]

# Fin del archivo backend/app/modules/milestones/routes/deps.py
