# -*- coding: utf-8 -*-
"""
backend/app/modules/milestones/routes/milestones_queries.py

Rutas de lectura:
- Tablero global y colas de revisión (docente)
- Grupo y tablero Kanban del grupo (cualquier rol)

Autor: Ixchel Beristain
Fecha: 2026-02-12
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from app.modules.milestones.enums import ActorRole
from app.modules.milestones.routes.deps import (
    get_current_actor,
    get_query_service,
    require_role,
)
from app.modules.milestones.schemas import (
    BoardRead,
    PendingItemRead,
    TeamBoardRead,
    TeamRead,
)
from app.modules.milestones.services import MilestonesQueryService

router = APIRouter(tags=["milestones:queries"])


# ---- Vistas docentes (rutas fijas antes de /{team_id}) ----

@router.get(
    "",
    response_model=List[TeamBoardRead],
    summary="Tablero global de grupos",
)
def global_board(
    project_id: Optional[str] = Query(None, description="Filtra por proyecto"),
    _actor=Depends(require_role(ActorRole.TEACHER)),
    svc: MilestonesQueryService = Depends(get_query_service),
):
    return [TeamBoardRead.model_validate(b) for b in svc.get_global_board(project_id=project_id)]


@router.get(
    "/pending-reviews",
    response_model=List[PendingItemRead],
    summary="Entregas pendientes de calificar",
)
def pending_reviews(
    project_id: Optional[str] = Query(None),
    _actor=Depends(require_role(ActorRole.TEACHER)),
    svc: MilestonesQueryService = Depends(get_query_service),
):
    return [PendingItemRead.model_validate(i) for i in svc.list_pending_reviews(project_id=project_id)]


@router.get(
    "/pending-proposals",
    response_model=List[PendingItemRead],
    summary="Propuestas pendientes de revisar",
)
def pending_proposals(
    project_id: Optional[str] = Query(None),
    _actor=Depends(require_role(ActorRole.TEACHER)),
    svc: MilestonesQueryService = Depends(get_query_service),
):
    return [PendingItemRead.model_validate(i) for i in svc.list_pending_proposals(project_id=project_id)]


# ---- Grupo ----

@router.get(
    "/{team_id}",
    response_model=TeamRead,
    summary="Grupo con hitos y progreso",
)
def get_team(
    team_id: str,
    _actor=Depends(get_current_actor),
    svc: MilestonesQueryService = Depends(get_query_service),
):
    return TeamRead.model_validate(svc.get_team(team_id))


@router.get(
    "/{team_id}/board",
    response_model=BoardRead,
    summary="Tablero Kanban del grupo",
)
def get_board(
    team_id: str,
    _actor=Depends(get_current_actor),
    svc: MilestonesQueryService = Depends(get_query_service),
):
    return BoardRead.model_validate(svc.get_board(team_id))


# Fin del archivo backend/app/modules/milestones/routes/milestones_queries.py
