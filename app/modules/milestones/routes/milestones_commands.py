# -*- coding: utf-8 -*-
"""
backend/app/modules/milestones/routes/milestones_commands.py

Rutas de comandos sobre los hitos de un grupo:
- Proponer hitos (alumno) / asignar directo (docente)
- Revisar propuestas y calificar entregas (docente, lotes todo-o-nada)
- Iniciar, enviar a revisión, reenviar (alumno)
- Etiqueta externa y recálculo de progreso (docente)

El rol requerido por cada transición sale de TRANSITION_ACTORS, para que
la autorización y el grafo no diverjan.

Autor: Ixchel Beristain
Fecha: 2026-02-12
"""

from fastapi import APIRouter, Depends, status

from app.modules.milestones.enums import ActorRole, MilestoneState, get_transition_actor
from app.modules.milestones.routes.deps import get_command_service, require_role
from app.modules.milestones.schemas import (
    AssignIn,
    FlagIn,
    GradeSubmissionsIn,
    MilestoneListResponse,
    MilestoneRead,
    ProposeIn,
    ReviewProposalsIn,
    ReviewSummaryRead,
    TeamRead,
)
from app.modules.milestones.services import MilestonesCommandService

router = APIRouter(tags=["milestones:commands"])

_START_ROLE = get_transition_actor(MilestoneState.PENDING_START, MilestoneState.IN_PROGRESS)
_SUBMIT_ROLE = get_transition_actor(MilestoneState.IN_PROGRESS, MilestoneState.IN_REVIEW)
_RESUBMIT_ROLE = get_transition_actor(MilestoneState.REJECTED, MilestoneState.IN_PROGRESS)
_PROPOSAL_REVIEW_ROLE = get_transition_actor(MilestoneState.PROPOSED, MilestoneState.PENDING_START)
_GRADE_ROLE = get_transition_actor(MilestoneState.IN_REVIEW, MilestoneState.APPROVED)


def _created(milestones) -> MilestoneListResponse:
    items = [MilestoneRead.model_validate(m) for m in milestones]
    return MilestoneListResponse(success=True, items=items, total=len(items))


# ---- Creación ----

@router.post(
    "/{team_id}/milestones/proposals",
    response_model=MilestoneListResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Proponer hitos para una fase",
)
def propose_milestones(
    team_id: str,
    payload: ProposeIn,
    _actor=Depends(require_role(ActorRole.STUDENT)),
    svc: MilestonesCommandService = Depends(get_command_service),
):
    created = svc.propose(
        team_id,
        phase_id=payload.phase_id,
        drafts=[d.to_draft() for d in payload.drafts],
    )
    return _created(created)


@router.post(
    "/{team_id}/milestones/assignments",
    response_model=MilestoneListResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Asignar hitos directamente (quedan en pending_start)",
)
def assign_milestones(
    team_id: str,
    payload: AssignIn,
    _actor=Depends(require_role(ActorRole.TEACHER)),
    svc: MilestonesCommandService = Depends(get_command_service),
):
    created = svc.assign_direct(
        team_id,
        phase_id=payload.phase_id,
        items=[d.to_draft() for d in payload.items],
    )
    return _created(created)


# ---- Revisiones docentes ----

@router.post(
    "/{team_id}/reviews/proposals",
    response_model=ReviewSummaryRead,
    summary="Aceptar o rechazar propuestas (lote)",
)
def review_proposals(
    team_id: str,
    payload: ReviewProposalsIn,
    _actor=Depends(require_role(_PROPOSAL_REVIEW_ROLE)),
    svc: MilestonesCommandService = Depends(get_command_service),
):
    summary = svc.review_proposals(team_id, [d.to_decision() for d in payload.decisions])
    return ReviewSummaryRead.model_validate(summary)


@router.post(
    "/{team_id}/reviews/submissions",
    response_model=ReviewSummaryRead,
    summary="Aprobar o rechazar entregas (lote)",
)
def grade_submissions(
    team_id: str,
    payload: GradeSubmissionsIn,
    _actor=Depends(require_role(_GRADE_ROLE)),
    svc: MilestonesCommandService = Depends(get_command_service),
):
    summary = svc.grade_submissions(team_id, [d.to_decision() for d in payload.decisions])
    return ReviewSummaryRead.model_validate(summary)


# ---- Autoservicio del grupo ----

@router.post(
    "/{team_id}/milestones/{milestone_id}/start",
    response_model=MilestoneRead,
    summary="Iniciar un hito (pending_start → in_progress)",
)
def start_milestone(
    team_id: str,
    milestone_id: str,
    _actor=Depends(require_role(_START_ROLE)),
    svc: MilestonesCommandService = Depends(get_command_service),
):
    return MilestoneRead.model_validate(svc.start(team_id, milestone_id))


@router.post(
    "/{team_id}/milestones/{milestone_id}/submit",
    response_model=MilestoneRead,
    summary="Enviar un hito a revisión (in_progress → in_review)",
)
def submit_for_review(
    team_id: str,
    milestone_id: str,
    _actor=Depends(require_role(_SUBMIT_ROLE)),
    svc: MilestonesCommandService = Depends(get_command_service),
):
    return MilestoneRead.model_validate(svc.submit(team_id, milestone_id))


@router.post(
    "/{team_id}/milestones/{milestone_id}/resubmit",
    response_model=MilestoneRead,
    summary="Retomar un hito rechazado (rejected → in_progress)",
)
def resubmit(
    team_id: str,
    milestone_id: str,
    _actor=Depends(require_role(_RESUBMIT_ROLE)),
    svc: MilestonesCommandService = Depends(get_command_service),
):
    return MilestoneRead.model_validate(svc.resubmit(team_id, milestone_id))


# ---- Etiqueta externa / mantenimiento ----

@router.put(
    "/{team_id}/flag",
    response_model=TeamRead,
    summary="Fijar o limpiar la etiqueta externa del grupo",
)
def set_external_flag(
    team_id: str,
    payload: FlagIn,
    _actor=Depends(require_role(ActorRole.TEACHER)),
    svc: MilestonesCommandService = Depends(get_command_service),
):
    return TeamRead.model_validate(svc.set_flag(team_id, payload.flag))


@router.post(
    "/{team_id}/progress/refresh",
    response_model=TeamRead,
    summary="Recalcular el progreso guardado del grupo",
)
def refresh_progress(
    team_id: str,
    _actor=Depends(require_role(ActorRole.TEACHER)),
    svc: MilestonesCommandService = Depends(get_command_service),
):
    return TeamRead.model_validate(svc.refresh_progress(team_id))


# Fin del archivo backend/app/modules/milestones/routes/milestones_commands.py
