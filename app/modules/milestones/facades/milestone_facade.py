# -*- coding: utf-8 -*-
"""
backend/app/modules/milestones/facades/milestone_facade.py

Facade principal del módulo de hitos: superficie pública de comandos.

Comandos (escritura, una sola llamada a save_team por comando):
- propose_milestones       → hitos nuevos en 'proposed'
- assign_milestones_direct → hitos nuevos en 'pending_start' (docente)
- review_proposals         → proposed → pending_start | rejected (lote)
- start_milestone          → pending_start → in_progress
- submit_for_review        → in_progress → in_review
- resubmit                 → rejected → in_progress
- grade_submissions        → in_review → approved | rejected (lote)
- set_external_flag        → blocked / almost_done (no toca progreso)
- refresh_progress         → recalcula y escribe solo si hubo deriva

Lecturas (sin escritura):
- get_team, get_board, get_global_board
- list_pending_reviews, list_pending_proposals

dispatch(command) enruta los dataclasses de domain/commands.py al método
correspondiente.

Autor: Ixchel Beristain
Fecha: 2026-02-10
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Callable, Dict, List, Optional, Sequence

from app.modules.milestones.domain import commands as cmd
from app.modules.milestones.domain.commands import GradeDecision, ProposalDecision
from app.modules.milestones.domain.entities import Milestone, MilestoneDraft, Team, _coerce_enum
from app.modules.milestones.enums import MilestoneOrigin, MilestoneState, TeamFlag
from app.modules.milestones.errors import ValidationError
from app.modules.milestones.facades.base import now_utc
from app.modules.milestones.facades.milestones.board import (
    Board,
    PendingItem,
    TeamBoard,
    collect_by_state,
    project_board,
    project_team_board,
)
from app.modules.milestones.facades.milestones.progress import apply_progress
from app.modules.milestones.facades.milestones.review import ReviewProcessor, ReviewSummary
from app.modules.milestones.repositories.base import TeamRepository

logger = logging.getLogger("milestones.facade")

_PROPOSAL_ORIGINS = {MilestoneOrigin.STUDENT, MilestoneOrigin.ASSISTANT}
_ASSIGNMENT_ORIGINS = {MilestoneOrigin.TEACHER, MilestoneOrigin.ASSISTANT}


class MilestoneFacade:
    """Orquesta ReviewProcessor, ProgressAggregator y BoardProjector."""

    def __init__(self, repository: TeamRepository, *, clock: Callable = now_utc):
        self.repository = repository
        self.clock = clock
        self.processor = ReviewProcessor(repository, clock=clock)
        self._handlers: Dict[type, Callable] = {
            cmd.ProposeMilestones: lambda c: self.propose_milestones(c.team_id, c.phase_id, c.drafts),
            cmd.AssignMilestonesDirect: lambda c: self.assign_milestones_direct(c.team_id, c.phase_id, c.items),
            cmd.ReviewProposals: lambda c: self.review_proposals(c.team_id, c.decisions),
            cmd.StartMilestone: lambda c: self.start_milestone(c.team_id, c.milestone_id),
            cmd.SubmitForReview: lambda c: self.submit_for_review(c.team_id, c.milestone_id),
            cmd.Resubmit: lambda c: self.resubmit(c.team_id, c.milestone_id),
            cmd.GradeSubmissions: lambda c: self.grade_submissions(c.team_id, c.decisions),
            cmd.SetExternalFlag: lambda c: self.set_external_flag(c.team_id, c.flag),
            cmd.RefreshProgress: lambda c: self.refresh_progress(c.team_id),
        }

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------
    def dispatch(self, command):
        handler = self._handlers.get(type(command))
        if handler is None:
            raise ValidationError(f"Comando no soportado: {type(command).__name__}", field="command")
        logger.debug("milestones_command_dispatched: command=%s", type(command).__name__)
        return handler(command)

    # ------------------------------------------------------------------
    # Creación
    # ------------------------------------------------------------------
    def _create(
        self,
        team_id: str,
        phase_id: str,
        drafts: Sequence[MilestoneDraft],
        *,
        state: MilestoneState,
        allowed_origins: set,
        default_origin: MilestoneOrigin,
    ) -> List[Milestone]:
        if not drafts:
            raise ValidationError("Se requiere al menos un hito", field="drafts")

        stamp = self.clock()
        created: List[Milestone] = []
        for draft in drafts:
            origin = default_origin
            if draft.origin is not None:
                origin = _coerce_enum(MilestoneOrigin, draft.origin, "origin")
            if origin not in allowed_origins:
                raise ValidationError(
                    f"Origen '{origin.value}' no permitido para hitos en '{state.value}'",
                    field="origin",
                )
            created.append(
                Milestone(
                    phase_id=phase_id,
                    title=draft.title,
                    description=draft.description,
                    state=state,
                    origin=origin,
                    created_at=stamp,
                )
            )

        team = self.repository.load_team(team_id)
        updated = apply_progress(team.with_milestones(team.milestones + tuple(created)))
        saved = self.repository.save_team(updated)
        logger.info(
            "milestones_created: team_id=%s phase_id=%s state=%s count=%s progress=%s",
            team_id,
            phase_id,
            state.value,
            len(created),
            saved.progress,
        )
        return created

    def propose_milestones(
        self,
        team_id: str,
        phase_id: str,
        drafts: Sequence[MilestoneDraft],
    ) -> List[Milestone]:
        """Crea hitos 'proposed' a partir de borradores del grupo o del asistente."""
        return self._create(
            team_id,
            phase_id,
            drafts,
            state=MilestoneState.PROPOSED,
            allowed_origins=_PROPOSAL_ORIGINS,
            default_origin=MilestoneOrigin.STUDENT,
        )

    def assign_milestones_direct(
        self,
        team_id: str,
        phase_id: str,
        items: Sequence[MilestoneDraft],
    ) -> List[Milestone]:
        """Crea hitos asignados por el docente, ya en 'pending_start'."""
        return self._create(
            team_id,
            phase_id,
            items,
            state=MilestoneState.PENDING_START,
            allowed_origins=_ASSIGNMENT_ORIGINS,
            default_origin=MilestoneOrigin.TEACHER,
        )

    # ------------------------------------------------------------------
    # Revisiones docentes (lotes)
    # ------------------------------------------------------------------
    def review_proposals(
        self,
        team_id: str,
        decisions: Sequence[ProposalDecision],
    ) -> ReviewSummary:
        _, summary = self.processor.apply(team_id, [d.to_decision() for d in decisions])
        return summary

    def grade_submissions(
        self,
        team_id: str,
        decisions: Sequence[GradeDecision],
    ) -> ReviewSummary:
        _, summary = self.processor.apply(team_id, [d.to_decision() for d in decisions])
        return summary

    # ------------------------------------------------------------------
    # Autoservicio del grupo
    # ------------------------------------------------------------------
    def _single(
        self,
        team_id: str,
        milestone_id: str,
        *,
        expected: MilestoneState,
        target: MilestoneState,
    ) -> Milestone:
        decision = cmd.Decision(
            milestone_id=milestone_id,
            target_state=target,
            expected_state=expected,
        )
        team, _ = self.processor.apply(team_id, [decision])
        return team.find_milestone(milestone_id)

    def start_milestone(self, team_id: str, milestone_id: str) -> Milestone:
        return self._single(
            team_id, milestone_id,
            expected=MilestoneState.PENDING_START,
            target=MilestoneState.IN_PROGRESS,
        )

    def submit_for_review(self, team_id: str, milestone_id: str) -> Milestone:
        return self._single(
            team_id, milestone_id,
            expected=MilestoneState.IN_PROGRESS,
            target=MilestoneState.IN_REVIEW,
        )

    def resubmit(self, team_id: str, milestone_id: str) -> Milestone:
        return self._single(
            team_id, milestone_id,
            expected=MilestoneState.REJECTED,
            target=MilestoneState.IN_PROGRESS,
        )

    # ------------------------------------------------------------------
    # Etiqueta externa y mantenimiento
    # ------------------------------------------------------------------
    def set_external_flag(self, team_id: str, flag: Optional[TeamFlag]) -> Team:
        """
        Escritura reservada a actores externos (blocked / almost_done).
        No recalcula progreso ni toca hitos.
        """
        new_flag = _coerce_enum(TeamFlag, flag, "flag") if flag is not None else None
        team = self.repository.load_team(team_id)
        if team.external_flag == new_flag:
            return team
        saved = self.repository.save_team(replace(team, external_flag=new_flag))
        logger.info(
            "milestones_external_flag_set: team_id=%s flag=%s",
            team_id,
            new_flag.value if new_flag else None,
        )
        return saved

    def refresh_progress(self, team_id: str) -> Team:
        """Recalcula el progreso guardado; solo escribe si hubo deriva."""
        team = self.repository.load_team(team_id)
        updated = apply_progress(team)
        if updated is team:
            return team
        logger.warning(
            "milestones_progress_drift_fixed: team_id=%s stored=%s derived=%s",
            team_id,
            team.progress,
            updated.progress,
        )
        return self.repository.save_team(updated)

    # ------------------------------------------------------------------
    # Lecturas
    # ------------------------------------------------------------------
    def get_team(self, team_id: str) -> Team:
        return self.repository.load_team(team_id)

    def get_board(self, team_id: str) -> Board:
        return project_board(self.repository.load_team(team_id).milestones)

    def get_global_board(self, project_id: Optional[str] = None) -> List[TeamBoard]:
        return [project_team_board(t) for t in self.repository.list_teams(project_id)]

    def list_pending_reviews(self, project_id: Optional[str] = None) -> List[PendingItem]:
        return collect_by_state(self.repository.list_teams(project_id), MilestoneState.IN_REVIEW)

    def list_pending_proposals(self, project_id: Optional[str] = None) -> List[PendingItem]:
        return collect_by_state(self.repository.list_teams(project_id), MilestoneState.PROPOSED)


__all__ = ["MilestoneFacade"]

# Fin del archivo backend/app/modules/milestones/facades/milestone_facade.py
