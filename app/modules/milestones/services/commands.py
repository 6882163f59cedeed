# -*- coding: utf-8 -*-
"""
backend/app/modules/milestones/services/commands.py

Capa de aplicación (comandos/mutaciones) del módulo Milestones.
Construye los comandos explícitos y los despacha vía MilestoneFacade.
NO reimplementa reglas de dominio.

Autor: Ixchel Beristain
Fecha: 2026-02-12
"""
from __future__ import annotations

from typing import Iterable, Optional

from app.modules.milestones.domain import commands as cmd
from app.modules.milestones.domain.commands import GradeDecision, ProposalDecision
from app.modules.milestones.domain.entities import MilestoneDraft
from app.modules.milestones.enums import TeamFlag
from app.modules.milestones.facades import MilestoneFacade
from app.modules.milestones.repositories.base import TeamRepository


class MilestonesCommandService:
    """Comandos: proponer, asignar, revisar, autoservicio y etiqueta externa."""

    def __init__(self, repository: TeamRepository):
        self.repository = repository
        self.facade = MilestoneFacade(repository)

    # ---- Creación ----
    def propose(self, team_id: str, *, phase_id: str, drafts: Iterable[MilestoneDraft]):
        return self.facade.dispatch(
            cmd.ProposeMilestones(team_id=team_id, phase_id=phase_id, drafts=tuple(drafts))
        )

    def assign_direct(self, team_id: str, *, phase_id: str, items: Iterable[MilestoneDraft]):
        return self.facade.dispatch(
            cmd.AssignMilestonesDirect(team_id=team_id, phase_id=phase_id, items=tuple(items))
        )

    # ---- Revisiones docentes ----
    def review_proposals(self, team_id: str, decisions: Iterable[ProposalDecision]):
        return self.facade.dispatch(
            cmd.ReviewProposals(team_id=team_id, decisions=tuple(decisions))
        )

    def grade_submissions(self, team_id: str, decisions: Iterable[GradeDecision]):
        return self.facade.dispatch(
            cmd.GradeSubmissions(team_id=team_id, decisions=tuple(decisions))
        )

    # ---- Autoservicio del grupo ----
    def start(self, team_id: str, milestone_id: str):
        return self.facade.dispatch(cmd.StartMilestone(team_id=team_id, milestone_id=milestone_id))

    def submit(self, team_id: str, milestone_id: str):
        return self.facade.dispatch(cmd.SubmitForReview(team_id=team_id, milestone_id=milestone_id))

    def resubmit(self, team_id: str, milestone_id: str):
        return self.facade.dispatch(cmd.Resubmit(team_id=team_id, milestone_id=milestone_id))

    # ---- Etiqueta externa / mantenimiento ----
    def set_flag(self, team_id: str, flag: Optional[TeamFlag]):
        return self.facade.dispatch(cmd.SetExternalFlag(team_id=team_id, flag=flag))

    def refresh_progress(self, team_id: str):
        return self.facade.dispatch(cmd.RefreshProgress(team_id=team_id))


# Fin del archivo backend/app/modules/milestones/services/commands.py
