# -*- coding: utf-8 -*-
"""
backend/app/modules/milestones/domain/commands.py

Comandos explícitos que los llamadores (UI docente, UI alumno, asistente)
despachan al núcleo vía MilestoneFacade.dispatch().

Separan "quién puede llamar" (autorización, fuera del núcleo) de
"qué transición es legal" (grafo de estados, dentro del núcleo).

Autor: Ixchel Beristain
Fecha: 2026-02-10
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from app.modules.milestones.domain.entities import MilestoneDraft
from app.modules.milestones.enums import MilestoneState, TeamFlag


# ---------------------------------------------------------------------------
# Decisiones individuales
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Decision:
    """
    Decisión genérica sobre un hito.

    expected_state: compuerta de origen que exige el comando; si el hito
    está en otro estado la decisión se rechaza aunque la arista exista.
    """
    milestone_id: str
    target_state: MilestoneState
    comment: Optional[str] = None
    expected_state: Optional[MilestoneState] = None


@dataclass(frozen=True)
class ProposalDecision:
    milestone_id: str
    accept: bool
    comment: Optional[str] = None

    def to_decision(self) -> Decision:
        target = MilestoneState.PENDING_START if self.accept else MilestoneState.REJECTED
        return Decision(
            milestone_id=self.milestone_id,
            target_state=target,
            comment=self.comment,
            expected_state=MilestoneState.PROPOSED,
        )


@dataclass(frozen=True)
class GradeDecision:
    milestone_id: str
    approve: bool
    comment: Optional[str] = None

    def to_decision(self) -> Decision:
        target = MilestoneState.APPROVED if self.approve else MilestoneState.REJECTED
        return Decision(
            milestone_id=self.milestone_id,
            target_state=target,
            comment=self.comment,
            expected_state=MilestoneState.IN_REVIEW,
        )


# ---------------------------------------------------------------------------
# Comandos
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ProposeMilestones:
    team_id: str
    phase_id: str
    drafts: Tuple[MilestoneDraft, ...]


@dataclass(frozen=True)
class AssignMilestonesDirect:
    team_id: str
    phase_id: str
    items: Tuple[MilestoneDraft, ...]


@dataclass(frozen=True)
class ReviewProposals:
    team_id: str
    decisions: Tuple[ProposalDecision, ...]


@dataclass(frozen=True)
class StartMilestone:
    team_id: str
    milestone_id: str


@dataclass(frozen=True)
class SubmitForReview:
    team_id: str
    milestone_id: str


@dataclass(frozen=True)
class Resubmit:
    team_id: str
    milestone_id: str


@dataclass(frozen=True)
class GradeSubmissions:
    team_id: str
    decisions: Tuple[GradeDecision, ...]


@dataclass(frozen=True)
class SetExternalFlag:
    team_id: str
    flag: Optional[TeamFlag]


@dataclass(frozen=True)
class RefreshProgress:
    team_id: str


__all__ = [
    "Decision",
    "ProposalDecision",
    "GradeDecision",
    "ProposeMilestones",
    "AssignMilestonesDirect",
    "ReviewProposals",
    "StartMilestone",
    "SubmitForReview",
    "Resubmit",
    "GradeSubmissions",
    "SetExternalFlag",
    "RefreshProgress",
]

# Fin del archivo backend/app/modules/milestones/domain/commands.py
