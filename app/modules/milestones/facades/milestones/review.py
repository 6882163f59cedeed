# -*- coding: utf-8 -*-
"""
backend/app/modules/milestones/facades/milestones/review.py

Procesador de decisiones sobre los hitos de UN grupo.

Reglas de dominio:
1. El lote no puede venir vacío ni repetir un milestone_id
2. Cada decisión se valida contra la colección ACTUAL del grupo
   (MilestoneNotFoundError / InvalidTransitionError)
3. Todo o nada: la primera decisión inválida aborta el lote y no se escribe
4. Con el lote válido: se aplican todos los cambios sobre una copia,
   se recalcula el progreso UNA vez y se persiste el grupo en UNA escritura
5. El comentario docente reemplaza al anterior solo si viene informado

Autor: Ixchel Beristain
Fecha: 2026-02-10
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from app.modules.milestones.domain.commands import Decision
from app.modules.milestones.domain.entities import Milestone, Team
from app.modules.milestones.enums import MilestoneState, TeamProgressStatus
from app.modules.milestones.errors import (
    MilestoneNotFoundError,
    MilestonesError,
    ValidationError,
)
from app.modules.milestones.facades.base import now_utc
from app.modules.milestones.facades.milestones.progress import apply_progress
from app.modules.milestones.facades.milestones.transitions import validate_transition
from app.modules.milestones.metrics.collectors import inc_transition, record_review_batch
from app.modules.milestones.repositories.base import TeamRepository

logger = logging.getLogger("milestones.review")

_APPROVING_TARGETS = {MilestoneState.PENDING_START, MilestoneState.APPROVED}

_GATE_BY_EXPECTED = {
    MilestoneState.PROPOSED: "proposal",
    MilestoneState.IN_REVIEW: "completion",
}


@dataclass(frozen=True)
class ReviewSummary:
    approved_count: int
    rejected_count: int
    progress: int
    status: str


def _gate_of(decisions: Sequence[Decision]) -> str:
    for d in decisions:
        gate = _GATE_BY_EXPECTED.get(d.expected_state)
        if gate:
            return gate
    return "student"


def apply_decisions(
    team: Team,
    decisions: Sequence[Decision],
    *,
    at=None,
) -> Tuple[Team, List[Tuple[Milestone, Milestone]]]:
    """
    Aplica el lote sobre una copia del grupo (función pura, sin I/O).

    Returns:
        (grupo con hitos y progreso actualizados, [(antes, después), ...])

    Raises:
        ValidationError, MilestoneNotFoundError, InvalidTransitionError
    """
    if not decisions:
        raise ValidationError("El lote de decisiones no puede estar vacío", field="decisions")

    seen = set()
    for d in decisions:
        if d.milestone_id in seen:
            raise ValidationError(
                f"Decisión duplicada para el hito {d.milestone_id} en el mismo lote",
                field="decisions",
            )
        seen.add(d.milestone_id)

    # 1) Validar todo antes de tocar nada
    index: Dict[str, int] = {m.id: i for i, m in enumerate(team.milestones)}
    planned: List[Tuple[int, MilestoneState, Optional[str]]] = []
    for d in decisions:
        pos = index.get(d.milestone_id)
        if pos is None:
            raise MilestoneNotFoundError(d.milestone_id, team.id)
        target = validate_transition(
            team.milestones[pos],
            d.target_state,
            expected_state=d.expected_state,
        )
        planned.append((pos, target, d.comment))

    # 2) Aplicar sobre la copia
    stamp = at or now_utc()
    milestones = list(team.milestones)
    changes: List[Tuple[Milestone, Milestone]] = []
    for pos, target, comment in planned:
        before = milestones[pos]
        after = before._with_state(target, comment=comment, at=stamp)
        milestones[pos] = after
        changes.append((before, after))

    # 3) Recalcular progreso una sola vez
    return apply_progress(team.with_milestones(milestones)), changes


class ReviewProcessor:
    """Aplica una decisión o un lote de decisiones como unidad atómica."""

    def __init__(self, repository: TeamRepository, *, clock: Callable = now_utc):
        self.repository = repository
        self.clock = clock

    def apply(self, team_id: str, decisions: Sequence[Decision]) -> Tuple[Team, ReviewSummary]:
        decisions = list(decisions)
        gate = _gate_of(decisions)
        try:
            team = self.repository.load_team(team_id)
            updated, changes = apply_decisions(team, decisions, at=self.clock())
            saved = self.repository.save_team(updated)
        except MilestonesError as e:
            record_review_batch(gate, "error", len(decisions))
            logger.info(
                "milestones_review_rejected: team_id=%s gate=%s size=%s error=%s",
                team_id,
                gate,
                len(decisions),
                e,
            )
            raise

        approved = sum(1 for _, after in changes if after.state in _APPROVING_TARGETS)
        rejected = sum(1 for _, after in changes if after.state == MilestoneState.REJECTED)
        for before, after in changes:
            inc_transition(before.state.value, after.state.value)
        record_review_batch(gate, "success", len(decisions))

        logger.info(
            "milestones_review_applied: team_id=%s gate=%s approved=%s rejected=%s progress=%s status=%s",
            team_id,
            gate,
            approved,
            rejected,
            saved.progress,
            saved.status,
        )
        if (
            saved.progress_status == TeamProgressStatus.COMPLETED
            and team.progress_status != TeamProgressStatus.COMPLETED
        ):
            logger.info("milestones_team_completed: team_id=%s", team_id)

        summary = ReviewSummary(
            approved_count=approved,
            rejected_count=rejected,
            progress=saved.progress,
            status=saved.status,
        )
        return saved, summary


__all__ = ["ReviewSummary", "apply_decisions", "ReviewProcessor"]

# Fin del archivo backend/app/modules/milestones/facades/milestones/review.py
