# -*- coding: utf-8 -*-
"""
backend/app/modules/milestones/facades/milestones/progress.py

Agregador de progreso de un grupo.

- progress = round(100 × aprobados / total) con redondeo half-up, 0 si no hay hitos
- status   = completed si progress ≥ 100, in_progress en otro caso

Función pura e idempotente: mismo conjunto de hitos, mismo resultado.

Autor: Ixchel Beristain
Fecha: 2026-02-10
"""

from dataclasses import dataclass, replace
from typing import Iterable

from app.modules.milestones.domain.entities import Milestone, Team
from app.modules.milestones.enums import MilestoneState, TeamProgressStatus


@dataclass(frozen=True)
class ProgressSnapshot:
    progress: int
    status: TeamProgressStatus


def compute_progress(approved: int, total: int) -> int:
    """Porcentaje entero half-up (12.5 → 13) sin pasar por float."""
    if total <= 0:
        return 0
    return (200 * approved + total) // (2 * total)


def recompute(milestones: Iterable[Milestone]) -> ProgressSnapshot:
    """Deriva progreso y status a partir de la colección de hitos."""
    total = 0
    approved = 0
    for m in milestones:
        total += 1
        if m.state == MilestoneState.APPROVED:
            approved += 1

    progress = compute_progress(approved, total)
    status = TeamProgressStatus.COMPLETED if progress >= 100 else TeamProgressStatus.IN_PROGRESS
    return ProgressSnapshot(progress=progress, status=status)


def apply_progress(team: Team) -> Team:
    """
    Devuelve el grupo con progreso recalculado.

    Si los valores guardados ya coinciden devuelve el MISMO objeto, para que
    el llamador pueda omitir la escritura. external_flag no se toca.
    """
    snapshot = recompute(team.milestones)
    if team.progress == snapshot.progress and team.progress_status == snapshot.status:
        return team
    return replace(team, progress=snapshot.progress, progress_status=snapshot.status)


__all__ = ["ProgressSnapshot", "compute_progress", "recompute", "apply_progress"]

# Fin del archivo backend/app/modules/milestones/facades/milestones/progress.py
