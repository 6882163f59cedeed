# -*- coding: utf-8 -*-
"""
backend/app/modules/milestones/facades/milestones/board.py

Proyección de solo lectura de los hitos de un grupo en columnas Kanban.

- pending   : proposed, pending_start
- active    : in_progress, in_review, rejected (un rechazo vuelve a ser accionable)
- completed : approved

La usan el tablero del alumno y el tablero global del docente, para que ambos
compartan la misma semántica de columnas. No muta nada.

Autor: Ixchel Beristain
Fecha: 2026-02-10
"""

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Tuple

from app.modules.milestones.domain.entities import Milestone, Team
from app.modules.milestones.enums import MilestoneState

PENDING = "pending"
ACTIVE = "active"
COMPLETED = "completed"

COLUMN_BY_STATE: Dict[MilestoneState, str] = {
    MilestoneState.PROPOSED: PENDING,
    MilestoneState.PENDING_START: PENDING,
    MilestoneState.IN_PROGRESS: ACTIVE,
    MilestoneState.IN_REVIEW: ACTIVE,
    MilestoneState.REJECTED: ACTIVE,
    MilestoneState.APPROVED: COMPLETED,
}


@dataclass(frozen=True)
class Board:
    pending: Tuple[Milestone, ...] = ()
    active: Tuple[Milestone, ...] = ()
    completed: Tuple[Milestone, ...] = ()


@dataclass(frozen=True)
class TeamBoard:
    team_id: str
    team_name: str
    project_id: Optional[str]
    progress: int
    status: str
    board: Board


@dataclass(frozen=True)
class PendingItem:
    team_id: str
    team_name: str
    milestone: Milestone


def project_board(milestones: Iterable[Milestone]) -> Board:
    """Agrupa los hitos por columna, conservando el orden del grupo."""
    columns: Dict[str, List[Milestone]] = {PENDING: [], ACTIVE: [], COMPLETED: []}
    for m in milestones:
        columns[COLUMN_BY_STATE[m.state]].append(m)
    return Board(
        pending=tuple(columns[PENDING]),
        active=tuple(columns[ACTIVE]),
        completed=tuple(columns[COMPLETED]),
    )


def project_team_board(team: Team) -> TeamBoard:
    return TeamBoard(
        team_id=team.id,
        team_name=team.name,
        project_id=team.project_id,
        progress=team.progress,
        status=team.status,
        board=project_board(team.milestones),
    )


def collect_by_state(teams: Iterable[Team], state: MilestoneState) -> List[PendingItem]:
    """Aplana los hitos en `state` de varios grupos (cola de revisión docente)."""
    return [
        PendingItem(team_id=t.id, team_name=t.name, milestone=m)
        for t in teams
        for m in t.milestones
        if m.state == state
    ]


__all__ = [
    "PENDING",
    "ACTIVE",
    "COMPLETED",
    "COLUMN_BY_STATE",
    "Board",
    "TeamBoard",
    "PendingItem",
    "project_board",
    "project_team_board",
    "collect_by_state",
]

# Fin del archivo backend/app/modules/milestones/facades/milestones/board.py
