# -*- coding: utf-8 -*-
"""
backend/app/modules/milestones/facades/milestones/__init__.py

Piezas internas del facade de hitos: transiciones, progreso, revisión y tablero.

Autor: Ixchel Beristain
Fecha: 2026-02-10
"""

from .board import Board, PendingItem, TeamBoard, project_board, project_team_board, collect_by_state
from .progress import ProgressSnapshot, compute_progress, recompute, apply_progress
from .review import ReviewProcessor, ReviewSummary, apply_decisions
from .transitions import validate_transition

__all__ = [
    "Board",
    "PendingItem",
    "TeamBoard",
    "project_board",
    "project_team_board",
    "collect_by_state",
    "ProgressSnapshot",
    "compute_progress",
    "recompute",
    "apply_progress",
    "ReviewProcessor",
    "ReviewSummary",
    "apply_decisions",
    "validate_transition",
]

# Fin del archivo backend/app/modules/milestones/facades/milestones/__init__.py
