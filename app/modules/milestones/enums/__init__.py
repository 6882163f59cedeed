# -*- coding: utf-8 -*-
"""
backend/app/modules/milestones/enums/__init__.py

Export central de enums del módulo de hitos.

Autor: Ixchel Beristain
Fecha: 2026-02-09
"""

from .milestone_state_enum import MilestoneState, MilestoneOrigin
from .team_status_enum import TeamProgressStatus, TeamFlag
from .milestone_state_transitions import (
    ActorRole,
    VALID_MILESTONE_TRANSITIONS,
    TRANSITION_ACTORS,
    is_valid_state_transition,
    get_allowed_transitions,
    get_transition_actor,
    validate_state_transition,
)

# ===== DEFAULTS CENTRALIZADOS =====
DEFAULT_MILESTONE_STATE = MilestoneState.PROPOSED
DEFAULT_TEAM_STATUS = TeamProgressStatus.IN_PROGRESS

__all__ = [
    # Enums
    "MilestoneState",
    "MilestoneOrigin",
    "TeamProgressStatus",
    "TeamFlag",
    "ActorRole",
    # Defaults
    "DEFAULT_MILESTONE_STATE",
    "DEFAULT_TEAM_STATUS",
    # State transitions
    "VALID_MILESTONE_TRANSITIONS",
    "TRANSITION_ACTORS",
    "is_valid_state_transition",
    "get_allowed_transitions",
    "get_transition_actor",
    "validate_state_transition",
]

# Fin del archivo backend/app/modules/milestones/enums/__init__.py
