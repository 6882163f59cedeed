# -*- coding: utf-8 -*-
"""
backend/app/modules/milestones/schemas/__init__.py

Schemas Pydantic del módulo de hitos.

Autor: Ixchel Beristain
Fecha: 2026-02-12
"""

from .milestone_schemas import (
    DraftIn,
    ProposeIn,
    AssignIn,
    ProposalDecisionIn,
    GradeDecisionIn,
    ReviewProposalsIn,
    GradeSubmissionsIn,
    FlagIn,
    MilestoneRead,
    MilestoneListResponse,
    TeamRead,
    BoardRead,
    TeamBoardRead,
    PendingItemRead,
    ReviewSummaryRead,
)

__all__ = [
    # Requests
    "DraftIn",
    "ProposeIn",
    "AssignIn",
    "ProposalDecisionIn",
    "GradeDecisionIn",
    "ReviewProposalsIn",
    "GradeSubmissionsIn",
    "FlagIn",
    # Responses
    "MilestoneRead",
    "MilestoneListResponse",
    "TeamRead",
    "BoardRead",
    "TeamBoardRead",
    "PendingItemRead",
    "ReviewSummaryRead",
]

# Fin del archivo backend/app/modules/milestones/schemas/__init__.py
