# -*- coding: utf-8 -*-
"""
backend/app/modules/milestones/domain/__init__.py

Entidades y comandos de dominio del módulo de hitos.
"""

from .entities import Milestone, MilestoneDraft, Team
from .commands import (
    Decision,
    ProposalDecision,
    GradeDecision,
    ProposeMilestones,
    AssignMilestonesDirect,
    ReviewProposals,
    StartMilestone,
    SubmitForReview,
    Resubmit,
    GradeSubmissions,
    SetExternalFlag,
    RefreshProgress,
)

__all__ = [
    "Milestone",
    "MilestoneDraft",
    "Team",
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
