# -*- coding: utf-8 -*-
"""
backend/app/modules/milestones/facades/__init__.py

Re-exporta el facade del módulo de hitos y sus errores para facilitar imports.

Autor: Ixchel Beristain
Fecha: 2026-02-10
"""

from app.modules.milestones.errors import (
    MilestonesError,
    ValidationError,
    TeamNotFoundError,
    MilestoneNotFoundError,
    InvalidTransitionError,
    PersistenceError,
    ConcurrentUpdateError,
)
from .milestone_facade import MilestoneFacade
from .milestones.review import ReviewProcessor, ReviewSummary

__all__ = [
    # Errors
    "MilestonesError",
    "ValidationError",
    "TeamNotFoundError",
    "MilestoneNotFoundError",
    "InvalidTransitionError",
    "PersistenceError",
    "ConcurrentUpdateError",

    # Facades
    "MilestoneFacade",
    "ReviewProcessor",
    "ReviewSummary",
]

# Fin del archivo backend/app/modules/milestones/facades/__init__.py
