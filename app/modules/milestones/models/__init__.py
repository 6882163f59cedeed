# -*- coding: utf-8 -*-
"""
backend/app/modules/milestones/models/__init__.py

Modelos ORM del módulo de hitos.
"""

from .milestone_models import TeamRecord, MilestoneRecord

__all__ = ["TeamRecord", "MilestoneRecord"]
