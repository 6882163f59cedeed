# -*- coding: utf-8 -*-
"""
backend/app/modules/milestones/schemas/milestone_schemas.py

Schemas Pydantic para comandos y respuestas del módulo de hitos.
Los requests se traducen a entidades/decisiones de dominio con to_*();
los responses se validan directo desde las dataclasses (from_attributes).

Autor: Ixchel Beristain
Fecha: 2026-02-12
"""

from datetime import datetime
from typing import List, Optional

from pydantic import ConfigDict, Field

from app.shared.utils.base_models import UTF8SafeModel
from app.modules.milestones.domain.commands import GradeDecision, ProposalDecision
from app.modules.milestones.domain.entities import MilestoneDraft
from app.modules.milestones.enums import (
    MilestoneOrigin,
    MilestoneState,
    TeamFlag,
    TeamProgressStatus,
)


# ========== REQUEST SCHEMAS ==========

class DraftIn(UTF8SafeModel):
    """Borrador de hito. El título vacío se rechaza en el dominio (422)."""
    title: str = Field(..., max_length=255, description="Título del hito")
    description: str = Field("", max_length=4000, description="Descripción")
    origin: Optional[MilestoneOrigin] = Field(
        None,
        description="Autor del borrador: student, assistant o teacher (por defecto, el del comando)",
    )

    def to_draft(self) -> MilestoneDraft:
        return MilestoneDraft(title=self.title, description=self.description, origin=self.origin)


class ProposeIn(UTF8SafeModel):
    """Request del grupo para proponer hitos en una fase."""
    phase_id: str = Field(..., description="Fase del proyecto")
    drafts: List[DraftIn] = Field(..., description="Borradores a proponer")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "phase_id": "fase-2",
                "drafts": [
                    {"title": "Diseñar encuesta", "description": "Borrador v1"},
                    {"title": "Piloto", "origin": "assistant"},
                ],
            }
        }
    )


class AssignIn(UTF8SafeModel):
    """Request docente para asignar hitos directamente (quedan en pending_start)."""
    phase_id: str = Field(..., description="Fase del proyecto")
    items: List[DraftIn] = Field(..., description="Hitos a asignar")


class ProposalDecisionIn(UTF8SafeModel):
    milestone_id: str
    accept: bool
    comment: Optional[str] = Field(None, max_length=4000)

    def to_decision(self) -> ProposalDecision:
        return ProposalDecision(milestone_id=self.milestone_id, accept=self.accept, comment=self.comment)


class GradeDecisionIn(UTF8SafeModel):
    milestone_id: str
    approve: bool
    comment: Optional[str] = Field(None, max_length=4000)

    def to_decision(self) -> GradeDecision:
        return GradeDecision(milestone_id=self.milestone_id, approve=self.approve, comment=self.comment)


class ReviewProposalsIn(UTF8SafeModel):
    """Lote de decisiones sobre propuestas (todo o nada)."""
    decisions: List[ProposalDecisionIn]


class GradeSubmissionsIn(UTF8SafeModel):
    """Lote de calificaciones sobre entregas (todo o nada)."""
    decisions: List[GradeDecisionIn]


class FlagIn(UTF8SafeModel):
    """Etiqueta externa del grupo; null la limpia."""
    flag: Optional[TeamFlag] = Field(None, description="blocked, almost_done o null")


# ========== RESPONSE SCHEMAS ==========

class MilestoneRead(UTF8SafeModel):
    id: str
    phase_id: str
    title: str
    description: str = ""
    state: MilestoneState
    teacher_comment: Optional[str] = None
    origin: MilestoneOrigin
    created_at: datetime
    updated_at: datetime


class MilestoneListResponse(UTF8SafeModel):
    """Response para hitos recién creados"""
    success: bool = Field(True, description="Indica si la operación fue exitosa")
    items: List[MilestoneRead] = Field(..., description="Hitos creados")
    total: int = Field(..., description="Total de hitos creados")


class TeamRead(UTF8SafeModel):
    """
    Grupo con progreso derivado.

    `status` es la etiqueta compuesta (completed > etiqueta externa > in_progress).
    """
    id: str
    name: str = ""
    project_id: Optional[str] = None
    progress: int = Field(..., ge=0, le=100)
    progress_status: TeamProgressStatus
    external_flag: Optional[TeamFlag] = None
    status: str
    version: int
    milestones: List[MilestoneRead] = Field(default_factory=list)


class BoardRead(UTF8SafeModel):
    pending: List[MilestoneRead] = Field(default_factory=list)
    active: List[MilestoneRead] = Field(default_factory=list)
    completed: List[MilestoneRead] = Field(default_factory=list)


class TeamBoardRead(UTF8SafeModel):
    team_id: str
    team_name: str
    project_id: Optional[str] = None
    progress: int
    status: str
    board: BoardRead


class PendingItemRead(UTF8SafeModel):
    team_id: str
    team_name: str
    milestone: MilestoneRead


class ReviewSummaryRead(UTF8SafeModel):
    approved_count: int
    rejected_count: int
    progress: int
    status: str

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "approved_count": 2,
                "rejected_count": 1,
                "progress": 50,
                "status": "in_progress",
            }
        }
    )


__all__ = [
    "DraftIn",
    "ProposeIn",
    "AssignIn",
    "ProposalDecisionIn",
    "GradeDecisionIn",
    "ReviewProposalsIn",
    "GradeSubmissionsIn",
    "FlagIn",
    "MilestoneRead",
    "MilestoneListResponse",
    "TeamRead",
    "BoardRead",
    "TeamBoardRead",
    "PendingItemRead",
    "ReviewSummaryRead",
]

# Fin del archivo backend/app/modules/milestones/schemas/milestone_schemas.py
