# -*- coding: utf-8 -*-
"""
backend/app/modules/milestones/domain/entities.py

Entidades de dominio del módulo de hitos: Milestone, Team y MilestoneDraft.

Las entidades son inmutables (dataclasses congeladas). Un cambio de estado
produce un hito NUEVO; solo el ReviewProcessor lo hace, pasando por el
validador de transiciones. Así ningún llamador fija `state` a mano.

Autor: Ixchel Beristain
Fecha: 2026-02-09
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from typing import Iterable, Optional, Tuple
from uuid import uuid4

from app.modules.milestones.enums import (
    DEFAULT_MILESTONE_STATE,
    DEFAULT_TEAM_STATUS,
    MilestoneOrigin,
    MilestoneState,
    TeamFlag,
    TeamProgressStatus,
)
from app.modules.milestones.errors import ValidationError


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _new_id() -> str:
    return str(uuid4())


def _coerce_enum(enum_cls, value, field_name: str):
    try:
        return enum_cls(value)
    except ValueError:
        raise ValidationError(
            f"Valor inválido para {field_name}: {value!r}", field=field_name
        ) from None


def _clean_text(value) -> str:
    return value.strip() if isinstance(value, str) else ""


@dataclass(frozen=True)
class MilestoneDraft:
    """
    Borrador de hito (alumno, asistente o docente) antes de crearse.

    origin=None deja que el comando decida (student al proponer,
    teacher al asignar).
    """
    title: str
    description: str = ""
    origin: Optional[MilestoneOrigin] = None

    def __post_init__(self) -> None:
        if self.origin is not None:
            object.__setattr__(self, "origin", _coerce_enum(MilestoneOrigin, self.origin, "origin"))


@dataclass(frozen=True)
class Milestone:
    """
    Unidad de trabajo rastreable dentro de una fase del proyecto.

    Validación en construcción:
    - title no vacío (se recorta)
    - phase_id no vacío
    - state / origin deben ser valores conocidos
    """
    phase_id: str
    title: str
    description: str = ""
    state: MilestoneState = DEFAULT_MILESTONE_STATE
    teacher_comment: Optional[str] = None
    origin: MilestoneOrigin = MilestoneOrigin.STUDENT
    id: str = field(default_factory=_new_id)
    created_at: datetime = field(default_factory=_now)
    updated_at: Optional[datetime] = None

    def __post_init__(self) -> None:
        title = _clean_text(self.title)
        if not title:
            raise ValidationError("El título del hito no puede estar vacío", field="title")
        phase_id = str(self.phase_id).strip() if self.phase_id is not None else ""
        if not phase_id:
            raise ValidationError("El hito debe pertenecer a una fase", field="phase_id")
        milestone_id = str(self.id or "").strip()
        if not milestone_id:
            raise ValidationError("El hito requiere un id", field="id")

        object.__setattr__(self, "title", title)
        object.__setattr__(self, "phase_id", phase_id)
        object.__setattr__(self, "id", milestone_id)
        object.__setattr__(self, "description", _clean_text(self.description))
        object.__setattr__(self, "state", _coerce_enum(MilestoneState, self.state, "state"))
        object.__setattr__(self, "origin", _coerce_enum(MilestoneOrigin, self.origin, "origin"))
        if self.updated_at is None:
            object.__setattr__(self, "updated_at", self.created_at)

    def _with_state(
        self,
        state: MilestoneState,
        *,
        comment: Optional[str] = None,
        at: Optional[datetime] = None,
    ) -> "Milestone":
        # Solo para el ReviewProcessor, tras validar la transición.
        return replace(
            self,
            state=state,
            teacher_comment=comment if comment is not None else self.teacher_comment,
            updated_at=at or _now(),
        )


@dataclass(frozen=True)
class Team:
    """
    Grupo de alumnos: frontera de agregación del progreso.

    `progress` y `progress_status` son derivados (ver ProgressAggregator);
    `external_flag` pertenece a actores externos y este módulo no lo pisa.
    """
    id: str
    name: str = ""
    project_id: Optional[str] = None
    milestones: Tuple[Milestone, ...] = ()
    progress: int = 0
    progress_status: TeamProgressStatus = DEFAULT_TEAM_STATUS
    external_flag: Optional[TeamFlag] = None
    version: int = 0

    def __post_init__(self) -> None:
        team_id = str(self.id or "").strip()
        if not team_id:
            raise ValidationError("El grupo requiere un id", field="id")
        milestones = tuple(self.milestones)
        seen = set()
        for m in milestones:
            if m.id in seen:
                raise ValidationError(f"Id de hito duplicado en el grupo: {m.id}", field="milestones")
            seen.add(m.id)
        if not 0 <= int(self.progress) <= 100:
            raise ValidationError("El progreso debe estar entre 0 y 100", field="progress")

        object.__setattr__(self, "id", team_id)
        object.__setattr__(self, "milestones", milestones)
        object.__setattr__(self, "progress", int(self.progress))
        object.__setattr__(
            self,
            "progress_status",
            _coerce_enum(TeamProgressStatus, self.progress_status, "progress_status"),
        )
        if self.external_flag is not None:
            object.__setattr__(
                self, "external_flag", _coerce_enum(TeamFlag, self.external_flag, "external_flag")
            )

    @property
    def status(self) -> str:
        """Etiqueta compuesta que muestran los tableros."""
        if self.progress_status == TeamProgressStatus.COMPLETED:
            return TeamProgressStatus.COMPLETED.value
        if self.external_flag is not None:
            return self.external_flag.value
        return TeamProgressStatus.IN_PROGRESS.value

    def find_milestone(self, milestone_id: str) -> Optional[Milestone]:
        for m in self.milestones:
            if m.id == milestone_id:
                return m
        return None

    def with_milestones(self, milestones: Iterable[Milestone]) -> "Team":
        return replace(self, milestones=tuple(milestones))


__all__ = ["Milestone", "MilestoneDraft", "Team"]

# Fin del archivo backend/app/modules/milestones/domain/entities.py
