# -*- coding: utf-8 -*-
"""
backend/app/modules/milestones/repositories/sql_repository.py

Repositorio SQLAlchemy de grupos y sus hitos.

Responsabilidades:
- Mapear TeamRecord/MilestoneRecord ↔ entidades de dominio
- save_team como una sola transacción con check optimista de versión:
    UPDATE teams ... WHERE id = :id AND version = :version
  y upsert de los hitos por (team_id, id)
- Envolver errores del driver en PersistenceError

La lógica de negocio (transiciones, progreso) permanece en los facades.

Autor: Ixchel Beristain
Fecha: 2026-02-11
"""

from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy import select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.modules.milestones.domain.entities import Milestone, Team
from app.modules.milestones.errors import (
    ConcurrentUpdateError,
    MilestonesError,
    PersistenceError,
    TeamNotFoundError,
    ValidationError,
)
from app.modules.milestones.facades.base import commit_or_raise
from app.modules.milestones.models import MilestoneRecord, TeamRecord

logger = logging.getLogger("milestones.repository")


def _aware(value: Optional[datetime]) -> Optional[datetime]:
    # SQLite devuelve datetimes naive aunque se guarden con tz
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _to_milestone(rec: MilestoneRecord) -> Milestone:
    return Milestone(
        id=rec.id,
        phase_id=rec.phase_id,
        title=rec.title,
        description=rec.description or "",
        state=rec.state,
        teacher_comment=rec.teacher_comment,
        origin=rec.origin,
        created_at=_aware(rec.created_at),
        updated_at=_aware(rec.updated_at),
    )


def _to_team(rec: TeamRecord) -> Team:
    return Team(
        id=rec.id,
        name=rec.name or "",
        project_id=rec.project_id,
        milestones=tuple(_to_milestone(m) for m in rec.milestones),
        progress=rec.progress,
        progress_status=rec.progress_status,
        external_flag=rec.external_flag,
        version=rec.version,
    )


def _fill_milestone(rec: MilestoneRecord, m: Milestone, position: int) -> None:
    rec.position = position
    rec.phase_id = m.phase_id
    rec.title = m.title
    rec.description = m.description
    rec.state = m.state.value
    rec.teacher_comment = m.teacher_comment
    rec.origin = m.origin.value
    rec.created_at = m.created_at
    rec.updated_at = m.updated_at


class SqlTeamRepository:
    """Implementa TeamRepository sobre una Session síncrona."""

    def __init__(self, db: Session):
        self.db = db

    def _run(self, op: str, work):
        try:
            return commit_or_raise(self.db, work)
        except MilestonesError:
            raise
        except SQLAlchemyError as e:
            logger.error("milestones_repository_db_error: op=%s error=%s", op, e)
            raise PersistenceError(f"Error de base de datos en {op}: {e}") from e

    # === Lecturas ===

    def load_team(self, team_id: str) -> Team:
        try:
            rec = self.db.get(TeamRecord, team_id, populate_existing=True)
        except SQLAlchemyError as e:
            raise PersistenceError(f"Error de base de datos en load_team: {e}") from e
        if rec is None:
            raise TeamNotFoundError(team_id)
        return _to_team(rec)

    def list_teams(self, project_id: Optional[str] = None) -> List[Team]:
        stmt = select(TeamRecord).order_by(TeamRecord.name, TeamRecord.id)
        if project_id is not None:
            stmt = stmt.where(TeamRecord.project_id == project_id)
        try:
            records = self.db.scalars(stmt.execution_options(populate_existing=True)).all()
        except SQLAlchemyError as e:
            raise PersistenceError(f"Error de base de datos en list_teams: {e}") from e
        return [_to_team(r) for r in records]

    # === Escrituras ===

    def save_team(self, team: Team) -> Team:
        def _work() -> Team:
            result = self.db.execute(
                update(TeamRecord)
                .where(TeamRecord.id == team.id, TeamRecord.version == team.version)
                .values(
                    name=team.name,
                    project_id=team.project_id,
                    progress=team.progress,
                    progress_status=team.progress_status.value,
                    external_flag=team.external_flag.value if team.external_flag else None,
                    version=team.version + 1,
                )
                .execution_options(synchronize_session=False)
            )
            if result.rowcount != 1:
                current = self.db.get(TeamRecord, team.id, populate_existing=True)
                if current is None:
                    raise TeamNotFoundError(team.id)
                logger.warning(
                    "milestones_repository_version_conflict: team_id=%s expected=%s actual=%s",
                    team.id,
                    team.version,
                    current.version,
                )
                raise ConcurrentUpdateError(team.id, team.version, current.version)

            existing = {
                r.id: r
                for r in self.db.scalars(
                    select(MilestoneRecord).where(MilestoneRecord.team_id == team.id)
                )
            }
            for position, m in enumerate(team.milestones):
                rec = existing.get(m.id)
                if rec is None:
                    rec = MilestoneRecord(team_id=team.id, id=m.id)
                    self.db.add(rec)
                _fill_milestone(rec, m, position)
            return replace(team, version=team.version + 1)

        return self._run("save_team", _work)

    def add_team(self, team: Team) -> Team:
        def _work() -> Team:
            if self.db.get(TeamRecord, team.id) is not None:
                raise ValidationError(f"El grupo ya está registrado: {team.id}", field="id")
            rec = TeamRecord(
                id=team.id,
                name=team.name,
                project_id=team.project_id,
                progress=team.progress,
                progress_status=team.progress_status.value,
                external_flag=team.external_flag.value if team.external_flag else None,
                version=team.version,
            )
            for position, m in enumerate(team.milestones):
                child = MilestoneRecord(team_id=team.id, id=m.id)
                _fill_milestone(child, m, position)
                rec.milestones.append(child)
            self.db.add(rec)
            return team

        return self._run("add_team", _work)


__all__ = ["SqlTeamRepository"]

# Fin del archivo backend/app/modules/milestones/repositories/sql_repository.py
