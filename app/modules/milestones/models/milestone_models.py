# -*- coding: utf-8 -*-
"""
backend/app/modules/milestones/models/milestone_models.py

Modelos SQLAlchemy para grupos (teams) y sus hitos (milestones).

Campos durables que lee y escribe el núcleo:
- teams.progress / teams.progress_status (derivados)
- teams.external_flag (propiedad de actores externos)
- teams.version (control optimista de concurrencia)
- milestones.* (colección ordenada por position)

Los estados se guardan como texto (valores de MilestoneState /
TeamProgressStatus / TeamFlag) para ser portables entre SQLite y PostgreSQL.

Autor: Ixchel Beristain
Fecha: 2026-02-11
"""

from sqlalchemy import (
    Column,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from app.shared.database import Base
from app.modules.milestones.enums import (
    DEFAULT_MILESTONE_STATE,
    DEFAULT_TEAM_STATUS,
    MilestoneOrigin,
)


class TeamRecord(Base):
    """Fila persistida de un grupo."""

    __tablename__ = "teams"

    id = Column(String(64), primary_key=True)
    name = Column(String(255), nullable=False, default="")
    project_id = Column(String(64), nullable=True, index=True)

    progress = Column(Integer, nullable=False, default=0)
    progress_status = Column(
        String(32),
        nullable=False,
        default=DEFAULT_TEAM_STATUS.value,
    )
    external_flag = Column(String(32), nullable=True)

    version = Column(Integer, nullable=False, default=0)

    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )

    milestones = relationship(
        "MilestoneRecord",
        back_populates="team",
        order_by="MilestoneRecord.position",
        cascade="all, delete-orphan",
        lazy="selectin",
    )

    def __repr__(self) -> str:
        return f"<TeamRecord id={self.id} progress={self.progress} version={self.version}>"


class MilestoneRecord(Base):
    """Fila persistida de un hito; la PK es (team_id, id)."""

    __tablename__ = "milestones"

    team_id = Column(
        String(64),
        ForeignKey("teams.id", ondelete="CASCADE"),
        primary_key=True,
    )
    id = Column(String(64), primary_key=True)
    position = Column(Integer, nullable=False, default=0)

    phase_id = Column(String(64), nullable=False)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False, default="")
    state = Column(String(32), nullable=False, default=DEFAULT_MILESTONE_STATE.value)
    teacher_comment = Column(Text, nullable=True)
    origin = Column(String(32), nullable=False, default=MilestoneOrigin.STUDENT.value)

    created_at = Column(DateTime(timezone=True), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False)

    team = relationship("TeamRecord", back_populates="milestones")

    __table_args__ = (
        Index("ix_milestones_team_state", "team_id", "state"),
    )

    def __repr__(self) -> str:
        return f"<MilestoneRecord id={self.id} team_id={self.team_id} state={self.state}>"


__all__ = ["TeamRecord", "MilestoneRecord"]

# Fin del archivo backend/app/modules/milestones/models/milestone_models.py
