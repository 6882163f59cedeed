# -*- coding: utf-8 -*-
"""
backend/app/modules/milestones/repositories/inmemory.py

Repositorio in-memory de grupos. Usado en desarrollo (MILESTONES_REPOSITORY=memory)
y en tests de facades/rutas. No toca DB.

Las entidades son inmutables, así que guardar la referencia es seguro:
nadie puede mutar un grupo almacenado desde fuera.
El check-and-set de versión se hace bajo un lock para que dos comandos
concurrentes sobre el mismo grupo no pierdan una actualización.

Autor: Ixchel Beristain
Fecha: 2026-02-11
"""

from __future__ import annotations

import logging
import threading
from dataclasses import replace
from typing import Dict, Iterable, List, Optional

from app.modules.milestones.domain.entities import Team
from app.modules.milestones.errors import (
    ConcurrentUpdateError,
    TeamNotFoundError,
    ValidationError,
)

logger = logging.getLogger("milestones.repository")


class InMemoryTeamRepository:
    """Implementa TeamRepository sobre un dict protegido por lock."""

    def __init__(self, teams: Optional[Iterable[Team]] = None):
        self._teams: Dict[str, Team] = {}
        self._lock = threading.Lock()
        self.save_calls = 0
        for team in teams or ():
            self.add_team(team)

    def load_team(self, team_id: str) -> Team:
        with self._lock:
            team = self._teams.get(team_id)
        if team is None:
            raise TeamNotFoundError(team_id)
        return team

    def save_team(self, team: Team) -> Team:
        with self._lock:
            stored = self._teams.get(team.id)
            if stored is None:
                raise TeamNotFoundError(team.id)
            if stored.version != team.version:
                logger.warning(
                    "milestones_repository_version_conflict: team_id=%s expected=%s actual=%s",
                    team.id,
                    team.version,
                    stored.version,
                )
                raise ConcurrentUpdateError(team.id, team.version, stored.version)
            saved = replace(team, version=team.version + 1)
            self._teams[team.id] = saved
            self.save_calls += 1
        return saved

    def list_teams(self, project_id: Optional[str] = None) -> List[Team]:
        with self._lock:
            teams = list(self._teams.values())
        if project_id is not None:
            teams = [t for t in teams if t.project_id == project_id]
        return sorted(teams, key=lambda t: (t.name, t.id))

    def add_team(self, team: Team) -> Team:
        with self._lock:
            if team.id in self._teams:
                raise ValidationError(f"El grupo ya está registrado: {team.id}", field="id")
            self._teams[team.id] = team
        return team


__all__ = ["InMemoryTeamRepository"]

# Fin del archivo backend/app/modules/milestones/repositories/inmemory.py
