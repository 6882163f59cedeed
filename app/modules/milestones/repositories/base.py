# -*- coding: utf-8 -*-
"""
backend/app/modules/milestones/repositories/base.py

Frontera de persistencia que consume el núcleo de hitos.

Contrato:
- load_team(team_id)  → Team, o TeamNotFoundError
- save_team(team)     → Team guardado con version+1. Atómico por grupo:
                         si la versión almacenada ya no es team.version,
                         lanza ConcurrentUpdateError y no escribe nada.
- list_teams(project_id=None) → grupos (tablero global / colas de revisión)
- add_team(team)      → registra un grupo nuevo (la gestión de grupos es externa)

Cualquier otra falla del almacén se propaga como PersistenceError.
El núcleo no reintenta; reintentos/backoff pertenecen a la implementación.

Autor: Ixchel Beristain
Fecha: 2026-02-11
"""

from __future__ import annotations

from typing import List, Optional, Protocol, runtime_checkable

from app.modules.milestones.domain.entities import Team


@runtime_checkable
class TeamRepository(Protocol):
    def load_team(self, team_id: str) -> Team: ...

    def save_team(self, team: Team) -> Team: ...

    def list_teams(self, project_id: Optional[str] = None) -> List[Team]: ...

    def add_team(self, team: Team) -> Team: ...


__all__ = ["TeamRepository"]

# Fin del archivo backend/app/modules/milestones/repositories/base.py
