# -*- coding: utf-8 -*-
"""
backend/app/modules/milestones/services/queries.py

Capa de aplicación (lecturas) del módulo Milestones.
Orquesta MilestoneFacade; ninguna consulta escribe en el repositorio.

Autor: Ixchel Beristain
Fecha: 2026-02-12
"""
from __future__ import annotations

from typing import Optional

from app.modules.milestones.facades import MilestoneFacade
from app.modules.milestones.repositories.base import TeamRepository


class MilestonesQueryService:
    """Consultas de grupos, tableros y colas de revisión."""

    def __init__(self, repository: TeamRepository):
        self.repository = repository
        self.facade = MilestoneFacade(repository)

    # ---- Grupo ----
    def get_team(self, team_id: str):
        return self.facade.get_team(team_id)

    def get_board(self, team_id: str):
        return self.facade.get_board(team_id)

    # ---- Vistas docentes ----
    def get_global_board(self, *, project_id: Optional[str] = None):
        return self.facade.get_global_board(project_id)

    def list_pending_reviews(self, *, project_id: Optional[str] = None):
        return self.facade.list_pending_reviews(project_id)

    def list_pending_proposals(self, *, project_id: Optional[str] = None):
        return self.facade.list_pending_proposals(project_id)


# Fin del archivo backend/app/modules/milestones/services/queries.py
