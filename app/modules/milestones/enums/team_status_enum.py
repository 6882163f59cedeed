# -*- coding: utf-8 -*-
"""
backend/app/modules/milestones/enums/team_status_enum.py

Estado de avance de un grupo.

⚠️ DISTINCIÓN SEMÁNTICA:
- TeamProgressStatus: valor DERIVADO del conjunto de hitos
  (in_progress | completed). Es el único que escribe este módulo.
- TeamFlag: etiqueta EXTERNA (blocked | almost_done) que fijan actores
  ajenos al ciclo de vida. El recálculo de progreso nunca la pisa.

Autor: Ixchel Beristain
Fecha: 2026-02-09
"""

from enum import StrEnum


class TeamProgressStatus(StrEnum):
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


class TeamFlag(StrEnum):
    BLOCKED = "blocked"
    ALMOST_DONE = "almost_done"


__all__ = ["TeamProgressStatus", "TeamFlag"]
# Fin del archivo backend/app/modules/milestones/enums/team_status_enum.py
