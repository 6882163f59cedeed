# -*- coding: utf-8 -*-
"""
backend/app/modules/milestones/services/__init__.py

Servicios de aplicación del módulo Milestones.

Capa de orquestación (application layer) sobre MilestoneFacade:
- MilestonesCommandService : comandos/mutaciones
- MilestonesQueryService   : lecturas (grupo, tableros, colas de revisión)

Autor: Ixchel Beristain
Fecha: 2026-02-12
"""

from .commands import MilestonesCommandService
from .queries import MilestonesQueryService

__all__ = [
    "MilestonesCommandService",
    "MilestonesQueryService",
]

# Fin del archivo backend/app/modules/milestones/services/__init__.py
