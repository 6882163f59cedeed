# -*- coding: utf-8 -*-
"""
backend/app/modules/milestones/enums/milestone_state_enum.py

Enum: milestone_state_enum
Estados del ciclo de vida de un hito (unidad de trabajo de un grupo).

Valores: ('proposed', 'pending_start', 'in_progress', 'in_review',
          'approved', 'rejected')

⚠️ DOS COMPUERTAS DOCENTES:
- Revisión de propuesta: proposed → pending_start | rejected
- Revisión de entrega:   in_review → approved | rejected

Autor: Ixchel Beristain
Fecha: 2026-02-09
"""

from enum import StrEnum


class MilestoneState(StrEnum):
    """
    Estados de un hito.

    Valores:
    - proposed      : Propuesto por el grupo, espera revisión docente
    - pending_start : Aceptado (o asignado por el docente), aún sin iniciar
    - in_progress   : En ejecución por el grupo
    - in_review     : Entregado, espera calificación docente
    - approved      : Entrega aceptada (estado terminal)
    - rejected      : Propuesta o entrega rechazada; puede reenviarse
    """
    PROPOSED = "proposed"
    PENDING_START = "pending_start"
    IN_PROGRESS = "in_progress"
    IN_REVIEW = "in_review"
    APPROVED = "approved"
    REJECTED = "rejected"


class MilestoneOrigin(StrEnum):
    """Autoría del borrador que dio origen al hito."""
    STUDENT = "student"
    ASSISTANT = "assistant"
    TEACHER = "teacher"


__all__ = ["MilestoneState", "MilestoneOrigin"]
# Fin del archivo backend/app/modules/milestones/enums/milestone_state_enum.py
