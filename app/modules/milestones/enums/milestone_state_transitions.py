# -*- coding: utf-8 -*-
"""
backend/app/modules/milestones/enums/milestone_state_transitions.py

Mapa de transiciones válidas para MilestoneState.

Reglas de transición:
- proposed      → pending_start | rejected   (revisión de propuesta, docente)
- pending_start → in_progress                (inicio de trabajo, alumno)
- in_progress   → in_review                  (entrega, alumno)
- in_review     → approved | rejected        (revisión de entrega, docente)
- rejected      → in_progress                (reenvío tras corrección, alumno)
- approved      → (estado terminal, sin transiciones)

Las transiciones identidad (p. ej. approved → approved) NO son válidas:
un doble envío debe fallar, no pasar como no-op.

Autor: Ixchel Beristain
Fecha: 2026-02-09
"""

from enum import StrEnum
from typing import Dict, Optional, Set, Tuple

from .milestone_state_enum import MilestoneState


class ActorRole(StrEnum):
    TEACHER = "teacher"
    STUDENT = "student"


# Mapa de transiciones válidas: estado_origen → {estados_destino_permitidos}
VALID_MILESTONE_TRANSITIONS: Dict[MilestoneState, Set[MilestoneState]] = {
    MilestoneState.PROPOSED: {
        MilestoneState.PENDING_START,
        MilestoneState.REJECTED,
    },
    MilestoneState.PENDING_START: {
        MilestoneState.IN_PROGRESS,
    },
    MilestoneState.IN_PROGRESS: {
        MilestoneState.IN_REVIEW,
    },
    MilestoneState.IN_REVIEW: {
        MilestoneState.APPROVED,
        MilestoneState.REJECTED,
    },
    MilestoneState.REJECTED: {
        MilestoneState.IN_PROGRESS,
    },
    MilestoneState.APPROVED: set(),  # Estado terminal
}

# Rol que dispara cada arista del grafo
TRANSITION_ACTORS: Dict[Tuple[MilestoneState, MilestoneState], ActorRole] = {
    (MilestoneState.PROPOSED, MilestoneState.PENDING_START): ActorRole.TEACHER,
    (MilestoneState.PROPOSED, MilestoneState.REJECTED): ActorRole.TEACHER,
    (MilestoneState.PENDING_START, MilestoneState.IN_PROGRESS): ActorRole.STUDENT,
    (MilestoneState.IN_PROGRESS, MilestoneState.IN_REVIEW): ActorRole.STUDENT,
    (MilestoneState.IN_REVIEW, MilestoneState.APPROVED): ActorRole.TEACHER,
    (MilestoneState.IN_REVIEW, MilestoneState.REJECTED): ActorRole.TEACHER,
    (MilestoneState.REJECTED, MilestoneState.IN_PROGRESS): ActorRole.STUDENT,
}


def is_valid_state_transition(
    from_state: MilestoneState,
    to_state: MilestoneState,
) -> bool:
    """
    Valida si una transición de estado es permitida.

    Args:
        from_state: Estado actual.
        to_state: Estado destino.

    Returns:
        True si la transición es válida, False en caso contrario.
    """
    if from_state not in VALID_MILESTONE_TRANSITIONS:
        return False
    return to_state in VALID_MILESTONE_TRANSITIONS[from_state]


def get_allowed_transitions(from_state: MilestoneState) -> Set[MilestoneState]:
    """Obtiene los estados permitidos desde un estado dado."""
    return set(VALID_MILESTONE_TRANSITIONS.get(from_state, set()))


def get_transition_actor(
    from_state: MilestoneState,
    to_state: MilestoneState,
) -> Optional[ActorRole]:
    """Rol que puede disparar la transición, o None si no existe la arista."""
    return TRANSITION_ACTORS.get((from_state, to_state))


def validate_state_transition(
    from_state: MilestoneState,
    to_state: MilestoneState,
) -> None:
    """
    Valida una transición de estado, lanzando excepción si no es válida.

    Raises:
        ValueError: Si la transición no es válida.
    """
    if not is_valid_state_transition(from_state, to_state):
        allowed = get_allowed_transitions(from_state)
        allowed_str = ", ".join(sorted(s.value for s in allowed)) if allowed else "ninguno"
        raise ValueError(
            f"Transición de estado inválida: '{from_state.value}' → '{to_state.value}'. "
            f"Transiciones permitidas desde '{from_state.value}': {allowed_str}"
        )


__all__ = [
    "ActorRole",
    "VALID_MILESTONE_TRANSITIONS",
    "TRANSITION_ACTORS",
    "is_valid_state_transition",
    "get_allowed_transitions",
    "get_transition_actor",
    "validate_state_transition",
]

# Fin del archivo backend/app/modules/milestones/enums/milestone_state_transitions.py
