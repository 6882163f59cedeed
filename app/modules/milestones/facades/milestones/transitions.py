# -*- coding: utf-8 -*-
"""
backend/app/modules/milestones/facades/milestones/transitions.py

Validador de transiciones de hitos.

Reglas de dominio:
1. El destino debe ser un MilestoneState conocido
2. Si el comando exige una compuerta de origen (expected_state), el hito
   debe estar exactamente en ese estado
3. La arista origen → destino debe existir en VALID_MILESTONE_TRANSITIONS
4. Las transiciones identidad fallan (no hay no-op silencioso)

Autor: Ixchel Beristain
Fecha: 2026-02-10
"""

from typing import Optional

from app.modules.milestones.domain.entities import Milestone
from app.modules.milestones.enums import MilestoneState, validate_state_transition
from app.modules.milestones.errors import InvalidTransitionError, ValidationError


def validate_transition(
    milestone: Milestone,
    to_state: MilestoneState,
    *,
    expected_state: Optional[MilestoneState] = None,
) -> MilestoneState:
    """
    Valida que `milestone` pueda pasar a `to_state`.

    Returns:
        El estado destino normalizado.

    Raises:
        ValidationError: si to_state no es un estado conocido.
        InvalidTransitionError: si la transición no es legal.
    """
    try:
        target = MilestoneState(to_state)
    except ValueError:
        raise ValidationError(f"Estado destino desconocido: {to_state!r}", field="target_state") from None

    if expected_state is not None and milestone.state != expected_state:
        raise InvalidTransitionError(
            milestone.id,
            milestone.state,
            target,
            f"El hito {milestone.id} está en '{milestone.state.value}', "
            f"se esperaba '{MilestoneState(expected_state).value}' para pasar a '{target.value}'",
        )

    try:
        validate_state_transition(milestone.state, target)
    except ValueError as e:
        raise InvalidTransitionError(milestone.id, milestone.state, target, str(e)) from None

    return target


__all__ = ["validate_transition"]

# Fin del archivo backend/app/modules/milestones/facades/milestones/transitions.py
