# -*- coding: utf-8 -*-
"""
backend/app/modules/milestones/errors.py

Excepciones de dominio para el módulo de hitos.
Ninguna se recupera en silencio: toda falla aborta el comando completo
y se propaga al llamador (rutas, servicios o host).

Autor: Ixchel Beristain
Fecha: 2026-02-09
"""


class MilestonesError(Exception):
    """Raíz de las excepciones del módulo de hitos."""


class ValidationError(MilestonesError):
    """Entrada mal formada (título vacío, lote vacío, ids duplicados)."""
    def __init__(self, message: str, field: str | None = None):
        self.field = field
        super().__init__(message)


class TeamNotFoundError(MilestonesError):
    """Se lanza cuando no se encuentra un grupo por ID."""
    def __init__(self, team_id):
        self.team_id = team_id
        super().__init__(f"Grupo no encontrado: {team_id}")


class MilestoneNotFoundError(MilestonesError):
    """Se lanza cuando el hito no pertenece a la colección del grupo."""
    def __init__(self, milestone_id, team_id=None):
        self.milestone_id = milestone_id
        self.team_id = team_id
        super().__init__(f"Hito no encontrado: {milestone_id} (grupo {team_id})")


class InvalidTransitionError(MilestonesError):
    """
    Se lanza cuando el cambio de estado solicitado no está en el grafo.
    Incluye el estado actual para que la UI pueda reconciliar una vista obsoleta.
    """
    def __init__(self, milestone_id, current_state, target_state, message=None):
        self.milestone_id = milestone_id
        self.current_state = current_state
        self.target_state = target_state
        default_msg = (
            f"Transición inválida para hito {milestone_id}: "
            f"{current_state} → {target_state}"
        )
        super().__init__(message or default_msg)


class PersistenceError(MilestonesError):
    """Falla opaca del repositorio. Este módulo no reintenta."""
    def __init__(self, message: str):
        super().__init__(message)


class ConcurrentUpdateError(PersistenceError):
    """Otro actor escribió el grupo entre la lectura y la escritura."""
    def __init__(self, team_id, expected_version: int, actual_version: int):
        self.team_id = team_id
        self.expected_version = expected_version
        self.actual_version = actual_version
        super().__init__(
            f"Conflicto de versión en grupo {team_id}: "
            f"esperada {expected_version}, actual {actual_version}"
        )


__all__ = [
    "MilestonesError",
    "ValidationError",
    "TeamNotFoundError",
    "MilestoneNotFoundError",
    "InvalidTransitionError",
    "PersistenceError",
    "ConcurrentUpdateError",
]

# Fin del archivo backend/app/modules/milestones/errors.py
