# -*- coding: utf-8 -*-
"""
backend/app/modules/milestones/routes/errors.py

Traducción de excepciones de dominio a respuestas HTTP.

| Excepción                   | HTTP |
|-----------------------------|------|
| ValidationError             | 422  |
| TeamNotFoundError           | 404  |
| MilestoneNotFoundError      | 404  |
| InvalidTransitionError      | 409  |
| ConcurrentUpdateError       | 409  |
| PersistenceError (resto)    | 503  |

Autor: Ixchel Beristain
Fecha: 2026-02-12
"""

import logging

from fastapi import FastAPI, Request, status

from app.shared.utils.json_response import json_response_utf8
from app.modules.milestones.errors import (
    ConcurrentUpdateError,
    InvalidTransitionError,
    MilestoneNotFoundError,
    PersistenceError,
    TeamNotFoundError,
    ValidationError,
)

logger = logging.getLogger("milestones.http")


def _state_value(state):
    return getattr(state, "value", state)


async def _validation_handler(request: Request, exc: ValidationError):
    return json_response_utf8(
        {"detail": str(exc), "error_code": "validation_error", "field": exc.field},
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
    )


async def _team_not_found_handler(request: Request, exc: TeamNotFoundError):
    return json_response_utf8(
        {"detail": str(exc), "error_code": "team_not_found", "team_id": exc.team_id},
        status_code=status.HTTP_404_NOT_FOUND,
    )


async def _milestone_not_found_handler(request: Request, exc: MilestoneNotFoundError):
    return json_response_utf8(
        {
            "detail": str(exc),
            "error_code": "milestone_not_found",
            "milestone_id": exc.milestone_id,
            "team_id": exc.team_id,
        },
        status_code=status.HTTP_404_NOT_FOUND,
    )


async def _invalid_transition_handler(request: Request, exc: InvalidTransitionError):
    # current_state permite a la UI reconciliar una vista obsoleta
    return json_response_utf8(
        {
            "detail": str(exc),
            "error_code": "invalid_transition",
            "milestone_id": exc.milestone_id,
            "current_state": _state_value(exc.current_state),
            "target_state": _state_value(exc.target_state),
        },
        status_code=status.HTTP_409_CONFLICT,
    )


async def _concurrent_update_handler(request: Request, exc: ConcurrentUpdateError):
    return json_response_utf8(
        {
            "detail": str(exc),
            "error_code": "concurrent_update",
            "team_id": exc.team_id,
            "expected_version": exc.expected_version,
            "actual_version": exc.actual_version,
        },
        status_code=status.HTTP_409_CONFLICT,
    )


async def _persistence_handler(request: Request, exc: PersistenceError):
    logger.error(
        "milestones_persistence_error: method=%s path=%s error=%s",
        request.method,
        request.url.path,
        exc,
    )
    return json_response_utf8(
        {"detail": "Almacenamiento no disponible", "error_code": "persistence_error"},
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
    )


def install_error_handlers(app: FastAPI) -> None:
    """Registra los handlers de dominio. Starlette resuelve por MRO, la subclase gana."""
    app.add_exception_handler(ValidationError, _validation_handler)
    app.add_exception_handler(TeamNotFoundError, _team_not_found_handler)
    app.add_exception_handler(MilestoneNotFoundError, _milestone_not_found_handler)
    app.add_exception_handler(InvalidTransitionError, _invalid_transition_handler)
    app.add_exception_handler(ConcurrentUpdateError, _concurrent_update_handler)
    app.add_exception_handler(PersistenceError, _persistence_handler)


__all__ = ["install_error_handlers"]

# Fin del archivo backend/app/modules/milestones/routes/errors.py
