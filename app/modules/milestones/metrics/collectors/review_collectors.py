# -*- coding: utf-8 -*-
"""
backend/app/modules/milestones/metrics/collectors/review_collectors.py

Prometheus collectors para el ciclo de vida de hitos.

Métricas expuestas (familias registradas en REGISTRY):
- milestones_transitions_total{from_state,to_state} - Transiciones aplicadas
- milestones_review_batches_total{gate,outcome}     - Lotes procesados
- milestones_review_batch_size{gate}                - Tamaño de lote

Labels:
- gate: proposal | completion | student
- outcome: success | error

🚫 Prohibido: team_id, milestone_id (alta cardinalidad)

Autor: Ixchel Beristain
Fecha: 2026-02-11
"""
from __future__ import annotations

import logging
from typing import Literal, Optional

from app.shared.core.metrics_helpers import (
    get_or_create_counter,
    get_or_create_histogram,
)

_logger = logging.getLogger("milestones.metrics")

# ---------------------------------------------------------------------------
# Tipos y constantes
# ---------------------------------------------------------------------------
Gate = Literal["proposal", "completion", "student"]
Outcome = Literal["success", "error"]

TRANSITIONS_TOTAL_NAME = "milestones_transitions_total"
BATCHES_TOTAL_NAME = "milestones_review_batches_total"
BATCH_SIZE_NAME = "milestones_review_batch_size"

BATCH_SIZE_BUCKETS = (1, 2, 5, 10, 20, 50, float("inf"))

# ---------------------------------------------------------------------------
# Lazy initialization
# ---------------------------------------------------------------------------
_collectors_initialized = False
_transitions_total: Optional[object] = None
_batches_total: Optional[object] = None
_batch_size: Optional[object] = None


def _ensure_collectors() -> bool:
    """
    Registra los collectors en el REGISTRY de Prometheus.

    Returns:
        True si los collectors están registrados, False si hubo error.
    """
    global _collectors_initialized
    global _transitions_total, _batches_total, _batch_size

    if _collectors_initialized:
        return True

    try:
        _transitions_total = get_or_create_counter(
            TRANSITIONS_TOTAL_NAME,
            "Total milestone state transitions applied",
            labelnames=("from_state", "to_state"),
        )
        _batches_total = get_or_create_counter(
            BATCHES_TOTAL_NAME,
            "Total milestone review batches processed",
            labelnames=("gate", "outcome"),
        )
        _batch_size = get_or_create_histogram(
            BATCH_SIZE_NAME,
            "Number of decisions per milestone review batch",
            labelnames=("gate",),
            buckets=BATCH_SIZE_BUCKETS,
        )
        _collectors_initialized = True
        _logger.info(
            "milestones_metrics_registered: metrics=[%s, %s, %s]",
            TRANSITIONS_TOTAL_NAME,
            BATCHES_TOTAL_NAME,
            BATCH_SIZE_NAME,
        )
        return True
    except Exception as e:
        _logger.error("milestones_metrics_register_error: %s", str(e), exc_info=True)
        return False


# ---------------------------------------------------------------------------
# Public API - funciones seguras (la métrica nunca rompe el comando)
# ---------------------------------------------------------------------------

def init_review_collectors() -> bool:
    """Registra las familias al startup para que aparezcan en /metrics sin actividad."""
    return _ensure_collectors()


def inc_transition(from_state: str, to_state: str) -> None:
    """Incrementa el contador de transiciones aplicadas."""
    try:
        if _ensure_collectors() and _transitions_total:
            _transitions_total.labels(from_state=str(from_state), to_state=str(to_state)).inc()
    except Exception:
        _logger.debug("milestones_metrics_inc_transition_failed", exc_info=True)


def record_review_batch(gate: Gate, outcome: Outcome, size: int) -> None:
    """Registra un lote de decisiones (resultado + tamaño)."""
    try:
        if _ensure_collectors() and _batches_total and _batch_size:
            _batches_total.labels(gate=gate, outcome=outcome).inc()
            _batch_size.labels(gate=gate).observe(size)
    except Exception:
        _logger.debug("milestones_metrics_record_batch_failed", exc_info=True)


__all__ = [
    "TRANSITIONS_TOTAL_NAME",
    "BATCHES_TOTAL_NAME",
    "BATCH_SIZE_NAME",
    "init_review_collectors",
    "inc_transition",
    "record_review_batch",
]

# Fin del archivo backend/app/modules/milestones/metrics/collectors/review_collectors.py
