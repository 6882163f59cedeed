# -*- coding: utf-8 -*-
"""
backend/app/observability/prom.py

Configuración de observabilidad Prometheus del backend de Hitos.

Incluye:
- Middleware HTTP para conteo y latencia por ruta/estado
- Endpoint /metrics compatible con Prometheus (pull model)
- Soporte multiproceso (Prometheus MultiProcess Collector)

El label `path` usa la plantilla de la ruta (/teams/{team_id}/board),
no la URL concreta, para no disparar la cardinalidad.

Autor: Ixchel Beristain
Fecha: 07/11/2025
"""
from __future__ import annotations

import os
from time import perf_counter
from typing import Optional

from fastapi import FastAPI
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response
from prometheus_client import (
    CollectorRegistry, multiprocess, generate_latest, CONTENT_TYPE_LATEST,
)

from app.shared.core.metrics_helpers import get_or_create_counter, get_or_create_histogram

# Contadores/Histogramas de capa HTTP (labels saneados: method/path/status)
REQUEST_COUNT = get_or_create_counter(
    "http_requests_total",
    "Total HTTP requests",
    labelnames=("method", "path", "status"),
)
REQUEST_LATENCY = get_or_create_histogram(
    "http_request_latency_seconds",
    "Latency per request (s)",
    labelnames=("method", "path", "status"),
)


def _route_template(request) -> str:
    route = request.scope.get("route")
    return getattr(route, "path", None) or "unmatched"


class PrometheusMiddleware(BaseHTTPMiddleware):
    """Middleware para instrumentar peticiones HTTP en FastAPI."""

    async def dispatch(self, request, call_next):
        method = request.method

        start = perf_counter()
        resp = await call_next(request)
        elapsed = perf_counter() - start

        path = _route_template(request)
        status = str(resp.status_code)
        REQUEST_LATENCY.labels(method, path, status).observe(elapsed)
        REQUEST_COUNT.labels(method, path, status).inc()
        return resp


def _build_registry() -> Optional[CollectorRegistry]:
    """Inicializa CollectorRegistry con soporte multiproceso (si aplica)."""
    if os.environ.get("PROMETHEUS_MULTIPROC_DIR"):
        registry = CollectorRegistry()
        multiprocess.MultiProcessCollector(registry)
        return registry
    return None


def mount_metrics(app: FastAPI, path: str = "/metrics") -> None:
    """Registra el endpoint /metrics en la app FastAPI."""
    registry = _build_registry()

    @app.get(path, include_in_schema=False)
    def metrics():
        data = generate_latest(registry) if registry else generate_latest()
        return Response(content=data, media_type=CONTENT_TYPE_LATEST)


def setup_observability(app: FastAPI) -> None:
    """Agrega middleware de Prometheus y monta el endpoint /metrics."""
    app.add_middleware(PrometheusMiddleware)
    mount_metrics(app)


__all__ = ["PrometheusMiddleware", "mount_metrics", "setup_observability"]

# Fin del archivo backend/app/observability/prom.py
