# -*- coding: utf-8 -*-
"""
backend/tests/modules/milestones/routes/conftest.py

Configuración de tests para las rutas del módulo de hitos.
App mínima con el router del módulo, handlers de errores de dominio y
repositorio in-memory inyectado vía dependency_overrides.

Autor: Ixchel Beristain
Fecha: 2026-02-13
"""
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from app.modules.milestones.routes import deps as milestones_deps
from app.modules.milestones.routes import get_milestones_router, install_error_handlers

TEACHER = {"X-Actor-Role": "teacher"}
STUDENT = {"X-Actor-Role": "student"}


@pytest.fixture
def teacher():
    return TEACHER


@pytest.fixture
def student():
    return STUDENT


@pytest.fixture
def client(repo):
    """TestClient con el repositorio in-memory del test."""
    app = FastAPI(title="Milestones Test App")
    app.include_router(get_milestones_router())
    install_error_handlers(app)

    app.dependency_overrides[milestones_deps.get_team_repository] = lambda: repo

    client_instance = TestClient(app)
    yield client_instance

    app.dependency_overrides.clear()
