# backend/tests/conftest.py
# -*- coding: utf-8 -*-
"""
Config global de tests del backend de Hitos.

- PYTHON_ENV=test antes de importar la app (EnvTestingSettings: repositorio
  in-memory, SQLite en memoria, logging WARNING)
- Caché de settings limpia entre tests para que monkeypatch.setenv aplique
"""

import os

import pytest

os.environ.setdefault("PYTHON_ENV", "test")
os.environ.setdefault("MILESTONES_REPOSITORY", "memory")


@pytest.fixture(autouse=True)
def _fresh_settings():
    from app.shared.config import get_settings

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()

# Fin del archivo backend/tests/conftest.py
