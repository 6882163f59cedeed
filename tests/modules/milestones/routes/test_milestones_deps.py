# -*- coding: utf-8 -*-
"""
backend/tests/modules/milestones/routes/test_milestones_deps.py

Selección del repositorio según MILESTONES_REPOSITORY.

Autor: Ixchel Beristain
Fecha: 2026-02-16
"""
from app.modules.milestones.repositories import InMemoryTeamRepository, SqlTeamRepository
from app.modules.milestones.routes import deps as milestones_deps


def test_memory_backend_yields_process_singleton(monkeypatch):
    monkeypatch.setenv("MILESTONES_REPOSITORY", "memory")

    first = next(milestones_deps.get_team_repository())
    second = next(milestones_deps.get_team_repository())

    assert isinstance(first, InMemoryTeamRepository)
    assert first is second


def test_sql_backend_opens_and_closes_a_session(monkeypatch):
    monkeypatch.setenv("MILESTONES_REPOSITORY", "sql")
    events = []

    def fake_get_db():
        session = object()
        events.append("open")
        try:
            yield session
        finally:
            events.append("close")

    monkeypatch.setattr(milestones_deps, "get_db", fake_get_db)

    gen = milestones_deps.get_team_repository()
    repo = next(gen)
    assert isinstance(repo, SqlTeamRepository)
    assert events == ["open"]

    gen.close()
    assert events == ["open", "close"]
# Fin del archivo backend/tests/modules/milestones/routes/test_milestones_deps.py
