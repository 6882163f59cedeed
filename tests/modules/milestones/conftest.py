# -*- coding: utf-8 -*-
"""
backend/tests/modules/milestones/conftest.py

Fixtures compartidas del módulo de hitos: reloj fijo, fábricas de
hitos/grupos y repositorio in-memory.

Autor: Ixchel Beristain
Fecha: 2026-02-13
"""
from datetime import datetime, timezone

import pytest

from app.modules.milestones.domain.entities import Milestone, Team
from app.modules.milestones.enums import MilestoneState
from app.modules.milestones.facades import MilestoneFacade
from app.modules.milestones.repositories import InMemoryTeamRepository

T0 = datetime(2026, 2, 1, 12, 0, tzinfo=timezone.utc)
T1 = datetime(2026, 2, 2, 9, 30, tzinfo=timezone.utc)


@pytest.fixture
def now():
    return T1


@pytest.fixture
def clock(now):
    return lambda: now


@pytest.fixture
def make_milestone():
    """Fábrica: make_milestone(state, id='m1', title=...)."""

    def _make(state=MilestoneState.PROPOSED, id=None, title=None, **kwargs):
        kwargs.setdefault("phase_id", "fase-1")
        kwargs.setdefault("created_at", T0)
        if id is not None:
            kwargs["id"] = id
        return Milestone(title=title or f"Hito {id or ''}".strip(), state=state, **kwargs)

    return _make


@pytest.fixture
def make_team(make_milestone):
    """
    Fábrica: make_team({"m1": "proposed", "m2": "approved"}, id="t1").
    El progreso guardado se deja en 0 salvo que se indique.
    """

    def _make(states=None, id="t1", name="Equipo Alfa", **kwargs):
        milestones = tuple(
            make_milestone(MilestoneState(state), id=mid)
            for mid, state in (states or {}).items()
        )
        return Team(id=id, name=name, milestones=milestones, **kwargs)

    return _make


@pytest.fixture
def repo():
    return InMemoryTeamRepository()


@pytest.fixture
def facade(repo, clock):
    return MilestoneFacade(repo, clock=clock)

# Fin del archivo backend/tests/modules/milestones/conftest.py
