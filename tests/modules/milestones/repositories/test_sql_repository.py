# backend/tests/modules/milestones/repositories/test_sql_repository.py
"""
SqlTeamRepository sobre SQLite en memoria (StaticPool).
"""

from dataclasses import replace

import pytest
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import sessionmaker

from app.modules.milestones import models  # noqa: F401  (registra tablas)
from app.modules.milestones.domain import GradeDecision, MilestoneDraft
from app.modules.milestones.enums import (
    MilestoneOrigin,
    MilestoneState,
    TeamFlag,
    TeamProgressStatus,
)
from app.modules.milestones.errors import (
    ConcurrentUpdateError,
    PersistenceError,
    TeamNotFoundError,
    ValidationError,
)
from app.modules.milestones.facades import MilestoneFacade
from app.modules.milestones.repositories import SqlTeamRepository, TeamRepository
from app.shared.database import Base
from app.shared.database.database import build_engine


@pytest.fixture
def engine():
    eng = build_engine("sqlite:///:memory:")
    Base.metadata.create_all(eng)
    yield eng
    Base.metadata.drop_all(eng)
    eng.dispose()


@pytest.fixture
def db(engine):
    session = sessionmaker(bind=engine, expire_on_commit=False)()
    yield session
    session.close()


@pytest.fixture
def sql_repo(db):
    return SqlTeamRepository(db)


def test_implements_protocol(sql_repo):
    assert isinstance(sql_repo, TeamRepository)


def test_add_and_load_roundtrip(sql_repo, make_team):
    team = make_team(
        {"m1": "approved", "m2": "in_review"},
        project_id="p1",
        progress=50,
        external_flag=TeamFlag.BLOCKED,
    )
    sql_repo.add_team(team)

    loaded = sql_repo.load_team("t1")
    assert loaded.name == "Equipo Alfa"
    assert loaded.project_id == "p1"
    assert loaded.progress == 50
    assert loaded.progress_status is TeamProgressStatus.IN_PROGRESS
    assert loaded.external_flag is TeamFlag.BLOCKED
    assert loaded.version == 0
    assert [m.id for m in loaded.milestones] == ["m1", "m2"]
    assert loaded.milestones[0].state is MilestoneState.APPROVED
    assert loaded.milestones[0].created_at == team.milestones[0].created_at
    assert loaded.milestones[0].created_at.tzinfo is not None


def test_load_missing_team(sql_repo):
    with pytest.raises(TeamNotFoundError):
        sql_repo.load_team("ghost")


def test_add_duplicate_team(sql_repo, make_team):
    sql_repo.add_team(make_team())
    with pytest.raises(ValidationError):
        sql_repo.add_team(make_team())


def test_save_bumps_version_and_persists_milestones(sql_repo, make_team, make_milestone):
    sql_repo.add_team(make_team({"m1": "in_review"}))
    team = sql_repo.load_team("t1")

    changed = team.with_milestones([
        team.milestones[0]._with_state(MilestoneState.APPROVED, comment="Bien"),
        make_milestone(id="m2", origin=MilestoneOrigin.TEACHER),
    ])
    saved = sql_repo.save_team(replace(changed, progress=50))
    assert saved.version == 1

    loaded = sql_repo.load_team("t1")
    assert loaded.version == 1
    assert loaded.progress == 50
    assert [(m.id, m.state) for m in loaded.milestones] == [
        ("m1", MilestoneState.APPROVED),
        ("m2", MilestoneState.PROPOSED),
    ]
    assert loaded.milestones[0].teacher_comment == "Bien"
    assert loaded.milestones[1].origin is MilestoneOrigin.TEACHER


def test_stale_save_raises_concurrent_update(sql_repo, make_team):
    sql_repo.add_team(make_team())
    stale = sql_repo.load_team("t1")
    sql_repo.save_team(replace(stale, name="Primero"))

    with pytest.raises(ConcurrentUpdateError) as exc:
        sql_repo.save_team(replace(stale, name="Segundo"))
    assert exc.value.actual_version == 1
    assert sql_repo.load_team("t1").name == "Primero"


def test_save_unknown_team(sql_repo, make_team):
    with pytest.raises(TeamNotFoundError):
        sql_repo.save_team(make_team(id="ghost"))


def test_list_teams_filters_by_project(sql_repo, make_team):
    sql_repo.add_team(make_team(id="t2", name="Beta", project_id="p1"))
    sql_repo.add_team(make_team(id="t1", name="Alfa", project_id="p1"))
    sql_repo.add_team(make_team(id="t3", name="Gama", project_id="p2"))
    assert [t.id for t in sql_repo.list_teams()] == ["t1", "t2", "t3"]
    assert [t.id for t in sql_repo.list_teams("p2")] == ["t3"]


def test_driver_errors_are_wrapped(sql_repo, make_team, monkeypatch):
    sql_repo.add_team(make_team())

    def _boom(*args, **kwargs):
        raise OperationalError("UPDATE teams", {}, Exception("database is locked"))

    monkeypatch.setattr(sql_repo.db, "execute", _boom)
    with pytest.raises(PersistenceError):
        sql_repo.save_team(sql_repo.load_team("t1"))


def test_facade_batch_on_sql_backend(sql_repo, make_team):
    sql_repo.add_team(make_team({"A": "in_review", "B": "in_review"}))
    facade = MilestoneFacade(sql_repo)

    summary = facade.grade_submissions(
        "t1", [GradeDecision("A", True), GradeDecision("B", False, "needs detail")]
    )
    assert summary.progress == 50

    loaded = sql_repo.load_team("t1")
    assert loaded.find_milestone("B").teacher_comment == "needs detail"
    assert loaded.version == 1

    facade.propose_milestones("t1", "fase-2", [MilestoneDraft("Nuevo")])
    assert sql_repo.load_team("t1").progress == 33
# Fin del archivo backend/tests/modules/milestones/repositories/test_sql_repository.py
