# backend/tests/modules/milestones/routes/test_milestones_routes_commands.py

import pytest

from app.modules.milestones.enums import MilestoneState


@pytest.fixture
def team(repo, make_team):
    return repo.add_team(make_team())


def _propose(client, student, titles):
    resp = client.post(
        "/teams/t1/milestones/proposals",
        json={"phase_id": "fase-1", "drafts": [{"title": t} for t in titles]},
        headers=student,
    )
    assert resp.status_code == 201, resp.text
    return [m["id"] for m in resp.json()["items"]]


def test_propose_returns_created_milestones(client, student, team):
    resp = client.post(
        "/teams/t1/milestones/proposals",
        json={
            "phase_id": "fase-1",
            "drafts": [
                {"title": "  Diseñar encuesta ", "description": "v1"},
                {"title": "Piloto", "origin": "assistant"},
            ],
        },
        headers=student,
    )
    assert resp.status_code == 201
    body = resp.json()
    assert body["success"] is True
    assert body["total"] == 2
    assert body["items"][0]["title"] == "Diseñar encuesta"
    assert body["items"][0]["state"] == "proposed"
    assert body["items"][1]["origin"] == "assistant"


def test_propose_empty_drafts_is_422(client, student, team, repo):
    resp = client.post(
        "/teams/t1/milestones/proposals",
        json={"phase_id": "fase-1", "drafts": []},
        headers=student,
    )
    assert resp.status_code == 422
    assert resp.json()["error_code"] == "validation_error"
    assert repo.load_team("t1").milestones == ()


def test_propose_with_teacher_origin_is_422(client, student, team, repo):
    resp = client.post(
        "/teams/t1/milestones/proposals",
        json={"phase_id": "fase-1", "drafts": [{"title": "X", "origin": "teacher"}]},
        headers=student,
    )
    assert resp.status_code == 422
    assert resp.json()["field"] == "origin"
    assert repo.load_team("t1").milestones == ()


def test_teacher_cannot_propose(client, teacher, team):
    resp = client.post(
        "/teams/t1/milestones/proposals",
        json={"phase_id": "fase-1", "drafts": [{"title": "X"}]},
        headers=teacher,
    )
    assert resp.status_code == 403


def test_missing_role_header_is_401(client, team):
    resp = client.get("/teams/t1")
    assert resp.status_code == 401


def test_unknown_team_is_404(client, student):
    resp = client.post(
        "/teams/ghost/milestones/proposals",
        json={"phase_id": "fase-1", "drafts": [{"title": "X"}]},
        headers=student,
    )
    assert resp.status_code == 404
    assert resp.json()["team_id"] == "ghost"


def test_full_flow_over_http(client, teacher, student, team):
    [mid] = _propose(client, student, ["Marco teórico"])

    resp = client.post(
        "/teams/t1/reviews/proposals",
        json={"decisions": [{"milestone_id": mid, "accept": True}]},
        headers=teacher,
    )
    assert resp.status_code == 200
    assert resp.json()["approved_count"] == 1

    resp = client.post(f"/teams/t1/milestones/{mid}/start", headers=student)
    assert resp.json()["state"] == "in_progress"

    resp = client.post(f"/teams/t1/milestones/{mid}/submit", headers=student)
    assert resp.json()["state"] == "in_review"

    resp = client.post(
        "/teams/t1/reviews/submissions",
        json={"decisions": [{"milestone_id": mid, "approve": True}]},
        headers=teacher,
    )
    assert resp.status_code == 200
    assert resp.json() == {
        "approved_count": 1,
        "rejected_count": 0,
        "progress": 100,
        "status": "completed",
    }


def test_student_cannot_grade(client, student, repo, make_team):
    repo.add_team(make_team({"m1": "in_review"}))
    resp = client.post(
        "/teams/t1/reviews/submissions",
        json={"decisions": [{"milestone_id": "m1", "approve": True}]},
        headers=student,
    )
    assert resp.status_code == 403
    assert repo.load_team("t1").find_milestone("m1").state is MilestoneState.IN_REVIEW


def test_invalid_transition_is_409_with_current_state(client, student, repo, make_team):
    repo.add_team(make_team({"m1": "approved"}))
    resp = client.post("/teams/t1/milestones/m1/resubmit", headers=student)
    assert resp.status_code == 409
    body = resp.json()
    assert body["error_code"] == "invalid_transition"
    assert body["milestone_id"] == "m1"
    assert body["current_state"] == "approved"
    assert body["target_state"] == "in_progress"


def test_batch_with_invalid_entry_is_atomic(client, teacher, repo, make_team):
    repo.add_team(make_team({"A": "in_review", "B": "approved"}))
    resp = client.post(
        "/teams/t1/reviews/submissions",
        json={"decisions": [
            {"milestone_id": "A", "approve": True},
            {"milestone_id": "B", "approve": False, "comment": "x"},
        ]},
        headers=teacher,
    )
    assert resp.status_code == 409
    assert repo.load_team("t1").find_milestone("A").state is MilestoneState.IN_REVIEW
    assert repo.save_calls == 0


def test_unknown_milestone_is_404(client, student, team):
    resp = client.post("/teams/t1/milestones/ghost/start", headers=student)
    assert resp.status_code == 404
    assert resp.json()["error_code"] == "milestone_not_found"


def test_concurrent_update_is_409(client, student, repo, make_team, monkeypatch):
    repo.add_team(make_team({"m1": "pending_start"}))
    stale = repo.load_team("t1")
    repo.save_team(stale)
    monkeypatch.setattr(repo, "load_team", lambda team_id: stale)

    resp = client.post("/teams/t1/milestones/m1/start", headers=student)
    assert resp.status_code == 409
    assert resp.json()["error_code"] == "concurrent_update"


def test_persistence_error_is_503(client, student, repo, make_team, monkeypatch):
    from app.modules.milestones.errors import PersistenceError

    repo.add_team(make_team({"m1": "pending_start"}))

    def _down(team):
        raise PersistenceError("conexión perdida")

    monkeypatch.setattr(repo, "save_team", _down)
    resp = client.post("/teams/t1/milestones/m1/start", headers=student)
    assert resp.status_code == 503
    assert resp.json()["error_code"] == "persistence_error"


def test_assign_flag_and_refresh(client, teacher, repo, make_team):
    repo.add_team(make_team({"m1": "approved", "m2": "proposed"}))

    resp = client.post(
        "/teams/t1/milestones/assignments",
        json={"phase_id": "fase-2", "items": [{"title": "Entrega parcial"}]},
        headers=teacher,
    )
    assert resp.status_code == 201
    item = resp.json()["items"][0]
    assert item["state"] == "pending_start"
    assert item["origin"] == "teacher"

    resp = client.put("/teams/t1/flag", json={"flag": "blocked"}, headers=teacher)
    assert resp.status_code == 200
    assert resp.json()["status"] == "blocked"
    assert resp.json()["progress"] == 33

    resp = client.post("/teams/t1/progress/refresh", headers=teacher)
    assert resp.status_code == 200
    assert resp.json()["progress"] == 33
