# backend/tests/modules/milestones/services/test_milestones_query_service.py

from app.modules.milestones.services import MilestonesQueryService


def test_query_service_reads_without_writing(repo, make_team):
    repo.add_team(make_team({"m1": "in_review", "m2": "proposed"}, project_id="p1"))
    svc = MilestonesQueryService(repo)

    assert svc.get_team("t1").id == "t1"
    assert [m.id for m in svc.get_board("t1").active] == ["m1"]
    assert [b.team_id for b in svc.get_global_board(project_id="p1")] == ["t1"]
    assert [i.milestone.id for i in svc.list_pending_reviews()] == ["m1"]
    assert [i.milestone.id for i in svc.list_pending_proposals(project_id="p1")] == ["m2"]
    assert svc.get_global_board(project_id="otro") == []
    assert repo.save_calls == 0
