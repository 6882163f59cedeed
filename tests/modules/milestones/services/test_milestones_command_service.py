# backend/tests/modules/milestones/services/test_milestones_command_service.py

import pytest

import app.modules.milestones.services.commands as commands_mod
from app.modules.milestones.domain import GradeDecision, MilestoneDraft, ProposalDecision
from app.modules.milestones.domain import commands as cmd
from app.modules.milestones.enums import TeamFlag
from app.modules.milestones.services import MilestonesCommandService


@pytest.fixture
def facade_mock(monkeypatch, mocker):
    mock = mocker.MagicMock()
    monkeypatch.setattr(commands_mod, "MilestoneFacade", lambda repository: mock)
    return mock


@pytest.fixture
def svc(facade_mock, repo):
    return MilestonesCommandService(repo)


def test_propose_dispatches_command_with_tuple_drafts(svc, facade_mock):
    drafts = [MilestoneDraft("A"), MilestoneDraft("B")]
    facade_mock.dispatch.return_value = ["m-a", "m-b"]

    result = svc.propose("t1", phase_id="fase-1", drafts=drafts)

    assert result == ["m-a", "m-b"]
    facade_mock.dispatch.assert_called_once_with(
        cmd.ProposeMilestones(team_id="t1", phase_id="fase-1", drafts=tuple(drafts))
    )


@pytest.mark.parametrize("method,args,expected", [
    ("start", ("t1", "m1"), cmd.StartMilestone(team_id="t1", milestone_id="m1")),
    ("submit", ("t1", "m1"), cmd.SubmitForReview(team_id="t1", milestone_id="m1")),
    ("resubmit", ("t1", "m1"), cmd.Resubmit(team_id="t1", milestone_id="m1")),
    ("set_flag", ("t1", TeamFlag.BLOCKED), cmd.SetExternalFlag(team_id="t1", flag=TeamFlag.BLOCKED)),
    ("refresh_progress", ("t1",), cmd.RefreshProgress(team_id="t1")),
])
def test_single_commands_dispatch(svc, facade_mock, method, args, expected):
    getattr(svc, method)(*args)
    facade_mock.dispatch.assert_called_once_with(expected)


def test_review_batches_dispatch(svc, facade_mock):
    svc.review_proposals("t1", [ProposalDecision("m1", True)])
    svc.grade_submissions("t1", [GradeDecision("m2", False, "x")])
    calls = [c.args[0] for c in facade_mock.dispatch.call_args_list]
    assert calls == [
        cmd.ReviewProposals(team_id="t1", decisions=(ProposalDecision("m1", True),)),
        cmd.GradeSubmissions(team_id="t1", decisions=(GradeDecision("m2", False, "x"),)),
    ]


def test_assign_direct_dispatch(svc, facade_mock):
    svc.assign_direct("t1", phase_id="fase-1", items=[MilestoneDraft("X")])
    facade_mock.dispatch.assert_called_once_with(
        cmd.AssignMilestonesDirect(team_id="t1", phase_id="fase-1", items=(MilestoneDraft("X"),))
    )
