# backend/tests/modules/milestones/enums/test_milestone_enums.py

import pytest

from app.modules.milestones.enums import (
    DEFAULT_MILESTONE_STATE,
    DEFAULT_TEAM_STATUS,
    ActorRole,
    MilestoneOrigin,
    MilestoneState,
    TeamFlag,
    TeamProgressStatus,
)


def test_milestone_state_values_are_lowercase_strings():
    assert {s.value for s in MilestoneState} == {
        "proposed",
        "pending_start",
        "in_progress",
        "in_review",
        "approved",
        "rejected",
    }
    # StrEnum: se compara directo con el valor guardado en DB
    assert MilestoneState.IN_REVIEW == "in_review"


def test_team_enums_and_defaults():
    assert {s.value for s in TeamProgressStatus} == {"in_progress", "completed"}
    assert {f.value for f in TeamFlag} == {"blocked", "almost_done"}
    assert DEFAULT_MILESTONE_STATE is MilestoneState.PROPOSED
    assert DEFAULT_TEAM_STATUS is TeamProgressStatus.IN_PROGRESS


@pytest.mark.parametrize("raw,expected", [
    ("student", MilestoneOrigin.STUDENT),
    ("assistant", MilestoneOrigin.ASSISTANT),
    ("teacher", MilestoneOrigin.TEACHER),
])
def test_origin_parses_from_value(raw, expected):
    assert MilestoneOrigin(raw) is expected


def test_actor_role_rejects_unknown_value():
    with pytest.raises(ValueError):
        ActorRole("admin")
# Fin del archivo backend/tests/modules/milestones/enums/test_milestone_enums.py
