# backend/tests/modules/milestones/state/test_state_transitions.py

import itertools

import pytest

from app.modules.milestones.enums import (
    VALID_MILESTONE_TRANSITIONS,
    ActorRole,
    MilestoneState,
    get_allowed_transitions,
    get_transition_actor,
    is_valid_state_transition,
    validate_state_transition,
)

LEGAL_EDGES = {
    (MilestoneState.PROPOSED, MilestoneState.PENDING_START),
    (MilestoneState.PROPOSED, MilestoneState.REJECTED),
    (MilestoneState.PENDING_START, MilestoneState.IN_PROGRESS),
    (MilestoneState.IN_PROGRESS, MilestoneState.IN_REVIEW),
    (MilestoneState.IN_REVIEW, MilestoneState.APPROVED),
    (MilestoneState.IN_REVIEW, MilestoneState.REJECTED),
    (MilestoneState.REJECTED, MilestoneState.IN_PROGRESS),
}


@pytest.mark.parametrize("src,dst,allowed", [
    (MilestoneState.PROPOSED, MilestoneState.PENDING_START, True),
    (MilestoneState.IN_REVIEW, MilestoneState.APPROVED, True),
    (MilestoneState.REJECTED, MilestoneState.IN_PROGRESS, True),
    # approved es terminal
    (MilestoneState.APPROVED, MilestoneState.IN_PROGRESS, False),
    # no se salta la revisión
    (MilestoneState.IN_PROGRESS, MilestoneState.APPROVED, False),
    # una propuesta aceptada no arranca sola
    (MilestoneState.PROPOSED, MilestoneState.IN_PROGRESS, False),
    # identidad: doble envío falla
    (MilestoneState.IN_REVIEW, MilestoneState.IN_REVIEW, False),
])
def test_state_transition_matrix(src, dst, allowed):
    assert is_valid_state_transition(src, dst) is allowed


def test_graph_is_closed_over_all_pairs():
    for src, dst in itertools.product(MilestoneState, repeat=2):
        assert is_valid_state_transition(src, dst) is ((src, dst) in LEGAL_EDGES), (src, dst)


def test_every_state_has_an_entry_and_approved_is_terminal():
    assert set(VALID_MILESTONE_TRANSITIONS) == set(MilestoneState)
    assert get_allowed_transitions(MilestoneState.APPROVED) == set()


def test_get_allowed_transitions_returns_copy():
    allowed = get_allowed_transitions(MilestoneState.PROPOSED)
    allowed.add(MilestoneState.APPROVED)
    assert MilestoneState.APPROVED not in VALID_MILESTONE_TRANSITIONS[MilestoneState.PROPOSED]


@pytest.mark.parametrize("src,dst,role", [
    (MilestoneState.PROPOSED, MilestoneState.PENDING_START, ActorRole.TEACHER),
    (MilestoneState.PROPOSED, MilestoneState.REJECTED, ActorRole.TEACHER),
    (MilestoneState.PENDING_START, MilestoneState.IN_PROGRESS, ActorRole.STUDENT),
    (MilestoneState.IN_PROGRESS, MilestoneState.IN_REVIEW, ActorRole.STUDENT),
    (MilestoneState.IN_REVIEW, MilestoneState.APPROVED, ActorRole.TEACHER),
    (MilestoneState.REJECTED, MilestoneState.IN_PROGRESS, ActorRole.STUDENT),
    (MilestoneState.APPROVED, MilestoneState.REJECTED, None),
])
def test_transition_actor(src, dst, role):
    assert get_transition_actor(src, dst) == role


def test_validate_state_transition_message_lists_allowed_targets():
    with pytest.raises(ValueError) as exc:
        validate_state_transition(MilestoneState.IN_REVIEW, MilestoneState.PENDING_START)
    msg = str(exc.value)
    assert "in_review" in msg
    assert "approved, rejected" in msg
# Fin del archivo backend/tests/modules/milestones/state/test_state_transitions.py
