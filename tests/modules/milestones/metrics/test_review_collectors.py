# backend/tests/modules/milestones/metrics/test_review_collectors.py

import pytest
from prometheus_client import REGISTRY

from app.modules.milestones.domain import GradeDecision
from app.modules.milestones.errors import InvalidTransitionError
from app.modules.milestones.metrics.collectors import (
    inc_transition,
    init_review_collectors,
    record_review_batch,
)


def _value(name, labels):
    return REGISTRY.get_sample_value(name, labels) or 0.0


def test_collectors_register_once():
    assert init_review_collectors() is True
    assert init_review_collectors() is True


def test_inc_transition_increments_counter():
    labels = {"from_state": "in_review", "to_state": "approved"}
    before = _value("milestones_transitions_total", labels)
    inc_transition("in_review", "approved")
    assert _value("milestones_transitions_total", labels) == before + 1


def test_record_review_batch_counts_and_observes():
    before = _value("milestones_review_batches_total", {"gate": "completion", "outcome": "success"})
    before_sum = _value("milestones_review_batch_size_sum", {"gate": "completion"})
    record_review_batch("completion", "success", 3)
    assert _value("milestones_review_batches_total", {"gate": "completion", "outcome": "success"}) == before + 1
    assert _value("milestones_review_batch_size_sum", {"gate": "completion"}) == before_sum + 3


def test_facade_records_success_and_error(facade, repo, make_team):
    repo.add_team(make_team({"A": "in_review", "B": "approved"}))
    ok = {"gate": "completion", "outcome": "success"}
    err = {"gate": "completion", "outcome": "error"}
    before_ok, before_err = _value("milestones_review_batches_total", ok), _value("milestones_review_batches_total", err)

    with pytest.raises(InvalidTransitionError):
        facade.grade_submissions("t1", [GradeDecision("B", True)])
    facade.grade_submissions("t1", [GradeDecision("A", True)])

    assert _value("milestones_review_batches_total", err) == before_err + 1
    assert _value("milestones_review_batches_total", ok) == before_ok + 1
