"""Unit tests for Step 1.3: Functional Dependency Validation."""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent.parent.parent))

from FDNORM.ir.models import AcceptedFD, RejectedFD
from FDNORM.phases.phase1 import split_outcomes, step_1_2_fd_parsing, step_1_3_fd_validation

UNIVERSE = ["A", "B", "C"]


def _validate(*lines):
    return step_1_3_fd_validation(step_1_2_fd_parsing(list(lines)), UNIVERSE)


def test_valid_fd_passes_through():
    (outcome,) = _validate("A->B,C")
    assert isinstance(outcome, AcceptedFD)


def test_empty_lhs():
    (outcome,) = _validate("->B")
    assert isinstance(outcome, RejectedFD)
    assert outcome.reason == "empty_lhs"


def test_empty_rhs():
    (outcome,) = _validate("A->")
    assert outcome.reason == "empty_rhs"


def test_unknown_attribute():
    (outcome,) = _validate("A,Y->Z")
    assert outcome.reason == "unknown_attribute"
    assert outcome.offending_attributes == ["Y", "Z"]
    assert "Y, Z" in outcome.detail


def test_case_mismatch_is_unknown():
    (outcome,) = _validate("a->B")
    assert outcome.reason == "unknown_attribute"


def test_parse_rejections_pass_through():
    (outcome,) = _validate("A=B")
    assert outcome.reason == "missing_separator"


def test_split_outcomes_keeps_order():
    outcomes = _validate("A->B", "A->Q", "B->C", "oops")
    fds, rejected = split_outcomes(outcomes)

    assert [str(fd) for fd in fds] == ["A->B", "B->C"]
    assert [r.reason for r in rejected] == ["unknown_attribute", "missing_separator"]
