"""Unit tests for Step 2.1: Candidate Key Enumeration."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent.parent.parent))

from FDNORM.config import AnalysisSettings
from FDNORM.ir.models import FunctionalDependency
from FDNORM.phases.phase2 import (
    find_candidate_keys,
    iter_masks_by_size,
    ordered_universe,
    step_2_1_candidate_key_enumeration,
)
from FDNORM.utils.error_handling import AttributeLimitExceededError
from FDNORM.utils.fd import is_superkey


def _fd(lhs: str, rhs: str) -> FunctionalDependency:
    return FunctionalDependency(lhs=frozenset(lhs.split(",")), rhs=frozenset(rhs.split(",")))


def _assert_minimal(keys, universe, fds):
    for key in keys:
        assert is_superkey(key, universe, fds)
        for attr in key:
            assert not is_superkey(key - {attr}, universe, fds)
    for a in keys:
        for b in keys:
            if a is not b:
                assert not a < b


def test_chain_has_single_key():
    fds = [_fd("A", "B"), _fd("B", "C")]
    assert find_candidate_keys(["A", "B", "C"], fds) == [frozenset({"A"})]


def test_keys_come_out_in_size_order():
    # Raw bit-pattern order would visit {A,B} (0b011) before {C} (0b100)
    fds = [_fd("C", "A,B"), _fd("A,B", "C")]
    keys = find_candidate_keys(["A", "B", "C"], fds)
    assert keys == [frozenset({"C"}), frozenset({"A", "B"})]


def test_several_keys_of_same_size():
    universe = ["A", "B", "C", "D"]
    fds = [_fd("A,B", "C"), _fd("C", "D"), _fd("D", "A")]
    keys = find_candidate_keys(universe, fds)

    assert keys == [frozenset({"A", "B"}), frozenset({"B", "C"}), frozenset({"B", "D"})]
    _assert_minimal(keys, universe, fds)


def test_university_schema_keys_are_minimal():
    universe = ["StudentID", "SectionID", "CourseID", "Term", "Grade", "Room", "Building"]
    fds = [
        _fd("SectionID", "CourseID,Term,Room"),
        _fd("CourseID,Term", "SectionID"),
        _fd("Room", "Building"),
        _fd("StudentID,SectionID", "Grade"),
    ]
    keys = find_candidate_keys(universe, fds)

    assert frozenset({"StudentID", "SectionID"}) in keys
    assert frozenset({"StudentID", "CourseID", "Term"}) in keys
    assert len(keys) == 2
    _assert_minimal(keys, universe, fds)


def test_no_fds_means_whole_universe_is_the_key():
    assert find_candidate_keys(["A", "B", "C"], []) == [frozenset({"A", "B", "C"})]


def test_empty_universe_has_no_keys():
    assert find_candidate_keys([], [_fd("A", "B")]) == []


def test_set_universe_is_sorted_for_tie_breaking():
    fds = [_fd("A", "B"), _fd("B", "A")]
    keys = find_candidate_keys({"B", "A"}, fds)
    assert keys == [frozenset({"A"}), frozenset({"B"})]


def test_unvalidated_out_of_universe_rhs_does_not_hide_keys():
    fds = [_fd("A", "B,Z")]
    assert find_candidate_keys(["A", "B"], fds) == [frozenset({"A"})]


def test_parallel_matches_sequential():
    universe = ["A", "B", "C", "D", "E", "F"]
    fds = [_fd("A,B", "C"), _fd("C", "D"), _fd("D", "A"), _fd("E", "F"), _fd("F", "E")]
    sequential = find_candidate_keys(universe, fds)
    parallel = find_candidate_keys(universe, fds, max_workers=4)

    assert parallel == sequential
    _assert_minimal(parallel, universe, fds)


def test_attribute_limit():
    universe = ["A", "B", "C", "D", "E"]
    with pytest.raises(AttributeLimitExceededError) as exc_info:
        find_candidate_keys(universe, [], max_attributes=4)

    error = exc_info.value
    assert error.attribute_count == 5
    assert error.limit == 4
    assert "5" in error.message
    assert error.context.attribute_names == universe


def test_limit_equal_to_size_is_allowed():
    assert find_candidate_keys(["A", "B"], [], max_attributes=2) == [frozenset({"A", "B"})]


def test_step_uses_settings():
    settings = AnalysisSettings(max_attributes=2)
    with pytest.raises(AttributeLimitExceededError):
        step_2_1_candidate_key_enumeration(["A", "B", "C"], [], settings)

    keys = step_2_1_candidate_key_enumeration(["A", "B"], [_fd("A", "B")], AnalysisSettings())
    assert keys == [frozenset({"A"})]


def test_masks_by_size():
    assert list(iter_masks_by_size(3, 2)) == [0b011, 0b101, 0b110]
    assert list(iter_masks_by_size(3, 0)) == [0]


def test_ordered_universe_dedups_sequences():
    assert ordered_universe(["B", "A", "B"]) == ["B", "A"]
