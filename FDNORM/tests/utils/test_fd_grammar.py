"""Unit tests for the FD line grammar."""

import sys
from pathlib import Path

import pytest
from lark import UnexpectedInput

sys.path.insert(0, str(Path(__file__).parent.parent.parent.parent))

from FDNORM.utils.fd import parse_fd_expression


def test_simple_dependency():
    assert parse_fd_expression("A,B->C,D") == (["A", "B"], ["C", "D"])


def test_whitespace_is_stripped():
    assert parse_fd_expression("  A , B ->  C ") == (["A", "B"], ["C"])


def test_names_with_inner_spaces_and_hyphens():
    assert parse_fd_expression("first name->last name") == (["first name"], ["last name"])
    assert parse_fd_expression("order-id->total") == (["order-id"], ["total"])


def test_case_is_preserved():
    assert parse_fd_expression("a->A") == (["a"], ["A"])


def test_empty_items_are_discarded():
    assert parse_fd_expression("A,,B->C,") == (["A", "B"], ["C"])


def test_empty_sides_parse():
    assert parse_fd_expression("->B") == ([], ["B"])
    assert parse_fd_expression("A->") == (["A"], [])


def test_two_arrows_is_a_syntax_error():
    with pytest.raises(UnexpectedInput):
        parse_fd_expression("A->B->C")
