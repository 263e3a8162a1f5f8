"""Tests for dotted-path resolution."""

from __future__ import annotations

from phrasebook.domain.models import EMPTY_BRANCH, build_branch
from phrasebook.i18n.resolution import resolve


def test_resolve_walks_nested_branches():
    root = build_branch({"a": {"b": {"c": "deep"}}})
    assert resolve(root, "a.b.c") == "deep"


def test_resolve_stops_at_first_leaf():
    root = build_branch({"a": {"b": "X"}})
    assert resolve(root, "a.b.c") == "X"


def test_resolve_returns_none_for_branch_or_missing():
    root = build_branch({"a": {"b": "X"}})
    assert resolve(root, "a") is None
    assert resolve(root, "z.b") is None
    assert resolve(EMPTY_BRANCH, "a") is None


def test_resolve_keeps_walking_after_missing_segment():
    root = build_branch({"a": "top"})
    assert resolve(root, "missing.a") is None


def test_resolve_key_containing_empty_segments():
    root = build_branch({"": {"x": "blank"}})
    assert resolve(root, ".x") == "blank"
