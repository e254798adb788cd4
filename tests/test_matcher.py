"""Tests for selector matching."""
from __future__ import annotations

from abi_conflict.conflicts.matcher import match_conflicts, unmatched_selectors
from abi_conflict.conflicts.models import ConflictKind, ConflictRecord


def _records():
    return [
        ConflictRecord(kind=ConflictKind.ENV, selector=1, slot="1", value=0),
        ConflictRecord(kind=ConflictKind.VAR, selector=2, slot="2", value=0),
        ConflictRecord(kind=ConflictKind.CONST, selector=1, slot="3"),
        ConflictRecord(kind=ConflictKind.NONE, selector=3),
        ConflictRecord(kind=ConflictKind.NONE, selector=1),
    ]


def test_match_preserves_load_order():
    matched = match_conflicts(_records(), 1)
    assert [r.kind for r in matched] == [ConflictKind.ENV, ConflictKind.CONST, ConflictKind.NONE]


def test_match_returns_empty_for_unknown_selector():
    assert match_conflicts(_records(), 99) == []


def test_unmatched_selectors_in_first_seen_order():
    assert unmatched_selectors(_records(), [1]) == [2, 3]
    assert unmatched_selectors(_records(), [1, 2, 3]) == []
