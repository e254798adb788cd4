"""Selector-based lookup over loaded conflict records."""
from __future__ import annotations

from collections.abc import Iterable, Sequence

from .models import ConflictRecord

__all__ = ["match_conflicts", "unmatched_selectors"]


def match_conflicts(records: Sequence[ConflictRecord], selector: int) -> list[ConflictRecord]:
    """Return the records for *selector*, in load order."""
    return [record for record in records if record.selector == selector]


def unmatched_selectors(records: Iterable[ConflictRecord], known: Iterable[int]) -> list[int]:
    """Selectors present in *records* that none of the *known* selectors claim.

    Returned in first-seen order.
    """
    claimed = set(known)
    missing: list[int] = []
    seen: set[int] = set()
    for record in records:
        if record.selector in claimed or record.selector in seen:
            continue
        seen.add(record.selector)
        missing.append(record.selector)
    return missing
