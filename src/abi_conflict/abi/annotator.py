"""Attach conflict records to the callable functions of an ABI document."""
from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from ..conflicts.matcher import match_conflicts, unmatched_selectors
from ..conflicts.models import ConflictRecord
from .selector import BaseHasher, Keccak256Hasher, format_selector
from .signature import canonical_signature

__all__ = ["CONFLICT_FIELDS_KEY", "AnnotationSummary", "MethodAnnotation", "annotate_abi", "is_callable_function"]

CONFLICT_FIELDS_KEY = "conflictFields"

_logger = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class MethodAnnotation:
    signature: str
    selector: int
    matched: int


@dataclass(slots=True)
class AnnotationSummary:
    methods: list[MethodAnnotation] = field(default_factory=list)
    unmatched_selectors: list[int] = field(default_factory=list)

    @property
    def annotated(self) -> int:
        return sum(1 for method in self.methods if method.matched)

    @property
    def attached(self) -> int:
        return sum(method.matched for method in self.methods)


def is_callable_function(entry: Any) -> bool:
    """True for ABI entries that have a name and are typed ``function``."""
    return isinstance(entry, dict) and "name" in entry and "type" in entry and entry["type"] == "function"


def annotate_abi(
    abi: list[Any],
    records: Sequence[ConflictRecord],
    hasher: BaseHasher | None = None,
    logger: logging.Logger | None = None,
) -> AnnotationSummary:
    """Insert ``conflictFields`` on every function entry with matching records.

    The document is modified in place. Entries without matches, and entries
    that are not callable functions, are left as they are.
    """
    sink = logger or _logger
    hasher = hasher or Keccak256Hasher()
    summary = AnnotationSummary()

    for entry in abi:
        if not is_callable_function(entry):
            continue
        signature = canonical_signature(str(entry["name"]), entry.get("inputs"))
        selector = hasher.selector(signature)
        matched = match_conflicts(records, selector)
        sink.debug("%s -> %s (%d match(es))", signature, format_selector(selector), len(matched))
        if matched:
            entry[CONFLICT_FIELDS_KEY] = [record.to_dict() for record in matched]
        summary.methods.append(MethodAnnotation(signature=signature, selector=selector, matched=len(matched)))

    summary.unmatched_selectors = unmatched_selectors(records, (m.selector for m in summary.methods))
    if summary.unmatched_selectors:
        sink.info(
            "%d selector(s) in the conflict exports match no function: %s",
            len(summary.unmatched_selectors),
            ", ".join(format_selector(s) for s in summary.unmatched_selectors),
        )
    return summary
