"""Conflict export loading and lookup."""

from __future__ import annotations

from .loader import (
    CONFLICT_FILES,
    load_conflicts,
    parse_const_conflicts,
    parse_env_conflicts,
    parse_no_conflicts,
    parse_var_conflicts,
)
from .matcher import match_conflicts, unmatched_selectors
from .models import ENVIRONMENT_OPCODES, ConflictKind, ConflictRecord, EnvironmentType

__all__ = [
    "CONFLICT_FILES",
    "ENVIRONMENT_OPCODES",
    "ConflictKind",
    "ConflictRecord",
    "EnvironmentType",
    "load_conflicts",
    "match_conflicts",
    "parse_const_conflicts",
    "parse_env_conflicts",
    "parse_no_conflicts",
    "parse_var_conflicts",
    "unmatched_selectors",
]
