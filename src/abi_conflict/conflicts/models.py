"""Conflict record models."""
from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any

__all__ = ["ENVIRONMENT_OPCODES", "ConflictKind", "ConflictRecord", "EnvironmentType"]


class ConflictKind(IntEnum):
    ALL = 0
    LEN = 1
    ENV = 2
    VAR = 3
    CONST = 4
    NONE = 5


class EnvironmentType(IntEnum):
    CALLER = 0
    ORIGIN = 1
    NOW = 2
    BLOCK_NUMBER = 3
    ADDRESS = 4
    UNKNOWN = 5


ENVIRONMENT_OPCODES: dict[str, EnvironmentType] = {
    "CALLER": EnvironmentType.CALLER,
    "ORIGIN": EnvironmentType.ORIGIN,
    "TIMESTAMP": EnvironmentType.NOW,
    "NUMBER": EnvironmentType.BLOCK_NUMBER,
    "ADDRESS": EnvironmentType.ADDRESS,
}


@dataclass(slots=True, frozen=True)
class ConflictRecord:
    """One storage-slot finding keyed by function selector.

    For ``ENV`` records ``value`` is an :class:`EnvironmentType` code, for
    ``VAR`` records it is the index of the 32-byte calldata word. ``CONST``
    and ``NONE`` records carry no value.
    """

    kind: ConflictKind
    selector: int
    slot: str = ""
    value: int | None = None

    def to_dict(self) -> dict[str, Any]:
        """Serialize for the annotated ABI; the selector is only a join key."""
        data: dict[str, Any] = {"kind": int(self.kind), "slot": self.slot}
        if self.value is not None:
            data["value"] = int(self.value)
        return data
