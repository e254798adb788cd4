"""Exception types raised while loading and annotating."""
from __future__ import annotations

from pathlib import Path

__all__ = ["AbiConflictError", "AbiFormatError", "ConflictParseError"]


class AbiConflictError(ValueError):
    """Base class for malformed-input errors."""


class AbiFormatError(AbiConflictError):
    """The ABI document cannot be interpreted as an array of entries."""


class ConflictParseError(AbiConflictError):
    def __init__(self, path: str | Path, line: int, message: str) -> None:
        self.path = Path(path)
        self.line = line
        super().__init__(f"{self.path.name}:{line}: {message}")
