"""Parsers for the tab-separated conflict exports of the storage analysis."""
from __future__ import annotations

import csv
import logging
import re
from collections.abc import Callable, Iterator
from pathlib import Path

from ..errors import ConflictParseError
from .models import ENVIRONMENT_OPCODES, ConflictKind, ConflictRecord, EnvironmentType

__all__ = [
    "CONFLICT_FILES",
    "ENV_CONFLICT_FILE",
    "NO_CONFLICT_FILE",
    "CONST_CONFLICT_FILE",
    "VAR_CONFLICT_FILE",
    "load_conflicts",
    "parse_const_conflicts",
    "parse_env_conflicts",
    "parse_no_conflicts",
    "parse_var_conflicts",
]

ENV_CONFLICT_FILE = "Conflict_EnvConflict.csv"
VAR_CONFLICT_FILE = "Conflict_FunArgConflict.csv"
CONST_CONFLICT_FILE = "Conflict_ConsConflict.csv"
NO_CONFLICT_FILE = "Conflict_NoConflict.csv"

MAX_U32 = 0xFFFFFFFF

_SELECTOR_RE = re.compile(r"(?:0x)?([0-9a-fA-F]{1,8})")
_SLOT_RE = re.compile(r"0x(\d+)")
_DECIMAL_RE = re.compile(r"\d+")

_logger = logging.getLogger(__name__)

Row = list[str]
RowParser = Callable[[Path, int, Row, logging.Logger], ConflictRecord]


def _rows(path: Path) -> Iterator[tuple[int, Row]]:
    with path.open("r", encoding="utf-8", newline="") as handle:
        reader = csv.reader(handle, delimiter="\t")
        for row in reader:
            if not row:
                continue
            yield reader.line_num, row


def _column(path: Path, line: int, row: Row, index: int) -> str:
    if index >= len(row):
        raise ConflictParseError(path, line, f"expected at least {index + 1} columns, found {len(row)}")
    return row[index]


def _parse_selector(path: Path, line: int, text: str) -> int:
    match = _SELECTOR_RE.fullmatch(text.strip())
    if match is None:
        raise ConflictParseError(path, line, f"invalid function selector {text!r}")
    return int(match.group(1), 16)


def _parse_word_index(path: Path, line: int, text: str) -> int:
    if _DECIMAL_RE.fullmatch(text.strip()) is None:
        raise ConflictParseError(path, line, f"invalid calldata word index {text!r}")
    value = int(text)
    if value > MAX_U32:
        raise ConflictParseError(path, line, f"calldata word index {value} exceeds 32 bits")
    return value


def _extract_slot(path: Path, line: int, text: str) -> str:
    match = _SLOT_RE.search(text)
    if match is None:
        raise ConflictParseError(path, line, f"no storage slot found in {text!r}")
    return match.group(1)


def _env_row(path: Path, line: int, row: Row, logger: logging.Logger) -> ConflictRecord:
    selector = _parse_selector(path, line, _column(path, line, row, 1))
    opcode = _column(path, line, row, 2)
    env = ENVIRONMENT_OPCODES.get(opcode)
    if env is None:
        logger.warning("Unknown environment type %r at %s:%d", opcode, path.name, line)
        env = EnvironmentType.UNKNOWN
    slot = _extract_slot(path, line, _column(path, line, row, 3))
    return ConflictRecord(kind=ConflictKind.ENV, selector=selector, slot=slot, value=int(env))


def _var_row(path: Path, line: int, row: Row, logger: logging.Logger) -> ConflictRecord:
    selector = _parse_selector(path, line, _column(path, line, row, 1))
    value = _parse_word_index(path, line, _column(path, line, row, 2))
    slot = _extract_slot(path, line, _column(path, line, row, 3))
    return ConflictRecord(kind=ConflictKind.VAR, selector=selector, slot=slot, value=value)


def _const_row(path: Path, line: int, row: Row, logger: logging.Logger) -> ConflictRecord:
    selector = _parse_selector(path, line, _column(path, line, row, 1))
    slot = _column(path, line, row, 2)
    if _DECIMAL_RE.fullmatch(slot) is None:
        raise ConflictParseError(path, line, f"invalid constant slot {slot!r}")
    return ConflictRecord(kind=ConflictKind.CONST, selector=selector, slot=slot)


def _none_row(path: Path, line: int, row: Row, logger: logging.Logger) -> ConflictRecord:
    selector = _parse_selector(path, line, _column(path, line, row, 0))
    return ConflictRecord(kind=ConflictKind.NONE, selector=selector)


def _parse_file(path: Path, parse_row: RowParser, logger: logging.Logger | None) -> list[ConflictRecord]:
    sink = logger or _logger
    records = [parse_row(path, line, row, sink) for line, row in _rows(path)]
    sink.debug("Parsed %d record(s) from %s", len(records), path.name)
    return records


def parse_env_conflicts(path: str | Path, logger: logging.Logger | None = None) -> list[ConflictRecord]:
    """Parse an environment-conflict export (selector, opcode, slot text)."""
    return _parse_file(Path(path), _env_row, logger)


def parse_var_conflicts(path: str | Path, logger: logging.Logger | None = None) -> list[ConflictRecord]:
    """Parse a function-argument conflict export (selector, word index, slot text)."""
    return _parse_file(Path(path), _var_row, logger)


def parse_const_conflicts(path: str | Path, logger: logging.Logger | None = None) -> list[ConflictRecord]:
    return _parse_file(Path(path), _const_row, logger)


def parse_no_conflicts(path: str | Path, logger: logging.Logger | None = None) -> list[ConflictRecord]:
    return _parse_file(Path(path), _none_row, logger)


CONFLICT_FILES: tuple[tuple[str, Callable[..., list[ConflictRecord]]], ...] = (
    (ENV_CONFLICT_FILE, parse_env_conflicts),
    (VAR_CONFLICT_FILE, parse_var_conflicts),
    (CONST_CONFLICT_FILE, parse_const_conflicts),
    (NO_CONFLICT_FILE, parse_no_conflicts),
)


def load_conflicts(directory: str | Path, logger: logging.Logger | None = None) -> list[ConflictRecord]:
    """Load all four conflict exports from *directory*.

    Records are returned file by file (env, var, const, none) and row by row
    within each file. Malformed rows raise :class:`ConflictParseError`; a
    missing export raises :class:`FileNotFoundError`.
    """
    sink = logger or _logger
    base = Path(directory)
    records: list[ConflictRecord] = []
    for file_name, parse in CONFLICT_FILES:
        records.extend(parse(base / file_name, sink))
    sink.info("Parsed %d conflict record(s) from %s", len(records), base)
    return records
