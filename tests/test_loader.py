"""Tests for conflict export parsing."""
from __future__ import annotations

import logging

import pytest
from abi_conflict.conflicts.loader import (
    CONST_CONFLICT_FILE,
    ENV_CONFLICT_FILE,
    NO_CONFLICT_FILE,
    VAR_CONFLICT_FILE,
    load_conflicts,
    parse_const_conflicts,
    parse_env_conflicts,
    parse_no_conflicts,
    parse_var_conflicts,
)
from abi_conflict.conflicts.models import ConflictKind, ConflictRecord, EnvironmentType
from abi_conflict.errors import ConflictParseError


def _write_exports(directory, env="", var="", const="", none=""):
    (directory / ENV_CONFLICT_FILE).write_text(env)
    (directory / VAR_CONFLICT_FILE).write_text(var)
    (directory / CONST_CONFLICT_FILE).write_text(const)
    (directory / NO_CONFLICT_FILE).write_text(none)


def test_env_rows_map_opcodes_and_extract_slot(tmp_path):
    path = tmp_path / ENV_CONFLICT_FILE
    path.write_text(
        "f\t0xaabbccdd\tCALLER\tslot is 0x7\n"
        "f\t0xaabbccdd\tTIMESTAMP\tSLOAD 0x12 then 0x99\n"
        "g\t0x00000001\tNUMBER\t0x3\n"
    )

    records = parse_env_conflicts(path)

    assert records == [
        ConflictRecord(kind=ConflictKind.ENV, selector=0xAABBCCDD, slot="7", value=EnvironmentType.CALLER),
        ConflictRecord(kind=ConflictKind.ENV, selector=0xAABBCCDD, slot="12", value=EnvironmentType.NOW),
        ConflictRecord(kind=ConflictKind.ENV, selector=1, slot="3", value=EnvironmentType.BLOCK_NUMBER),
    ]


@pytest.mark.parametrize(
    ("opcode", "expected"),
    [
        ("CALLER", 0),
        ("ORIGIN", 1),
        ("TIMESTAMP", 2),
        ("NUMBER", 3),
        ("ADDRESS", 4),
    ],
)
def test_env_opcodes_map_to_environment_codes(tmp_path, opcode, expected):
    path = tmp_path / ENV_CONFLICT_FILE
    path.write_text(f"f\t0x1\t{opcode}\tslot 0x2\n")

    records = parse_env_conflicts(path)

    assert records[0].value == expected
    assert records[0].to_dict() == {"kind": 2, "slot": "2", "value": expected}


def test_unknown_opcode_is_recorded_and_logged(tmp_path, caplog):
    path = tmp_path / ENV_CONFLICT_FILE
    path.write_text("f\t0x12345678\tGASPRICE\tslot 0x1\n")

    with caplog.at_level(logging.WARNING):
        records = parse_env_conflicts(path, logging.getLogger("abi_conflict.test"))

    assert records[0].value == EnvironmentType.UNKNOWN
    assert "GASPRICE" in caplog.text


def test_var_rows_parse_decimal_word_index(tmp_path):
    path = tmp_path / VAR_CONFLICT_FILE
    path.write_text("f\t0xa9059cbb\t1\tSSTORE 0x5\n")

    records = parse_var_conflicts(path)

    assert records == [ConflictRecord(kind=ConflictKind.VAR, selector=0xA9059CBB, slot="5", value=1)]


def test_const_rows_keep_slot_verbatim(tmp_path):
    path = tmp_path / CONST_CONFLICT_FILE
    path.write_text("f\t0xa9059cbb\t0042\n")

    records = parse_const_conflicts(path)

    assert records[0].slot == "0042"
    assert records[0].value is None
    assert records[0].kind == ConflictKind.CONST


def test_none_rows_read_selector_from_first_column(tmp_path):
    path = tmp_path / NO_CONFLICT_FILE
    path.write_text("0x70a08231\n\n0x095ea7b3\tignored\n")

    records = parse_no_conflicts(path)

    assert [r.selector for r in records] == [0x70A08231, 0x095EA7B3]
    assert all(r.kind == ConflictKind.NONE and r.slot == "" and r.value is None for r in records)


def test_load_conflicts_orders_by_file_then_row(tmp_path):
    _write_exports(
        tmp_path,
        env="f\t0x1\tORIGIN\t0x1\n",
        var="f\t0x2\t0\t0x2\nf\t0x2\t1\t0x3\n",
        const="f\t0x3\t4\n",
        none="0x4\n",
    )

    records = load_conflicts(tmp_path)

    assert [r.kind for r in records] == [
        ConflictKind.ENV,
        ConflictKind.VAR,
        ConflictKind.VAR,
        ConflictKind.CONST,
        ConflictKind.NONE,
    ]
    assert [r.selector for r in records] == [1, 2, 2, 3, 4]


def test_load_conflicts_keeps_duplicate_rows(tmp_path):
    row = "f\t0xdeadbeef\t0\t0x9\n"
    _write_exports(tmp_path, var=row * 2)

    records = load_conflicts(tmp_path)

    assert len(records) == 2
    assert records[0] == records[1]


def test_missing_export_is_fatal(tmp_path):
    (tmp_path / ENV_CONFLICT_FILE).write_text("")
    with pytest.raises(FileNotFoundError):
        load_conflicts(tmp_path)


@pytest.mark.parametrize(
    "env_row",
    [
        "f\tnot-hex\tCALLER\t0x1\n",
        "f\t0x1122334455\tCALLER\t0x1\n",
        "f\t0x1\tCALLER\tno slot here\n",
        "f\t0x1\tCALLER\n",
    ],
)
def test_malformed_env_rows_are_fatal(tmp_path, env_row):
    path = tmp_path / ENV_CONFLICT_FILE
    path.write_text(env_row)
    with pytest.raises(ConflictParseError):
        parse_env_conflicts(path)


def test_malformed_var_index_reports_location(tmp_path):
    path = tmp_path / VAR_CONFLICT_FILE
    path.write_text("f\t0x1\t0\t0x1\nf\t0x1\t0x2\t0x1\n")

    with pytest.raises(ConflictParseError) as excinfo:
        parse_var_conflicts(path)

    assert excinfo.value.line == 2
    assert VAR_CONFLICT_FILE in str(excinfo.value)


def test_non_decimal_const_slot_is_fatal(tmp_path):
    path = tmp_path / CONST_CONFLICT_FILE
    path.write_text("f\t0x1\tslot\n")
    with pytest.raises(ConflictParseError):
        parse_const_conflicts(path)
