"""Reading and writing ABI JSON documents."""
from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Any

from ..errors import AbiFormatError

__all__ = ["dump_abi", "load_abi", "parse_abi", "write_abi"]


def parse_abi(raw_json: str) -> list[Any]:
    """Parse an ABI JSON string; the root must be an array."""
    try:
        payload = json.loads(raw_json)
    except json.JSONDecodeError as exc:
        raise AbiFormatError(f"Invalid ABI JSON: {exc}") from exc
    if not isinstance(payload, list):
        raise AbiFormatError("ABI root must be an array")
    return payload


def load_abi(path: str | Path) -> list[Any]:
    return parse_abi(Path(path).read_text(encoding="utf-8"))


def dump_abi(abi: list[Any], indent: int | None = None) -> str:
    """Serialize an ABI document; compact unless *indent* is given."""
    if indent is None:
        return json.dumps(abi, separators=(",", ":"), ensure_ascii=False)
    return json.dumps(abi, indent=indent, ensure_ascii=False)


def write_abi(path: str | Path, abi: list[Any], indent: int | None = None) -> None:
    """Replace *path* with the serialized document.

    The text goes to a sibling temporary file that is renamed over *path*, so
    the target holds either its old content or the complete new document.
    """
    target = Path(path)
    text = dump_abi(abi, indent)
    fd, tmp_name = tempfile.mkstemp(prefix=f".{target.name}.", suffix=".tmp", dir=target.parent)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            handle.write(text)
        if target.exists():
            os.chmod(tmp_name, target.stat().st_mode & 0o7777)
        os.replace(tmp_name, target)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise
