"""Sample script demonstrating programmatic usage."""
import logging
import sys
from pathlib import Path

from abi_conflict.abi import annotate_abi, dump_abi, format_selector, get_hasher, load_abi
from abi_conflict.conflicts import load_conflicts


def annotate_without_writing(abi_path: Path, conflicts_dir: Path, gm: bool = False) -> str:
    """Annotate one ABI and return the resulting JSON."""
    logging.basicConfig(level=logging.INFO)
    logger = logging.getLogger("sample")

    abi = load_abi(abi_path)
    records = load_conflicts(conflicts_dir, logger)
    summary = annotate_abi(abi, records, get_hasher(gm), logger)
    for method in summary.methods:
        print(f"{format_selector(method.selector)}  {method.signature}  {method.matched}")
    return dump_abi(abi, indent=2)


if __name__ == "__main__":
    print(annotate_without_writing(Path(sys.argv[1]), Path(sys.argv[2]), gm="--gm" in sys.argv[3:]))
