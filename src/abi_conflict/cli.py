"""CLI entry point for abi-conflict."""

from __future__ import annotations

import sys
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from . import __version__
from .abi.annotator import AnnotationSummary, annotate_abi, is_callable_function
from .abi.document import load_abi, write_abi
from .abi.selector import format_selector, get_hasher
from .abi.signature import canonical_signature
from .conflicts.loader import load_conflicts
from .errors import AbiConflictError
from .log import configure_logging

console = Console()

ENVVAR_PREFIX = "ABI_CONFLICT"


def _render_summary(summary: AnnotationSummary, hasher_name: str) -> Table:
    table = Table(title=f"Selector Matches ({hasher_name})")
    table.add_column("Selector", style="bold")
    table.add_column("Signature")
    table.add_column("Conflicts", justify="right")
    for method in summary.methods:
        count = f"[green]{method.matched}[/]" if method.matched else "[dim]0[/]"
        table.add_row(format_selector(method.selector), escape(method.signature), count)
    if summary.unmatched_selectors:
        table.caption = "Unmatched selectors: " + ", ".join(format_selector(s) for s in summary.unmatched_selectors)
    return table


@click.group(context_settings={"auto_envvar_prefix": ENVVAR_PREFIX})
@click.version_option(version=__version__)
def main() -> None:
    """Annotate contract ABIs with storage-slot conflict findings."""


@main.command()
@click.option("--abi", "-a", "abi_path", type=click.Path(exists=True, dir_okay=False), required=True,
              help="ABI JSON file to annotate")
@click.option("--path", "-p", "conflicts_dir", type=click.Path(exists=True, file_okay=False), required=True,
              help="Directory holding the Conflict_*.csv exports")
@click.option("--gm", "-g", is_flag=True, default=False, help="Use SM3 selectors instead of Keccak-256")
@click.option("--output", "-o", type=click.Path(dir_okay=False), default=None,
              help="Write the annotated ABI here instead of rewriting the input")
@click.option("--indent", type=click.IntRange(min=0), default=None, help="Pretty-print the output JSON")
@click.option("--dry-run", is_flag=True, default=False, help="Report matches without writing any file")
@click.option("--verbose", "-v", count=True, help="Increase log verbosity (-v info, -vv debug)")
def annotate(
    abi_path: str,
    conflicts_dir: str,
    gm: bool,
    output: str | None,
    indent: int | None,
    dry_run: bool,
    verbose: int,
) -> None:
    """Attach conflict findings to the functions of an ABI document."""
    logger = configure_logging(verbose)
    hasher = get_hasher(gm)

    try:
        abi = load_abi(abi_path)
        records = load_conflicts(conflicts_dir, logger)
        summary = annotate_abi(abi, records, hasher, logger)
    except (AbiConflictError, OSError) as exc:
        console.print(f"[red]Failed to annotate {escape(abi_path)}: {escape(str(exc))}[/]")
        sys.exit(1)

    console.print(f"Loaded {len(records)} conflict records from {escape(conflicts_dir)}")
    if summary.methods:
        console.print(_render_summary(summary, hasher.name))
    else:
        console.print("[yellow]ABI has no callable function entries.[/]")
    console.print(
        f"\n[bold]Annotated {summary.annotated} of {len(summary.methods)} functions "
        f"with {summary.attached} conflict records[/]"
    )

    if dry_run:
        console.print("[yellow]Dry run: no file written.[/]")
        return

    target = Path(output) if output else Path(abi_path)
    try:
        write_abi(target, abi, indent)
    except OSError as exc:
        console.print(f"[red]Failed to write {escape(str(target))}: {escape(str(exc))}[/]")
        sys.exit(1)
    console.print(f"[green]Annotated ABI saved to {escape(str(target))}[/]")


@main.command()
@click.argument("abi_path", metavar="ABI", type=click.Path(exists=True, dir_okay=False))
@click.option("--gm", "-g", is_flag=True, default=False, help="Use SM3 selectors instead of Keccak-256")
def selectors(abi_path: str, gm: bool) -> None:
    """List the canonical signature and selector of every function."""
    hasher = get_hasher(gm)
    try:
        abi = load_abi(abi_path)
        rows = []
        for entry in abi:
            if not is_callable_function(entry):
                continue
            signature = canonical_signature(str(entry["name"]), entry.get("inputs"))
            rows.append((format_selector(hasher.selector(signature)), signature))
    except (AbiConflictError, OSError) as exc:
        console.print(f"[red]Failed to read {escape(abi_path)}: {escape(str(exc))}[/]")
        sys.exit(1)

    table = Table(title=f"Function Selectors ({hasher.name})")
    table.add_column("Selector", style="bold")
    table.add_column("Signature")
    for selector, signature in rows:
        table.add_row(selector, escape(signature))
    console.print(table)


if __name__ == "__main__":
    main()
