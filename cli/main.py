from __future__ import annotations

import sys
from enum import Enum
from pathlib import Path
from typing import Optional

import typer

from treelist import TreeList
from treelist.exceptions import TreeListError

from .support.benchmark_utils import run_benchmark, run_self_check, write_result_artifact


_HELP = """Sorted tree list command line interface.

Subcommands sort input, benchmark insert/remove throughput, and self-check invariants."""

app = typer.Typer(
    add_completion=False,
    pretty_exceptions_enable=False,
    context_settings={"help_option_names": ["-h", "--help"]},
    help=_HELP,
)


class ElementType(str, Enum):
    INT = "int"
    FLOAT = "float"
    STR = "str"


_PARSERS = {
    ElementType.INT: int,
    ElementType.FLOAT: float,
    ElementType.STR: str,
}


@app.callback()
def treelist_callback() -> None:
    """Root callback reserved for shared options (none yet)."""
    pass


@app.command("sort")
def sort_command(
    path: Optional[Path] = typer.Argument(
        None, exists=True, dir_okay=False, help="File to read; stdin when omitted."
    ),
    element_type: ElementType = typer.Option(ElementType.INT, "--type", "-t", help="How to parse tokens."),
    reverse: bool = typer.Option(False, "--reverse", "-r", help="Print in descending order."),
) -> None:
    """Read whitespace-separated tokens and print them in sorted order."""

    text = path.read_text(encoding="utf-8") if path is not None else sys.stdin.read()
    parse = _PARSERS[element_type]
    try:
        values = TreeList(parse(token) for token in text.split())
    except ValueError as exc:
        typer.echo(f"error: {exc}", err=True)
        raise typer.Exit(code=2) from exc
    if reverse:
        for pos in range(len(values) - 1, -1, -1):
            typer.echo(values.get(pos))
    else:
        for value in values:
            typer.echo(value)


@app.command("bench")
def bench_command(
    count: int = typer.Option(100_000, "--count", "-n", min=0, help="Number of random integers to insert."),
    remove_fraction: float = typer.Option(0.5, "--remove-fraction", min=0.0, max=1.0),
    seed: Optional[int] = typer.Option(None, "--seed", help="Defaults to TREELIST_SEED or 0."),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write a JSON result artifact."),
) -> None:
    """Measure insert and remove throughput on random integers."""

    _, result = run_benchmark(count=count, remove_fraction=remove_fraction, seed=seed)
    typer.echo(
        f"inserted={result.inserted} in {result.insert_seconds:.4f}s "
        f"({result.inserts_per_second:,.0f} ops/s)"
    )
    typer.echo(
        f"removed={result.removed} in {result.remove_seconds:.4f}s "
        f"({result.removes_per_second:,.0f} ops/s)"
    )
    typer.echo(f"size={result.final_size} height={result.height} bound={result.height_bound:.2f}")
    if output is not None:
        write_result_artifact(output, seed=seed, result=result)
        typer.echo(f"wrote {output}")


@app.command("check")
def check_command(
    operations: int = typer.Option(2_000, "--operations", "-n", min=0),
    seed: Optional[int] = typer.Option(None, "--seed", help="Defaults to TREELIST_SEED or 0."),
) -> None:
    """Run random operations, validating every invariant after each step."""

    try:
        result = run_self_check(operations=operations, seed=seed)
    except (TreeListError, AssertionError) as exc:
        typer.echo(f"FAILED: {exc}", err=True)
        raise typer.Exit(code=1) from exc
    typer.echo(
        f"ok: {result.operations} operations "
        f"(add={result.adds} remove={result.removes} get={result.lookups}), "
        f"final size {result.final_size}"
    )


def main() -> None:
    app()


__all__ = ["app", "main"]
