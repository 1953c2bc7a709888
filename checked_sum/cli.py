"""Command-line interface for the checked_sum package.

Provides convenient access to checked summation via `typer` commands.
"""
from __future__ import annotations

from enum import Enum
from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table

from .core import integers as integers_module
from .core import summation as summation_module
from .core.log import configure_logging

__all__ = ["app"]

console = Console()


class LogLevel(str, Enum):
    """Log levels accepted by --log-level."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


app = typer.Typer(
    help="checked-sum – overflow-checked summation of fixed-width integers.",
    add_completion=False,
)


def _parse_values(raw_values: List[str], kind: type) -> List[integers_module.FixedInt]:
    parsed: List[integers_module.FixedInt] = []
    for raw in raw_values:
        try:
            parsed.append(kind(int(raw, 0)))
        except ValueError as exc:
            raise typer.BadParameter(f"{raw!r}: {exc}", param_hint="VALUES") from exc
    return parsed


@app.callback()
def main_callback(
    log_level: LogLevel = typer.Option(
        LogLevel.WARNING,
        "--log-level",
        envvar="CHECKED_SUM_LOG_LEVEL",
        case_sensitive=False,
        help="Logging level",
    ),
) -> None:
    """Overflow-checked summation toolkit."""
    configure_logging(log_level.value)


@app.command("sum")
def sum_cmd(
    values: Optional[List[str]] = typer.Argument(None, help="Integers to add (decimal, 0x, 0o or 0b)"),
    type_name: str = typer.Option("i64", "--type", "-t", help="Element type, e.g. u8, i32, usize"),
) -> None:
    """Add VALUES as TYPE, failing if any partial sum overflows."""
    console.rule("[bold blue]Sum")
    try:
        kind = integers_module.int_type(type_name)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--type") from exc

    items = _parse_values(values or [], kind)
    total = summation_module.checked_sum(items, kind)
    if total is None:
        console.print(f"[red]Overflow: sum does not fit in {kind.name} [{kind.min}, {kind.max}]")
        raise typer.Exit(code=1)
    console.print(f"[green]Total: {total}")


@app.command()
def types() -> None:
    """List the built-in fixed-width integer types."""
    console.rule("[bold blue]Types")
    table = Table(title="Fixed-width integer types")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Bits", justify="right", no_wrap=True)
    table.add_column("Min", justify="right")
    table.add_column("Max", justify="right")
    for info in integers_module.describe_types():
        table.add_row(info["name"], str(info["bits"]), str(info["min"]), str(info["max"]))
    console.print(table)


def main() -> None:  # pragma: no cover
    """Entry-point for the `python -m checked_sum` or `checked-sum` command."""
    app()


if __name__ == "__main__":  # pragma: no cover
    main()
