"""Terminal output: text vs JSON, rich tables and status lines."""

from __future__ import annotations

import json
import sys
from typing import Any

from rich.console import Console
from rich.table import Table

console = Console()
error_console = Console(stderr=True)


def is_piped() -> bool:
    return not sys.stdout.isatty()


def resolve_format(fmt: str | None) -> str:
    """Explicit format, else json when piped and text on a TTY."""
    if fmt is None:
        return "json" if is_piped() else "text"
    return fmt


def output_json(data: Any) -> None:
    if hasattr(data, "model_dump_json"):
        print(data.model_dump_json(indent=2))
    else:
        print(json.dumps(data, indent=2, default=str))


def output_text(text: str) -> None:
    # Documents are markdown; keep rich from interpreting [brackets] as markup
    console.print(text, markup=False, highlight=False, soft_wrap=True)


def output_table(rows: list[dict[str, str]], columns: list[str], fmt: str | None = None) -> None:
    if resolve_format(fmt) == "json":
        output_json(rows)
        return
    table = Table()
    for col in columns:
        table.add_column(col.replace("_", " ").title())
    for row in rows:
        table.add_row(*[str(row.get(col, "")) for col in columns])
    console.print(table)


def error(msg: str) -> None:
    error_console.print(f"[red]Error:[/red] {msg}")


def success(msg: str) -> None:
    console.print(f"[green]{msg}[/green]")


def info(msg: str) -> None:
    console.print(f"[dim]{msg}[/dim]")
