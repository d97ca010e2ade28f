"""Output formatting for CLI commands."""

from __future__ import annotations

import json
import sys
from enum import Enum
from typing import Any

from pydantic import BaseModel
from rich.console import Console
from rich.table import Table

console = Console(stderr=True)


class OutputFormat(str, Enum):
    TABLE = "table"
    JSON = "json"


def to_rows(data: Any) -> list[dict[str, Any]]:
    """Normalize models, dicts and lists of either into a list of dicts."""
    if isinstance(data, BaseModel):
        return [data.model_dump(mode="json", by_alias=True, exclude_none=True)]
    if isinstance(data, dict):
        return [data]
    return [row for item in data for row in to_rows(item)]


def print_output(
    data: Any,
    fmt: OutputFormat = OutputFormat.TABLE,
    columns: list[str] | None = None,
    title: str | None = None,
) -> None:
    """Print data in the requested format.

    Args:
        data: A model, a dict, or a list of either.
        fmt: Output format (table, json).
        columns: Which columns to show in table mode. None = all.
        title: Optional title for table output.
    """
    rows = to_rows(data)
    if fmt == OutputFormat.JSON:
        print_json(rows[0] if isinstance(data, (BaseModel, dict)) else rows)
    else:
        print_table(rows, columns, title)


def print_json(data: Any) -> None:
    """Print data as formatted JSON to stdout."""
    json.dump(data, sys.stdout, indent=2, default=str)
    sys.stdout.write("\n")


def print_table(
    rows: list[dict[str, Any]],
    columns: list[str] | None = None,
    title: str | None = None,
) -> None:
    """Print rows as a Rich table. Nested values are shown as compact JSON."""
    if not rows:
        console.print("[dim]No results.[/dim]")
        return

    # Auto-detect columns from first row if not specified
    if columns is None:
        columns = list(rows[0].keys())

    table = Table(title=title, show_lines=False)
    for col in columns:
        table.add_column(col, overflow="fold")

    for row in rows:
        cells = []
        for col in columns:
            value = row.get(col, "")
            if isinstance(value, (dict, list)):
                value = json.dumps(value, default=str)
            cells.append(str(value))
        table.add_row(*cells)

    console.print(table)
