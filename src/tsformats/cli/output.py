"""Structured output formatting for CLI commands."""

from __future__ import annotations

import csv
import io
import json
from typing import Any

import click

# Longest cell printed in table mode before truncation
MAX_COLUMN_WIDTH = 60


def _cell(value: Any) -> str:
    if isinstance(value, (list, tuple, set, frozenset)):
        return ",".join(str(v) for v in value)
    if isinstance(value, bool):
        return "yes" if value else "no"
    if value is None:
        return ""
    return str(value)


class OutputFormatter:
    """Format command output as table, JSON, or CSV.

    Usage::

        fmt = OutputFormatter(output_format, quiet)
        fmt.print_table(rows, columns=["value", "formats"])
        fmt.print_message("3 values classified")
    """

    def __init__(self, output_format: str = "table", quiet: bool = False) -> None:
        self.format = output_format
        self.quiet = quiet

    def print_table(
        self,
        data: list[dict[str, Any]],
        columns: list[str] | None = None,
    ) -> None:
        """Print *data* as a formatted table, JSON array, or CSV.

        JSON keeps list values as arrays; table and CSV join them with commas.
        """
        if columns is None:
            columns = list(data[0].keys()) if data else []

        if self.format == "json":
            click.echo(json.dumps(data, indent=2, ensure_ascii=False, default=str))
            return

        if self.format == "csv":
            buf = io.StringIO()
            writer = csv.DictWriter(buf, fieldnames=columns, extrasaction="ignore")
            writer.writeheader()
            for row in data:
                writer.writerow({c: _cell(row.get(c)) for c in columns})
            click.echo(buf.getvalue().rstrip())
            return

        if not columns:
            return

        headers = {c: c.replace("_", " ").title() for c in columns}
        widths: dict[str, int] = {c: len(headers[c]) for c in columns}
        for row in data:
            for c in columns:
                widths[c] = max(widths[c], len(_cell(row.get(c))))
        widths = {c: min(w, MAX_COLUMN_WIDTH) for c, w in widths.items()}

        header = "  ".join(headers[c].ljust(widths[c]) for c in columns)
        click.echo(header)
        click.echo("-" * len(header))

        for row in data:
            parts: list[str] = []
            for c in columns:
                val = _cell(row.get(c))
                if len(val) > widths[c]:
                    val = val[: widths[c] - 3] + "..."
                parts.append(val.ljust(widths[c]))
            click.echo("  ".join(parts).rstrip())

    def print_single(self, data: dict[str, Any]) -> None:
        """Print a single key-value record."""
        if self.format == "json":
            click.echo(json.dumps(data, indent=2, ensure_ascii=False, default=str))
        else:
            for key, value in data.items():
                click.echo(f"  {key}: {_cell(value)}")

    def print_error(self, message: str) -> None:
        """Print an error message to stderr."""
        click.echo(f"Error: {message}", err=True)

    def print_message(self, message: str) -> None:
        """Print an informational message to stderr (suppressed in quiet mode)."""
        if not self.quiet:
            click.echo(message, err=True)
