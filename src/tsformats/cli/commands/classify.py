"""
Classify command: report every timestamp format a value matches.
"""

from __future__ import annotations

import click

from tsformats.cli.base import common_options, format_option, resolve_format
from tsformats.cli.output import OutputFormatter
from tsformats.core.classifier import classify_many


@click.command()
@click.argument("values", nargs=-1)
@click.option("--stdin", "read_stdin", is_flag=True, help="Also read one value per line from stdin")
@click.option("--unmatched-only", is_flag=True, help="Only show values that matched no format")
@format_option
@common_options
def classify(
    values: tuple[str, ...],
    read_stdin: bool,
    unmatched_only: bool,
    output_format: str | None,
    quiet: bool,
):
    """Classify timestamp VALUES against the format catalog.

    Examples:
        tsformats classify 2025-05-19 1716159600
        tsformats classify "Mon, 19 May 2025 14:30:15 GMT" -f json
        cat stamps.txt | tsformats classify --stdin
    """
    fmt = OutputFormatter(resolve_format(output_format), quiet)

    inputs = list(values)
    if read_stdin:
        stream = click.get_text_stream("stdin")
        inputs.extend(line.rstrip("\r\n") for line in stream if line.strip())

    if not inputs:
        raise click.UsageError("Provide at least one VALUE or use --stdin")

    results = classify_many(inputs)
    if unmatched_only:
        results = [r for r in results if not r.matched]

    fmt.print_table(
        [r.to_dict() for r in results],
        columns=["value", "formats", "categories", "ambiguous"],
    )

    matched = sum(1 for r in results if r.matched)
    fmt.print_message(f"\n{len(results)} values shown, {matched} matched at least one format")
