"""
Overlaps command: report format pairs that match a common probe string.
"""

from __future__ import annotations

import click

from tsformats.cli.base import common_options, format_option, resolve_format
from tsformats.cli.output import OutputFormatter
from tsformats.config import get_settings
from tsformats.core.overlap import DEFAULT_PROBES, find_overlaps


@click.command()
@click.option("--probe", "-p", "probes", multiple=True, help="Additional probe string (repeatable)")
@click.option("--no-examples", is_flag=True, help="Do not probe with each format's own example")
@click.option("--unexpected-only", is_flag=True, help="Only list overlaps not known to be expected")
@format_option
@common_options
def overlaps(
    probes: tuple[str, ...],
    no_examples: bool,
    unexpected_only: bool,
    output_format: str | None,
    quiet: bool,
):
    """Report format pairs whose patterns match a common string.

    This is a review aid: it always exits 0, whatever it finds.

    Examples:
        tsformats overlaps
        tsformats overlaps --unexpected-only -p "2025-05-19T14:30:15Z"
    """
    fmt = OutputFormatter(resolve_format(output_format), quiet)
    settings = get_settings().overlap

    all_probes = [*DEFAULT_PROBES, *settings.extra_probes, *probes]
    include_examples = settings.include_examples and not no_examples

    report = find_overlaps(probes=all_probes, include_examples=include_examples)
    shown = report.unexpected if unexpected_only else report.overlaps

    fmt.print_table(
        [
            {
                "first": o.first,
                "second": o.second,
                "expected": o.expected,
                "probe": o.probes[0],
            }
            for o in shown
        ],
        columns=["first", "second", "expected", "probe"],
    )

    fmt.print_message(
        f"\n{len(report.overlaps)} overlapping pairs over {report.probe_count} probes, "
        f"{len(report.unexpected)} unexpected"
    )
    counts = report.category_counts()
    if counts:
        fmt.print_message("Overlaps between categories:")
        for (cat1, cat2), count in sorted(counts.items()):
            fmt.print_message(f"  {count} between '{cat1}' and '{cat2}'")
