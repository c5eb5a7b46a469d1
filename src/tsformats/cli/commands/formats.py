"""
Formats command: list the catalog.
"""

from __future__ import annotations

import click

from tsformats.cli.base import common_options, format_option, resolve_format
from tsformats.cli.output import OutputFormatter
from tsformats.core.catalog import get_catalog
from tsformats.core.types import FormatCategory


@click.command()
@click.option(
    "--category", "-c",
    type=click.Choice([c.value for c in FormatCategory]),
    default=None,
    help="Only list formats in this category",
)
@click.option("--show-regex", is_flag=True, help="Include the pattern source in table output")
@format_option
@common_options
def formats(category: str | None, show_regex: bool, output_format: str | None, quiet: bool):
    """List known timestamp formats.

    Examples:
        tsformats formats
        tsformats formats --category timezone --show-regex
    """
    fmt = OutputFormatter(resolve_format(output_format), quiet)
    catalog = get_catalog()

    definitions = (
        catalog.by_category(FormatCategory(category)) if category else tuple(catalog)
    )
    rows = [
        {
            "name": d.name,
            "category": d.category.value,
            "example": d.example,
            "regex": d.regex,
        }
        for d in definitions
    ]

    columns = ["name", "category", "example"]
    if show_regex or fmt.format != "table":
        columns.append("regex")

    fmt.print_table(rows, columns=columns)
    fmt.print_message(f"\n{len(rows)} formats")
