"""
Check command: validate the format catalog.
"""

import sys

import click

from tsformats.cli.base import common_options
from tsformats.core.catalog import get_catalog


@click.command()
@common_options
def check(quiet: bool):
    """Validate the format catalog.

    Fails (exit code 1) if any definition was rejected at build time or if a
    format's example does not match its own pattern.
    """
    catalog = get_catalog()
    problems: list[str] = []

    for rejected in catalog.rejected:
        problems.append(f"{rejected.name}: rejected ({rejected.reason})")

    for definition in catalog:
        if not definition.matches(definition.example):
            problems.append(
                f"{definition.name}: example {definition.example!r} does not match its pattern"
            )

    if problems:
        for problem in problems:
            click.echo(f"Error: {problem}", err=True)
        sys.exit(1)

    if not quiet:
        click.echo(f"OK: {len(catalog)} formats, all definitions valid")
