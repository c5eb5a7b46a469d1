"""Shared CLI decorators and utilities."""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import Any

import click

OUTPUT_FORMATS = ["table", "json", "csv"]


def common_options(f: Callable[..., Any]) -> Callable[..., Any]:
    """Add ``--quiet`` flag to any command."""
    @click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output")
    @functools.wraps(f)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        return f(*args, **kwargs)
    return wrapper


def format_option(f: Callable[..., Any]) -> Callable[..., Any]:
    """Add ``--format`` / ``-f`` option.

    The Python parameter is named ``output_format`` to avoid shadowing the
    built-in ``format``. When omitted, ``resolve_format`` falls back to the
    configured ``output.format``.
    """
    @click.option(
        "--format", "-f", "output_format",
        type=click.Choice(OUTPUT_FORMATS),
        default=None,
        help="Output format (default: from configuration)",
    )
    @functools.wraps(f)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        return f(*args, **kwargs)
    return wrapper


def resolve_format(output_format: str | None) -> str:
    """Return *output_format*, or the configured default when it is None."""
    if output_format:
        return output_format
    from tsformats.config import get_settings

    return get_settings().output.format
