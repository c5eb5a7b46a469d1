"""Immutable pattern definitions for the timestamp format catalog.

Raw definitions are plain frozen records; compiling them into
``PatternDefinition`` objects happens once, when the catalog is built.
Both are frozen dataclasses, safe to share across threads.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from ..types import FormatCategory

# ASCII keeps \d to 0-9; Unicode digits never count as timestamp digits.
DEFAULT_FLAGS = re.ASCII


@dataclass(frozen=True)
class FormatSpec:
    """Uncompiled catalog entry as written in the format tables."""

    name: str
    category: FormatCategory
    regex: str
    example: str
    flags: int = DEFAULT_FLAGS


@dataclass(frozen=True)
class PatternDefinition:
    """Immutable, hashable compiled format definition."""

    name: str
    category: FormatCategory
    regex: str
    pattern: re.Pattern[str]
    example: str

    def matches(self, value: str) -> bool:
        """Return True if *value* as a whole satisfies this definition."""
        return self.pattern.fullmatch(value) is not None


@dataclass(frozen=True)
class RejectedDefinition:
    """A raw definition that could not be turned into a usable matcher."""

    name: str
    regex: str
    reason: str


def _f(
    name: str,
    category: FormatCategory,
    regex: str,
    example: str,
    flags: int = DEFAULT_FLAGS,
) -> FormatSpec:
    """Shorthand for defining a format."""
    return FormatSpec(
        name=name,
        category=category,
        regex=regex,
        example=example,
        flags=flags,
    )


def compile_definition(spec: FormatSpec) -> PatternDefinition:
    """Compile *spec* into a ``PatternDefinition``.

    Raises:
        re.error: The regex does not compile.
        ValueError: The regex is not anchored on both ends.
    """
    if not spec.regex.startswith("^") or not spec.regex.endswith("$"):
        raise ValueError("pattern must start with '^' and end with '$'")

    return PatternDefinition(
        name=spec.name,
        category=spec.category,
        regex=spec.regex,
        pattern=re.compile(spec.regex, spec.flags),
        example=spec.example,
    )
