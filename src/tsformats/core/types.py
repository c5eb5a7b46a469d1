"""
Core data types for the tsformats classifier.

This module defines the types shared by the catalog, the classifier and the
overlap diagnostics:
- FormatCategory: the catalog section a format belongs to
- ClassificationResult: the formats one input value matched
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet

__all__ = [
    "FormatCategory",
    "ClassificationResult",
]


class FormatCategory(str, Enum):
    """Catalog section of a timestamp format."""
    ISO8601 = "iso8601"
    UNIX_EPOCH = "unix_epoch"
    RFC = "rfc"
    REGIONAL = "regional"
    TIME = "time"
    DATABASE = "database"
    SYSTEM = "system"
    LEGACY = "legacy"
    INDUSTRY = "industry"
    TIMEZONE = "timezone"
    SPECIAL = "special"
    CALENDAR = "calendar"


@dataclass(frozen=True)
class ClassificationResult:
    """
    Formats matched by a single input value.

    Attributes:
        value: The classified input
        formats: Names of every matching format
        categories: Categories of the matching formats
    """
    value: str
    formats: FrozenSet[str] = field(default_factory=frozenset)
    categories: FrozenSet[FormatCategory] = field(default_factory=frozenset)

    @property
    def matched(self) -> bool:
        """True if at least one format matched."""
        return bool(self.formats)

    @property
    def is_ambiguous(self) -> bool:
        """True if more than one format matched."""
        return len(self.formats) > 1

    def to_dict(self) -> dict:
        """Serialize with names in sorted order for stable output."""
        return {
            "value": self.value,
            "formats": sorted(self.formats),
            "categories": sorted(c.value for c in self.categories),
            "ambiguous": self.is_ambiguous,
        }
