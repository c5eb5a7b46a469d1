"""Offline overlap diagnostics for the format catalog.

Two formats overlap when one probe string matches both. Some overlaps are
expected: the formats share a lexical shape (an RFC 3339 offset timestamp is
also a W3C-DTF one, a 10-digit number is both Unix seconds and a custom
epoch). Any other overlap points at a pattern whose numeric bounds are too
loose and is logged for manual review.

This is a quality check only; it never changes what ``classify`` returns.
"""

from __future__ import annotations

import itertools
import logging
from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass, field

from .catalog import Catalog, get_catalog
from .classifier import classify

logger = logging.getLogger(__name__)

__all__ = [
    "DEFAULT_PROBES",
    "EXPECTED_OVERLAPS",
    "Overlap",
    "OverlapReport",
    "find_overlaps",
    "is_expected_overlap",
]

DEFAULT_PROBES: tuple[str, ...] = (
    "2025-05-19",
    "2025-05-19T14:30:15",
    "2025-05-19T14:30:15Z",
    "2025-05-19 14:30:15",
    "05/19/2025 14:30:15",
    "19/05/2025 14:30:15",
    "14:30:15",
    "1716159600",
    "20250519",
    "250519-143015",
)

# Every pair inside a group shares a lexical shape.
_EXPECTED_GROUPS: tuple[tuple[str, ...], ...] = (
    # Numeric UTC offset forms
    ("ISO_DATETIME_TZ", "RFC_3339", "W3C_DTF", "ISO_TZ_OFFSET"),
    # "Z" suffixed forms
    ("ISO_DATETIME_UTC", "RFC_3339", "ZULU_INDICATOR"),
    ("ISO_DATETIME_MS_UTC", "ZULU_INDICATOR"),
    # Unix values are also valid custom epochs
    ("UNIX_SECONDS", "CUSTOM_EPOCH"),
    ("UNIX_MILLISECONDS", "CUSTOM_EPOCH"),
    ("UNIX_MICROSECONDS", "CUSTOM_EPOCH"),
    ("UNIX_NANOSECONDS", "CUSTOM_EPOCH"),
    # Day and month both <= 12
    ("US_DATETIME", "EU_DATETIME"),
    ("SHORT_US_DATETIME", "SHORT_EU_DATETIME"),
    # Calendar years that fall in the ISO date shape
    ("ISO_DATE", "ISLAMIC_CALENDAR"),
    ("ISO_DATE", "HEBREW_CALENDAR"),
    ("ISO_DATE", "THAI_CALENDAR"),
    ("ORDINAL_DATE_SHORT", "JULIAN_SHORT"),
    # Bare digit runs
    ("COMPACT_TIMESTAMP", "IBM_MAINFRAME"),
    ("COMPACT_TIMESTAMP", "UNIX_MICROSECONDS"),
    ("COMPACT_TIMESTAMP", "CUSTOM_EPOCH"),
)

EXPECTED_OVERLAPS: frozenset[frozenset[str]] = frozenset(
    frozenset(pair)
    for group in _EXPECTED_GROUPS
    for pair in itertools.combinations(group, 2)
)


def is_expected_overlap(first: str, second: str) -> bool:
    """True if *first* and *second* are known to share a lexical shape."""
    return frozenset((first, second)) in EXPECTED_OVERLAPS


@dataclass(frozen=True)
class Overlap:
    """Two formats that both matched at least one probe."""

    first: str
    second: str
    probes: tuple[str, ...]
    expected: bool


@dataclass
class OverlapReport:
    """Result of an overlap scan over a catalog."""

    overlaps: list[Overlap] = field(default_factory=list)
    probe_count: int = 0
    categories: dict[str, str] = field(default_factory=dict)

    @property
    def unexpected(self) -> list[Overlap]:
        return [o for o in self.overlaps if not o.expected]

    def category_counts(self) -> dict[tuple[str, str], int]:
        """Count overlaps between differing categories, keyed by sorted pair."""
        counts: Counter[tuple[str, str]] = Counter()
        for overlap in self.overlaps:
            cat1 = self.categories.get(overlap.first)
            cat2 = self.categories.get(overlap.second)
            if cat1 and cat2 and cat1 != cat2:
                counts[tuple(sorted((cat1, cat2)))] += 1
        return dict(counts)


def find_overlaps(
    catalog: Catalog | None = None,
    probes: Iterable[str] | None = None,
    include_examples: bool = True,
) -> OverlapReport:
    """
    Scan the catalog for format pairs that match a common probe.

    Args:
        catalog: Catalog to scan (defaults to the process catalog)
        probes: Probe strings (defaults to DEFAULT_PROBES)
        include_examples: Also probe with every entry's own example

    Returns:
        OverlapReport listing every overlapping pair in name order
    """
    if catalog is None:
        catalog = get_catalog()

    all_probes = list(DEFAULT_PROBES if probes is None else probes)
    if include_examples:
        all_probes.extend(definition.example for definition in catalog)
    # Deduplicate, keep first-seen order
    all_probes = list(dict.fromkeys(all_probes))

    hits: dict[tuple[str, str], list[str]] = {}
    for probe in all_probes:
        matched = sorted(classify(probe, catalog))
        for pair in itertools.combinations(matched, 2):
            hits.setdefault(pair, []).append(probe)

    overlaps = [
        Overlap(
            first=first,
            second=second,
            probes=tuple(found),
            expected=is_expected_overlap(first, second),
        )
        for (first, second), found in sorted(hits.items())
    ]

    report = OverlapReport(
        overlaps=overlaps,
        probe_count=len(all_probes),
        categories={d.name: d.category.value for d in catalog},
    )

    for overlap in report.unexpected:
        logger.warning(
            f"Unexpected overlap between '{overlap.first}' and '{overlap.second}' "
            f"(probe: {overlap.probes[0]!r})",
            extra={
                "first": overlap.first,
                "second": overlap.second,
                "probe": overlap.probes[0],
            },
        )
    logger.info(
        f"Found {len(overlaps)} overlapping pattern pairs over {len(all_probes)} probes "
        f"({len(report.unexpected)} unexpected)",
        extra={
            "overlap_count": len(overlaps),
            "unexpected_count": len(report.unexpected),
            "probe_count": len(all_probes),
        },
    )
    return report
