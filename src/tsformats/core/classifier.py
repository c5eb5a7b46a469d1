"""Timestamp format classification.

Every usable catalog entry is evaluated independently against the whole
input; there is no first-match short circuit, since many timestamp shapes
legitimately satisfy several named formats.

Usage:
    from tsformats.core.classifier import classify

    classify("2025-05-19")          # frozenset({'ISO_DATE'})
    classify("not a timestamp")     # frozenset()
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from .catalog import Catalog, get_catalog
from .types import ClassificationResult

logger = logging.getLogger(__name__)


def classify(value: str, catalog: Catalog | None = None) -> frozenset[str]:
    """
    Return the names of every format *value* matches.

    Never raises: empty input, non-string input and unrecognized text all
    yield an empty set.

    Args:
        value: Candidate timestamp string
        catalog: Catalog to evaluate against (defaults to the process catalog)

    Returns:
        Frozen set of matching format names
    """
    if not isinstance(value, str) or not value:
        return frozenset()

    if catalog is None:
        catalog = get_catalog()

    return frozenset(
        name for name, definition in catalog.entries()
        if definition.matches(value)
    )


def describe(value: str, catalog: Catalog | None = None) -> ClassificationResult:
    """Classify *value* and attach the categories of the matching formats."""
    if catalog is None:
        catalog = get_catalog()

    formats = classify(value, catalog)
    categories = frozenset(catalog.get(name).category for name in formats)
    return ClassificationResult(
        value=value if isinstance(value, str) else str(value),
        formats=formats,
        categories=categories,
    )


def classify_many(
    values: Iterable[str],
    catalog: Catalog | None = None,
) -> list[ClassificationResult]:
    """Describe each of *values*, preserving input order."""
    if catalog is None:
        catalog = get_catalog()

    results = [describe(value, catalog) for value in values]

    ambiguous = sum(1 for r in results if r.is_ambiguous)
    unmatched = sum(1 for r in results if not r.matched)
    logger.debug(
        f"Classified {len(results)} values "
        f"({unmatched} unmatched, {ambiguous} ambiguous)",
        extra={"value_count": len(results), "unmatched": unmatched, "ambiguous": ambiguous},
    )
    return results
