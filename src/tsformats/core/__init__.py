"""
tsformats core classification engine.

Usage:
    from tsformats.core import classify, get_catalog

    formats = classify("Mon, 19 May 2025 14:30:15 GMT")
    # frozenset({'RFC_822_1123'})

    for name, definition in get_catalog().entries():
        print(name, definition.regex)
"""

from .types import (
    FormatCategory,
    ClassificationResult,
)

from .catalog import (
    TIMESTAMP_FORMATS,
    Catalog,
    FormatSpec,
    LazyCatalog,
    PatternDefinition,
    RejectedDefinition,
    build_catalog,
    get_catalog,
)

from .classifier import (
    classify,
    classify_many,
    describe,
)

from .overlap import (
    DEFAULT_PROBES,
    EXPECTED_OVERLAPS,
    Overlap,
    OverlapReport,
    find_overlaps,
    is_expected_overlap,
)

from .exceptions import (
    TsFormatsError,
    CatalogError,
    ConfigurationError,
)

__all__ = [
    # Types
    "FormatCategory",
    "ClassificationResult",
    # Catalog
    "TIMESTAMP_FORMATS",
    "Catalog",
    "FormatSpec",
    "LazyCatalog",
    "PatternDefinition",
    "RejectedDefinition",
    "build_catalog",
    "get_catalog",
    # Classification
    "classify",
    "classify_many",
    "describe",
    # Diagnostics
    "DEFAULT_PROBES",
    "EXPECTED_OVERLAPS",
    "Overlap",
    "OverlapReport",
    "find_overlaps",
    "is_expected_overlap",
    # Errors
    "TsFormatsError",
    "CatalogError",
    "ConfigurationError",
]
