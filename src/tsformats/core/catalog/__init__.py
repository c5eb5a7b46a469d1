"""
Timestamp format catalog.

- TIMESTAMP_FORMATS: the raw format definitions
- build_catalog: compile definitions, setting aside defective ones
- get_catalog: the process-wide catalog, built once on first use
"""

from .formats import TIMESTAMP_FORMATS
from .pattern_registry import (
    FormatSpec,
    PatternDefinition,
    RejectedDefinition,
    compile_definition,
)
from .registry import Catalog, LazyCatalog, build_catalog, get_catalog

__all__ = [
    "TIMESTAMP_FORMATS",
    "FormatSpec",
    "PatternDefinition",
    "RejectedDefinition",
    "compile_definition",
    "Catalog",
    "LazyCatalog",
    "build_catalog",
    "get_catalog",
]
