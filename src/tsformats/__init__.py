"""
tsformats - Timestamp format classification

This package provides:
- Core: a catalog of named timestamp formats and a classifier that reports
  every format an input string matches
- CLI: diagnostic commands for classifying values and reviewing pattern overlap
"""

__version__ = "1.0.0"

from tsformats.core import classify, get_catalog

__all__ = ["classify", "get_catalog", "__version__"]
