"""
CLI command modules.
"""

from tsformats.cli.commands.check import check
from tsformats.cli.commands.classify import classify
from tsformats.cli.commands.config import config
from tsformats.cli.commands.formats import formats
from tsformats.cli.commands.overlaps import overlaps

__all__ = [
    "check",
    "classify",
    "config",
    "formats",
    "overlaps",
]
