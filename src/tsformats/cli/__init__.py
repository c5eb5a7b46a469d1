"""
tsformats CLI module.

Provides output formatting and shared options for the diagnostic commands.
"""

from tsformats.cli.output import OutputFormatter

__all__ = [
    "OutputFormatter",
]
