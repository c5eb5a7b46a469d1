"""
Domain-specific exceptions for tsformats.

Classification itself never raises: unmatched input is an empty result and
defective catalog entries are excluded when the catalog is built. These
exceptions surface development-time defects instead.

Usage:
    from tsformats.core.exceptions import CatalogError

    try:
        get_catalog().raise_for_rejected()
    except CatalogError as e:
        logger.error(f"Catalog is not healthy: {e}")

Exception Hierarchy:
    TsFormatsError (base)
    ├── CatalogError - defective format definitions found at build time
    └── ConfigurationError - configuration/settings issues
"""

from typing import Any, Optional


class TsFormatsError(Exception):
    """
    Base exception for all tsformats errors.

    Provides consistent error formatting with optional context.

    Attributes:
        message: Human-readable error description
        context: Additional context about what was being done
        details: Technical details (format names, file paths, etc.)
    """

    def __init__(
        self,
        message: str,
        context: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context
        self.details = details or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the exception message with context and details."""
        parts = [self.message]
        if self.context:
            parts.append(f"Context: {self.context}")
        if self.details:
            detail_str = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
            parts.append(f"Details: {detail_str}")
        return ". ".join(parts)


class CatalogError(TsFormatsError):
    """
    Raised when the format catalog contains defective definitions.

    Examples:
        - A pattern that does not compile
        - A pattern missing its start or end anchor
        - Two definitions sharing one name
    """

    def __init__(
        self,
        message: str,
        names: Optional[list[str]] = None,
        **kwargs,
    ):
        details = kwargs.pop("details", {})
        if names:
            details["names"] = names
        super().__init__(message, details=details, **kwargs)
        self.names = names or []


class ConfigurationError(TsFormatsError):
    """
    Raised when configuration is invalid or cannot be loaded.

    Examples:
        - Unreadable YAML config file
        - YAML document that is not a mapping
    """

    def __init__(
        self,
        message: str,
        config_path: Optional[str] = None,
        **kwargs,
    ):
        details = kwargs.pop("details", {})
        if config_path:
            details["config_path"] = config_path
        super().__init__(message, details=details, **kwargs)
        self.config_path = config_path
