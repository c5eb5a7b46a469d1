"""
Logging configuration for tsformats.

Library modules only call ``logging.getLogger(__name__)`` and attach
structured fields through ``extra=``, for example::

    logger.error(
        f"Rejected format definition {name}: {reason}",
        extra={"format_name": name, "reason": reason},
    )

``setup_logging`` installs the handlers once, at CLI startup. Console output
goes to stderr so stdout stays free for command results.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any

# Attributes every LogRecord carries; anything else arrived through ``extra=``
_RECORD_ATTRS = frozenset(
    logging.LogRecord("", 0, "", 0, "", (), None).__dict__
) | {"message", "asctime", "taskName"}


def _extra_fields(record: logging.LogRecord) -> dict[str, Any]:
    return {
        key: value
        for key, value in record.__dict__.items()
        if key not in _RECORD_ATTRS and not key.startswith("_")
    }


class JSONFormatter(logging.Formatter):
    """
    One JSON object per line.

    Fields passed through ``extra=`` (format names, probe strings, counts)
    become top-level keys:

    {"timestamp": "...", "level": "WARNING", "logger": "tsformats.core.overlap",
     "message": "Unexpected overlap ...", "source": "/.../overlap.py:166",
     "first": "ISO_DATE", "second": "LOOSE_DATE", "probe": "2025-05-19"}
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.levelno >= logging.WARNING:
            entry["source"] = f"{record.pathname}:{record.lineno}"

        entry.update(_extra_fields(record))

        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(entry, ensure_ascii=False, default=str)


class ConsoleFormatter(logging.Formatter):
    """
    Single-line, human-readable records for interactive use.

    2025-05-19 14:30:15 WARNING  [tsformats.core.overlap] Unexpected overlap ... | first=ISO_DATE
    """

    LEVEL_COLORS = {
        logging.DEBUG: "\033[36m",
        logging.INFO: "\033[32m",
        logging.WARNING: "\033[33m",
        logging.ERROR: "\033[31m",
        logging.CRITICAL: "\033[35m",
    }
    RESET = "\033[0m"

    def __init__(self, use_colors: bool = True) -> None:
        super().__init__(datefmt="%Y-%m-%d %H:%M:%S")
        self.use_colors = use_colors

    def format(self, record: logging.LogRecord) -> str:
        level = f"{record.levelname:8}"
        if self.use_colors and record.levelno in self.LEVEL_COLORS:
            level = f"{self.LEVEL_COLORS[record.levelno]}{level}{self.RESET}"

        line = (
            f"{self.formatTime(record, self.datefmt)} {level} "
            f"[{record.name}] {record.getMessage()}"
        )

        fields = _extra_fields(record)
        if fields:
            line += " | " + " ".join(f"{key}={value}" for key, value in fields.items())

        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return line


def setup_logging(
    level: str = "INFO",
    json_format: bool = False,
    log_file: str | None = None,
) -> None:
    """
    Replace the root logger's handlers with tsformats' own.

    Args:
        level: Log level name, case-insensitive
        json_format: JSON lines on stderr instead of console lines
        log_file: Also append JSON lines to this file

    Raises:
        ValueError: *level* is not a known level name.
    """
    root = logging.getLogger()
    root.setLevel(level.upper())

    for handler in root.handlers[:]:
        root.removeHandler(handler)

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(
        JSONFormatter() if json_format else ConsoleFormatter(use_colors=sys.stderr.isatty())
    )
    root.addHandler(console)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(JSONFormatter())
        root.addHandler(file_handler)
