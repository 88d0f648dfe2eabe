"""Logging setup shared by the backoffice library and scripts."""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any

from backoffice.exceptions import ConfigurationError

LOG_FORMATS = ("standard", "json")

STANDARD_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
STANDARD_DATEFMT = "%Y-%m-%d %H:%M:%S"

# Record attributes set through ``extra=`` that JSON output carries along
CONTEXT_FIELDS = ("account_id", "company_id", "occurrence_count", "account_count")


class JsonFormatter(logging.Formatter):
    """Render each record as one JSON object per line.

    Account context passed with ``extra={"account_id": ...}`` becomes a
    top-level key, so projection warnings can be filtered per account.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for name in CONTEXT_FIELDS:
            value = getattr(record, name, None)
            if value is not None:
                entry[name] = value
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str, ensure_ascii=False)


def build_formatter(format_type: str) -> logging.Formatter:
    """Return the formatter for ``format_type`` ("standard" or "json")."""
    if format_type == "json":
        return JsonFormatter()
    if format_type == "standard":
        return logging.Formatter(fmt=STANDARD_FORMAT, datefmt=STANDARD_DATEFMT)
    raise ConfigurationError(
        f"Unknown log format {format_type!r}, expected one of {', '.join(LOG_FORMATS)}"
    )


def setup_logging(level: str = "INFO", format_type: str = "standard") -> None:
    """Send log records to stdout with a single handler.

    Parameters
    ----------
    level : str
        Level name; unknown names fall back to INFO.
    format_type : str
        "standard" (pipe separated) or "json".

    Raises
    ------
    ConfigurationError
        If ``format_type`` is not a known format.
    """
    formatter = build_formatter(format_type)
    log_level = logging.getLevelName(level.upper())
    if not isinstance(log_level, int):
        log_level = logging.INFO

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    for existing in list(root.handlers):
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(log_level)

    logging.getLogger("backoffice").setLevel(log_level)
    # Faker logs every locale/provider lookup at DEBUG
    logging.getLogger("faker").setLevel(logging.WARNING)
