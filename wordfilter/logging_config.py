# wordfilter/logging_config.py

"""JSON log output for the filter service.

Every record becomes one JSON object per line on stdout. Context passed with
``extra=`` (keyword counts, text length, match counts) is flattened into the
object next to the standard fields, so filter events can be queried by field.
"""

import logging
import sys
import json
from datetime import datetime, timezone
from typing import Any, Dict

# Attributes every LogRecord carries; anything else came from `extra=`
_RESERVED_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", None, None))
) | {"message", "asctime", "taskName"}

# Third-party loggers kept at WARNING regardless of the configured level
QUIET_LOGGERS = ("streamlit", "urllib3", "watchdog")


def _context_fields(record: logging.LogRecord) -> Dict[str, Any]:
    """Returns the fields attached to a record through ``extra=``."""
    return {
        key: value
        for key, value in record.__dict__.items()
        if key not in _RESERVED_ATTRS and not key.startswith("_")
    }


class StructuredFormatter(logging.Formatter):
    """Renders log records as single-line JSON."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        for key, value in _context_fields(record).items():
            log_data.setdefault(key, value)

        # Keywords are often CJK, keep them readable
        return json.dumps(log_data, ensure_ascii=False, default=str)


def configure_logging(level: str = "INFO") -> None:
    """Routes all logging through one JSON handler on stdout.

    Safe to call more than once (e.g. on every Streamlit rerun): existing
    root handlers are replaced rather than stacked.

    Args:
        level: Logging level name, case-insensitive; unknown names fall back to INFO
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(log_level)
    handler.setFormatter(StructuredFormatter())

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers[:] = [handler]

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logging.getLogger(__name__).info(
        "Filter logging configured",
        extra={"log_level": logging.getLevelName(log_level)},
    )
