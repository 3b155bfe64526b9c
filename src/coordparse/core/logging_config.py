"""
Logging configuration for coordparse.

Library modules only create named loggers; applications (the API or a
caller embedding the parser) decide where records go by calling
setup_logging once at startup.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional

# Attributes every LogRecord carries; anything else came in through `extra=`
_RESERVED_ATTRS = frozenset(
    logging.LogRecord(
        name="", level=0, pathname="", lineno=0, msg="", args=(), exc_info=None
    ).__dict__.keys()
) | {"message", "asctime"}

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class JSONFormatter(logging.Formatter):
    """Format log records as single-line JSON objects."""

    def format(self, record: logging.LogRecord) -> str:
        """
        Format a record as JSON.

        Args:
            record: Log record to format

        Returns:
            JSON string with standard fields plus any extra attributes
        """
        data: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "line": record.lineno,
        }

        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS and not key.startswith("_"):
                data[key] = value

        if record.exc_info:
            data["exception"] = self.formatException(record.exc_info)

        return json.dumps(data, default=str)


def get_log_level(level_name: str) -> int:
    """
    Convert a level name to a logging level, case-insensitively.

    Args:
        level_name: Name such as 'debug' or 'WARNING'

    Returns:
        Logging level, INFO for unknown names
    """
    level = logging.getLevelName(level_name.upper())
    return level if isinstance(level, int) else logging.INFO


def setup_logging(
    log_level: str = "INFO",
    json_logs: bool = False,
    enable_console: bool = True,
    log_file: Optional[str] = None,
) -> None:
    """
    Configure the root logger.

    Existing root handlers are replaced so repeated calls do not duplicate
    output.

    Args:
        log_level: Root log level name
        json_logs: Use JSONFormatter instead of the plain text format
        enable_console: Log to stderr
        log_file: Optional file to append log records to
    """
    root = logging.getLogger()
    root.setLevel(get_log_level(log_level))

    for handler in list(root.handlers):
        root.removeHandler(handler)

    formatter: logging.Formatter = JSONFormatter() if json_logs else logging.Formatter(DEFAULT_FORMAT)

    if enable_console:
        console = logging.StreamHandler(sys.stderr)
        console.setFormatter(formatter)
        root.addHandler(console)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    # pyproj is chatty at DEBUG about its data directory lookups
    logging.getLogger("pyproj").setLevel(max(root.level, logging.INFO))
