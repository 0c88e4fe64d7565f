"""Logging setup for the API server and the CLI.

Both entry points call ``setup_logging`` once at startup. Modules log through
``logging.getLogger(__name__)``, which places them under the ``sales_coach``
logger configured here.
"""

import json
import logging
import sys
from pathlib import Path
from typing import Any

ROOT_LOGGER_NAME = "sales_coach"

TEXT_FORMAT = "%(asctime)s | %(levelname)-8s | %(module)s:%(funcName)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class JSONExceptionFormatter(logging.Formatter):
    """Render each record as a single JSON line.

    Used when ``LOG_JSON=true`` so a hosted deployment can index selector and
    model failures by level, module and exception type.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "location": {
                "file": record.filename,
                "function": record.funcName,
                "line": record.lineno,
            },
        }

        exc_type, exc_value, _ = record.exc_info or (None, None, None)
        if exc_type is not None:
            entry["exception"] = {
                "type": exc_type.__name__,
                "message": str(exc_value) if exc_value is not None else None,
                "traceback": self.formatException(record.exc_info),
            }

        return json.dumps(entry)


def _handlers_for(log_file: Path | None) -> list[logging.Handler]:
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
    return handlers


def setup_logging(
    level: str = "INFO",
    log_file: Path | None = None,
    json_format: bool = False,
) -> logging.Logger:
    """Configure the ``sales_coach`` logger, replacing earlier handlers.

    Args:
        level: Level name; unknown names fall back to INFO.
        log_file: Also write records to this file.
        json_format: Emit JSON lines instead of the pipe-separated text format.

    Returns:
        The configured ``sales_coach`` logger.
    """
    formatter: logging.Formatter = (
        JSONExceptionFormatter() if json_format else logging.Formatter(TEXT_FORMAT, DATE_FORMAT)
    )

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    logger.handlers.clear()

    for handler in _handlers_for(log_file):
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger


def get_logger(name: str | None = None) -> logging.Logger:
    """Return the ``sales_coach`` logger or its child ``sales_coach.<name>``."""
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}" if name else ROOT_LOGGER_NAME)
