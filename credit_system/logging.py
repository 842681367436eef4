"""Structured logging configuration for credit-system.

Structured fields are passed as ``logger.warning(msg, extra={"extra": {...}})``;
both formatters render them.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any

STANDARD_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

# Lowered to WARNING by setup_logging
NOISY_LOGGERS = ("uvicorn.access", "faker")


def record_extra(record: logging.LogRecord) -> dict[str, Any]:
    """Structured fields attached to a record, or an empty dict."""
    extra = getattr(record, "extra", None)
    return extra if isinstance(extra, dict) else {}


class StandardFormatter(logging.Formatter):
    """Pipe-separated line with structured fields appended as ``key=value``."""

    def __init__(self) -> None:
        super().__init__(fmt=STANDARD_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        extra = record_extra(record)
        if extra:
            line += " | " + " ".join(f"{k}={v}" for k, v in extra.items())
        return line


class JsonFormatter(logging.Formatter):
    """JSON log formatter; structured fields become top-level keys."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        log_data.update(record_extra(record))
        return json.dumps(log_data, default=str)


def setup_logging(level: str = "INFO", format_type: str = "standard") -> None:
    """Configure the root handler for credit-system.

    Parameters
    ----------
    level : str
        Log level name; unknown names fall back to INFO.
    format_type : str
        ``"standard"`` or ``"json"``.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)
    formatter: logging.Formatter = JsonFormatter() if format_type == "json" else StandardFormatter()

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(log_level)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(log_level)

    logging.getLogger("credit_system").setLevel(log_level)
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
