"""Logging setup for applications embedding the mapper."""

import json
import logging
import sys
from dataclasses import asdict, is_dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any


#: Logger all library modules log under
LIBRARY_LOGGER = "aramaic_mapper"


class JSONFormatter(logging.Formatter):
    """Format log records as JSON lines."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if hasattr(record, "extra_fields"):
            log_data.update(record.extra_fields)

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, ensure_ascii=False)


class PrettyFormatter(logging.Formatter):
    """Format log records in human-readable format, context as ``key=value``."""

    def __init__(self) -> None:
        super().__init__(
            fmt="%(asctime)s [%(levelname)8s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        extra_fields = getattr(record, "extra_fields", None)
        if extra_fields:
            line += " " + " ".join(f"{key}={value!r}" for key, value in extra_fields.items())
        return line


def setup_logging(
    level: str = "WARNING",
    format_type: str = "pretty",
    log_file: Path | None = None,
) -> logging.Logger:
    """
    Attach handlers to the library logger.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_type: Format type ("json" or "pretty")
        log_file: Optional log file path, always written as JSON lines

    Returns:
        Configured library logger
    """
    logger = logging.getLogger(LIBRARY_LOGGER)
    logger.setLevel(getattr(logging, level.upper()))

    # Replace handlers from an earlier setup
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler(sys.stderr)
    if format_type == "json":
        console_handler.setFormatter(JSONFormatter())
    else:
        console_handler.setFormatter(PrettyFormatter())
    logger.addHandler(console_handler)

    if log_file:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(JSONFormatter())
        logger.addHandler(file_handler)

    return logger


def setup_logging_from_settings(settings: dict[str, Any]) -> logging.Logger:
    """Configure logging from the ``logging`` section of loaded settings."""
    log_settings = settings.get("logging") or {}
    log_file = log_settings.get("file")
    return setup_logging(
        level=log_settings.get("level", "WARNING"),
        format_type=log_settings.get("format", "pretty"),
        log_file=Path(log_file) if log_file else None,
    )


def log_with_context(
    logger: logging.Logger,
    level: str,
    message: str,
    **context: Any,
) -> None:
    """
    Log a message with structured context.

    Args:
        logger: Logger instance
        level: Log level
        message: Log message
        **context: Additional context fields
    """
    processed_context = {}
    for key, value in context.items():
        if is_dataclass(value) and not isinstance(value, type):
            processed_context[key] = asdict(value)
        else:
            processed_context[key] = value

    log_func = getattr(logger, level.lower())
    log_func(message, extra={"extra_fields": processed_context})
