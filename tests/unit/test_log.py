"""Tests for logging utilities."""

import json
import logging
from dataclasses import dataclass

import pytest

from aramaic_mapper.utils.log import (
    LIBRARY_LOGGER,
    JSONFormatter,
    PrettyFormatter,
    log_with_context,
    setup_logging,
    setup_logging_from_settings,
)


@dataclass
class Pair:
    source: str
    target: str


@pytest.fixture
def library_logger():
    logger = logging.getLogger(LIBRARY_LOGGER)
    handlers, level = list(logger.handlers), logger.level
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    for handler in handlers:
        logger.addHandler(handler)
    logger.setLevel(level)


def _record(message: str, **extra_fields) -> logging.LogRecord:
    record = logging.LogRecord("aramaic_mapper.mapper", logging.INFO, __file__, 1, message, None, None)
    if extra_fields:
        record.extra_fields = extra_fields
    return record


def test_json_formatter():
    """Test JSON lines carry level, logger, message and extra fields."""
    line = JSONFormatter().format(_record("Built table", entries=31))
    data = json.loads(line)

    assert data["level"] == "INFO"
    assert data["logger"] == "aramaic_mapper.mapper"
    assert data["message"] == "Built table"
    assert data["entries"] == 31
    assert data["timestamp"].endswith("Z")


def test_pretty_formatter_appends_context():
    """Test pretty lines end with the context fields."""
    line = PrettyFormatter().format(_record("Built table", entries=31, truncated=["vowels"]))

    assert "[    INFO] aramaic_mapper.mapper: Built table" in line
    assert line.endswith("entries=31 truncated=['vowels']")
    assert PrettyFormatter().format(_record("Built table")).endswith("Built table")


def test_setup_logging_pretty(library_logger):
    """Test pretty console logging on the library logger."""
    logger = setup_logging(level="debug")

    assert logger is library_logger
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0].formatter, PrettyFormatter)


def test_setup_logging_replaces_handlers(library_logger, tmp_path):
    """Test repeated setup does not stack handlers."""
    setup_logging()
    logger = setup_logging(format_type="json", log_file=tmp_path / "logs" / "mapper.log")

    assert len(logger.handlers) == 2
    assert all(isinstance(h.formatter, JSONFormatter) for h in logger.handlers)
    assert (tmp_path / "logs").is_dir()


def test_setup_logging_from_settings(library_logger, tmp_path):
    """Test the logging section of the settings is applied."""
    log_file = tmp_path / "mapper.log"
    logger = setup_logging_from_settings(
        {"logging": {"level": "INFO", "format": "json", "file": str(log_file)}}
    )
    logging.getLogger("aramaic_mapper.config").info("Loaded writings")
    for handler in logger.handlers:
        handler.flush()

    assert logger.level == logging.INFO
    data = json.loads(log_file.read_text(encoding="utf-8").splitlines()[-1])
    assert data["message"] == "Loaded writings"


def test_setup_logging_from_empty_section(library_logger):
    """Test an empty logging section falls back to the defaults."""
    logger = setup_logging_from_settings({"logging": None})

    assert logger.level == logging.WARNING
    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0].formatter, PrettyFormatter)


def test_log_with_context(caplog):
    """Test context fields are attached, dataclasses as dicts."""
    logger = logging.getLogger("aramaic_mapper.test")

    with caplog.at_level(logging.INFO, logger="aramaic_mapper.test"):
        log_with_context(logger, "info", "Mapped word", pair=Pair("sedra", "cal"), length=5)

    record = caplog.records[-1]
    assert record.getMessage() == "Mapped word"
    assert record.extra_fields == {"pair": {"source": "sedra", "target": "cal"}, "length": 5}
