import sys
from io import StringIO

import pytest
from loguru import logger

from locapi.log_config import configure_logging
from locapi.params import AttributeSelection


def test_configure_logging_default_level_and_sink():
    """Test configure_logging with default INFO level and stderr sink."""
    logger.remove()

    configure_logging()

    assert len(logger._core.handlers) == 1
    handler_id = list(logger._core.handlers.keys())[-1]
    handler = logger._core.handlers[handler_id]
    assert handler._levelno == logger.level("INFO").no


@pytest.mark.parametrize("level", ["debug", "WARNING", "Error"])
def test_configure_logging_custom_level(level):
    logger.remove()
    configure_logging(level=level)
    handler_id = list(logger._core.handlers.keys())[-1]
    handler = logger._core.handlers[handler_id]
    assert handler._levelno == logger.level(level.upper()).no


def test_configure_logging_removes_existing_handlers():
    """Test that configure_logging removes pre-existing handlers."""
    logger.remove()
    logger.add(lambda _: None, level="ERROR")
    assert len(logger._core.handlers) == 1

    configure_logging(level="INFO")

    assert len(logger._core.handlers) == 1
    handler_id = list(logger._core.handlers.keys())[-1]
    assert logger._core.handlers[handler_id]._levelno == logger.level("INFO").no


def test_configure_logging_custom_sink():
    """Messages go to the given sink in the configured format."""
    sink = StringIO()
    configure_logging(level="DEBUG", sink=sink)

    logger.debug("building a loc.gov url")

    output = sink.getvalue()
    assert "locapi log level set to DEBUG" in output
    assert "| DEBUG    |" in output
    assert "building a loc.gov url" in output


def test_conflicting_attribute_selection_is_logged():
    sink = StringIO()
    configure_logging(level="WARNING", sink=sink)

    AttributeSelection(include=["item", "resources"], exclude=["item"])

    assert "Attributes both included and excluded: ['item']" in sink.getvalue()


@pytest.fixture(autouse=True)
def reset_logger_after_test():
    """Fixture to reset Loguru to a default state after each test in this module."""
    yield
    logger.remove()
    logger.add(sys.stderr, level="INFO")
