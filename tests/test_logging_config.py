"""Tests for logging setup."""

import io
import logging

import pytest

from element_list_editor.core.element import Element
from element_list_editor.core.reorder import DragEnd, reorder
from element_list_editor.logging_config import LOGGER_NAME, setup_logging


@pytest.fixture(autouse=True)
def restore_package_logger():
    logger = logging.getLogger(LOGGER_NAME)
    level, propagate = logger.level, logger.propagate
    yield
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(level)
    logger.propagate = propagate


def test_setup_logging_replaces_handlers():
    """Calling setup_logging twice leaves a single console handler."""
    logger = setup_logging(logging.DEBUG)
    setup_logging(logging.DEBUG)
    assert logger.name == "element_list_editor"
    assert len(logger.handlers) == 1
    assert logger.level == logging.DEBUG


def test_setup_logging_does_not_propagate_by_default():
    """Records are not handed to the root logger a second time."""
    assert setup_logging().propagate is False
    assert setup_logging(propagate=True).propagate is True


def test_setup_logging_stream():
    """Records from core modules reach the configured stream."""
    stream = io.StringIO()
    setup_logging(logging.DEBUG, stream=stream)
    reorder([Element("a", "A"), Element("b", "B")], [], DragEnd("a", "b"))
    assert "element_list_editor.core.reorder - DEBUG - Moved a from 0 to 1" in stream.getvalue()


def test_setup_logging_level_filters():
    """DEBUG records are dropped at INFO level."""
    stream = io.StringIO()
    setup_logging(logging.INFO, stream=stream)
    reorder([Element("a", "A"), Element("b", "B")], [], DragEnd("a", "b"))
    assert "Moved" not in stream.getvalue()


def test_setup_logging_file(tmp_path):
    """A log file receives the same records as the console."""
    log_file = tmp_path / "editor.log"
    logger = setup_logging(logging.DEBUG, log_file=str(log_file), stream=io.StringIO())
    assert len(logger.handlers) == 2
    reorder([Element("a", "A"), Element("b", "B")], [], DragEnd("a", "b"))
    for handler in logger.handlers:
        handler.flush()
    assert "Moved a from 0 to 1" in log_file.read_text()


def test_reorder_logs_debug(caplog):
    """A drop without a target is logged."""
    with caplog.at_level(logging.DEBUG, logger="element_list_editor"):
        reorder([Element("a", "A")], [], DragEnd("a"))
    assert "has no target" in caplog.text
