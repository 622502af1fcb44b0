"""Tests for structured JSON logging."""

import json
import logging
import sys

import pytest

from wordfilter.logging_config import StructuredFormatter, configure_logging


@pytest.mark.unit
class TestStructuredFormatter:
    def test_extra_fields_are_included(self):
        logger = logging.getLogger("wordfilter.test")
        record = logger.makeRecord(
            logger.name,
            logging.INFO,
            __file__,
            10,
            "Filtering request completed",
            None,
            None,
            extra={"match_count": 2, "text_length": 40},
        )

        payload = json.loads(StructuredFormatter().format(record))

        assert payload["message"] == "Filtering request completed"
        assert payload["level"] == "INFO"
        assert payload["match_count"] == 2
        assert payload["text_length"] == 40
        assert "args" not in payload

    def test_exception_is_formatted(self):
        try:
            raise ValueError("broken")
        except ValueError:
            record = logging.LogRecord(
                "wordfilter", logging.ERROR, __file__, 1, "failed", None, None
            )
            record.exc_info = sys.exc_info()

        payload = json.loads(StructuredFormatter().format(record))

        assert "ValueError: broken" in payload["exception"]


def test_configure_logging_installs_single_handler():
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level

    try:
        configure_logging("warning")

        assert root.level == logging.WARNING
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, StructuredFormatter)
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)


def test_repeated_configuration_does_not_stack_handlers():
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level

    try:
        configure_logging("INFO")
        configure_logging("debug")

        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert logging.getLogger("streamlit").level == logging.WARNING
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)


def test_cjk_context_is_not_escaped():
    record = logging.getLogger("wordfilter.test").makeRecord(
        "wordfilter.test", logging.WARNING, __file__, 1, "unmatchable", None, None,
        extra={"keyword": "赌 博"},
    )

    assert '"keyword": "赌 博"' in StructuredFormatter().format(record)
