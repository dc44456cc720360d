"""Tests for log output configuration."""

from __future__ import annotations

import io
import json
import logging
from collections.abc import Iterator

import pytest

from tminus.config.logging import PACKAGE_LOGGER, configure_logging


@pytest.fixture(autouse=True)
def _restore_package_logger() -> Iterator[None]:
    logger = logging.getLogger(PACKAGE_LOGGER)
    handlers, level, propagate = logger.handlers[:], logger.level, logger.propagate
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate


class TestConfigureLogging:
    def test_debug_hidden_by_default(self) -> None:
        stream = io.StringIO()
        configure_logging(stream=stream)
        logging.getLogger("tminus.domain.codec").debug("dropped pair")
        assert stream.getvalue() == ""

    def test_verbose_shows_package_debug(self) -> None:
        stream = io.StringIO()
        configure_logging(verbose=True, stream=stream)
        logging.getLogger("tminus.domain.codec").debug("dropped pair")
        assert "dropped pair" in stream.getvalue()

    def test_other_loggers_untouched(self) -> None:
        stream = io.StringIO()
        configure_logging(verbose=True, stream=stream)
        logging.getLogger("somelib").warning("noise")
        assert stream.getvalue() == ""

    def test_json_lines(self) -> None:
        stream = io.StringIO()
        configure_logging(log_json=True, stream=stream)
        logging.getLogger("tminus.runtime.host").warning("careful")
        record = json.loads(stream.getvalue().strip())
        assert record["event"] == "careful"
        assert record["level"] == "warning"
        assert record["logger"] == "tminus.runtime.host"
        assert "timestamp" in record

    def test_extra_becomes_fields(self) -> None:
        stream = io.StringIO()
        configure_logging(verbose=True, log_json=True, stream=stream)
        logging.getLogger("tminus.domain.codec").debug(
            "Dropping query pair", extra={"pair": "a=bad", "reason": "missing '@'"}
        )
        record = json.loads(stream.getvalue().strip())
        assert record["pair"] == "a=bad"
        assert record["reason"] == "missing '@'"

    def test_reconfigure_replaces_handler(self) -> None:
        configure_logging(stream=io.StringIO())
        configure_logging(stream=io.StringIO())
        assert len(logging.getLogger(PACKAGE_LOGGER).handlers) == 1
