# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Unit tests for datetime and logging utilities."""

import json
import logging
from collections.abc import Generator
from datetime import timezone

import pytest
import structlog

from reversi.core.config.settings import Settings
from reversi.utils.datetime import epoch_millis, utc_from_millis, utc_now
from reversi.utils.logging import (
    PACKAGE_LOGGER,
    bind_context,
    clear_context,
    get_logger,
    session_context,
    setup_logging,
)


class TestDatetime:
    """Tests for datetime helpers."""

    def test_utc_now_is_aware(self) -> None:
        assert utc_now().tzinfo is timezone.utc

    def test_from_millis(self) -> None:
        """Test epoch milliseconds convert to aware UTC datetimes."""
        moment = utc_from_millis(1_700_000_000_123)

        assert moment.tzinfo is timezone.utc
        assert moment.year == 2023
        assert moment.microsecond == 123_000

    def test_epoch_millis_tracks_clock(self) -> None:
        """Test the value matches the current time."""
        before = int(utc_now().timestamp() * 1000)

        assert epoch_millis() >= before

    def test_epoch_millis_not_before(self) -> None:
        """Test the lower bound wins over a clock that stepped back."""
        future = epoch_millis() + 60_000

        assert epoch_millis(not_before=future) == future
        assert epoch_millis(not_before=0) > 0


@pytest.fixture
def restore_logging() -> Generator[None, None, None]:
    """Undo setup_logging() changes to structlog and the package logger."""
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    saved = (package_logger.handlers[:], package_logger.level, package_logger.propagate)
    yield
    structlog.reset_defaults()
    clear_context()
    package_logger.handlers, level, package_logger.propagate = saved
    package_logger.setLevel(level)


@pytest.mark.usefixtures("restore_logging")
class TestLogging:
    """Tests for logging setup."""

    def test_setup_development(self) -> None:
        """Test development settings render console output."""
        setup_logging(Settings(environment="development", log_level="INFO"))

        package_logger = logging.getLogger(PACKAGE_LOGGER)
        assert package_logger.level == logging.INFO
        assert package_logger.propagate is False
        (handler,) = package_logger.handlers
        assert isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter)
        assert isinstance(handler.formatter.processors[-1], structlog.dev.ConsoleRenderer)

    def test_setup_production(self) -> None:
        """Test production settings render JSON."""
        setup_logging(Settings(environment="production", debug=False, log_level="WARNING"))

        (handler,) = logging.getLogger(PACKAGE_LOGGER).handlers
        assert isinstance(handler.formatter.processors[-1], structlog.processors.JSONRenderer)

    def test_stdlib_engine_lines_are_structured(self, capsys) -> None:
        """Test %-style engine logs come out as JSON with the bound session."""
        setup_logging(Settings(environment="production", debug=False, log_level="DEBUG"))
        engine_logger = logging.getLogger("reversi.domains.othello.engines.selector")

        with session_context("abc-123"):
            engine_logger.debug("Selected %s move for %s", "hard", "black")

        record = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
        assert record["event"] == "Selected hard move for black"
        assert record["session_id"] == "abc-123"
        assert record["level"] == "debug"
        assert record["logger"] == "reversi.domains.othello.engines.selector"

    def test_structlog_events_share_the_handler(self, capsys) -> None:
        """Test key-value events render through the same JSON handler."""
        setup_logging(Settings(environment="production", debug=False, log_level="INFO"))

        get_logger("reversi.domains.othello.service").info("move_played", move="d3", flipped=1)

        record = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
        assert record["event"] == "move_played"
        assert record["move"] == "d3"
        assert record["flipped"] == 1

    def test_level_filters_events(self, capsys) -> None:
        """Test events below the configured level are dropped."""
        setup_logging(Settings(environment="production", debug=False, log_level="WARNING"))

        get_logger("reversi.domains.othello.service").info("game_started")
        logging.getLogger("reversi.domains.othello.engines.othello").info("No legal move")

        assert capsys.readouterr().out == ""


class TestContext:
    """Tests for context binding."""

    def test_bind_and_clear(self) -> None:
        """Test context variables are bound and cleared."""
        bind_context(session_id="abc-123")
        assert structlog.contextvars.get_contextvars() == {"session_id": "abc-123"}

        clear_context()
        assert structlog.contextvars.get_contextvars() == {}

    def test_session_context_restores_previous(self) -> None:
        """Test the session id is only bound inside the block."""
        with session_context("outer"):
            with session_context("inner"):
                assert structlog.contextvars.get_contextvars() == {"session_id": "inner"}
            assert structlog.contextvars.get_contextvars() == {"session_id": "outer"}

        assert structlog.contextvars.get_contextvars() == {}
