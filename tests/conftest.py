# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Pytest configuration and shared fixtures.

This module provides fixtures used across the test suite:
- Settings tuned for fast tests (no thinking delay, shallow search)
- Board and state builders from compact row strings
"""

from collections.abc import Callable, Generator

import pytest

from reversi.core.config.settings import OthelloSettings, Settings, clear_settings_cache
from reversi.domains.othello.models import Board, GameState, Player

CELL_SYMBOLS = {
    "B": Player.BLACK,
    "W": Player.WHITE,
    ".": None,
}


# =============================================================================
# Marker Configuration
# =============================================================================


def pytest_configure(config: pytest.Config) -> None:
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "slow: mark test as slow running"
    )


# =============================================================================
# Settings Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def fresh_settings() -> Generator[None, None, None]:
    """Drop cached settings around every test."""
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def test_settings() -> Settings:
    """Provide settings with no thinking delay and a shallow search."""
    return Settings(
        environment="development",
        debug=True,
        log_level="DEBUG",
        othello=OthelloSettings(
            hard_search_depth=2,
            think_delay_ms=0,
            default_difficulty="medium",
        ),
    )


# =============================================================================
# Board Fixtures
# =============================================================================


def _parse_rows(rows: list[str]) -> Board:
    assert len(rows) == 8, "expected 8 rows"
    board = []
    for line in rows:
        cells = line.replace(" ", "")
        assert len(cells) == 8, f"expected 8 cells in {line!r}"
        board.append(tuple(CELL_SYMBOLS[symbol] for symbol in cells))
    return tuple(board)


@pytest.fixture
def make_board() -> Callable[[list[str]], Board]:
    """Build a board from 8 strings of 'B', 'W' and '.'."""
    return _parse_rows


@pytest.fixture
def make_state() -> Callable[..., GameState]:
    """Build a non-terminal state from 8 row strings and the side to move."""

    def _make(rows: list[str], current_player: Player = Player.BLACK) -> GameState:
        board = _parse_rows(rows)
        return GameState(
            board=board,
            current_player=current_player,
            black_score=sum(row.count(Player.BLACK) for row in board),
            white_score=sum(row.count(Player.WHITE) for row in board),
        )

    return _make
