# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Othello engine facade.

This module provides an Othello engine that:
- Exposes the pure rules (capture sets, legal moves, turns, replay)
- Accepts and produces moves in notation ("d3": column d, row 3)
- Wraps the difficulty-tiered AI with timing and move quality

The engine holds no game state - all game state is passed via GameState
values - so one instance can be shared across any number of games.
"""

import logging
import random
import time
from collections.abc import Sequence
from typing import Any

from reversi.core.config.settings import Settings, get_settings
from reversi.domains.othello.engines import rules
from reversi.domains.othello.engines.evaluation import (
    CORNER_POSITIONS,
    DANGER_POSITIONS,
    evaluate_position,
)
from reversi.domains.othello.engines.selector import select_ai_move
from reversi.domains.othello.errors import InvalidMoveError
from reversi.domains.othello.models import (
    BOARD_SIZE,
    AIMove,
    Coordinate,
    Difficulty,
    GameState,
    Move,
    MoveValidation,
    Winner,
    to_notation,
)

logger = logging.getLogger(__name__)


class OthelloEngine:
    """Othello engine using the rules core and the minimax AI.

    Example:
        engine = OthelloEngine()
        state = engine.initial_state()
        validation = engine.validate_move(state, "d3")
        ai_move = engine.get_ai_move(validation.new_state, Difficulty.HARD)
    """

    def __init__(self, settings: Settings | None = None) -> None:
        self._settings = settings or get_settings()

    @property
    def name(self) -> str:
        """Get the engine name."""
        return "Minimax Othello Engine"

    @property
    def search_depth(self) -> int:
        """Minimax depth used by the hard tier."""
        return self._settings.othello.hard_search_depth

    def initial_state(self) -> GameState:
        """Get the starting position (4 centre discs, Black to move)."""
        return rules.initial_state()

    def legal_moves(self, state: GameState) -> list[Coordinate]:
        """Get the legal moves of the side to move, row-major."""
        if state.is_over:
            return []
        return rules.legal_moves(state.board, state.current_player)

    def capture_set(self, state: GameState, row: int, col: int) -> frozenset[Coordinate]:
        """Get the discs the side to move would flip at (row, col)."""
        return rules.capture_set(state.board, row, col, state.current_player)

    def apply_move(self, state: GameState, row: int, col: int) -> GameState:
        """Apply a placement; illegal placements return ``state`` unchanged."""
        return rules.apply_move(state, row, col)

    def replay_to(self, move_log: Sequence[Move], index: int) -> GameState:
        """Rebuild the state after ``move_log[index]``."""
        return rules.replay_to(move_log, index)

    def select_move(
        self,
        state: GameState,
        difficulty: Difficulty,
        rng: random.Random | None = None,
    ) -> Coordinate | None:
        """Choose an AI move, or None when the side to move must pass."""
        return select_ai_move(state, difficulty, rng=rng, depth=self.search_depth)

    def validate_move(self, state: GameState, notation: str) -> MoveValidation:
        """Validate a move given in notation.

        Unlike apply_move(), this reports why a move was rejected.

        Args:
            state: Current game state.
            notation: Move to validate (e.g., "d3").

        Returns:
            MoveValidation with the new state if valid.
        """
        if state.is_over:
            return MoveValidation(
                is_valid=False,
                error_message="The game is over.",
            )

        try:
            row, col = self.parse_notation(notation)
        except InvalidMoveError as e:
            return MoveValidation(is_valid=False, error_message=e.message)

        if state.board[row][col] is not None:
            return MoveValidation(
                is_valid=False,
                error_message=f"Position {notation} is already occupied.",
            )

        flips = self.capture_set(state, row, col)
        if not flips:
            return MoveValidation(
                is_valid=False,
                error_message=f"Move {notation} doesn't flip any pieces.",
            )

        return MoveValidation(
            is_valid=True,
            new_state=rules.apply_move(state, row, col),
            flipped=len(flips),
        )

    def get_ai_move(
        self,
        state: GameState,
        difficulty: Difficulty,
        rng: random.Random | None = None,
    ) -> AIMove | None:
        """Get the AI's move with evaluation and timing.

        Returns:
            AIMove, or None when the side to move must pass.
        """
        started = time.perf_counter()
        choice = select_ai_move(state, difficulty, rng=rng, depth=self.search_depth)
        elapsed_ms = int((time.perf_counter() - started) * 1000)

        if choice is None:
            logger.info("No legal move for %s, passing", state.current_player.value)
            return None

        row, col = choice
        player = state.current_player
        evaluation = evaluate_position(rules.place(state.board, row, col, player), player)

        move_quality = "normal"
        if choice in CORNER_POSITIONS:
            move_quality = "excellent"
        elif choice in DANGER_POSITIONS:
            move_quality = "risky"

        return AIMove(
            row=row,
            col=col,
            notation=self.to_notation(row, col),
            difficulty=Difficulty(difficulty),
            evaluation=evaluation,
            thinking_time_ms=elapsed_ms,
            move_quality=move_quality,
        )

    def is_game_over(self, state: GameState) -> tuple[bool, Winner | None]:
        """Check if the game is over.

        Returns:
            Tuple of (is_over, winner).
        """
        return state.is_over, state.winner

    def state_to_display(self, state: GameState) -> dict[str, Any]:
        """Convert a state to display format for a frontend."""
        display_grid = [
            [cell.value if cell is not None else None for cell in row]
            for row in state.board
        ]

        return {
            "grid": display_grid,
            "size": BOARD_SIZE,
            "current_player": state.current_player.value,
            "black_count": state.black_score,
            "white_count": state.white_score,
            "legal_moves": [self.to_notation(r, c) for r, c in self.legal_moves(state)],
            "is_over": state.is_over,
            "winner": state.winner.value if state.winner is not None else None,
            "move_count": len(state.move_log),
        }

    def parse_notation(self, notation: str) -> Coordinate:
        """Parse move notation (e.g., 'd3') to (row, col).

        Raises:
            InvalidMoveError: If the notation is malformed or off the board.
        """
        text = notation.lower().strip()
        if len(text) != 2:
            raise InvalidMoveError(
                message=f"Invalid notation: {notation}",
                details={"notation": notation},
            )

        col = ord(text[0]) - ord("a")
        if not 0 <= col < BOARD_SIZE:
            raise InvalidMoveError(
                message=f"Column out of range: {text[0]}",
                details={"notation": notation},
            )

        if text[1] not in "12345678":
            raise InvalidMoveError(
                message=f"Row out of range: {text[1]}",
                details={"notation": notation},
            )

        return int(text[1]) - 1, col

    def to_notation(self, row: int, col: int) -> str:
        """Convert (row, col) to notation (e.g., 'd3')."""
        return to_notation(row, col)

    def __repr__(self) -> str:
        """Return string representation."""
        return f"{self.__class__.__name__}(name={self.name!r})"
