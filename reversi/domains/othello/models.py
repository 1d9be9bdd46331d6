# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Data models for the Othello domain.

This module defines Pydantic models and enums for:
- Players, winners and AI difficulty tiers
- Board and game state representation
- Move log entries
- Move validation and AI responses

All models are frozen: every transition produces a new value, so a state
held by a move history or a replay can never change under an alias.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from reversi.core.enums import Difficulty
from reversi.domains.othello.errors import InvalidPositionError

# Board dimensions
BOARD_SIZE = 8


class Player(str, Enum):
    """The two sides. Black always moves first."""

    BLACK = "black"
    WHITE = "white"

    @property
    def opponent(self) -> "Player":
        """Get the other side."""
        return Player.WHITE if self is Player.BLACK else Player.BLACK


class Winner(str, Enum):
    """Outcome of a finished game."""

    BLACK = "black"
    WHITE = "white"
    TIE = "tie"


# A cell holds a disc of one player or None when empty
Cell = Player | None
Board = tuple[tuple[Cell, ...], ...]
Coordinate = tuple[int, int]


def to_notation(row: int, col: int) -> str:
    """Convert (row, col) to notation: column letter a-h, row number 1-8."""
    return f"{chr(ord('a') + col)}{row + 1}"


class Move(BaseModel):
    """A placement recorded in the move log.

    Only ``row`` and ``col`` drive replay. ``player``, ``flipped_count`` and
    ``timestamp`` describe the move for history views.

    Attributes:
        row: Board row, 0 at the top.
        col: Board column, 0 at the left.
        player: Side that placed the disc.
        flipped_count: Number of opponent discs flipped by the placement.
        timestamp: Epoch milliseconds at which the move was applied.
    """

    model_config = ConfigDict(frozen=True)

    row: int = Field(ge=0, lt=BOARD_SIZE, description="Board row")
    col: int = Field(ge=0, lt=BOARD_SIZE, description="Board column")
    player: Player = Field(description="Side that moved")
    flipped_count: int = Field(ge=0, description="Discs flipped by the move")
    timestamp: int = Field(ge=0, description="Epoch milliseconds")


class GameState(BaseModel):
    """Immutable snapshot of a game.

    Attributes:
        board: 8x8 grid indexed as ``board[row][col]``.
        current_player: Side to move. Once the game is over this is the
            opponent of the last mover and carries no meaning.
        black_score: Number of black discs on the board.
        white_score: Number of white discs on the board.
        is_over: Whether neither side has a legal move.
        winner: Outcome, set exactly when the game is over.
        move_log: Placements applied so far, in order. Passes are not logged.
    """

    model_config = ConfigDict(frozen=True)

    board: Board = Field(description="8x8 grid of cells")
    current_player: Player = Field(default=Player.BLACK, description="Side to move")
    black_score: int = Field(ge=0, description="Black disc count")
    white_score: int = Field(ge=0, description="White disc count")
    is_over: bool = Field(default=False, description="Whether the game ended")
    winner: Winner | None = Field(default=None, description="Outcome if over")
    move_log: tuple[Move, ...] = Field(
        default_factory=tuple,
        description="Placements applied in order",
    )

    @model_validator(mode="after")
    def validate_invariants(self) -> "GameState":
        """Check board shape, disc counts and the terminal flag.

        Raises:
            ValueError: If any invariant does not hold.
        """
        if len(self.board) != BOARD_SIZE or any(
            len(row) != BOARD_SIZE for row in self.board
        ):
            raise ValueError(f"Board must be {BOARD_SIZE}x{BOARD_SIZE}")

        black = sum(row.count(Player.BLACK) for row in self.board)
        white = sum(row.count(Player.WHITE) for row in self.board)
        if self.black_score != black or self.white_score != white:
            raise ValueError(
                f"Scores {self.black_score}/{self.white_score} do not match "
                f"board counts {black}/{white}"
            )

        if self.is_over != (self.winner is not None):
            raise ValueError("winner must be set exactly when the game is over")

        return self

    @property
    def empty_count(self) -> int:
        """Number of empty cells."""
        return BOARD_SIZE * BOARD_SIZE - self.black_score - self.white_score

    def to_storage_dict(self) -> dict[str, Any]:
        """Convert to a JSON-compatible dictionary for storage.

        Returns:
            Dictionary representation suitable for JSON storage.
        """
        return self.model_dump(mode="json")

    @classmethod
    def from_storage_dict(cls, data: dict[str, Any]) -> "GameState":
        """Create from a storage dictionary.

        Args:
            data: Dictionary produced by to_storage_dict().

        Returns:
            GameState instance.

        Raises:
            InvalidPositionError: If the data does not describe a valid state.
        """
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise InvalidPositionError(
                message=f"Invalid stored game state: {e.error_count()} error(s)",
                details={"errors": e.errors(include_url=False)},
            ) from e


class MoveValidation(BaseModel):
    """Result of validating a move given in notation.

    Attributes:
        is_valid: Whether the move is legal.
        new_state: State after the move (if valid).
        flipped: Number of discs the move flips (if valid).
        error_message: Explanation if the move is invalid.
    """

    is_valid: bool = Field(description="Whether the move is legal")
    new_state: GameState | None = Field(
        default=None,
        description="State after the move",
    )
    flipped: int = Field(default=0, description="Discs flipped by the move")
    error_message: str | None = Field(
        default=None,
        description="Error message if move is invalid",
    )


class AIMove(BaseModel):
    """AI opponent's move response.

    Attributes:
        row: Chosen row.
        col: Chosen column.
        notation: Chosen cell in notation (e.g. "d3").
        difficulty: Tier that produced the move.
        evaluation: Static evaluation of the resulting board for the mover.
        thinking_time_ms: Time spent selecting the move.
        move_quality: "excellent" for corners, "risky" for danger cells,
            "normal" otherwise.
    """

    row: int = Field(description="Chosen row")
    col: int = Field(description="Chosen column")
    notation: str = Field(description="Move in notation")
    difficulty: Difficulty = Field(description="Tier that produced the move")
    evaluation: int = Field(
        default=0,
        description="Evaluation of the resulting board for the mover",
    )
    thinking_time_ms: int = Field(
        default=0,
        description="Time spent calculating in milliseconds",
    )
    move_quality: str = Field(
        default="normal",
        description="Quality category of the move",
    )
