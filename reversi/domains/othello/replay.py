# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Linear replay over a finished or in-progress move log.

ReplayCursor is the headless side of a replay panel: it walks a move log
backwards and forwards and rebuilds each position with replay_to(), never
from a live board.
"""

from collections.abc import Sequence

from pydantic import BaseModel, ConfigDict, Field

from reversi.domains.othello.engines.rules import replay_to
from reversi.domains.othello.models import GameState, Move, Player, to_notation


class HistoryEntry(BaseModel):
    """One line of a move history listing.

    Attributes:
        number: 1-based move number.
        player: Side that moved.
        notation: Cell in notation, columns a-h and rows 1-8.
        flipped_count: Discs flipped by the move.
        timestamp: Epoch milliseconds at which the move was played.
    """

    model_config = ConfigDict(frozen=True)

    number: int = Field(ge=1, description="1-based move number")
    player: Player = Field(description="Side that moved")
    notation: str = Field(description="Cell in notation")
    flipped_count: int = Field(description="Discs flipped")
    timestamp: int = Field(description="Epoch milliseconds")


class ReplayCursor:
    """Cursor over a move log.

    The index names the last applied move: -1 is the initial position and
    ``len(move_log) - 1`` the latest one.

    Example:
        cursor = ReplayCursor(state.move_log)
        cursor.go_to_start()
        while cursor.can_step_forward:
            cursor.step_forward()
            render(cursor.state)
    """

    def __init__(self, move_log: Sequence[Move], index: int | None = None) -> None:
        self._moves: tuple[Move, ...] = tuple(move_log)
        self._index = self.last_index if index is None else self._clamp(index)

    @property
    def moves(self) -> tuple[Move, ...]:
        """The move log being replayed."""
        return self._moves

    @property
    def index(self) -> int:
        """Index of the last applied move, -1 for the initial position."""
        return self._index

    @property
    def last_index(self) -> int:
        """Index of the final move in the log."""
        return len(self._moves) - 1

    @property
    def state(self) -> GameState:
        """Game state at the cursor."""
        return replay_to(self._moves, self._index)

    @property
    def can_step_forward(self) -> bool:
        return self._index < self.last_index

    @property
    def can_step_backward(self) -> bool:
        return self._index > -1

    def seek(self, index: int) -> GameState:
        """Move the cursor to ``index``, clamped to the log."""
        self._index = self._clamp(index)
        return self.state

    def step_forward(self) -> GameState:
        return self.seek(self._index + 1)

    def step_backward(self) -> GameState:
        return self.seek(self._index - 1)

    def go_to_start(self) -> GameState:
        return self.seek(-1)

    def go_to_end(self) -> GameState:
        return self.seek(self.last_index)

    def history(self) -> list[HistoryEntry]:
        """List the log as move history entries."""
        return [
            HistoryEntry(
                number=number,
                player=move.player,
                notation=to_notation(move.row, move.col),
                flipped_count=move.flipped_count,
                timestamp=move.timestamp,
            )
            for number, move in enumerate(self._moves, start=1)
        ]

    def _clamp(self, index: int) -> int:
        return max(-1, min(index, self.last_index))

    def __len__(self) -> int:
        return len(self._moves)

    def __repr__(self) -> str:
        return f"ReplayCursor(index={self._index}, moves={len(self._moves)})"
