# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Exceptions for the Othello domain.

The rules engine never raises for expected game conditions: an illegal
placement yields an empty capture set or an unchanged state. These errors
cover malformed input at the edges (stored states, move notation) and the
session service, which surfaces rejected moves explicitly.
"""

from typing import Any


class EngineError(Exception):
    """Base exception for engine errors.

    Attributes:
        message: Error description.
        details: Additional error details.
    """

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class InvalidPositionError(EngineError):
    """Raised when a stored game state is invalid or cannot be parsed."""

    pass


class InvalidMoveError(EngineError):
    """Raised when move notation cannot be parsed."""

    pass


class GameServiceError(Exception):
    """Base exception for game service errors."""

    pass


class GameNotFoundError(GameServiceError):
    """Raised when a game session is not found."""

    pass


class GameOverError(GameServiceError):
    """Raised when trying to play in a finished game."""

    pass


class NotPlayersTurnError(GameServiceError):
    """Raised when a human move is submitted during the AI's turn."""

    pass


class IllegalMoveError(GameServiceError):
    """Raised when a placement captures nothing or targets an occupied cell."""

    pass
