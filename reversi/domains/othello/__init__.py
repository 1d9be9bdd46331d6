# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Othello domain.

This domain provides:
- Board, move and game state models
- The rules engine (captures, legal moves, turns, passes, game end)
- Replay reconstruction from a move log
- An AI opponent with easy, medium and hard tiers
- An in-memory game session service

Usage:
    from reversi.domains.othello import Difficulty, initial_state, apply_move, select_ai_move

    state = initial_state()
    state = apply_move(state, 2, 3)
    reply = select_ai_move(state, Difficulty.HARD)
"""

from reversi.domains.othello.engines import (
    OthelloEngine,
    apply_move,
    capture_set,
    evaluate_position,
    initial_state,
    legal_moves,
    replay_to,
    select_ai_move,
)
from reversi.domains.othello.models import (
    AIMove,
    Board,
    Difficulty,
    GameState,
    Move,
    MoveValidation,
    Player,
    Winner,
)
from reversi.domains.othello.replay import HistoryEntry, ReplayCursor
from reversi.domains.othello.service import GameSession, OthelloGameService

__all__ = [
    # Enums
    "Player",
    "Winner",
    "Difficulty",
    # Models
    "Board",
    "Move",
    "GameState",
    "MoveValidation",
    "AIMove",
    "HistoryEntry",
    "GameSession",
    # Core operations
    "initial_state",
    "legal_moves",
    "capture_set",
    "apply_move",
    "replay_to",
    "evaluate_position",
    "select_ai_move",
    # Services
    "OthelloEngine",
    "ReplayCursor",
    "OthelloGameService",
]
