# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Othello engines module.

This module provides:
- rules: Capture resolution, legal moves, turn transitions and replay
- evaluation: Static board evaluation
- search: Minimax with alpha-beta pruning
- selector: Difficulty-tiered AI move selection
- OthelloEngine: Stateless facade with notation and display helpers

Usage:
    from reversi.domains.othello.engines import OthelloEngine

    engine = OthelloEngine()
    state = engine.initial_state()
    state = engine.apply_move(state, 2, 3)
"""

from reversi.domains.othello.engines.evaluation import evaluate_position
from reversi.domains.othello.engines.othello import OthelloEngine
from reversi.domains.othello.engines.rules import (
    DIRECTIONS,
    apply_move,
    capture_set,
    count_pieces,
    initial_state,
    legal_moves,
    replay_to,
)
from reversi.domains.othello.engines.search import minimax
from reversi.domains.othello.engines.selector import select_ai_move

__all__ = [
    # Rules
    "DIRECTIONS",
    "initial_state",
    "capture_set",
    "legal_moves",
    "apply_move",
    "replay_to",
    "count_pieces",
    # AI
    "evaluate_position",
    "minimax",
    "select_ai_move",
    # Facade
    "OthelloEngine",
]
