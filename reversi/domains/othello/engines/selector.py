# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Difficulty-tiered AI move selection.

- Easy picks a legal move uniformly at random.
- Medium takes a corner if it can, otherwise the safe (non-danger) move
  flipping the most discs.
- Hard takes a corner if it can, otherwise searches every reply with
  minimax and plays the best.

Ties always keep the first move in row-major order, so medium and hard are
deterministic.
"""

import logging
import random

from reversi.domains.othello.engines.evaluation import CORNER_POSITIONS, DANGER_POSITIONS
from reversi.domains.othello.engines.rules import capture_set, legal_moves, place
from reversi.domains.othello.engines.search import INF, minimax
from reversi.domains.othello.models import Board, Coordinate, Difficulty, GameState, Player

logger = logging.getLogger(__name__)

# Reference search depth of the hard tier
DEFAULT_SEARCH_DEPTH = 4


def first_corner(moves: list[Coordinate]) -> Coordinate | None:
    """Get the first corner among ``moves``, if any."""
    for move in moves:
        if move in CORNER_POSITIONS:
            return move
    return None


def get_easy_move(
    moves: list[Coordinate],
    rng: random.Random | None = None,
) -> Coordinate:
    """Pick a legal move uniformly at random."""
    return (rng or random).choice(moves)


def get_medium_move(board: Board, moves: list[Coordinate], player: Player) -> Coordinate:
    """Pick a corner, else the safe move with the most flips."""
    corner = first_corner(moves)
    if corner is not None:
        return corner

    safe_moves = [move for move in moves if move not in DANGER_POSITIONS]
    if not safe_moves:
        return moves[0]

    best_move = safe_moves[0]
    max_flips = len(capture_set(board, *best_move, player))
    for row, col in safe_moves[1:]:
        flips = len(capture_set(board, row, col, player))
        if flips > max_flips:
            max_flips = flips
            best_move = (row, col)
    return best_move


def get_hard_move(
    board: Board,
    moves: list[Coordinate],
    player: Player,
    depth: int,
) -> Coordinate:
    """Pick a corner, else the move with the best minimax score.

    Each candidate is played here and the search starts from the
    opponent's reply with a fresh window.
    """
    corner = first_corner(moves)
    if corner is not None:
        return corner

    best_move = moves[0]
    best_score = -INF
    for row, col in moves:
        score = minimax(place(board, row, col, player), depth, -INF, INF, False, player)
        if score > best_score:
            best_score = score
            best_move = (row, col)
    return best_move


def select_ai_move(
    state: GameState,
    difficulty: Difficulty,
    *,
    rng: random.Random | None = None,
    depth: int = DEFAULT_SEARCH_DEPTH,
) -> Coordinate | None:
    """Choose a move for the side to move.

    Args:
        state: Current game state.
        difficulty: Strategy tier.
        rng: Random source for the easy tier. Defaults to the random module.
        depth: Search depth for the hard tier.

    Returns:
        The chosen (row, col), or None if the side to move has no legal
        move (a pass) or the game is over.
    """
    if state.is_over:
        return None

    difficulty = Difficulty(difficulty)
    player = state.current_player
    moves = legal_moves(state.board, player)
    if not moves:
        return None

    if difficulty is Difficulty.EASY:
        move = get_easy_move(moves, rng)
    elif difficulty is Difficulty.MEDIUM:
        move = get_medium_move(state.board, moves, player)
    else:
        move = get_hard_move(state.board, moves, player, depth)

    logger.debug(
        "Selected %s move for %s: %s (%d candidates)",
        difficulty.value,
        player.value,
        move,
        len(moves),
    )
    return move
