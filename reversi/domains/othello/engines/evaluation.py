# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Static board evaluation for the AI opponent.

Corners can never be flipped back and are worth the most. The three cells
flanking each corner are danger cells: occupying one tends to hand the
opponent the corner. Other edge cells are stable-ish and mildly valuable.
A mobility term rewards having more options than the opponent.
"""

from reversi.domains.othello.engines.rules import mobility
from reversi.domains.othello.models import BOARD_SIZE, Board, Coordinate, Player

CORNER_POSITIONS: frozenset[Coordinate] = frozenset({(0, 0), (0, 7), (7, 0), (7, 7)})

DANGER_POSITIONS: frozenset[Coordinate] = frozenset({
    (0, 1), (1, 0), (1, 1),
    (0, 6), (1, 6), (1, 7),
    (6, 0), (6, 1), (7, 1),
    (6, 6), (6, 7), (7, 6),
})

EDGE_POSITIONS: frozenset[Coordinate] = frozenset(
    (row, col)
    for row in range(BOARD_SIZE)
    for col in range(BOARD_SIZE)
    if row in (0, BOARD_SIZE - 1) or col in (0, BOARD_SIZE - 1)
) - CORNER_POSITIONS

CORNER_WEIGHT = 100
DANGER_WEIGHT = -20
EDGE_WEIGHT = 10
INTERIOR_WEIGHT = 1
MOBILITY_WEIGHT = 5


def cell_weight(row: int, col: int) -> int:
    """Get the weight of a cell for its owner.

    Corner beats danger, danger beats edge, so the danger cells on the edge
    are penalised rather than rewarded.
    """
    if (row, col) in CORNER_POSITIONS:
        return CORNER_WEIGHT
    if (row, col) in DANGER_POSITIONS:
        return DANGER_WEIGHT
    if (row, col) in EDGE_POSITIONS:
        return EDGE_WEIGHT
    return INTERIOR_WEIGHT


# Position weights, precomputed per cell
POSITION_WEIGHTS: tuple[tuple[int, ...], ...] = tuple(
    tuple(cell_weight(row, col) for col in range(BOARD_SIZE))
    for row in range(BOARD_SIZE)
)


def evaluate_position(board: Board, player: Player) -> int:
    """Score a board from ``player``'s point of view.

    Args:
        board: Grid to score.
        player: Side whose advantage is measured.

    Returns:
        Positional score plus 5 per legal move more than the opponent.
        Higher is better for ``player``; the score for the opponent is the
        exact negation.
    """
    opponent = player.opponent
    score = 0

    for row in range(BOARD_SIZE):
        for col in range(BOARD_SIZE):
            cell = board[row][col]
            if cell is player:
                score += POSITION_WEIGHTS[row][col]
            elif cell is opponent:
                score -= POSITION_WEIGHTS[row][col]

    score += (mobility(board, player) - mobility(board, opponent)) * MOBILITY_WEIGHT

    return score
