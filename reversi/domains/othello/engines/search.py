# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Depth-limited minimax with alpha-beta pruning.

The search runs for a fixed root player. Maximizing nodes are the root
player's turns and minimizing nodes the opponent's. Moves are tried in the
row-major order produced by legal_moves(); there is no other ordering.
"""

from reversi.domains.othello.engines.evaluation import evaluate_position
from reversi.domains.othello.engines.rules import count_pieces, has_legal_move, legal_moves, place
from reversi.domains.othello.models import Board, Player

INF = float("inf")

# Forced wins and losses must outrank any positional score
TERMINAL_WEIGHT = 1000


def terminal_score(board: Board, player: Player) -> int:
    """Score a finished board by disc difference for ``player``."""
    black, white = count_pieces(board)
    diff = black - white if player is Player.BLACK else white - black
    return diff * TERMINAL_WEIGHT


def minimax(
    board: Board,
    depth: int,
    alpha: float,
    beta: float,
    maximizing: bool,
    player: Player,
) -> float:
    """Minimax algorithm with alpha-beta pruning.

    A side without legal moves passes: the search recurses one ply deeper
    with the other side to move. If the other side cannot move either, the
    board is terminal and scored by disc difference.

    Args:
        board: Position to search.
        depth: Remaining plies. At 0 the static evaluation is returned.
        alpha: Best score the maximizer can already guarantee.
        beta: Best score the minimizer can already guarantee.
        maximizing: Whether the root player is to move.
        player: Root player the score is measured for.

    Returns:
        Score of the position for ``player``.
    """
    if depth == 0:
        return evaluate_position(board, player)

    opponent = player.opponent
    current = player if maximizing else opponent
    moves = legal_moves(board, current)

    if not moves:
        if not has_legal_move(board, current.opponent):
            return terminal_score(board, player)
        return minimax(board, depth - 1, alpha, beta, not maximizing, player)

    if maximizing:
        best_score = -INF
        for row, col in moves:
            score = minimax(
                place(board, row, col, current), depth - 1, alpha, beta, False, player
            )
            best_score = max(best_score, score)
            alpha = max(alpha, score)
            if beta <= alpha:
                break
        return best_score

    best_score = INF
    for row, col in moves:
        score = minimax(
            place(board, row, col, current), depth - 1, alpha, beta, True, player
        )
        best_score = min(best_score, score)
        beta = min(beta, score)
        if beta <= alpha:
            break
    return best_score
