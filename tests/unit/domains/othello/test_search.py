# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Unit tests for minimax with alpha-beta pruning.

The pruned search is checked against a plain minimax that visits every
node, over positions taken from a deterministic game.
"""

import pytest

from reversi.domains.othello.engines.evaluation import evaluate_position
from reversi.domains.othello.engines.rules import apply_move, initial_state, legal_moves, place
from reversi.domains.othello.engines.search import INF, TERMINAL_WEIGHT, minimax, terminal_score
from reversi.domains.othello.engines.selector import select_ai_move
from reversi.domains.othello.models import Board, Difficulty, Player


def full_minimax(board: Board, depth: int, maximizing: bool, player: Player) -> float:
    """Reference minimax without pruning."""
    if depth == 0:
        return evaluate_position(board, player)

    current = player if maximizing else player.opponent
    moves = legal_moves(board, current)
    if not moves:
        if not legal_moves(board, current.opponent):
            return terminal_score(board, player)
        return full_minimax(board, depth - 1, not maximizing, player)

    scores = [
        full_minimax(place(board, r, c, current), depth - 1, not maximizing, player)
        for r, c in moves
    ]
    return max(scores) if maximizing else min(scores)


@pytest.fixture(scope="module")
def game_positions() -> list[Board]:
    """Boards from a medium-vs-medium game, sampled every few plies."""
    state = initial_state()
    boards = []
    while not state.is_over:
        if len(state.move_log) % 12 == 0:
            boards.append(state.board)
        state = apply_move(state, *select_ai_move(state, Difficulty.MEDIUM))
    boards.append(state.board)
    return boards


class TestTerminalScore:
    """Tests for terminal scoring."""

    def test_disc_difference_scaled(self, make_board) -> None:
        """Test terminal boards score disc difference times 1000."""
        board = make_board([
            "BB......",
            "........",
            "........",
            "........",
            "........",
            "........",
            "........",
            ".......W",
        ])

        assert terminal_score(board, Player.BLACK) == TERMINAL_WEIGHT
        assert terminal_score(board, Player.WHITE) == -TERMINAL_WEIGHT


class TestMinimax:
    """Tests for minimax()."""

    def test_depth_zero_is_static_evaluation(self) -> None:
        """Test leaves return the evaluation for the root player."""
        board = apply_move(initial_state(), 2, 3).board

        assert minimax(board, 0, -INF, INF, True, Player.BLACK) == evaluate_position(
            board, Player.BLACK
        )
        assert minimax(board, 0, -INF, INF, False, Player.WHITE) == evaluate_position(
            board, Player.WHITE
        )

    def test_true_terminal_node(self, make_board) -> None:
        """Test a node where neither side can move scores by discs."""
        board = make_board([
            "BB......",
            "........",
            "........",
            "........",
            "........",
            "........",
            "........",
            ".......W",
        ])

        assert minimax(board, 3, -INF, INF, True, Player.BLACK) == 1000
        assert minimax(board, 3, -INF, INF, False, Player.WHITE) == -1000

    def test_pass_recurses_with_other_side(self, make_board) -> None:
        """Test a stuck mover hands the node to the other side one ply deeper."""
        board = make_board([
            "BBB.....",
            "........",
            "........",
            "........",
            "........",
            "........",
            ".......W",
            ".......B",
        ])

        # White (minimizing) is stuck, Black can move: depth 1 -> leaf for Black
        assert legal_moves(board, Player.WHITE) == []
        assert minimax(board, 1, -INF, INF, False, Player.BLACK) == evaluate_position(
            board, Player.BLACK
        )

    def test_pass_then_search(self, make_board) -> None:
        """Test the pass costs one ply and the other side then searches."""
        board = make_board([
            "BBB.....",
            "........",
            "........",
            "........",
            "........",
            "........",
            ".......W",
            ".......B",
        ])

        expected = evaluate_position(place(board, 5, 7, Player.BLACK), Player.BLACK)

        assert minimax(board, 2, -INF, INF, False, Player.BLACK) == expected

    @pytest.mark.parametrize("depth", [1, 2])
    def test_pruning_matches_full_search(self, game_positions, depth: int) -> None:
        """Test alpha-beta returns the same value as unpruned minimax."""
        for board in game_positions:
            for player in (Player.BLACK, Player.WHITE):
                for maximizing in (True, False):
                    assert minimax(
                        board, depth, -INF, INF, maximizing, player
                    ) == full_minimax(board, depth, maximizing, player)

    @pytest.mark.slow
    def test_pruning_matches_full_search_depth_three(self, game_positions) -> None:
        """Test the equivalence one ply deeper on a few midgame boards."""
        for board in game_positions[1:4]:
            assert minimax(board, 3, -INF, INF, True, Player.BLACK) == full_minimax(
                board, 3, True, Player.BLACK
            )

    def test_does_not_mutate_board(self) -> None:
        """Test the search leaves its input board untouched."""
        board = apply_move(initial_state(), 2, 3).board
        snapshot = tuple(tuple(row) for row in board)

        minimax(board, 3, -INF, INF, False, Player.BLACK)

        assert board == snapshot
