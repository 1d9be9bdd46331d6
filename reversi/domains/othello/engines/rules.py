# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Othello rules: capture resolution, legal moves, turns and replay.

Every function here is pure. Boards are tuples of tuples and states are
frozen models, so each placement yields a new grid and a new GameState.

Illegal input is never an exception: capture_set() returns an empty set
and apply_move() returns the state it was given. Callers tell legal from
illegal by checking legal_moves() first or by comparing the returned state
with the input.
"""

from collections.abc import Sequence

from reversi.domains.othello.models import (
    BOARD_SIZE,
    Board,
    Coordinate,
    GameState,
    Move,
    Player,
    Winner,
)
from reversi.utils.datetime import epoch_millis

# All eight directions as (row step, col step)
DIRECTIONS: tuple[Coordinate, ...] = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1),
)


def in_bounds(row: int, col: int) -> bool:
    """Check that a coordinate lies on the 8x8 board."""
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def create_initial_board() -> Board:
    """Build the starting grid with the four centre discs."""
    grid: list[list[Player | None]] = [
        [None] * BOARD_SIZE for _ in range(BOARD_SIZE)
    ]
    grid[3][3] = Player.WHITE
    grid[3][4] = Player.BLACK
    grid[4][3] = Player.BLACK
    grid[4][4] = Player.WHITE
    return tuple(tuple(row) for row in grid)


def initial_state() -> GameState:
    """Get the canonical starting position, Black to move."""
    return GameState(
        board=create_initial_board(),
        current_player=Player.BLACK,
        black_score=2,
        white_score=2,
    )


def capture_set(
    board: Board,
    row: int,
    col: int,
    player: Player,
) -> frozenset[Coordinate]:
    """Get the opponent discs a placement at (row, col) would flip.

    Each direction is walked outward over contiguous opponent discs. The
    run counts only if it is non-empty and ends on an in-bounds disc of
    ``player``. Runs from all directions are unioned.

    Args:
        board: Current grid.
        row: Target row.
        col: Target column.
        player: Side placing the disc.

    Returns:
        Coordinates that would be flipped. Empty when the target is occupied,
        off the board, or brackets nothing.
    """
    if not in_bounds(row, col) or board[row][col] is not None:
        return frozenset()

    opponent = player.opponent
    captured: list[Coordinate] = []

    for dr, dc in DIRECTIONS:
        run: list[Coordinate] = []
        r, c = row + dr, col + dc

        while in_bounds(r, c) and board[r][c] is opponent:
            run.append((r, c))
            r += dr
            c += dc

        if run and in_bounds(r, c) and board[r][c] is player:
            captured.extend(run)

    return frozenset(captured)


def is_valid_move(board: Board, row: int, col: int, player: Player) -> bool:
    """Check whether ``player`` may place a disc at (row, col).

    Same answer as ``bool(capture_set(...))`` but stops at the first
    bracketed run and builds no coordinate lists.
    """
    if not in_bounds(row, col) or board[row][col] is not None:
        return False

    opponent = player.opponent
    for dr, dc in DIRECTIONS:
        r, c = row + dr, col + dc
        seen = False
        while in_bounds(r, c) and board[r][c] is opponent:
            seen = True
            r += dr
            c += dc
        if seen and in_bounds(r, c) and board[r][c] is player:
            return True
    return False


def legal_moves(board: Board, player: Player) -> list[Coordinate]:
    """Get all legal placements for ``player`` in row-major order.

    The order is part of the contract: the AI tiers pick the first
    qualifying move.
    """
    moves = []
    for row in range(BOARD_SIZE):
        for col in range(BOARD_SIZE):
            if board[row][col] is None and is_valid_move(board, row, col, player):
                moves.append((row, col))
    return moves


def has_legal_move(board: Board, player: Player) -> bool:
    """Check whether ``player`` has at least one legal placement."""
    for row in range(BOARD_SIZE):
        for col in range(BOARD_SIZE):
            if board[row][col] is None and is_valid_move(board, row, col, player):
                return True
    return False


def mobility(board: Board, player: Player) -> int:
    """Count the legal placements of ``player`` without listing them."""
    count = 0
    for row in range(BOARD_SIZE):
        for col in range(BOARD_SIZE):
            if board[row][col] is None and is_valid_move(board, row, col, player):
                count += 1
    return count


def count_pieces(board: Board) -> tuple[int, int]:
    """Count black and white discs.

    Returns:
        Tuple of (black, white).
    """
    black = 0
    white = 0
    for row in board:
        for cell in row:
            if cell is Player.BLACK:
                black += 1
            elif cell is Player.WHITE:
                white += 1
    return black, white


def flip(
    board: Board,
    row: int,
    col: int,
    player: Player,
    captured: frozenset[Coordinate],
) -> Board:
    """Build the grid after placing at (row, col) and flipping ``captured``."""
    grid = [list(r) for r in board]
    grid[row][col] = player
    for r, c in captured:
        grid[r][c] = player
    return tuple(tuple(r) for r in grid)


def place(board: Board, row: int, col: int, player: Player) -> Board:
    """Get the grid after a placement, without touching any move log.

    Used by the search to simulate moves. The caller is expected to pass a
    legal move; an illegal one just drops a disc without flips.
    """
    return flip(board, row, col, player, capture_set(board, row, col, player))


def decide_winner(black: int, white: int) -> Winner:
    """Get the winner by majority disc count."""
    if black > white:
        return Winner.BLACK
    if white > black:
        return Winner.WHITE
    return Winner.TIE


def apply_move(state: GameState, row: int, col: int) -> GameState:
    """Apply a placement for the side to move.

    After the placement the opponent moves next if it has a legal move;
    otherwise the same side moves again (the opponent passes); if neither
    side can move the game is over and the winner is decided by disc count.

    Args:
        state: Current state. Never modified.
        row: Target row.
        col: Target column.

    Returns:
        The new state, or ``state`` itself if the placement is illegal or
        the game is already over.
    """
    if state.is_over:
        return state

    mover = state.current_player
    captured = capture_set(state.board, row, col, mover)
    if not captured:
        return state

    board = flip(state.board, row, col, mover, captured)
    black, white = count_pieces(board)

    next_player = mover.opponent
    is_over = False
    winner = None
    if not has_legal_move(board, next_player):
        if has_legal_move(board, mover):
            next_player = mover
        else:
            is_over = True
            winner = decide_winner(black, white)

    last_timestamp = state.move_log[-1].timestamp if state.move_log else None
    move = Move(
        row=row,
        col=col,
        player=mover,
        flipped_count=len(captured),
        timestamp=epoch_millis(not_before=last_timestamp),
    )

    return GameState(
        board=board,
        current_player=next_player,
        black_score=black,
        white_score=white,
        is_over=is_over,
        winner=winner,
        move_log=state.move_log + (move,),
    )


def replay_to(move_log: Sequence[Move], index: int) -> GameState:
    """Rebuild the state after ``move_log[index]`` from the initial position.

    Only the (row, col) of each logged move is used. The stored player,
    flip count and timestamp are descriptive and never decide transitions,
    so a replayed log reproduces the live board, scores and outcome.

    Args:
        move_log: Moves in the order they were played.
        index: Last move to apply (inclusive). Negative gives the initial
            position; an index past the end replays the whole log.

    Returns:
        The reconstructed state.
    """
    state = initial_state()
    for move in move_log[: max(index + 1, 0)]:
        state = apply_move(state, move.row, move.col)
    return state
