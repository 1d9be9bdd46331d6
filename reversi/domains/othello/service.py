# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Othello Game Service.

This service manages in-memory game sessions:
- Start a game session (human vs human, human vs AI, AI vs AI)
- Process player moves
- Play AI turns after a short "thinking" delay
- Replay a session's move log

Sessions only hold immutable GameState values; every move swaps the
session's state for the new snapshot returned by the engine. Persistence
is left to callers, who can store GameState.to_storage_dict().
"""

import asyncio
import random
from datetime import datetime
from uuid import UUID, uuid4

from pydantic import BaseModel, Field

from reversi.core.config.settings import Settings, get_settings
from reversi.domains.othello.engines.othello import OthelloEngine
from reversi.domains.othello.engines.selector import select_ai_move
from reversi.domains.othello.errors import (
    GameNotFoundError,
    GameOverError,
    GameServiceError,
    IllegalMoveError,
    NotPlayersTurnError,
)
from reversi.domains.othello.models import Difficulty, GameState, Player, to_notation
from reversi.domains.othello.replay import ReplayCursor
from reversi.utils.datetime import utc_now
from reversi.utils.logging import get_logger, session_context

logger = get_logger(__name__)


class GameSession(BaseModel):
    """A game in progress.

    Attributes:
        session_id: Session identifier.
        state: Current game state.
        ai_player: Side played by the AI, or None for two humans.
        difficulty: AI difficulty tier.
        created_at: When the session started.
    """

    session_id: UUID = Field(default_factory=uuid4)
    state: GameState
    ai_player: Player | None = None
    difficulty: Difficulty = Difficulty.MEDIUM
    created_at: datetime = Field(default_factory=utc_now)

    @property
    def is_ai_turn(self) -> bool:
        """Whether the AI is the side to move."""
        return (
            self.ai_player is not None
            and not self.state.is_over
            and self.state.current_player is self.ai_player
        )


class OthelloGameService:
    """Service for managing Othello game sessions.

    Example:
        >>> service = OthelloGameService()
        >>> session = service.new_game(ai_player=Player.WHITE)
        >>> service.play_move(session.session_id, 2, 3)
        >>> await service.play_ai_turn(session.session_id)
    """

    def __init__(
        self,
        engine: OthelloEngine | None = None,
        settings: Settings | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self._settings = settings or get_settings()
        self._engine = engine or OthelloEngine(settings=self._settings)
        seed = self._settings.othello.random_seed
        if rng is None and seed is not None:
            rng = random.Random(seed)
        self._rng = rng
        self._sessions: dict[UUID, GameSession] = {}

    @property
    def engine(self) -> OthelloEngine:
        return self._engine

    def new_game(
        self,
        ai_player: Player | None = None,
        difficulty: Difficulty | None = None,
        session_id: UUID | None = None,
    ) -> GameSession:
        """Start a new game from the initial position.

        Args:
            ai_player: Side played by the AI, or None for two humans.
            difficulty: AI difficulty. Defaults to the configured tier.
            session_id: Explicit identifier; a random one is used if omitted.

        Returns:
            The new session.
        """
        if difficulty is None:
            difficulty = self._settings.othello.default_difficulty

        session = GameSession(
            session_id=session_id or uuid4(),
            state=self._engine.initial_state(),
            ai_player=ai_player,
            difficulty=difficulty,
        )
        self._sessions[session.session_id] = session

        logger.info(
            "game_started",
            session_id=str(session.session_id),
            ai_player=ai_player.value if ai_player is not None else None,
            difficulty=difficulty.value,
        )
        return session

    def get(self, session_id: UUID) -> GameSession:
        """Get a session.

        Raises:
            GameNotFoundError: If no such session exists.
        """
        session = self._sessions.get(session_id)
        if session is None:
            raise GameNotFoundError(f"Game session {session_id} not found")
        return session

    def list_sessions(self) -> list[GameSession]:
        return list(self._sessions.values())

    def end(self, session_id: UUID) -> GameSession:
        """Remove a session and return its final snapshot."""
        session = self.get(session_id)
        del self._sessions[session_id]
        logger.info(
            "game_ended",
            session_id=str(session_id),
            moves=len(session.state.move_log),
        )
        return session

    def play_move(self, session_id: UUID, row: int, col: int) -> GameState:
        """Play a human move.

        Raises:
            GameNotFoundError: If no such session exists.
            GameOverError: If the game has finished.
            NotPlayersTurnError: If it is the AI's turn.
            IllegalMoveError: If the placement is not legal.
        """
        with session_context(session_id):
            return self._play_move(session_id, row, col)

    def _play_move(self, session_id: UUID, row: int, col: int) -> GameState:
        session = self.get(session_id)
        state = session.state

        if state.is_over:
            raise GameOverError(f"Game {session_id} is over")
        if session.is_ai_turn:
            raise NotPlayersTurnError(
                f"It is the AI's turn ({state.current_player.value}) in game {session_id}"
            )

        new_state = self._engine.apply_move(state, row, col)
        if new_state is state:
            raise IllegalMoveError(
                f"Illegal move ({row}, {col}) for {state.current_player.value}"
            )

        session.state = new_state
        self._log_transition(session_id, state, new_state)
        return new_state

    async def play_ai_turn(self, session_id: UUID) -> GameState:
        """Let the AI play for the side to move.

        Waits the configured thinking delay, then runs the selector in a
        worker thread so the event loop stays responsive. A side without
        legal moves passes and the state is returned unchanged.

        Raises:
            GameNotFoundError: If no such session exists.
            GameOverError: If the game has finished.
            NotPlayersTurnError: If the AI plays a side that is not to move.
            GameServiceError: If the state changed while the AI was thinking.
        """
        with session_context(session_id):
            return await self._play_ai_turn(session_id)

    async def _play_ai_turn(self, session_id: UUID) -> GameState:
        session = self.get(session_id)
        state = session.state

        if state.is_over:
            raise GameOverError(f"Game {session_id} is over")
        if session.ai_player is not None and not session.is_ai_turn:
            raise NotPlayersTurnError(
                f"It is not the AI's turn ({state.current_player.value}) in game {session_id}"
            )

        delay_ms = self._settings.othello.think_delay_ms
        if delay_ms:
            await asyncio.sleep(delay_ms / 1000)

        choice = await asyncio.to_thread(
            select_ai_move,
            state,
            session.difficulty,
            rng=self._rng,
            depth=self._settings.othello.hard_search_depth,
        )

        if session.state is not state:
            raise GameServiceError(f"Game {session_id} changed during the AI turn")

        if choice is None:
            logger.info(
                "ai_passed",
                session_id=str(session_id),
                player=state.current_player.value,
            )
            return state

        new_state = self._engine.apply_move(state, *choice)
        session.state = new_state
        self._log_transition(session_id, state, new_state)
        return new_state

    def replay(self, session_id: UUID, index: int | None = None) -> ReplayCursor:
        """Get a replay cursor over a session's move log."""
        return ReplayCursor(self.get(session_id).state.move_log, index)

    def _log_transition(self, session_id: UUID, before: GameState, after: GameState) -> None:
        move = after.move_log[-1]
        logger.info(
            "move_played",
            session_id=str(session_id),
            player=move.player.value,
            move=to_notation(move.row, move.col),
            flipped=move.flipped_count,
            black=after.black_score,
            white=after.white_score,
        )
        if after.is_over:
            logger.info(
                "game_over",
                session_id=str(session_id),
                winner=after.winner.value,
            )
        elif after.current_player is before.current_player:
            logger.info(
                "player_passed",
                session_id=str(session_id),
                player=before.current_player.opponent.value,
            )
