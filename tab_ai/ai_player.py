from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, Protocol

from loguru import logger

from .scheduler import ManualScheduler, Scheduler
from .strategy.base import BaseStrategy
from .strategy.features import build_move_options
from .strategy.registry import create as create_policy
from .strategy.types import Difficulty
from .tab_game.board import Board
from .tab_game.config import config
from .tab_game.messages import SYSTEM, LoggingMessageSink, MessageSink
from .tab_game.moves import all_moves
from .tab_game.piece import Piece
from .tab_game.rules import valid_targets
from .tab_game.types import Move, Player


class GameController(Protocol):
    """What the automated player needs from whoever owns the live game."""

    board: Board
    current_player: Player
    current_roll: Optional[int]
    game_over: bool

    def request_roll(self) -> Any:
        ...

    def skip_turn(self) -> None:
        ...

    def apply_move(self, from_idx: int, to_idx: int) -> Any:
        ...

    def can_piece_move(self, piece: Piece) -> bool:
        ...


class TurnPhase(str, Enum):
    IDLE = "idle"
    ROLL_DEFERRED = "roll_deferred"
    SKIP_DEFERRED = "skip_deferred"
    EXECUTE_DEFERRED = "execute_deferred"
    TURN_ENDED = "turn_ended"
    MOVE_APPLIED = "move_applied"
    MOVE_DISCARDED = "move_discarded"


@dataclass(slots=True)
class AIPlayer:
    """Turn-driven automated opponent.

    ``take_turn`` never blocks: it either does nothing, or queues exactly one
    continuation on the scheduler and returns. While a continuation is
    pending the player is locked and further ``take_turn`` calls are no-ops.
    A deferred move is re-checked against the controller's snapshot when it
    fires and dropped if the position moved on in the meantime.
    """

    game: GameController
    level: "str | Difficulty" = config.AI_LEVEL
    player: Player = Player.BLACK
    scheduler: Scheduler = field(default_factory=ManualScheduler)
    sink: Optional[MessageSink] = None
    rng: random.Random = field(default_factory=random.Random)
    roll_delay: float = config.ROLL_DELAY
    skip_delay: float = config.SKIP_DELAY
    move_delay: float = config.MOVE_DELAY
    difficulty: Difficulty = field(init=False)
    policy: BaseStrategy = field(init=False)
    phase: TurnPhase = field(default=TurnPhase.IDLE, init=False)
    last_move: Optional[Move] = field(default=None, init=False)
    _pending: bool = field(default=False, init=False, repr=False)

    def __post_init__(self) -> None:
        if self.sink is None:
            self.sink = getattr(self.game, "sink", None) or LoggingMessageSink()
        self.set_level(self.level)

    def set_level(self, level: "str | Difficulty") -> None:
        try:
            difficulty = Difficulty.parse(level)
        except KeyError as e:
            logger.warning(f"Unknown AI level '{level}', falling back to easy: {e}")
            difficulty = Difficulty.EASY
        self.level = difficulty.value
        self.difficulty = difficulty
        self.policy = create_policy(difficulty, rng=self.rng)

    @property
    def pending(self) -> bool:
        return self._pending

    # --- Entry point ---
    def take_turn(self) -> TurnPhase:
        if self._pending:
            return self.phase
        game = self.game
        if game.game_over or game.current_player is not self.player:
            self.phase = TurnPhase.IDLE
            return self.phase

        if not game.current_roll:
            game.request_roll()
            return self._defer(TurnPhase.ROLL_DEFERRED, self.roll_delay, self._resume)

        moves = all_moves(game.board, self.player, game.current_roll, game.can_piece_move)
        if not moves:
            self.sink.add_message(SYSTEM, "AI has no valid moves - skipping turn.")
            return self._defer(TurnPhase.SKIP_DEFERRED, self.skip_delay, self._skip)

        ctx = build_move_options(game.board, self.player, moves, notify=self.sink.add_message)
        move = self.policy.select_move(ctx)
        if move is None:  # pragma: no cover - policies always pick from a non-empty list
            return self._defer(TurnPhase.SKIP_DEFERRED, self.skip_delay, self._skip)
        logger.debug(
            f"{self.player.name} ({self.difficulty.value}) chose {move.from_idx}->{move.to_idx}"
        )
        return self._defer(TurnPhase.EXECUTE_DEFERRED, self.move_delay, self._execute, move)

    # --- Continuations ---
    def _defer(self, phase: TurnPhase, delay: float, callback, *args) -> TurnPhase:
        self._pending = True
        self.phase = phase
        self.scheduler.call_later(delay, callback, *args)
        return phase

    def _still_my_turn(self) -> bool:
        return not self.game.game_over and self.game.current_player is self.player

    def _resume(self) -> None:
        self._pending = False
        self.take_turn()

    def _skip(self) -> None:
        self._pending = False
        if self._still_my_turn():
            self.game.skip_turn()
        self.phase = TurnPhase.TURN_ENDED

    def _execute(self, move: Move) -> None:
        self._pending = False
        game = self.game
        piece = game.board.piece_at(move.from_idx)
        fresh = (
            self._still_my_turn()
            and piece is not None
            and game.can_piece_move(piece)
            and move.to_idx
            in valid_targets(game.board, self.player, game.current_roll, move.from_idx)
        )
        if not fresh:
            logger.warning(
                f"Discarding stale move {move.from_idx}->{move.to_idx} for {self.player.name}"
            )
            self.phase = TurnPhase.MOVE_DISCARDED
            return
        game.apply_move(move.from_idx, move.to_idx)
        self.last_move = move
        self.phase = TurnPhase.MOVE_APPLIED
