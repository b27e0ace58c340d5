from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import FrozenSet, List, Optional

from loguru import logger

from .board import Board
from .config import config
from .messages import SYSTEM, LoggingMessageSink, MessageSink
from .moves import all_moves
from .piece import Piece
from .rules import valid_targets
from .sticks import TAB_VALUE, StickThrow, throw_sticks
from .types import Move, PieceState, Player


@dataclass(slots=True)
class Game:
    """Reference controller: owns the live board and every mutation.

    Decision code reads ``board`` (an immutable snapshot that is replaced
    on each move) and drives the game through ``request_roll``,
    ``apply_move`` and ``skip_turn``.
    """

    cols: int = config.COLS
    first_player: Player = Player.GOLD
    sink: MessageSink = field(default_factory=LoggingMessageSink)
    rng: random.Random = field(default_factory=random.Random)
    board: Board = field(init=False)
    current_player: Player = field(init=False)
    current_roll: Optional[int] = field(default=None, init=False)
    last_throw: Optional[StickThrow] = field(default=None, init=False)
    game_over: bool = field(default=False, init=False)
    winner: Optional[Player] = field(default=None, init=False)
    turn_number: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        self.board = Board.initial(cols=self.cols)
        self.current_player = self.first_player

    # --- Dice ---
    def request_roll(self) -> Optional[StickThrow]:
        if self.game_over or self.current_roll is not None:
            return None
        throw = throw_sticks(self.rng)
        self.last_throw = throw
        self.current_roll = throw.value
        suffix = " (extra roll)" if throw.extra_throw else ""
        self.sink.add_message(
            SYSTEM,
            f"{self.current_player.name.title()} rolled: {throw.value} {throw.symbol}{suffix}",
        )
        return throw

    def set_roll(self, value: Optional[int]) -> None:
        """Force the current roll (scripted games and tests)."""
        self.current_roll = value
        self.last_throw = None

    # --- Capability and queries ---
    def can_piece_move(self, piece: Piece) -> bool:
        # A piece that has never moved is released only by a tab
        if piece.state is PieceState.INITIAL:
            return self.current_roll == TAB_VALUE
        return True

    def valid_targets_from(self, idx: int) -> FrozenSet[int]:
        piece = self.board.piece_at(idx)
        if piece is None or not self.can_piece_move(piece):
            return frozenset()
        return valid_targets(self.board, self.current_player, self.current_roll, idx)

    def legal_moves(self) -> List[Move]:
        return all_moves(
            self.board, self.current_player, self.current_roll, self.can_piece_move
        )

    def must_pass(self) -> bool:
        return (
            not self.game_over
            and self.current_roll is not None
            and not self.legal_moves()
        )

    # --- Mutations ---
    def apply_move(self, from_idx: int, to_idx: int) -> bool:
        if self.game_over or self.current_roll is None:
            logger.warning(f"Move {from_idx}->{to_idx} rejected: no active roll")
            return False
        if to_idx not in self.valid_targets_from(from_idx):
            logger.warning(
                f"Move {from_idx}->{to_idx} rejected for {self.current_player.name}"
            )
            return False

        topology = self.board.topology
        player = self.current_player
        piece = self.board.cells[from_idx]
        captured = self.board.cells[to_idx]
        moved = piece.moved_to_row(
            topology.row_of(to_idx),
            topology.start_row(player),
            topology.final_row(player),
        )
        self.board = self.board.with_move(from_idx, to_idx, moved)

        if captured is not None:
            logger.info(f"{player.name} captured {captured.owner.name} on {to_idx}")

        if self.board.count(player.opponent) == 0:
            self.game_over = True
            self.winner = player
            self.current_roll = None
            self.sink.add_message(SYSTEM, f"Winner: {player.name.title()}")
            return True

        extra = self.last_throw.extra_throw if self.last_throw else False
        self.current_roll = None
        if not extra:
            self.switch_turn()
        return True

    def skip_turn(self) -> None:
        if self.game_over:
            return
        self.switch_turn()

    def switch_turn(self) -> None:
        self.current_player = self.current_player.opponent
        self.current_roll = None
        self.last_throw = None
        self.turn_number += 1
        self.sink.add_message(
            SYSTEM, f"It's now {self.current_player.name.title()}'s turn."
        )

    def pieces_left(self) -> dict[Player, int]:
        return {player: self.board.count(player) for player in Player}
