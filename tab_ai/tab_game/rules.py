from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet, Optional

from .board import Board
from .piece import Piece
from .types import Player


def valid_targets(
    board: Optional[Board],
    player: Player,
    roll: Optional[int],
    from_idx: int,
) -> FrozenSet[int]:
    """Legal destinations for the piece on ``from_idx`` at ``roll``.

    Candidates come from the topology (mirrored for Black) and must pass
    every filter in ``_is_legal_destination``. Missing roll or board, an
    empty or foreign source cell, or an out-of-range index all give an
    empty set.
    """
    if not roll or roll <= 0 or board is None:
        return frozenset()
    piece = board.piece_at(from_idx)
    if piece is None or piece.owner is not player:
        return frozenset()

    topology = board.topology
    candidates = topology.candidate_targets(player, from_idx, roll)
    return frozenset(
        i
        for i in candidates
        if _is_legal_destination(board, player, piece, from_idx, i)
    )


def _is_legal_destination(
    board: Board, player: Player, piece: Piece, from_idx: int, to_idx: int
) -> bool:
    topology = board.topology
    if not topology.in_bounds(to_idx):
        return False

    row_from = topology.row_of(from_idx)
    row_to = topology.row_of(to_idx)
    start_row = topology.start_row(player)
    final_row = topology.final_row(player)

    # (1) no stacking on own pieces; an opposing piece is a capture
    target = board.cells[to_idx]
    if target is not None and target.owner is player:
        return False

    # (2) once a piece has left the final row it may not re-enter it
    if piece.was_on_last_row and row_from != final_row and row_to == final_row:
        return False

    # (3) no returning to the start row after leaving it
    if row_to == start_row and row_from != start_row:
        return False

    # (4) the final row stays closed while the start row holds own pieces
    if row_to == final_row and board.row_has_piece_of(start_row, player):
        return False

    return True


@dataclass(slots=True)
class TabRules:
    """Stateful facade holding the snapshot a UI wants to query repeatedly."""

    board: Optional[Board] = None
    current_player: Player = Player.GOLD
    current_roll: Optional[int] = None
    _last_targets: dict[int, FrozenSet[int]] = field(
        default_factory=dict, init=False, repr=False
    )

    def set_state(
        self, board: Optional[Board], current_player: Player, current_roll: Optional[int]
    ) -> None:
        self.board = board
        self.current_player = current_player
        self.current_roll = current_roll
        self._last_targets.clear()

    def valid_targets_from(self, idx: int) -> FrozenSet[int]:
        cached = self._last_targets.get(idx)
        if cached is None:
            cached = valid_targets(
                self.board, self.current_player, self.current_roll, idx
            )
            self._last_targets[idx] = cached
        return cached
