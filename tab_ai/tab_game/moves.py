from __future__ import annotations

from typing import Callable, List, Optional

from .board import Board
from .piece import Piece
from .rules import valid_targets
from .types import Move, Player

PieceFilter = Callable[[Piece], bool]


def _always(_: Piece) -> bool:
    return True


def all_moves(
    board: Optional[Board],
    player: Player,
    roll: Optional[int],
    can_piece_move: PieceFilter = _always,
) -> List[Move]:
    """Every legal (from, to) pair for ``player``.

    Ordered by source index, then destination index; policies that take
    "the first" move rely on this order.
    """
    if board is None:
        return []
    moves: List[Move] = []
    for idx, piece in board.occupied():
        if piece.owner is not player or not can_piece_move(piece):
            continue
        for target in sorted(valid_targets(board, player, roll, idx)):
            occupant = board.cells[target]
            moves.append(
                Move(
                    from_idx=idx,
                    to_idx=target,
                    is_capture=occupant is not None and occupant.owner is not player,
                )
            )
    return moves


def simulate_move(board: Board, move: Move) -> Board:
    """Board copy with the move applied by plain relocation."""
    return board.with_move(move.from_idx, move.to_idx)
