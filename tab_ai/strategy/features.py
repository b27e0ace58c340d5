from __future__ import annotations

from typing import Optional, Sequence

from ..tab_game.board import Board
from ..tab_game.types import Move, Player
from .types import MoveOption, Notify, StrategyContext


def _create_move_option(board: Board, player: Player, move: Move) -> MoveOption:
    topology = board.topology
    piece = board.cells[move.from_idx]
    from_row = topology.row_of(move.from_idx)
    to_row = topology.row_of(move.to_idx)
    start_row = topology.start_row(player)
    return MoveOption(
        move=move,
        from_row=from_row,
        to_row=to_row,
        is_capture=move.is_capture,
        moves_forward=topology.progress_rows(player, to_row)
        > topology.progress_rows(player, from_row),
        leaves_start_row=from_row == start_row and to_row != start_row,
        enters_final_row=to_row == topology.final_row(player),
        piece_finished=bool(piece is not None and piece.was_on_last_row),
    )


def build_move_options(
    board: Board,
    player: Player,
    moves: Sequence[Move],
    notify: Optional[Notify] = None,
) -> StrategyContext:
    """Convert a snapshot and its legal moves into a strategy context."""
    moves = list(moves)
    return StrategyContext(
        board=board,
        player=player,
        moves=moves,
        options=[_create_move_option(board, player, mv) for mv in moves],
        notify=notify,
    )
