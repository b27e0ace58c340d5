from dataclasses import dataclass, replace

from .types import Player, PieceState


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable piece value. Holds state only.

    Legal destinations, captures and row bookkeeping are handled by the
    rules and the controller; a board snapshot can share pieces freely.
    """

    owner: Player
    has_moved: bool = False
    has_left_start_row: bool = False
    was_on_last_row: bool = False

    @property
    def state(self) -> PieceState:
        if self.was_on_last_row:
            return PieceState.FINAL
        if self.has_moved:
            return PieceState.MOVED
        return PieceState.INITIAL

    def moved_to_row(self, row: int, start_row: int, final_row: int) -> "Piece":
        return replace(
            self,
            has_moved=True,
            has_left_start_row=self.has_left_start_row or row != start_row,
            was_on_last_row=self.was_on_last_row or row == final_row,
        )
