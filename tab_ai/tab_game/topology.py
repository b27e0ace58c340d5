from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, List

from .config import config
from .types import Player

# Row pair that forms the fork in the track: a piece leaving BRANCH_FROM_ROW
# towards BRANCH_INTO_ROW may instead drop back to BRANCH_BACK_ROW.
BRANCH_FROM_ROW = 2
BRANCH_INTO_ROW = 3
BRANCH_BACK_ROW = 1


@dataclass(frozen=True, slots=True)
class BoardTopology:
    """Traversal graph of the board, always expressed in Gold's frame.

    The path is a snake over the rows: even rows run from the last column
    to the first, odd rows from the first to the last. Every cell has one
    successor along the path except the fork cell, which has two. Nothing
    is materialised; successors are computed per query from the
    dimensions, so a topology is cheap to build for any column count.
    """

    rows: int = config.ROWS
    cols: int = config.COLS

    def __post_init__(self) -> None:
        if self.rows <= 0 or self.cols <= 0:
            raise ValueError("Board dimensions must be positive")

    @property
    def total_cells(self) -> int:
        return self.rows * self.cols

    # --- Coordinates ---
    def in_bounds(self, idx: int) -> bool:
        return 0 <= idx < self.total_cells

    def row_of(self, idx: int) -> int:
        return idx // self.cols

    def col_of(self, idx: int) -> int:
        return idx % self.cols

    def index_of(self, row: int, col: int) -> int:
        return row * self.cols + col

    def mirror(self, idx: int) -> int:
        """Map an index into the opposing player's view (self-inverse)."""
        return self.total_cells - 1 - idx

    # --- Per-player rows ---
    def start_row(self, player: Player) -> int:
        return 0 if player is Player.GOLD else self.rows - 1

    def final_row(self, player: Player) -> int:
        return self.rows - 1 if player is Player.GOLD else 0

    def progress_rows(self, player: Player, row: int) -> int:
        """Rows travelled from the player's start row."""
        return abs(row - self.start_row(player))

    # --- Path ---
    def path(self) -> List[int]:
        return [self.path_cell(p) for p in range(self.total_cells)]

    def path_cell(self, position: int) -> int:
        row, k = divmod(position, self.cols)
        col = self.cols - 1 - k if row % 2 == 0 else k
        return self.index_of(row, col)

    def path_position(self, idx: int) -> int:
        row, col = divmod(idx, self.cols)
        k = self.cols - 1 - col if row % 2 == 0 else col
        return row * self.cols + k

    def next_positions(self, idx: int) -> FrozenSet[int]:
        """One step forward from ``idx``: the path successor plus the fork, if any."""
        if not self.in_bounds(idx):
            return frozenset()
        p = self.path_position(idx)
        if p + 1 >= self.total_cells:
            return frozenset()
        nxt = self.path_cell(p + 1)
        if (
            self.row_of(idx) == BRANCH_FROM_ROW
            and self.row_of(nxt) == BRANCH_INTO_ROW
        ):
            branch = self.index_of(BRANCH_BACK_ROW, self.col_of(idx))
            return frozenset((nxt, branch))
        return frozenset((nxt,))

    def reachable_after_steps(self, start_idx: int, steps: int) -> FrozenSet[int]:
        """Cells reached after exactly ``steps`` hops, following every branch."""
        if not self.in_bounds(start_idx) or steps < 0:
            return frozenset()
        frontier = frozenset((start_idx,))
        for _ in range(steps):
            frontier = frozenset(
                nxt for pos in frontier for nxt in self.next_positions(pos)
            )
            if not frontier:
                break
        return frontier

    def candidate_targets(
        self, player: Player, from_idx: int, steps: int
    ) -> FrozenSet[int]:
        """Raw destinations for ``player`` before any legality filter."""
        if player is Player.GOLD:
            return self.reachable_after_steps(from_idx, steps)
        gold_view = self.reachable_after_steps(self.mirror(from_idx), steps)
        return frozenset(self.mirror(i) for i in gold_view)
