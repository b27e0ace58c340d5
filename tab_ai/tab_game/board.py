from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional, Sequence, Tuple

import numpy as np

from .config import config
from .piece import Piece
from .topology import BoardTopology
from .types import Player

Cell = Optional[Piece]


@dataclass(frozen=True, slots=True)
class Board:
    """Immutable snapshot of every cell, row-major (``row = idx // cols``).

    Holds placement only. The controller produces a fresh snapshot after
    each mutation; rules, evaluator and policies only ever read one.
    """

    cells: Tuple[Cell, ...]
    topology: BoardTopology

    def __post_init__(self) -> None:
        if len(self.cells) != self.topology.total_cells:
            raise ValueError(
                f"Board needs {self.topology.total_cells} cells, got {len(self.cells)}"
            )

    # --- Construction ---
    @classmethod
    def empty(cls, cols: int = config.COLS, rows: int = config.ROWS) -> "Board":
        topology = BoardTopology(rows=rows, cols=cols)
        return cls(cells=(None,) * topology.total_cells, topology=topology)

    @classmethod
    def initial(cls, cols: int = config.COLS, rows: int = config.ROWS) -> "Board":
        """Gold fills its start row, Black fills the opposite one."""
        topology = BoardTopology(rows=rows, cols=cols)
        cells: list[Cell] = [None] * topology.total_cells
        for player in Player:
            row = topology.start_row(player)
            for col in range(cols):
                cells[topology.index_of(row, col)] = Piece(owner=player)
        return cls(cells=tuple(cells), topology=topology)

    @classmethod
    def from_cells(cls, cells: Sequence[Cell], cols: int) -> "Board":
        rows = len(cells) // cols if cols else 0
        return cls(cells=tuple(cells), topology=BoardTopology(rows=rows, cols=cols))

    # --- Dimensions ---
    @property
    def rows(self) -> int:
        return self.topology.rows

    @property
    def cols(self) -> int:
        return self.topology.cols

    def __len__(self) -> int:
        return len(self.cells)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self.cells)

    # --- Reads ---
    def piece_at(self, idx: int) -> Cell:
        """Piece on ``idx``; out-of-range indices read as empty."""
        if not self.topology.in_bounds(idx):
            return None
        return self.cells[idx]

    def occupied(self) -> Iterator[tuple[int, Piece]]:
        for idx, cell in enumerate(self.cells):
            if cell is not None:
                yield idx, cell

    def count(self, player: Player) -> int:
        return sum(1 for _, piece in self.occupied() if piece.owner is player)

    def row_has_piece_of(self, row: int, player: Player) -> bool:
        start = row * self.cols
        return any(
            cell is not None and cell.owner is player
            for cell in self.cells[start : start + self.cols]
        )

    # --- Derived snapshots ---
    def place(self, idx: int, piece: Cell) -> "Board":
        cells = list(self.cells)
        cells[idx] = piece
        return Board(cells=tuple(cells), topology=self.topology)

    def with_move(self, from_idx: int, to_idx: int, piece: Cell = None) -> "Board":
        """Relocate the piece (or ``piece`` if given) and clear the source.

        Whatever stood on ``to_idx`` is overwritten; no other bookkeeping.
        """
        cells = list(self.cells)
        cells[to_idx] = piece if piece is not None else cells[from_idx]
        cells[from_idx] = None
        return Board(cells=tuple(cells), topology=self.topology)

    # --- Encodings ---
    def build_tensor(self, player: Player) -> np.ndarray:
        """Return a (3, rows, cols) float32 tensor seen from ``player``.

        Channels:
        0: player's pieces
        1: opposing pieces
        2: player's pieces that have reached their final row
        """
        tensor = np.zeros((3, self.rows, self.cols), dtype=np.float32)
        for idx, piece in self.occupied():
            row, col = divmod(idx, self.cols)
            if piece.owner is player:
                tensor[0, row, col] = 1.0
                if piece.was_on_last_row:
                    tensor[2, row, col] = 1.0
            else:
                tensor[1, row, col] = 1.0
        return tensor

    def render(self) -> str:
        lines = []
        for row in range(self.rows):
            chunk = self.cells[row * self.cols : (row + 1) * self.cols]
            lines.append(
                " ".join("." if cell is None else cell.owner.symbol for cell in chunk)
            )
        return "\n".join(lines)
