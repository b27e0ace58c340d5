"""
Board Evaluator - static positional score of a snapshot.

Used by the hard policy for one-ply lookahead:
1. Apply each legal move to a copy of the board
2. Score every resulting board for the moving side
3. Keep the move with the best score
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field

import numpy as np

from ..tab_game.board import Board
from ..tab_game.config import EvaluationWeights, config, evaluation_weights
from ..tab_game.types import Player


def centre_band(cols: int) -> tuple[int, int]:
    """Inclusive column range of the middle third."""
    margin = cols // 3
    return margin, cols - 1 - margin


@dataclass(slots=True)
class BoardEvaluator:
    """Scores a board for one player; higher is better for that player."""

    weights: EvaluationWeights = field(default_factory=lambda: evaluation_weights)
    noise: float = config.EVAL_NOISE
    rng: random.Random = field(default_factory=random.Random)

    def evaluate(self, board: Board, player: Player) -> float:
        return self.static_score(board, player) + self.rng.random() * self.noise

    def static_score(self, board: Board, player: Player) -> float:
        """Deterministic part of the score (no tie-break noise)."""
        w = self.weights
        topology = board.topology
        tensor = board.build_tensor(player)
        own, opp = tensor[0], tensor[1]

        rows = np.arange(board.rows)
        cols = np.arange(board.cols)
        own_progress = np.abs(rows - topology.start_row(player))
        opp_progress = np.abs(rows - topology.start_row(player.opponent))
        lo, hi = centre_band(board.cols)
        edge = ((cols == 0) | (cols == board.cols - 1)).astype(np.float32)
        centre = ((cols >= lo) & (cols <= hi)).astype(np.float32)

        own_per_row = own.sum(axis=1)
        own_per_col = own.sum(axis=0)
        score = (
            own.sum() * w.alive
            + float(own_per_row @ own_progress) * w.progress
            + own[topology.final_row(player)].sum() * w.final_row
            + float(own_per_col @ edge) * w.edge
            + float(own_per_col @ centre) * w.centre
        )
        score -= (
            opp.sum() * w.opp_alive
            + float(opp.sum(axis=1) @ opp_progress) * w.opp_progress
            + opp[topology.start_row(player)].sum() * w.opp_on_base
        )
        return float(score)
