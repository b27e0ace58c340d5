from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import ClassVar, Optional

from ..tab_game.config import HeuristicWeights, config, heuristic_weights
from ..tab_game.types import Move
from .base import BaseStrategy
from .features import build_move_options
from .types import Difficulty, MoveOption, StrategyContext


@dataclass(slots=True)
class HeuristicPolicy(BaseStrategy):
    """Scores each move on its own merits, without looking at the result."""

    name: ClassVar[str] = "heuristic"
    difficulty: ClassVar[Difficulty] = Difficulty.MEDIUM

    weights: HeuristicWeights = field(default_factory=lambda: heuristic_weights)
    noise: float = config.MEDIUM_NOISE
    rng: random.Random = field(default_factory=random.Random)

    def select_move(self, ctx: StrategyContext) -> Optional[Move]:
        options = ctx.options
        if not options and ctx.moves:
            # Context built without features
            options = build_move_options(ctx.board, ctx.player, ctx.moves).options
        best = self._strict_argmax(options, self._score_move)
        return best.move if best is not None else None

    def _score_move(self, option: MoveOption) -> float:
        w = self.weights
        score = 0.0
        if option.is_capture:
            score += w.capture
        if option.moves_forward:
            score += w.forward_row
        if option.leaves_start_row:
            score += w.leave_start_row
        if option.enters_final_row:
            score += w.enter_final_row
        if option.piece_finished:
            score -= w.finished_piece_penalty
        return score + self.rng.random() * self.noise
