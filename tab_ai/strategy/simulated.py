from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import ClassVar, Optional

from loguru import logger

from ..tab_game.moves import simulate_move
from ..tab_game.types import Move
from .base import BaseStrategy
from .evaluator import BoardEvaluator
from .types import Difficulty, StrategyContext


@dataclass(slots=True)
class SimulatedPolicy(BaseStrategy):
    """One-ply lookahead: play each move on a copy and keep the best board."""

    name: ClassVar[str] = "simulated"
    difficulty: ClassVar[Difficulty] = Difficulty.HARD

    rng: random.Random = field(default_factory=random.Random)
    evaluator: Optional[BoardEvaluator] = None

    def __post_init__(self) -> None:
        if self.evaluator is None:
            self.evaluator = BoardEvaluator(rng=self.rng)

    def select_move(self, ctx: StrategyContext) -> Optional[Move]:
        def score(move: Move) -> float:
            return self.evaluator.evaluate(simulate_move(ctx.board, move), ctx.player)

        best = self._strict_argmax(ctx.moves, score)
        if best is not None:
            logger.debug(f"Hard policy picked {best.from_idx}->{best.to_idx}")
        return best
