from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import ClassVar, Optional

from loguru import logger

from ..tab_game.config import config
from ..tab_game.types import Move
from .base import BaseStrategy
from .types import Difficulty, StrategyContext


@dataclass(slots=True)
class RandomPolicy(BaseStrategy):
    """Uniform pick, with an occasional deliberate blunder."""

    name: ClassVar[str] = "random"
    difficulty: ClassVar[Difficulty] = Difficulty.EASY

    mistake_rate: float = config.EASY_MISTAKE_RATE
    rng: random.Random = field(default_factory=random.Random)

    def select_move(self, ctx: StrategyContext) -> Optional[Move]:
        if not ctx.moves:
            return None
        if self.rng.random() < self.mistake_rate:
            logger.debug("Easy policy took the first move on purpose")
            return ctx.moves[0]
        return self.rng.choice(ctx.moves)
