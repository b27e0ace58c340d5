from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import ClassVar, Optional

from loguru import logger

from ..tab_game.config import config
from ..tab_game.messages import SYSTEM
from ..tab_game.types import Move
from .base import BaseStrategy
from .heuristic import HeuristicPolicy
from .random_policy import RandomPolicy
from .simulated import SimulatedPolicy
from .types import Difficulty, StrategyContext

_FIXED_MODES = (Difficulty.EASY, Difficulty.MEDIUM, Difficulty.HARD)


@dataclass(slots=True)
class AdaptivePolicy(BaseStrategy):
    """Plays harder when behind on material and relaxes when ahead."""

    name: ClassVar[str] = "adaptive"
    difficulty: ClassVar[Difficulty] = Difficulty.ADAPTIVE

    override_rate: float = config.ADAPTIVE_OVERRIDE_RATE
    # Material advantage bounds: below LOSING plays hard, above WINNING plays easy
    losing_below: int = -2
    winning_above: int = 1
    rng: random.Random = field(default_factory=random.Random)
    easy: Optional[RandomPolicy] = None
    medium: Optional[HeuristicPolicy] = None
    hard: Optional[SimulatedPolicy] = None
    last_mode: Optional[Difficulty] = field(default=None, init=False)

    def __post_init__(self) -> None:
        self.easy = self.easy or RandomPolicy(rng=self.rng)
        self.medium = self.medium or HeuristicPolicy(rng=self.rng)
        self.hard = self.hard or SimulatedPolicy(rng=self.rng)

    def base_mode(self, advantage: int) -> Difficulty:
        if advantage < self.losing_below:
            return Difficulty.HARD
        if advantage <= self.winning_above:
            return Difficulty.MEDIUM
        return Difficulty.EASY

    def choose_mode(self, ctx: StrategyContext) -> Difficulty:
        advantage = ctx.board.count(ctx.player) - ctx.board.count(ctx.player.opponent)
        mode = self.base_mode(advantage)
        if self.rng.random() < self.override_rate:
            mode = self.rng.choice(_FIXED_MODES)
        logger.debug(f"Adaptive advantage={advantage} -> {mode.value}")
        return mode

    def select_move(self, ctx: StrategyContext) -> Optional[Move]:
        mode = self.choose_mode(ctx)
        self.last_mode = mode
        ctx.announce(SYSTEM, f"AI switched to {mode.value.upper()} mode.")
        if mode is Difficulty.EASY:
            return self.easy.select_move(ctx)
        if mode is Difficulty.HARD:
            return self.hard.select_move(ctx)
        return self.medium.select_move(ctx)
