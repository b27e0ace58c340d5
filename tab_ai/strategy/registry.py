from __future__ import annotations

import random
from typing import Dict, Type

from .adaptive import AdaptivePolicy
from .base import BaseStrategy
from .heuristic import HeuristicPolicy
from .random_policy import RandomPolicy
from .simulated import SimulatedPolicy
from .types import Difficulty

POLICY_REGISTRY: Dict[Difficulty, Type[BaseStrategy]] = {
    RandomPolicy.difficulty: RandomPolicy,
    HeuristicPolicy.difficulty: HeuristicPolicy,
    SimulatedPolicy.difficulty: SimulatedPolicy,
    AdaptivePolicy.difficulty: AdaptivePolicy,
}


def create(level: "str | Difficulty", rng: random.Random | None = None, **kwargs) -> BaseStrategy:
    cls = POLICY_REGISTRY[Difficulty.parse(level)]
    if rng is not None:
        kwargs["rng"] = rng
    return cls(**kwargs)


def available() -> Dict[str, Type[BaseStrategy]]:
    return {level.value: cls for level, cls in POLICY_REGISTRY.items()}
