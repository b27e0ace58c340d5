from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Tuple

NUM_STICKS = 4

# Flat sides up -> steps. No flat side up scores 6.
_VALUE_BY_UPS = {0: 6, 1: 1, 2: 2, 3: 3, 4: 4}
EXTRA_THROW_VALUES = frozenset({1, 4, 6})
TAB_VALUE = 1

# 4 fair sticks: C(4, k) / 16
ROLL_PROBABILITIES = {
    1: 4 / 16,
    2: 6 / 16,
    3: 4 / 16,
    4: 1 / 16,
    6: 1 / 16,
}

_SYMBOLS = ("••••", "⎮•••", "⎮⎮••", "⎮⎮⎮•", "⎮⎮⎮⎮")


def value_for(ups: int) -> int:
    if not 0 <= ups <= NUM_STICKS:
        raise ValueError(f"ups must be within 0..{NUM_STICKS}, got {ups}")
    return _VALUE_BY_UPS[ups]


@dataclass(frozen=True, slots=True)
class StickThrow:
    sticks: Tuple[bool, ...]  # True = flat side up

    @property
    def ups(self) -> int:
        return sum(self.sticks)

    @property
    def value(self) -> int:
        return value_for(self.ups)

    @property
    def extra_throw(self) -> bool:
        return self.value in EXTRA_THROW_VALUES

    @property
    def is_tab(self) -> bool:
        return self.value == TAB_VALUE

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self.ups]


def throw_sticks(rng: random.Random | None = None) -> StickThrow:
    rng = rng or random
    return StickThrow(sticks=tuple(rng.random() < 0.5 for _ in range(NUM_STICKS)))
