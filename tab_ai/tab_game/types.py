from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum


class Player(IntEnum):
    GOLD = 0
    BLACK = 1

    @property
    def opponent(self) -> "Player":
        return Player.BLACK if self is Player.GOLD else Player.GOLD

    @property
    def symbol(self) -> str:
        return "G" if self is Player.GOLD else "B"


class PieceState(str, Enum):
    """Presentation state of a piece; the rules only read the raw flags."""

    INITIAL = "initial"
    MOVED = "moved"
    FINAL = "final"


@dataclass(frozen=True, slots=True)
class Move:
    from_idx: int
    to_idx: int
    is_capture: bool = False
