from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional

from ..tab_game.board import Board
from ..tab_game.types import Move, Player

Notify = Callable[[str, str], None]


class Difficulty(str, Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"
    ADAPTIVE = "adaptive"

    @classmethod
    def parse(cls, value: "str | Difficulty") -> "Difficulty":
        if isinstance(value, Difficulty):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError as e:
            raise KeyError(f"Unknown difficulty '{value}'.") from e


@dataclass(slots=True)
class MoveOption:
    """Structured metadata about a legal move, seen from the mover."""

    move: Move
    from_row: int
    to_row: int
    is_capture: bool
    moves_forward: bool
    leaves_start_row: bool
    enters_final_row: bool
    piece_finished: bool


@dataclass(slots=True)
class StrategyContext:
    """Input payload shared by the policies."""

    board: Board
    player: Player
    moves: List[Move]
    options: List[MoveOption] = field(default_factory=list)
    notify: Optional[Notify] = None

    def announce(self, sender: str, text: str) -> None:
        if self.notify is not None:
            self.notify(sender, text)
