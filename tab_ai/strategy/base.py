from __future__ import annotations

from typing import Callable, ClassVar, Iterable, Optional, TypeVar

from ..tab_game.types import Move
from .types import Difficulty, StrategyContext

T = TypeVar("T")


class BaseStrategy:
    """Base class for move-selection policies."""

    name: ClassVar[str] = "base"
    difficulty: ClassVar[Optional[Difficulty]] = None

    def select_move(self, ctx: StrategyContext) -> Optional[Move]:  # pragma: no cover - abstract
        raise NotImplementedError

    @staticmethod
    def _strict_argmax(items: Iterable[T], score: Callable[[T], float]) -> Optional[T]:
        """Highest-scoring item; the earliest one wins a tie."""
        best: Optional[T] = None
        best_score = float("-inf")
        for item in items:
            value = score(item)
            if value > best_score:
                best_score = value
                best = item
        return best
