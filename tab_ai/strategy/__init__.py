"""Move-selection policies for the automated Tab player."""

from .adaptive import AdaptivePolicy
from .base import BaseStrategy
from .evaluator import BoardEvaluator
from .features import build_move_options
from .heuristic import HeuristicPolicy
from .random_policy import RandomPolicy
from .registry import available, create
from .simulated import SimulatedPolicy
from .types import Difficulty, MoveOption, StrategyContext

__all__ = [
    "Difficulty",
    "MoveOption",
    "StrategyContext",
    "build_move_options",
    "BoardEvaluator",
    "BaseStrategy",
    "RandomPolicy",
    "HeuristicPolicy",
    "SimulatedPolicy",
    "AdaptivePolicy",
    "available",
    "create",
]
