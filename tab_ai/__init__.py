"""
Tab AI - move legality and automated play for the Tab race-and-capture game.
"""

from .ai_player import AIPlayer, GameController, TurnPhase
from .scheduler import AsyncioScheduler, ManualScheduler
from .strategy import Difficulty

__all__ = [
    "AIPlayer",
    "GameController",
    "TurnPhase",
    "ManualScheduler",
    "AsyncioScheduler",
    "Difficulty",
]
