from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from loguru import logger

from .ai_player import AIPlayer
from .scheduler import ManualScheduler
from .tab_game.config import config
from .tab_game.game import Game
from .tab_game.messages import MessageSink, RecordingMessageSink
from .tab_game.types import Player


@dataclass(slots=True)
class MatchResult:
    winner: Optional[Player]
    turns: int
    pieces_left: Dict[Player, int]
    levels: Dict[Player, str] = field(default_factory=dict)

    @property
    def decided(self) -> bool:
        return self.winner is not None

    def leader(self) -> Optional[Player]:
        """Winner, or the side with more pieces when the turn cap was hit."""
        if self.winner is not None:
            return self.winner
        gold, black = self.pieces_left[Player.GOLD], self.pieces_left[Player.BLACK]
        if gold == black:
            return None
        return Player.GOLD if gold > black else Player.BLACK


def play_match(
    gold_level: str,
    black_level: str,
    cols: int = config.COLS,
    rng: random.Random | None = None,
    max_turns: int = config.MAX_TURNS,
    sink: MessageSink | None = None,
) -> MatchResult:
    """Play one AI-vs-AI game through the real controller and decision engine.

    The scheduler's virtual clock stands in for the pacing delays, so a game
    runs as fast as the policies can decide.
    """
    rng = rng or random.Random()
    scheduler = ManualScheduler()
    game = Game(
        cols=cols,
        sink=sink or RecordingMessageSink(),
        rng=random.Random(rng.getrandbits(32)),
    )
    seats = {
        Player.GOLD: AIPlayer(
            game=game,
            level=gold_level,
            player=Player.GOLD,
            scheduler=scheduler,
            rng=random.Random(rng.getrandbits(32)),
        ),
        Player.BLACK: AIPlayer(
            game=game,
            level=black_level,
            player=Player.BLACK,
            scheduler=scheduler,
            rng=random.Random(rng.getrandbits(32)),
        ),
    }

    # Extra throws keep turn_number still, so cap raw decisions as well
    max_steps = max_turns * 20
    steps = 0
    while not game.game_over and game.turn_number < max_turns and steps < max_steps:
        seats[game.current_player].take_turn()
        scheduler.run_until_idle()
        steps += 1

    result = MatchResult(
        winner=game.winner,
        turns=game.turn_number,
        pieces_left=game.pieces_left(),
        levels={p: seat.difficulty.value for p, seat in seats.items()},
    )
    if not result.decided:
        logger.debug(f"Match hit the cap after {result.turns} turns ({steps} steps)")
    return result


def play_series(
    gold_level: str,
    black_level: str,
    games: int,
    cols: int = config.COLS,
    rng: random.Random | None = None,
    max_turns: int = config.MAX_TURNS,
) -> List[MatchResult]:
    rng = rng or random.Random()
    return [
        play_match(gold_level, black_level, cols=cols, rng=rng, max_turns=max_turns)
        for _ in range(games)
    ]
