from __future__ import annotations

import argparse
import os
import random
from dataclasses import dataclass
from itertools import permutations
from typing import Dict, List, Sequence

import numpy as np
from loguru import logger

from .simulator import MatchResult, play_series
from .strategy.registry import available as available_levels
from .strategy.types import Difficulty
from .tab_game.config import config
from .tab_game.types import Player


def seed_everything(seed: int | None) -> random.Random:
    rng = random.Random()
    if seed is not None:
        rng.seed(seed)
        np.random.seed(seed)
    return rng


@dataclass
class PairingSummary:
    gold: str
    black: str
    results: List[MatchResult]

    def wins(self, player: Player) -> int:
        return sum(1 for r in self.results if r.leader() is player)

    @property
    def draws(self) -> int:
        return sum(1 for r in self.results if r.leader() is None)

    @property
    def turns(self) -> np.ndarray:
        return np.asarray([r.turns for r in self.results], dtype=np.int64)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run a Tab AI difficulty tournament")
    parser.add_argument(
        "--games",
        type=int,
        default=int(os.getenv("NGAMES", "10")),
        help="Number of games per ordered pairing",
    )
    parser.add_argument("--seed", type=int, default=None, help="Optional RNG seed")
    parser.add_argument(
        "--levels",
        type=str,
        default=os.getenv("LEVELS", ",".join(available_levels())),
        help="Comma-separated difficulty levels to include",
    )
    parser.add_argument("--cols", type=int, default=config.COLS, help="Board width")
    parser.add_argument(
        "--max-turns", type=int, default=config.MAX_TURNS, help="Turn cap per game"
    )
    return parser.parse_args(argv)


def select_levels(provided: str | None) -> List[str]:
    if not provided:
        return list(available_levels())
    chosen = [name.strip().lower() for name in provided.split(",") if name.strip()]
    unknown = [name for name in chosen if name not in available_levels()]
    if unknown:
        raise ValueError(f"Unknown levels requested: {', '.join(unknown)}")
    if len(chosen) < 2:
        raise ValueError("Need at least two levels to stage a tournament.")
    return chosen


def run_tournament(
    levels: Sequence[str],
    games: int,
    rng: random.Random,
    cols: int = config.COLS,
    max_turns: int = config.MAX_TURNS,
) -> List[PairingSummary]:
    summaries: List[PairingSummary] = []
    # Every ordered pair, so each level plays both colours
    for gold, black in permutations(levels, 2):
        results = play_series(gold, black, games, cols=cols, rng=rng, max_turns=max_turns)
        summary = PairingSummary(gold=gold, black=black, results=results)
        logger.info(
            f"{gold:>8s} (G) vs {black:<8s} (B): "
            f"{summary.wins(Player.GOLD)}-{summary.wins(Player.BLACK)}-{summary.draws}"
        )
        summaries.append(summary)
    return summaries


def standings(summaries: Sequence[PairingSummary]) -> Dict[str, int]:
    points: Dict[str, int] = {}
    for s in summaries:
        points.setdefault(s.gold, 0)
        points.setdefault(s.black, 0)
        points[s.gold] += s.wins(Player.GOLD)
        points[s.black] += s.wins(Player.BLACK)
    return points


def print_summary(summaries: Sequence[PairingSummary]) -> None:
    all_turns = np.concatenate([s.turns for s in summaries]) if summaries else np.zeros(0)
    print("Standings (wins):")
    ranked = sorted(standings(summaries).items(), key=lambda item: (-item[1], item[0]))
    for rank, (name, wins) in enumerate(ranked, start=1):
        print(f"  {rank:2d}. {name:10s} {wins:5d}")
    if all_turns.size:
        print()
        print(f"Game length: mean {all_turns.mean():.1f} turns, std {all_turns.std():.1f}")


def main(argv: Sequence[str] | None = None) -> None:
    args = parse_args(argv)
    rng = seed_everything(args.seed)
    try:
        levels = select_levels(args.levels)
    except ValueError as exc:
        raise SystemExit(str(exc))
    logger.info(f"Levels: {', '.join(Difficulty.parse(name).value for name in levels)}")
    summaries = run_tournament(levels, args.games, rng, cols=args.cols, max_turns=args.max_turns)
    print_summary(summaries)


if __name__ == "__main__":
    main()
