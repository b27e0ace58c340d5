from __future__ import annotations

import random
import unittest

from tab_ai.strategy import (
    AdaptivePolicy,
    BaseStrategy,
    Difficulty,
    HeuristicPolicy,
    RandomPolicy,
    SimulatedPolicy,
    StrategyContext,
    available,
    build_move_options,
    create,
)
from tab_ai.strategy.evaluator import BoardEvaluator
from tab_ai.tab_game.board import Board
from tab_ai.tab_game.moves import all_moves
from tab_ai.tab_game.piece import Piece
from tab_ai.tab_game.types import Move, Player

GOLD = Piece(owner=Player.GOLD, has_moved=True, has_left_start_row=True)
BLACK = Piece(owner=Player.BLACK, has_moved=True, has_left_start_row=True)


def capture_context(notify=None):
    """Black at 5 with a roll of 1: quiet 5->2 (final row) or capture 5->8."""
    board = Board.empty(cols=3).place(5, BLACK).place(8, GOLD)
    moves = all_moves(board, Player.BLACK, 1)
    return build_move_options(board, Player.BLACK, moves, notify=notify)


class FeatureTests(unittest.TestCase):
    def test_options_describe_each_move(self):
        ctx = capture_context()
        self.assertEqual(ctx.moves, [Move(5, 2, False), Move(5, 8, True)])
        quiet, capture = ctx.options
        self.assertTrue(quiet.moves_forward)
        self.assertTrue(quiet.enters_final_row)
        self.assertFalse(quiet.is_capture)
        self.assertTrue(capture.is_capture)
        self.assertFalse(capture.moves_forward)
        self.assertFalse(capture.leaves_start_row)


class RandomPolicyTests(unittest.TestCase):
    def test_mistake_takes_first_move(self):
        policy = RandomPolicy(mistake_rate=1.0, rng=random.Random(1))
        ctx = capture_context()
        for _ in range(10):
            self.assertEqual(policy.select_move(ctx), ctx.moves[0])

    def test_uniform_choice_is_seeded(self):
        ctx = capture_context()
        policy = RandomPolicy(mistake_rate=0.0, rng=random.Random(5))
        reference = random.Random(5)
        reference.random()
        self.assertEqual(policy.select_move(ctx), reference.choice(ctx.moves))

    def test_no_moves(self):
        ctx = build_move_options(Board.empty(cols=3), Player.GOLD, [])
        self.assertIsNone(RandomPolicy().select_move(ctx))


class HeuristicPolicyTests(unittest.TestCase):
    def test_prefers_capture(self):
        policy = HeuristicPolicy(noise=0.0, rng=random.Random(0))
        self.assertEqual(policy.select_move(capture_context()), Move(5, 8, True))

    def test_capture_survives_noise(self):
        # capture scores 10, the quiet move 9; noise is below the gap
        for seed in range(20):
            policy = HeuristicPolicy(noise=0.5, rng=random.Random(seed))
            self.assertEqual(policy.select_move(capture_context()), Move(5, 8, True))

    def test_finished_piece_is_penalised(self):
        finished = Piece(
            owner=Player.GOLD, has_moved=True, has_left_start_row=True, was_on_last_row=True
        )
        board = Board.empty(cols=3).place(4, finished).place(7, GOLD).place(0, BLACK)
        moves = all_moves(board, Player.GOLD, 1)
        self.assertEqual(moves, [Move(4, 5, False), Move(7, 6, False)])
        ctx = build_move_options(board, Player.GOLD, moves)
        policy = HeuristicPolicy(noise=0.0)
        self.assertEqual(policy.select_move(ctx), Move(7, 6, False))

    def test_ties_go_to_the_first_candidate(self):
        self.assertEqual(BaseStrategy._strict_argmax([3, 1, 2], lambda _: 0.0), 3)
        self.assertEqual(BaseStrategy._strict_argmax([1, 2, 3, 4], lambda x: x % 2), 1)
        self.assertIsNone(BaseStrategy._strict_argmax([], lambda x: x))


class BareContextTests(unittest.TestCase):
    """Every level picks a move from a context that only lists moves."""

    def bare_context(self):
        board = Board.empty(cols=3).place(5, BLACK).place(8, GOLD)
        return StrategyContext(
            board=board, player=Player.BLACK, moves=all_moves(board, Player.BLACK, 1)
        )

    def test_all_levels_pick_a_legal_move(self):
        ctx = self.bare_context()
        for level in ("easy", "medium", "hard", "adaptive"):
            move = create(level, rng=random.Random(0)).select_move(ctx)
            self.assertIn(move, ctx.moves, level)

    def test_medium_scores_moves_without_options(self):
        ctx = self.bare_context()
        policy = create("medium", rng=random.Random(0), noise=0.0)
        self.assertEqual(policy.select_move(ctx), Move(5, 8, True))
        self.assertEqual(ctx.options, [])

    def test_adaptive_medium_mode_without_options(self):
        ctx = self.bare_context()
        policy = create("adaptive", rng=random.Random(0), override_rate=0.0)
        self.assertEqual(policy.select_move(ctx), Move(5, 8, True))
        self.assertIs(policy.last_mode, Difficulty.MEDIUM)


class SimulatedPolicyTests(unittest.TestCase):
    def test_one_ply_prefers_capture(self):
        # capture board scores 13, the quiet board 8
        policy = SimulatedPolicy(rng=random.Random(2))
        self.assertEqual(policy.select_move(capture_context()), Move(5, 8, True))

    def test_does_not_touch_live_board(self):
        ctx = capture_context()
        before = ctx.board.cells
        SimulatedPolicy(evaluator=BoardEvaluator(noise=0.0)).select_move(ctx)
        self.assertIs(ctx.board.cells, before)


class AdaptivePolicyTests(unittest.TestCase):
    def test_base_mode_thresholds(self):
        policy = AdaptivePolicy(override_rate=0.0)
        self.assertIs(policy.base_mode(-3), Difficulty.HARD)
        self.assertIs(policy.base_mode(-2), Difficulty.MEDIUM)
        self.assertIs(policy.base_mode(1), Difficulty.MEDIUM)
        self.assertIs(policy.base_mode(2), Difficulty.EASY)

    def test_material_drives_mode(self):
        policy = AdaptivePolicy(override_rate=0.0, rng=random.Random(0))
        board = Board.empty(cols=3).place(5, BLACK)
        for idx in (0, 1, 2, 6):
            board = board.place(idx, GOLD)
        ctx = build_move_options(board, Player.BLACK, all_moves(board, Player.BLACK, 1))
        self.assertIs(policy.choose_mode(ctx), Difficulty.HARD)

    def test_announces_mode_and_delegates(self):
        heard = []
        ctx = capture_context(notify=lambda sender, text: heard.append((sender, text)))
        policy = AdaptivePolicy(override_rate=0.0, rng=random.Random(3))
        self.assertEqual(policy.select_move(ctx), Move(5, 8, True))
        self.assertIs(policy.last_mode, Difficulty.MEDIUM)
        self.assertEqual(heard, [("System", "AI switched to MEDIUM mode.")])

    def test_override_picks_a_fixed_mode(self):
        policy = AdaptivePolicy(override_rate=1.0, rng=random.Random(9))
        ctx = capture_context()
        seen = {policy.choose_mode(ctx) for _ in range(40)}
        self.assertTrue(seen)
        self.assertNotIn(Difficulty.ADAPTIVE, seen)
        self.assertTrue(seen <= {Difficulty.EASY, Difficulty.MEDIUM, Difficulty.HARD})


class RegistryTests(unittest.TestCase):
    def test_create_by_level(self):
        self.assertIsInstance(create("easy"), RandomPolicy)
        self.assertIsInstance(create("MEDIUM"), HeuristicPolicy)
        self.assertIsInstance(create(Difficulty.HARD), SimulatedPolicy)
        self.assertIsInstance(create("adaptive", rng=random.Random(0)), AdaptivePolicy)

    def test_unknown_level_raises(self):
        with self.assertRaises(KeyError):
            create("impossible")

    def test_available_levels(self):
        self.assertEqual(set(available()), {"easy", "medium", "hard", "adaptive"})


if __name__ == "__main__":
    unittest.main()
