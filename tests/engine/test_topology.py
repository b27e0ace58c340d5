from __future__ import annotations

import unittest

from tab_ai.tab_game.topology import BoardTopology
from tab_ai.tab_game.types import Player


class PathTopologyTests(unittest.TestCase):
    def setUp(self):
        self.topology = BoardTopology(rows=4, cols=3)

    def test_snake_path_on_small_board(self):
        self.assertEqual(
            self.topology.path(), [2, 1, 0, 3, 4, 5, 8, 7, 6, 9, 10, 11]
        )

    def test_path_is_a_bijection_for_many_widths(self):
        for cols in range(1, 16):
            topology = BoardTopology(rows=4, cols=cols)
            path = topology.path()
            self.assertEqual(sorted(path), list(range(4 * cols)))
            for pos, idx in enumerate(path):
                self.assertEqual(topology.path_position(idx), pos)

    def test_next_positions_linear_and_fork(self):
        self.assertEqual(self.topology.next_positions(2), {1})
        self.assertEqual(self.topology.next_positions(0), {3})
        self.assertEqual(self.topology.next_positions(6), {9, 3})

    def test_fork_only_on_the_row_two_exit(self):
        topology = BoardTopology(rows=4, cols=9)
        forks = [
            idx for idx in range(topology.total_cells)
            if len(topology.next_positions(idx)) == 2
        ]
        self.assertEqual(forks, [topology.index_of(2, 0)])
        self.assertEqual(
            topology.next_positions(topology.index_of(2, 0)),
            {topology.index_of(3, 0), topology.index_of(1, 0)},
        )

    def test_last_cell_and_out_of_range_have_no_successor(self):
        self.assertEqual(self.topology.next_positions(11), frozenset())
        self.assertEqual(self.topology.next_positions(-1), frozenset())
        self.assertEqual(self.topology.next_positions(12), frozenset())

    def test_reachable_after_steps(self):
        self.assertEqual(self.topology.reachable_after_steps(6, 2), {10, 4})
        self.assertEqual(self.topology.reachable_after_steps(2, 3), {3})
        self.assertEqual(self.topology.reachable_after_steps(11, 1), frozenset())

    def test_zero_steps_is_identity(self):
        for idx in range(self.topology.total_cells):
            self.assertEqual(self.topology.reachable_after_steps(idx, 0), {idx})

    def test_mirror_is_an_involution(self):
        for idx in range(self.topology.total_cells):
            self.assertEqual(self.topology.mirror(self.topology.mirror(idx)), idx)
        self.assertEqual(self.topology.mirror(0), 11)

    def test_black_candidates_are_mirrored(self):
        self.assertEqual(self.topology.candidate_targets(Player.BLACK, 5, 1), {2, 8})
        self.assertEqual(self.topology.candidate_targets(Player.GOLD, 6, 1), {9, 3})

    def test_player_rows(self):
        self.assertEqual(self.topology.start_row(Player.GOLD), 0)
        self.assertEqual(self.topology.final_row(Player.GOLD), 3)
        self.assertEqual(self.topology.start_row(Player.BLACK), 3)
        self.assertEqual(self.topology.final_row(Player.BLACK), 0)
        self.assertEqual(self.topology.progress_rows(Player.BLACK, 1), 2)

    def test_rejects_empty_dimensions(self):
        with self.assertRaises(ValueError):
            BoardTopology(rows=4, cols=0)


if __name__ == "__main__":
    unittest.main()
