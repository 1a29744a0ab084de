"""
Tests for the immutable grid: placement, line clearing and collision.
"""

import unittest

import numpy as np

from falling_blocks.game.grid import (
    EMPTY_CELL,
    Cell,
    Grid,
    clear_lines,
    collides,
    place_block,
    top_row_filled,
)


def full_row(y, width=10):
    return [(x, y) for x in range(width)]


class TestGridModel(unittest.TestCase):

    def test_empty_grid_dimensions(self):
        grid = Grid.empty()
        self.assertEqual((grid.width, grid.height), (10, 20))
        self.assertEqual(grid.cell(0, 0), EMPTY_CELL)
        self.assertEqual(list(grid.filled_cells()), [])

    def test_cells_are_read_only(self):
        grid = Grid.empty()
        with self.assertRaises(ValueError):
            grid.cells[0, 0] = 1

    def test_place_block_fills_points_with_colour(self):
        grid = place_block(Grid.empty(), [(3, 5), (4, 5)], "red")
        self.assertEqual(grid.cell(5, 3), Cell(True, "red"))
        self.assertEqual(grid.cell(5, 4), Cell(True, "red"))
        self.assertEqual(grid.cell(4, 3), EMPTY_CELL)
        self.assertEqual(sorted(grid.filled_cells()), [(3, 5, "red"), (4, 5, "red")])

    def test_place_block_leaves_input_untouched(self):
        before = Grid.empty()
        place_block(before, [(0, 0)], "cyan")
        self.assertEqual(before, Grid.empty())

    def test_place_block_ignores_out_of_range_points(self):
        grid = place_block(Grid.empty(), [(-1, 0), (10, 3), (2, 20), (1, 1)], "blue")
        self.assertEqual(list(grid.filled_cells()), [(1, 1, "blue")])

    def test_equality_compares_contents(self):
        a = place_block(Grid.empty(), [(1, 1)], "blue")
        b = place_block(Grid.empty(), [(1, 1)], "blue")
        c = place_block(Grid.empty(), [(1, 1)], "red")
        self.assertEqual(a, b)
        self.assertNotEqual(a, c)


class TestClearLines(unittest.TestCase):

    def test_no_full_rows(self):
        grid = place_block(Grid.empty(), [(0, 19), (5, 10)], "green")
        cleared, count = clear_lines(grid)
        self.assertEqual(count, 0)
        self.assertEqual(cleared, grid)

    def test_single_full_row(self):
        grid = place_block(Grid.empty(), full_row(19) + [(0, 18)], "green")
        cleared, count = clear_lines(grid)
        self.assertEqual(count, 1)
        self.assertEqual(cleared.height, 20)
        # The partial row above drops into the freed slot.
        self.assertEqual(list(cleared.filled_cells()), [(0, 19, "green")])

    def test_rows_keep_their_order(self):
        grid = place_block(Grid.empty(), full_row(17) + full_row(19), "red")
        grid = place_block(grid, [(2, 18)], "blue")
        grid = place_block(grid, [(7, 16)], "yellow")
        cleared, count = clear_lines(grid)
        self.assertEqual(count, 2)
        self.assertEqual(sorted(cleared.filled_cells()), [(2, 19, "blue"), (7, 18, "yellow")])

    def test_count_matches_removed_rows(self):
        grid = place_block(Grid.empty(), full_row(0) + full_row(5) + full_row(12), "orange")
        remaining = int(np.count_nonzero(~np.all(grid.cells != 0, axis=1)))
        cleared, count = clear_lines(grid)
        self.assertEqual(count, 3)
        self.assertEqual(count, 20 - remaining)
        self.assertEqual(cleared, Grid.empty())


class TestCollision(unittest.TestCase):

    def setUp(self):
        self.grid = place_block(Grid.empty(), [(3, 5)], "red")

    def test_filled_cell_collides(self):
        self.assertTrue(collides([(3, 5)], self.grid))

    def test_free_cell_does_not_collide(self):
        self.assertFalse(collides([(3, 4)], self.grid))

    def test_left_of_board_collides(self):
        self.assertTrue(collides([(-1, 0)], self.grid))

    def test_right_of_board_collides(self):
        self.assertTrue(collides([(10, 0)], self.grid))

    def test_above_and_below_board_collide(self):
        self.assertTrue(collides([(0, -1)], self.grid))
        self.assertTrue(collides([(0, 20)], self.grid))

    def test_any_point_is_enough(self):
        self.assertTrue(collides([(0, 0), (1, 1), (3, 5)], self.grid))
        self.assertFalse(collides([(0, 0), (1, 1), (9, 19)], self.grid))

    def test_top_row_filled(self):
        self.assertFalse(top_row_filled(self.grid))
        self.assertTrue(top_row_filled(place_block(self.grid, [(9, 0)], "red")))


if __name__ == "__main__":
    unittest.main()
