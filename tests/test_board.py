# tests/test_board.py

import random
import unittest

from backend.board import MinesweeperBoard
from backend.errors import InvalidDimensions, InvalidMineCount, MineCountExceedsCapacity


def true_count(board, row, col):
    count = 0
    for dr in (-1, 0, 1):
        for dc in (-1, 0, 1):
            r, c = row + dr, col + dc
            if (dr or dc) and 0 <= r < board.rows and 0 <= c < board.cols:
                count += board.grid[r][c].is_mine
    return count


class TestMinesweeperBoard(unittest.TestCase):

    def test_board_dimensions(self):
        board = MinesweeperBoard(rows=4, cols=5, num_mines=3)
        self.assertEqual(len(board.grid), 4)
        self.assertEqual(len(board.grid[0]), 5)

    def test_mine_count(self):
        board = MinesweeperBoard(rows=5, cols=5, num_mines=5)
        mine_count = sum(1 for row in board.grid for cell in row if cell.is_mine)
        self.assertEqual(mine_count, 5)
        self.assertEqual(int(board.mine_mask().sum()), 5)

    def test_mine_count_for_many_seeds(self):
        for seed in range(50):
            board = MinesweeperBoard(6, 7, 12, rng=random.Random(seed))
            self.assertEqual(int(board.mine_mask().sum()), 12)

    def test_adjacent_counts_match_neighbors(self):
        for seed in range(20):
            board = MinesweeperBoard(7, 9, 20, rng=random.Random(seed))
            for r in range(board.rows):
                for c in range(board.cols):
                    cell = board.grid[r][c]
                    if cell.is_mine:
                        self.assertEqual(cell.adjacent_mines, 0)
                    else:
                        self.assertEqual(cell.adjacent_mines, true_count(board, r, c))

    def test_fixed_layout_counts(self):
        board = MinesweeperBoard(3, 3, 2, mine_positions=[(0, 0), (2, 2)])
        self.assertTrue(board.grid[0][0].is_mine)
        self.assertTrue(board.grid[2][2].is_mine)
        self.assertEqual(board.grid[1][1].adjacent_mines, 2)
        self.assertEqual(board.grid[0][2].adjacent_mines, 0)
        self.assertEqual(board.grid[0][1].adjacent_mines, 1)

    def test_seed_is_reproducible(self):
        a = MinesweeperBoard(8, 8, 10, rng=random.Random(7))
        b = MinesweeperBoard(8, 8, 10, rng=random.Random(7))
        self.assertTrue((a.mine_mask() == b.mine_mask()).all())

    def test_full_board_of_mines(self):
        board = MinesweeperBoard(3, 4, 12)
        self.assertEqual(int(board.mine_mask().sum()), 12)
        self.assertEqual(board.count_hidden_safe_cells(), 0)

    def test_all_cells_start_hidden(self):
        board = MinesweeperBoard(4, 4, 3)
        self.assertFalse(any(cell.is_revealed for row in board.grid for cell in row))

    def test_is_valid_coord(self):
        board = MinesweeperBoard(3, 4, 0)
        self.assertTrue(board.is_valid_coord(0, 0))
        self.assertTrue(board.is_valid_coord(2, 3))
        self.assertFalse(board.is_valid_coord(3, 0))
        self.assertFalse(board.is_valid_coord(0, 4))
        self.assertFalse(board.is_valid_coord(-1, 0))
        self.assertFalse(board.is_valid_coord("1", 0))
        self.assertFalse(board.is_valid_coord(None, 0))
        self.assertIsNone(board.cell(5, 5))

    def test_neighbors(self):
        board = MinesweeperBoard(3, 3, 0)
        self.assertEqual(len(board.neighbors(1, 1)), 8)
        self.assertEqual(sorted(board.neighbors(0, 0)), [(0, 1), (1, 0), (1, 1)])
        self.assertEqual(len(board.neighbors(0, 1)), 5)

    def test_snapshot_is_a_copy(self):
        board = MinesweeperBoard(2, 2, 0)
        snapshot = board.snapshot()
        snapshot[0][0].is_revealed = True
        self.assertFalse(board.grid[0][0].is_revealed)

    def test_debug_text(self):
        board = MinesweeperBoard(2, 2, 1, mine_positions=[(0, 0)])
        self.assertEqual(str(board), " .  . \n .  . ")
        board.reveal_all()
        self.assertEqual(str(board), " *  1 \n 1  1 ")

    def test_invalid_construction(self):
        with self.assertRaises(InvalidDimensions):
            MinesweeperBoard(0, 3, 0)
        with self.assertRaises(InvalidDimensions):
            MinesweeperBoard(3, -1, 0)
        with self.assertRaises(InvalidMineCount):
            MinesweeperBoard(3, 3, -1)
        with self.assertRaises(MineCountExceedsCapacity):
            MinesweeperBoard(3, 3, 10)

    def test_invalid_fixed_layout(self):
        with self.assertRaises(InvalidMineCount):
            MinesweeperBoard(3, 3, 2, mine_positions=[(0, 0)])
        with self.assertRaises(InvalidMineCount):
            MinesweeperBoard(3, 3, 2, mine_positions=[(0, 0), (0, 0)])
        with self.assertRaises(InvalidMineCount):
            MinesweeperBoard(3, 3, 1, mine_positions=[(3, 0)])


if __name__ == "__main__":
    unittest.main()
