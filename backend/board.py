import random
from dataclasses import dataclass, replace

import numpy as np

from .errors import InvalidDimensions, InvalidMineCount, MineCountExceedsCapacity
from .utils import format_board_debug, get_neighbors


@dataclass
class Cell:
    """
    A single square of the board.

    adjacent_mines is only meaningful for non-mine cells; mines keep 0.
    """
    is_mine: bool = False
    is_revealed: bool = False
    adjacent_mines: int = 0


class MinesweeperBoard:
    DEFAULT_NEIGHBORS = [
        (-1, -1), (-1, 0), (-1, 1),
        (0, -1),          (0, 1),
        (1, -1), (1, 0), (1, 1)
    ]

    def __init__(self, rows, cols, num_mines, rng=None, mine_positions=None):
        """
        rng:
            A random.Random used for mine placement. A fresh unseeded one is
            created when omitted.

        mine_positions:
            Optional fixed layout, an iterable of (row, col). When given it is
            used instead of random placement and must hold exactly num_mines
            distinct coordinates inside the board.
        """
        if rows <= 0 or cols <= 0:
            raise InvalidDimensions(
                f"Board dimensions must be positive, got {rows}x{cols}."
            )
        if num_mines < 0:
            raise InvalidMineCount(f"Mine count cannot be negative, got {num_mines}.")
        if num_mines > rows * cols:
            raise MineCountExceedsCapacity(
                f"Cannot place {num_mines} mines on a {rows}x{cols} board "
                f"({rows * cols} cells)."
            )

        self.rows = rows
        self.cols = cols
        self.num_mines = num_mines
        self.rng = rng if rng is not None else random.Random()
        self.mine_positions = None
        if mine_positions is not None:
            self.mine_positions = self._check_layout(mine_positions)

        self.grid = []
        self._init_board()

    def _check_layout(self, mine_positions):
        layout = []
        seen = set()
        for row, col in mine_positions:
            if not self.is_valid_coord(row, col):
                raise InvalidMineCount(f"Mine position {(row, col)} is outside the board.")
            if (row, col) in seen:
                raise InvalidMineCount(f"Mine position {(row, col)} is listed twice.")
            seen.add((row, col))
            layout.append((row, col))
        if len(layout) != self.num_mines:
            raise InvalidMineCount(
                f"Fixed layout has {len(layout)} mines, expected {self.num_mines}."
            )
        return layout

    def _init_board(self):
        self.grid = [[Cell() for _ in range(self.cols)] for _ in range(self.rows)]
        self._place_mines()
        self._compute_adjacent_counts()

    def _place_mines(self):
        """
        Mark num_mines distinct cells as mines.
        random.sample draws a uniform subset in one pass, so placement stays
        linear even when the board is nearly full.
        """
        if self.mine_positions is not None:
            mine_coords = self.mine_positions
        else:
            all_coords = [(r, c) for r in range(self.rows) for c in range(self.cols)]
            mine_coords = self.rng.sample(all_coords, self.num_mines)

        for r, c in mine_coords:
            self.grid[r][c].is_mine = True

    def _compute_adjacent_counts(self):
        mines = self.mine_mask().astype(np.int8)
        padded = np.pad(mines, 1)
        counts = np.zeros((self.rows, self.cols), dtype=np.int8)
        for dr, dc in self.DEFAULT_NEIGHBORS:
            counts += padded[1 + dr:1 + dr + self.rows, 1 + dc:1 + dc + self.cols]

        for r in range(self.rows):
            for c in range(self.cols):
                cell = self.grid[r][c]
                cell.adjacent_mines = 0 if cell.is_mine else int(counts[r, c])

    def is_valid_coord(self, row, col):
        for value in (row, col):
            if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
                return False
        return 0 <= row < self.rows and 0 <= col < self.cols

    def neighbors(self, row, col):
        return get_neighbors(row, col, self.rows, self.cols)

    def cell(self, row, col):
        if not self.is_valid_coord(row, col):
            return None
        return self.grid[row][col]

    def reveal_all(self):
        for row in self.grid:
            for cell in row:
                cell.is_revealed = True

    def mine_mask(self) -> np.ndarray:
        return np.array(
            [[cell.is_mine for cell in row] for row in self.grid], dtype=bool
        )

    def count_hidden_safe_cells(self) -> int:
        return sum(
            1 for row in self.grid for cell in row
            if not cell.is_mine and not cell.is_revealed
        )

    def __str__(self):
        return format_board_debug(self.grid)

    def snapshot(self):
        """
        Return a deep copy of the grid, safe to hand out to callers.
        """
        return [[replace(cell) for cell in row] for row in self.grid]
