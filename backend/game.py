# backend/game.py

import logging
import random
import threading
from datetime import datetime, timezone
from typing import Optional, Tuple

from .board import MinesweeperBoard
from .errors import GameInProgress
from .images import game_status_image_key, image_key_for_cell
from .state import GameState

logger = logging.getLogger(__name__)


def _now() -> datetime:
    return datetime.now(timezone.utc)


class GameEngine:
    """
    Owns a single board and the rules that move it from PLAYING to WON or LOST.

    All public methods take the engine lock, so reveals and resets are applied
    one at a time and readers never see a half-finished flood fill.
    """

    def __init__(self, rows: int, cols: int, num_mines: int, seed: int = None,
                 mine_positions=None):
        self.rows = rows
        self.cols = cols
        self.num_mines = num_mines
        self._rng = random.Random(seed)
        self._mine_positions = None if mine_positions is None else list(mine_positions)
        self._lock = threading.RLock()

        self._new_game()

    def _new_game(self):
        self.board = MinesweeperBoard(
            self.rows, self.cols, self.num_mines,
            rng=self._rng, mine_positions=self._mine_positions,
        )
        self._state = GameState.PLAYING
        self._remaining = self.board.count_hidden_safe_cells()
        self._hit_mine: Optional[Tuple[int, int]] = None
        self._start_time = _now()
        self._end_time: Optional[datetime] = None
        logger.info("New game started: %dx%d with %d mines", self.rows, self.cols, self.num_mines)

    def reveal_cell(self, row: int, col: int) -> None:
        """
        Reveal (row, col) and apply the consequences.

        The call is a no-op when the game is over, the coordinates are outside
        the board, or the cell is already revealed. Nothing is raised in those
        cases and nothing is returned in any case.
        """
        with self._lock:
            if self._state != GameState.PLAYING:
                logger.debug("Ignoring reveal (%s, %s): game is %s", row, col, self._state.value)
                return
            cell = self.board.cell(row, col)
            if cell is None or cell.is_revealed:
                logger.debug("Ignoring reveal (%s, %s)", row, col)
                return

            if cell.is_mine:
                cell.is_revealed = True
                self._hit_mine = (row, col)
                self._finish(GameState.LOST)
                return

            self._flood_reveal(row, col)

            if self._remaining == 0:
                self._finish(GameState.WON)

    def _flood_reveal(self, row: int, col: int) -> None:
        """
        Reveal a safe cell and expand through zero-count cells.
        is_revealed serves as the visited marker. Neighbors of a zero cell are
        never mines, so nothing pushed here can end the game.
        """
        stack = [(row, col)]
        while stack:
            r, c = stack.pop()
            cell = self.board.grid[r][c]
            if cell.is_revealed:
                continue
            cell.is_revealed = True
            self._remaining -= 1

            if cell.adjacent_mines == 0:
                for nr, nc in self.board.neighbors(r, c):
                    if not self.board.grid[nr][nc].is_revealed:
                        stack.append((nr, nc))

    def _finish(self, state: GameState) -> None:
        self._state = state
        self._end_time = _now()
        self.board.reveal_all()
        logger.info("Game %s after %s", state.value, self._end_time - self._start_time)

    def reset_game(self) -> None:
        """
        Start a new game with the same dimensions and mine count.
        Raises GameInProgress while the current game is still being played.
        """
        with self._lock:
            if self._state == GameState.PLAYING:
                raise GameInProgress(
                    "Cannot reset the game while it is still in progress."
                )
            self._new_game()

    def get_board(self):
        with self._lock:
            return self.board.snapshot()

    def get_game_state(self) -> GameState:
        with self._lock:
            return self._state

    def get_start_time(self) -> datetime:
        with self._lock:
            return self._start_time

    def get_end_time(self) -> Optional[datetime]:
        with self._lock:
            return self._end_time

    @property
    def remaining_non_mine_cells(self) -> int:
        with self._lock:
            return self._remaining

    @property
    def hit_mine(self) -> Optional[Tuple[int, int]]:
        with self._lock:
            return self._hit_mine

    def is_game_over(self) -> bool:
        with self._lock:
            return self._state != GameState.PLAYING

    def image_key_for_cell(self, row: int, col: int) -> Optional[str]:
        with self._lock:
            return image_key_for_cell(self.board, self._state, self._hit_mine, row, col)

    def game_status_image_key(self) -> str:
        with self._lock:
            return game_status_image_key(self._state)

    def get_state(self) -> dict:
        """
        Return the visible board and game status as JSON-safe values.
        Hidden cells are None, revealed mines "*", other revealed cells their count.
        """
        with self._lock:
            board = []
            for row in self.board.grid:
                visible = []
                for cell in row:
                    if not cell.is_revealed:
                        visible.append(None)
                    elif cell.is_mine:
                        visible.append("*")
                    else:
                        visible.append(cell.adjacent_mines)
                board.append(visible)

            return {
                "state": self._state.value,
                "rows": self.rows,
                "cols": self.cols,
                "num_mines": self.num_mines,
                "remaining": self._remaining,
                "hit_mine": list(self._hit_mine) if self._hit_mine else None,
                "start_time": self._start_time.isoformat(),
                "end_time": self._end_time.isoformat() if self._end_time else None,
                "board": board,
            }
