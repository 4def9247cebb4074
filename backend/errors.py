# backend/errors.py


class MinesweeperError(Exception):
    """Base class for every error raised by the game engine."""


class InvalidDimensions(MinesweeperError, ValueError):
    """Raised when a board is requested with a non-positive row or column count."""


class InvalidMineCount(MinesweeperError, ValueError):
    """Raised when the mine count (or a fixed mine layout) is unusable."""


class MineCountExceedsCapacity(MinesweeperError, ValueError):
    """Raised when more mines are requested than the board has cells."""


class GameInProgress(MinesweeperError, RuntimeError):
    """Raised by reset while the current game is still being played."""
