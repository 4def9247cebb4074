from .board import Cell, MinesweeperBoard
from .errors import (
    GameInProgress,
    InvalidDimensions,
    InvalidMineCount,
    MineCountExceedsCapacity,
    MinesweeperError,
)
from .game import GameEngine
from .images import IMAGE_KEYS, ImageStore, game_status_image_key, image_key_for_cell
from .state import GameState

__all__ = [
    "Cell",
    "MinesweeperBoard",
    "GameEngine",
    "GameState",
    "GameInProgress",
    "InvalidDimensions",
    "InvalidMineCount",
    "MineCountExceedsCapacity",
    "MinesweeperError",
    "IMAGE_KEYS",
    "ImageStore",
    "game_status_image_key",
    "image_key_for_cell",
]
