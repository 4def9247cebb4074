# backend/images.py

import logging
import mimetypes
import os
from typing import Dict, Optional, Tuple

from .state import GameState

logger = logging.getLogger(__name__)

CELL_HIDDEN = "cell_hidden"
MINE_NORMAL = "mine_normal"
MINE_HIT = "mine_hit"
STATUS_PLAYING = "status_playing"
STATUS_WON = "status_won"
STATUS_LOST = "status_lost"


def revealed_key(adjacent_mines: int) -> str:
    return f"cell_revealed_{adjacent_mines}"


IMAGE_FILES: Dict[str, str] = {
    CELL_HIDDEN: "gray-button.svg",
    revealed_key(0): "gray.svg",
    **{revealed_key(n): f"{n}.svg" for n in range(1, 9)},
    MINE_NORMAL: "mine.svg",
    MINE_HIT: "mine-red.svg",
    STATUS_PLAYING: "emoji-surprise-smile.svg",
    STATUS_WON: "emoji-sunglasses.svg",
    STATUS_LOST: "emoji-dead.svg",
}

IMAGE_KEYS: Tuple[str, ...] = tuple(IMAGE_FILES)

STATUS_KEYS = {
    GameState.PLAYING: STATUS_PLAYING,
    GameState.WON: STATUS_WON,
    GameState.LOST: STATUS_LOST,
}


def image_key_for_cell(board, game_state: GameState, hit_mine, row: int, col: int) -> Optional[str]:
    """
    Pick the asset key showing cell (row, col).

    Returns None when the coordinates are outside the board.
    """
    cell = board.cell(row, col)
    if cell is None:
        logger.warning("No image for invalid position (%s, %s)", row, col)
        return None

    if not cell.is_revealed:
        # Only reachable while playing: a finished game reveals every cell.
        return CELL_HIDDEN

    if not cell.is_mine:
        return revealed_key(cell.adjacent_mines)

    if game_state == GameState.LOST:
        return MINE_HIT if hit_mine == (row, col) else MINE_NORMAL
    if game_state == GameState.WON:
        return MINE_NORMAL
    return MINE_HIT


def game_status_image_key(game_state: GameState) -> str:
    return STATUS_KEYS[game_state]


class ImageStore:
    """
    Opaque image blobs looked up by asset key.

    Every file in IMAGE_FILES is read once from `directory`. Files that
    cannot be read are logged and left out, so get() returns None for them.
    """

    def __init__(self, directory: str):
        self.directory = directory
        self._images: Dict[str, bytes] = {}
        self._load_images()

    def _load_images(self):
        for key, file_name in IMAGE_FILES.items():
            file_path = os.path.join(self.directory, file_name)
            try:
                with open(file_path, "rb") as f:
                    self._images[key] = f.read()
            except OSError as exc:
                logger.error("Failed to load image %s for key %s: %s", file_path, key, exc)

    def get(self, key: Optional[str]) -> Optional[bytes]:
        if key is None:
            return None
        return self._images.get(key)

    def content_type(self, key: str) -> str:
        file_name = IMAGE_FILES.get(key, "")
        if file_name.endswith(".svg"):
            # not registered by mimetypes on every platform
            return "image/svg+xml"
        mime, _ = mimetypes.guess_type(file_name)
        return mime or "application/octet-stream"

    def __len__(self):
        return len(self._images)
