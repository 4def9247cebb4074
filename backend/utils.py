# backend/utils.py

from typing import List, Tuple


def get_neighbors(row: int, col: int, rows: int, cols: int) -> List[Tuple[int, int]]:
    """
    Return a list of valid neighboring coordinates (8-way) for (row, col).
    """
    neighbors = []
    for dr in [-1, 0, 1]:
        for dc in [-1, 0, 1]:
            nr, nc = row + dr, col + dc
            if (dr != 0 or dc != 0) and 0 <= nr < rows and 0 <= nc < cols:
                neighbors.append((nr, nc))
    return neighbors


def format_board_debug(cells) -> str:
    """
    Render a grid of cells as text. Hidden cells are dots, mines are stars.
    """
    lines = []
    for row in cells:
        row_str = ""
        for cell in row:
            if not cell.is_revealed:
                row_str += " . "
            elif cell.is_mine:
                row_str += " * "
            else:
                row_str += f" {cell.adjacent_mines} "
        lines.append(row_str)
    return "\n".join(lines)
