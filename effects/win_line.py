"""
Winning line geometry.
Works out where to draw the line through a completed pattern.
"""

import math
from dataclasses import dataclass
from typing import Sequence, Tuple

from logic.board import index_to_row_col


@dataclass
class WinLine:
    """
    A line from the centre of a pattern's first cell to the centre of its last.
    Coordinates are in pixels relative to the board's top-left corner.
    """
    x1: float
    y1: float
    x2: float
    y2: float
    length: float     # pixels
    angle: float      # degrees, 0 = pointing right, clockwise positive


def cell_center(index: int, cell_size: float, gap: float = 0.0) -> Tuple[float, float]:
    """
    Get the centre of a cell.

    Args:
        index: Cell index (0-8).
        cell_size: Width/height of one cell in pixels.
        gap: Space between neighbouring cells in pixels.

    Returns:
        (x, y) in pixels.
    """
    row, col = index_to_row_col(index)
    x = col * (cell_size + gap) + cell_size / 2
    y = row * (cell_size + gap) + cell_size / 2
    return x, y


def compute_win_line(pattern: Sequence[int], cell_size: float, gap: float = 0.0) -> WinLine:
    """
    Compute the line to draw over a winning pattern.

    Only the first and last cells matter, the middle one lies on the line.

    Args:
        pattern: The winning cell indices.
        cell_size: Width/height of one cell in pixels.
        gap: Space between neighbouring cells in pixels.

    Returns:
        The WinLine.
    """
    x1, y1 = cell_center(pattern[0], cell_size, gap)
    x2, y2 = cell_center(pattern[-1], cell_size, gap)

    length = math.hypot(x2 - x1, y2 - y1)
    # Screen y grows downwards, so positive angles turn clockwise
    angle = math.degrees(math.atan2(y2 - y1, x2 - x1))

    return WinLine(x1=x1, y1=y1, x2=x2, y2=y2, length=length, angle=angle)
