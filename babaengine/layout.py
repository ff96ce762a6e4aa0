"""Fitting a level's grid of cells into a window."""

from __future__ import annotations

from dataclasses import dataclass
from fractions import Fraction
from math import floor

SCREEN_WIDTH = 1280
SCREEN_HEIGHT = 720
PADDING_MIN_X = Fraction(1, 20)
PADDING_MIN_Y = Fraction(1, 20)


@dataclass(frozen=True)
class PlayingArea:
    """Where the grid sits in the window, in pixels."""

    origin_x: int
    origin_y: int
    width: int
    height: int
    cell_size: int

    @property
    def cells_x(self) -> int:
        return self.width // self.cell_size

    @property
    def cells_y(self) -> int:
        return self.height // self.cell_size

    def cell_origin(self, x: int, y: int) -> tuple[int, int]:
        """Top-left pixel of cell (x, y); ValueError outside the grid."""
        if not (0 <= x < self.cells_x and 0 <= y < self.cells_y):
            raise ValueError(f"cell ({x}, {y}) is outside the playing area")
        return self.origin_x + x * self.cell_size, self.origin_y + y * self.cell_size


def compute_playing_area(
    num_cells_x: int,
    num_cells_y: int,
    window_width: int = SCREEN_WIDTH,
    window_height: int = SCREEN_HEIGHT,
) -> PlayingArea:
    """Largest square-celled grid that fits the window, with minimum padding, centred."""
    if num_cells_x <= 0 or num_cells_y <= 0:
        raise ValueError("the level must have at least one cell in each direction")
    if window_width <= 0 or window_height <= 0:
        raise ValueError("the window must have a positive size")

    if Fraction(num_cells_x, num_cells_y) > Fraction(window_width, window_height):
        available = floor(window_width - PADDING_MIN_X * 2 * window_width)
        width = available - available % num_cells_x
        cell_size = width // num_cells_x
        height = num_cells_y * cell_size
    else:
        available = floor(window_height - PADDING_MIN_Y * 2 * window_height)
        height = available - available % num_cells_y
        cell_size = height // num_cells_y
        width = num_cells_x * cell_size

    if cell_size == 0:
        raise ValueError("the level has too many cells to fit the window")

    return PlayingArea(
        origin_x=(window_width - width) // 2,
        origin_y=(window_height - height) // 2,
        width=width,
        height=height,
        cell_size=cell_size,
    )