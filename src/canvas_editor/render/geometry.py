"""Fixed character-grid geometry shared by hit-testing and rendering."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True, slots=True)
class GridGeometry:
    """Pixel layout of the character grid, fixed for a session.

    ``line_pitch`` may exceed ``char_height`` to add spacing between lines.
    ``row_bias`` shifts click hit-testing by a fraction of a line; the
    rendering service anchors text at its baseline, so the default snaps a
    click to the nearest line origin rather than the one above it.
    """

    char_width: int = 8
    char_height: int = 14
    line_pitch: int = 18
    padding: int = 26
    header_height: int = 40
    max_line_width: int = 70
    canvas_width: int = 800
    canvas_height: int = 600
    cursor_width: int = 2
    row_bias: float = 0.5

    def __post_init__(self) -> None:
        if self.char_width <= 0 or self.line_pitch <= 0:
            raise ValueError("char_width and line_pitch must be positive")
        if self.max_line_width <= 0:
            raise ValueError("max_line_width must be positive")

    @property
    def text_top(self) -> int:
        """Y coordinate of the first document line."""

        return self.header_height + self.padding

    def line_y(self, line: int) -> int:
        return self.text_top + line * self.line_pitch

    def column_x(self, col: int) -> int:
        return self.padding + col * self.char_width

    def cell_at(self, px: float, py: float) -> Tuple[int, int]:
        """Return the unclamped ``(line, col)`` cell under a pixel."""

        line = math.floor((py - self.text_top) / self.line_pitch + self.row_bias)
        col = math.floor((px - self.padding) / self.char_width)
        return line, col


__all__ = ["GridGeometry"]
