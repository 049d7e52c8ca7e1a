"""Cursor state tied to a BufferDocument."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

Cursor = Tuple[int, int]  # (line, column)


@dataclass(slots=True)
class BufferState:
    """Mutable cursor position."""

    cursor: Cursor = (0, 0)

    def set_cursor(self, line: int, col: int) -> None:
        self.cursor = (line, col)


__all__ = ["Cursor", "BufferState"]
