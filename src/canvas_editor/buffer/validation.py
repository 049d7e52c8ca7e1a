"""Validation helpers shared across buffer services."""

from __future__ import annotations

from .document import BufferDocument
from .state import Cursor


class BufferValidationError(RuntimeError):
    """Raised when callers provide out-of-bounds cursor info."""

    def __init__(self, message: str, *, cursor: Cursor | None = None) -> None:
        super().__init__(message)
        self.cursor = cursor


def ensure_cursor(document: BufferDocument, cursor: Cursor) -> Cursor:
    line, col = cursor
    if line < 0 or line >= document.line_count:
        raise BufferValidationError("Line out of range", cursor=cursor)
    if col < 0 or col > len(document.get_line(line)):
        raise BufferValidationError("Column out of range", cursor=cursor)
    return cursor


def clamp_column(document: BufferDocument, line: int, col: int) -> int:
    return max(0, min(col, len(document.get_line(line))))


__all__ = ["BufferValidationError", "ensure_cursor", "clamp_column"]
