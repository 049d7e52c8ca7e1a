"""Editable text buffer: a line document and the cursor that edits it."""

from __future__ import annotations

from contextlib import AbstractContextManager
from dataclasses import dataclass
from typing import TYPE_CHECKING, ContextManager, Optional, Sequence

from canvas_editor.runtime import telemetry

from .document import BufferDocument
from .state import BufferState, Cursor
from .validation import clamp_column, ensure_cursor

if TYPE_CHECKING:
    from canvas_editor.render.geometry import GridGeometry


@dataclass(frozen=True, slots=True)
class BufferView:
    version: int
    lines: Sequence[str]
    cursor: Cursor


class Buffer:
    """Document plus cursor, mutated only through editing operations.

    Every operation is total over the valid state space: boundary cases
    (document start/end, empty lines) are no-ops rather than errors.
    """

    def __init__(
        self,
        *,
        name: str = "default",
        document: Optional[BufferDocument] = None,
        state: Optional[BufferState] = None,
    ) -> None:
        self.name = name
        self.document = document or BufferDocument()
        self.state = state or BufferState()
        ensure_cursor(self.document, self.state.cursor)

    @classmethod
    def from_text(
        cls, text: str, *, cursor: Cursor = (0, 0), name: str = "default"
    ) -> "Buffer":
        return cls(
            name=name,
            document=BufferDocument.from_text(text),
            state=BufferState(cursor=cursor),
        )

    @property
    def lines(self) -> Sequence[str]:
        return self.document.snapshot()

    @property
    def cursor(self) -> Cursor:
        return self.state.cursor

    @property
    def line_count(self) -> int:
        return self.document.line_count

    @property
    def current_line(self) -> str:
        return self.document.get_line(self.state.cursor[0])

    def snapshot(self) -> BufferView:
        return BufferView(
            version=self.document.version,
            lines=self.document.snapshot(),
            cursor=self.state.cursor,
        )

    def set_cursor(self, line: int, col: int) -> None:
        ensure_cursor(self.document, (line, col))
        self.state.set_cursor(line, col)

    # -- edits -----------------------------------------------------------

    def insert_char(self, char: str) -> None:
        with Transaction(self, "insert_char"):
            line, col = self.state.cursor
            text = self.document.get_line(line)
            self.document = self.document.replace_line(
                line, text[:col] + char + text[col:]
            )
            self.state.set_cursor(line, col + len(char))

    def insert_newline(self) -> None:
        with Transaction(self, "insert_newline"):
            line, col = self.state.cursor
            text = self.document.get_line(line)
            self.document = self.document.update_lines(
                line, line + 1, [text[:col], text[col:]]
            )
            self.state.set_cursor(line + 1, 0)

    def backspace(self) -> bool:
        line, col = self.state.cursor
        if col == 0 and line == 0:
            return False
        with Transaction(self, "backspace"):
            text = self.document.get_line(line)
            if col > 0:
                self.document = self.document.replace_line(
                    line, text[: col - 1] + text[col:]
                )
                self.state.set_cursor(line, col - 1)
            else:
                previous = self.document.get_line(line - 1)
                self.document = self.document.update_lines(
                    line - 1, line + 1, [previous + text]
                )
                self.state.set_cursor(line - 1, len(previous))
        return True

    def split_line(self, line: int, head: str, tail: str, cursor: Cursor) -> None:
        """Replace ``line`` with ``head`` followed by a new ``tail`` line."""

        with Transaction(self, "split_line"):
            self.document = self.document.update_lines(line, line + 1, [head, tail])
            self.set_cursor(*cursor)

    # -- navigation ------------------------------------------------------

    def move_left(self) -> bool:
        line, col = self.state.cursor
        if col > 0:
            self.state.set_cursor(line, col - 1)
        elif line > 0:
            self.state.set_cursor(line - 1, len(self.document.get_line(line - 1)))
        else:
            return False
        return True

    def move_right(self) -> bool:
        line, col = self.state.cursor
        if col < len(self.document.get_line(line)):
            self.state.set_cursor(line, col + 1)
        elif line < self.document.line_count - 1:
            self.state.set_cursor(line + 1, 0)
        else:
            return False
        return True

    def move_up(self) -> bool:
        return self._move_vertical(-1)

    def move_down(self) -> bool:
        return self._move_vertical(1)

    def _move_vertical(self, delta: int) -> bool:
        line, col = self.state.cursor
        target = line + delta
        if target < 0 or target >= self.document.line_count:
            return False
        # The clamped column is not remembered for the next vertical move.
        self.state.set_cursor(target, clamp_column(self.document, target, col))
        return True

    def map_point_to_cursor(
        self, px: float, py: float, geometry: GridGeometry
    ) -> bool:
        """Move the cursor to the cell under a pixel; off-document clicks do nothing."""

        line, col = geometry.cell_at(px, py)
        if line < 0 or line >= self.document.line_count:
            return False
        self.state.set_cursor(line, clamp_column(self.document, line, col))
        return True


class Transaction(AbstractContextManager["Transaction"]):
    """One buffer edit, reported as a ``buffer::<label>`` span."""

    def __init__(self, buffer: Buffer, label: str) -> None:
        self.buffer = buffer
        self.label = label
        self._span_cm: Optional[ContextManager[object]] = None

    def __enter__(self) -> "Transaction":
        self._span_cm = telemetry.span(
            f"buffer::{self.label}",
            component="buffer",
            buffer=self.buffer.name,
            version=self.buffer.document.version,
        )
        self._span_cm.__enter__()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        if self._span_cm is not None:
            self._span_cm.__exit__(exc_type, exc, tb)
        return False


__all__ = ["Buffer", "BufferView", "Transaction"]
