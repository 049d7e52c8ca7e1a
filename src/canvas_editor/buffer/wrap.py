"""Auto-wrap policy applied to the current line after each insertion."""

from __future__ import annotations

from dataclasses import dataclass

from canvas_editor.runtime import telemetry

from .buffer import Buffer


@dataclass(frozen=True, slots=True)
class AutoWrap:
    """Moves the trailing word of an over-long line onto a new line.

    Only the cursor's line is inspected. A line without an interior space
    is left over-length; there is no character-level hard wrap.
    """

    max_line_width: int

    def apply(self, buffer: Buffer) -> bool:
        line, _ = buffer.cursor
        text = buffer.current_line
        if len(text) < self.max_line_width:
            return False

        split_at = text.rfind(" ")
        if split_at <= 0:
            return False

        head, tail = text[:split_at], text[split_at + 1 :]
        buffer.split_line(line, head, tail, (line + 1, len(tail)))
        telemetry.record_event(
            "buffer.wrap",
            level="debug",
            line=line,
            moved=len(tail),
        )
        return True


__all__ = ["AutoWrap"]
