"""Core document data structure for editor buffers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Sequence


@dataclass(slots=True)
class BufferDocument:
    """Immutable-ish text storage built on a simple list-of-lines model.

    A document always holds at least one (possibly empty) line. Mutating
    helpers return a new document with a bumped ``version``.
    """

    _lines: List[str] = field(default_factory=lambda: [""])
    version: int = 0

    def __post_init__(self) -> None:
        if not self._lines:
            self._lines = [""]

    @classmethod
    def from_text(cls, text: str) -> "BufferDocument":
        lines = text.split("\n")
        return cls(_lines=[line.rstrip("\r") for line in lines], version=0)

    def snapshot(self) -> Sequence[str]:
        """Return the current lines without exposing internal mutability."""

        return tuple(self._lines)

    def update_lines(
        self, start: int, end: int, new_lines: Iterable[str]
    ) -> "BufferDocument":
        """Return a document with ``[start:end]`` replaced by ``new_lines``."""

        lines = list(self._lines)
        lines[start:end] = list(new_lines)
        return BufferDocument(_lines=lines, version=self.version + 1)

    def replace_line(self, index: int, text: str) -> "BufferDocument":
        return self.update_lines(index, index + 1, [text])

    @property
    def line_count(self) -> int:
        return len(self._lines)

    def get_line(self, index: int) -> str:
        return self._lines[index]


__all__ = ["BufferDocument"]
