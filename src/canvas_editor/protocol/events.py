"""Incoming input events and their decoder."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from .commands import COMMAND_SEPARATOR


@dataclass(frozen=True, slots=True)
class KeyDown:
    key: str


@dataclass(frozen=True, slots=True)
class Resize:
    pass


@dataclass(frozen=True, slots=True)
class MouseDown:
    x: int
    y: int


InputEvent = Union[KeyDown, Resize, MouseDown]


def _parse_int(raw: str) -> Optional[int]:
    try:
        return int(raw.strip())
    except ValueError:
        return None


def decode_event(record: str) -> Optional[InputEvent]:
    """Decode one protocol record; unknown or malformed records yield ``None``."""

    kind, _, rest = record.partition(COMMAND_SEPARATOR)
    kind = kind.strip()

    if kind == "keydown":
        # The key name is everything after the first separator so the comma
        # key itself ("keydown,,") survives the split.
        return KeyDown(rest) if rest else None

    if kind == "resize":
        return Resize()

    if kind == "mousedown":
        parts = rest.split(COMMAND_SEPARATOR)
        if len(parts) < 2:
            return None
        x, y = _parse_int(parts[0]), _parse_int(parts[1])
        if x is None or y is None:
            return None
        return MouseDown(x, y)

    return None


__all__ = ["KeyDown", "Resize", "MouseDown", "InputEvent", "decode_event"]
