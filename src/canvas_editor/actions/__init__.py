"""High-level editing verbs bound to named keys."""

from .editing import (
    backspace,
    insert_newline,
    insert_text,
    move_down,
    move_left,
    move_right,
    move_up,
)

__all__ = [
    "insert_text",
    "insert_newline",
    "backspace",
    "move_left",
    "move_right",
    "move_up",
    "move_down",
]
