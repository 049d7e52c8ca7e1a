"""Textual drawing protocol spoken with the rendering service."""

from .commands import (
    Clear,
    DrawCommand,
    ProtocolError,
    Rect,
    Text,
    encode_command,
    encode_commands,
    sanitize_text,
)
from .events import InputEvent, KeyDown, MouseDown, Resize, decode_event
from .framing import LineFramer

__all__ = [
    "Clear",
    "Rect",
    "Text",
    "DrawCommand",
    "ProtocolError",
    "encode_command",
    "encode_commands",
    "sanitize_text",
    "KeyDown",
    "MouseDown",
    "Resize",
    "InputEvent",
    "decode_event",
    "LineFramer",
]
