"""Outgoing draw commands and their textual encoding."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Union

COMMAND_SEPARATOR = ","
RECORD_TERMINATOR = "\n"


class ProtocolError(ValueError):
    """Raised when an object cannot be encoded as a draw command."""


@dataclass(frozen=True, slots=True)
class Clear:
    """Wipe the whole canvas."""


@dataclass(frozen=True, slots=True)
class Rect:
    x: int
    y: int
    width: int
    height: int
    color: str


@dataclass(frozen=True, slots=True)
class Text:
    x: int
    y: int
    color: str
    text: str


DrawCommand = Union[Clear, Rect, Text]


def sanitize_text(text: str) -> str:
    """Drop characters that would break the comma/newline framing."""

    return text.replace(COMMAND_SEPARATOR, "").replace("\r", "").replace("\n", "")


def encode_command(command: DrawCommand) -> str:
    """Return the protocol line for ``command`` without its terminator."""

    if isinstance(command, Clear):
        return "clear"
    fields: tuple[object, ...]
    if isinstance(command, Rect):
        fields = (
            "rect",
            command.x,
            command.y,
            command.width,
            command.height,
            command.color,
        )
    elif isinstance(command, Text):
        fields = (
            "text",
            command.x,
            command.y,
            command.color,
            sanitize_text(command.text),
        )
    else:
        raise ProtocolError(
            f"Cannot encode {type(command).__name__} as a draw command"
        )
    return COMMAND_SEPARATOR.join(str(value) for value in fields)


def encode_commands(commands: Iterable[DrawCommand]) -> bytes:
    """Encode a batch of commands into one newline-terminated payload."""

    payload = "".join(encode_command(cmd) + RECORD_TERMINATOR for cmd in commands)
    return payload.encode("utf-8")


__all__ = [
    "Clear",
    "Rect",
    "Text",
    "DrawCommand",
    "ProtocolError",
    "sanitize_text",
    "encode_command",
    "encode_commands",
]
