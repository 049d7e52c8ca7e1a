"""Editing verbs shared by key bindings and the input dispatcher."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from canvas_editor.session import EditorSession


def insert_text(session: EditorSession, text: str) -> bool:
    """Insert characters one at a time, re-running wrap and triggers after each."""

    for char in text:
        session.buffer.insert_char(char)
        session.wrap.apply(session.buffer)
        session.triggers.scan(session.buffer)
    return bool(text)


def insert_newline(session: EditorSession) -> bool:
    session.buffer.insert_newline()
    return True


def backspace(session: EditorSession) -> bool:
    return session.buffer.backspace()


def move_left(session: EditorSession) -> bool:
    return session.buffer.move_left()


def move_right(session: EditorSession) -> bool:
    return session.buffer.move_right()


def move_up(session: EditorSession) -> bool:
    return session.buffer.move_up()


def move_down(session: EditorSession) -> bool:
    return session.buffer.move_down()


__all__ = [
    "insert_text",
    "insert_newline",
    "backspace",
    "move_left",
    "move_right",
    "move_up",
    "move_down",
]
