"""Built-in key tables: named punctuation characters and editing actions."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from canvas_editor.actions import editing

from .models import ActionRef, Binding
from .registry import KeymapRegistry

# Key names as reported by the rendering service (X11/Tk keysyms).
NAMED_CHARACTERS: Mapping[str, str] = MappingProxyType(
    {
        "space": " ",
        "period": ".",
        "comma": ",",
        "exclam": "!",
        "question": "?",
        "apostrophe": "'",
        "quotedbl": '"',
        "colon": ":",
        "semicolon": ";",
        "minus": "-",
        "underscore": "_",
        "slash": "/",
        "backslash": "\\",
        "parenleft": "(",
        "parenright": ")",
        "bracketleft": "[",
        "bracketright": "]",
        "braceleft": "{",
        "braceright": "}",
        "plus": "+",
        "equal": "=",
        "asterisk": "*",
        "ampersand": "&",
        "at": "@",
        "numbersign": "#",
        "dollar": "$",
        "percent": "%",
        "asciicircum": "^",
        "asciitilde": "~",
        "grave": "`",
        "bar": "|",
        "less": "<",
        "greater": ">",
    }
)

DEFAULT_ACTIONS: tuple[ActionRef, ...] = (
    ActionRef(
        id="edit.backspace",
        handler=editing.backspace,
        description="Delete the character before the cursor",
    ),
    ActionRef(
        id="edit.newline",
        handler=editing.insert_newline,
        description="Split the line at the cursor",
    ),
    ActionRef(
        id="cursor.left",
        handler=editing.move_left,
        description="Move cursor left",
    ),
    ActionRef(
        id="cursor.right",
        handler=editing.move_right,
        description="Move cursor right",
    ),
    ActionRef(
        id="cursor.up",
        handler=editing.move_up,
        description="Move cursor up",
    ),
    ActionRef(
        id="cursor.down",
        handler=editing.move_down,
        description="Move cursor down",
    ),
)

DEFAULT_BINDINGS: tuple[Binding, ...] = (
    Binding(key="BackSpace", action_id="edit.backspace"),
    Binding(key="Return", action_id="edit.newline"),
    Binding(key="Enter", action_id="edit.newline"),
    Binding(key="KP_Enter", action_id="edit.newline"),
    Binding(key="Left", action_id="cursor.left"),
    Binding(key="Right", action_id="cursor.right"),
    Binding(key="Up", action_id="cursor.up"),
    Binding(key="Down", action_id="cursor.down"),
)


def load_default_keymaps(registry: KeymapRegistry) -> KeymapRegistry:
    for action in DEFAULT_ACTIONS:
        registry.register_action(action, replace=True)
    for binding in DEFAULT_BINDINGS:
        registry.register_binding(binding, replace=True)
    return registry


__all__ = [
    "NAMED_CHARACTERS",
    "DEFAULT_ACTIONS",
    "DEFAULT_BINDINGS",
    "load_default_keymaps",
]
