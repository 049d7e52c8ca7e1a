"""Projects buffer and animation state onto an ordered list of draw commands."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Iterable, List, Optional, Sequence

from canvas_editor.protocol import Clear, DrawCommand, Rect, Text

from .geometry import GridGeometry
from .theme import Theme

if TYPE_CHECKING:
    from canvas_editor.animation.models import Animation
    from canvas_editor.buffer import BufferView


def project(
    view: BufferView,
    animations: Iterable[Animation],
    geometry: GridGeometry,
    theme: Optional[Theme] = None,
) -> Sequence[DrawCommand]:
    """Return the full frame for ``view``.

    Background and text come first; animations and the cursor are drawn
    last so they land on top.
    """

    theme = theme or Theme()
    commands: List[DrawCommand] = [
        Clear(),
        Rect(0, 0, geometry.canvas_width, geometry.canvas_height, theme.background),
        Text(
            geometry.padding,
            max(0, (geometry.header_height - geometry.char_height) // 2),
            theme.header,
            theme.header_label,
        ),
    ]

    for index, line in enumerate(view.lines):
        commands.append(
            Text(geometry.padding, geometry.line_y(index), theme.text, line or " ")
        )

    for animation in animations:
        commands.append(
            Text(
                math.floor(animation.x),
                math.floor(animation.y),
                theme.animation,
                animation.glyph,
            )
        )

    line, col = view.cursor
    commands.append(
        Rect(
            geometry.column_x(col),
            geometry.line_y(line),
            geometry.cursor_width,
            geometry.char_height,
            theme.cursor,
        )
    )
    return tuple(commands)


__all__ = ["project"]
