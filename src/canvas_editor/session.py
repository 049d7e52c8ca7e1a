"""Explicit editor session: all mutable state for one connection."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from canvas_editor.animation import AnimationEngine, TriggerDetector
from canvas_editor.buffer import AutoWrap, Buffer
from canvas_editor.config import EditorConfig
from canvas_editor.protocol import DrawCommand
from canvas_editor.render import GridGeometry, Theme, project


@dataclass
class EditorSession:
    """Buffer, animations and static configuration owned by one dispatcher."""

    buffer: Buffer
    geometry: GridGeometry
    theme: Theme
    wrap: AutoWrap
    animations: AnimationEngine
    triggers: TriggerDetector
    name: str = field(default="default")

    @classmethod
    def create(
        cls,
        config: Optional[EditorConfig] = None,
        *,
        buffer: Optional[Buffer] = None,
        name: str = "default",
    ) -> "EditorSession":
        config = config or EditorConfig()
        engine = AnimationEngine(config.geometry, config.animation)
        return cls(
            buffer=buffer or Buffer(name=name),
            geometry=config.geometry,
            theme=config.theme,
            wrap=AutoWrap(config.geometry.max_line_width),
            animations=engine,
            triggers=TriggerDetector(engine),
            name=name,
        )

    def render(self) -> tuple[DrawCommand, ...]:
        return tuple(
            project(
                self.buffer.snapshot(),
                self.animations.active,
                self.geometry,
                self.theme,
            )
        )


__all__ = ["EditorSession"]
