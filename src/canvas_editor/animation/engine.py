"""Owns the live animations and advances them on each timer tick."""

from __future__ import annotations

import math
from typing import Dict, Optional, Sequence

from canvas_editor.render.geometry import GridGeometry
from canvas_editor.runtime import telemetry

from .models import Animation, AnimationSettings


class AnimationEngine:
    """Keeps at most one live animation per glyph."""

    def __init__(
        self,
        geometry: GridGeometry,
        settings: Optional[AnimationSettings] = None,
    ) -> None:
        self.geometry = geometry
        self.settings = settings or AnimationSettings()
        self._active: Dict[str, Animation] = {}

    @property
    def active(self) -> Sequence[Animation]:
        return tuple(self._active.values())

    def __len__(self) -> int:
        return len(self._active)

    def is_active(self, glyph: str) -> bool:
        return glyph in self._active

    def spawn(self, glyph: str, cursor_line: int) -> Optional[Animation]:
        """Start ``glyph`` one line above ``cursor_line`` unless it is already live."""

        if glyph in self._active:
            return None
        base_y = float(self.geometry.line_y(cursor_line - 1))
        animation = Animation(
            glyph=glyph,
            x=0.0,
            y=base_y,
            base_y=base_y,
            velocity_x=self.settings.velocity_x,
            bounce_phase=0.0,
            remaining_ticks=self.settings.lifetime_ticks,
        )
        self._active[glyph] = animation
        telemetry.record_event(
            "animation.spawn", level="debug", glyph=glyph, y=base_y
        )
        return animation

    def tick(self) -> bool:
        """Advance every animation; returns ``False`` when nothing was live."""

        if not self._active:
            return False

        settings = self.settings
        expired = []
        for glyph, animation in self._active.items():
            animation.x += animation.velocity_x
            animation.bounce_phase += settings.bounce_step
            animation.y = animation.base_y + settings.amplitude * math.sin(
                animation.bounce_phase
            )
            animation.remaining_ticks -= 1
            if (
                animation.x > self.geometry.canvas_width
                or animation.remaining_ticks <= 0
            ):
                expired.append(glyph)

        for glyph in expired:
            del self._active[glyph]
            telemetry.record_event(
                "animation.expire", level="debug", glyph=glyph
            )
        return True


__all__ = ["AnimationEngine"]
