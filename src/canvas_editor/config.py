"""Session configuration with environment overrides."""

from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from typing import Mapping, Optional

from canvas_editor.animation.models import AnimationSettings
from canvas_editor.render.geometry import GridGeometry
from canvas_editor.render.theme import Theme

ENV_PREFIX = "CANVAS_EDITOR_"


def _env_int(
    env: Mapping[str, str], key: str, fallback: int, *, minimum: int = 1
) -> int:
    value = env.get(f"{ENV_PREFIX}{key}")
    if value is None:
        return fallback
    try:
        parsed = int(value)
    except ValueError:
        return fallback
    return parsed if parsed >= minimum else fallback


@dataclass(frozen=True)
class EditorConfig:
    host: str = "127.0.0.1"
    port: int = 5005
    tick_interval: float = 0.05
    initial_render_delay: float = 0.1
    read_size: int = 4096
    geometry: GridGeometry = field(default_factory=GridGeometry)
    theme: Theme = field(default_factory=Theme)
    animation: AnimationSettings = field(default_factory=AnimationSettings)

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "EditorConfig":
        """Build a config from ``CANVAS_EDITOR_*`` variables.

        Malformed or non-positive integers fall back to the defaults.
        """

        env = os.environ if env is None else env
        base = cls()
        geometry = replace(
            base.geometry,
            max_line_width=_env_int(
                env, "MAX_LINE_WIDTH", base.geometry.max_line_width
            ),
            canvas_width=_env_int(env, "CANVAS_WIDTH", base.geometry.canvas_width),
            canvas_height=_env_int(env, "CANVAS_HEIGHT", base.geometry.canvas_height),
        )
        tick_ms = _env_int(env, "TICK_MS", int(base.tick_interval * 1000))
        return replace(
            base,
            host=env.get(f"{ENV_PREFIX}HOST", base.host),
            port=_env_int(env, "PORT", base.port),
            tick_interval=tick_ms / 1000.0,
            geometry=geometry,
        )


__all__ = ["EditorConfig"]
