"""Animated sprite state and tuning constants."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class AnimationSettings:
    velocity_x: float = 4.0
    bounce_step: float = 0.4
    amplitude: float = 6.0
    lifetime_ticks: int = 60

    def __post_init__(self) -> None:
        if self.velocity_x <= 0:
            raise ValueError("velocity_x must be positive")
        if self.lifetime_ticks <= 0:
            raise ValueError("lifetime_ticks must be positive")


@dataclass(slots=True)
class Animation:
    """One glyph drifting right along a sine bounce."""

    glyph: str
    x: float
    y: float
    base_y: float
    velocity_x: float
    bounce_phase: float = 0.0
    remaining_ticks: int = 0


__all__ = ["Animation", "AnimationSettings"]
