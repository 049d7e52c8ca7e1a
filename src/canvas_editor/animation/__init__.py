"""Ambient glyph animations spawned by trigger words."""

from .models import Animation, AnimationSettings
from .engine import AnimationEngine
from .triggers import DEFAULT_TRIGGERS, TriggerDetector, TriggerRule, make_rules

__all__ = [
    "Animation",
    "AnimationSettings",
    "AnimationEngine",
    "TriggerDetector",
    "TriggerRule",
    "DEFAULT_TRIGGERS",
    "make_rules",
]
