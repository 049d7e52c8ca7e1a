"""Keyword table and the detector that spawns animations from typed text."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

from canvas_editor.buffer import Buffer

from .engine import AnimationEngine


@dataclass(frozen=True, slots=True)
class TriggerRule:
    words: frozenset[str]
    glyph: str

    def matches(self, haystack: str) -> bool:
        """Substring match: "hotdog" triggers both "hot" and "dog"."""

        return any(word in haystack for word in self.words)


def make_rules(
    entries: Iterable[Tuple[Iterable[str], str]]
) -> Tuple[TriggerRule, ...]:
    return tuple(
        TriggerRule(frozenset(word.lower() for word in words), glyph)
        for words, glyph in entries
    )


DEFAULT_TRIGGERS: Tuple[TriggerRule, ...] = make_rules(
    (
        (("dog", "puppy", "pup"), "🐕"),
        (("cat", "kitten", "kitty"), "🐈"),
        (("fish",), "🐟"),
        (("bird",), "🐦"),
        (("love", "heart"), "❤️"),
        (("star",), "⭐"),
        (("fire", "hot"), "🔥"),
        (("rocket", "launch"), "🚀"),
        (("sun", "sunny"), "☀️"),
        (("rain",), "🌧️"),
    )
)


class TriggerDetector:
    """Scans the cursor's line and spawns one animation per matching glyph."""

    def __init__(
        self,
        engine: AnimationEngine,
        rules: Optional[Iterable[TriggerRule]] = None,
    ) -> None:
        self.engine = engine
        self.rules: Tuple[TriggerRule, ...] = (
            tuple(rules) if rules is not None else DEFAULT_TRIGGERS
        )

    def scan(self, buffer: Buffer) -> Tuple[str, ...]:
        line, _ = buffer.cursor
        haystack = buffer.current_line.lower()
        spawned = []
        for rule in self.rules:
            if self.engine.is_active(rule.glyph) or not rule.matches(haystack):
                continue
            if self.engine.spawn(rule.glyph, line) is not None:
                spawned.append(rule.glyph)
        return tuple(spawned)


__all__ = ["TriggerRule", "TriggerDetector", "DEFAULT_TRIGGERS", "make_rules"]
