"""Turns key names reported by the rendering service into edits or actions."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Optional

from .defaults import NAMED_CHARACTERS
from .models import KeyResolution
from .registry import KeymapRegistry


class KeymapResolver:
    """Resolves a key name against named characters first, then bindings.

    Named characters (punctuation key names and ``space``) insert their
    literal character. Any other single-character key inserts itself.
    Remaining names dispatch to a bound action or resolve to a miss.
    """

    def __init__(
        self,
        registry: KeymapRegistry,
        *,
        named_chars: Optional[Mapping[str, str]] = None,
    ) -> None:
        self._registry = registry
        self._named_chars: Mapping[str, str] = MappingProxyType(
            dict(named_chars if named_chars is not None else NAMED_CHARACTERS)
        )

    @property
    def named_chars(self) -> Mapping[str, str]:
        return self._named_chars

    def resolve(self, key: str) -> KeyResolution:
        literal = self._named_chars.get(key)
        if literal is not None:
            return KeyResolution(status="insert", key=key, text=literal)

        binding = self._registry.binding_for(key)
        if binding is not None:
            action = self._registry.get_action(binding.action_id)
            return KeyResolution(status="action", key=key, action=action)

        if len(key) == 1 and key.isprintable():
            return KeyResolution(status="insert", key=key, text=key)

        return KeyResolution(status="miss", key=key)


__all__ = ["KeymapResolver"]
