"""Dataclasses describing key bindings and action metadata."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Callable, Literal, Mapping, Optional


@dataclass(frozen=True, slots=True)
class ActionRef:
    """Callable metadata used when a named key is pressed."""

    id: str
    handler: Callable[..., object]
    description: str = ""
    metadata: Mapping[str, object] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("ActionRef id cannot be empty")
        if not callable(self.handler):
            raise TypeError("handler must be callable")
        object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata)))

    def __call__(self, *args: object, **kwargs: object) -> object:
        return self.handler(*args, **kwargs)


@dataclass(frozen=True, slots=True)
class Binding:
    """Associates a key name reported by the rendering service with an action."""

    key: str
    action_id: str
    description: str = ""

    def __post_init__(self) -> None:
        if not self.key:
            raise ValueError("binding key cannot be empty")
        if not self.action_id:
            raise ValueError("binding action_id cannot be empty")


@dataclass(frozen=True, slots=True)
class KeyResolution:
    """Outcome of resolving one key name."""

    status: Literal["insert", "action", "miss"]
    key: str
    text: Optional[str] = None
    action: Optional[ActionRef] = None


__all__ = ["ActionRef", "Binding", "KeyResolution"]
