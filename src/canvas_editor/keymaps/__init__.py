"""Declarative key tables, registry and resolver."""

from .models import ActionRef, Binding, KeyResolution
from .registry import KeymapConflictError, KeymapRegistry
from .resolver import KeymapResolver
from .defaults import (
    DEFAULT_ACTIONS,
    DEFAULT_BINDINGS,
    NAMED_CHARACTERS,
    load_default_keymaps,
)

__all__ = [
    "ActionRef",
    "Binding",
    "KeyResolution",
    "KeymapRegistry",
    "KeymapConflictError",
    "KeymapResolver",
    "DEFAULT_ACTIONS",
    "DEFAULT_BINDINGS",
    "NAMED_CHARACTERS",
    "load_default_keymaps",
]
