"""Keymap registry responsible for storing actions and bindings."""

from __future__ import annotations

from typing import Dict, Optional

from canvas_editor.runtime.telemetry import span

from .models import ActionRef, Binding


class KeymapConflictError(RuntimeError):
    """Raised when a key is already bound to a different action."""

    def __init__(self, binding: Binding, existing: Binding):
        super().__init__(
            f"Key '{binding.key}' is already bound to '{existing.action_id}'"
        )
        self.binding = binding
        self.existing = existing


class KeymapRegistry:
    """Owns action references and key bindings."""

    def __init__(self) -> None:
        self._actions: Dict[str, ActionRef] = {}
        self._bindings: Dict[str, Binding] = {}

    def get_action(self, action_id: str) -> ActionRef:
        try:
            return self._actions[action_id]
        except KeyError as exc:
            raise KeyError(f"Action '{action_id}' is not registered") from exc

    def binding_for(self, key: str) -> Optional[Binding]:
        return self._bindings.get(key)

    def register_action(self, action: ActionRef, *, replace: bool = False) -> ActionRef:
        with span("keymaps::register_action", component="keymaps", action=action.id):
            if not replace and action.id in self._actions:
                raise ValueError(f"Action '{action.id}' already registered")
            self._actions[action.id] = action
            return action

    def register_binding(self, binding: Binding, *, replace: bool = False) -> Binding:
        with span("keymaps::register_binding", component="keymaps", key=binding.key) as handle:
            if binding.action_id not in self._actions:
                handle.note("missing_action", binding.action_id)
                raise KeyError(
                    f"Binding '{binding.key}' references unknown action "
                    f"'{binding.action_id}'"
                )

            existing = self._bindings.get(binding.key)
            if existing is not None and existing != binding and not replace:
                handle.note("bound_to", existing.action_id)
                raise KeymapConflictError(binding, existing)

            self._bindings[binding.key] = binding
            return binding


__all__ = ["KeymapRegistry", "KeymapConflictError"]
