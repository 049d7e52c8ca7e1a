"""Input dispatcher wiring protocol events to the editor session."""

from .dispatcher import DispatcherHooks, InputDispatcher

__all__ = ["DispatcherHooks", "InputDispatcher"]
