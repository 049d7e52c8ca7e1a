"""TCP adapter speaking the drawing protocol with a rendering service."""

from .client import CanvasClient, CanvasConnectionError, Signal

__all__ = ["CanvasClient", "CanvasConnectionError", "Signal"]
