"""Grid geometry and the render projector."""

from .geometry import GridGeometry
from .theme import Theme
from .projector import project

__all__ = ["GridGeometry", "Theme", "project"]
