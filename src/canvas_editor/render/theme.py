"""Colours and labels used by the render projector."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Theme:
    background: str = "#ffffff"
    text: str = "#000000"
    header: str = "#444444"
    cursor: str = "#000000"
    animation: str = "#000000"
    header_label: str = "Text Editor"


__all__ = ["Theme"]
