"""Base widget protocol."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from term_resume.core.buffer import Buffer
from term_resume.core.rect import Rect


@runtime_checkable
class Widget(Protocol):
    """
    Protocol for TUI widgets.

    A widget is a description of what to paint; it keeps no state
    between frames and paints only inside the Rect it is given.
    """

    def render(self, area: Rect, buf: Buffer) -> None:
        """Paint the widget into ``buf`` within ``area``."""
        ...
