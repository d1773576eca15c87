"""Bordered container with an optional title."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntFlag
from typing import Optional

from term_resume.core.buffer import Buffer
from term_resume.core.rect import Rect
from term_resume.core.style import Style


class Borders(IntFlag):
    """Which sides of a Block get a border."""
    NONE = 0
    TOP = 1
    RIGHT = 2
    BOTTOM = 4
    LEFT = 8
    ALL = TOP | RIGHT | BOTTOM | LEFT


# Box drawing characters
HORIZONTAL = "─"
VERTICAL = "│"
TOP_LEFT = "┌"
TOP_RIGHT = "┐"
BOTTOM_LEFT = "└"
BOTTOM_RIGHT = "┘"


@dataclass(frozen=True)
class Block:
    """
    A border drawn on selected sides, plus a title.

    Other widgets take an optional Block and paint their content inside
    ``block.inner(area)``.
    """
    borders: Borders = Borders.NONE
    border_style: Style = field(default_factory=Style)
    title: Optional[str] = None
    title_style: Style = field(default_factory=Style)

    def inner(self, area: Rect) -> Rect:
        """Area left for content once borders and title are drawn."""
        x, y, width, height = area.x, area.y, area.width, area.height

        if self.borders & Borders.LEFT:
            x += 1
            width -= 1
        if self.borders & Borders.RIGHT:
            width -= 1
        if self.borders & Borders.TOP or self.title:
            y += 1
            height -= 1
        if self.borders & Borders.BOTTOM:
            height -= 1

        return Rect(x, y, max(0, width), max(0, height))

    def render(self, area: Rect, buf: Buffer) -> None:
        if area.is_empty():
            return

        left, right = area.left, area.right - 1
        top, bottom = area.top, area.bottom - 1

        if self.borders & Borders.LEFT:
            for y in range(top, bottom + 1):
                buf.set_char(left, y, VERTICAL, self.border_style)
        if self.borders & Borders.RIGHT:
            for y in range(top, bottom + 1):
                buf.set_char(right, y, VERTICAL, self.border_style)
        if self.borders & Borders.TOP:
            for x in range(left, right + 1):
                buf.set_char(x, top, HORIZONTAL, self.border_style)
        if self.borders & Borders.BOTTOM:
            for x in range(left, right + 1):
                buf.set_char(x, bottom, HORIZONTAL, self.border_style)

        # Corners only where both adjoining sides are drawn
        if self.borders & (Borders.LEFT | Borders.TOP) == Borders.LEFT | Borders.TOP:
            buf.set_char(left, top, TOP_LEFT, self.border_style)
        if self.borders & (Borders.RIGHT | Borders.TOP) == Borders.RIGHT | Borders.TOP:
            buf.set_char(right, top, TOP_RIGHT, self.border_style)
        if self.borders & (Borders.LEFT | Borders.BOTTOM) == Borders.LEFT | Borders.BOTTOM:
            buf.set_char(left, bottom, BOTTOM_LEFT, self.border_style)
        if self.borders & (Borders.RIGHT | Borders.BOTTOM) == Borders.RIGHT | Borders.BOTTOM:
            buf.set_char(right, bottom, BOTTOM_RIGHT, self.border_style)

        if self.title:
            title_x = left + 1 if self.borders & Borders.LEFT else left
            room = area.width
            if self.borders & Borders.LEFT:
                room -= 1
            if self.borders & Borders.RIGHT:
                room -= 1
            buf.set_string(title_x, top, self.title, self.title_style, max_width=room)
