"""Gauge widget - a labelled horizontal progress bar."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from term_resume.cli.widgets.block import Block
from term_resume.core.buffer import Buffer
from term_resume.core.rect import Rect
from term_resume.core.style import Style


@dataclass(frozen=True)
class Gauge:
    """
    A bar filled in proportion to ``percent``.

    Percent values outside 0-100 are clamped. The filled cells take the
    style's foreground as their background; label characters on top of
    the filled part swap colors so they stay readable.
    """
    percent: int = 0
    label: Optional[str] = None
    block: Optional[Block] = None
    style: Style = field(default_factory=Style)

    @property
    def clamped_percent(self) -> int:
        return max(0, min(100, self.percent))

    def render(self, area: Rect, buf: Buffer) -> None:
        if self.block is not None:
            self.block.render(area, buf)
            area = self.block.inner(area)

        if area.is_empty():
            return

        buf.set_style(area, self.style)

        percent = self.clamped_percent
        filled = (2 * area.width * percent + 100) // 200
        filled_style = Style(bg=self.style.fg)
        inverted_style = Style(fg=self.style.bg, bg=self.style.fg)

        for y in range(area.top, area.bottom):
            for x in range(area.left, area.left + filled):
                buf.set_char(x, y, ' ', filled_style)

        label = self.label if self.label is not None else f"{percent}%"
        label = label[:area.width]
        label_x = area.left + (area.width - len(label)) // 2
        label_y = area.top + area.height // 2

        for offset, char in enumerate(label):
            x = label_x + offset
            style = inverted_style if x < area.left + filled else None
            buf.set_char(x, label_y, char, style)
