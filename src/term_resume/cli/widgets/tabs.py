"""Tab bar widget."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Sequence

from term_resume.cli.widgets.block import Block
from term_resume.core.buffer import Buffer
from term_resume.core.rect import Rect
from term_resume.core.style import Style


@dataclass(frozen=True)
class Tabs:
    """
    A single row of tab titles with one highlighted.

    Titles are painted as `` Home │ About │ ...`` and cut off at the
    right edge; the bar never wraps.
    """
    titles: Sequence[str] = ()
    selection: int = 0
    block: Optional[Block] = None
    style: Style = field(default_factory=Style)
    highlight_style: Style = field(default_factory=Style)
    divider: str = "│"

    def render(self, area: Rect, buf: Buffer) -> None:
        if self.block is not None:
            self.block.render(area, buf)
            area = self.block.inner(area)

        if area.is_empty():
            return

        buf.set_style(area, self.style)

        x = area.left
        y = area.top
        right = area.right

        for index, title in enumerate(self.titles):
            if index > 0:
                x = buf.set_string(x, y, self.divider, self.style, max_width=right - x)
            if x >= right:
                break
            x = buf.set_string(x, y, " ", self.style, max_width=right - x)
            style = self.highlight_style if index == self.selection else self.style
            x = buf.set_string(x, y, title, style, max_width=right - x)
            x = buf.set_string(x, y, " ", self.style, max_width=right - x)
            if x >= right:
                break
