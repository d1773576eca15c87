"""Selectable list widget."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Sequence

from term_resume.cli.widgets.block import Block
from term_resume.core.buffer import Buffer
from term_resume.core.rect import Rect
from term_resume.core.style import Style


@dataclass(frozen=True)
class SelectableList:
    """
    One item label per row, with an optional highlighted selection.

    When ``selected`` is set the list scrolls just enough to keep it on
    screen, the row gets ``highlight_style`` and ``highlight_symbol`` is
    drawn in front of it (other rows are indented to line up).
    """
    items: Sequence[str] = ()
    block: Optional[Block] = None
    style: Style = field(default_factory=Style)
    selected: Optional[int] = None
    highlight_style: Style = field(default_factory=Style)
    highlight_symbol: str = ""

    def render(self, area: Rect, buf: Buffer) -> None:
        if self.block is not None:
            self.block.render(area, buf)
            area = self.block.inner(area)

        if area.is_empty():
            return

        buf.set_style(area, self.style)

        selected = self.selected
        if selected is not None and not 0 <= selected < len(self.items):
            selected = None

        offset = 0
        if selected is not None and selected >= area.height:
            offset = selected - area.height + 1

        show_symbol = selected is not None and bool(self.highlight_symbol)
        indent = " " * len(self.highlight_symbol) if show_symbol else ""

        visible = self.items[offset:offset + area.height]
        for row, item in enumerate(visible):
            y = area.top + row
            index = offset + row
            if index == selected:
                line = f"{self.highlight_symbol}{item}" if show_symbol else item
                buf.set_style(Rect(area.left, y, area.width, 1), self.highlight_style)
                buf.set_string(area.left, y, line, self.highlight_style, max_width=area.width)
            else:
                buf.set_string(area.left, y, f"{indent}{item}", self.style, max_width=area.width)
