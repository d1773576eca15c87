"""Paragraph widget - styled, optionally wrapped text."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Optional

from term_resume.cli.widgets.block import Block
from term_resume.codec.style_tags import StyleTagParser
from term_resume.core.buffer import Buffer
from term_resume.core.rect import Rect
from term_resume.core.style import Style

TAB_WIDTH = 4


@dataclass(frozen=True)
class Paragraph:
    """
    Text with inline style tags, painted inside an optional Block.

    With ``wrap`` enabled, a line longer than the area continues on the
    next row; otherwise it is clipped at the right edge. ``scroll`` skips
    that many painted rows from the top.
    """
    text: str = ""
    block: Optional[Block] = None
    style: Style = field(default_factory=Style)
    wrap: bool = False
    scroll: int = 0

    def render(self, area: Rect, buf: Buffer) -> None:
        if self.block is not None:
            self.block.render(area, buf)
            area = self.block.inner(area)

        if area.is_empty():
            return

        buf.set_style(area, self.style)

        for row, col, char, style in self._layout(area.width):
            row -= self.scroll
            if row < 0:
                continue
            if row >= area.height:
                break
            buf.set_char(area.left + col, area.top + row, char, style)

    def _characters(self) -> Iterator[tuple[str, Style]]:
        """Every character of the text with its resolved style."""
        for span in StyleTagParser(self.style).parse(self.text):
            for char in span.text:
                yield char, span.style

    def _layout(self, width: int) -> Iterator[tuple[int, int, str, Style]]:
        """
        Place characters on (row, column) positions.

        Clipped characters are not yielded; tabs become spaces up to the
        next tab stop.
        """
        row = 0
        col = 0

        for char, style in self._characters():
            if char == '\n':
                row += 1
                col = 0
                continue

            if char == '\t':
                pad = TAB_WIDTH - col % TAB_WIDTH
                chars = ' ' * pad
            elif char == '\r':
                continue
            else:
                chars = char

            for out in chars:
                if col >= width:
                    if not self.wrap:
                        continue
                    row += 1
                    col = 0
                yield row, col, out, style
                col += 1
