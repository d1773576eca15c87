"""Buffer - the grid of cells a frame is painted into."""

from __future__ import annotations

from typing import Iterator

from term_resume.core.rect import Rect
from term_resume.core.cell import Cell
from term_resume.core.style import Style


class Buffer:
    """
    A ``width x height`` grid of Cells covering ``area``.

    Coordinates are absolute terminal cell coordinates, so a widget can
    paint with the Rect it was given by the layout engine. Writes that
    fall outside ``area`` are dropped.
    """

    def __init__(self, area: Rect) -> None:
        self.area = area
        self._cells: list[list[Cell]] = [
            [Cell() for _ in range(area.width)] for _ in range(area.height)
        ]

    @classmethod
    def empty(cls, width: int, height: int) -> Buffer:
        """Create a blank buffer anchored at the origin."""
        return cls(Rect(0, 0, width, height))

    @property
    def width(self) -> int:
        return self.area.width

    @property
    def height(self) -> int:
        return self.area.height

    def contains(self, x: int, y: int) -> bool:
        """Whether (x, y) lies inside the buffer."""
        return (
            self.area.left <= x < self.area.right
            and self.area.top <= y < self.area.bottom
        )

    def get(self, x: int, y: int) -> Cell:
        """Get the cell at absolute position (x, y)."""
        if not self.contains(x, y):
            raise IndexError(f"({x}, {y}) outside buffer {self.area}")
        return self._cells[y - self.area.y][x - self.area.x]

    def __getitem__(self, pos: tuple[int, int]) -> Cell:
        x, y = pos
        return self.get(x, y)

    def set_char(self, x: int, y: int, char: str, style: Style | None = None) -> None:
        """Put one character, patching the cell style when given."""
        if not self.contains(x, y):
            return
        cell = self.get(x, y)
        cell.char = char
        if style is not None:
            cell.set_style(style)

    def set_string(
        self,
        x: int,
        y: int,
        text: str,
        style: Style | None = None,
        max_width: int | None = None,
    ) -> int:
        """
        Write ``text`` left to right starting at (x, y).

        Stops after ``max_width`` characters or at the buffer edge.
        Returns the column just past the last character written.
        """
        limit = self.area.right if max_width is None else min(self.area.right, x + max(0, max_width))
        for char in text:
            if x >= limit:
                break
            self.set_char(x, y, char, style)
            x += 1
        return x

    def set_style(self, area: Rect, style: Style) -> None:
        """Patch the style of every cell in ``area``."""
        clipped = area.intersection(self.area)
        for y in range(clipped.top, clipped.bottom):
            for x in range(clipped.left, clipped.right):
                self.get(x, y).set_style(style)

    def rows(self) -> Iterator[list[Cell]]:
        """Iterate over rows, top to bottom."""
        yield from self._cells

    def line_text(self, y: int) -> str:
        """Characters of row ``y`` without styling."""
        return ''.join(cell.char for cell in self._cells[y - self.area.y])

    def text(self) -> str:
        """All rows joined with newlines, without styling."""
        return '\n'.join(''.join(cell.char for cell in row) for row in self._cells)
