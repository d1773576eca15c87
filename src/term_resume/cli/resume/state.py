"""Viewer state: the tab set and the last known terminal size."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Sequence

from term_resume.cli.core.terminal import TerminalSize


class TabSet:
    """
    An ordered, non-empty list of tab titles and the selected index.

    Navigation wraps around at both ends.
    """

    def __init__(self, titles: Sequence[str], selection: int = 0) -> None:
        if not titles:
            raise ValueError("TabSet needs at least one title")
        if not 0 <= selection < len(titles):
            raise ValueError(f"Selection {selection} out of range for {len(titles)} tabs")
        self.titles: tuple[str, ...] = tuple(titles)
        self.selection = selection

    def __len__(self) -> int:
        return len(self.titles)

    def __repr__(self) -> str:
        return f"TabSet({list(self.titles)!r}, selection={self.selection})"

    @property
    def current(self) -> str:
        """Title of the selected tab."""
        return self.titles[self.selection]

    def next(self) -> None:
        self.selection = (self.selection + 1) % len(self.titles)

    def previous(self) -> None:
        self.selection = (self.selection - 1 + len(self.titles)) % len(self.titles)


@dataclass
class AppState:
    """Everything the control loop mutates."""
    tabs: TabSet
    size: Optional[TerminalSize] = field(default=None)

    def update_size(self, size: TerminalSize) -> bool:
        """Store a new terminal size. Returns True if it changed."""
        if size == self.size:
            return False
        self.size = size
        return True
