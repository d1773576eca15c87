"""Cell - one character position of a frame."""

from dataclasses import dataclass, field

from term_resume.core.style import Style


@dataclass(slots=True)
class Cell:
    """
    A single character cell with its style.

    Widgets overwrite cells in place while painting a frame.
    """
    char: str = ' '
    style: Style = field(default_factory=Style)

    def set_style(self, style: Style) -> None:
        """Patch this cell's style with ``style``."""
        self.style = self.style.patch(style)
