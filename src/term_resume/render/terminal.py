"""Encode a painted Buffer as terminal escape sequences."""

from term_resume.core.buffer import Buffer
from term_resume.core.style import Style


class TerminalRenderer:
    """
    Render a Buffer to an ANSI string that repaints the whole screen.

    Every row is positioned absolutely, so the output does not depend on
    where the cursor was left. SGR codes are only emitted when the style
    changes between consecutive cells.
    """

    def __init__(self, reset_at_end: bool = True):
        self.reset_at_end = reset_at_end

    def render(self, buffer: Buffer) -> str:
        """Render buffer to ANSI string."""
        parts: list[str] = []
        last_style: Style | None = None

        for row_index, row in enumerate(buffer.rows()):
            # Cursor positions are 1-indexed
            row_no = buffer.area.y + row_index + 1
            col_no = buffer.area.x + 1
            parts.append(f"\x1b[{row_no};{col_no}H")

            for cell in row:
                if cell.style != last_style:
                    parts.append(cell.style.to_sgr())
                    last_style = cell.style
                parts.append(cell.char)

        if self.reset_at_end:
            parts.append('\x1b[0m')

        return ''.join(parts)
