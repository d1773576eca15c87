"""Terminal backend - raw mode, cursor, screen and frame output."""

from __future__ import annotations

import os
import sys
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, Optional, TextIO

from loguru import logger

from term_resume.core.buffer import Buffer
from term_resume.render.terminal import TerminalRenderer


class TerminalError(RuntimeError):
    """The terminal could not be set up, read from or written to."""


@dataclass(frozen=True)
class TerminalSize:
    """Terminal dimensions."""
    rows: int
    cols: int


class Terminal:
    """
    Terminal I/O for the full-screen viewer.

    Owns the input file descriptor (for raw mode) and the output stream
    (for escape sequences and frames). Every failure surfaces as a
    TerminalError; nothing is retried.
    """

    def __init__(
        self,
        stdin_fd: Optional[int] = None,
        stdout: Optional[TextIO] = None,
    ) -> None:
        self.stdin_fd = sys.stdin.fileno() if stdin_fd is None else stdin_fd
        self.stdout = sys.stdout if stdout is None else stdout
        self.renderer = TerminalRenderer()
        self._saved_mode: Optional[list] = None

    def size(self) -> TerminalSize:
        """Get current terminal dimensions."""
        try:
            size = os.get_terminal_size(self.stdout.fileno())
        except (OSError, ValueError) as exc:
            raise TerminalError(f"Cannot query terminal size: {exc}") from exc
        return TerminalSize(size.lines, size.columns)

    def write(self, text: str) -> None:
        """Write text and flush it to the terminal."""
        try:
            self.stdout.write(text)
            self.stdout.flush()
        except (OSError, ValueError) as exc:
            raise TerminalError(f"Cannot write to terminal: {exc}") from exc

    def clear(self) -> None:
        """Clear screen and move cursor to home."""
        self.write('\x1b[2J\x1b[H')

    def reset(self) -> None:
        """Reset all terminal attributes."""
        self.write('\x1b[0m')

    def hide_cursor(self) -> None:
        self.write('\x1b[?25l')

    def show_cursor(self) -> None:
        self.write('\x1b[?25h')

    def draw(self, buffer: Buffer) -> None:
        """Flush a painted frame to the terminal."""
        self.write(self.renderer.render(buffer))

    def enter_raw_mode(self) -> None:
        """Switch input to raw mode, remembering the previous settings."""
        try:
            import termios
            import tty
        except ImportError as exc:
            raise TerminalError("Raw mode needs a POSIX terminal (termios)") from exc

        try:
            self._saved_mode = termios.tcgetattr(self.stdin_fd)
            tty.setraw(self.stdin_fd)
        except (termios.error, OSError) as exc:
            raise TerminalError(f"Cannot enter raw mode: {exc}") from exc

    def restore_mode(self) -> None:
        """Restore the input settings saved by enter_raw_mode()."""
        if self._saved_mode is None:
            return
        import termios

        try:
            termios.tcsetattr(self.stdin_fd, termios.TCSADRAIN, self._saved_mode)
        except (termios.error, OSError) as exc:
            raise TerminalError(f"Cannot restore terminal mode: {exc}") from exc
        finally:
            self._saved_mode = None

    @contextmanager
    def raw_mode(self) -> Iterator[None]:
        """Context manager for raw terminal mode."""
        self.enter_raw_mode()
        try:
            yield
        finally:
            self.restore_mode()

    @contextmanager
    def managed_mode(self) -> Iterator[None]:
        """
        Full TUI mode: raw input, hidden cursor, cleared screen.

        Teardown runs on every exit path, in reverse order: show the
        cursor, clear the screen, then give back the original mode.
        """
        with self.raw_mode():
            self.hide_cursor()
            self.clear()
            logger.debug("Terminal entered managed mode")
            try:
                yield
            finally:
                try:
                    self.show_cursor()
                    self.clear()
                    self.reset()
                finally:
                    logger.debug("Terminal leaving managed mode")
