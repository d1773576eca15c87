"""Shared fixtures: a scripted terminal and pipe-backed keyboard input."""

import io
import os
from typing import Iterator, Sequence

import pytest

from term_resume.cli.core.input import InputReader
from term_resume.cli.core.terminal import Terminal, TerminalSize
from term_resume.core.buffer import Buffer


class FakeTerminal(Terminal):
    """
    Terminal writing into a StringIO with a scripted size sequence.

    Raw mode is recorded instead of touching a real TTY. Each call to
    size() returns the next scripted size; the last one repeats.
    """

    def __init__(self, sizes: Sequence[TerminalSize] = (TerminalSize(24, 80),)) -> None:
        super().__init__(stdin_fd=-1, stdout=io.StringIO())
        self._sizes = list(sizes)
        self.mode_calls: list[str] = []
        self.frames: list[Buffer] = []

    def size(self) -> TerminalSize:
        if len(self._sizes) > 1:
            return self._sizes.pop(0)
        return self._sizes[0]

    def enter_raw_mode(self) -> None:
        self.mode_calls.append("raw")

    def restore_mode(self) -> None:
        self.mode_calls.append("restore")

    def draw(self, buffer: Buffer) -> None:
        self.frames.append(buffer)
        super().draw(buffer)

    @property
    def output(self) -> str:
        return self.stdout.getvalue()


@pytest.fixture
def fake_terminal() -> FakeTerminal:
    return FakeTerminal()


@pytest.fixture
def key_pipe() -> Iterator[tuple[InputReader, int]]:
    """An InputReader on the read end of a pipe, plus the write end."""
    read_fd, write_fd = os.pipe()
    yield InputReader(read_fd), write_fd
    for fd in (read_fd, write_fd):
        try:
            os.close(fd)
        except OSError:
            pass
