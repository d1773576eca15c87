"""Keyboard input: raw bytes from a file descriptor decoded into KeyEvents."""

from __future__ import annotations

import os
import select
import sys
import time
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

from term_resume.cli.core.terminal import TerminalError

ESC = '\x1b'


class Key(Enum):
    """Non-printable keys the decoder recognizes."""
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    ENTER = auto()
    ESCAPE = auto()
    TAB = auto()
    BACKSPACE = auto()
    HOME = auto()
    END = auto()
    PAGE_UP = auto()
    PAGE_DOWN = auto()
    DELETE = auto()


@dataclass(frozen=True)
class KeyEvent:
    """
    One decoded key press.

    Exactly one of ``key`` and ``char`` is set for a recognized press.
    Both are None for an escape sequence nobody maps.
    """
    key: Optional[Key] = None
    char: Optional[str] = None
    raw: str = ""

    @property
    def is_char(self) -> bool:
        return self.char is not None and self.key is None


# Sequences after ESC. Terminals send arrows as CSI ("[C") normally and
# as SS3 ("OC") in application cursor mode.
ESCAPE_SEQUENCES: dict[str, Key] = {
    '[A': Key.UP, 'OA': Key.UP,
    '[B': Key.DOWN, 'OB': Key.DOWN,
    '[C': Key.RIGHT, 'OC': Key.RIGHT,
    '[D': Key.LEFT, 'OD': Key.LEFT,
    '[H': Key.HOME, '[1~': Key.HOME,
    '[F': Key.END, '[4~': Key.END,
    '[3~': Key.DELETE,
    '[5~': Key.PAGE_UP,
    '[6~': Key.PAGE_DOWN,
}

CONTROL_KEYS: dict[str, Key] = {
    '\r': Key.ENTER,
    '\n': Key.ENTER,
    '\t': Key.TAB,
    '\x7f': Key.BACKSPACE,
    '\x08': Key.BACKSPACE,
}


def _sequence_end(data: str) -> int:
    """Index just past the escape sequence that starts ``data``.

    ``data[0]`` is ESC and ``data[1]`` the introducer; the sequence runs
    to the first letter or ``~`` after that, or stops short of the next
    ESC.
    """
    for i in range(2, len(data)):
        ch = data[i]
        if ch == ESC:
            return i
        if ch.isalpha() or ch == '~':
            return i + 1
    return len(data)


def decode_key(data: str) -> tuple[Optional[KeyEvent], int]:
    """
    Decode the key press at the front of ``data``.

    Returns the event and how many characters it used. Control bytes
    with no meaning come back as ``(None, 1)`` so callers can drop them.
    """
    if not data:
        return None, 0

    first = data[0]
    if first == ESC:
        if len(data) == 1 or data[1] == ESC:
            return KeyEvent(key=Key.ESCAPE, raw=ESC), 1
        end = _sequence_end(data)
        raw = data[:end]
        return KeyEvent(key=ESCAPE_SEQUENCES.get(raw[1:]), raw=raw), end

    if first in CONTROL_KEYS:
        return KeyEvent(key=CONTROL_KEYS[first], raw=first), 1

    if first.isprintable():
        return KeyEvent(char=first, raw=first), 1

    return None, 1


def _ends_mid_sequence(pending: str) -> bool:
    """Whether the last ESC in ``pending`` starts a sequence still arriving."""
    start = pending.rfind(ESC)
    if start == -1:
        return False
    tail = pending[start + 1:]
    if tail in ESCAPE_SEQUENCES:
        return False
    return not (len(tail) > 1 and (tail[-1].isalpha() or tail[-1] == '~'))


class InputReader:
    """
    Reads key presses from a raw-mode file descriptor.

    os.read() is used directly so no bytes hide in Python's stdin
    buffer, which lets an escape sequence split across reads be put back
    together. A failed read or a closed stream raises TerminalError.
    """

    # How long a trailing ESC waits for the rest of its sequence
    ESCAPE_WAIT = 0.1

    def __init__(self, fd: Optional[int] = None) -> None:
        self._fd = sys.stdin.fileno() if fd is None else fd
        self._pending = ""

    def read(self, timeout: float = 0.1) -> Optional[KeyEvent]:
        """Next key press, or None if none was decoded within ``timeout``."""
        if not self._pending:
            if not self._poll(timeout):
                return None
            self._pending += self._read_chunk()
            self._await_sequence_tail()

        while self._pending:
            event, used = decode_key(self._pending)
            self._pending = self._pending[used:]
            if event is not None:
                return event
        return None

    def read_blocking(self) -> KeyEvent:
        """Block until a key press is decoded."""
        while True:
            event = self.read(timeout=1.0)
            if event is not None:
                return event

    def _await_sequence_tail(self) -> None:
        deadline = time.monotonic() + self.ESCAPE_WAIT
        while _ends_mid_sequence(self._pending):
            remaining = deadline - time.monotonic()
            if remaining <= 0:
                return
            if self._poll(min(remaining, 0.025)):
                self._pending += self._read_chunk()

    def _read_chunk(self) -> str:
        try:
            data = os.read(self._fd, 1024)
        except BlockingIOError:
            return ""
        except OSError as exc:
            raise TerminalError(f"Cannot read from terminal: {exc}") from exc
        if not data:
            raise TerminalError("Terminal input stream closed")
        return data.decode('utf-8', errors='replace')

    def _poll(self, timeout: float) -> bool:
        try:
            ready, _, _ = select.select([self._fd], [], [], timeout)
        except (ValueError, OSError) as exc:
            raise TerminalError(f"Cannot poll terminal input: {exc}") from exc
        return bool(ready)
