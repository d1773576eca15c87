"""Core TUI infrastructure - terminal I/O, input, layout and events."""

from term_resume.cli.core.terminal import Terminal, TerminalError, TerminalSize
from term_resume.cli.core.input import InputReader, Key, KeyEvent, decode_key
from term_resume.cli.core.layout import (
    Direction,
    Fixed,
    Min,
    Percent,
    Rect,
    horizontal,
    split,
    vertical,
)
from term_resume.cli.core.events import (
    Event,
    EventChannel,
    FailureEvent,
    InputEvent,
    KeyboardProducer,
    TickEvent,
    TickProducer,
)

__all__ = [
    "Terminal",
    "TerminalError",
    "TerminalSize",
    "InputReader",
    "KeyEvent",
    "Key",
    "decode_key",
    "Direction",
    "Fixed",
    "Min",
    "Percent",
    "Rect",
    "horizontal",
    "split",
    "vertical",
    "Event",
    "EventChannel",
    "FailureEvent",
    "InputEvent",
    "KeyboardProducer",
    "TickEvent",
    "TickProducer",
]
