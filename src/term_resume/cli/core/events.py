"""Event channel and the two producers feeding the control loop.

The keyboard and tick producers each run on their own daemon thread and
push into one EventChannel; the control loop is the only consumer. The
channel is the only state the threads share.
"""

from __future__ import annotations

import queue
import threading
import time
from dataclasses import dataclass
from typing import Optional, Union

from loguru import logger

from term_resume.cli.core.input import InputReader, KeyEvent
from term_resume.cli.core.terminal import TerminalError


@dataclass(frozen=True)
class InputEvent:
    """A decoded key press."""
    key: KeyEvent


@dataclass(frozen=True)
class TickEvent:
    """Periodic wake-up with no payload."""


@dataclass(frozen=True)
class FailureEvent:
    """The keyboard producer hit a fatal terminal error."""
    error: TerminalError


Event = Union[InputEvent, TickEvent, FailureEvent]


class EventChannel:
    """Unbounded FIFO of events, many producers, one consumer."""

    def __init__(self) -> None:
        self._queue: queue.Queue[Event] = queue.Queue()

    def send(self, event: Event) -> None:
        self._queue.put(event)

    def recv(self, timeout: Optional[float] = None) -> Event:
        """
        Block until the next event arrives.

        Raises queue.Empty if ``timeout`` elapses first.
        """
        return self._queue.get(timeout=timeout)


class KeyboardProducer(threading.Thread):
    """
    Reads keys and sends one InputEvent per key press.

    Stops by itself after sending the quit key, independently of the
    consumer. A read failure is forwarded as a FailureEvent.
    """

    def __init__(self, reader: InputReader, channel: EventChannel, quit_char: str = 'q') -> None:
        super().__init__(name="term-resume-keyboard", daemon=True)
        self.reader = reader
        self.channel = channel
        self.quit_char = quit_char

    def run(self) -> None:
        logger.debug("Keyboard producer started")
        while True:
            try:
                key = self.reader.read_blocking()
            except TerminalError as exc:
                logger.error(f"Keyboard producer failed: {exc}")
                self.channel.send(FailureEvent(exc))
                return

            self.channel.send(InputEvent(key))
            if key.char == self.quit_char:
                break
        logger.debug("Keyboard producer saw quit key, stopping")


class TickProducer(threading.Thread):
    """
    Sends a TickEvent every ``interval`` seconds, forever.

    There is no stop signal: the thread is a daemon and ends with the
    process.
    """

    def __init__(self, channel: EventChannel, interval: float = 0.2) -> None:
        super().__init__(name="term-resume-tick", daemon=True)
        self.channel = channel
        self.interval = interval

    def run(self) -> None:
        logger.debug(f"Tick producer started ({self.interval:.3f}s)")
        while True:
            self.channel.send(TickEvent())
            time.sleep(self.interval)
