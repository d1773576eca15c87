"""Tests for the event channel and producers."""

import os
import queue

import pytest

from term_resume.cli.core.events import (
    EventChannel,
    FailureEvent,
    InputEvent,
    KeyboardProducer,
    TickEvent,
    TickProducer,
)
from term_resume.cli.core.input import Key, KeyEvent
from term_resume.cli.core.terminal import TerminalError

RIGHT = InputEvent(KeyEvent(key=Key.RIGHT, raw="\x1b[C"))
LEFT = InputEvent(KeyEvent(key=Key.LEFT, raw="\x1b[D"))


def _drain(channel: EventChannel) -> list:
    events = []
    while True:
        try:
            events.append(channel.recv(timeout=0))
        except queue.Empty:
            return events


class TestEventChannel:
    """Tests for EventChannel."""

    def test_fifo_order(self) -> None:
        channel = EventChannel()
        sent = [TickEvent(), RIGHT, TickEvent(), LEFT]
        for event in sent:
            channel.send(event)
        assert [channel.recv() for _ in sent] == sent

    def test_drained_channel_is_empty(self) -> None:
        channel = EventChannel()
        channel.send(TickEvent())
        channel.send(RIGHT)
        assert _drain(channel) == [TickEvent(), RIGHT]
        with pytest.raises(queue.Empty):
            channel.recv(timeout=0)

    def test_recv_timeout(self) -> None:
        with pytest.raises(queue.Empty):
            EventChannel().recv(timeout=0.01)


class TestTickProducer:
    """Tests for TickProducer."""

    def test_sends_ticks_repeatedly(self) -> None:
        channel = EventChannel()
        producer = TickProducer(channel, interval=0.01)
        assert producer.daemon
        producer.start()
        assert isinstance(channel.recv(timeout=2.0), TickEvent)
        assert isinstance(channel.recv(timeout=2.0), TickEvent)


class TestKeyboardProducer:
    """Tests for KeyboardProducer."""

    def test_forwards_keys_and_stops_after_quit(self, key_pipe) -> None:
        reader, write_fd = key_pipe
        channel = EventChannel()
        os.write(write_fd, b"\x1b[Cxq\x1b[D")

        producer = KeyboardProducer(reader, channel, quit_char="q")
        producer.start()
        producer.join(timeout=5.0)

        assert not producer.is_alive()
        events = _drain(channel)
        assert all(isinstance(e, InputEvent) for e in events)
        assert events[0].key.key == Key.RIGHT
        assert [e.key.char for e in events[1:]] == ["x", "q"]

    def test_read_failure_sent_as_failure_event(self, key_pipe) -> None:
        reader, write_fd = key_pipe
        channel = EventChannel()
        os.close(write_fd)

        producer = KeyboardProducer(reader, channel)
        producer.start()
        event = channel.recv(timeout=5.0)
        producer.join(timeout=5.0)

        assert isinstance(event, FailureEvent)
        assert isinstance(event.error, TerminalError)
        assert not producer.is_alive()
