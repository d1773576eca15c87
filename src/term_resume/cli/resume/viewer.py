"""Interactive resume viewer - the control loop."""

from __future__ import annotations

from enum import Enum
from typing import Optional, Sequence

from loguru import logger

from term_resume.cli.core.events import (
    Event,
    EventChannel,
    FailureEvent,
    InputEvent,
    KeyboardProducer,
    TickEvent,
    TickProducer,
)
from term_resume.cli.core.input import InputReader, Key
from term_resume.cli.core.layout import Fixed, Min, vertical
from term_resume.cli.core.terminal import Terminal
from term_resume.cli.resume.sections import BORDER_STYLE, SECTIONS, Section
from term_resume.cli.resume.state import AppState, TabSet
from term_resume.cli.widgets import Block, Borders, Tabs
from term_resume.config import Settings
from term_resume.core.buffer import Buffer
from term_resume.core.style import Color, Style

TAB_STYLE = Style(fg=Color.MAGENTA)
TAB_HIGHLIGHT_STYLE = Style(fg=Color.YELLOW)


class LoopState(Enum):
    RUNNING = "running"
    TERMINATED = "terminated"


class ResumeViewer:
    """
    Full-screen resume viewer.

    Simple design:
    - Keyboard and tick producers push into one EventChannel
    - Each iteration re-checks the size, redraws, then blocks for an event
    - Left/right switch tabs, q quits, everything else just redraws
    """

    def __init__(
        self,
        terminal: Terminal,
        settings: Optional[Settings] = None,
        sections: Sequence[Section] = SECTIONS,
        channel: Optional[EventChannel] = None,
        start_producers: bool = True,
    ) -> None:
        self.terminal = terminal
        self.settings = settings or Settings()
        self.sections = tuple(sections)
        self.channel = channel or EventChannel()
        self.start_producers = start_producers
        self.state = AppState(tabs=TabSet([section.title for section in self.sections]))
        self.loop_state = LoopState.RUNNING

    def run(self) -> None:
        """Main application loop; returns once the quit key is handled."""
        with self.terminal.managed_mode():
            if self.start_producers:
                self._start_producers()

            while self.loop_state is LoopState.RUNNING:
                self._refresh_size()
                self.terminal.draw(self.render_frame())
                self.dispatch(self.channel.recv())

        logger.info("Viewer terminated")

    def _start_producers(self) -> None:
        reader = InputReader(self.terminal.stdin_fd)
        KeyboardProducer(reader, self.channel, self.settings.quit_char).start()
        TickProducer(self.channel, self.settings.tick_interval).start()

    def _refresh_size(self) -> None:
        size = self.terminal.size()
        previous = self.state.size
        if self.state.update_size(size):
            if previous is None:
                logger.info(f"Terminal size {size.cols}x{size.rows}")
            else:
                logger.info(
                    f"Terminal resized {previous.cols}x{previous.rows} -> {size.cols}x{size.rows}"
                )

    def dispatch(self, event: Event) -> None:
        """Apply one event to the state."""
        if isinstance(event, TickEvent):
            return

        if isinstance(event, FailureEvent):
            raise event.error

        if isinstance(event, InputEvent):
            key = event.key
            if key.char == self.settings.quit_char:
                logger.debug("Quit key pressed")
                self.loop_state = LoopState.TERMINATED
            elif key.key == Key.LEFT:
                self.state.tabs.previous()
                logger.debug(f"Tab -> {self.state.tabs.current}")
            elif key.key == Key.RIGHT:
                self.state.tabs.next()
                logger.debug(f"Tab -> {self.state.tabs.current}")

    def render_frame(self) -> Buffer:
        """Paint the tab bar and the selected section into a new buffer."""
        size = self.state.size
        buf = Buffer.empty(size.cols, size.rows) if size else Buffer.empty(0, 0)
        area = buf.area

        tab_area, body = vertical(area, [Fixed(3), Min(0)])
        Tabs(
            titles=self.state.tabs.titles,
            selection=self.state.tabs.selection,
            block=Block(
                borders=Borders.ALL,
                border_style=BORDER_STYLE,
                title="Sections",
                title_style=BORDER_STYLE,
            ),
            style=TAB_STYLE,
            highlight_style=TAB_HIGHLIGHT_STYLE,
        ).render(tab_area, buf)

        self.sections[self.state.tabs.selection].paint(body, buf)
        return buf


def run_viewer(settings: Optional[Settings] = None) -> None:
    """Launch the viewer on the process terminal."""
    ResumeViewer(Terminal(), settings).run()
