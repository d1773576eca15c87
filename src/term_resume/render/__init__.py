"""Renderers for outputting painted frames."""

from term_resume.render.terminal import TerminalRenderer

__all__ = ["TerminalRenderer"]
