"""Reusable TUI widgets."""

from term_resume.cli.widgets.base import Widget
from term_resume.cli.widgets.block import Block, Borders
from term_resume.cli.widgets.gauge import Gauge
from term_resume.cli.widgets.paragraph import Paragraph
from term_resume.cli.widgets.selectable_list import SelectableList
from term_resume.cli.widgets.tabs import Tabs

__all__ = [
    "Widget",
    "Block",
    "Borders",
    "Gauge",
    "Paragraph",
    "SelectableList",
    "Tabs",
]
