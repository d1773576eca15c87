"""
term-resume: a resume you browse in the terminal.

Seven tabbed sections rendered full-screen; left/right arrows switch
sections and ``q`` quits.

Quick Start:
    $ term-resume

Library pieces:
    - Constraint layout engine (``term_resume.cli.core.layout``)
    - Cell buffer and ANSI frame encoder
    - Tab bar, block, paragraph, gauge and list widgets
    - Inline style-tag markup (``{mod=bold;fg=yellow text}``)
"""

__version__ = "0.1.0"

from term_resume.core.buffer import Buffer
from term_resume.core.rect import Rect
from term_resume.core.style import Color, Modifier, Style
from term_resume.codec.style_tags import Span, parse as parse_style_tags

__all__ = [
    "__version__",
    "Buffer",
    "Rect",
    "Color",
    "Modifier",
    "Style",
    "Span",
    "parse_style_tags",
]
