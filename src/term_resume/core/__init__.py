"""Core data structures for frame painting."""

from term_resume.core.rect import Rect
from term_resume.core.style import Color, Modifier, Style
from term_resume.core.cell import Cell
from term_resume.core.buffer import Buffer

__all__ = ["Rect", "Color", "Modifier", "Style", "Cell", "Buffer"]
