"""Parser for the inline style-tag markup used in paragraph text.

A tag switches style for a run of text::

    "Press {mod=bold;fg=yellow q} to quit"

The part between ``{`` and the first space is a ``;``-separated list of
``key=value`` pairs (``fg``, ``bg``, ``mod``); everything after that space
up to ``}`` is painted with the tag's style patched over the base style.
Anything that does not form a valid tag is kept as literal text.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from term_resume.core.style import Color, Modifier, Style


@dataclass(frozen=True)
class Span:
    """A run of text sharing one style."""
    text: str
    style: Style


class StyleTagParser:
    """
    Turn tagged text into a list of Spans.

    Stateless apart from the base style, so one parser can be reused
    across frames.
    """

    OPEN = '{'
    CLOSE = '}'

    def __init__(self, base: Style = Style()):
        self.base = base

    def parse(self, text: str) -> list[Span]:
        """Split ``text`` into styled spans."""
        spans: list[Span] = []
        plain: list[str] = []
        i = 0

        while i < len(text):
            if text[i] == self.OPEN:
                tag = self._match_tag(text, i)
                if tag is not None:
                    style, content, end = tag
                    self._flush(plain, spans)
                    if content:
                        spans.append(Span(content, self.base.patch(style)))
                    i = end
                    continue
            plain.append(text[i])
            i += 1

        self._flush(plain, spans)
        return spans

    def _flush(self, plain: list[str], spans: list[Span]) -> None:
        """Move pending literal text into a span."""
        if plain:
            spans.append(Span(''.join(plain), self.base))
            plain.clear()

    def _match_tag(self, text: str, start: int) -> Optional[tuple[Style, str, int]]:
        """
        Try to read a tag opening at ``start``.

        Returns (style, content, index after the closing brace), or None
        when the brace does not open a well-formed tag.
        """
        space = text.find(' ', start + 1)
        close = text.find(self.CLOSE, start + 1)
        if space == -1 or close == -1 or close < space:
            return None

        attrs = text[start + 1:space]
        if self.OPEN in attrs or '\n' in attrs:
            return None

        style = self._parse_attributes(attrs)
        if style is None:
            return None

        return style, text[space + 1:close], close + 1

    def _parse_attributes(self, attrs: str) -> Optional[Style]:
        """Parse ``key=value;key=value`` into a Style."""
        if not attrs:
            return None

        fg: Optional[Color] = None
        bg: Optional[Color] = None
        modifier = Modifier.NONE

        for pair in attrs.split(';'):
            key, sep, value = pair.partition('=')
            if not sep or not value:
                return None
            try:
                if key == 'fg':
                    fg = Color.from_name(value)
                elif key == 'bg':
                    bg = Color.from_name(value)
                elif key == 'mod':
                    modifier |= Modifier.from_name(value)
                else:
                    return None
            except ValueError:
                return None

        return Style(fg=fg, bg=bg, modifier=modifier)


def parse(text: str, base: Style = Style()) -> list[Span]:
    """Parse tagged text into spans using ``base`` as the default style."""
    return StyleTagParser(base).parse(text)
