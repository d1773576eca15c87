"""Text markup codecs."""

from term_resume.codec.style_tags import Span, StyleTagParser, parse

__all__ = ["Span", "StyleTagParser", "parse"]
