"""Tests for the inline style-tag parser."""

from term_resume.codec.style_tags import Span, StyleTagParser, parse
from term_resume.core.style import Color, Modifier, Style

BOLD_YELLOW = Style(fg=Color.YELLOW, modifier=Modifier.BOLD)


class TestParse:
    """Tests for well-formed style tags."""

    def test_plain_text(self) -> None:
        assert parse("plain text") == [Span("plain text", Style())]

    def test_empty(self) -> None:
        assert parse("") == []

    def test_single_tag(self) -> None:
        spans = parse("{mod=bold;fg=yellow Name:} Daisy T")
        assert spans == [Span("Name:", BOLD_YELLOW), Span(" Daisy T", Style())]

    def test_tag_in_the_middle(self) -> None:
        spans = parse("Type {mod=bold;fg=yellow q} to exit")
        assert [s.text for s in spans] == ["Type ", "q", " to exit"]
        assert spans[1].style == BOLD_YELLOW

    def test_span_text_may_contain_spaces(self) -> None:
        spans = parse("{fg=red two words}")
        assert spans == [Span("two words", Style(fg=Color.RED))]

    def test_tag_patches_base_style(self) -> None:
        base = Style(fg=Color.LIGHT_MAGENTA, bg=Color.BLACK)
        spans = parse("a{fg=yellow b}", base)
        assert spans[0] == Span("a", base)
        assert spans[1].style == Style(fg=Color.YELLOW, bg=Color.BLACK)

    def test_background_and_modifiers(self) -> None:
        (span,) = parse("{bg=blue;mod=bold;mod=italic x}")
        assert span.style.bg == Color.BLUE
        assert span.style.modifier == Modifier.BOLD | Modifier.ITALIC

    def test_adjacent_tags(self) -> None:
        spans = parse("{fg=red a}{fg=blue b}")
        assert spans == [Span("a", Style(fg=Color.RED)), Span("b", Style(fg=Color.BLUE))]

    def test_empty_tag_content_dropped(self) -> None:
        assert parse("{fg=red }") == []

    def test_newlines_inside_span(self) -> None:
        (span,) = parse("{fg=red a\nb}")
        assert span.text == "a\nb"


class TestMalformedTags:
    """Anything that isn't a valid tag stays literal."""

    def test_no_space(self) -> None:
        assert parse("{oops}") == [Span("{oops}", Style())]

    def test_unterminated(self) -> None:
        assert parse("{fg=red never closed") == [Span("{fg=red never closed", Style())]

    def test_unknown_color(self) -> None:
        assert parse("{fg=chartreuse x}") == [Span("{fg=chartreuse x}", Style())]

    def test_unknown_key(self) -> None:
        assert parse("{size=big x}") == [Span("{size=big x}", Style())]

    def test_pair_without_value(self) -> None:
        assert parse("{fg= x}") == [Span("{fg= x}", Style())]

    def test_not_a_pair(self) -> None:
        assert parse("{a b}") == [Span("{a b}", Style())]

    def test_brace_before_space(self) -> None:
        assert parse("{x} y") == [Span("{x} y", Style())]

    def test_literal_then_valid_tag(self) -> None:
        spans = parse("{ {fg=red x}")
        assert spans == [Span("{ ", Style()), Span("x", Style(fg=Color.RED))]


class TestParserReuse:
    """Tests for StyleTagParser state."""

    def test_parser_is_reusable(self) -> None:
        parser = StyleTagParser(Style(fg=Color.CYAN))
        first = parser.parse("{mod=bold a}")
        second = parser.parse("{mod=bold a}")
        assert first == second
        assert first[0].style == Style(fg=Color.CYAN, modifier=Modifier.BOLD)
