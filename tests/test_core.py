"""Tests for core data structures (no terminal needed)."""

import pytest

from term_resume.core.buffer import Buffer
from term_resume.core.cell import Cell
from term_resume.core.rect import Rect
from term_resume.core.style import Color, Modifier, Style
from term_resume.render.terminal import TerminalRenderer


class TestColor:
    """Tests for Color."""

    def test_named_constants(self) -> None:
        assert Color.CYAN == Color(6)
        assert Color.LIGHT_MAGENTA == Color(13)

    def test_from_name(self) -> None:
        assert Color.from_name("light_magenta") == Color.LIGHT_MAGENTA
        assert Color.from_name("Yellow") == Color.YELLOW

    def test_from_name_unknown(self) -> None:
        with pytest.raises(ValueError):
            Color.from_name("chartreuse")

    def test_index_range(self) -> None:
        with pytest.raises(ValueError):
            Color(16)

    def test_sgr_codes(self) -> None:
        assert Color.YELLOW.to_sgr_fg() == "33"
        assert Color.YELLOW.to_sgr_bg() == "43"
        assert Color.LIGHT_MAGENTA.to_sgr_fg() == "95"
        assert Color.DARK_GRAY.to_sgr_bg() == "100"


class TestStyle:
    """Tests for Style."""

    def test_patch_colors_override(self) -> None:
        base = Style(fg=Color.MAGENTA, bg=Color.BLACK)
        patched = base.patch(Style(fg=Color.YELLOW))
        assert patched == Style(fg=Color.YELLOW, bg=Color.BLACK)

    def test_patch_modifiers_combine(self) -> None:
        base = Style(modifier=Modifier.ITALIC)
        patched = base.patch(Style(modifier=Modifier.BOLD))
        assert patched.modifier == Modifier.BOLD | Modifier.ITALIC

    def test_to_sgr(self) -> None:
        style = Style(fg=Color.YELLOW, modifier=Modifier.BOLD)
        assert style.to_sgr() == "\x1b[0;1;33m"
        assert Style().to_sgr() == "\x1b[0m"

    def test_modifier_from_name(self) -> None:
        assert Modifier.from_name("bold") == Modifier.BOLD
        with pytest.raises(ValueError):
            Modifier.from_name("sparkly")


class TestCell:
    """Tests for Cell."""

    def test_default_cell(self) -> None:
        cell = Cell()
        assert cell.char == ' '
        assert cell.style == Style()

    def test_set_style_patches(self) -> None:
        cell = Cell(char='x', style=Style(fg=Color.RED))
        cell.set_style(Style(bg=Color.BLUE))
        assert cell.style == Style(fg=Color.RED, bg=Color.BLUE)


class TestRect:
    """Tests for Rect."""

    def test_edges(self) -> None:
        rect = Rect(2, 3, 10, 4)
        assert (rect.left, rect.right, rect.top, rect.bottom) == (2, 12, 3, 7)
        assert rect.area == 40

    def test_inner_clamps(self) -> None:
        assert Rect(0, 0, 3, 3).inner(2) == Rect(2, 2, 0, 0)

    def test_intersection(self) -> None:
        assert Rect(0, 0, 5, 5).intersection(Rect(3, 3, 5, 5)) == Rect(3, 3, 2, 2)
        assert Rect(0, 0, 2, 2).intersection(Rect(5, 5, 1, 1)).is_empty()


class TestBuffer:
    """Tests for Buffer."""

    def test_empty_buffer(self) -> None:
        buf = Buffer.empty(4, 2)
        assert buf.width == 4
        assert buf.height == 2
        assert buf.text() == "    \n    "

    def test_set_string_returns_next_column(self) -> None:
        buf = Buffer.empty(10, 1)
        assert buf.set_string(2, 0, "abc") == 5
        assert buf.line_text(0) == "  abc     "

    def test_set_string_clips_at_edge(self) -> None:
        buf = Buffer.empty(4, 1)
        buf.set_string(2, 0, "abcdef")
        assert buf.line_text(0) == "  ab"

    def test_set_string_max_width(self) -> None:
        buf = Buffer.empty(10, 1)
        buf.set_string(0, 0, "abcdef", max_width=3)
        assert buf.line_text(0).rstrip() == "abc"

    def test_writes_outside_are_dropped(self) -> None:
        buf = Buffer.empty(2, 2)
        buf.set_char(5, 5, 'x')
        buf.set_string(0, 9, "hello")
        assert buf.text() == "  \n  "

    def test_get_outside_raises(self) -> None:
        with pytest.raises(IndexError):
            Buffer.empty(2, 2).get(2, 0)

    def test_offset_area_uses_absolute_coordinates(self) -> None:
        buf = Buffer(Rect(2, 3, 4, 2))
        buf.set_char(2, 3, 'x')
        assert buf[2, 3].char == 'x'
        assert buf.line_text(3) == "x   "

    def test_set_style_on_area(self) -> None:
        buf = Buffer.empty(3, 3)
        buf.set_style(Rect(1, 1, 5, 5), Style(fg=Color.CYAN))
        assert buf[0, 0].style == Style()
        assert buf[2, 2].style.fg == Color.CYAN


class TestTerminalRenderer:
    """Tests for TerminalRenderer."""

    def test_positions_each_row(self) -> None:
        buf = Buffer.empty(2, 2)
        buf.set_string(0, 0, "ab")
        out = TerminalRenderer().render(buf)
        assert out.startswith("\x1b[1;1H\x1b[0mab")
        assert "\x1b[2;1H" in out
        assert out.endswith("\x1b[0m")

    def test_sgr_only_on_change(self) -> None:
        buf = Buffer.empty(4, 1)
        buf.set_string(0, 0, "abcd", Style(fg=Color.YELLOW))
        out = TerminalRenderer(reset_at_end=False).render(buf)
        assert out == "\x1b[1;1H\x1b[0;33mabcd"

    def test_style_switch(self) -> None:
        buf = Buffer.empty(2, 1)
        buf.set_char(0, 0, 'a', Style(fg=Color.RED))
        buf.set_char(1, 0, 'b')
        out = TerminalRenderer(reset_at_end=False).render(buf)
        assert out == "\x1b[1;1H\x1b[0;31ma\x1b[0mb"
