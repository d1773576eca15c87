"""Colors, text modifiers and cell styles."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntFlag
from typing import ClassVar, Optional


@dataclass(frozen=True)
class Color:
    """
    One of the 16 standard terminal colors.

    Index 0-7 map to SGR 30-37 / 40-47, index 8-15 to the bright
    variants 90-97 / 100-107.
    """
    index: int

    BLACK: ClassVar["Color"]
    RED: ClassVar["Color"]
    GREEN: ClassVar["Color"]
    YELLOW: ClassVar["Color"]
    BLUE: ClassVar["Color"]
    MAGENTA: ClassVar["Color"]
    CYAN: ClassVar["Color"]
    GRAY: ClassVar["Color"]
    DARK_GRAY: ClassVar["Color"]
    LIGHT_RED: ClassVar["Color"]
    LIGHT_GREEN: ClassVar["Color"]
    LIGHT_YELLOW: ClassVar["Color"]
    LIGHT_BLUE: ClassVar["Color"]
    LIGHT_MAGENTA: ClassVar["Color"]
    LIGHT_CYAN: ClassVar["Color"]
    WHITE: ClassVar["Color"]

    def __post_init__(self) -> None:
        if not 0 <= self.index <= 15:
            raise ValueError(f"Color index must be 0-15, got {self.index}")

    @classmethod
    def from_name(cls, name: str) -> "Color":
        """Look up a color by name (e.g. ``light_magenta``)."""
        try:
            return cls(COLOR_NAMES[name.lower()])
        except KeyError:
            raise ValueError(f"Unknown color name: {name!r}") from None

    def to_sgr_fg(self) -> str:
        """Return SGR parameter for this color as foreground."""
        if self.index < 8:
            return str(30 + self.index)
        return str(90 + self.index - 8)

    def to_sgr_bg(self) -> str:
        """Return SGR parameter for this color as background."""
        if self.index < 8:
            return str(40 + self.index)
        return str(100 + self.index - 8)


COLOR_NAMES: dict[str, int] = {
    "black": 0,
    "red": 1,
    "green": 2,
    "yellow": 3,
    "blue": 4,
    "magenta": 5,
    "cyan": 6,
    "gray": 7,
    "dark_gray": 8,
    "light_red": 9,
    "light_green": 10,
    "light_yellow": 11,
    "light_blue": 12,
    "light_magenta": 13,
    "light_cyan": 14,
    "white": 15,
}

for _name, _index in COLOR_NAMES.items():
    setattr(Color, _name.upper(), Color(_index))
del _name, _index


class Modifier(IntFlag):
    """Text attributes that can be combined."""
    NONE = 0
    BOLD = 1
    DIM = 2
    ITALIC = 4
    UNDERLINE = 8
    REVERSED = 16
    CROSSED_OUT = 32

    @classmethod
    def from_name(cls, name: str) -> "Modifier":
        """Look up a single modifier by name (e.g. ``bold``)."""
        try:
            return cls[name.upper()]
        except KeyError:
            raise ValueError(f"Unknown modifier: {name!r}") from None


# SGR parameter for each modifier, in emission order
MODIFIER_SGR: tuple[tuple[Modifier, str], ...] = (
    (Modifier.BOLD, "1"),
    (Modifier.DIM, "2"),
    (Modifier.ITALIC, "3"),
    (Modifier.UNDERLINE, "4"),
    (Modifier.REVERSED, "7"),
    (Modifier.CROSSED_OUT, "9"),
)


@dataclass(frozen=True)
class Style:
    """
    Foreground, background and modifiers for a run of cells.

    ``None`` colors mean "terminal default".
    """
    fg: Optional[Color] = None
    bg: Optional[Color] = None
    modifier: Modifier = Modifier.NONE

    def patch(self, other: "Style") -> "Style":
        """Overlay ``other`` on this style: its colors win, modifiers add up."""
        return Style(
            fg=other.fg if other.fg is not None else self.fg,
            bg=other.bg if other.bg is not None else self.bg,
            modifier=self.modifier | other.modifier,
        )

    def to_sgr(self) -> str:
        """Full SGR sequence for this style, starting from a reset."""
        params = ["0"]
        for flag, code in MODIFIER_SGR:
            if self.modifier & flag:
                params.append(code)
        if self.fg is not None:
            params.append(self.fg.to_sgr_fg())
        if self.bg is not None:
            params.append(self.bg.to_sgr_bg())
        return f"\x1b[{';'.join(params)}m"
