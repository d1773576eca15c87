"""Constraint-based layout engine.

Partitions a Rect into contiguous sub-rects along one axis. Results can
be split again, so a screen is described as a tree of nested splits::

    header, body = split(screen, Direction.VERTICAL, [Fixed(3), Min(0)])
    left, right = split(body, Direction.HORIZONTAL, [Percent(50), Percent(50)])

Resolution rules:

- ``Fixed(n)`` takes exactly ``n`` cells.
- ``Percent(p)`` takes ``p``% of the available length, rounded half up.
- ``Min(n)`` takes whatever the other constraints leave, but at least
  ``n``. When several ``Min`` constraints share a split, only the last one
  absorbs the remainder; earlier ones get their floor.
- Without a ``Min``, any ``Percent`` makes the last segment absorb the
  rounding difference so the segments fill the area exactly. An all-Fixed
  split that under-specifies the area leaves the rest unused.
- Overflow is clipped from the end.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Sequence, Union

from term_resume.core.rect import Rect


class Direction(Enum):
    """Axis along which an area is split."""
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


@dataclass(frozen=True)
class Fixed:
    """Exactly ``length`` cells."""
    length: int

    def __post_init__(self) -> None:
        if self.length < 0:
            raise ValueError(f"Fixed length must be >= 0, got {self.length}")


@dataclass(frozen=True)
class Percent:
    """A share of the available length."""
    percent: int

    def __post_init__(self) -> None:
        if not 0 <= self.percent <= 100:
            raise ValueError(f"Percent must be 0-100, got {self.percent}")


@dataclass(frozen=True)
class Min:
    """The remaining length, but no less than ``length``."""
    length: int

    def __post_init__(self) -> None:
        if self.length < 0:
            raise ValueError(f"Min length must be >= 0, got {self.length}")


Constraint = Union[Fixed, Percent, Min]


def _round_half_up(numerator: int, denominator: int) -> int:
    """Integer division rounding .5 upwards."""
    return (2 * numerator + denominator) // (2 * denominator)


def resolve_lengths(constraints: Sequence[Constraint], available: int) -> list[int]:
    """
    Resolve constraints to segment lengths along one axis.

    The returned lengths never sum to more than ``available``.
    """
    available = max(0, available)
    lengths: list[int] = []

    min_indices = [i for i, c in enumerate(constraints) if isinstance(c, Min)]
    absorber = min_indices[-1] if min_indices else None

    for constraint in constraints:
        if isinstance(constraint, Fixed):
            lengths.append(constraint.length)
        elif isinstance(constraint, Percent):
            lengths.append(_round_half_up(constraint.percent * available, 100))
        elif isinstance(constraint, Min):
            lengths.append(constraint.length)
        else:
            raise TypeError(f"Unknown constraint: {constraint!r}")

    if absorber is not None:
        others = sum(lengths) - lengths[absorber]
        floor = constraints[absorber].length
        lengths[absorber] = max(floor, available - others)
    elif lengths and any(isinstance(c, Percent) for c in constraints):
        lengths[-1] = max(0, lengths[-1] + available - sum(lengths))

    # Clip overflow from the end
    offset = 0
    for i, length in enumerate(lengths):
        lengths[i] = max(0, min(length, available - offset))
        offset += lengths[i]

    return lengths


def split(
    area: Rect,
    direction: Direction,
    constraints: Sequence[Constraint],
    margin: int = 0,
) -> list[Rect]:
    """
    Partition ``area`` into one Rect per constraint.

    Rects are contiguous along ``direction`` in constraint order and
    span the full (post-margin) extent of the other axis.
    """
    inner = area.inner(margin)

    if direction == Direction.HORIZONTAL:
        lengths = resolve_lengths(constraints, inner.width)
        rects = []
        x = inner.x
        for length in lengths:
            rects.append(Rect(x, inner.y, length, inner.height))
            x += length
        return rects

    lengths = resolve_lengths(constraints, inner.height)
    rects = []
    y = inner.y
    for length in lengths:
        rects.append(Rect(inner.x, y, inner.width, length))
        y += length
    return rects


def vertical(area: Rect, constraints: Sequence[Constraint], margin: int = 0) -> list[Rect]:
    """Split ``area`` into rows."""
    return split(area, Direction.VERTICAL, constraints, margin)


def horizontal(area: Rect, constraints: Sequence[Constraint], margin: int = 0) -> list[Rect]:
    """Split ``area`` into columns."""
    return split(area, Direction.HORIZONTAL, constraints, margin)
