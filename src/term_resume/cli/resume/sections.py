"""Section painters - one panel tree per tab."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from term_resume.cli.core.layout import Fixed, Percent, horizontal, vertical
from term_resume.cli.resume import content
from term_resume.cli.resume.content import Entry
from term_resume.cli.widgets import Block, Borders, Gauge, Paragraph, SelectableList
from term_resume.core.buffer import Buffer
from term_resume.core.rect import Rect
from term_resume.core.style import Color, Modifier, Style

BORDER_STYLE = Style(fg=Color.CYAN)
SECTION_TITLE_STYLE = Style(fg=Color.MAGENTA, modifier=Modifier.BOLD)
ENTRY_TITLE_STYLE = Style(fg=Color.YELLOW, modifier=Modifier.BOLD)
TEXT_STYLE = Style(fg=Color.LIGHT_MAGENTA)
GAUGE_STYLE = Style(fg=Color.MAGENTA, bg=Color.BLACK, modifier=Modifier.ITALIC)

Painter = Callable[[Rect, Buffer], None]


@dataclass(frozen=True)
class Section:
    """A tab title and the painter for its panel."""
    title: str
    paint: Painter


def section_block(title: str) -> Block:
    """Bordered block with a section-level (magenta) title."""
    return Block(
        borders=Borders.ALL,
        border_style=BORDER_STYLE,
        title=title,
        title_style=SECTION_TITLE_STYLE,
    )


def entry_block(title: str) -> Block:
    """Bordered block with an entry-level (yellow) title."""
    return Block(
        borders=Borders.ALL,
        border_style=BORDER_STYLE,
        title=title,
        title_style=ENTRY_TITLE_STYLE,
    )


def _paragraph(block: Block, text: str) -> Paragraph:
    return Paragraph(text=text, block=block, style=TEXT_STYLE, wrap=True)


def _entry(entry: Entry, section_level: bool = False) -> Paragraph:
    block = section_block(entry.title) if section_level else entry_block(entry.title)
    return _paragraph(block, entry.text)


def _centered(area: Rect) -> Rect:
    """The middle 80% of ``area`` in both directions."""
    _, middle, _ = vertical(area, [Percent(10), Percent(80), Percent(10)])
    _, center, _ = horizontal(middle, [Percent(10), Percent(80), Percent(10)])
    return center


def paint_home(area: Rect, buf: Buffer) -> None:
    _paragraph(section_block(content.RESUME_TITLE), content.HOME_TEXT).render(_centered(area), buf)


def paint_about(area: Rect, buf: Buffer) -> None:
    top, bottom = vertical(area, [Percent(40), Percent(60)])

    info, languages = horizontal(top, [Percent(50), Percent(50)])
    _entry(content.INFORMATION, section_level=True).render(info, buf)
    _entry(content.LANGUAGES, section_level=True).render(languages, buf)

    contact, about_me = horizontal(bottom, [Percent(50), Percent(50)])
    _entry(content.CONTACT, section_level=True).render(contact, buf)
    _entry(content.ABOUT_ME, section_level=True).render(about_me, buf)


def paint_skills(area: Rect, buf: Buffer) -> None:
    languages_area, others_area = vertical(area, [Percent(60), Percent(40)])

    section_block("Programming Languages").render(languages_area, buf)
    rows = vertical(languages_area, [Fixed(2)] * 7, margin=1)
    for skill, row in zip(content.PROGRAMMING_LANGUAGES, rows):
        Gauge(
            percent=skill.percent,
            label=skill.label,
            block=Block(title=skill.name, title_style=ENTRY_TITLE_STYLE),
            style=GAUGE_STYLE,
        ).render(row, buf)

    section_block("Others").render(others_area, buf)
    # Each group column is followed by a 2-cell gap
    widths = []
    for group in content.OTHER_SKILLS:
        widths.extend([Fixed(group.width), Fixed(2)])
    columns = horizontal(others_area, widths, margin=1)
    for group, column in zip(content.OTHER_SKILLS, columns[::2]):
        SelectableList(
            items=group.items,
            block=entry_block(group.title),
            style=TEXT_STYLE,
        ).render(column, buf)


def paint_experience(area: Rect, buf: Buffer) -> None:
    rows = vertical(
        area,
        [Percent(15), Percent(15), Percent(25), Percent(25), Percent(19), Fixed(1)],
    )
    for entry, row in zip(content.EXPERIENCE, rows):
        _entry(entry).render(row, buf)


def paint_education(area: Rect, buf: Buffer) -> None:
    education_area, continuing_area = vertical(area, [Percent(45), Percent(55)])

    section_block("Education").render(education_area, buf)
    rows = vertical(education_area, [Percent(33), Percent(33), Percent(33)], margin=1)
    for entry, row in zip(content.EDUCATION, rows):
        _entry(entry).render(row, buf)

    section_block("Continuing Education").render(continuing_area, buf)
    rows = vertical(
        continuing_area,
        [Percent(23), Percent(23), Percent(23), Percent(31)],
        margin=1,
    )
    for entry, row in zip(content.CONTINUING_EDUCATION, rows):
        _entry(entry).render(row, buf)


def paint_projects(area: Rect, buf: Buffer) -> None:
    personal_area, volunteer_area, oss_area = vertical(
        area, [Percent(50), Percent(25), Percent(25)]
    )

    section_block("Personal Projects").render(personal_area, buf)
    rows = vertical(personal_area, [Percent(40), Percent(40), Percent(20)], margin=1)
    for entry, row in zip(content.PERSONAL_PROJECTS, rows):
        _entry(entry).render(row, buf)

    section_block("Volunteer Work").render(volunteer_area, buf)
    (row,) = vertical(volunteer_area, [Percent(99)], margin=1)
    _entry(content.VOLUNTEER_WORK).render(row, buf)

    section_block("Open-Source Contributions").render(oss_area, buf)
    (row,) = vertical(oss_area, [Percent(99)], margin=1)
    _entry(content.OPEN_SOURCE).render(row, buf)


def paint_objective(area: Rect, buf: Buffer) -> None:
    _entry(content.OBJECTIVE, section_level=True).render(_centered(area), buf)


SECTIONS: tuple[Section, ...] = (
    Section("Home", paint_home),
    Section("About", paint_about),
    Section("Skills", paint_skills),
    Section("Experience", paint_experience),
    Section("Education", paint_education),
    Section("Projects", paint_projects),
    Section("Objective", paint_objective),
)

TITLES: tuple[str, ...] = tuple(section.title for section in SECTIONS)
