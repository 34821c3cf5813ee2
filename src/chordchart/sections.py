"""Splitting chart and lyric text into blocks.

Chart sections
--------------

A section header is a line on its own naming the section type, optionally
numbered and followed by a colon::

    Verse 1:
    Chorus
    bridge 2

Header lines become the section's label and are not kept as content.  Text
before the first header is gathered into an unnumbered verse, so no chart
line is ever dropped.  The scanner has two states:

  SEEKING_HEADER  no header seen yet; lines go to the implicit verse
  IN_SECTION      lines are appended to the open section

Slides
------

:func:`split_slides` cuts a lyrics-only block into projection slides at
blank lines.
"""

import logging
import re
from enum import Enum, auto

from .models import ChartSection, ParsedChart, SectionType
from .tokenizer import extract_unique_chords

logger = logging.getLogger(__name__)

SECTION_HEADER_RE = re.compile(
    r"^(verse|chorus|bridge|intro|outro)\s*(\d+)?:?\s*$",
    re.IGNORECASE,
)


class _State(Enum):
    SEEKING_HEADER = auto()
    IN_SECTION = auto()


def match_header(line: str) -> tuple[SectionType, int | None] | None:
    """Return ``(type, number)`` if *line* is a section header, else None."""
    m = SECTION_HEADER_RE.match(line)
    if not m:
        return None
    number = int(m.group(2)) if m.group(2) else None
    return SectionType(m.group(1).lower()), number


def parse_sections(text: str) -> list[ChartSection]:
    """Split chart *text* into an ordered list of sections.

    Every non-header line lands in exactly one section, in its original
    order.  A blank (or whitespace-only) chart yields no sections.  Repeated
    headers ("Chorus" twice) start independent sections.
    """
    if not text.strip():
        return []

    sections: list[ChartSection] = []
    state = _State.SEEKING_HEADER
    pending: list[str] = []  # lines seen before any header
    current: ChartSection | None = None

    for line in text.split("\n"):
        header = match_header(line)

        if header is not None:
            if state == _State.SEEKING_HEADER and pending:
                sections.append(ChartSection(type=SectionType.VERSE, lines=pending))
                pending = []
            section_type, number = header
            current = ChartSection(type=section_type, number=number)
            sections.append(current)
            state = _State.IN_SECTION
            continue

        if state == _State.IN_SECTION:
            current.lines.append(line)
        else:
            pending.append(line)

    if state == _State.SEEKING_HEADER and pending:
        sections.append(ChartSection(type=SectionType.VERSE, lines=pending))

    logger.debug("Parsed %d section(s)", len(sections))
    return sections


def parse_chart(text: str, chord_lines_only: bool = False) -> ParsedChart:
    """Parse *text* into sections plus its unique chord vocabulary."""
    return ParsedChart(
        sections=parse_sections(text),
        chords=extract_unique_chords(text, chord_lines_only),
    )


def split_slides(lyrics: str) -> list[list[str]]:
    """Split a lyrics block into slides at blank-line boundaries.

    Each slide is the list of its lines with trailing whitespace removed.
    Runs of several blank lines count as one boundary; leading and trailing
    blank lines produce no empty slides.
    """
    slides: list[list[str]] = []
    current: list[str] = []
    for line in lyrics.splitlines():
        if line.strip():
            current.append(line.rstrip())
        elif current:
            slides.append(current)
            current = []
    if current:
        slides.append(current)
    return slides
