"""One-call chart rendering.

:func:`render_chart` runs the whole pipeline for a chart and a key/format
selection::

    chart text --> transpose or Nashville --> sections
                                          --> unique chords --> diagrams

It is pure: call it again whenever the chart, the key or the format changes.

Usage::

    from chordchart.engine import render_chart
    result = render_chart(song_text, source_key="G", target_key="A")
    for section in result.sections:
        print(section.title)
        print(section.content)
"""

import logging

from .diagrams import diagrams_for
from .exceptions import UnknownFormatError
from .keys import DEFAULT_KEY
from .models import ChartFormat, ChartResult
from .nashville import chart_to_nashville
from .sections import parse_sections
from .tokenizer import extract_unique_chords
from .transpose import transpose_chart

logger = logging.getLogger(__name__)


def _usable_key(label: str | None, fallback: str) -> str:
    if label and label.strip():
        return label.strip()
    return fallback


def render_chart(
    text: str,
    source_key: str | None = None,
    target_key: str | None = None,
    chart_format: "ChartFormat | str" = ChartFormat.STANDARD,
    chord_lines_only: bool = False,
    spelling: str = "sharp",
) -> ChartResult:
    """Render *text* for display in *target_key* using *chart_format*.

    Args:
        text:             Raw chart, chords above lyrics.
        source_key:       Key the chart is written in; blank means ``"C"``.
        target_key:       Key to show; blank means the source key.  Ignored
                          by Nashville notation, which always counts from the
                          source key.
        chart_format:     ``"standard"`` or ``"nashville"``; an unknown name
                          falls back to standard.
        chord_lines_only: Only rewrite chords on chord-only lines.
        spelling:         ``"sharp"``, ``"flat"`` or ``"auto"``.

    Returns:
        A fresh :class:`~chordchart.models.ChartResult`.
    """
    source = _usable_key(source_key, DEFAULT_KEY)
    target = _usable_key(target_key, source)

    try:
        fmt = ChartFormat.parse(chart_format)
    except UnknownFormatError:
        logger.warning("Unknown chart format %r; using standard", chart_format)
        fmt = ChartFormat.STANDARD

    if fmt == ChartFormat.NASHVILLE:
        # Numbers have no fingering; diagrams stay in the key the chart is written in.
        rendered = chart_to_nashville(text, source, chord_lines_only, spelling)
        chords = extract_unique_chords(text, chord_lines_only)
        shown_key = source
    else:
        rendered = transpose_chart(text, source, target, chord_lines_only, spelling)
        chords = extract_unique_chords(rendered, chord_lines_only)
        shown_key = target

    return ChartResult(
        text=rendered,
        key=shown_key,
        format=fmt,
        sections=parse_sections(rendered),
        chords=chords,
        diagrams=diagrams_for(chords),
    )
