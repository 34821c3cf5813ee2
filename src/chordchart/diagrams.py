"""Guitar chord boxes for the chords of a chart.

:func:`diagram` turns a chord symbol into a
:class:`~chordchart.models.ChordDiagram`, a drawing-neutral description of
the box: which strings are muted, open or fretted and at which fret.
:func:`to_svg` draws that description as a small SVG image.

Shapes come from a fixed table of open-position chords, written low E to
high e::

    G  320003    x = muted, 0 = open, digit = fret

Chords missing from the table get the placeholder shape ``x00000`` under
their own name instead of an error.
"""

import logging
from html import escape

from .models import ChordDiagram, ChordQuality, StringMarker
from .tokenizer import parse_chord

logger = logging.getLogger(__name__)

DEFAULT_SHAPE = "x00000"
STRINGS = 6
FRETS = 5

CHORD_SHAPES: dict[str, str] = {
    # Major
    "C": "x32010",
    "D": "xx0232",
    "E": "022100",
    "F": "133211",
    "G": "320003",
    "A": "x02220",
    "B": "x24442",
    # Minor
    "Cm": "x35543",
    "Dm": "xx0231",
    "Em": "022000",
    "Fm": "133111",
    "Gm": "355333",
    "Am": "x02210",
    "Bm": "x24432",
    # Dominant 7th
    "C7": "x32310",
    "D7": "xx0212",
    "E7": "020100",
    "F7": "131211",
    "G7": "320001",
    "A7": "x02020",
    "B7": "x21202",
}

# SVG geometry: an 80x100 box, 20px caption band above the nut.
_WIDTH = 80
_HEIGHT = 100
_TOP = 20


def _markers(shape: str) -> list[StringMarker]:
    markers = []
    for string, pos in enumerate(shape):
        if pos in ("x", "X"):
            markers.append(StringMarker(string=string, kind="muted"))
        elif pos == "0":
            markers.append(StringMarker(string=string, kind="open"))
        elif pos.isdigit():
            markers.append(StringMarker(string=string, kind="fretted", fret=int(pos)))
    return markers


def diagram(symbol: str) -> ChordDiagram:
    """Return the fret diagram for *symbol*.

    Unknown chords never raise: they get :data:`DEFAULT_SHAPE` captioned
    with *symbol* and ``known=False``.
    """
    shape = CHORD_SHAPES.get(symbol)
    known = shape is not None
    if not known:
        logger.debug("No shape for %r; using placeholder", symbol)
        shape = DEFAULT_SHAPE
    chord = parse_chord(symbol)
    return ChordDiagram(
        name=symbol,
        shape=shape,
        markers=_markers(shape),
        strings=STRINGS,
        frets=FRETS,
        known=known,
        quality=chord.quality if chord else ChordQuality.UNKNOWN,
    )


def diagrams_for(chords: list[str]) -> list[ChordDiagram]:
    """Return one diagram per chord, in the order given."""
    return [diagram(chord) for chord in chords]


def to_svg(chord_diagram: ChordDiagram) -> str:
    """Draw *chord_diagram* as an SVG document string."""
    strings = chord_diagram.strings
    frets = chord_diagram.frets
    string_spacing = _WIDTH / (strings - 1)
    fret_spacing = (_HEIGHT - _TOP) / frets

    parts = [
        f'<svg width="{_WIDTH}" height="{_HEIGHT}" viewBox="0 0 {_WIDTH} {_HEIGHT}" '
        f'xmlns="http://www.w3.org/2000/svg">',
        f'<text x="{_WIDTH / 2:g}" y="15" text-anchor="middle" font-family="Arial" '
        f'font-size="14">{escape(chord_diagram.name)}</text>',
    ]

    for i in range(strings):
        x = i * string_spacing
        parts.append(
            f'<line x1="{x:g}" y1="{_TOP}" x2="{x:g}" y2="{_HEIGHT}" stroke="black" stroke-width="1" />'
        )

    for i in range(frets + 1):
        y = _TOP + i * fret_spacing
        width = 2 if i == 0 else 1  # nut
        parts.append(
            f'<line x1="0" y1="{y:g}" x2="{_WIDTH}" y2="{y:g}" stroke="black" stroke-width="{width}" />'
        )

    for marker in chord_diagram.markers:
        x = marker.string * string_spacing
        if marker.kind == "muted":
            parts.append(
                f'<text x="{x:g}" y="18" text-anchor="middle" font-family="Arial" font-size="12">X</text>'
            )
        elif marker.kind == "open":
            parts.append(
                f'<circle cx="{x:g}" cy="10" r="5" stroke="black" stroke-width="1" fill="none" />'
            )
        else:
            y = _TOP + (marker.fret - 0.5) * fret_spacing
            parts.append(f'<circle cx="{x:g}" cy="{y:g}" r="6" fill="black" />')

    parts.append("</svg>")
    return "\n".join(parts) + "\n"
