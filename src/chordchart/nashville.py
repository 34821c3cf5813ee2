"""Nashville Number System notation.

A chord is written as the scale degree of its root relative to a reference
key, so the same chart reads identically in every key.  The reference is
always the chart's original key, never the key it is being shown in.

The twelve chromatic distances from the key root map onto degrees 1-7:

    distance  0  1  2  3  4  5  6  7  8  9  10  11
    degree    1  1  2  2  3  4  4  5  5  6  6   7

The five distances off the major scale (1, 3, 6, 8, 10) are altered steps.
By default they are written as the degree below raised by a sharp (``6♯``);
with ``spelling="flat"`` they are written as the degree above lowered by a
flat (``7♭``).
"""

import logging

from .keys import key_family, key_index
from .models import Accidental, NashvilleChord
from .tokenizer import parse_chord, replace_chords

logger = logging.getLogger(__name__)

DEGREES = (1, 1, 2, 2, 3, 4, 4, 5, 5, 6, 6, 7)

# Distances that fall between two scale steps.
_ALTERED_DISTANCES = {1, 3, 6, 8, 10}


def degree_for(distance: int, spelling: str = "sharp") -> tuple[int, Accidental]:
    """Return ``(degree, accidental)`` for a chromatic distance (mod 12)."""
    distance %= 12
    degree = DEGREES[distance]
    if distance not in _ALTERED_DISTANCES:
        return degree, Accidental.NONE
    if spelling == "flat":
        return degree + 1, Accidental.FLAT
    return degree, Accidental.SHARP


def nashville_chord(symbol: str, reference_key: str, spelling: str = "sharp") -> NashvilleChord | None:
    """Return *symbol* as a :class:`~chordchart.models.NashvilleChord`.

    Returns None if the chord root or the reference key cannot be resolved.
    """
    chord = parse_chord(symbol)
    key = key_index(reference_key)
    if chord is None or key is None:
        return None
    if spelling == "auto":
        spelling = key_family(reference_key)
    degree, accidental = degree_for(chord.root - key, spelling)
    return NashvilleChord(degree=degree, accidental=accidental, suffix=chord.suffix)


def to_nashville(symbol: str, reference_key: str, spelling: str = "sharp") -> str:
    """Return the Nashville number for *symbol*, e.g. ``"6m"`` for Em in G.

    Unresolvable chords or keys come back unchanged.
    """
    converted = nashville_chord(symbol, reference_key, spelling)
    if converted is None:
        return symbol
    return str(converted)


def chart_to_nashville(
    text: str,
    reference_key: str,
    chord_lines_only: bool = False,
    spelling: str = "sharp",
) -> str:
    """Rewrite every chord in *text* as a Nashville number."""
    if key_index(reference_key) is None:
        logger.warning("Unknown reference key %r; leaving chart unchanged", reference_key)
        return text
    return replace_chords(
        text,
        lambda token: to_nashville(token, reference_key, spelling),
        chord_lines_only,
    )
