"""Key transposition of chord symbols and whole charts.

Only the root of each chord moves.  The suffix ("m7", "sus4", ...) is
re-appended exactly as written, and every character of the chart that is
not a chord token is left alone, so the chord line stays above its lyric.

The new root is spelled from the sharp table by default (``Bb`` up a tone
becomes ``C``, ``A`` up a semitone becomes ``A#``).  ``spelling="flat"``
uses the flat names instead, and ``spelling="auto"`` follows the family of
the target key (F and the flat keys get flats).
"""

import logging

from .keys import SPELLINGS, key_family, semitone_shift, spell
from .tokenizer import parse_chord, replace_chords

logger = logging.getLogger(__name__)


def transpose_chord(symbol: str, semitones: int, spelling: str = "sharp") -> str:
    """Return *symbol* moved up by *semitones* (any integer, taken mod 12).

    A whole number of octaves leaves *symbol* exactly as written.  Tokens
    whose root cannot be resolved are returned unchanged.
    """
    chord = parse_chord(symbol)
    if chord is None or semitones % 12 == 0:
        return symbol
    return spell(chord.root + semitones, spelling) + chord.suffix


def transpose_chart(
    text: str,
    from_key: str,
    to_key: str,
    chord_lines_only: bool = False,
    spelling: str = "sharp",
) -> str:
    """Return chart *text* transposed from *from_key* to *to_key*.

    Same-key requests return *text* untouched without scanning it, and so
    do two names for the same key (``"Eb"`` and ``"D#/Eb"``).  If either
    key cannot be resolved the chart is returned unchanged.
    """
    if from_key == to_key:
        return text

    shift = semitone_shift(from_key, to_key)
    if shift is None:
        logger.warning("Cannot transpose from %r to %r; leaving chart unchanged", from_key, to_key)
        return text

    if shift == 0:
        return text

    if spelling not in SPELLINGS:
        logger.warning("Unknown spelling %r; using sharps", spelling)
        spelling = "sharp"
    if spelling == "auto":
        spelling = key_family(to_key)

    logger.debug("Transposing %s -> %s (+%d semitones, %s)", from_key, to_key, shift, spelling)
    return replace_chords(
        text,
        lambda token: transpose_chord(token, shift, spelling),
        chord_lines_only,
    )
