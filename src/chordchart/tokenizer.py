"""Chord-symbol extraction from chart text.

Recognition is lexical: any run of text shaped like a chord symbol counts,

  root        A-G
  accidental  optional ``#`` or ``b``
  quality     optional ``maj``, ``min``, ``m``, ``aug``, ``dim``,
              ``sus2``, ``sus4`` or ``sus``
  extension   optional ``13`` or a single digit 2-9

as long as it is not glued to other letters, digits or ``#``.  A slash is a
separator, so in ``G/B`` both ``G`` and ``B`` are tokens.

Because matching ignores line context, a capitalised lyric word that happens
to look like a chord (a lone ``A``, ``Am``) is picked up too.  Pass
``chord_lines_only=True`` to only look at lines made up entirely of chord
names, which is how a chord-above-lyric chart lays them out.
"""

import logging
import re
from collections.abc import Callable

from .keys import note_index
from .models import Chord

logger = logging.getLogger(__name__)

_CHORD_PAT = (
    r"[A-G][#b]?"
    r"(?:maj|min|m|aug|dim|sus[24]?)?"
    r"(?:13|[2-9])?"
)

# A chord token anywhere in free text.
CHORD_TOKEN_RE = re.compile(rf"(?<![\w#]){_CHORD_PAT}(?![\w#])")

# Root/suffix split of a single token.
_ROOT_RE = re.compile(r"^([A-G][#b]?)(.*)$")

# A whitespace-delimited word on a chord line: a chord, optionally over a bass.
CHORD_NAME_RE = re.compile(rf"^{_CHORD_PAT}(?:/[A-G][#b]?)?$")

# Bar lines, repeat marks and rhythm slashes tolerated on a chord line.
_FILLER_RE = re.compile(r"^[|/.:\-]+$")


# ---------------------------------------------------------------------------
# Single tokens
# ---------------------------------------------------------------------------


def parse_chord(symbol: str) -> Chord | None:
    """Split *symbol* into a :class:`~chordchart.models.Chord`.

    Returns None when the root is not a note of the twelve-key table
    (``"Cb"``, ``"E#"``) or the text does not start with a chord root.
    """
    m = _ROOT_RE.match(symbol)
    if not m:
        return None
    root_name, suffix = m.group(1), m.group(2)
    index = note_index(root_name)
    if index is None:
        logger.debug("Unresolved chord root %r in %r", root_name, symbol)
        return None
    return Chord(root=index, root_name=root_name, suffix=suffix)


# ---------------------------------------------------------------------------
# Line classification
# ---------------------------------------------------------------------------


def is_chord_line(line: str) -> bool:
    """Return True if every word on *line* is a chord name (or a bar mark).

    Blank lines and lines of bar marks alone are not chord lines.
    """
    words = line.split()
    chords = [w for w in words if not _FILLER_RE.match(w)]
    return bool(chords) and all(CHORD_NAME_RE.match(w) for w in chords)


# ---------------------------------------------------------------------------
# Extraction
# ---------------------------------------------------------------------------


def find_chords(text: str, chord_lines_only: bool = False) -> list[str]:
    """Return every chord token in *text*, verbatim and in order."""
    if not chord_lines_only:
        return CHORD_TOKEN_RE.findall(text)
    found: list[str] = []
    for line in text.splitlines():
        if is_chord_line(line):
            found.extend(CHORD_TOKEN_RE.findall(line))
    return found


def extract_unique_chords(text: str, chord_lines_only: bool = False) -> list[str]:
    """Return the distinct chord tokens of *text* in first-seen order.

    Tokens are compared by exact text, so ``"A#"`` and ``"Bb"`` are two
    entries.
    """
    return list(dict.fromkeys(find_chords(text, chord_lines_only)))


def replace_chords(
    text: str,
    replace: Callable[[str], str],
    chord_lines_only: bool = False,
) -> str:
    """Return *text* with each chord token substituted by ``replace(token)``.

    Everything that is not a chord token, line endings included, is left
    exactly as it was.
    """

    def _sub(m: re.Match) -> str:
        return replace(m.group())

    if not chord_lines_only:
        return CHORD_TOKEN_RE.sub(_sub, text)
    lines = text.splitlines(keepends=True)
    return "".join(
        CHORD_TOKEN_RE.sub(_sub, line) if is_chord_line(line) else line for line in lines
    )
