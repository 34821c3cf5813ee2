"""The twelve-key chromatic circle and its note spellings.

Every pitch-class calculation in chordchart goes through this module::

    >>> key_index("Eb")
    3
    >>> spell(3)
    'D#'
    >>> spell(3, "flat")
    'Eb'

Key labels
----------

The display table has one label per pitch class; the five black-key labels
are dual (``"C#/Db"``).  Either alternative resolves to the same index, and
so does the full dual label.  Re-spelling uses the first (sharp) alternative
unless a flat spelling is asked for.
"""

import re
from dataclasses import dataclass

from .exceptions import UnknownKeyError

KEYS = (
    "C", "C#/Db", "D", "D#/Eb", "E", "F",
    "F#/Gb", "G", "G#/Ab", "A", "A#/Bb", "B",
)

SHARP_NAMES = tuple(label.split("/")[0] for label in KEYS)
FLAT_NAMES = tuple(label.split("/")[-1] for label in KEYS)

SPELLINGS = ("sharp", "flat", "auto")

DEFAULT_KEY = "C"

_NOTE_INDEX: dict[str, int] = {}
for _i, _label in enumerate(KEYS):
    _NOTE_INDEX[_label] = _i
    for _alt in _label.split("/"):
        _NOTE_INDEX[_alt] = _i

# A key label: root letter, optional accidental, optional mode word.
_KEY_LABEL_RE = re.compile(r"^([A-Ga-g])([#b]?)\s*(maj|major|min|minor|m)?$")
_MINOR_MARKERS = {"m", "min", "minor"}

# Natural-root keys written with flats by convention (F major, D/G/C/F minor).
_FLAT_NATURAL_MAJOR = {"F"}
_FLAT_NATURAL_MINOR = {"D", "G", "C", "F"}


@dataclass(frozen=True)
class Key:
    """A key centre: chromatic index plus its display label."""

    index: int
    minor: bool = False

    @property
    def label(self) -> str:
        """Display label from the key table, e.g. ``"C#/Db"``."""
        return KEYS[self.index]

    @property
    def name(self) -> str:
        """Short name using the sharp alternative, e.g. ``"C#m"``."""
        return SHARP_NAMES[self.index] + ("m" if self.minor else "")

    @classmethod
    def parse(cls, label: str) -> "Key":
        """Parse *label* into a :class:`Key`.

        Raises :class:`~chordchart.exceptions.UnknownKeyError` if the label
        does not name one of the twelve keys.
        """
        parsed = _parse_label(label)
        if parsed is None:
            raise UnknownKeyError(label)
        note, minor = parsed
        return cls(index=_NOTE_INDEX[note], minor=minor)


def _parse_label(label: str | None) -> tuple[str, bool] | None:
    """Return ``(note, is_minor)`` for a key label, or None."""
    if not label:
        return None
    stripped = label.strip()
    if stripped in _NOTE_INDEX:
        return stripped, False
    m = _KEY_LABEL_RE.match(stripped)
    if not m:
        return None
    note = m.group(1).upper() + m.group(2)
    if note not in _NOTE_INDEX:
        return None
    return note, m.group(3) in _MINOR_MARKERS


def note_index(name: str) -> int | None:
    """Return the chromatic index of a note name (``"C#"``, ``"Bb"``), or None."""
    return _NOTE_INDEX.get(name)


def key_index(label: str | None) -> int | None:
    """Return the chromatic index of a key label, or None if unresolvable.

    Accepts single names (``"G"``, ``"Bb"``), dual table labels
    (``"A#/Bb"``) and minor keys (``"Em"``, ``"F#m"``, ``"G minor"``).
    Minor keys resolve to their tonic, not their relative major.
    """
    parsed = _parse_label(label)
    if parsed is None:
        return None
    return _NOTE_INDEX[parsed[0]]


def resolve_key(label: str | None) -> int:
    """Strict form of :func:`key_index`; raises UnknownKeyError."""
    return Key.parse(label or "").index


def key_family(label: str | None) -> str:
    """Return ``"flat"`` or ``"sharp"``, the accidental family *label* is written in.

    An explicit accidental in the label wins; natural-root keys follow the
    usual convention (F major and D, G, C, F minor take flats).  Unknown
    labels fall back to ``"sharp"``.
    """
    parsed = _parse_label(label)
    if parsed is None:
        return "sharp"
    note, minor = parsed
    if "/" in note or note.endswith("#"):
        return "sharp"
    if note.endswith("b"):
        return "flat"
    natural_flats = _FLAT_NATURAL_MINOR if minor else _FLAT_NATURAL_MAJOR
    return "flat" if note in natural_flats else "sharp"


def spell(index: int, spelling: str = "sharp") -> str:
    """Return the note name for chromatic *index* (taken mod 12).

    ``spelling`` is ``"sharp"`` (default) or ``"flat"``.
    """
    names = FLAT_NAMES if spelling == "flat" else SHARP_NAMES
    return names[index % 12]


def semitone_shift(from_key: str | None, to_key: str | None) -> int | None:
    """Return the upward shift in semitones (0-11) between two keys, or None."""
    from_index = key_index(from_key)
    to_index = key_index(to_key)
    if from_index is None or to_index is None:
        return None
    return (to_index - from_index + 12) % 12
