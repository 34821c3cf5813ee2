from dataclasses import dataclass, field
from enum import Enum

from .exceptions import UnknownFormatError


class SectionType(Enum):
    VERSE = "verse"
    CHORUS = "chorus"
    BRIDGE = "bridge"
    INTRO = "intro"
    OUTRO = "outro"


class ChartFormat(Enum):
    """How chord symbols are written in the rendered chart."""

    STANDARD = "standard"  # letter names in the target key
    NASHVILLE = "nashville"  # scale degrees relative to the original key

    @classmethod
    def parse(cls, name: "str | ChartFormat") -> "ChartFormat":
        """Return the format called *name* (case-insensitive).

        Raises UnknownFormatError for anything else.
        """
        if isinstance(name, cls):
            return name
        try:
            return cls(name.strip().lower())
        except (AttributeError, ValueError):
            raise UnknownFormatError(str(name)) from None


class ChordQuality(Enum):
    """Broad chord family read off a suffix, shown beside each chord box."""

    MAJOR = "major"
    MINOR = "minor"
    DOMINANT_7 = "7"
    MAJOR_7 = "maj7"
    MINOR_7 = "m7"
    AUGMENTED = "aug"
    DIMINISHED = "dim"
    SUSPENDED_2 = "sus2"
    SUSPENDED_4 = "sus4"
    EXTENDED = "ext"  # add-tones and bare extensions: 2, 6, 9, 13 ...
    UNKNOWN = "?"


class Accidental(Enum):
    NONE = ""
    SHARP = "♯"
    FLAT = "♭"


@dataclass(frozen=True)
class Chord:
    """A chord symbol split into its root and an opaque suffix.

    Example: "C#m7" -> root=1, root_name="C#", suffix="m7".
    The suffix is carried verbatim; only the root is ever rewritten.
    """

    root: int  # chromatic index 0-11, C=0
    root_name: str  # the root exactly as written, e.g. "Db"
    suffix: str = ""

    @property
    def symbol(self) -> str:
        return f"{self.root_name}{self.suffix}"

    @property
    def quality(self) -> ChordQuality:
        return _SUFFIX_QUALITY.get(self.suffix, ChordQuality.UNKNOWN)

    def __str__(self) -> str:
        return self.symbol


_SUFFIX_QUALITY = {
    "": ChordQuality.MAJOR,
    "maj": ChordQuality.MAJOR,
    "m": ChordQuality.MINOR,
    "min": ChordQuality.MINOR,
    "7": ChordQuality.DOMINANT_7,
    "maj7": ChordQuality.MAJOR_7,
    "m7": ChordQuality.MINOR_7,
    "min7": ChordQuality.MINOR_7,
    "aug": ChordQuality.AUGMENTED,
    "dim": ChordQuality.DIMINISHED,
    "dim7": ChordQuality.DIMINISHED,
    "sus2": ChordQuality.SUSPENDED_2,
    "sus4": ChordQuality.SUSPENDED_4,
    "sus": ChordQuality.SUSPENDED_4,
    "2": ChordQuality.EXTENDED,
    "4": ChordQuality.EXTENDED,
    "5": ChordQuality.EXTENDED,
    "6": ChordQuality.EXTENDED,
    "9": ChordQuality.EXTENDED,
    "13": ChordQuality.EXTENDED,
}


@dataclass(frozen=True)
class NashvilleChord:
    """A chord written as a scale degree of a reference key."""

    degree: int  # 1-7
    accidental: Accidental = Accidental.NONE
    suffix: str = ""

    def __str__(self) -> str:
        return f"{self.degree}{self.accidental.value}{self.suffix}"


@dataclass
class ChartSection:
    """A labelled block of chart lines (verse, chorus, bridge, ...)."""

    type: SectionType
    number: int | None = None  # e.g. 2 for "Verse 2", None when unnumbered
    lines: list[str] = field(default_factory=list)

    @property
    def content(self) -> str:
        return "\n".join(self.lines)

    @property
    def title(self) -> str:
        """Display label, e.g. ``"Verse 1"`` or ``"Chorus"``."""
        name = self.type.value.capitalize()
        return f"{name} {self.number}" if self.number is not None else name


@dataclass
class ParsedChart:
    """A chart split into sections plus the chords it uses."""

    sections: list[ChartSection] = field(default_factory=list)
    chords: list[str] = field(default_factory=list)  # unique, first-seen order


@dataclass(frozen=True)
class StringMarker:
    """What happens on one string of a fret diagram."""

    string: int  # 0 = low E ... 5 = high e
    kind: str  # "muted", "open" or "fretted"
    fret: int | None = None  # only for "fretted"


@dataclass
class ChordDiagram:
    """Vector description of a fretboard chord box.

    ``shape`` is the six-character string form (``"320003"`` for G), low E
    first: ``x`` muted, ``0`` open, a digit for the fretted position.
    """

    name: str
    shape: str
    markers: list[StringMarker] = field(default_factory=list)
    strings: int = 6
    frets: int = 5
    known: bool = True  # False when the shape is the fallback
    quality: ChordQuality = ChordQuality.UNKNOWN


@dataclass
class ChartResult:
    """Everything a caller needs to display one rendering of a chart."""

    text: str  # the transformed chart, line structure preserved
    key: str  # key shown to the reader
    format: ChartFormat = ChartFormat.STANDARD
    sections: list[ChartSection] = field(default_factory=list)
    chords: list[str] = field(default_factory=list)
    diagrams: list[ChordDiagram] = field(default_factory=list)
