import pytest

from chordchart.exceptions import UnknownFormatError
from chordchart.models import (
    Accidental,
    ChartFormat,
    ChartResult,
    ChartSection,
    Chord,
    NashvilleChord,
    ParsedChart,
    SectionType,
)


def test_section_defaults():
    section = ChartSection(type=SectionType.CHORUS)
    assert section.number is None
    assert section.lines == []
    assert section.content == ""


def test_section_title():
    assert ChartSection(type=SectionType.VERSE, number=2).title == "Verse 2"
    assert ChartSection(type=SectionType.BRIDGE).title == "Bridge"


def test_section_content_joins_lines():
    section = ChartSection(type=SectionType.VERSE, lines=["G  D", "sing"])
    assert section.content == "G  D\nsing"


def test_parsed_chart_defaults():
    chart = ParsedChart()
    assert chart.sections == []
    assert chart.chords == []


def test_chord_symbol():
    chord = Chord(root=10, root_name="Bb", suffix="m7")
    assert chord.symbol == "Bbm7"
    assert str(chord) == "Bbm7"


def test_nashville_chord_defaults():
    assert str(NashvilleChord(degree=5)) == "5"
    assert NashvilleChord(degree=5).accidental == Accidental.NONE


def test_chart_result_defaults():
    result = ChartResult(text="", key="C")
    assert result.format == ChartFormat.STANDARD
    assert result.sections == []
    assert result.diagrams == []


def test_chart_format_parse():
    assert ChartFormat.parse("Nashville") == ChartFormat.NASHVILLE
    assert ChartFormat.parse(" standard ") == ChartFormat.STANDARD
    assert ChartFormat.parse(ChartFormat.NASHVILLE) == ChartFormat.NASHVILLE


def test_chart_format_parse_unknown():
    with pytest.raises(UnknownFormatError) as excinfo:
        ChartFormat.parse("roman")
    assert excinfo.value.name == "roman"
