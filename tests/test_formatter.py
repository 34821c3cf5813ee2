from chordchart.engine import render_chart
from chordchart.formatter import ChartFormatter, export_filename, export_text, slugify
from chordchart.models import ChartResult


def _render(result: ChartResult, **kwargs) -> str:
    return ChartFormatter().render(result, **kwargs)


# ---------------------------------------------------------------------------
# Print view
# ---------------------------------------------------------------------------


def test_header_with_title_and_author():
    out = _render(render_chart("G", "G", "A"), title="Amazing Grace", author="John Newton")
    assert out.startswith("Amazing Grace\nJohn Newton | Key: A\n")


def test_header_without_author():
    out = _render(render_chart("G", "G", "A"))
    assert out.startswith("Key: A\n")


def test_section_titles_and_content():
    result = render_chart("Verse 1:\nG  C\nsing\n\nChorus:\nD\nla", "G", "G")
    out = _render(result)
    assert out == "Key: G\n\nVerse 1\nG  C\nsing\n\nChorus\nD\nla\n"


def test_output_ends_with_newline():
    assert _render(render_chart("", "C", "C")).endswith("\n")


def test_empty_chart_header_only():
    assert _render(render_chart("", "C", "D"), title="T") == "T\nKey: D\n"


# ---------------------------------------------------------------------------
# Text export
# ---------------------------------------------------------------------------


def test_export_text_single_trailing_newline():
    assert export_text(render_chart("G\nla\n\n", "G", "A")) == "A\nla\n"


def test_export_text_empty():
    assert export_text(render_chart("", "G", "A")) == "\n"


# ---------------------------------------------------------------------------
# Filenames
# ---------------------------------------------------------------------------


def test_slugify_basic():
    assert slugify("Amazing Grace") == "amazing-grace"
    assert slugify("10,000 Reasons (Bless The Lord)") == "10000-reasons-bless-the-lord"


def test_slugify_collapses_spaces():
    assert slugify("A  B") == "a-b"


def test_export_filename():
    assert export_filename("Amazing Grace", "A") == "amazing-grace-a.txt"


def test_export_filename_sharp_key():
    assert export_filename("Amazing Grace", "F#") == "amazing-grace-f-sharp.txt"
    assert export_filename("Amazing Grace", "C#/Db") == "amazing-grace-c-sharp.txt"


def test_export_filename_without_title():
    assert export_filename("", "G") == "g.txt"
