import itertools

import pytest

from chordchart.keys import FLAT_NAMES, SHARP_NAMES
from chordchart.tokenizer import find_chords, parse_chord
from chordchart.transpose import transpose_chart, transpose_chord

CHART = (
    "G       D        Em        C\n"
    "Amazing grace how sweet the sound\n"
    "G         D             G\n"
    "That saved a wretch like me"
)

# ---------------------------------------------------------------------------
# transpose_chord
# ---------------------------------------------------------------------------


def test_transpose_chord_up_a_tone():
    assert transpose_chord("G", 2) == "A"
    assert transpose_chord("Em", 2) == "F#m"


def test_transpose_chord_flat_respelled_sharp():
    assert transpose_chord("Bb", 2) == "C"
    assert transpose_chord("Db", 13) == "D"


def test_transpose_chord_flat_spelling():
    assert transpose_chord("A", 1) == "A#"
    assert transpose_chord("A", 1, "flat") == "Bb"


def test_transpose_chord_negative_shift():
    assert transpose_chord("G", -2) == "F"


def test_transpose_chord_unresolved_root_unchanged():
    assert transpose_chord("Cb", 3) == "Cb"
    assert transpose_chord("xyz", 3) == "xyz"


@pytest.mark.parametrize("suffix", ["", "m", "maj7", "sus4", "13", "dim"])
def test_transpose_chord_keeps_suffix(suffix):
    assert transpose_chord("D" + suffix, 5) == "G" + suffix


@pytest.mark.parametrize("name", SHARP_NAMES)
def test_twelve_semitones_restores_spelling(name):
    assert transpose_chord(transpose_chord(name + "m7", 7), 5) == name + "m7"


@pytest.mark.parametrize("shift", [0, 12, -12])
def test_whole_octave_keeps_spelling(shift):
    assert transpose_chord("Bbm7", shift) == "Bbm7"
    assert transpose_chord("Db/Ab", shift) == "Db/Ab"


# ---------------------------------------------------------------------------
# transpose_chart
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("key", SHARP_NAMES + FLAT_NAMES)
def test_same_key_is_identity(key):
    assert transpose_chart(CHART, key, key) == CHART


def test_same_key_short_circuits_without_resolving():
    assert transpose_chart("anything G", "X", "X") == "anything G"


@pytest.mark.parametrize("to_key", ["D#", "D#/Eb", "eb", "Eb major"])
def test_same_key_under_another_name_is_identity(to_key):
    assert transpose_chart("Bb  Eb  F", "Eb", to_key) == "Bb  Eb  F"


def test_same_key_under_another_name_ignores_spelling():
    assert transpose_chart("A#  D#  F", "D#", "Eb", spelling="flat") == "A#  D#  F"


def test_transpose_chart_g_to_a():
    out = transpose_chart(CHART, "G", "A")
    lines = out.split("\n")
    assert lines[0] == "A       E        F#m        D"
    assert lines[1] == "Amazing grace how sweet the sound"
    assert lines[2] == "A         E             A"
    assert lines[3] == "That saved a wretch like me"


def test_transpose_chart_unknown_key_unchanged():
    assert transpose_chart("G D", "G", "H") == "G D"
    assert transpose_chart("G D", "", "A") == "G D"


def test_round_trip_restores_pitch_classes():
    chart = "Bb  Ebmaj7  F7  Gm\nC#  G/B  Ab"
    original = [parse_chord(c).root for c in find_chords(chart)]
    for k1, k2 in itertools.product(["C", "Eb", "F#", "A"], repeat=2):
        there = transpose_chart(chart, k1, k2)
        back = transpose_chart(there, k2, k1)
        assert [parse_chord(c).root for c in find_chords(back)] == original


def test_transpose_chart_auto_spelling_uses_target_family():
    assert transpose_chart("C E", "C", "Bb", spelling="auto") == "Bb D"
    assert transpose_chart("C E", "C", "Bb") == "A# D"


def test_transpose_chart_unknown_spelling_falls_back_to_sharp():
    assert transpose_chart("C", "C", "Db", spelling="weird") == "C#"


def test_transpose_chart_chord_lines_only():
    text = "G\nA man"
    assert transpose_chart(text, "G", "A", chord_lines_only=True) == "A\nA man"
    assert transpose_chart(text, "G", "A") == "A\nB man"


def test_transpose_chart_slash_chord():
    assert transpose_chart("G/B", "G", "C") == "C/E"
