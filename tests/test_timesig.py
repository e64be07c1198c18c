import pytest

from numnotation.model import Measure, Note, NoteLength
from numnotation.timesig import Time, TimeSignature, from_measures


@pytest.mark.parametrize(
    "note_type, dots, expected",
    [
        (NoteLength.QUARTER, 0, 1),
        (NoteLength.QUARTER, 1, 1.5),
        (NoteLength.QUARTER, 2, 1.75),
        (NoteLength.HALF, 0, 2),
        (NoteLength.HALF, 1, 3),
        (NoteLength.HALF, 2, 3.5),
        (NoteLength.HALF, 3, 3.75),
        (NoteLength.WHOLE, 0, 4),
        (NoteLength.WHOLE, 1, 6),
        (NoteLength.WHOLE, 2, 7),
        (NoteLength.WHOLE, 3, 7.5),
        (NoteLength.WHOLE, 4, 7.75),
        (NoteLength.EIGHTH, 0, 0.5),
        (NoteLength.EIGHTH, 1, 0.75),
        (NoteLength.SIXTEENTH, 0, 0.25),
    ],
)
def test_time_note_length(note_type, dots, expected):
    assert Time(beat_type=4).note_length(Note(type=note_type, dots=dots)) == expected


TWO = [Time(1, 4, 4), Time(10, 6, 8)]
THREE = [Time(1, 4, 4), Time(10, 6, 8), Time(18, 4, 4)]


@pytest.mark.parametrize(
    "signatures, measure, expected",
    [
        (TWO, 1, 1),
        (TWO, 9, 1),
        (THREE, 10, 2),
        (THREE, 18, 1),
    ],
)
def test_signature_note_length(signatures, measure, expected):
    ts = TimeSignature(signatures=signatures, is_mixed=True)
    assert ts.note_length(measure, Note(type=NoteLength.QUARTER)) == expected


def test_signature_on_measure_before_first():
    ts = TimeSignature(signatures=THREE, is_mixed=True)
    assert ts.signature_on_measure(0) == THREE[0]
    assert ts.signature_on_measure(17) == THREE[1]


def test_empty_signature_raises():
    with pytest.raises(ValueError):
        TimeSignature().signature_on_measure(1)


def test_notated():
    assert str(Time(1, 6, 8)) == "6/8"


def test_humanized_single():
    ts = TimeSignature(signatures=[Time(1, 4, 4)])
    assert ts.humanized() == "4 ketuk"


def test_humanized_mixed_deduplicates_beats():
    ts = TimeSignature(signatures=THREE, is_mixed=True)
    assert ts.humanized() == "4 dan 6 ketuk"


def test_from_measures():
    measures = [
        Measure(number=1, beats=4, beat_type=4),
        Measure(number=2),
        Measure(number=3, beats=4, beat_type=4),
    ]
    ts = from_measures(measures)
    assert ts.signatures == [Time(1, 4, 4), Time(3, 4, 4)]
    assert ts.is_mixed is False

    mixed = from_measures([Measure(1, beats=4, beat_type=4), Measure(5, beats=3, beat_type=4)])
    assert mixed.is_mixed is True