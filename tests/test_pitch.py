import pytest

from numnotation.pitch import compare_pitch, is_pitch_equal, next_half_step


@pytest.mark.parametrize(
    "pitch, expected",
    [
        ("C", "C#"),
        ("C#", "D"),
        ("D", "D#"),
        ("D#", "E"),
        ("E", "F"),
        ("B", "C"),
        ("B#", "C#"),
        ("Bx", "D"),
    ],
)
def test_next_half_step(pitch, expected):
    assert next_half_step(pitch) == expected


def test_next_half_step_flats():
    assert next_half_step("Db") == "D"
    assert next_half_step("Ebb") == "Eb"


def test_next_half_step_rejects_empty():
    with pytest.raises(ValueError):
        next_half_step("")


def test_is_pitch_equal():
    assert is_pitch_equal("C", "C")
    assert is_pitch_equal("C#", "Db")
    assert is_pitch_equal("B#", "C")
    assert not is_pitch_equal("C", "D")


def test_compare_pitch():
    assert compare_pitch("C#", "Db") == 0
    assert compare_pitch("G", "C") == 1
    assert compare_pitch("C", "G") == -1
    assert compare_pitch("F", "F#") == 1
    assert compare_pitch("F#", "F") == -1