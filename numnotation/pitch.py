"""Pitch spelling helpers within a single octave."""

from __future__ import annotations

_STEPS = ("C", "D", "E", "F", "G", "A", "B")

_ENHARMONICS: dict[str, tuple[str, ...]] = {
    "C": ("B#", "Dbb"), "C#": ("Db", "Bx"),
    "Cb": ("B", "Ax"), "Cx": ("B", "Ax"),
    "Cbb": ("B", "Ax"),
    "D": ("Cx", "Ebb"), "Dbb": ("C", "B#"),
    "Db": ("C#",), "Dx": ("E", "Fb"),
    "D#": ("Eb", "Fbb"),
    "E": ("Dx", "Fb"), "Ebb": ("D", "Cx"),
    "Eb": ("D#", "Fbb"), "Ex": ("F#", "Gb"),
    "E#": ("F", "Gbb"),
    "F": ("E#", "Gbb"), "Fbb": ("Eb", "D#"),
    "Fb": ("E", "Dx"), "Fx": ("G", "Abb"),
    "F#": ("Gb", "Ex"),
    "G": ("Abb", "Fx"), "Gbb": ("F", "E#"),
    "Gb": ("F#", "Ex"), "Gx": ("A", "Bbb"),
    "G#": ("Ab",),
    "A": ("Gx", "Bbb"), "Abb": ("G", "Fx"),
    "Ab": ("G#",), "Ax": ("B", "Cb"),
    "A#": ("Bb", "Cbb"),
    "B": ("Cb", "Ax"), "Bbb": ("A", "Gx"),
    "Bb": ("A#", "Cbb"), "Bx": ("C#", "Db"),
    "B#": ("C", "Dbb"),
}


def _letter(pitch: str) -> str:
    if not pitch or pitch[0] not in _STEPS:
        raise ValueError(f"invalid pitch: {pitch!r}")
    return pitch[0]


def _whole_step(letter: str) -> str:
    return _STEPS[(_STEPS.index(letter) + 1) % len(_STEPS)]


def next_half_step(pitch: str) -> str:
    """Return the pitch one semitone above ``pitch``."""
    letter = _letter(pitch)

    if pitch.endswith("bb"):
        return f"{letter}b"
    if pitch.endswith("b"):
        return letter
    if pitch.endswith("x"):
        if letter == "B":
            return next_half_step("C#")
        if letter == "E":
            return next_half_step("F#")
        upper = _whole_step(letter)
        if upper in ("B", "E"):
            return _whole_step(upper)
        return f"{upper}#"
    if pitch.endswith("#"):
        if letter in ("B", "E"):
            return f"{_whole_step(letter)}#"
        return _whole_step(letter)
    if letter in ("B", "E"):
        return _whole_step(letter)
    return f"{letter}#"


def is_pitch_equal(one: str, two: str) -> bool:
    """Whether two spellings name the same pitch."""
    return one == two or two in _ENHARMONICS.get(one, ())


def compare_pitch(one: str, two: str) -> int:
    """Compare two pitches in one octave: 0 if equal, 1 if ``one`` is higher, -1 if lower."""
    if is_pitch_equal(one, two):
        return 0
    first, second = _letter(one), _letter(two)
    if first != second:
        return 1 if _STEPS.index(first) > _STEPS.index(second) else -1
    return 1 if len(two) > 1 else -1