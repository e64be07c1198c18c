"""Time signatures and note durations in beats."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from numnotation.model import Measure, Note, NoteLength

_BASE_LENGTH = {
    NoteLength.QUARTER: 1.0,
    NoteLength.HALF: 2.0,
    NoteLength.WHOLE: 4.0,
    NoteLength.EIGHTH: 0.5,
    NoteLength.SIXTEENTH: 0.25,
}


@dataclass
class Time:
    """A time signature starting at a given measure."""

    measure: int = 0
    beat: int = 0
    beat_type: int = 0

    def notated(self) -> str:
        return f"{self.beat}/{self.beat_type}"

    def __str__(self) -> str:
        return self.notated()

    def note_length(self, note: Note) -> float:
        """Length of ``note`` in beats under this signature."""
        if self.beat_type == 8:
            ratio = 2.0
        elif self.beat_type == 2:
            ratio = 0.5
        else:
            ratio = 1.0
        base = _BASE_LENGTH.get(note.type, 0.0) * ratio
        return base + base * (1 - 0.5 ** note.dots)


@dataclass
class TimeSignature:
    """All time signatures of a piece, in measure order."""

    signatures: list[Time] = field(default_factory=list)
    is_mixed: bool = False

    def humanized(self) -> str:
        """Beat count in words, such as ``"4 ketuk"``."""
        if not self.signatures:
            raise ValueError("no time signature")
        if not self.is_mixed:
            return f"{self.signatures[0].beat} ketuk"
        beats = dict.fromkeys(str(sig.beat) for sig in self.signatures)
        return " dan ".join(beats) + " ketuk"

    def signature_on_measure(self, measure: int) -> Time:
        """The time signature in force at ``measure``."""
        if not self.signatures:
            raise ValueError("no time signature")
        current = self.signatures[0]
        for sig in self.signatures:
            if sig.measure > measure:
                break
            current = sig
        return current

    def note_length(self, measure: int, note: Note) -> float:
        return self.signature_on_measure(measure).note_length(note)


def from_measures(measures: Iterable[Measure]) -> TimeSignature:
    """Collect the time signatures declared in ``measures``."""
    times = [
        Time(measure=m.number, beat=m.beats, beat_type=m.beat_type)
        for m in measures
        if m.beats is not None and m.beat_type is not None
    ]
    distinct = {(t.beat, t.beat_type) for t in times}
    return TimeSignature(signatures=times, is_mixed=len(distinct) > 1)