"""Conversion of note durations to numbered-notation glyphs."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Protocol

from numnotation.model import NoteLength, NoteRenderer
from numnotation.timesig import TimeSignature

_OCTAVE_STYLE = "fill:#000000;fill-opacity:1;stroke:#000000;stroke-width:0.5"


@dataclass(frozen=True)
class LengthPart:
    """One glyph of a note: the note itself or a following dot."""

    type: NoteLength | None = None
    is_dotted: bool = False


class _OctaveCanvas(Protocol):
    def group(self, *args: str) -> None: ...
    def gend(self) -> None: ...
    def circle(self, x: int, y: int, r: int, *args: str) -> None: ...


def _with_dots(first: NoteLength, note_length: float) -> list[LengthPart]:
    whole = math.trunc(note_length)
    parts = [LengthPart(first)]
    parts.extend(LengthPart(first, True) for _ in range(whole - 1))
    if whole != note_length:
        parts.append(LengthPart(NoteLength.EIGHTH, True))
    return parts


def note_lengths(
    time_signature: TimeSignature, measure: int, note_length: float
) -> list[LengthPart]:
    """Glyphs needed to show a note lasting ``note_length`` beats."""
    beat_type = time_signature.signature_on_measure(measure).beat_type

    if beat_type in (4, 2):
        fixed = {
            0.75: [LengthPart(NoteLength.EIGHTH), LengthPart(NoteLength.SIXTEENTH, True)],
            0.5: [LengthPart(NoteLength.EIGHTH)],
            0.25: [LengthPart(NoteLength.SIXTEENTH)],
        }
        if note_length in fixed:
            return fixed[note_length]
        return _with_dots(NoteLength.QUARTER, note_length)

    if beat_type == 8:
        fixed = {
            1: [LengthPart(NoteLength.EIGHTH)],
            0.75: [LengthPart(NoteLength.EIGHTH), LengthPart(None, True)],
            0.5: [LengthPart(NoteLength.SIXTEENTH)],
            0.25: [LengthPart(NoteLength.THIRTY_SECOND)],
            0.125: [LengthPart(NoteLength.SIXTY_FOURTH)],
            0.0625: [LengthPart(NoteLength.HUNDRED_TWENTY_EIGHTH)],
        }
        if note_length in fixed:
            return fixed[note_length]
        return _with_dots(NoteLength.EIGHTH, note_length)

    return []


def render_octave(canvas: _OctaveCanvas, notes: Iterable[NoteRenderer]) -> None:
    """Draw octave dots above or below notes that are not in the middle octave."""
    has_octave = False
    for note in notes:
        if note.octave == 0:
            continue
        if not has_octave:
            canvas.group("class='octaves'")
            has_octave = True
        if note.octave < 0:
            canvas.circle(note.position_x + 5, note.position_y + 5, 1, _OCTAVE_STYLE)
        else:
            canvas.circle(note.position_x + 5, note.position_y - 15, 1, _OCTAVE_STYLE)
    if has_octave:
        canvas.gend()