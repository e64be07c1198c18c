"""Grouping of beamed notes and drawing of their beam lines."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Protocol, Sequence

from numnotation.model import Beam, BeamLine, BeamType, Coordinate, NoteRenderer

_BEAM_STYLE = "fill:none;stroke:#000000;stroke-linecap:round;stroke-width:1.2"
_BEAM_END_EXTENT = 8


class _BeamCanvas(Protocol):
    def group(self, *args: str) -> None: ...
    def gend(self) -> None: ...
    def line(self, x1: int, y1: int, x2: int, y2: int, *args: str) -> None: ...


@dataclass(frozen=True)
class _Segment:
    """Indexes of the first and last note under one beam."""

    start: int
    end: int

    @property
    def length(self) -> int:
        return self.end - self.start + 1


@dataclass(frozen=True)
class _Switch:
    type: BeamType
    begin: int


def _round(value: float) -> int:
    """Round half away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def _set_beam(note: NoteRenderer, number: int, beam_type: BeamType) -> None:
    beams = dict(note.beams)
    beams[number] = Beam(number, beam_type)
    note.beams = beams


def _clean_beam(notes: Sequence[NoteRenderer], number: int) -> list[_Segment]:
    """Mark begin, continue and end on beam level ``number`` and return its segments."""
    switch: _Switch | None = None
    segments: list[_Segment] = []
    prev: NoteRenderer | None = None

    for index, note in enumerate(notes):
        if not note.beams:
            if index != 0 and switch is not None and prev is not None:
                prev.beams[number] = Beam(number, BeamType.END)
                segments.append(_Segment(switch.begin, index - 1))
                switch = None
            prev = note
            continue

        if switch is None:
            if number not in note.beams:
                prev = note
                continue
            _set_beam(note, number, BeamType.BEGIN)
            switch = _Switch(BeamType.BEGIN, index)
        elif prev is not None:
            if number in note.beams:
                _set_beam(note, number, BeamType.CONTINUE)
                switch = _Switch(BeamType.CONTINUE, switch.begin)
                prev = note
                continue
            if number in prev.beams:
                prev.beams[number] = Beam(number, BeamType.END)
                segments.append(_Segment(switch.begin, index - 1))
                switch = None
        else:
            continue
        prev = note

    if prev is not None and prev.beams:
        last = prev.beams.get(number)
        if last is not None:
            if last.type != BeamType.END:
                prev.beams[number] = Beam(number, BeamType.END)
                if switch is not None:
                    segments.append(_Segment(switch.begin, prev.index_position))
            else:
                if switch is None:
                    prev.beams[number] = Beam(number, BeamType.BACKWARD_HOOK)
                segments.append(_Segment(prev.index_position, prev.index_position))

    return segments


def _break(notes: Sequence[NoteRenderer], index: int, level: int = 1) -> None:
    """End the beam at ``index`` and start a new one on the next note."""
    notes[index].update_beam(level, BeamType.END)
    notes[index + 1].update_beam(level, BeamType.BEGIN)


def _split_beam(
    notes: Sequence[NoteRenderer], first: list[_Segment], second: list[_Segment]
) -> None:
    """Break long beams into the customary groups of two and three."""
    if not first and not second:
        return

    if not second:
        for segment in first:
            start = segment.start
            if segment.length == 4:
                _break(notes, start + 1)
            elif segment.length == 5:
                _break(notes, start + 2)
            elif segment.length == 6:
                _break(notes, start + 1)
                _break(notes, start + 3)
        return

    sub = second[0]
    distance = sub.length
    for segment in first:
        diff = segment.length
        start = segment.start
        starting_point = sub.start - start

        if diff == 4:
            if distance == 1:
                _break(notes, start + 1)
            elif distance == 4:
                _break(notes, sub.start + 1, 2)
        elif diff == 8:
            _break(notes, start + 1)
            _break(notes, start + 4)
        elif diff > 4 and sub.end <= segment.end:
            if distance == 1:
                _break(notes, start + 1 if starting_point <= 2 else start + 2)
            elif distance == 2:
                _break(notes, start + 2 if starting_point <= 1 else start + 1)
            elif distance == 3:
                offset = diff - 5
                if starting_point == offset:
                    _break(notes, start + 2 + offset)
                elif starting_point == 2 - offset:
                    _break(notes, start + 1 + offset)
            elif distance == 4:
                _break(notes, sub.start + 1, 2)
            else:
                _break(notes, sub.start + 2, 2)


def _beam_lines(notes: Iterable[NoteRenderer]) -> list[BeamLine]:
    open_beams: dict[int, BeamLine] = {}
    lines: list[BeamLine] = []
    for note in notes:
        for number in sorted(note.beams):
            beam = note.beams[number]
            position_y = float(note.position_y - 22 + beam.number * 3)
            if beam.type == BeamType.BEGIN:
                open_beams[beam.number] = BeamLine(start=Coordinate(float(note.position_x), position_y))
            elif beam.type == BeamType.END:
                end_x = float(note.position_x) + _BEAM_END_EXTENT
                current = open_beams.pop(beam.number, None)
                if current is None or current.start.x == 0:
                    line = BeamLine(
                        start=Coordinate(float(note.position_x), position_y),
                        end=Coordinate(end_x, position_y),
                    )
                else:
                    line = BeamLine(start=current.start, end=Coordinate(end_x, current.start.y))
                lines.append(line)
    return lines


def render_beam(canvas: _BeamCanvas, notes: Sequence[NoteRenderer]) -> None:
    """Regroup the beams of ``notes`` and draw a line for each beam."""
    first = _clean_beam(notes, 1)
    second = _clean_beam(notes, 2)
    _split_beam(notes, first, second)

    lines = _beam_lines(notes)
    if not lines:
        return

    canvas.group("class='beam'")
    for line in sorted(lines, key=lambda item: item.start.x):
        canvas.line(
            _round(line.start.x),
            _round(line.start.y),
            _round(line.end.x),
            _round(line.end.y),
            _BEAM_STYLE,
        )
    canvas.gend()