"""Dot spacing, slurs and ties in numbered notation."""

from __future__ import annotations

import math
from typing import Iterable, Protocol, Sequence

from numnotation.model import (
    Coordinate,
    CoordinateWithOctave,
    Note,
    NoteRenderer,
    Slur,
    SlurBezier,
    SlurLineType,
    SlurType,
)

UPPERCASE_LENGTH = 20
LOWERCASE_LENGTH = 15
LAYOUT_INDENT_LENGTH = 50

_CURVE_STYLE = "fill:none;stroke:#000000;stroke-linecap:round;stroke-width:1.5"
_DASHED_SUFFIX = ";stroke-dasharray:3 3;"


class _CurveCanvas(Protocol):
    def group(self, *args: str) -> None: ...
    def gend(self) -> None: ...
    def qbez(self, sx: int, sy: int, cx: int, cy: int, ex: int, ey: int, *args: str) -> None: ...


def _round(value: float) -> int:
    """Round half away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def adjust_multi_dotted(notes: Sequence[NoteRenderer], x: int, y: int) -> tuple[int, int]:
    """Place ``notes`` from ``x`` on line ``y``, spacing runs of dots evenly.

    Returns the x position after the last note and the unchanged y.
    """
    x_notes = 0
    continue_dot = False
    last_dot_loc = 0
    dot_count = 0
    prev: NoteRenderer | None = None
    revision_x: dict[int, int] = {}
    last_index = len(notes) - 1

    for index, note in enumerate(notes):
        if note.is_dotted:
            dot_count += 1
            base = last_dot_loc if continue_dot else x_notes
            last_dot_loc = base + UPPERCASE_LENGTH
            revision_x[index] = last_dot_loc
            continue_dot = True
        elif note.has_breath_mark():
            pass
        else:
            x_notes = x
            continue_dot = False
            dot_count = 0

        note.position_x = x
        note.position_y = y
        x += note.width
        if prev is not None and prev.is_length_taken_from_lyric and note.is_dotted:
            dots_width = UPPERCASE_LENGTH * dot_count
            if prev.width > dots_width:
                x = (x - (prev.width - dots_width)) + UPPERCASE_LENGTH

        note.index_position = index
        prev = note
        if note.is_dotted and index == last_index and dot_count > 1:
            x += LOWERCASE_LENGTH
        if note.is_new_line:
            x = LAYOUT_INDENT_LENGTH

    for index, position in revision_x.items():
        notes[index].position_x = position

    return x, y


def set_rhythm_notation(renderer: NoteRenderer, note: Note, numbered_note: int) -> None:
    """Copy slurs, tie and tuplet of ``note`` onto ``renderer``."""
    notations = note.notations
    if notations is None:
        return

    if notations.slurs:
        renderer.slurs = {}
    for slur in notations.slurs:
        if slur.number in renderer.slurs:
            renderer.slurs[slur.number] = Slur(slur.number, SlurType.HOP)
        else:
            renderer.slurs[slur.number] = Slur(slur.number, slur.type, slur.line_type)

    if notations.tied is not None:
        renderer.tie = Slur(numbered_note, notations.tied)

    renderer.tuplet = notations.tuplet


def render_bezier(beziers: Sequence[SlurBezier], canvas: _CurveCanvas) -> None:
    """Draw each slur or tie as a quadratic curve below the notes."""
    if not beziers:
        return

    canvas.group("class='slurties'")
    for bezier in beziers:
        start = CoordinateWithOctave(bezier.start.x + 5, bezier.start.y + 5, bezier.start.octave)
        end = CoordinateWithOctave(bezier.end.x + 5, bezier.end.y + 5, bezier.end.octave)

        offset = 5.0 if bezier.line_type is not None else 3.0
        if start.octave < 0:
            start = CoordinateWithOctave(start.x + offset, start.y + offset)
        if end.octave < 0:
            end = CoordinateWithOctave(end.x - offset, end.y + offset)

        pull_y = start.y
        if int((end.x - start.x) / UPPERCASE_LENGTH) < 5:
            pull_y += 7.5
        else:
            pull_y += 10
        pull = Coordinate(start.x + (end.x - start.x) / 2, pull_y)

        style = _CURVE_STYLE
        if bezier.line_type == SlurLineType.DASHED:
            style += _DASHED_SUFFIX

        canvas.qbez(
            _round(start.x),
            _round(start.y),
            _round(pull.x),
            _round(pull.y),
            _round(end.x),
            _round(end.y),
            style,
        )
    canvas.gend()


def _point(x: float, y: float, octave: int = 0) -> CoordinateWithOctave:
    return CoordinateWithOctave(float(x), float(y), octave)


def render_slur_ties(
    canvas: _CurveCanvas, notes: Iterable[NoteRenderer], max_x: float
) -> None:
    """Pair slur and tie starts with their stops and draw the curves.

    A slur left open runs to just before ``max_x``.
    """
    slurs: dict[int, SlurBezier] = {}
    slur_set: list[SlurBezier] = []
    ties: dict[int, SlurBezier] = {}
    tie_set: list[SlurBezier] = []

    for note in notes:
        for slur in note.slurs.values():
            if slur.type in (SlurType.STOP, SlurType.HOP):
                current = slurs.pop(slur.number, None) or SlurBezier()
                start = current.start
                if start.x == 0 and start.y == 0:
                    start = _point(note.position_x - UPPERCASE_LENGTH, note.position_y)
                slur_set.append(
                    SlurBezier(
                        start=start,
                        end=_point(note.position_x - 2, note.position_y, note.octave),
                        pull=current.pull,
                        line_type=current.line_type,
                    )
                )

            if slur.type in (SlurType.START, SlurType.HOP):
                slurs[slur.number] = SlurBezier(
                    start=_point(note.position_x + 2, note.position_y, note.octave),
                    line_type=slur.line_type,
                )

        tie = note.tie
        if tie is None:
            continue
        if tie.type == SlurType.START:
            ties[note.note] = SlurBezier(
                start=_point(note.position_x, note.position_y, note.octave),
                line_type=tie.line_type,
            )
        elif tie.type == SlurType.STOP:
            current = ties.get(note.note) or SlurBezier()
            closed = SlurBezier(
                start=current.start,
                end=_point(note.position_x, note.position_y, note.octave),
                pull=current.pull,
                line_type=current.line_type,
            )
            ties[note.note] = closed
            tie_set.append(closed)
            slurs.pop(note.note, None)

    for open_slur in slurs.values():
        end = open_slur.end
        if end.x == 0 and end.y == 0:
            end = _point(max_x - 5, open_slur.start.y)
        slur_set.append(
            SlurBezier(
                start=open_slur.start,
                end=end,
                pull=open_slur.pull,
                line_type=open_slur.line_type,
            )
        )

    render_bezier(slur_set, canvas)
    render_bezier(tie_set, canvas)