"""Staff line splitting and the texts drawn above a staff."""

from __future__ import annotations

import math
from typing import Callable, Iterable, Protocol, Sequence

from numnotation.model import (
    MEASURE_TEXT_FINE,
    MEASURE_TEXT_REFREIN,
    BarlineLocation,
    BarStyle,
    Coordinate,
    Measure,
    MeasureText,
    Note,
    NoteRenderer,
    TextAlignment,
    TupletType,
)
from numnotation.rhythm import LAYOUT_INDENT_LENGTH

LAYOUT_WIDTH = 720

_TOPPING_LINE_STYLE = "fill:none;stroke:#000000;stroke-linecap:round;stroke-width:1.1"
_ENDING_START = "start"
_ENDING_CLOSERS = ("stop", "discontinue")

_OFFSET_START = {BarStyle.REGULAR: 9, BarStyle.LIGHT_HEAVY: 4}
_OFFSET_END = {BarStyle.LIGHT_HEAVY: -3}


class _TextCanvas(Protocol):
    def group(self, *args: str) -> None: ...
    def gend(self) -> None: ...
    def text(self, x: int, y: int, text: str, *args: str) -> None: ...
    def line(self, x1: int, y1: int, x2: int, y2: int, *args: str) -> None: ...


def _round(value: float) -> int:
    """Round half away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def split_lines(measures: Sequence[Measure]) -> list[list[Measure]]:
    """Split measures into staff lines at each measure that starts a new system.

    When the last measure starts a new system an empty line follows it.
    """
    lines: list[list[Measure]] = []
    current: list[Measure] = []
    new_system_at_end = False
    for index, measure in enumerate(measures):
        if measure.new_system:
            new_system_at_end = index == len(measures) - 1
            lines.append(current)
            current = []
        current.append(measure)

    lines.append(current)
    if new_system_at_end:
        lines.append([])
    return lines


def render_measure_topping(canvas: _TextCanvas, notes: Iterable[NoteRenderer]) -> None:
    """Draw volta brackets with their numbers over repeat endings."""
    notes = list(notes)
    right_styles = {
        note.measure_number: note.barline.bar_style
        for note in notes
        if note.barline is not None and note.barline.location == BarlineLocation.RIGHT
    }

    pairs: list[list[Coordinate]] = []
    labels: list[str] = []
    styles: list[list[BarStyle | None]] = []
    for note in notes:
        barline = note.barline
        if barline is None or barline.ending is None:
            continue
        point = Coordinate(float(note.position_x), float(note.position_y))
        if barline.ending.type == _ENDING_START:
            pairs.append([point, Coordinate()])
            labels.append(barline.ending.number)
            styles.append([right_styles.get(note.measure_number - 1, BarStyle.REGULAR), None])
        elif barline.ending.type in _ENDING_CLOSERS:
            if not pairs:
                raise ValueError("ending closed before it was started")
            pairs[-1][1] = point
            styles[-1][1] = barline.bar_style

    if not pairs:
        return

    canvas.group("class='staff-topping'")
    for (start, end), label, (begin_style, end_style) in zip(pairs, labels, styles):
        x1 = _round(start.x) - _OFFSET_START.get(begin_style, 0)
        x2 = _round(end.x) - _OFFSET_END.get(end_style, 0)
        start_y = _round(start.y)
        end_y = _round(end.y)
        canvas.text(x1 + 3, start_y - 12, label, 'style="font-weight:bold;font-size:90%"')
        canvas.line(x1, start_y - 19, x1, end_y - 25, _TOPPING_LINE_STYLE)
        canvas.line(x1, start_y - 25, x2, end_y - 25, _TOPPING_LINE_STYLE)
        canvas.line(x2, start_y - 19, x2, end_y - 25, _TOPPING_LINE_STYLE)
    canvas.gend()


def render_measure_text(
    canvas: _TextCanvas,
    notes: Iterable[NoteRenderer],
    text_width: Callable[[str], float],
) -> None:
    """Draw the texts above notes; right-aligned ones end at the right margin."""
    has_text = False
    for note in notes:
        if not note.measure_texts:
            continue
        if not has_text:
            canvas.group("class='staff-text'")
            has_text = True

        note.measure_texts.sort(key=lambda item: item.relative_y)
        for index, measure_text in enumerate(note.measure_texts):
            style = ['font-style="italic"']
            if measure_text.text not in (MEASURE_TEXT_REFREIN, MEASURE_TEXT_FINE):
                style.append('font-size="60%"')
            x = note.position_x
            if measure_text.alignment == TextAlignment.RIGHT:
                x = LAYOUT_WIDTH - LAYOUT_INDENT_LENGTH - int(text_width(measure_text.text))
            canvas.text(x, note.position_y - 23 + index * 15, measure_text.text, *style)

    if has_text:
        canvas.gend()


def render_tuplet(canvas: _TextCanvas, notes: Iterable[NoteRenderer]) -> None:
    """Draw the tuplet number centred over each tuplet."""
    pairs: list[list[Coordinate]] = []
    counts: list[int] = []
    for note in notes:
        if note.tuplet is None:
            continue
        point = Coordinate(float(note.position_x), float(note.position_y))
        if note.tuplet.type == TupletType.START:
            if note.actual_notes is None:
                raise ValueError("tuplet start without a time modification")
            pairs.append([point, Coordinate()])
            counts.append(note.actual_notes)
        elif note.tuplet.type == TupletType.STOP:
            if not pairs:
                raise ValueError("tuplet stopped before it was started")
            pairs[-1][1] = point

    if not pairs:
        return

    canvas.group("class='tuplet'", 'style="font-size:80%"')
    for (start, end), count in zip(pairs, counts):
        width = end.x - start.x
        canvas.text(int(start.x + width / 2), int(start.y) - 20, str(count))
    canvas.gend()


def set_measure_text(renderer: NoteRenderer, note: Note, is_last_note: bool) -> None:
    """Attach the note's text to the renderer; only the note's last text is kept.

    Text on the last note of a measure is right-aligned.
    """
    if not note.measure_texts:
        return
    alignment = TextAlignment.RIGHT if is_last_note else TextAlignment.LEFT
    last = note.measure_texts[-1]
    renderer.measure_texts = [MeasureText(last.text, last.relative_y, alignment)]