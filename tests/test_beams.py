from numnotation.beams import render_beam
from numnotation.model import Beam, BeamType, NoteRenderer

BEAM_STYLE = "fill:none;stroke:#000000;stroke-linecap:round;stroke-width:1.2"


class Recorder:
    def __init__(self):
        self.calls = []

    def group(self, *args):
        self.calls.append(("group", *args))

    def gend(self):
        self.calls.append(("gend",))

    def line(self, x1, y1, x2, y2, *args):
        self.calls.append(("line", x1, y1, x2, y2, *args))


def beamed(count, levels=(1,), start=50, step=20, y=100):
    return [
        NoteRenderer(
            position_x=start + i * step,
            position_y=y,
            index_position=i,
            beams={level: Beam(level, BeamType.ADDITIONAL) for level in levels},
        )
        for i in range(count)
    ]


def drawn_lines(recorder):
    return [call for call in recorder.calls if call[0] == "line"]


def level_types(notes, level=1):
    return [note.beams[level].type if level in note.beams else None for note in notes]


def count_ends(notes, level):
    return sum(1 for t in level_types(notes, level) if t == BeamType.END)


def test_notes_without_beams_draw_nothing():
    canvas = Recorder()
    render_beam(canvas, [NoteRenderer(position_x=50), NoteRenderer(position_x=70)])
    assert canvas.calls == []


def test_empty_notes_draw_nothing():
    canvas = Recorder()
    render_beam(canvas, [])
    assert canvas.calls == []


def test_pair_of_eighths_share_one_horizontal_line():
    notes = beamed(2)
    canvas = Recorder()
    render_beam(canvas, notes)

    lines = drawn_lines(canvas)
    assert len(lines) == count_ends(notes, 1)
    _, x1, y1, x2, y2, style = lines[0]
    assert x1 == notes[0].position_x
    assert y1 == y2
    assert x2 > notes[1].position_x
    assert style == BEAM_STYLE
    assert canvas.calls[0] == ("group", "class='beam'")
    assert canvas.calls[-1] == ("gend",)


def test_four_eighths_are_split_in_pairs():
    notes = beamed(4)
    canvas = Recorder()
    render_beam(canvas, notes)
    assert level_types(notes) == [BeamType.BEGIN, BeamType.END, BeamType.BEGIN, BeamType.END]
    assert len(drawn_lines(canvas)) == count_ends(notes, 1)


def test_six_eighths_are_split_in_three_pairs():
    notes = beamed(6)
    canvas = Recorder()
    render_beam(canvas, notes)
    assert level_types(notes) == [BeamType.BEGIN, BeamType.END] * 3
    assert len(drawn_lines(canvas)) == count_ends(notes, 1)


def test_unbeamed_note_breaks_the_beam():
    notes = beamed(5)
    notes[2].beams = {}
    canvas = Recorder()
    render_beam(canvas, notes)
    assert notes[2].beams == {}
    assert notes[1].beams[1].type == BeamType.END
    assert notes[3].beams[1].type == BeamType.BEGIN
    lines = drawn_lines(canvas)
    assert len(lines) == count_ends(notes, 1)
    assert all(line[2] == line[4] for line in lines)


def test_sixteenths_draw_two_levels():
    notes = beamed(4, levels=(1, 2))
    canvas = Recorder()
    render_beam(canvas, notes)
    lines = drawn_lines(canvas)
    assert len(lines) == count_ends(notes, 1) + count_ends(notes, 2)
    assert len({line[2] for line in lines}) == len({1, 2})
    assert [line[1] for line in lines] == sorted(line[1] for line in lines)


def test_lone_beamed_note_gets_a_short_line():
    notes = beamed(1)
    canvas = Recorder()
    render_beam(canvas, notes)
    lines = drawn_lines(canvas)
    assert len(lines) == count_ends(notes, 1)
    assert lines[0][1] == notes[0].position_x
    assert lines[0][3] > lines[0][1]


def test_lines_are_drawn_in_order_of_start_x():
    notes = beamed(4, start=200, step=-30)
    canvas = Recorder()
    render_beam(canvas, notes)
    starts = [line[1] for line in drawn_lines(canvas)]
    assert starts == sorted(starts)
    assert len(starts) == count_ends(notes, 1)