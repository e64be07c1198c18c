from numnotation.model import (
    Beam,
    BeamType,
    Coordinate,
    CoordinateWithOctave,
    NoteRenderer,
    SlurBezier,
    StaffInfo,
)


def test_update_beam_adds_new_level():
    renderer = NoteRenderer()
    renderer.update_beam(2, BeamType.BEGIN)
    assert renderer.beams == {2: Beam(2, BeamType.BEGIN)}


def test_update_beam_replaces_existing_level():
    renderer = NoteRenderer(beams={1: Beam(1, BeamType.ADDITIONAL)})
    renderer.update_beam(1, BeamType.END)
    assert renderer.beams[1].type is BeamType.END
    assert len(renderer.beams) == 1


def test_default_collections_are_independent():
    first = NoteRenderer()
    second = NoteRenderer()
    first.update_beam(1, BeamType.BEGIN)
    assert second.beams == {}

    info_a = StaffInfo()
    info_b = StaffInfo()
    info_a.next_line_renderer.append(first)
    assert info_b.next_line_renderer == []


def test_has_breath_mark_follows_field():
    assert NoteRenderer(breath_mark=True).has_breath_mark() is True
    assert NoteRenderer().has_breath_mark() is False


def test_coordinate_with_octave_is_a_coordinate():
    point = CoordinateWithOctave(x=3, y=4, octave=-1)
    assert isinstance(point, Coordinate)
    assert (point.x, point.y, point.octave) == (3, 4, -1)


def test_slur_bezier_defaults_to_origin():
    bezier = SlurBezier()
    assert bezier.start == CoordinateWithOctave()
    assert bezier.line_type is None