# numnotation

numnotation provides the building blocks for drawing hymn scores in
numbered notation (also called cipher notation or jianpu) as SVG. Scale
degrees are written as the digits 1–7 relative to a movable *do*. Around
them the package places octave dots, underline beams, slurs, ties, tuplet
numbers, repeat-ending brackets and texts above the staff. It also includes
helpers for the service around such a renderer: an SQLite store for hymn
metadata and verses, an INI configuration loader and JSON response bodies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

The package has no runtime dependencies beyond the Python standard library.
It needs Python 3.10 or newer.

## Modules

- `numnotation.model`: dataclasses and enums shared by the other modules.
  `Note`, `Measure`, `Barline`, `Notations` and related records describe a
  score. `NoteRenderer` is a glyph placed on the staff (note, dot, breath
  mark or barline) with its position, beams, slurs, tie and texts.
  `NoteRenderer.update_beam` sets the state of one beam level. `StaffInfo`
  holds the layout outcome of a staff line.
- `numnotation.pitch`: `next_half_step` gives the pitch one semitone up.
  `is_pitch_equal` tells whether two spellings are enharmonic.
  `compare_pitch` orders two pitches within one octave. Sharps (`#`), flats
  (`b`), double sharps (`x`) and double flats (`bb`) are understood. An
  unknown letter raises `ValueError`.
- `numnotation.timesig`: `from_measures` collects the time signatures
  declared in a list of measures into a `TimeSignature`.
  `signature_on_measure` returns the `Time` in force at a measure, and
  `note_length` gives a note's length in beats, counting dots. `humanized`
  gives the beat count as text, such as `"4 ketuk"` or `"3 dan 4 ketuk"`.
- `numnotation.numbered`: `note_lengths` splits a length in beats into
  `LengthPart` glyphs, which are the note itself plus any following dots.
  `render_octave` draws the octave dots above or below notes.
- `numnotation.rhythm`: `adjust_multi_dotted` places a measure's glyphs and
  spaces runs of dots. `set_rhythm_notation` copies slurs, tie and tuplet
  from a `Note` onto its `NoteRenderer`. `render_bezier` and
  `render_slur_ties` pair the slur and tie starts with their stops and draw
  the arcs.
- `numnotation.beams`: `render_beam` marks where each beam level begins and
  ends. It breaks long beam groups into groups of two and three and draws
  one line per beam.
- `numnotation.staff`: `split_lines` breaks a list of measures into staff
  lines at each measure that starts a new system. `render_measure_topping`
  draws repeat-ending brackets with their numbers. `render_measure_text`
  draws texts above notes and takes a function that measures text width.
  `render_tuplet` draws tuplet numbers. `set_measure_text` attaches a note's
  direction text to its renderer.
- `numnotation.canvas`: `SvgCanvas` writes SVG into memory. It supports
  groups, defs, circles, lines, paths, quadratic Béziers, text and raw
  markup, and `getvalue` returns the document. Its `Delegator` records
  errors passed to `on_error` and answers `ErrorFlow.IGNORE`. It also notes
  when `on_before_start_write` is called.
- `numnotation.fonts`: `google_font_css` downloads the web-font stylesheet
  for a `|`-separated list of families. It returns empty bytes on any
  failure. `font_style_block` wraps CSS in an SVG `<style>` element.
- `numnotation.repository`: `Repository` works on an open `sqlite3`
  connection that already has the `jdy_hymn` and `jdy_hymn_verces` tables.
  `hymn_metadata` returns a `HymnMetadata` with its verses, or raises
  `HymnNotFoundError`. `insert_verse` returns the new row id and stores a
  zero style, column or row as NULL. `hymn_variants` lists a hymn's named
  variants.
- `numnotation.config`: `load_config` reads an INI file, or `config.ini` in
  a directory, into a `Config`. The `Config` has `webserver`, `musicxml` and
  `sqlite` sections. An unknown section or variable raises `ValueError`.
- `numnotation.responses`: `error_response`, `success_response` and
  `insert_success_response` return a status code and a JSON body as bytes.
  `AppError` carries a user-facing title and the place it was raised from.
  `Pagination` holds page links.

## Example

```python
from numnotation.pitch import compare_pitch, is_pitch_equal, next_half_step
from numnotation.numbered import note_lengths
from numnotation.timesig import Time, TimeSignature

next_half_step("C")    # "C#"
next_half_step("B")    # "C"
next_half_step("Bx")   # "D"
is_pitch_equal("C#", "Db")   # True
compare_pitch("D", "C")      # 1

four_four = TimeSignature(signatures=[Time(measure=1, beat=4, beat_type=4)])
note_lengths(four_four, 1, 1.5)
# [LengthPart(type=NoteLength.QUARTER, is_dotted=False),
#  LengthPart(type=NoteLength.EIGHTH, is_dotted=True)]
```

## What it does not do

The package has no MusicXML reader. Scores must be built as `Measure` and
`Note` objects by the caller. It also has no renderer that lays out a whole
page. There is no conversion from pitch to scale degree by key signature,
no lyric or verse layout, and no barline drawing: the modules above draw
the parts of a staff they name, and the caller combines them. There is no
command-line tool and no web server. `numnotation.responses` only builds
response bodies, and `numnotation.config` only reads settings.