"""Core data types shared by the notation renderer."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

MEASURE_TEXT_REFREIN = "Refrein"
MEASURE_TEXT_FINE = "Fine"


class NoteLength(str, Enum):
    """Written note value of a note."""

    WHOLE = "whole"
    HALF = "half"
    QUARTER = "quarter"
    EIGHTH = "eighth"
    SIXTEENTH = "16th"
    THIRTY_SECOND = "32nd"
    SIXTY_FOURTH = "64th"
    HUNDRED_TWENTY_EIGHTH = "128th"


class BeamType(str, Enum):
    """State of a beam on a note."""

    BEGIN = "begin"
    CONTINUE = "continue"
    END = "end"
    FORWARD_HOOK = "forward hook"
    BACKWARD_HOOK = "backward hook"
    ADDITIONAL = "additional"


class SlurType(str, Enum):
    """State of a slur or tie on a note."""

    START = "start"
    STOP = "stop"
    CONTINUE = "continue"
    HOP = "hop"


class SlurLineType(str, Enum):
    """Line style of a slur or tie."""

    SOLID = "solid"
    DASHED = "dashed"


class TupletType(str, Enum):
    START = "start"
    STOP = "stop"


class TextAlignment(str, Enum):
    LEFT = "left"
    RIGHT = "right"


class BarlineLocation(str, Enum):
    LEFT = "left"
    RIGHT = "right"
    MIDDLE = "middle"


class BarStyle(str, Enum):
    REGULAR = "regular"
    LIGHT_HEAVY = "light-heavy"
    HEAVY_LIGHT = "heavy-light"
    LIGHT_LIGHT = "light-light"
    HEAVY_HEAVY = "heavy-heavy"
    DASHED = "dashed"
    DOTTED = "dotted"
    NONE = "none"


@dataclass
class Coordinate:
    x: float = 0.0
    y: float = 0.0


@dataclass
class CoordinateWithOctave(Coordinate):
    octave: int = 0


@dataclass
class SlurBezier:
    """A quadratic curve joining two notes."""

    start: CoordinateWithOctave = field(default_factory=CoordinateWithOctave)
    end: CoordinateWithOctave = field(default_factory=CoordinateWithOctave)
    pull: CoordinateWithOctave = field(default_factory=CoordinateWithOctave)
    line_type: SlurLineType | None = None


@dataclass
class BeamLine:
    start: Coordinate = field(default_factory=Coordinate)
    end: Coordinate = field(default_factory=Coordinate)


@dataclass
class Beam:
    number: int
    type: BeamType


@dataclass
class Slur:
    number: int
    type: SlurType
    line_type: SlurLineType | None = None


@dataclass
class Tuplet:
    type: TupletType
    number: int = 1


@dataclass
class MeasureText:
    text: str
    relative_y: float = 0.0
    alignment: TextAlignment = TextAlignment.LEFT


@dataclass
class Ending:
    number: str
    type: str


@dataclass
class Barline:
    location: BarlineLocation = BarlineLocation.RIGHT
    bar_style: BarStyle = BarStyle.REGULAR
    ending: Ending | None = None
    repeat: str | None = None


@dataclass
class NotationSlur:
    number: int
    type: SlurType
    line_type: SlurLineType | None = None


@dataclass
class Notations:
    slurs: list[NotationSlur] = field(default_factory=list)
    tied: SlurType | None = None
    tuplet: Tuplet | None = None
    breath_mark: bool = False


@dataclass
class Note:
    """A note as read from the score."""

    step: str = ""
    octave: int = 0
    alter: int = 0
    type: NoteLength | None = None
    dots: int = 0
    is_rest: bool = False
    beams: dict[int, BeamType] = field(default_factory=dict)
    notations: Notations | None = None
    lyrics: list = field(default_factory=list)
    measure_texts: list[MeasureText] = field(default_factory=list)
    actual_notes: int | None = None


@dataclass
class Measure:
    """A measure of the score with its notes and layout hints."""

    number: int
    notes: list[Note] = field(default_factory=list)
    barlines: list[Barline] = field(default_factory=list)
    new_system: bool = False
    beats: int | None = None
    beat_type: int | None = None
    key_fifths: int = 0
    new_line_index: int = -1
    right_measure_text: MeasureText | None = None


@dataclass
class NoteRenderer:
    """A glyph placed on the staff: note, dot, breath mark or barline."""

    position_x: int = 0
    position_y: int = 0
    note: int = 0
    note_length: NoteLength | None = None
    octave: int = 0
    strikethrough: bool = False
    is_rest: bool = False
    is_dotted: bool = False
    width: int = 0
    beams: dict[int, Beam] = field(default_factory=dict)
    slurs: dict[int, Slur] = field(default_factory=dict)
    tie: Slur | None = None
    tuplet: Tuplet | None = None
    measure_number: int = 0
    is_new_line: bool = False
    index_position: int = 0
    is_length_taken_from_lyric: bool = False
    breath_mark: bool = False
    barline: Barline | None = None
    measure_texts: list[MeasureText] = field(default_factory=list)
    actual_notes: int | None = None
    lyrics: list = field(default_factory=list)

    def update_beam(self, number: int, beam_type: BeamType) -> None:
        """Set the beam of the given level to the given state."""
        self.beams[number] = Beam(number, beam_type)

    def has_breath_mark(self) -> bool:
        return self.breath_mark


@dataclass
class StaffInfo:
    """Layout outcome of one rendered staff line."""

    multiline: bool = False
    margin_bottom: int = 0
    margin_left: int = 0
    next_line_renderer: list[NoteRenderer] = field(default_factory=list)