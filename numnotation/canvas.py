"""An SVG drawing surface with an error delegator."""

from __future__ import annotations

import io
from enum import Enum
from xml.sax.saxutils import escape

_XML_ENTITIES = {'"': "&quot;", "'": "&apos;"}


class ErrorFlow(str, Enum):
    """What to do after an error is reported to the delegator."""

    IGNORE = "ignore"
    STOP = "stop"
    REDIRECT = "redirect"


class Delegator:
    """Hooks called around drawing; the default ignores errors.

    It remembers whether writing has begun and the errors reported to it.
    """

    def __init__(self) -> None:
        self.write_started = False
        self.errors: list[Exception] = []

    def on_before_start_write(self) -> None:
        """Note that the document is about to be written."""
        self.write_started = True

    def on_error(self, error: Exception) -> ErrorFlow:
        """Record the error and tell the caller to carry on."""
        self.errors.append(error)
        return ErrorFlow.IGNORE


def _attributes(styles: tuple[str, ...], end: str) -> str:
    parts = []
    for item in styles:
        if item.find("=") > 0:
            parts.append(item)
        elif item:
            parts.append(f'style="{item}"')
        else:
            parts.append("")
    return "".join(f"{p} " for p in parts) + end


def _coord(x: int, y: int) -> str:
    return f"{int(x)},{int(y)}"


class SvgCanvas:
    """Writes SVG elements into an in-memory document."""

    def __init__(self, delegator: Delegator | None = None) -> None:
        self._out = io.StringIO()
        self.delegator = delegator or Delegator()

    def write(self, data: str | bytes) -> int:
        """Write raw markup into the document."""
        if isinstance(data, bytes):
            data = data.decode("utf-8")
        return self._out.write(data)

    def getvalue(self) -> str:
        return self._out.getvalue()

    def start(self, width: int, height: int, *args: str) -> None:
        self.write('<?xml version="1.0"?>\n')
        self.write(f'<svg width="{int(width)}" height="{int(height)}"')
        for extra in args:
            self.write(f"\n     {extra}")
        self.write(
            ' xmlns="http://www.w3.org/2000/svg"\n'
            '     xmlns:xlink="http://www.w3.org/1999/xlink">\n'
        )

    def end(self) -> None:
        self.write("</svg>\n")

    def defs_start(self) -> None:
        self.write("<defs>\n")

    def defs_end(self) -> None:
        self.write("</defs>\n")

    def group(self, *args: str) -> None:
        self.write(f"<g {_attributes(args, '>')}\n")

    def gend(self) -> None:
        self.write("</g>\n")

    def circle(self, x: int, y: int, r: int, *args: str) -> None:
        self.write(
            f'<circle cx="{int(x)}" cy="{int(y)}" r="{int(r)}" {_attributes(args, "/>")}\n'
        )

    def line(self, x1: int, y1: int, x2: int, y2: int, *args: str) -> None:
        self.write(
            f'<line x1="{int(x1)}" y1="{int(y1)}" x2="{int(x2)}" y2="{int(y2)}" '
            f'{_attributes(args, "/>")}\n'
        )

    def path(self, d: str, *args: str) -> None:
        self.write(f'<path d="{d}" {_attributes(args, "/>")}\n')

    def qbez(self, sx: int, sy: int, cx: int, cy: int, ex: int, ey: int, *args: str) -> None:
        self.path(f"M{_coord(sx, sy)} Q{_coord(cx, cy)} {_coord(ex, ey)}", *args)

    def qbezier(
        self, sx: int, sy: int, cx: int, cy: int, ex: int, ey: int, tx: int, ty: int, *args: str
    ) -> None:
        self.path(
            f"M{_coord(sx, sy)} Q{_coord(cx, cy)} {_coord(ex, ey)} T{_coord(tx, ty)}", *args
        )

    def text(self, x: int, y: int, text: str, *args: str) -> None:
        self.write(
            f'<text x="{int(x)}" y="{int(y)}" {_attributes(args, ">")}'
            f"{escape(text, _XML_ENTITIES)}</text>\n"
        )