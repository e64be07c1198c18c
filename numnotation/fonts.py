"""Web font stylesheet download and embedding."""

from __future__ import annotations

import http.client
import urllib.parse
import urllib.request

GOOGLE_FONTS_URI = "https://fonts.googleapis.com/css?family="
FONT_STYLE_FORMAT = '<style type="text/css">\n<![CDATA[\n{}]]>\n</style>\n'
DEFAULT_FAMILIES = "Caladea|Old Standard TT|Noto Music|Figtree"
_TIMEOUT = 10


def google_font_css(families: str = DEFAULT_FAMILIES) -> bytes:
    """Fetch the stylesheet for ``families``; empty on any failure."""
    link = GOOGLE_FONTS_URI + urllib.parse.quote_plus(families)
    try:
        with urllib.request.urlopen(link, timeout=_TIMEOUT) as response:
            body = response.read()
            if response.status != 200:
                return b""
            return body
    except (OSError, ValueError, http.client.HTTPException):
        return b""


def font_style_block(css: str | bytes) -> str:
    """Wrap ``css`` in an SVG style element."""
    if isinstance(css, bytes):
        css = css.decode("utf-8")
    return FONT_STYLE_FORMAT.format(css)