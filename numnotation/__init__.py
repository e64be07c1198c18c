"""Building blocks for drawing hymn scores in numbered notation as SVG."""

__version__ = "0.1.0"

__all__ = [
    "beams",
    "canvas",
    "config",
    "fonts",
    "model",
    "numbered",
    "pitch",
    "repository",
    "responses",
    "rhythm",
    "staff",
    "timesig",
]