"""
Shared data types for the canvas editor.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple


class Mode(Enum):
    """Editor interaction modes. Exactly one is active at a time."""

    SELECT = "select"
    FREEHAND_DRAW = "draw"
    ERASE = "erase"


class StyleKind(Enum):
    """Toggleable text styles."""

    BOLD = "bold"
    ITALIC = "italic"
    UNDERLINE = "underline"


class ObjectKind(Enum):
    """Scene object variants."""

    STROKE = "stroke"
    TEXT = "textbox"
    IMAGE = "image"


class Orientation(Enum):
    """Document page orientation."""

    PORTRAIT = "portrait"
    LANDSCAPE = "landscape"


@dataclass
class BrushConfig:
    """Style of the next (and currently drawing) stroke."""

    color: str = "#000000"
    width: float = 5


@dataclass
class TextDefaults:
    """Font used for newly created text boxes."""

    font_family: str = "Arial"
    font_size: int = 20


@dataclass(frozen=True)
class Bitmap:
    """A decoded image, re-encoded as PNG."""

    data: bytes
    width: int
    height: int


@dataclass(frozen=True)
class RasterSnapshot:
    """Result of rasterizing the canvas."""

    data: bytes
    width: int  # logical canvas width
    height: int  # logical canvas height
    multiplier: float = 2
    pixel_width: int = 0
    pixel_height: int = 0
    format: str = "png"


# Type aliases for clarity
Color = Tuple[float, float, float]
Rect = Tuple[float, float, float, float]
Point = Tuple[float, float]
Path = List[Point]

_HEX_COLOR = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


def normalize_hex(color: str) -> str:
    """Normalize ``#rgb``/``#rrggbb`` to lowercase ``#rrggbb``.

    Raises:
        ValueError: If the string is not a hex colour
    """
    if not isinstance(color, str) or not _HEX_COLOR.match(color):
        raise ValueError(f"Invalid colour: {color!r}")

    digits = color[1:].lower()
    if len(digits) == 3:
        digits = "".join(c * 2 for c in digits)
    return f"#{digits}"


def hex_to_rgb(color: str) -> Color:
    """Convert a hex colour to an RGB tuple in the 0-1 range."""
    digits = normalize_hex(color)[1:]
    r, g, b = (int(digits[i : i + 2], 16) for i in (0, 2, 4))
    return (r / 255, g / 255, b / 255)
