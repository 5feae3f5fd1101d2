"""
Editor configuration.
"""

from dataclasses import dataclass, field
from typing import List, Tuple

FONT_FAMILIES: List[str] = [
    "Arial",
    "Courier New",
    "Georgia",
    "Times New Roman",
    "Verdana",
]

MIN_BRUSH_WIDTH = 1
MAX_BRUSH_WIDTH = 30

PNG_FILENAME = "canvas.png"
PDF_FILENAME = "canvas.pdf"


@dataclass
class EditorConfig:
    """Fixed parameters of an editor instance.

    Args:
        width: Canvas width in px
        height: Canvas height in px
        background: Canvas background colour (hex)
        export_multiplier: Supersampling factor used for raster export
        font_family: Initial font for new text boxes
        font_size: Initial font size for new text boxes
        brush_color: Initial brush colour (hex)
        brush_width: Initial brush width
        text_content: Content of a freshly added text box
        text_position: Where new text boxes are placed
        image_position: Where imported images are placed
        image_scale: Down-scale applied to imported images
    """

    width: int = 800
    height: int = 600
    background: str = "#ffffff"
    export_multiplier: float = 2
    font_family: str = "Arial"
    font_size: int = 20
    brush_color: str = "#000000"
    brush_width: float = 5
    text_content: str = "Edit me!"
    text_position: Tuple[float, float] = (100, 100)
    image_position: Tuple[float, float] = (150, 150)
    image_scale: float = 0.5
    font_families: List[str] = field(default_factory=lambda: list(FONT_FAMILIES))

    @property
    def eraser_color(self) -> str:
        """Erasing paints with the background colour."""
        return self.background
