"""
PyMuPDF backend implementation.

The surface composes its display list onto a scratch PDF page and
rasterizes that page for snapshots.
"""

from __future__ import annotations

import logging
import warnings
from functools import lru_cache
from typing import Any, List, Optional, Tuple

warnings.filterwarnings("ignore", message="builtin type Swig")

import pymupdf

from ..errors import DecodeError, EngineUnavailable  # noqa: E402
from ..scene import ImageObject, SceneObject, Stroke, TextBox  # noqa: E402
from ..types import Bitmap, Orientation, Rect, hex_to_rgb  # noqa: E402
from .base import DocumentWriter, ImageDecoder, RenderEngine, RenderSurface  # noqa: E402

logger = logging.getLogger(__name__)

# (regular, bold, italic, bold italic) base-14 faces
_HELVETICA = ("helv", "hebo", "heit", "hebi")
_TIMES = ("tiro", "tibo", "tiit", "tibi")
_COURIER = ("cour", "cobo", "coit", "cobi")

UNDERLINE_OFFSET = 0.12  # below baseline, in ems


def _map_font_name(family: str, bold: bool = False, italic: bool = False) -> str:
    """Map a font family to a PDF base-14 font name."""
    lower = (family or "").lower().replace("-", "").replace("_", "")

    if "courier" in lower or "mono" in lower:
        faces = _COURIER
    elif "times" in lower or "georgia" in lower or lower == "serif":
        faces = _TIMES
    else:
        faces = _HELVETICA

    return faces[(1 if bold else 0) + (2 if italic else 0)]


@lru_cache(maxsize=None)
def _font(fontname: str) -> pymupdf.Font:
    return pymupdf.Font(fontname)


def _text_layout(box: TextBox) -> Tuple[str, List[Tuple[str, float]], float, float]:
    """Lay out a text box.

    Returns:
        (fontname, [(line, baseline_y)], width, height)
    """
    fontname = _map_font_name(box.font_family, box.bold, box.italic)
    font = _font(fontname)
    size = box.font_size
    line_height = size * (font.ascender - font.descender)

    lines = box.text.split("\n") if box.text else [""]
    placed = [
        (line, box.y + size * font.ascender + i * line_height)
        for i, line in enumerate(lines)
    ]
    width = max(font.text_length(line, fontsize=size) for line in lines)
    # Keep empty boxes clickable
    width = max(width, size * 0.5)
    return fontname, placed, width, line_height * len(lines)


class PyMuPDFSurface(RenderSurface):
    """PyMuPDF render surface."""

    def __init__(self, width: int, height: int, background: str = "#ffffff"):
        super().__init__()
        self._width = width
        self._height = height
        self._background = background
        self._objects: List[SceneObject] = []
        self._active: Optional[SceneObject] = None
        self._doc: Optional[pymupdf.Document] = pymupdf.open()

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def background(self) -> str:
        return self._background

    @property
    def disposed(self) -> bool:
        return self._doc is None

    @property
    def objects(self) -> List[SceneObject]:
        return list(self._objects)

    def _check(self) -> pymupdf.Document:
        if self._doc is None:
            raise EngineUnavailable("Render surface has been disposed")
        return self._doc

    def add_object(self, obj: SceneObject) -> None:
        self._check()
        if not any(o is obj for o in self._objects):
            self._objects.append(obj)

    def remove_object(self, obj: SceneObject) -> None:
        self._check()
        self._objects = [o for o in self._objects if o is not obj]
        if self._active is obj:
            self._active = None

    def get_active_selection(self) -> Optional[SceneObject]:
        return self._active

    def set_active_selection(self, obj: Optional[SceneObject]) -> None:
        self._check()
        self._active = obj

    def request_repaint(self) -> None:
        if self._doc is not None:
            super().request_repaint()

    def bounds(self, obj: SceneObject) -> Rect:
        if isinstance(obj, Stroke):
            half = obj.width / 2
            xs = [p[0] for p in obj.points]
            ys = [p[1] for p in obj.points]
            return (min(xs) - half, min(ys) - half, max(xs) + half, max(ys) + half)

        if isinstance(obj, TextBox):
            _, _, width, height = _text_layout(obj)
            return (obj.x, obj.y, obj.x + width, obj.y + height)

        if isinstance(obj, ImageObject):
            w, h = obj.size
            return (obj.x, obj.y, obj.x + w, obj.y + h)

        return (obj.x, obj.y, obj.x, obj.y)

    def hit_test(self, x: float, y: float) -> Optional[SceneObject]:
        self._check()
        for obj in reversed(self._objects):
            if not (obj.selectable and obj.evented):
                continue
            x0, y0, x1, y1 = self.bounds(obj)
            if x0 <= x <= x1 and y0 <= y <= y1:
                return obj
        return None

    def snapshot_raster(self, multiplier: float = 2, fmt: str = "png") -> bytes:
        page = self._compose()
        pix = page.get_pixmap(matrix=pymupdf.Matrix(multiplier, multiplier), alpha=False)
        return pix.tobytes(fmt)

    def dispose(self) -> None:
        if self._doc is None:
            return
        self._doc.close()
        self._doc = None
        self._objects = []
        self._active = None
        self._repaint_listeners = []
        logger.debug("Render surface disposed")

    # Composition

    def _compose(self) -> pymupdf.Page:
        """Paint the display list onto a fresh scratch page."""
        doc = self._check()
        while doc.page_count:
            doc.delete_page(0)
        page = doc.new_page(width=self._width, height=self._height)

        page.draw_rect(page.rect, color=None, fill=hex_to_rgb(self._background), width=0)
        for obj in self._objects:
            if isinstance(obj, Stroke):
                self._draw_stroke(page, obj)
            elif isinstance(obj, TextBox):
                self._draw_text(page, obj)
            elif isinstance(obj, ImageObject):
                self._draw_image(page, obj)
        return page

    def _draw_stroke(self, page: pymupdf.Page, stroke: Stroke) -> None:
        color = hex_to_rgb(stroke.color)
        if len(stroke.points) == 1:
            page.draw_circle(stroke.points[0], stroke.width / 2, color=None, fill=color)
            return
        page.draw_polyline(
            list(stroke.points),
            color=color,
            width=stroke.width,
            lineCap=1,
            lineJoin=1,
        )

    def _draw_text(self, page: pymupdf.Page, box: TextBox) -> None:
        fontname, lines, _, _ = _text_layout(box)
        color = hex_to_rgb(box.fill)
        font = _font(fontname)

        for line, baseline in lines:
            if not line:
                continue
            page.insert_text(
                (box.x, baseline),
                line,
                fontsize=box.font_size,
                fontname=fontname,
                color=color,
            )
            if box.underline:
                y = baseline + box.font_size * UNDERLINE_OFFSET
                length = font.text_length(line, fontsize=box.font_size)
                page.draw_line(
                    (box.x, y),
                    (box.x + length, y),
                    color=color,
                    width=max(1.0, box.font_size / 15),
                )

    def _draw_image(self, page: pymupdf.Page, image: ImageObject) -> None:
        w, h = image.size
        if image.bitmap is None or w <= 0 or h <= 0:
            return
        rect = pymupdf.Rect(image.x, image.y, image.x + w, image.y + h)
        page.insert_image(rect, stream=image.bitmap.data, keep_proportion=False)


class PyMuPDFEngine(RenderEngine):
    """Creates PyMuPDF surfaces."""

    def create_surface(self, width: int, height: int, background: str = "#ffffff") -> PyMuPDFSurface:
        return PyMuPDFSurface(width, height, background)


class PyMuPDFImageDecoder(ImageDecoder):
    """Decodes any raster format MuPDF understands (PNG, JPEG, GIF, BMP, TIFF...)."""

    def decode(self, data: bytes) -> Bitmap:
        if not data:
            raise DecodeError("No image data")

        try:
            pix = pymupdf.Pixmap(bytes(data))
        except Exception as e:
            raise DecodeError(f"Unsupported image data: {e}") from e

        if pix.colorspace is None or pix.colorspace.n > 3:
            pix = pymupdf.Pixmap(pymupdf.csRGB, pix)

        return Bitmap(data=pix.tobytes("png"), width=pix.width, height=pix.height)


class PyMuPDFDocumentWriter(DocumentWriter):
    """Writes single-page PDFs."""

    def new_document(self, width: float, height: float, orientation: Orientation) -> Any:
        landscape = orientation == Orientation.LANDSCAPE
        if landscape != (width > height) and width != height:
            width, height = height, width

        doc = pymupdf.open()
        doc.new_page(width=width, height=height)
        return doc

    def place_image(
        self,
        doc: Any,
        raster: bytes,
        x: float,
        y: float,
        width: float,
        height: float,
    ) -> None:
        page = doc[0]
        page.insert_image(
            pymupdf.Rect(x, y, x + width, y + height),
            stream=raster,
            keep_proportion=False,
        )

    def serialize(self, doc: Any) -> bytes:
        try:
            return doc.tobytes(garbage=3, deflate=True)
        finally:
            doc.close()

    def discard(self, doc: Any) -> None:
        doc.close()
