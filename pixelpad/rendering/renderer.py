"""
Scene renderer - converts scene objects to Flet canvas shapes.
"""

from __future__ import annotations

import base64
from typing import Any, List, Optional, Sequence, Tuple

import flet as ft
import flet.canvas as cv

from ..backends.base import RenderSurface
from ..scene import ImageObject, SceneObject, Stroke, TextBox
from ..types import Point


def _get_font_family(family: str) -> str:
    """Font family name for Flet, falling back to sans-serif."""
    return family or "sans-serif"


class SceneRenderer:
    """Renders the surface's display list to canvas shapes."""

    def __init__(self, surface: RenderSurface, selection_color: str = "#3390ff"):
        self._surface = surface
        self.selection_color = selection_color

    def build_controls(self, selection: Optional[SceneObject] = None) -> List[ft.Control]:
        """Stackable controls preserving the z-order of images and shapes."""
        width, height = self._surface.width, self._surface.height
        controls: List[ft.Control] = []
        layer: List[Any] = [self._background()]

        def flush():
            if layer:
                controls.append(cv.Canvas(shapes=list(layer), width=width, height=height))
                layer.clear()

        for obj in self._surface.objects:
            if isinstance(obj, ImageObject):
                if obj.bitmap is None:
                    continue
                flush()
                src, x, y, w, h = self._image_entry(obj)
                controls.append(
                    ft.Container(
                        content=ft.Image(src_base64=src, width=w, height=h, fit=ft.ImageFit.FILL),
                        left=x,
                        top=y,
                    )
                )
            else:
                layer.append(self.object_shape(obj))

        if selection is not None:
            layer.append(self._selection_outline(selection))
        flush()
        return controls

    def object_shape(self, obj: SceneObject) -> Any:
        if isinstance(obj, Stroke):
            return self.stroke_shape(obj.points, obj.color, obj.width)
        if isinstance(obj, TextBox):
            return self._text_shape(obj)
        raise TypeError(f"No canvas shape for {obj!r}")

    @staticmethod
    def _image_entry(image: ImageObject) -> Tuple[str, float, float, float, float]:
        w, h = image.size
        return (base64.b64encode(image.bitmap.data).decode("ascii"), image.x, image.y, w, h)

    def _background(self) -> cv.Rect:
        return cv.Rect(
            x=0,
            y=0,
            width=self._surface.width,
            height=self._surface.height,
            paint=ft.Paint(color=self._surface.background, style=ft.PaintingStyle.FILL),
        )

    @staticmethod
    def stroke_shape(points: Sequence[Point], color: str, width: float) -> Any:
        """A freehand path (committed or in flight)."""
        if len(points) == 1:
            x, y = points[0]
            return cv.Circle(
                x=x,
                y=y,
                radius=width / 2,
                paint=ft.Paint(color=color, style=ft.PaintingStyle.FILL),
            )

        (x0, y0), rest = points[0], points[1:]
        elements = [cv.Path.MoveTo(x0, y0)]
        elements.extend(cv.Path.LineTo(x, y) for x, y in rest)
        return cv.Path(
            elements=elements,
            paint=ft.Paint(
                color=color,
                stroke_width=width,
                style=ft.PaintingStyle.STROKE,
                stroke_cap=ft.StrokeCap.ROUND,
                stroke_join=ft.StrokeJoin.ROUND,
            ),
        )

    def _text_shape(self, box: TextBox) -> cv.Text:
        return cv.Text(
            x=box.x,
            y=box.y,
            text=box.text,
            style=ft.TextStyle(
                size=box.font_size,
                font_family=_get_font_family(box.font_family),
                weight=ft.FontWeight.BOLD if box.bold else ft.FontWeight.NORMAL,
                italic=box.italic,
                color=box.fill,
                decoration=ft.TextDecoration.UNDERLINE if box.underline else None,
            ),
        )

    def _selection_outline(self, obj: SceneObject) -> cv.Rect:
        x0, y0, x1, y1 = self._surface.bounds(obj)
        return cv.Rect(
            x=x0 - 2,
            y=y0 - 2,
            width=x1 - x0 + 4,
            height=y1 - y0 + 4,
            paint=ft.Paint(
                color=self.selection_color,
                stroke_width=1,
                style=ft.PaintingStyle.STROKE,
            ),
        )
