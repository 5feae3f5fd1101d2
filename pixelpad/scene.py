"""
Scene model - drawable objects and the active selection.
"""

from __future__ import annotations

import itertools
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterator, List, Optional, Sequence, Tuple

from .types import Bitmap, ObjectKind, Point

if TYPE_CHECKING:
    from .backends.base import RenderSurface

logger = logging.getLogger(__name__)

_ids = itertools.count(1)


@dataclass(eq=False)
class SceneObject:
    """Base for everything placed on the canvas.

    Objects compare by identity; ``id`` is unique within the process.
    """

    x: float = 0.0
    y: float = 0.0
    selectable: bool = True
    evented: bool = True
    id: int = field(default_factory=lambda: next(_ids), init=False)

    kind = None  # type: Optional[ObjectKind]

    def move_by(self, dx: float, dy: float) -> None:
        self.x += dx
        self.y += dy


class Stroke(SceneObject):
    """A committed freehand path. Paint-only and never mutated."""

    kind = ObjectKind.STROKE
    _frozen_fields = ("points", "color", "width")

    def __init__(self, points: Sequence[Point], color: str, width: float):
        if not points:
            raise ValueError("A stroke needs at least one point")
        pts = tuple((float(px), float(py)) for px, py in points)
        super().__init__(
            x=min(p[0] for p in pts),
            y=min(p[1] for p in pts),
            selectable=False,
            evented=False,
        )
        object.__setattr__(self, "points", pts)
        object.__setattr__(self, "color", color)
        object.__setattr__(self, "width", width)

    def __setattr__(self, name, value):
        if name in self._frozen_fields and name in self.__dict__:
            raise AttributeError(f"Stroke.{name} is read-only")
        super().__setattr__(name, value)

    def move_by(self, dx: float, dy: float) -> None:
        raise AttributeError("Strokes cannot be moved")

    def __repr__(self) -> str:
        return f"Stroke(id={self.id}, points={len(self.points)}, color={self.color!r}, width={self.width})"


@dataclass(eq=False)
class TextBox(SceneObject):
    """Editable text."""

    text: str = "Edit me!"
    font_family: str = "Arial"
    font_size: int = 20
    bold: bool = False
    italic: bool = False
    underline: bool = False
    fill: str = "#000000"

    kind = ObjectKind.TEXT


@dataclass(eq=False)
class ImageObject(SceneObject):
    """A placed raster image."""

    bitmap: Optional[Bitmap] = field(default=None, repr=False)
    scale_x: float = 1.0
    scale_y: float = 1.0

    kind = ObjectKind.IMAGE

    @property
    def size(self) -> Tuple[float, float]:
        """Displayed size (width, height) in canvas units."""
        if self.bitmap is None:
            return (0.0, 0.0)
        return (self.bitmap.width * self.scale_x, self.bitmap.height * self.scale_y)


class Scene:
    """Ordered collection of scene objects plus the active selection.

    List order is paint order, the last object is on top. Every mutation is
    mirrored to the render surface, if one is attached.
    """

    def __init__(self, surface: Optional["RenderSurface"] = None):
        self._objects: List[SceneObject] = []
        self._selection: Optional[SceneObject] = None
        self._surface = surface

    @property
    def objects(self) -> Tuple[SceneObject, ...]:
        """Objects in paint order."""
        return tuple(self._objects)

    @property
    def selection(self) -> Optional[SceneObject]:
        """The active selection, or None."""
        return self._selection

    def __len__(self) -> int:
        return len(self._objects)

    def __iter__(self) -> Iterator[SceneObject]:
        return iter(list(self._objects))

    def __contains__(self, obj: object) -> bool:
        return any(o is obj for o in self._objects)

    def add(self, obj: SceneObject) -> SceneObject:
        """Insert at the top of the z-order."""
        if obj in self:
            raise ValueError(f"Object {obj.id} is already in the scene")

        if self._surface is not None:
            self._surface.add_object(obj)
        self._objects.append(obj)
        logger.debug("Added %s %d", obj.kind.value, obj.id)
        if self._surface is not None:
            self._surface.request_repaint()
        return obj

    def remove(self, obj: SceneObject) -> None:
        """Remove an object. Clears the selection if it pointed at it."""
        if obj not in self:
            return

        if self._surface is not None:
            self._surface.remove_object(obj)
        self._objects = [o for o in self._objects if o is not obj]
        if self._selection is obj:
            self._set_selection(None)
        logger.debug("Removed %s %d", obj.kind.value, obj.id)
        if self._surface is not None:
            self._surface.request_repaint()

    def select(self, obj: Optional[SceneObject]) -> None:
        """Set or clear the active selection."""
        if obj is not None and obj not in self:
            raise ValueError(f"Object {obj.id} is not in the scene")
        if obj is self._selection:
            return
        self._set_selection(obj)
        if self._surface is not None:
            self._surface.request_repaint()

    def clear_selection(self) -> None:
        self.select(None)

    def of_kind(self, kind: ObjectKind) -> List[SceneObject]:
        return [o for o in self._objects if o.kind is kind]

    def _set_selection(self, obj: Optional[SceneObject]) -> None:
        self._selection = obj
        if self._surface is not None:
            self._surface.set_active_selection(obj)
