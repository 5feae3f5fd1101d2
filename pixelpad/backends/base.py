"""
Abstract backend protocol for rendering, image decoding and document
assembly.

Backends must implement these protocols to work with the editor.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, List, Optional

from ..scene import SceneObject
from ..types import Bitmap, Orientation, Rect


class RenderSurface(ABC):
    """Abstract interface for a drawing surface.

    The surface keeps its own display list in paint order, mirrored from the
    scene through ``add_object``/``remove_object``.
    """

    def __init__(self):
        self._repaint_listeners: List[Callable[[], None]] = []

    @property
    @abstractmethod
    def width(self) -> int:
        """Logical width in px."""
        ...

    @property
    @abstractmethod
    def height(self) -> int:
        """Logical height in px."""
        ...

    @property
    @abstractmethod
    def background(self) -> str:
        """Background colour (hex)."""
        ...

    @property
    @abstractmethod
    def disposed(self) -> bool:
        """Whether the surface has released its resources."""
        ...

    @property
    @abstractmethod
    def objects(self) -> List[SceneObject]:
        """Display list in paint order."""
        ...

    @abstractmethod
    def add_object(self, obj: SceneObject) -> None:
        """Append an object to the display list."""
        ...

    @abstractmethod
    def remove_object(self, obj: SceneObject) -> None:
        """Drop an object from the display list."""
        ...

    @abstractmethod
    def get_active_selection(self) -> Optional[SceneObject]:
        """Currently highlighted object."""
        ...

    @abstractmethod
    def set_active_selection(self, obj: Optional[SceneObject]) -> None:
        """Highlight an object (None to clear)."""
        ...

    @abstractmethod
    def bounds(self, obj: SceneObject) -> Rect:
        """Bounding box (x0, y0, x1, y1) of an object in canvas units."""
        ...

    @abstractmethod
    def hit_test(self, x: float, y: float) -> Optional[SceneObject]:
        """Topmost selectable and evented object containing the point."""
        ...

    @abstractmethod
    def snapshot_raster(self, multiplier: float = 2, fmt: str = "png") -> bytes:
        """Rasterize the whole surface.

        Args:
            multiplier: Supersampling factor
            fmt: Output image encoding

        Returns:
            Encoded image bytes
        """
        ...

    @abstractmethod
    def dispose(self) -> None:
        """Release resources."""
        ...

    def add_repaint_listener(self, listener: Callable[[], None]) -> None:
        """Call ``listener`` after every repaint request."""
        self._repaint_listeners.append(listener)

    def remove_repaint_listener(self, listener: Callable[[], None]) -> None:
        if listener in self._repaint_listeners:
            self._repaint_listeners.remove(listener)

    def request_repaint(self) -> None:
        """Notify listeners that the surface content changed."""
        for listener in list(self._repaint_listeners):
            listener()

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.dispose()


class RenderEngine(ABC):
    """Factory for render surfaces."""

    @abstractmethod
    def create_surface(self, width: int, height: int, background: str) -> RenderSurface:
        """Create a blank surface."""
        ...


class ImageDecoder(ABC):
    """Turns uploaded bytes into a bitmap."""

    @abstractmethod
    def decode(self, data: bytes) -> Bitmap:
        """Decode image bytes.

        Raises:
            DecodeError: If the data is empty or not a supported encoding
        """
        ...


class DocumentWriter(ABC):
    """Builds single-page documents around a raster image."""

    @abstractmethod
    def new_document(self, width: float, height: float, orientation: Orientation) -> Any:
        """Create a document with one page of the given size."""
        ...

    @abstractmethod
    def place_image(
        self,
        doc: Any,
        raster: bytes,
        x: float,
        y: float,
        width: float,
        height: float,
    ) -> None:
        """Place encoded image bytes on the page."""
        ...

    @abstractmethod
    def serialize(self, doc: Any) -> bytes:
        """Emit the document bytes and release it."""
        ...

    @abstractmethod
    def discard(self, doc: Any) -> None:
        """Release a document without emitting it."""
        ...
