"""
Canvas editor - the mode controller and every scene operation.

Composes the scene, the interaction handlers and the export pipeline
around one render surface.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, List, Optional, Tuple, Union

from .backends.base import DocumentWriter, ImageDecoder, RenderEngine, RenderSurface
from .backends.pymupdf import PyMuPDFDocumentWriter, PyMuPDFEngine, PyMuPDFImageDecoder
from .config import MAX_BRUSH_WIDTH, MIN_BRUSH_WIDTH, PDF_FILENAME, PNG_FILENAME, EditorConfig
from .errors import DecodeError, EngineUnavailable
from .export import ExportPipeline
from .interactions.drawing import StrokeTool
from .interactions.selection import SelectionHandler
from .interactions.text_style import TextStyleBridge
from .scene import ImageObject, Scene, SceneObject, Stroke, TextBox
from .types import (
    Bitmap,
    BrushConfig,
    Mode,
    RasterSnapshot,
    StyleKind,
    TextDefaults,
    normalize_hex,
)

logger = logging.getLogger(__name__)


@dataclass
class EditorState:
    """Process-wide UI state."""

    mode: Mode = Mode.SELECT
    brush: BrushConfig = field(default_factory=BrushConfig)
    text_defaults: TextDefaults = field(default_factory=TextDefaults)

    @property
    def is_selecting(self) -> bool:
        return self.mode is Mode.SELECT

    @property
    def is_drawing(self) -> bool:
        return self.mode is Mode.FREEHAND_DRAW

    @property
    def is_erasing(self) -> bool:
        return self.mode is Mode.ERASE


class Editor:
    """
    Single-canvas editor.

    Usage:
        from pixelpad import Editor

        editor = Editor()
        editor.add_text("Hello")
        editor.enter_freehand_draw()
        editor.pointer_down(10, 10)
        editor.pointer_move(80, 40)
        editor.pointer_up()
        editor.save_pdf("canvas.pdf")
        editor.dispose()
    """

    def __init__(
        self,
        config: Optional[EditorConfig] = None,
        engine: Optional[RenderEngine] = None,
        decoder: Optional[ImageDecoder] = None,
        writer: Optional[DocumentWriter] = None,
        on_change: Optional[Callable[["Editor"], None]] = None,
    ):
        self.config = config if config is not None else EditorConfig()
        self.config.background = normalize_hex(self.config.background)

        self.state = EditorState(
            mode=Mode.SELECT,
            brush=BrushConfig(
                color=normalize_hex(self.config.brush_color),
                width=self.config.brush_width,
            ),
            text_defaults=TextDefaults(
                font_family=self.config.font_family,
                font_size=self.config.font_size,
            ),
        )

        self._decoder = decoder if decoder is not None else PyMuPDFImageDecoder()
        engine = engine if engine is not None else PyMuPDFEngine()
        self._surface: RenderSurface = engine.create_surface(
            self.config.width, self.config.height, self.config.background
        )

        # Components
        self.scene = Scene(self._surface)
        self._tool = StrokeTool()
        self._text = TextStyleBridge(self.state.text_defaults)
        self._selection = SelectionHandler(
            self.scene, self._surface, on_object_activated=self._on_object_activated
        )
        self._export = ExportPipeline(
            self._surface,
            writer if writer is not None else PyMuPDFDocumentWriter(),
            self.config.export_multiplier,
        )

        self._listeners: List[Callable[["Editor"], None]] = []
        if on_change:
            self._listeners.append(on_change)

    # Properties

    @property
    def mode(self) -> Mode:
        """Active interaction mode."""
        return self.state.mode

    @property
    def surface(self) -> RenderSurface:
        return self._surface

    @property
    def stroke_tool(self) -> StrokeTool:
        """The live brush (disabled in select mode)."""
        return self._tool

    @property
    def selection(self) -> Optional[SceneObject]:
        return self.scene.selection

    @property
    def ready(self) -> bool:
        """Whether the rendering engine can be used."""
        return not self._surface.disposed

    def add_change_listener(self, listener: Callable[["Editor"], None]) -> None:
        """Call ``listener`` after editor state (mode, brush, fonts) changes."""
        self._listeners.append(listener)

    def remove_change_listener(self, listener: Callable[["Editor"], None]) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    # Modes

    def set_mode(self, mode: Union[Mode, str]) -> None:
        """Switch the interaction mode.

        Entering FREEHAND_DRAW makes every object non-interactive and installs
        a brush. ERASE installs a brush painting with the background colour.
        SELECT removes the brush and makes text boxes and images interactive
        again; strokes stay paint-only.
        """
        mode = Mode(mode)
        previous = self.state.mode
        if mode is previous:
            return

        self._tool.disable()
        self._selection.end_selection()

        if mode is Mode.FREEHAND_DRAW:
            for obj in self.scene:
                obj.selectable = False
                obj.evented = False
            self._tool.enable(self.state.brush.color, self.state.brush.width)
        elif mode is Mode.ERASE:
            self._tool.enable(self.config.eraser_color, self.state.brush.width, lock_color=True)
        else:
            for obj in self.scene:
                if isinstance(obj, (TextBox, ImageObject)):
                    obj.selectable = True
                    obj.evented = True

        self.state.mode = mode
        logger.debug("Mode %s -> %s", previous.value, mode.value)
        self._notify()

    def enter_freehand_draw(self) -> Mode:
        """Toggle freehand drawing."""
        self.set_mode(Mode.SELECT if self.state.is_drawing else Mode.FREEHAND_DRAW)
        return self.state.mode

    def enter_erase(self) -> Mode:
        """Toggle the eraser."""
        self.set_mode(Mode.SELECT if self.state.is_erasing else Mode.ERASE)
        return self.state.mode

    # Scene operations

    def add_text(
        self,
        content: Optional[str] = None,
        pos: Optional[Tuple[float, float]] = None,
    ) -> TextBox:
        """Add a text box on top and select it. Switches to select mode."""
        self._require_ready()
        self.set_mode(Mode.SELECT)
        box = self._text.new_text_box(
            self.config.text_content if content is None else content,
            self.config.text_position if pos is None else pos,
        )
        self.scene.add(box)
        self.scene.select(box)
        return box

    def delete_selected(self) -> bool:
        """Remove the selected object, if any."""
        self._require_ready()
        target = self.scene.selection
        if target is None:
            return False
        self.scene.remove(target)
        self._selection.clear()
        return True

    def update_style(self, kind: Union[StyleKind, str]) -> bool:
        """Toggle bold, italic or underline on the selected text box."""
        self._require_ready()
        changed = self._text.toggle(self.scene.selection, kind)
        if changed:
            self._surface.request_repaint()
        return changed

    def change_font_size(self, size: int) -> None:
        """Set the default font size and the selected text box's size."""
        if self._text.set_font_size(self.scene.selection, size):
            self._surface.request_repaint()
        self._notify()

    def change_font_family(self, family: str) -> None:
        """Set the default font family and the selected text box's family."""
        if self._text.set_font_family(self.scene.selection, family):
            self._surface.request_repaint()
        self._notify()

    def change_brush_color(self, color: str) -> None:
        """Set the brush colour. The eraser keeps painting the background."""
        color = normalize_hex(color)
        self.state.brush.color = color
        if self._tool.enabled and not self._tool.is_eraser:
            self._tool.color = color
        self._notify()

    def change_brush_width(self, width: float) -> None:
        """Set the brush width for the live and future strokes."""
        if isinstance(width, bool) or not isinstance(width, (int, float)):
            raise ValueError(f"Brush width must be a number, got {width!r}")
        if not MIN_BRUSH_WIDTH <= width <= MAX_BRUSH_WIDTH:
            raise ValueError(
                f"Brush width must be between {MIN_BRUSH_WIDTH} and {MAX_BRUSH_WIDTH}, got {width}"
            )

        self.state.brush.width = width
        if self._tool.enabled:
            self._tool.width = width
        self._notify()

    def edit_text(self, content: str) -> bool:
        """Replace the text of the selected text box."""
        self._require_ready()
        target = self.scene.selection
        if not isinstance(target, TextBox):
            return False
        target.text = content
        self._surface.request_repaint()
        return True

    def move_selected(self, dx: float, dy: float) -> bool:
        """Translate the selected text box or image."""
        self._require_ready()
        target = self.scene.selection
        if not isinstance(target, (TextBox, ImageObject)):
            return False
        target.move_by(dx, dy)
        self._surface.request_repaint()
        return True

    # Image import

    def import_image(self, data: bytes) -> ImageObject:
        """Decode an uploaded file and place it on top.

        Raises:
            DecodeError: If the bytes are not a supported image; the scene
                is left unchanged
        """
        self._require_ready()
        return self._place_image(self._decode(data))

    async def import_image_async(self, data: bytes) -> ImageObject:
        """Like ``import_image`` but decodes off the event loop."""
        self._require_ready()
        try:
            bitmap = await asyncio.to_thread(self._decoder.decode, data)
        except DecodeError as e:
            logger.warning("Image import failed: %s", e)
            raise
        self._require_ready()
        return self._place_image(bitmap)

    def _decode(self, data: bytes) -> Bitmap:
        try:
            return self._decoder.decode(data)
        except DecodeError as e:
            logger.warning("Image import failed: %s", e)
            raise

    def _place_image(self, bitmap: Bitmap) -> ImageObject:
        x, y = self.config.image_position
        scale = self.config.image_scale
        image = ImageObject(x=x, y=y, bitmap=bitmap, scale_x=scale, scale_y=scale)
        if not self.state.is_selecting:
            image.selectable = False
            image.evented = False
        self.scene.add(image)
        return image

    # Pointer input

    def pointer_down(self, x: float, y: float) -> Optional[SceneObject]:
        """Start a stroke, or select the object under the pointer.

        Returns:
            The activated object in select mode, else None
        """
        self._require_ready()
        if self._tool.enabled:
            self._tool.start_stroke(x, y)
            return None
        return self._selection.start_selection(x, y)

    def pointer_move(self, x: float, y: float) -> None:
        if self._tool.enabled:
            self._tool.add_point(x, y)
        else:
            self._selection.update_selection(x, y)

    def pointer_up(self) -> Optional[Stroke]:
        """Finish the gesture. Commits the stroke in draw and erase modes."""
        if not self._tool.enabled:
            self._selection.end_selection()
            return None

        stroke = self._tool.end_stroke()
        if stroke is not None:
            self.scene.add(stroke)
        return stroke

    def _on_object_activated(self, obj: SceneObject) -> None:
        if self._text.sync_from(obj):
            self._notify()

    # Export

    def export_raster(self) -> RasterSnapshot:
        """PNG snapshot of the canvas at the export multiplier."""
        return self._export.export_raster()

    def export_document(self) -> bytes:
        """Single-page PDF holding the raster snapshot."""
        return self._export.export_document()

    def save_png(self, path: Union[str, Path] = PNG_FILENAME) -> Path:
        return self._export.save_png(path)

    def save_pdf(self, path: Union[str, Path] = PDF_FILENAME) -> Path:
        return self._export.save_pdf(path)

    # Lifecycle

    def dispose(self) -> None:
        """Release the rendering engine. Safe to call more than once."""
        if self._surface.disposed:
            return
        self._tool.disable()
        self._export.detach()
        self._surface.dispose()
        self._listeners = []
        logger.debug("Editor disposed")

    def _require_ready(self) -> None:
        if self._surface.disposed:
            raise EngineUnavailable("Editor has been disposed")

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.dispose()
