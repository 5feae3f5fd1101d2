"""
Export pipeline - flat raster and single-page document output.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

from .backends.base import DocumentWriter, RenderSurface
from .config import PDF_FILENAME, PNG_FILENAME
from .errors import EngineUnavailable
from .types import Orientation, RasterSnapshot

logger = logging.getLogger(__name__)


class ExportPipeline:
    """Reads the surface's current raster and wraps it for output.

    Exports never mutate the scene or editor state. If the surface is not
    available the export is aborted before anything is written.
    """

    def __init__(
        self,
        surface: Optional[RenderSurface],
        writer: DocumentWriter,
        multiplier: float = 2,
    ):
        self._surface = surface
        self._writer = writer
        self.multiplier = multiplier

    def _require_surface(self) -> RenderSurface:
        if self._surface is None or self._surface.disposed:
            logger.warning("Export requested without a render surface")
            raise EngineUnavailable("Rendering engine is not available")
        return self._surface

    def detach(self) -> None:
        """Forget the surface (the editor is being disposed)."""
        self._surface = None

    def export_raster(self) -> RasterSnapshot:
        """Rasterize the canvas as PNG at the supersampling multiplier."""
        surface = self._require_surface()
        data = surface.snapshot_raster(self.multiplier, "png")
        return RasterSnapshot(
            data=data,
            width=surface.width,
            height=surface.height,
            multiplier=self.multiplier,
            pixel_width=int(round(surface.width * self.multiplier)),
            pixel_height=int(round(surface.height * self.multiplier)),
        )

    def export_document(self) -> bytes:
        """Wrap the raster in a one-page document of the canvas' logical size."""
        snapshot = self.export_raster()
        width, height = snapshot.width, snapshot.height
        orientation = Orientation.LANDSCAPE if width > height else Orientation.PORTRAIT

        doc = self._writer.new_document(width, height, orientation)
        try:
            self._writer.place_image(doc, snapshot.data, 0, 0, width, height)
        except Exception:
            self._writer.discard(doc)
            raise
        return self._writer.serialize(doc)

    def save_png(self, path: Union[str, Path] = PNG_FILENAME) -> Path:
        """Write the raster export to ``path``."""
        data = self.export_raster().data
        return _write(path, data)

    def save_pdf(self, path: Union[str, Path] = PDF_FILENAME) -> Path:
        """Write the document export to ``path``."""
        data = self.export_document()
        return _write(path, data)


def _write(path: Union[str, Path], data: bytes) -> Path:
    path = Path(path)
    path.write_bytes(data)
    logger.info("Exported %d bytes to %s", len(data), path)
    return path
