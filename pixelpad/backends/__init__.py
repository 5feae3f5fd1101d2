"""
Backends - abstraction layer over the rendering and document libraries.
"""

from .base import DocumentWriter, ImageDecoder, RenderEngine, RenderSurface
from .pymupdf import (
    PyMuPDFDocumentWriter,
    PyMuPDFEngine,
    PyMuPDFImageDecoder,
    PyMuPDFSurface,
)

__all__ = [
    "DocumentWriter",
    "ImageDecoder",
    "RenderEngine",
    "RenderSurface",
    "PyMuPDFDocumentWriter",
    "PyMuPDFEngine",
    "PyMuPDFImageDecoder",
    "PyMuPDFSurface",
]
