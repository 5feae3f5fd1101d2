"""
Test fixtures for the canvas editor.
"""

from unittest.mock import Mock

import pymupdf
import pytest

from pixelpad import Editor
from pixelpad.backends.base import RenderSurface


def make_png(width: int = 40, height: int = 20, value: int = 200) -> bytes:
    """Encode a flat grey RGB image as PNG."""
    pix = pymupdf.Pixmap(pymupdf.csRGB, pymupdf.IRect(0, 0, width, height), False)
    pix.clear_with(value)
    return pix.tobytes("png")


@pytest.fixture
def png_bytes():
    return make_png()


@pytest.fixture
def corrupt_bytes():
    return b"\x89PNG\r\n\x1a\n this is not really an image"


@pytest.fixture
def editor():
    """Editor backed by the real PyMuPDF engine."""
    ed = Editor()
    yield ed
    ed.dispose()


@pytest.fixture
def mock_surface():
    """A render surface double recording calls."""
    surface = Mock(spec=RenderSurface)
    surface.disposed = False
    surface.hit_test.return_value = None
    return surface


def draw_stroke(editor, points):
    """Feed a pointer gesture through the editor."""
    (x, y), rest = points[0], points[1:]
    editor.pointer_down(x, y)
    for px, py in rest:
        editor.pointer_move(px, py)
    return editor.pointer_up()
