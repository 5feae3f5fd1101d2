"""
PixelPad

A single-canvas drawing editor built with Flet and PyMuPDF: freehand ink,
text boxes and images, exported as PNG or as a one-page PDF.

Usage:
    import flet as ft
    from pixelpad import Editor, EditorView

    def main(page: ft.Page):
        editor = Editor()
        view = EditorView(editor)
        page.add(view.control)

    ft.app(main)
"""

from .canvas_view import EditorView
from .config import FONT_FAMILIES, EditorConfig
from .editor import Editor, EditorState
from .errors import DecodeError, EditorError, EngineUnavailable
from .scene import ImageObject, Scene, SceneObject, Stroke, TextBox
from .types import (
    Bitmap,
    BrushConfig,
    Mode,
    ObjectKind,
    Orientation,
    RasterSnapshot,
    StyleKind,
    TextDefaults,
)

__version__ = "0.1.0"

__all__ = [
    "Editor",
    "EditorState",
    "EditorView",
    "EditorConfig",
    "FONT_FAMILIES",
    "Scene",
    "SceneObject",
    "Stroke",
    "TextBox",
    "ImageObject",
    "Mode",
    "StyleKind",
    "ObjectKind",
    "Orientation",
    "BrushConfig",
    "TextDefaults",
    "Bitmap",
    "RasterSnapshot",
    "EditorError",
    "DecodeError",
    "EngineUnavailable",
    "__version__",
]
