"""
Editor view - Flet control hosting the canvas.

Routes gestures to the editor and repaints when the render surface
reports a change.
"""

from __future__ import annotations

from typing import Optional

import flet as ft
import flet.canvas as cv

from .editor import Editor
from .rendering.renderer import SceneRenderer


class EditorView:
    """
    Canvas editor component.

    Usage:
        from pixelpad import Editor, EditorView

        editor = Editor()
        view = EditorView(editor)
        page.add(view.control)
    """

    def __init__(
        self,
        editor: Editor,
        selection_color: str = "#3390ff",
    ):
        self._editor = editor
        self._renderer = SceneRenderer(editor.surface, selection_color)

        # UI state
        self._wrapper: Optional[ft.Container] = None
        self._content: Optional[ft.Stack] = None
        self._ink_overlay: Optional[ft.Container] = None

        self._build()
        editor.surface.add_repaint_listener(self.refresh)

    # Properties

    @property
    def control(self) -> ft.Control:
        """The Flet control to add to a page."""
        return self._wrapper

    @property
    def editor(self) -> Editor:
        return self._editor

    def refresh(self) -> None:
        """Rebuild the scene layers."""
        if not self._content or not self._editor.ready:
            return

        self._content.controls = [
            *self._renderer.build_controls(self._editor.selection),
            self._ink_overlay,
        ]
        if self._wrapper and self._wrapper.page:
            self._wrapper.update()

    def dispose(self) -> None:
        """Detach from the editor and release it."""
        if self._editor.ready:
            self._editor.surface.remove_repaint_listener(self.refresh)
        self._editor.dispose()

    # Private methods

    def _build(self):
        """Build the view UI."""
        width = self._editor.config.width
        height = self._editor.config.height

        self._ink_overlay = ft.Container(
            content=cv.Canvas(shapes=[], width=width, height=height),
            left=0,
            top=0,
        )

        self._content = ft.Stack(
            controls=[
                *self._renderer.build_controls(self._editor.selection),
                self._ink_overlay,
            ],
            width=width,
            height=height,
        )

        gesture_detector = ft.GestureDetector(
            content=self._content,
            on_pan_start=self._on_pan_start,
            on_pan_update=self._on_pan_update,
            on_pan_end=self._on_pan_end,
            on_tap_down=self._on_tap,
            drag_interval=10,
        )

        self._wrapper = ft.Container(
            content=gesture_detector,
            width=width,
            height=height,
            shadow=ft.BoxShadow(
                spread_radius=0,
                blur_radius=20,
                color=ft.Colors.with_opacity(0.3, "#000000"),
            ),
        )

    # Event handlers

    def _on_tap(self, e: ft.TapEvent):
        if self._editor.stroke_tool.enabled:
            return
        self._editor.pointer_down(e.local_x, e.local_y)
        self._editor.pointer_up()

    def _on_pan_start(self, e: ft.DragStartEvent):
        self._editor.pointer_down(e.local_x, e.local_y)
        self._update_ink_overlay()

    def _on_pan_update(self, e: ft.DragUpdateEvent):
        self._editor.pointer_move(e.local_x, e.local_y)
        self._update_ink_overlay()

    def _on_pan_end(self, e: ft.DragEndEvent):
        self._editor.pointer_up()
        self._update_ink_overlay()

    # Overlays

    def _update_ink_overlay(self):
        """Draw the in-flight stroke."""
        if not self._ink_overlay or not self._ink_overlay.content:
            return

        tool = self._editor.stroke_tool
        path = tool.current_path
        if tool.enabled and path:
            shapes = [SceneRenderer.stroke_shape(path, tool.color, tool.width)]
        else:
            shapes = []

        self._ink_overlay.content.shapes = shapes
        if self._wrapper and self._wrapper.page and self._ink_overlay.page:
            self._ink_overlay.update()
