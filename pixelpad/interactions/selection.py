"""
Object selection handler - pointer-down hit testing and dragging.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Optional, Tuple

from ..scene import Scene, SceneObject, Stroke

if TYPE_CHECKING:
    from ..backends.base import RenderSurface


@dataclass
class SelectionState:
    """Current drag state."""

    last: Optional[Tuple[float, float]] = None
    is_dragging: bool = False


class SelectionHandler:
    """Handles object selection in select mode.

    The render surface decides what lies under the pointer; this handler
    applies the result to the scene and drags the selection around.
    """

    def __init__(
        self,
        scene: Scene,
        surface: "RenderSurface",
        on_object_activated: Optional[Callable[[SceneObject], None]] = None,
    ):
        self._scene = scene
        self._surface = surface
        self._state = SelectionState()
        self._on_object_activated = on_object_activated

    @property
    def is_dragging(self) -> bool:
        """Whether a drag is in progress."""
        return self._state.is_dragging

    def start_selection(self, x: float, y: float) -> Optional[SceneObject]:
        """Select the topmost interactive object under the pointer.

        Clicking empty canvas clears the selection.
        """
        target = self._surface.hit_test(x, y)
        self._scene.select(target)

        if target is None:
            self._state = SelectionState()
            return None

        self._state = SelectionState(last=(x, y), is_dragging=True)
        if self._on_object_activated:
            self._on_object_activated(target)
        return target

    def update_selection(self, x: float, y: float) -> None:
        """Drag the selection to follow the pointer."""
        if not self._state.is_dragging or self._state.last is None:
            return

        target = self._scene.selection
        if target is None or isinstance(target, Stroke):
            self._state = SelectionState()
            return

        last_x, last_y = self._state.last
        target.move_by(x - last_x, y - last_y)
        self._state.last = (x, y)
        self._surface.request_repaint()

    def end_selection(self) -> None:
        """Finish the current drag."""
        self._state = SelectionState()

    def clear(self) -> None:
        """Drop drag state and the scene selection."""
        self._state = SelectionState()
        self._scene.clear_selection()
