"""
Stroke tool - manages the live freehand brush and the in-flight path.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ..scene import Stroke
from ..types import Path


@dataclass
class StrokeToolState:
    """Current brush state."""

    enabled: bool = False
    color: str = "#000000"
    width: float = 5
    color_locked: bool = False
    current_path: Path = field(default_factory=list)


class StrokeTool:
    """Freehand brush used by the draw and erase modes.

    An eraser is a tool whose colour is locked to the canvas background:
    colour updates are ignored while width updates still apply.
    """

    def __init__(self):
        self._state = StrokeToolState()

    @property
    def enabled(self) -> bool:
        """Whether a brush is installed."""
        return self._state.enabled

    @property
    def color(self) -> str:
        """Current stroke colour."""
        return self._state.color

    @color.setter
    def color(self, value: str) -> None:
        if not self._state.color_locked:
            self._state.color = value

    @property
    def width(self) -> float:
        """Current stroke width."""
        return self._state.width

    @width.setter
    def width(self, value: float) -> None:
        self._state.width = value

    @property
    def is_eraser(self) -> bool:
        return self._state.color_locked

    @property
    def current_path(self) -> Path:
        """Current drawing path."""
        return self._state.current_path

    def enable(self, color: str, width: float, lock_color: bool = False) -> None:
        """Install the brush."""
        self._state = StrokeToolState(
            enabled=True,
            color=color,
            width=width,
            color_locked=lock_color,
        )

    def disable(self) -> None:
        """Uninstall the brush, dropping any in-flight path."""
        self._state = StrokeToolState()

    def start_stroke(self, x: float, y: float) -> None:
        """Start a new stroke."""
        if self._state.enabled:
            self._state.current_path = [(x, y)]

    def add_point(self, x: float, y: float, min_distance: float = 2.0) -> None:
        """Add a point to the current stroke if far enough from last point."""
        if not self._state.enabled or not self._state.current_path:
            return

        last_x, last_y = self._state.current_path[-1]
        dist = ((x - last_x) ** 2 + (y - last_y) ** 2) ** 0.5
        if dist >= min_distance:
            self._state.current_path.append((x, y))

    def end_stroke(self) -> Optional[Stroke]:
        """End the current stroke.

        Returns:
            The committed Stroke, or None when the path is too short
        """
        path = self._state.current_path
        self._state.current_path = []
        if len(path) < 2:
            return None
        return Stroke(path, self._state.color, self._state.width)
