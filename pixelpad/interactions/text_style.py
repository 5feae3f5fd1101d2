"""
Text styling bridge - defaults for new text boxes and style edits on the
selected one.
"""

from __future__ import annotations

import logging
from typing import Optional, Tuple, Union

from ..scene import SceneObject, TextBox
from ..types import StyleKind, TextDefaults

logger = logging.getLogger(__name__)

_STYLE_ATTRS = {
    StyleKind.BOLD: "bold",
    StyleKind.ITALIC: "italic",
    StyleKind.UNDERLINE: "underline",
}


def _text_target(obj: Optional[SceneObject]) -> Optional[TextBox]:
    if isinstance(obj, TextBox):
        return obj
    if obj is not None:
        logger.debug("Ignoring text style change on %s %d", obj.kind.value, obj.id)
    return None


class TextStyleBridge:
    """Reads and writes font attributes.

    Font size and family update the defaults for future text boxes and, if
    the target is a text box, the target as well. Style toggles only touch
    the target.
    """

    def __init__(self, defaults: Optional[TextDefaults] = None):
        self.defaults = defaults if defaults is not None else TextDefaults()

    def new_text_box(
        self,
        content: str,
        pos: Tuple[float, float],
        fill: str = "#000000",
    ) -> TextBox:
        """Create a text box from the current defaults."""
        x, y = pos
        return TextBox(
            x=x,
            y=y,
            text=content,
            font_family=self.defaults.font_family,
            font_size=self.defaults.font_size,
            fill=fill,
        )

    def toggle(self, target: Optional[SceneObject], kind: Union[StyleKind, str]) -> bool:
        """Flip a style on the target.

        Returns:
            True if a text box was changed
        """
        attr = _STYLE_ATTRS[StyleKind(kind)]
        box = _text_target(target)
        if box is None:
            return False

        setattr(box, attr, not getattr(box, attr))
        return True

    def set_font_size(self, target: Optional[SceneObject], size: int) -> bool:
        if isinstance(size, bool) or not isinstance(size, int) or size <= 0:
            raise ValueError(f"Font size must be a positive integer, got {size!r}")

        self.defaults.font_size = size
        box = _text_target(target)
        if box is None:
            return False
        box.font_size = size
        return True

    def set_font_family(self, target: Optional[SceneObject], family: str) -> bool:
        if not family:
            raise ValueError("Font family must not be empty")

        self.defaults.font_family = family
        box = _text_target(target)
        if box is None:
            return False
        box.font_family = family
        return True

    def sync_from(self, obj: Optional[SceneObject]) -> bool:
        """Make the defaults reflect an activated text box."""
        if not isinstance(obj, TextBox):
            return False
        self.defaults.font_size = obj.font_size or 20
        self.defaults.font_family = obj.font_family or "Arial"
        return True
