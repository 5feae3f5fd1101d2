"""
User interaction handlers - selection, drawing, text styling.
"""

from .drawing import StrokeTool
from .selection import SelectionHandler
from .text_style import TextStyleBridge

__all__ = ["SelectionHandler", "StrokeTool", "TextStyleBridge"]
