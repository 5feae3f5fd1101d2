"""
Editor exceptions.
"""


class EditorError(Exception):
    """Base class for recoverable editor failures."""


class DecodeError(EditorError):
    """Uploaded data is missing or not a supported image encoding."""


class EngineUnavailable(EditorError):
    """The rendering engine is not initialized or was already disposed."""
