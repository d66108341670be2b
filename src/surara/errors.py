"""Exception hierarchy shared by the buffer, loader and session layers."""

from __future__ import annotations

from typing import Optional


class EditorError(RuntimeError):
    """Base class for errors raised by surara itself."""


class BufferValidationError(EditorError):
    """Raised when a buffer operation receives an out-of-range position.

    This always indicates a cursor clamping bug in the caller; it is never
    raised for ordinary user input.
    """

    def __init__(
        self, message: str, *, row: Optional[int] = None, column: Optional[int] = None
    ) -> None:
        super().__init__(message)
        self.row = row
        self.column = column


class DocumentLoadError(EditorError):
    """Raised when the startup document cannot be read or decoded."""

    def __init__(self, message: str, *, path: str) -> None:
        super().__init__(message)
        self.path = path


__all__ = ["EditorError", "BufferValidationError", "DocumentLoadError"]
