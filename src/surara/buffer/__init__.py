"""Text buffer, cursor state and document loading."""

from surara.errors import BufferValidationError, DocumentLoadError

from .document import TAB_SIZE, TextBuffer, clean_line, is_control
from .loader import load_lines
from .state import Cursor
from .validation import ensure_position, ensure_row

__all__ = [
    "BufferValidationError",
    "TAB_SIZE",
    "clean_line",
    "Cursor",
    "DocumentLoadError",
    "TextBuffer",
    "ensure_position",
    "ensure_row",
    "is_control",
    "load_lines",
]
