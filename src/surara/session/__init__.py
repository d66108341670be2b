"""Key events and the editor session driving buffer, cursor and display."""

from .editor import EditorSession
from .events import (
    DOWN,
    LEFT,
    NEWLINE,
    OTHER,
    RIGHT,
    TERMINATE,
    UP,
    KeyEvent,
    KeyKind,
    typed,
)

__all__ = [
    "DOWN",
    "EditorSession",
    "KeyEvent",
    "KeyKind",
    "LEFT",
    "NEWLINE",
    "OTHER",
    "RIGHT",
    "TERMINATE",
    "UP",
    "typed",
]
