"""Textual adapter that feeds widget key events into an editor session."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Optional

from surara.buffer import Cursor, TextBuffer, is_control
from surara.display import MemoryDisplay
from surara.session import (
    DOWN,
    LEFT,
    NEWLINE,
    OTHER,
    RIGHT,
    TERMINATE,
    UP,
    EditorSession,
    KeyEvent,
)


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


_NAMED_KEYS = {
    "ctrl+c": TERMINATE,
    "up": UP,
    "down": DOWN,
    "left": LEFT,
    "right": RIGHT,
    "enter": NEWLINE,
}


def decode_textual_key(key: str, character: Optional[str] = None) -> KeyEvent:
    """Map a Textual key name (and its character, if any) to a ``KeyEvent``."""

    event = _NAMED_KEYS.get(key)
    if event is not None:
        return event
    if character and len(character) == 1 and not is_control(character):
        return KeyEvent.character(character)
    return OTHER


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks invoked by the adapter to update Textual widgets."""

    update_buffer: Callable[[List[str], Cursor], None]
    update_status: Callable[[str], None] = _noop


class TextualEditorAdapter:
    """Owns a session painted onto an in-memory display.

    Every flush of the display hands the painted rows and the logical cursor
    to the host, which is then free to render them however it likes.
    """

    def __init__(self, buffer: Optional[TextBuffer], hooks: TextualUIHooks) -> None:
        self.hooks = hooks
        self.display = MemoryDisplay(on_flush=self._on_flush)
        self.session = EditorSession(buffer, display=self.display)
        self.active = True
        self.session.start()

    def handle_textual_key(self, key: str, *, character: Optional[str] = None) -> bool:
        """Dispatch one key; returns ``False`` once the session has ended."""

        if not self.active:
            return False
        event = decode_textual_key(key, character)
        self.active = self.session.step(event)
        if not self.active:
            self.hooks.update_status("terminated")
        return self.active

    def _on_flush(self, display: MemoryDisplay) -> None:
        cursor = self.session.cursor
        self.hooks.update_buffer(display.rows, cursor)
        self.hooks.update_status(f"Ln {cursor.row + 1}, Col {cursor.column + 1}")


__all__ = ["TextualEditorAdapter", "TextualUIHooks", "decode_textual_key"]
