"""Decode blessed keystrokes into session key events."""

from __future__ import annotations

from typing import Iterator, Optional

from blessed import Terminal
from blessed.keyboard import Keystroke

from surara.session import DOWN, LEFT, NEWLINE, OTHER, RIGHT, TERMINATE, UP, KeyEvent

CTRL_C = "\x03"

_SEQUENCES = {
    "KEY_UP": UP,
    "KEY_DOWN": DOWN,
    "KEY_LEFT": LEFT,
    "KEY_RIGHT": RIGHT,
    "KEY_ENTER": NEWLINE,
}


def decode_keystroke(keystroke: Keystroke) -> KeyEvent:
    if keystroke.is_sequence:
        return _SEQUENCES.get(keystroke.name or "", OTHER)
    text = str(keystroke)
    if text == CTRL_C:
        return TERMINATE
    if len(text) == 1:
        return KeyEvent.character(text)
    return OTHER


def read_events(term: Terminal, *, timeout: Optional[float] = None) -> Iterator[KeyEvent]:
    """Yield decoded events until the input stream runs dry."""

    while True:
        keystroke = term.inkey(timeout=timeout)
        if not keystroke:
            return
        yield decode_keystroke(keystroke)
