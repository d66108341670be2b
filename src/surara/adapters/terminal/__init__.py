"""blessed-backed terminal host: display sink, key decoding and runner."""

from .display import BlessedDisplay
from .keys import decode_keystroke, read_events
from .runner import run_terminal, terminal_scope

__all__ = [
    "BlessedDisplay",
    "decode_keystroke",
    "read_events",
    "run_terminal",
    "terminal_scope",
]
