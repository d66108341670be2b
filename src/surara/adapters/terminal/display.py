"""Display sink writing escape sequences through a blessed ``Terminal``."""

from __future__ import annotations

from typing import Optional, TextIO

from blessed import Terminal


class BlessedDisplay:
    """``DisplaySink`` backed by blessed capability strings.

    Write or flush failures propagate to the caller untouched.
    """

    def __init__(self, term: Terminal, stream: Optional[TextIO] = None) -> None:
        self.term = term
        self.stream = stream if stream is not None else term.stream

    def clear_all(self) -> None:
        self.stream.write(self.term.clear)

    def goto(self, column: int, row: int) -> None:
        # blessed addresses cells from 0.
        self.stream.write(self.term.move_xy(column - 1, row - 1))

    def write(self, text: str) -> None:
        self.stream.write(text)

    def flush(self) -> None:
        self.stream.flush()
