"""Protocol describing the output side of the editor."""

from __future__ import annotations

from typing import Protocol


class DisplaySink(Protocol):
    """Anything the session can paint a frame onto.

    Coordinates passed to ``goto`` are 1-indexed, column first.
    """

    def clear_all(self) -> None:
        ...

    def goto(self, column: int, row: int) -> None:
        ...

    def write(self, text: str) -> None:
        ...

    def flush(self) -> None:
        ...
