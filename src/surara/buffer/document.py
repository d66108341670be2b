"""Line-oriented text storage with change tracking."""

from __future__ import annotations

import unicodedata
from typing import Iterable, List, Sequence

from surara.runtime import telemetry

from .validation import ensure_position, ensure_row

TAB_SIZE = 8


def is_control(char: str) -> bool:
    """Return ``True`` for characters in the Unicode ``Cc`` category."""

    return unicodedata.category(char) == "Cc"


def clean_line(text: str) -> str:
    """Expand tabs to 8-column stops and drop every other control character."""

    expanded = text.expandtabs(TAB_SIZE)
    return "".join(char for char in expanded if not is_control(char))


class TextBuffer:
    """Ordered list of lines; each line is a ``str`` without its terminator.

    Python strings index by code point, so a column is a count of Unicode
    scalar values. Every content change bumps ``version`` and sets the dirty
    flag; the flag is only cleared by whoever repaints the buffer.
    """

    def __init__(self, lines: Iterable[str] = ()) -> None:
        self._lines: List[str] = [clean_line(line) for line in lines]
        self._dirty = False
        self.version = 0

    def line_count(self) -> int:
        return len(self._lines)

    def line_length(self, row: int) -> int:
        ensure_row(self, row)
        return len(self._lines[row])

    def line(self, row: int) -> str:
        ensure_row(self, row)
        return self._lines[row]

    def lines(self) -> Sequence[str]:
        """Return the current lines without exposing internal mutability."""

        return tuple(self._lines)

    @property
    def dirty(self) -> bool:
        return self._dirty

    def mark_dirty(self) -> None:
        self._dirty = True

    def mark_clean(self) -> None:
        self._dirty = False

    def append_line(self, text: str = "") -> None:
        self._lines.append(clean_line(text))
        self._changed()

    def insert_char(self, row: int, column: int, char: str) -> bool:
        """Insert ``char`` before ``column`` of line ``row``.

        A newline splits the line instead. Other control characters are
        ignored and leave the dirty flag untouched. Returns whether the
        content changed.
        """

        if len(char) != 1:
            raise ValueError(f"expected a single character, got {char!r}")
        ensure_position(self, row, column)
        if char == "\n":
            return self.split_line(row, column)
        if is_control(char):
            return False

        line = self._lines[row]
        self._lines[row] = line[:column] + char + line[column:]
        self._changed()
        telemetry.record_event(
            "buffer.insert_char",
            level="debug",
            data={"row": row, "column": column, "version": self.version},
        )
        return True

    def split_line(self, row: int, column: int) -> bool:
        """Split line ``row`` at ``column``; the suffix becomes line ``row + 1``."""

        ensure_position(self, row, column)
        line = self._lines[row]
        self._lines[row : row + 1] = [line[:column], line[column:]]
        self._changed()
        telemetry.record_event(
            "buffer.split_line",
            level="debug",
            data={"row": row, "column": column, "lines": len(self._lines)},
        )
        return True

    def _changed(self) -> None:
        self.version += 1
        self._dirty = True

    def __repr__(self) -> str:
        return f"TextBuffer(lines={len(self._lines)}, version={self.version}, dirty={self._dirty})"
