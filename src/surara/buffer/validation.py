"""Validation helpers shared across buffer services."""

from __future__ import annotations

from typing import TYPE_CHECKING

from surara.errors import BufferValidationError

if TYPE_CHECKING:
    from .document import TextBuffer


def ensure_row(buffer: "TextBuffer", row: int) -> int:
    if row < 0 or row >= buffer.line_count():
        raise BufferValidationError("Row out of range", row=row)
    return row


def ensure_position(buffer: "TextBuffer", row: int, column: int) -> tuple[int, int]:
    ensure_row(buffer, row)
    if column < 0 or column > buffer.line_length(row):
        raise BufferValidationError("Column out of range", row=row, column=column)
    return row, column
