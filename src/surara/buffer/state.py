"""Cursor state for the editor session."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class Cursor:
    """Logical cursor position, 0-indexed, measured in characters."""

    row: int = 0
    column: int = 0

    def as_tuple(self) -> tuple[int, int]:
        return (self.row, self.column)
