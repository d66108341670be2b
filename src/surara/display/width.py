"""Display-width helpers mapping logical columns to terminal cells."""

from __future__ import annotations

from wcwidth import wcwidth


def char_width(char: str) -> int:
    """Number of terminal cells ``char`` occupies: 0, 1 or 2.

    ``wcwidth`` reports -1 for non-printable characters; those occupy no cell.
    """

    width = wcwidth(char)
    return width if width > 0 else 0


def visual_column(line: str, column: int) -> int:
    """Sum of the widths of ``line[:column]``."""

    return sum(char_width(char) for char in line[:column])
