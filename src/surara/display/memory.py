"""In-memory display sink used by tests and widget-based hosts."""

from __future__ import annotations

from typing import Callable, List, Optional, Tuple


class MemoryDisplay:
    """Records every sink operation and the text painted since the last clear."""

    def __init__(
        self, *, on_flush: Optional[Callable[["MemoryDisplay"], None]] = None
    ) -> None:
        self.ops: List[Tuple[object, ...]] = []
        self.screen = ""
        self.position: Tuple[int, int] = (1, 1)
        self.flushes = 0
        self._on_flush = on_flush

    def clear_all(self) -> None:
        self.ops.append(("clear",))
        self.screen = ""

    def goto(self, column: int, row: int) -> None:
        if column < 1 or row < 1:
            raise ValueError(f"goto expects 1-indexed coordinates, got {(column, row)}")
        self.ops.append(("goto", column, row))
        self.position = (column, row)

    def write(self, text: str) -> None:
        self.ops.append(("write", text))
        self.screen += text

    def flush(self) -> None:
        self.ops.append(("flush",))
        self.flushes += 1
        if self._on_flush is not None:
            self._on_flush(self)

    @property
    def rows(self) -> List[str]:
        """Painted lines, terminators removed."""

        rows = self.screen.split("\r\n")
        if rows[-1] == "":
            rows.pop()
        return rows

    def count(self, op: str) -> int:
        return sum(1 for entry in self.ops if entry[0] == op)

    def reset_ops(self) -> None:
        self.ops.clear()
