"""Editor session: cursor state machine, event loop and redraw protocol."""

from __future__ import annotations

from typing import Iterable, Optional

from surara.buffer import Cursor, TextBuffer, is_control
from surara.display import DisplaySink, visual_column
from surara.runtime import telemetry

from .events import KeyEvent, KeyKind


class EditorSession:
    """Owns one buffer and one cursor for the lifetime of the process.

    The buffer's dirty flag gates full repaints, so cursor-only movement
    never re-sends the document. The visual column is recomputed from the
    current line after every event and never cached across events.
    """

    def __init__(
        self, buffer: Optional[TextBuffer] = None, *, display: DisplaySink
    ) -> None:
        self._buffer = buffer if buffer is not None else TextBuffer()
        if self._buffer.line_count() == 0:
            self._buffer.append_line("")
        self._buffer.mark_dirty()
        self._cursor = Cursor()
        self._visual_column = 0
        self.display = display

    @property
    def buffer(self) -> TextBuffer:
        return self._buffer

    @property
    def cursor(self) -> Cursor:
        return Cursor(self._cursor.row, self._cursor.column)

    @property
    def visual_column(self) -> int:
        return self._visual_column

    @property
    def dirty(self) -> bool:
        return self._buffer.dirty

    def start(self) -> None:
        """Paint the initial frame and park the visible cursor at the origin."""

        telemetry.record_event(
            "session.start", data={"lines": self._buffer.line_count()}
        )
        self.redraw_if_dirty()
        self.display.goto(1, 1)
        self.display.flush()

    def run(self, events: Iterable[KeyEvent]) -> None:
        """Start, then handle ``events`` until TERMINATE or exhaustion."""

        self.start()
        for event in events:
            if not self.step(event):
                break

    def step(self, event: KeyEvent) -> bool:
        """Handle one event and synchronize the display.

        Returns ``False`` when the event ends the session; nothing is drawn
        in that case.
        """

        with telemetry.span(
            "session::event",
            component=True,
            metadata={"kind": event.kind.name},
        ):
            if not self.apply(event):
                telemetry.record_event(
                    "session.terminate", data={"cursor": self._cursor.as_tuple()}
                )
                return False
            self._visual_column = visual_column(
                self._buffer.line(self._cursor.row), self._cursor.column
            )
            self.redraw_if_dirty()
            self.place_cursor()
        return True

    def apply(self, event: KeyEvent) -> bool:
        """Apply ``event`` to the buffer and cursor without touching the display."""

        kind = event.kind
        cursor = self._cursor
        buffer = self._buffer

        if kind is KeyKind.TERMINATE:
            return False
        if kind is KeyKind.UP:
            if cursor.row > 0:
                cursor.row -= 1
                cursor.column = min(cursor.column, buffer.line_length(cursor.row))
        elif kind is KeyKind.DOWN:
            if cursor.row + 1 < buffer.line_count():
                cursor.row += 1
                cursor.column = min(cursor.column, buffer.line_length(cursor.row))
        elif kind is KeyKind.LEFT:
            if cursor.column > 0:
                cursor.column -= 1
        elif kind is KeyKind.RIGHT:
            cursor.column = min(cursor.column + 1, buffer.line_length(cursor.row))
        elif kind is KeyKind.CHAR and event.char is not None:
            self._insert(event.char)
        return True

    def _insert(self, char: str) -> None:
        cursor = self._cursor
        if char == "\n":
            self._buffer.split_line(cursor.row, cursor.column)
            cursor.row += 1
            cursor.column = 0
        elif not is_control(char):
            self._buffer.insert_char(cursor.row, cursor.column, char)
            cursor.column += 1

    def redraw_if_dirty(self) -> None:
        """Repaint the whole document if it changed since the last repaint."""

        if not self._buffer.dirty:
            return
        display = self.display
        display.clear_all()
        display.goto(1, 1)
        for line in self._buffer.lines():
            display.write(line)
            display.write("\r\n")
        display.flush()
        self._buffer.mark_clean()

    def place_cursor(self) -> None:
        self.display.goto(self._visual_column + 1, self._cursor.row + 1)
        self.display.flush()

    def dump(self) -> str:
        """Cursor followed by every line as a list of characters."""

        parts = [repr(self.cursor)]
        parts.extend(repr(list(line)) for line in self._buffer.lines())
        return "\n".join(parts)
