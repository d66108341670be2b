from __future__ import annotations

import io
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List, Optional, Sequence

import pytest
from blessed.keyboard import Keystroke

from surara.adapters.terminal import (
    BlessedDisplay,
    decode_keystroke,
    read_events,
    run_terminal,
    terminal_scope,
)
from surara.buffer import Cursor
from surara.errors import DocumentLoadError
from surara.session import (
    DOWN,
    LEFT,
    NEWLINE,
    OTHER,
    RIGHT,
    TERMINATE,
    UP,
    KeyEvent,
)


def key(text: str) -> Keystroke:
    return Keystroke(ucs=text)


def sequence(name: str, text: str = "\x1b[?") -> Keystroke:
    return Keystroke(ucs=text, code=400, name=name)


class FakeTerminal:
    """Stands in for ``blessed.Terminal`` without needing a tty."""

    clear = "<clear>"

    def __init__(self, keys: Sequence[Keystroke] = ()) -> None:
        self.stream = io.StringIO()
        self.scope: List[str] = []
        self._keys = list(keys)

    def move_xy(self, x: int, y: int) -> str:
        return f"<{x},{y}>"

    def inkey(self, timeout: Optional[float] = None) -> Keystroke:
        del timeout
        if not self._keys:
            return Keystroke()
        return self._keys.pop(0)

    @contextmanager
    def _mode(self, name: str) -> Iterator[None]:
        self.scope.append(f"enter:{name}")
        try:
            yield
        finally:
            self.scope.append(f"exit:{name}")

    def raw(self):
        return self._mode("raw")

    def fullscreen(self):
        return self._mode("fullscreen")


@pytest.mark.parametrize(
    ("keystroke", "expected"),
    [
        (sequence("KEY_UP"), UP),
        (sequence("KEY_DOWN"), DOWN),
        (sequence("KEY_LEFT"), LEFT),
        (sequence("KEY_RIGHT"), RIGHT),
        (sequence("KEY_ENTER", "\r"), NEWLINE),
        (sequence("KEY_F1"), OTHER),
        (key("\x03"), TERMINATE),
        (key("a"), KeyEvent.character("a")),
        (key("漢"), KeyEvent.character("漢")),
    ],
)
def test_decode_keystroke(keystroke: Keystroke, expected: KeyEvent) -> None:
    assert decode_keystroke(keystroke) == expected


def test_read_events_ends_on_empty_keystroke() -> None:
    term = FakeTerminal([key("a"), sequence("KEY_LEFT")])

    events = list(read_events(term))  # type: ignore[arg-type]

    assert events == [KeyEvent.character("a"), LEFT]


def test_blessed_display_translates_to_zero_indexed_moves() -> None:
    term = FakeTerminal()
    display = BlessedDisplay(term)  # type: ignore[arg-type]

    display.clear_all()
    display.goto(1, 1)
    display.write("hi")
    display.goto(3, 2)
    display.flush()

    assert term.stream.getvalue() == "<clear><0,0>hi<2,1>"


def test_terminal_scope_releases_on_error() -> None:
    term = FakeTerminal()

    with pytest.raises(RuntimeError):
        with terminal_scope(term):  # type: ignore[arg-type]
            raise RuntimeError("boom")

    assert term.scope == ["enter:raw", "enter:fullscreen", "exit:fullscreen", "exit:raw"]


def test_run_terminal_edits_loaded_file(tmp_path: Path) -> None:
    target = tmp_path / "doc.txt"
    target.write_text("hello\nworld\n", encoding="utf-8")
    term = FakeTerminal(
        [sequence("KEY_DOWN"), key("W"), sequence("KEY_ENTER", "\r"), key("\x03"), key("z")]
    )

    session = run_terminal(target, term=term)  # type: ignore[arg-type]

    assert session.buffer.lines() == ("hello", "W", "world")
    assert session.cursor == Cursor(2, 0)
    assert term.scope[-1] == "exit:raw"
    assert "world\r\n" in term.stream.getvalue()


def test_run_terminal_fails_before_touching_terminal(tmp_path: Path) -> None:
    term = FakeTerminal()

    with pytest.raises(DocumentLoadError):
        run_terminal(tmp_path / "missing.txt", term=term)  # type: ignore[arg-type]

    assert term.scope == []
    assert term.stream.getvalue() == ""
