from __future__ import annotations

import random
from typing import Iterable

import pytest

from surara.buffer import Cursor, TextBuffer
from surara.display import MemoryDisplay
from surara.session import (
    DOWN,
    LEFT,
    NEWLINE,
    OTHER,
    RIGHT,
    TERMINATE,
    UP,
    EditorSession,
    KeyEvent,
    KeyKind,
    typed,
)


def make_session(*lines: str) -> EditorSession:
    return EditorSession(TextBuffer(lines), display=MemoryDisplay())


def feed(session: EditorSession, events: Iterable[KeyEvent]) -> None:
    for event in events:
        assert session.step(event) is True


def move_to(session: EditorSession, row: int, column: int) -> None:
    feed(session, [DOWN] * row + [RIGHT] * column)
    assert session.cursor == Cursor(row, column)


def test_empty_document_starts_with_one_empty_line() -> None:
    session = EditorSession(display=MemoryDisplay())

    assert session.buffer.lines() == ("",)
    assert session.cursor == Cursor(0, 0)
    assert session.dirty is True


def test_typing_into_empty_document() -> None:
    session = EditorSession(display=MemoryDisplay())
    session.start()

    feed(session, typed("ab") + [NEWLINE] + typed("c"))

    assert session.buffer.lines() == ("ab", "c")
    assert session.cursor == Cursor(1, 1)


def test_left_arrows_then_up_on_first_row() -> None:
    session = make_session("hello")
    move_to(session, 0, 5)

    feed(session, [LEFT, LEFT, LEFT])
    assert session.cursor == Cursor(0, 2)

    feed(session, [UP])
    assert session.cursor == Cursor(0, 2)


def test_down_then_right_clamps_at_line_end() -> None:
    session = make_session("a", "bb")

    feed(session, [DOWN, RIGHT, RIGHT])
    assert session.cursor == Cursor(1, 2)

    feed(session, [RIGHT])
    assert session.cursor == Cursor(1, 2)


def test_vertical_moves_clamp_column_to_shorter_line() -> None:
    session = make_session("long line", "ab", "long line")
    move_to(session, 0, 7)

    feed(session, [DOWN])
    assert session.cursor == Cursor(1, 2)

    # The column stays clamped; there is no remembered goal column.
    feed(session, [DOWN])
    assert session.cursor == Cursor(2, 2)

    feed(session, [UP, UP])
    assert session.cursor == Cursor(0, 2)


def test_boundary_moves_are_absorbed() -> None:
    session = make_session("x")
    session.start()

    feed(session, [LEFT, UP, DOWN])

    assert session.cursor == Cursor(0, 0)
    assert session.dirty is False


def test_insert_advances_column_and_grows_line() -> None:
    session = make_session("hllo")
    move_to(session, 0, 1)

    feed(session, typed("e"))

    assert session.buffer.line(0) == "hello"
    assert session.buffer.line_length(0) == 5
    assert session.cursor == Cursor(0, 2)
    assert session.buffer.line(0)[session.cursor.column - 1] == "e"


def test_newline_splits_at_cursor() -> None:
    session = make_session("first", "hello world", "last")
    move_to(session, 1, 5)

    feed(session, [NEWLINE])

    assert session.buffer.lines() == ("first", "hello", " world", "last")
    assert session.buffer.line_length(1) == 5
    assert session.cursor == Cursor(2, 0)


def test_control_characters_and_other_keys_are_noops() -> None:
    session = make_session("abc")
    session.start()

    feed(session, [KeyEvent.character("\t"), KeyEvent.character("\x1b"), OTHER])

    assert session.buffer.lines() == ("abc",)
    assert session.cursor == Cursor(0, 0)
    assert session.dirty is False


def test_apply_terminate_returns_false() -> None:
    session = make_session("abc")

    assert session.apply(TERMINATE) is False
    assert session.apply(RIGHT) is True


def test_run_stops_at_terminate() -> None:
    session = make_session("")

    session.run(typed("ab") + [TERMINATE] + typed("cd"))

    assert session.buffer.lines() == ("ab",)
    assert session.cursor == Cursor(0, 2)


def test_run_stops_when_events_are_exhausted() -> None:
    session = make_session("")

    session.run(iter(typed("xyz")))

    assert session.buffer.lines() == ("xyz",)


def test_visual_column_tracks_display_width() -> None:
    session = make_session("")

    feed(session, typed("a"))
    assert session.visual_column == 1

    feed(session, typed("漢"))
    assert session.visual_column == 3

    feed(session, [LEFT])
    assert session.visual_column == 1
    assert session.cursor == Cursor(0, 1)


def test_visual_column_resets_on_newline() -> None:
    session = make_session("")

    feed(session, typed("漢字") + [NEWLINE])

    assert session.visual_column == 0


@pytest.mark.parametrize("seed", range(5))
def test_cursor_stays_within_buffer_for_random_input(seed: int) -> None:
    rng = random.Random(seed)
    session = make_session("hello", "", "漢字かな", "a")
    choices = [UP, DOWN, LEFT, RIGHT, OTHER, NEWLINE] + typed("xy漢\t")

    for _ in range(300):
        assert session.step(rng.choice(choices)) is True
        cursor = session.cursor
        buffer = session.buffer
        assert 0 <= cursor.row < buffer.line_count()
        assert 0 <= cursor.column <= buffer.line_length(cursor.row)


def test_key_event_validates_payload() -> None:
    with pytest.raises(ValueError):
        KeyEvent(KeyKind.CHAR)
    with pytest.raises(ValueError):
        KeyEvent(KeyKind.UP, "x")
    with pytest.raises(ValueError):
        KeyEvent.character("ab")


def test_dump_lists_cursor_and_lines() -> None:
    session = make_session("ab", "c")
    move_to(session, 1, 1)

    assert session.dump() == "Cursor(row=1, column=1)\n['a', 'b']\n['c']"
