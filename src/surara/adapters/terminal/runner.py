"""Run an editor session on the controlling terminal."""

from __future__ import annotations

import os
from contextlib import ExitStack, contextmanager
from typing import Iterator, Optional, Union

from blessed import Terminal

from surara.buffer import TextBuffer, load_lines
from surara.session import EditorSession

from .display import BlessedDisplay
from .keys import read_events


@contextmanager
def terminal_scope(term: Terminal) -> Iterator[Terminal]:
    """Raw mode plus the alternate screen, restored on every exit path."""

    with ExitStack() as stack:
        stack.enter_context(term.raw())
        stack.enter_context(term.fullscreen())
        yield term


def run_terminal(
    path: Union[str, "os.PathLike[str]", None] = None,
    *,
    term: Optional[Terminal] = None,
) -> EditorSession:
    """Load ``path`` (if any), edit it interactively, return the finished session.

    The document is read before the terminal is touched so a load failure
    never leaves the screen in raw mode.
    """

    buffer = TextBuffer(load_lines(path)) if path is not None else TextBuffer()
    term = term or Terminal()
    session = EditorSession(buffer, display=BlessedDisplay(term))
    with terminal_scope(term):
        session.run(read_events(term))
    return session
