"""Executable Textual app that hosts the editor session."""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional, Sequence

try:  # pragma: no cover - imported only when the app is run
    from rich.text import Text
    from textual import events
    from textual.app import App, ComposeResult
    from textual.binding import Binding
    from textual.widgets import Static
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use surara.adapters.textual.app"
    ) from exc

from surara.buffer import Cursor, TextBuffer, load_lines
from surara.errors import DocumentLoadError

from .controller import TextualEditorAdapter, TextualUIHooks


class SuraraApp(App[None]):
    """Single-pane editor view with a one-line status bar."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#buffer-view {
		height: 1fr;
		content-align: left top;
		overflow: auto;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
		padding: 0 1;
	}
	"""

    BINDINGS = [
        Binding("ctrl+c", "terminate", "Quit", priority=True),
    ]

    def __init__(self, buffer: Optional[TextBuffer] = None) -> None:
        super().__init__()
        self._initial_buffer = buffer
        self.adapter: TextualEditorAdapter | None = None
        self._buffer_widget: Static | None = None
        self._status_widget: Static | None = None

    def compose(self) -> ComposeResult:
        self._buffer_widget = Static("", id="buffer-view")
        self._status_widget = Static("", id="status-line")
        yield self._buffer_widget
        yield self._status_widget

    def on_mount(self) -> None:
        hooks = TextualUIHooks(
            update_buffer=self._update_buffer,
            update_status=self._update_status,
        )
        self.adapter = TextualEditorAdapter(self._initial_buffer, hooks)

    def on_key(self, event: events.Key) -> None:
        if not self.adapter:
            return
        if not self.adapter.handle_textual_key(event.key, character=event.character):
            self.exit()
        event.stop()

    def action_terminate(self) -> None:
        if self.adapter:
            self.adapter.handle_textual_key("ctrl+c")
        self.exit()

    def _update_buffer(self, rows: List[str], cursor: Cursor) -> None:
        if not self._buffer_widget:
            return
        text = Text()
        for index, row in enumerate(rows):
            line = Text(row)
            if index == cursor.row:
                # A caret at end of line sits on a padding blank.
                if cursor.column >= len(row):
                    line = Text(row + " ")
                line.stylize("reverse", cursor.column, cursor.column + 1)
            text.append(line)
            text.append("\n")
        self._buffer_widget.update(text)

    def _update_status(self, status: str) -> None:
        if self._status_widget:
            self._status_widget.update(status)


def _parse_args(argv: Optional[Sequence[str]] = None) -> tuple[argparse.ArgumentParser, argparse.Namespace]:
    parser = argparse.ArgumentParser(
        prog="surara-textual", description="Run the editor inside a Textual app."
    )
    parser.add_argument(
        "path", nargs="?", default=None, help="File to load (default: empty document)"
    )
    parser.add_argument(
        "--no-dump",
        action="store_true",
        help="Do not print the final cursor and buffer dump on exit",
    )
    return parser, parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser, args = _parse_args(argv)
    buffer = None
    if args.path is not None:
        try:
            buffer = TextBuffer(load_lines(args.path))
        except DocumentLoadError as exc:
            parser.error(str(exc))

    app = SuraraApp(buffer)
    app.run()
    if app.adapter is not None and not args.no_dump:
        print(app.adapter.session.dump(), file=sys.stderr)


if __name__ == "__main__":  # pragma: no cover - manual demo
    main()
