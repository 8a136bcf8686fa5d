"""Executable Textual app that hosts the line engine."""

from __future__ import annotations

import argparse
import os
from typing import Optional, Sequence

from rich.text import Text
from textual import events
from textual.app import App, ComposeResult
from textual.widgets import Static

from line_engine.buffer import EditorState, RenderSnapshot
from line_engine.config import EditorLimits
from line_engine.dispatch import KeyDispatcher
from line_engine.persistence import load_document
from line_engine.render import layout_rows, status_line
from line_engine.runtime import telemetry

from .controller import TextualEditorAdapter, TextualUIHooks


def create_dispatcher(
    path: Optional[str] = None, *, limits: Optional[EditorLimits] = None
) -> KeyDispatcher:
    """Build a dispatcher around a fresh or file-backed editor state."""

    state = EditorState.empty(limits=limits or EditorLimits.from_env())
    if path:
        load_document(state, path)
    return KeyDispatcher.for_state(state)


def render_text(snapshot: RenderSnapshot, *, limits: EditorLimits) -> Text:
    """Lay the snapshot out as rich text with the cursor cell highlighted."""

    rows = layout_rows(snapshot, limits=limits)
    cursor_x, cursor_y = snapshot.screen_cursor
    if 0 <= cursor_y < len(rows):
        row = rows[cursor_y]
        if len(row) <= cursor_x:
            rows[cursor_y] = row.ljust(cursor_x + 1)
    text = Text("\n".join(rows), no_wrap=True, overflow="crop")
    if 0 <= cursor_y < len(rows):
        offset = sum(len(row) + 1 for row in rows[:cursor_y]) + cursor_x
        text.stylize("reverse", offset, offset + 1)
    return text


class EditorView(Static, can_focus=True):
    """Focusable text surface that forwards every key to the adapter."""

    async def on_key(self, event: events.Key) -> None:
        adapter = getattr(self.app, "adapter", None)
        if adapter is None or event.key == "ctrl+q":
            return
        adapter.handle_textual_key(event.key, character=event.character)
        event.stop()
        event.prevent_default()


class LineEngineApp(App[None]):
    """Minimal Textual UI embedding the line engine."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#editor-view {
		height: 1fr;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
		text-style: reverse;
	}
	"""

    BINDINGS = [
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(
        self,
        dispatcher: KeyDispatcher,
    ) -> None:
        super().__init__()
        self.dispatcher = dispatcher
        self.adapter: TextualEditorAdapter | None = None
        self._editor_widget: EditorView | None = None
        self._status_widget: Static | None = None
        self.logger = telemetry.get_logger("line_engine.adapters.textual")

    @property
    def limits(self) -> EditorLimits:
        return self.dispatcher.state.limits

    def compose(self) -> ComposeResult:
        self._editor_widget = EditorView("", id="editor-view")
        self._status_widget = Static("", id="status-line")
        yield self._editor_widget
        yield self._status_widget

    def on_mount(self) -> None:
        self.dispatcher.resize(*self.window_size())
        hooks = TextualUIHooks(
            update_screen=self.draw,
            update_status=self._update_status,
            log=self._log_line,
        )
        self.adapter = TextualEditorAdapter(self.dispatcher, hooks)
        if self._editor_widget:
            self._editor_widget.focus()

    def on_resize(self, event: events.Resize) -> None:
        if self.adapter:
            self.adapter.resize(event.size.width, event.size.height)

    def window_size(self) -> tuple[int, int]:
        return (self.size.width, self.size.height)

    def draw(self, snapshot: RenderSnapshot) -> None:
        if self._editor_widget:
            self._editor_widget.update(render_text(snapshot, limits=self.limits))
        if self._status_widget:
            self._status_widget.update(status_line(snapshot))

    def _update_status(self, status: str) -> None:
        self.logger.info("status %s", status)

    def _log_line(self, line: str) -> None:
        self.logger.debug(line)


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Edit a text file in the terminal.")
    parser.add_argument(
        "path",
        nargs="?",
        default=None,
        help="Document to open; created on first save if missing",
    )
    parser.add_argument(
        "--log-level",
        default=os.environ.get("LINE_ENGINE_LOG_LEVEL", "INFO"),
        help="Minimum log level written to the log file (default: INFO)",
    )
    parser.add_argument(
        "--log-file",
        default=os.environ.get("LINE_ENGINE_LOG_FILE", ""),
        help="Write logs to this file; nothing is logged to the terminal",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    config = telemetry.TelemetryConfig()
    config.with_min_level(args.log_level)
    config.with_console_output(False)
    config.with_file_output(args.log_file)
    telemetry.configure(config=config)

    dispatcher = create_dispatcher(args.path)
    app = LineEngineApp(dispatcher)
    app.run()


if __name__ == "__main__":  # pragma: no cover - manual run
    main()
