"""Executable Textual app that hosts the editing engine."""

from __future__ import annotations

import argparse
import os
from typing import Optional, Sequence

try:  # pragma: no cover - imported only when demo is run
    from textual import events
    from textual.app import App, ComposeResult
    from textual.containers import Vertical
    from textual.widgets import Footer, Header, Static
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use caret_engine.adapters.textual.app"
    ) from exc

from caret_engine.runtime import telemetry
from caret_engine.session import EditorSession

from .controller import EditorMirror, TextualEditorAdapter, TextualUIHooks


class EditorApp(App[None]):
    """Minimal Textual UI embedding one editor session."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#buffer-view {
		height: 1fr;
		border: round $accent;
		padding: 1 1;
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
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, *, text: str = "") -> None:
        super().__init__()
        self.session = EditorSession.from_text(text, name="demo")
        self.adapter: TextualEditorAdapter | None = None
        self._logger = telemetry.get_logger("caret_engine.demo")
        self._buffer_widget: Static | None = None
        self._status_widget: Static | None = None

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        with Vertical(id="buffer-area"):
            self._buffer_widget = Static("", id="buffer-view", markup=False)
            yield self._buffer_widget
        self._status_widget = Static("", id="status-line", markup=False)
        yield self._status_widget
        yield Footer()

    def on_mount(self) -> None:
        hooks = TextualUIHooks(
            update_buffer=self._update_buffer,
            update_status=self._update_status,
            log=self._log_line,
        )
        self.adapter = TextualEditorAdapter(self.session, hooks)

    def on_unmount(self) -> None:
        if self.adapter:
            self.adapter.close()
            self.adapter = None

    def on_key(self, event: events.Key) -> None:
        if not self.adapter:
            return
        action = self.adapter.handle_textual_key(event.key, text=event.character)
        if action is not None:
            event.prevent_default()
            event.stop()

    def on_paste(self, event: events.Paste) -> None:
        if self.adapter:
            self.adapter.handle_paste(event.text)
            event.stop()

    def _update_buffer(self, mirror: EditorMirror) -> None:
        if self._buffer_widget:
            self._buffer_widget.update(mirror.rendered)

    def _update_status(self, status: str) -> None:
        if self._status_widget:
            self._status_widget.update(status)

    def _log_line(self, line: str) -> None:
        self._logger.debug(line)


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the caret_engine Textual demo.")
    parser.add_argument(
        "--text",
        default=os.environ.get("CARET_ENGINE_DEMO_TEXT", ""),
        help="Initial document text (default: empty)",
    )
    parser.add_argument(
        "--log-preset",
        choices=telemetry.PRESETS,
        default="production",
        help="Telemetry preset; console presets draw over the UI (default: production)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    telemetry.configure(preset=args.log_preset)
    app = EditorApp(text=args.text)
    app.run()


if __name__ == "__main__":  # pragma: no cover - manual demo
    main()
