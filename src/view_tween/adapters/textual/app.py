"""Executable Textual app that scrolls a folded buffer."""

from __future__ import annotations

import argparse
import os
from pathlib import Path
from typing import List, Optional, Sequence

try:  # pragma: no cover - imported only when the demo is run
    from textual import events
    from textual.app import App, ComposeResult
    from textual.widgets import Footer, Header, Static
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' extra to use view_tween.adapters.textual.app"
    ) from exc

from view_tween.runtime import telemetry
from view_tween.window import FoldRange, MemoryWindow, WindowOptions

from .controller import TextualScrollHooks, TextualViewAdapter, ViewMirror

DEMO_LINES = 200
DEMO_FOLDS: List[FoldRange] = [(5, 9), (20, 60), (61, 64), (120, 180)]


class ViewTweenApp(App[None]):
    """Minimal Textual UI showing fold-aware scrolling."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#view {
		height: 1fr;
		border: round $accent;
		padding: 0 1;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
		padding: 0 1;
	}
	"""

    BINDINGS = [
        ("ctrl+c", "quit", "Quit"),
        ("q", "quit", "Quit"),
    ]

    def __init__(self, window: MemoryWindow) -> None:
        super().__init__()
        self.window = window
        self.adapter: TextualViewAdapter | None = None
        self._view_widget: Static | None = None
        self._status_widget: Static | None = None

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        self._view_widget = Static("", id="view")
        self._status_widget = Static("", id="status-line")
        yield self._view_widget
        yield self._status_widget
        yield Footer()

    def on_mount(self) -> None:
        hooks = TextualScrollHooks(
            update_view=self._update_view,
            update_status=self._update_status,
            log=lambda line: telemetry.logger.debug(line),
        )
        self.adapter = TextualViewAdapter(self.window, hooks)

    def on_key(self, event: events.Key) -> None:
        if not self.adapter:
            return
        key = event.character if event.character in {"g", "G", "j", "k"} else event.key
        if self.adapter.handle_textual_key(key) is not None:
            event.stop()

    def _update_view(self, mirror: ViewMirror) -> None:
        if not self._view_widget:
            return
        rendered = [
            f"> {row}" if index == mirror.cursor_row else f"  {row}"
            for index, row in enumerate(mirror.rows)
        ]
        self._view_widget.update("\n".join(rendered))

    def _update_status(self, status: str) -> None:
        if self._status_widget:
            view = self.window.get_view()
            self._status_widget.update(f"{status}  top={view.topline} line={view.lnum}")


def _env_int(key: str, fallback: int) -> int:
    value = os.environ.get(key)
    if value is None:
        return fallback
    try:
        return int(value)
    except ValueError:
        return fallback


def parse_fold(value: str) -> FoldRange:
    """Parse ``START:END`` into an inclusive fold range."""

    try:
        start_text, end_text = value.split(":", 1)
        return int(start_text), int(end_text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(
            f"fold must look like START:END, got '{value}'"
        ) from exc


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the fold-aware scrolling demo.")
    parser.add_argument(
        "--file",
        default=os.environ.get("VIEW_TWEEN_DEMO_FILE"),
        help="Text file to display (default: generated numbered lines)",
    )
    parser.add_argument(
        "--fold",
        action="append",
        type=parse_fold,
        default=None,
        help="Closed fold as START:END, repeatable",
    )
    parser.add_argument(
        "--scrolloff",
        type=int,
        default=_env_int("VIEW_TWEEN_SCROLLOFF", 3),
        help="Lines kept visible above/below the cursor (default: 3)",
    )
    parser.add_argument(
        "--height",
        type=int,
        default=_env_int("VIEW_TWEEN_HEIGHT", 30),
        help="Window height in rows (default: 30)",
    )
    parser.add_argument(
        "--log-preset",
        choices=("development", "production", "performance"),
        default=None,
        help="Telemetry preset to activate",
    )
    return parser.parse_args(argv)


def build_window(args: argparse.Namespace) -> MemoryWindow:
    options = WindowOptions(height=args.height, scrolloff=args.scrolloff)
    if args.file:
        return MemoryWindow.from_text(
            Path(args.file).read_text(encoding="utf-8"),
            folds=args.fold or (),
            options=options,
        )
    return MemoryWindow.numbered(
        DEMO_LINES,
        folds=DEMO_FOLDS if args.fold is None else args.fold,
        options=options,
    )


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    if args.log_preset:
        telemetry.configure(preset=args.log_preset)
    ViewTweenApp(build_window(args)).run()


if __name__ == "__main__":  # pragma: no cover - manual demo
    main()
