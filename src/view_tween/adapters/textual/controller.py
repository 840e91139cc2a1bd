"""Adapter translating Textual key names into fold-aware window motions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional, Tuple

from view_tween import scroll
from view_tween.runtime import telemetry
from view_tween.window import HostWindow, Line, WinView

FOLD_FILL = "·"


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(frozen=True, slots=True)
class ViewMirror:
    """What the host should paint: visible rows plus the cursor's row."""

    rows: Tuple[str, ...]
    cursor_row: int
    view: WinView


@dataclass(slots=True)
class TextualScrollHooks:
    """Callbacks invoked by the adapter to update Textual widgets."""

    update_view: Callable[[ViewMirror], None]
    update_status: Callable[[str], None] = _noop
    log: Callable[[str], None] = _noop


def render_rows(window: HostWindow, view: WinView, height: int) -> Tuple[str, ...]:
    """Display rows starting at ``view.topline``, one per fold or line."""

    rows: list[str] = []
    line = view.topline
    while len(rows) < height and line <= window.line_count():
        fold = window.fold_info(line)
        first = fold.start if fold.closed else line
        text = window.line_text(first)
        if fold.closed:
            rows.append(f"+--{fold.lines:>3} lines: {text.strip()} {FOLD_FILL * 3}")
            line = fold.start + fold.lines
        else:
            rows.append(text)
            line += 1
    return tuple(rows)


class TextualViewAdapter:
    """Maps Textual key names onto scroll operations for one window."""

    def __init__(self, window: HostWindow, hooks: TextualScrollHooks) -> None:
        self.window = window
        self.hooks = hooks
        self._motions: Dict[str, Callable[[], str]] = {
            "j": lambda: self.move_cursor(1),
            "down": lambda: self.move_cursor(1),
            "k": lambda: self.move_cursor(-1),
            "up": lambda: self.move_cursor(-1),
            "ctrl+e": lambda: self.scroll(1),
            "ctrl+y": lambda: self.scroll(-1),
            "ctrl+d": lambda: self.scroll(self.half_page()),
            "ctrl+u": lambda: self.scroll(-self.half_page()),
            "g": lambda: self.jump(1),
            "G": lambda: self.jump(self.window.line_count()),
        }
        self._refresh()

    def handle_textual_key(self, key: str) -> Optional[str]:
        """Run the motion bound to ``key``; ``None`` when the key is unbound."""

        motion = self._motions.get(key)
        if motion is None:
            return None
        self._log_state("key ->", key=key)
        status = motion()
        self.hooks.update_status(status)
        self._refresh()
        self._log_state("result <-", status=status)
        return status

    def half_page(self) -> int:
        return max(scroll.effective_height(self.window) // 2, 1)

    def scroll(self, count: int) -> str:
        before = self.window.get_view().topline
        view = scroll.scroll_view(self.window, count)
        moved = scroll.display_distance(self.window, before, view.topline)
        return f"scroll {moved:+d}"

    def move_cursor(self, count: int) -> str:
        view = self.window.get_view()
        target = scroll.resolve_scroll_delta(self.window, view.lnum, count)
        target = self.window.fold_closed_start(target) or target
        return self._place_cursor(target)

    def jump(self, line: Line) -> str:
        target = self.window.fold_closed_start(line) or line
        return self._place_cursor(target)

    def _place_cursor(self, line: Line) -> str:
        result = scroll.set_cursor(self.window, line)
        if not result.applied:
            return f"cursor rejected: {result.reason}"
        self._follow_cursor()
        return f"cursor {result.line}:{result.column}"

    def _follow_cursor(self) -> None:
        view = self.window.get_view()
        rows = max(scroll.effective_height(self.window), 1)
        margin = scroll.get_scrolloff(self.window)
        offset = scroll.display_distance(self.window, view.topline, view.lnum)

        topline = view.topline
        if offset < margin:
            topline = scroll.resolve_scroll_delta(self.window, view.lnum, -margin)
        elif offset > rows - 1 - margin:
            topline = scroll.resolve_scroll_delta(
                self.window, view.lnum, -(rows - 1 - margin)
            )
        topline = self.window.fold_closed_start(topline) or topline
        if topline != view.topline:
            telemetry.record_event(
                "view.follow_cursor",
                level="debug",
                data={"from": view.topline, "to": topline},
            )
            self.window.set_view(view.with_topline(topline))

    def _refresh(self) -> None:
        view = self.window.get_view()
        height = max(scroll.effective_height(self.window), 1)
        rows = render_rows(self.window, view, height)
        cursor_row = scroll.get_winline(self.window) - 1 - view.topfill
        self.hooks.update_view(ViewMirror(rows=rows, cursor_row=cursor_row, view=view))

    def _log_state(self, prefix: str, **fields: object) -> None:
        view = self.window.get_view()
        snapshot: Dict[str, object] = {
            "topline": view.topline,
            "cursor": (view.lnum, view.col),
            "curswant": view.curswant,
        }
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        self.hooks.log(" ".join([prefix, *(f"{k}={v!r}" for k, v in snapshot.items())]))


__all__ = ["TextualScrollHooks", "TextualViewAdapter", "ViewMirror", "render_rows"]
