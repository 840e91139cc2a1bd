"""Fold-aware vertical scroll arithmetic.

A closed fold renders as a single row, so every function here counts it as
one step no matter how many buffer lines it hides. The pair
``scroll_delta`` / ``resolve_scroll_delta`` converts between two lines and
the number of such steps separating them; an animation driver computes the
total once and resolves interpolated (fractional) deltas on every frame.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from view_tween.numeric import clamp, round_half_up, sign
from view_tween.runtime import telemetry
from view_tween.window import HostWindow, Line, WinView

LOGGER_NAME = "view_tween.scroll"


@dataclass(frozen=True, slots=True)
class CursorResult:
    """Outcome of ``set_cursor``: the position tried and whether it stuck."""

    applied: bool
    line: Line
    column: int
    reason: Optional[str] = None

    @classmethod
    def ok(cls, line: Line, column: int) -> "CursorResult":
        return cls(applied=True, line=line, column=column)

    @classmethod
    def rejected(cls, line: Line, column: int, reason: str) -> "CursorResult":
        return cls(applied=False, line=line, column=column, reason=reason)


def _window_label(window: HostWindow) -> str:
    return str(getattr(window, "window_id", type(window).__name__))


def effective_height(window: HostWindow) -> int:
    """Rows available for text: the window height minus its title bar."""

    height = window.window_height()
    return height - 1 if window.winbar() else height


def scrolloff_for_height(height: int, preferred: int) -> int:
    """Scroll margin honoured by a window ``height`` rows tall.

    The margin is capped at half the height. For an even height a margin of
    exactly half would leave no row for the cursor, so it drops by one.
    """

    margin = clamp(preferred, 0, height // 2)
    if height % 2 == 0 and preferred >= height / 2:
        margin = max(margin - 1, 0)
    return margin


def get_scrolloff(window: HostWindow) -> int:
    return scrolloff_for_height(effective_height(window), window.scrolloff())


def scroll_delta(window: HostWindow, line_from: Line, line_to: Line) -> int:
    """Signed number of displayed rows between ``line_from`` and ``line_to``.

    Walks from ``line_from`` towards ``line_to``; a closed fold met on the way
    is crossed in one hop. The result's magnitude never exceeds
    ``abs(line_to - line_from)``.
    """

    line_from = max(line_from, 1)
    line_to = min(line_to, window.line_count())
    direction = sign(line_to - line_from)
    if direction == 0:
        return 0

    current = line_from
    delta = 0
    while (line_to - current) * direction > 0:
        fold = window.fold_info(current)
        if fold.closed:
            edge = fold.start if direction == -1 else fold.start + fold.lines - 1
            current = edge + direction
        else:
            current += direction
        delta += direction

    telemetry.trace(LOGGER_NAME, "scroll_delta %s->%s = %+d", line_from, line_to, delta)
    return delta


def resolve_scroll_delta(window: HostWindow, line: Line, delta: float) -> Line:
    """Line reached after ``delta`` fold-aware hops from ``line``.

    ``delta`` may be fractional (animation progress) and is rounded half up
    first. The result is clamped to the buffer. Walking backward, a hop that
    ends just below a closed fold lands on the fold's last line; hosts display
    any line inside a closed fold as the fold's row
    (``fold_closed_start``).
    """

    hops = round_half_up(delta)
    direction = sign(hops)
    if direction == 0:
        return line

    line_count = window.line_count()
    fold_edge = window.fold_closed_start if direction == -1 else window.fold_closed_end

    target = line
    for _ in range(abs(hops)):
        edge = fold_edge(target)
        target = (target if edge is None else edge) + direction
        if (direction > 0 and target > line_count) or (direction < 0 and target < 1):
            break

    resolved = clamp(target, 1, line_count)
    telemetry.trace(
        LOGGER_NAME, "resolve_scroll_delta %s%+d = %s", line, hops, resolved
    )
    return resolved


def display_distance(window: HostWindow, line_a: Line, line_b: Line) -> int:
    """Signed displayed rows from ``line_a`` to ``line_b``.

    Always walks forward from the upper line. A backward ``scroll_delta``
    that ends on a fold's first line steps past it, which is right for an
    animation target but not for measuring two visible rows.
    """

    if line_b >= line_a:
        return scroll_delta(window, line_a, line_b)
    return -scroll_delta(window, line_b, line_a)


def get_winline(window: HostWindow) -> int:
    """1-based screen row of the cursor inside the window.

    Closed folds between ``topline`` and the cursor take one row each and a
    cursor inside a closed fold sits on the fold's row. Filler lines above
    ``topline`` are included.
    """

    view = window.get_view()
    cursor = window.fold_closed_start(view.lnum) or view.lnum
    if cursor <= view.topline:
        return 1 + view.topfill
    return scroll_delta(window, view.topline, cursor) + 1 + view.topfill


def set_cursor(
    window: HostWindow,
    line: Optional[Line] = None,
    column: Optional[int] = None,
) -> CursorResult:
    """Place the cursor without worrying about out-of-range coordinates.

    ``line`` (default ``1``) is clamped to the buffer and ``column`` falls
    back to the window's ``curswant``. Whatever the host raises while placing
    the cursor is returned as ``CursorResult.rejected`` instead.
    """

    with telemetry.span(
        "scroll::set_cursor",
        component="scroll",
        metadata={"window": _window_label(window)},
    ) as handle:
        target_line = clamp(1 if line is None else line, 1, window.line_count())
        wanted = window.get_view().curswant if column is None else column
        target_column = max(0, wanted)
        try:
            window.set_cursor(target_line, target_column)
        except Exception as exc:
            handle.add_metadata("rejected", exc)
            telemetry.record_event(
                "cursor.rejected",
                level="warning",
                data={
                    "window": _window_label(window),
                    "line": target_line,
                    "column": target_column,
                    "reason": str(exc),
                },
            )
            return CursorResult.rejected(target_line, target_column, str(exc))
        return CursorResult.ok(target_line, target_column)


def scroll_view(window: HostWindow, count: float) -> WinView:
    """Scroll the view ``count`` rows at once, dragging the cursor along.

    ``topline`` and the cursor both move by the same number of fold-aware
    rows; the cursor is then kept inside the scroll-off band of the new view.
    Returns the view the window ends up with.
    """

    view = window.get_view()
    hops = round_half_up(count)
    if hops == 0:
        return view

    with telemetry.span(
        "scroll::scroll_view",
        component="scroll",
        metadata={"window": _window_label(window), "count": hops},
    ) as handle:
        topline = resolve_scroll_delta(window, view.topline, hops)
        topline = window.fold_closed_start(topline) or topline
        moved = display_distance(window, view.topline, topline)
        handle.add_metadata("moved", moved)

        cursor = resolve_scroll_delta(window, view.lnum, moved)
        margin = get_scrolloff(window)
        rows = max(effective_height(window), 1)
        band_top = topline
        if topline > 1:
            band_top = resolve_scroll_delta(window, topline, margin)
        band_bottom = resolve_scroll_delta(window, topline, max(rows - 1 - margin, 0))
        cursor = clamp(cursor, band_top, max(band_top, band_bottom))
        cursor = window.fold_closed_start(cursor) or cursor

        window.set_view(view.with_topline(topline).with_cursor(cursor))
        set_cursor(window, cursor)
        return window.get_view()


__all__ = [
    "CursorResult",
    "display_distance",
    "effective_height",
    "get_scrolloff",
    "get_winline",
    "resolve_scroll_delta",
    "scroll_delta",
    "scroll_view",
    "scrolloff_for_height",
    "set_cursor",
]
