from __future__ import annotations

from view_tween.scroll import CursorResult, set_cursor
from view_tween.window import Line, MemoryWindow, WinView


class RefusingWindow(MemoryWindow):
    def set_cursor(self, line: Line, col: int) -> None:
        raise RuntimeError("Invalid cursor position")


def test_line_is_clamped_to_buffer() -> None:
    window = MemoryWindow.numbered(20)

    result = set_cursor(window, 50, 2)

    assert result == CursorResult.ok(20, 2)
    assert window.get_view().lnum == 20
    assert window.get_view().col == 2

    assert set_cursor(window, 0).line == 1
    assert set_cursor(window, -4).line == 1


def test_defaults_to_first_line_and_curswant() -> None:
    window = MemoryWindow(
        document=MemoryWindow.numbered(20).document,
        view=WinView(lnum=7, curswant=4),
    )

    result = set_cursor(window)

    assert result.applied is True
    assert (result.line, result.column) == (1, 4)
    assert window.get_view().lnum == 1


def test_negative_column_floors_at_zero() -> None:
    window = MemoryWindow.numbered(20)
    assert set_cursor(window, 3, -7).column == 0
    assert window.get_view().col == 0


def test_curswant_survives_short_lines() -> None:
    window = MemoryWindow.from_text("abc\nx\nlonger line")

    set_cursor(window, 2, 5)
    assert window.get_view().col == 0
    assert window.get_view().curswant == 5

    result = set_cursor(window, 3)
    assert result.column == 5
    assert window.get_view().col == 5


def test_rejection_is_reported_not_raised() -> None:
    window = MemoryWindow.numbered(20)
    before = window.get_view()

    with window.updating():
        result = set_cursor(window, 10, 1)

    assert result.applied is False
    assert (result.line, result.column) == (10, 1)
    assert result.reason is not None and "updating" in result.reason
    assert window.get_view() == before


def test_any_host_error_becomes_rejection() -> None:
    window = RefusingWindow.numbered(20)
    before = window.get_view()

    result = set_cursor(window, 3, 2)

    assert result == CursorResult.rejected(3, 2, "Invalid cursor position")
    assert window.get_view() == before
