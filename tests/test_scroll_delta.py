from __future__ import annotations

from view_tween.scroll import scroll_delta
from view_tween.window import FoldInfo, FoldRange, Line, MemoryWindow


def make_window(
    line_count: int = 20, folds: tuple[FoldRange, ...] = ()
) -> MemoryWindow:
    return MemoryWindow.numbered(line_count, folds=folds)


class ZeroLinesWindow(MemoryWindow):
    """Reports every line as a fold start with a zero span."""

    def fold_info(self, line: Line) -> FoldInfo:
        return FoldInfo(start=line, lines=0)


class ZeroStartWindow(MemoryWindow):
    def fold_info(self, line: Line) -> FoldInfo:
        return FoldInfo(start=0, lines=5)


def test_same_line_is_zero() -> None:
    window = make_window(folds=((5, 9),))
    for line in (1, 5, 7, 20):
        assert scroll_delta(window, line, line) == 0


def test_without_folds_delta_is_line_distance() -> None:
    window = make_window()
    assert scroll_delta(window, 3, 17) == 14
    assert scroll_delta(window, 17, 3) == -14
    assert scroll_delta(window, 1, 20) == 19


def test_closed_fold_counts_as_one_hop() -> None:
    window = make_window(folds=((5, 9),))
    assert scroll_delta(window, 1, 12) == 7
    assert scroll_delta(window, 1, 20) == 15
    assert scroll_delta(window, 20, 1) == -15
    assert scroll_delta(window, 12, 1) == -7


def test_fold_spanning_whole_range_is_single_hop() -> None:
    window = make_window(folds=((3, 10),))
    assert scroll_delta(window, 4, 8) == 1
    assert scroll_delta(window, 8, 4) == -1


def test_backward_from_inside_fold_jumps_to_its_start() -> None:
    window = make_window(folds=((5, 9),))
    assert scroll_delta(window, 7, 2) == -3
    assert scroll_delta(window, 7, 4) == -1


def test_forward_from_inside_fold_jumps_past_its_end() -> None:
    window = make_window(folds=((5, 9),))
    assert scroll_delta(window, 7, 12) == 3
    assert scroll_delta(window, 9, 10) == 1


def test_several_folds() -> None:
    window = make_window(15, folds=((3, 4), (8, 12)))
    assert scroll_delta(window, 1, 15) == 9
    assert scroll_delta(window, 15, 1) == -9


def test_endpoints_are_clamped_to_buffer() -> None:
    window = make_window()
    assert scroll_delta(window, -5, 25) == 19
    assert scroll_delta(window, 0, 1) == 0
    assert scroll_delta(window, 10, 400) == 10


def test_magnitude_never_exceeds_line_distance() -> None:
    window = make_window(folds=((3, 4), (8, 12), (15, 15)))
    for line_from in range(1, 21):
        for line_to in range(1, 21):
            delta = scroll_delta(window, line_from, line_to)
            assert abs(delta) <= abs(line_to - line_from)
            assert delta == 0 or (delta > 0) == (line_to > line_from)


def test_either_sentinel_means_no_fold() -> None:
    assert scroll_delta(ZeroLinesWindow.numbered(20), 1, 12) == 11
    assert scroll_delta(ZeroStartWindow.numbered(20), 12, 1) == -11
