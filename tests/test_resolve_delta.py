from __future__ import annotations

from view_tween.scroll import resolve_scroll_delta, scroll_delta
from view_tween.window import FoldRange, MemoryWindow


def make_window(
    line_count: int = 20, folds: tuple[FoldRange, ...] = ()
) -> MemoryWindow:
    return MemoryWindow.numbered(line_count, folds=folds)


def test_zero_delta_returns_line_unchanged() -> None:
    window = make_window(folds=((5, 9),))
    assert resolve_scroll_delta(window, 7, 0) == 7
    assert resolve_scroll_delta(window, 7, 0.4) == 7
    assert resolve_scroll_delta(window, 7, -0.5) == 7


def test_without_folds_moves_line_by_line() -> None:
    window = make_window()
    assert resolve_scroll_delta(window, 1, 5) == 6
    assert resolve_scroll_delta(window, 10, -3) == 7


def test_fractional_delta_rounds_half_up() -> None:
    window = make_window()
    assert resolve_scroll_delta(window, 1, 2.5) == 4
    assert resolve_scroll_delta(window, 10, -2.5) == 8
    assert resolve_scroll_delta(window, 10, -2.6) == 7


def test_closed_fold_is_crossed_in_one_hop() -> None:
    window = make_window(folds=((5, 9),))
    assert resolve_scroll_delta(window, 1, 4) == 5
    assert resolve_scroll_delta(window, 1, 5) == 10
    assert resolve_scroll_delta(window, 1, 7) == 12
    assert resolve_scroll_delta(window, 1, 15) == 20
    assert resolve_scroll_delta(window, 20, -15) == 1


def test_start_inside_fold_uses_fold_edges() -> None:
    window = make_window(folds=((5, 9),))
    assert resolve_scroll_delta(window, 7, 1) == 10
    assert resolve_scroll_delta(window, 7, -1) == 4


def test_result_is_clamped_to_buffer() -> None:
    window = make_window(folds=((5, 9),))
    assert resolve_scroll_delta(window, 1, 16) == 20
    assert resolve_scroll_delta(window, 1, 1000) == 20
    assert resolve_scroll_delta(window, 1, 10**9) == 20
    assert resolve_scroll_delta(window, 20, -1000) == 1
    assert resolve_scroll_delta(window, 1, -3) == 1


def test_result_never_leaves_buffer() -> None:
    window = make_window(folds=((3, 4), (8, 12)))
    for line in range(1, 21):
        for delta in (-50, -21, -7, -1.5, 1.5, 7, 21, 50):
            assert 1 <= resolve_scroll_delta(window, line, delta) <= 20


def test_round_trip_reaches_destination() -> None:
    window = make_window(folds=((5, 9),))
    for start in range(1, 21):
        for end in range(1, 21):
            if 6 <= end <= 9 or (end == 5 and end < start):
                continue  # destinations hidden inside the fold
            delta = scroll_delta(window, start, end)
            assert resolve_scroll_delta(window, start, delta) == end, (start, end)


def test_round_trip_with_several_folds() -> None:
    window = make_window(15, folds=((3, 4), (8, 12)))
    assert resolve_scroll_delta(window, 1, scroll_delta(window, 1, 15)) == 15
    assert resolve_scroll_delta(window, 15, scroll_delta(window, 15, 1)) == 1
    assert resolve_scroll_delta(window, 2, scroll_delta(window, 2, 13)) == 13


def test_interpolated_frames_never_land_inside_a_fold() -> None:
    window = make_window(folds=((5, 9),))
    total = scroll_delta(window, 1, 20)
    frames = [resolve_scroll_delta(window, 1, total * step / 10) for step in range(11)]
    assert frames[0] == 1
    assert frames[-1] == 20
    assert frames == sorted(frames)
    assert not any(6 <= line <= 9 for line in frames)


def test_backward_frames_show_the_fold_as_one_row() -> None:
    window = make_window(folds=((5, 9),))
    total = scroll_delta(window, 20, 1)
    frames = [resolve_scroll_delta(window, 20, total * step / 15) for step in range(16)]
    assert resolve_scroll_delta(window, 20, -11) == 9
    assert frames[0] == 20
    assert frames[-1] == 1
    assert frames == sorted(frames, reverse=True)

    shown = [window.fold_closed_start(line) or line for line in frames]
    assert 9 in frames
    assert not any(6 <= line <= 9 for line in shown)
    assert 5 in shown
