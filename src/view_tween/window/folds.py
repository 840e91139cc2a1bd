"""Sorted table of closed folds with logarithmic lookups."""

from __future__ import annotations

from bisect import bisect_right
from typing import Iterable, List, Optional, Tuple

from .state import NO_FOLD, FoldInfo, Line

FoldRange = Tuple[Line, Line]  # inclusive (start, end)


def _normalize(ranges: Iterable[FoldRange]) -> List[FoldRange]:
    ordered = sorted(ranges, key=lambda item: (item[0], -item[1]))
    merged: List[FoldRange] = []
    for start, end in ordered:
        if start < 1 or end < start:
            raise ValueError(f"Invalid fold range {start}..{end}")
        if merged:
            prev_start, prev_end = merged[-1]
            if end <= prev_end:
                # nested inside an already closed fold
                continue
            if start <= prev_end:
                raise ValueError(
                    f"Fold {start}..{end} partially overlaps {prev_start}..{prev_end}"
                )
        merged.append((start, end))
    return merged


class ClosedFoldIndex:
    """Closed folds of one window, answering the ``FoldQuery`` questions.

    Only the outermost closed ranges matter for display, so nested ranges are
    dropped at construction. The index is immutable.
    """

    def __init__(self, ranges: Iterable[FoldRange] = ()) -> None:
        normalized = _normalize(ranges)
        self._starts: List[Line] = [start for start, _ in normalized]
        self._ends: List[Line] = [end for _, end in normalized]

    def __len__(self) -> int:
        return len(self._starts)

    @property
    def last_line(self) -> Line:
        return self._ends[-1] if self._ends else 0

    def find(self, line: Line) -> Optional[FoldRange]:
        index = bisect_right(self._starts, line) - 1
        if index >= 0 and line <= self._ends[index]:
            return self._starts[index], self._ends[index]
        return None

    def fold_info(self, line: Line) -> FoldInfo:
        found = self.find(line)
        if found is None:
            return NO_FOLD
        start, end = found
        return FoldInfo(start=start, lines=end - start + 1)

    def fold_closed_start(self, line: Line) -> Optional[Line]:
        found = self.find(line)
        return found[0] if found else None

    def fold_closed_end(self, line: Line) -> Optional[Line]:
        found = self.find(line)
        return found[1] if found else None
