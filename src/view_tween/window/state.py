"""Value objects describing fold info and window view snapshots."""

from __future__ import annotations

from dataclasses import dataclass, replace

Line = int  # 1-based buffer line


@dataclass(frozen=True, slots=True)
class FoldInfo:
    """Answer of a fold-start lookup.

    ``start`` is the first line of the closed fold covering the queried line
    and ``lines`` its span. Either field being ``0`` means no closed fold.
    """

    start: Line = 0
    lines: int = 0

    @property
    def closed(self) -> bool:
        return self.start != 0 and self.lines != 0

    @property
    def end(self) -> Line:
        """Last line of the fold, ``0`` when there is none."""

        if not self.closed:
            return 0
        return self.start + self.lines - 1


NO_FOLD = FoldInfo()


@dataclass(frozen=True, slots=True)
class WinView:
    """Snapshot of a window's visual position.

    Mirrors what a host saves/restores in one piece. ``col`` is 0-indexed,
    every line field is 1-based.
    """

    lnum: Line = 1
    col: int = 0
    coladd: int = 0
    curswant: int = 0
    leftcol: int = 0
    skipcol: int = 0
    topfill: int = 0
    topline: Line = 1

    def with_topline(self, topline: Line, *, topfill: int = 0) -> "WinView":
        return replace(self, topline=topline, topfill=topfill)

    def with_cursor(self, lnum: Line, col: int | None = None) -> "WinView":
        return replace(self, lnum=lnum, col=self.col if col is None else col)
