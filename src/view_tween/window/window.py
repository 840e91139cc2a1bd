"""In-process window implementing the host protocols."""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass, replace
from typing import Iterable, Iterator, Optional

from view_tween.runtime import telemetry

from .document import WindowDocument
from .folds import ClosedFoldIndex, FoldRange
from .state import FoldInfo, Line, WinView
from .sync import WindowValidationError


@dataclass(frozen=True, slots=True)
class WindowOptions:
    height: int = 24
    scrolloff: int = 0
    winbar: str = ""


class MemoryWindow:
    """A window over a ``WindowDocument`` with a fixed set of closed folds.

    Writes made inside ``updating()`` are rejected with
    ``WindowValidationError``, the way a real host refuses cursor moves while
    it is mid-redraw.
    """

    def __init__(
        self,
        *,
        window_id: int = 1000,
        document: Optional[WindowDocument] = None,
        folds: ClosedFoldIndex | Iterable[FoldRange] = (),
        options: Optional[WindowOptions] = None,
        view: Optional[WinView] = None,
    ) -> None:
        self.window_id = window_id
        self.document = document or WindowDocument()
        if not isinstance(folds, ClosedFoldIndex):
            folds = ClosedFoldIndex(folds)
        self.folds = folds
        self.options = options or WindowOptions()
        if self.options.height < 1:
            raise ValueError("window height must be positive")
        if self.folds.last_line > self.document.line_count:
            raise ValueError(
                f"fold ends at line {self.folds.last_line} but buffer has "
                f"{self.document.line_count} lines"
            )
        self._view = view or WinView()
        self._locked = False

    @classmethod
    def from_text(
        cls,
        text: str,
        *,
        folds: Iterable[FoldRange] = (),
        options: Optional[WindowOptions] = None,
        window_id: int = 1000,
    ) -> "MemoryWindow":
        return cls(
            window_id=window_id,
            document=WindowDocument.from_text(text),
            folds=folds,
            options=options,
        )

    @classmethod
    def numbered(
        cls,
        line_count: int,
        *,
        folds: Iterable[FoldRange] = (),
        options: Optional[WindowOptions] = None,
        window_id: int = 1000,
    ) -> "MemoryWindow":
        """Window over ``line_count`` lines reading ``line 1``, ``line 2``..."""

        lines = (f"line {number}" for number in range(1, line_count + 1))
        return cls(
            window_id=window_id,
            document=WindowDocument.from_lines(lines),
            folds=folds,
            options=options,
        )

    def __repr__(self) -> str:
        return (
            f"MemoryWindow(id={self.window_id}, lines={self.line_count()}, "
            f"folds={len(self.folds)})"
        )

    # FoldQuery

    def fold_info(self, line: Line) -> FoldInfo:
        return self.folds.fold_info(line)

    def fold_closed_start(self, line: Line) -> Optional[Line]:
        return self.folds.fold_closed_start(line)

    def fold_closed_end(self, line: Line) -> Optional[Line]:
        return self.folds.fold_closed_end(line)

    # ViewAccessor

    def get_view(self) -> WinView:
        return self._view

    def set_view(self, view: WinView) -> None:
        self._ensure_unlocked(view.lnum, view.col)
        count = self.line_count()
        if not 1 <= view.topline <= count:
            raise WindowValidationError(
                f"topline {view.topline} outside 1..{count}", line=view.topline
            )
        if not 1 <= view.lnum <= count:
            raise WindowValidationError(
                f"cursor line {view.lnum} outside 1..{count}",
                line=view.lnum,
                col=view.col,
            )
        self._view = view

    def window_height(self) -> int:
        return self.options.height

    def winbar(self) -> str:
        return self.options.winbar

    def line_count(self) -> int:
        return self.document.line_count

    def line_text(self, line: Line) -> str:
        return self.document.get_line(line)

    def scrolloff(self) -> int:
        return self.options.scrolloff

    def set_cursor(self, line: Line, col: int) -> None:
        """Place the cursor, clamping ``col`` to the line's last character.

        ``curswant`` keeps the requested column so later vertical moves can
        return to it on longer lines.
        """

        self._ensure_unlocked(line, col)
        count = self.line_count()
        if not 1 <= line <= count:
            raise WindowValidationError(
                f"cursor line {line} outside 1..{count}", line=line, col=col
            )
        if col < 0:
            raise WindowValidationError("negative cursor column", line=line, col=col)
        text = self.document.get_line(line)
        actual = min(col, max(0, len(text) - 1))
        self._view = replace(self._view, lnum=line, col=actual, coladd=0, curswant=col)

    @contextmanager
    def updating(self) -> Iterator["MemoryWindow"]:
        """Reject cursor and view writes for the duration of the block."""

        previous = self._locked
        self._locked = True
        try:
            yield self
        finally:
            self._locked = previous

    def _ensure_unlocked(self, line: Line, col: int) -> None:
        if self._locked:
            telemetry.trace(
                "view_tween.window", "write refused while updating window %s",
                self.window_id,
            )
            raise WindowValidationError(
                f"window {self.window_id} is updating", line=line, col=col
            )
