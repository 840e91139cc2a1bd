"""Protocols a host window must satisfy to be driven by the scroll core."""

from __future__ import annotations

from typing import Optional, Protocol

from .state import FoldInfo, Line, WinView


class FoldQuery(Protocol):
    """Closed-fold lookups for one window.

    The three questions are deliberately separate. ``fold_info`` answers
    "which closed fold covers this line and how long is it" and is what the
    delta calculator walks with. ``fold_closed_start`` / ``fold_closed_end``
    answer "where does the closed fold around this line begin/end" and are
    what the resolver walks with. Collapsing them changes hop semantics at
    fold boundaries.
    """

    def fold_info(self, line: Line) -> FoldInfo:
        """Return the closed fold covering ``line`` or ``FoldInfo()``."""
        ...

    def fold_closed_start(self, line: Line) -> Optional[Line]:
        """First line of the closed fold containing ``line``, else ``None``."""
        ...

    def fold_closed_end(self, line: Line) -> Optional[Line]:
        """Last line of the closed fold containing ``line``, else ``None``."""
        ...


class ViewAccessor(Protocol):
    """Window geometry, options and view state owned by the host."""

    def get_view(self) -> WinView:
        ...

    def set_view(self, view: WinView) -> None:
        """Restore ``view`` wholesale. May raise ``WindowValidationError``."""
        ...

    def window_height(self) -> int:
        """Total rows of the window, decorations included."""
        ...

    def winbar(self) -> str:
        """Title bar contents; empty when the window has none."""
        ...

    def line_count(self) -> int:
        ...

    def line_text(self, line: Line) -> str:
        """Text of buffer line ``line``."""
        ...

    def scrolloff(self) -> int:
        ...

    def set_cursor(self, line: Line, col: int) -> None:
        """Move the cursor. May raise ``WindowValidationError``."""
        ...


class HostWindow(FoldQuery, ViewAccessor, Protocol):
    """A single window handle; operations never reach other windows."""


class WindowValidationError(RuntimeError):
    """Raised by hosts that refuse a cursor or view position."""

    def __init__(
        self,
        message: str,
        *,
        line: Line | None = None,
        col: int | None = None,
    ) -> None:
        super().__init__(message)
        self.line = line
        self.col = col
