"""Read-only line storage backing the in-memory window."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List

from .state import Line


@dataclass(slots=True)
class WindowDocument:
    """List-of-lines text model addressed with 1-based line numbers.

    A document always holds at least one (possibly empty) line, matching
    how editors report an empty buffer as one line long.
    """

    _lines: List[str] = field(default_factory=lambda: [""])

    @classmethod
    def from_text(cls, text: str) -> "WindowDocument":
        lines = text.splitlines()
        if not lines:
            lines = [""]
        elif text.endswith("\n"):
            lines.append("")
        return cls(_lines=lines)

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "WindowDocument":
        return cls(_lines=list(lines) or [""])

    @property
    def line_count(self) -> int:
        return len(self._lines)

    def get_line(self, line: Line) -> str:
        if line < 1 or line > len(self._lines):
            raise IndexError(f"line {line} outside 1..{len(self._lines)}")
        return self._lines[line - 1]
