"""Window model: view snapshots, fold queries and host protocols."""

from .document import WindowDocument
from .folds import ClosedFoldIndex, FoldRange
from .state import NO_FOLD, FoldInfo, Line, WinView
from .sync import FoldQuery, HostWindow, ViewAccessor, WindowValidationError
from .window import MemoryWindow, WindowOptions

__all__ = [
    "ClosedFoldIndex",
    "FoldInfo",
    "FoldQuery",
    "FoldRange",
    "HostWindow",
    "Line",
    "MemoryWindow",
    "NO_FOLD",
    "ViewAccessor",
    "WinView",
    "WindowDocument",
    "WindowOptions",
    "WindowValidationError",
]
