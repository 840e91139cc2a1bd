"""Fold-aware vertical scroll arithmetic for editor viewports."""

__all__ = [
    "adapters",
    "numeric",
    "runtime",
    "scroll",
    "window",
]

__version__ = "0.1.0"
