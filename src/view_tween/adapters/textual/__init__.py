"""Textual integration for fold-aware scrolling."""

from .controller import TextualScrollHooks, TextualViewAdapter, ViewMirror, render_rows

__all__ = ["TextualScrollHooks", "TextualViewAdapter", "ViewMirror", "render_rows"]
