"""Textual host adapter; the demo app lives in ``.app``."""

from .controller import TextualNoteAdapter, TextualUIHooks

__all__ = ["TextualNoteAdapter", "TextualUIHooks"]
