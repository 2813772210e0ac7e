"""Per-note editing session wiring the engine, history, and search."""

from .external import append_section, prepend_section
from .session import EditorSession, NoteRecord, NoteStorage

__all__ = [
    "EditorSession",
    "NoteRecord",
    "NoteStorage",
    "prepend_section",
    "append_section",
]
