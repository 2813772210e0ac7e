"""Selection state, history, and host-sync types for note buffers."""

from .debounce import SnapshotDebouncer
from .state import Selection
from .sync import BufferMirror, BufferValidationError
from .undo import HistoryStack
from .validation import ensure_selection

__all__ = [
    "Selection",
    "HistoryStack",
    "SnapshotDebouncer",
    "BufferMirror",
    "BufferValidationError",
    "ensure_selection",
]
