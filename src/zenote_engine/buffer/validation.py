"""Validation helpers shared across buffer services."""

from __future__ import annotations

from .state import Selection
from .sync import BufferValidationError


def ensure_selection(text: str, selection: Selection) -> Selection:
    if selection.start < 0 or selection.end < 0:
        raise BufferValidationError("Selection offsets must be >= 0", selection=selection)
    if selection.start > selection.end:
        raise BufferValidationError("Selection start exceeds end", selection=selection)
    if selection.end > len(text):
        raise BufferValidationError("Selection end out of range", selection=selection)
    return selection
