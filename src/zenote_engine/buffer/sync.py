"""Adapter boundary types for syncing the editing core with host widgets."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .state import Selection


@dataclass(slots=True)
class BufferMirror:
    """Host-friendly snapshot describing the current note buffer."""

    text: str
    selection: Selection
    title: str
    attributes: dict[str, str] = field(default_factory=dict)


class BufferValidationError(RuntimeError):
    """Raised when callers provide a selection outside the buffer bounds."""

    def __init__(self, message: str, *, selection: Optional[Selection] = None) -> None:
        super().__init__(message)
        self.selection = selection
