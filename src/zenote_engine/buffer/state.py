"""Selection state tied to a single buffer version."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Selection:
    """Half-open ``[start, end)`` range of string offsets into a buffer.

    A collapsed selection (``start == end``) is a plain cursor. Offsets are
    Python string indices; bounds against a concrete buffer are checked by
    :func:`zenote_engine.buffer.validation.ensure_selection`.
    """

    start: int
    end: int

    @classmethod
    def cursor(cls, offset: int) -> "Selection":
        return cls(offset, offset)

    @property
    def collapsed(self) -> bool:
        return self.start == self.end

    @property
    def length(self) -> int:
        return self.end - self.start

    def extract(self, text: str) -> str:
        return text[self.start : self.end]
