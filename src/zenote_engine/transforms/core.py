"""Result type and the two canonical transform shapes."""

from __future__ import annotations

from dataclasses import dataclass

from zenote_engine.buffer.state import Selection


@dataclass(frozen=True, slots=True)
class TransformResult:
    """New buffer text plus where the cursor (and highlight) should land."""

    new_text: str
    cursor_start: int
    cursor_length: int = 0

    def __post_init__(self) -> None:
        if self.cursor_length < 0:
            raise ValueError("cursor_length must be >= 0")
        if not 0 <= self.cursor_start <= len(self.new_text):
            raise ValueError("cursor_start outside new_text")
        if self.cursor_start + self.cursor_length > len(self.new_text):
            raise ValueError("cursor range runs past new_text")

    @property
    def selection(self) -> Selection:
        return Selection(self.cursor_start, self.cursor_start + self.cursor_length)


def wrap_selection(text: str, start: int, end: int, marker: str) -> TransformResult:
    """Surround ``text[start:end]`` with ``marker`` and keep it selected."""

    selected = text[start:end]
    return TransformResult(
        new_text=f"{text[:start]}{marker}{selected}{marker}{text[end:]}",
        cursor_start=start + len(marker),
        cursor_length=len(selected),
    )


def insert_line_prefix(text: str, start: int, end: int, prefix: str) -> TransformResult:
    """Open a new ``<prefix> `` line right after the selection.

    Whatever followed the selection moves onto the new line, after the
    prefix. ``start`` is accepted for signature parity with the other shapes.
    """

    del start
    head = f"\n{prefix} "
    return TransformResult(
        new_text=f"{text[:end]}{head}{text[end:]}",
        cursor_start=end + len(head),
    )


__all__ = ["TransformResult", "wrap_selection", "insert_line_prefix"]
