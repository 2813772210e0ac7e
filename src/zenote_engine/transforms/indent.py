"""Indent and outdent transforms."""

from __future__ import annotations

from .core import TransformResult, insert_line_prefix

INDENT_MARKER = "  "
# What ``indent`` actually leaves at the start of the new line.
INDENT_UNIT = INDENT_MARKER + " "


def indent(text: str, start: int, end: int) -> TransformResult:
    return insert_line_prefix(text, start, end, INDENT_MARKER)


def _outdent_width(line: str) -> int:
    if line.startswith(INDENT_UNIT):
        return len(INDENT_UNIT)
    if line.startswith("\t"):
        return 1
    return len(line) - len(line.lstrip(" "))


def outdent(text: str, start: int, end: int) -> TransformResult:
    """Remove one indent unit from every line the selection touches.

    A selection ending right after a newline does not touch the following
    line. Offsets inside removed whitespace snap to the line start.
    """

    first = text.rfind("\n", 0, start) + 1
    anchor = end - 1 if end > start and text[end - 1] == "\n" else end
    block_end = text.find("\n", anchor)
    if block_end == -1:
        block_end = len(text)

    cuts: list[tuple[int, int]] = []
    lines: list[str] = []
    offset = first
    for line in text[first:block_end].split("\n"):
        width = _outdent_width(line)
        cuts.append((offset, width))
        lines.append(line[width:])
        offset += len(line) + 1

    def shift(position: int) -> int:
        removed = 0
        for line_start, width in cuts:
            if position < line_start:
                break
            removed += min(width, position - line_start)
        return position - removed

    new_start, new_end = shift(start), shift(end)
    return TransformResult(
        new_text=text[:first] + "\n".join(lines) + text[block_end:],
        cursor_start=new_start,
        cursor_length=new_end - new_start,
    )


__all__ = ["INDENT_MARKER", "INDENT_UNIT", "indent", "outdent"]
