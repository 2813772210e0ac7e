"""Single-purpose insertions: math blocks, timestamps, links, and tags.

Each of these replaces the current selection (a collapsed cursor replaces
nothing).
"""

from __future__ import annotations

from datetime import datetime

from .core import TransformResult

DEFAULT_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
MATH_BLOCK = "$$\n\n$$"
LINK_PLACEHOLDER = "text"
LINK_TARGET = "url"


def insert_math_block(text: str, start: int, end: int) -> TransformResult:
    # Cursor lands on the empty line between the fences.
    return TransformResult(
        new_text=f"{text[:start]}{MATH_BLOCK}{text[end:]}",
        cursor_start=start + 3,
    )


def insert_timestamp(
    text: str,
    start: int,
    end: int,
    *,
    now: datetime,
    fmt: str = DEFAULT_TIMESTAMP_FORMAT,
) -> TransformResult:
    stamp = now.strftime(fmt)
    return TransformResult(
        new_text=f"{text[:start]}{stamp}{text[end:]}",
        cursor_start=start + len(stamp),
    )


def insert_link(text: str, start: int, end: int) -> TransformResult:
    label = text[start:end] or LINK_PLACEHOLDER
    return TransformResult(
        new_text=f"{text[:start]}[{label}]({LINK_TARGET}){text[end:]}",
        cursor_start=start + 1,
        cursor_length=len(label),
    )


def insert_tag(text: str, start: int, end: int) -> TransformResult:
    return TransformResult(
        new_text=f"{text[:start]}#{text[end:]}",
        cursor_start=start + 1,
    )


__all__ = [
    "DEFAULT_TIMESTAMP_FORMAT",
    "insert_math_block",
    "insert_timestamp",
    "insert_link",
    "insert_tag",
]
