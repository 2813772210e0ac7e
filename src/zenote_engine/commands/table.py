"""Exhaustive mapping from text-producing commands to transforms."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import assert_never

from zenote_engine.transforms import (
    DEFAULT_TIMESTAMP_FORMAT,
    TransformResult,
    indent,
    insert_line_prefix,
    insert_link,
    insert_math_block,
    insert_tag,
    insert_timestamp,
    outdent,
    wrap_selection,
)

from .models import Command


@dataclass(frozen=True, slots=True)
class TransformContext:
    """Environment values the otherwise pure transforms may need."""

    now: datetime
    timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT


def apply_transform(
    command: Command,
    text: str,
    start: int,
    end: int,
    *,
    context: TransformContext,
) -> TransformResult:
    match command:
        case Command.BOLD:
            return wrap_selection(text, start, end, "**")
        case Command.ITALIC:
            return wrap_selection(text, start, end, "_")
        case Command.INLINE_CODE:
            return wrap_selection(text, start, end, "`")
        case Command.HEADING_1:
            return insert_line_prefix(text, start, end, "#")
        case Command.HEADING_2:
            return insert_line_prefix(text, start, end, "##")
        case Command.HEADING_3:
            return insert_line_prefix(text, start, end, "###")
        case Command.BULLET_LIST:
            return insert_line_prefix(text, start, end, "-")
        case Command.ORDERED_LIST:
            return insert_line_prefix(text, start, end, "1.")
        case Command.TASK_ITEM:
            return insert_line_prefix(text, start, end, "- [ ]")
        case Command.BLOCKQUOTE:
            return insert_line_prefix(text, start, end, ">")
        case Command.INDENT:
            return indent(text, start, end)
        case Command.OUTDENT:
            return outdent(text, start, end)
        case Command.MATH_BLOCK:
            return insert_math_block(text, start, end)
        case Command.TIMESTAMP:
            return insert_timestamp(
                text, start, end, now=context.now, fmt=context.timestamp_format
            )
        case Command.LINK:
            return insert_link(text, start, end)
        case Command.TAG:
            return insert_tag(text, start, end)
        case (
            Command.UNDO
            | Command.REDO
            | Command.FONT_SIZE
            | Command.SEARCH_TOGGLE
            | Command.HIDE_KEYBOARD
            | Command.DELETE_NOTE
        ):
            raise ValueError(f"'{command.value}' is a control command, not a transform")
        case _:
            assert_never(command)


__all__ = ["TransformContext", "apply_transform"]
