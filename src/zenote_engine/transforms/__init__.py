"""Pure text transforms mapping (text, selection) to a new text and cursor."""

from .core import TransformResult, insert_line_prefix, wrap_selection
from .indent import INDENT_MARKER, INDENT_UNIT, indent, outdent
from .inserts import (
    DEFAULT_TIMESTAMP_FORMAT,
    insert_link,
    insert_math_block,
    insert_tag,
    insert_timestamp,
)

__all__ = [
    "TransformResult",
    "wrap_selection",
    "insert_line_prefix",
    "insert_math_block",
    "insert_timestamp",
    "insert_link",
    "insert_tag",
    "indent",
    "outdent",
    "INDENT_MARKER",
    "INDENT_UNIT",
    "DEFAULT_TIMESTAMP_FORMAT",
]
