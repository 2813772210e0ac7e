"""The closed set of editor commands and their metadata."""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Mapping


class Command(str, Enum):
    UNDO = "undo"
    REDO = "redo"
    FONT_SIZE = "font-size"
    HEADING_1 = "heading-1"
    HEADING_2 = "heading-2"
    HEADING_3 = "heading-3"
    BOLD = "bold"
    ITALIC = "italic"
    INLINE_CODE = "inline-code"
    MATH_BLOCK = "math-block"
    BULLET_LIST = "bullet-list"
    ORDERED_LIST = "ordered-list"
    TASK_ITEM = "task-item"
    BLOCKQUOTE = "blockquote"
    OUTDENT = "outdent"
    INDENT = "indent"
    TIMESTAMP = "timestamp-insert"
    LINK = "link"
    TAG = "tag"
    SEARCH_TOGGLE = "search-toggle"
    HIDE_KEYBOARD = "hide-keyboard"
    DELETE_NOTE = "delete-note"

    @property
    def is_control(self) -> bool:
        return self in CONTROL_COMMANDS

    @property
    def description(self) -> str:
        return COMMAND_DESCRIPTIONS[self]


CONTROL_COMMANDS: frozenset[Command] = frozenset(
    {
        Command.UNDO,
        Command.REDO,
        Command.FONT_SIZE,
        Command.SEARCH_TOGGLE,
        Command.HIDE_KEYBOARD,
        Command.DELETE_NOTE,
    }
)

COMMAND_DESCRIPTIONS: Mapping[Command, str] = MappingProxyType(
    {
        Command.UNDO: "Undo",
        Command.REDO: "Redo",
        Command.FONT_SIZE: "Font size",
        Command.HEADING_1: "Heading 1",
        Command.HEADING_2: "Heading 2",
        Command.HEADING_3: "Heading 3",
        Command.BOLD: "Bold",
        Command.ITALIC: "Italic",
        Command.INLINE_CODE: "Inline code",
        Command.MATH_BLOCK: "Math block",
        Command.BULLET_LIST: "Bullet list",
        Command.ORDERED_LIST: "Ordered list",
        Command.TASK_ITEM: "Task item",
        Command.BLOCKQUOTE: "Quote",
        Command.OUTDENT: "Decrease indent",
        Command.INDENT: "Increase indent",
        Command.TIMESTAMP: "Insert time",
        Command.LINK: "Link",
        Command.TAG: "Tag",
        Command.SEARCH_TOGGLE: "Search",
        Command.HIDE_KEYBOARD: "Hide keyboard",
        Command.DELETE_NOTE: "Delete note",
    }
)

# Toolbar ids written by earlier releases of the note app.
LEGACY_ALIASES: Mapping[str, Command] = MappingProxyType(
    {
        "h1": Command.HEADING_1,
        "h2": Command.HEADING_2,
        "h3": Command.HEADING_3,
        "code": Command.INLINE_CODE,
        "math": Command.MATH_BLOCK,
        "list": Command.BULLET_LIST,
        "list-ordered": Command.ORDERED_LIST,
        "task": Command.TASK_ITEM,
        "quote": Command.BLOCKQUOTE,
        "date": Command.TIMESTAMP,
        "search": Command.SEARCH_TOGGLE,
        "delete": Command.DELETE_NOTE,
        "fontSize": Command.FONT_SIZE,
    }
)


class UnknownCommandError(ValueError):
    """Raised when a command identifier is outside the enumeration."""

    def __init__(self, identifier: object) -> None:
        super().__init__(f"Unknown command '{identifier}'")
        self.identifier = identifier


def parse_command(identifier: Command | str) -> Command:
    if isinstance(identifier, Command):
        return identifier
    if isinstance(identifier, str):
        alias = LEGACY_ALIASES.get(identifier)
        if alias is not None:
            return alias
        try:
            return Command(identifier)
        except ValueError:
            pass
    raise UnknownCommandError(identifier)


__all__ = [
    "Command",
    "CONTROL_COMMANDS",
    "COMMAND_DESCRIPTIONS",
    "LEGACY_ALIASES",
    "UnknownCommandError",
    "parse_command",
]
