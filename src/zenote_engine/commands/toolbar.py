"""Which commands the toolbar shows, and in what order."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from zenote_engine.runtime import telemetry

from .models import Command, UnknownCommandError, parse_command

DEFAULT_TOOLBAR: tuple[Command, ...] = (
    Command.UNDO,
    Command.REDO,
    Command.FONT_SIZE,
    Command.HEADING_2,
    Command.BOLD,
    Command.ITALIC,
    Command.INLINE_CODE,
    Command.MATH_BLOCK,
    Command.ORDERED_LIST,
    Command.BULLET_LIST,
    Command.TASK_ITEM,
    Command.OUTDENT,
    Command.INDENT,
    Command.TIMESTAMP,
    Command.LINK,
    Command.TAG,
    Command.SEARCH_TOGGLE,
    Command.DELETE_NOTE,
)


@dataclass(frozen=True, slots=True)
class ToolbarConfig:
    """Presentation-only visibility list; it never gates dispatch."""

    visible: tuple[Command, ...] = DEFAULT_TOOLBAR

    def __post_init__(self) -> None:
        object.__setattr__(self, "visible", tuple(dict.fromkeys(self.visible)))

    def is_visible(self, command: Command) -> bool:
        return command in self.visible

    def hidden(self) -> tuple[Command, ...]:
        return tuple(command for command in Command if command not in self.visible)

    def toggle(self, command: Command) -> "ToolbarConfig":
        if command in self.visible:
            return ToolbarConfig(tuple(c for c in self.visible if c is not command))
        return ToolbarConfig(self.visible + (command,))

    def move(self, command: Command, index: int) -> "ToolbarConfig":
        if command not in self.visible:
            raise ValueError(f"'{command.value}' is not on the toolbar")
        remaining = [c for c in self.visible if c is not command]
        index = max(0, min(index, len(remaining)))
        remaining.insert(index, command)
        return ToolbarConfig(tuple(remaining))

    def to_list(self) -> list[str]:
        return [command.value for command in self.visible]

    @classmethod
    def from_list(cls, identifiers: Iterable[str]) -> "ToolbarConfig":
        commands: list[Command] = []
        dropped: list[str] = []
        for identifier in identifiers:
            try:
                commands.append(parse_command(identifier))
            except UnknownCommandError:
                dropped.append(str(identifier))
        if dropped:
            telemetry.record_event(
                "toolbar.unknown_ids",
                level="warning",
                data={"dropped": dropped},
            )
        return cls(tuple(commands))


__all__ = ["DEFAULT_TOOLBAR", "ToolbarConfig"]
