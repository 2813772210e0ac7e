"""Command dispatch: transforms, history snapshots, and control effects."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Callable, Optional

from zenote_engine.buffer import HistoryStack, Selection, ensure_selection
from zenote_engine.runtime import telemetry
from zenote_engine.transforms import DEFAULT_TIMESTAMP_FORMAT

from .events import EventBus
from .models import Command, parse_command
from .table import TransformContext, apply_transform
from .title import DEFAULT_TITLE_MAX_LENGTH, DEFAULT_TITLE_PLACEHOLDER, derive_title


class ControlEffect(str, Enum):
    """Bus events emitted for control commands that leave the text alone."""

    SEARCH_TOGGLE = "search.toggle"
    FONT_SIZE = "font_size.open"
    HIDE_KEYBOARD = "keyboard.hide"
    DELETE_NOTE = "note.delete_requested"


_EFFECTS = {
    Command.SEARCH_TOGGLE: ControlEffect.SEARCH_TOGGLE,
    Command.FONT_SIZE: ControlEffect.FONT_SIZE,
    Command.HIDE_KEYBOARD: ControlEffect.HIDE_KEYBOARD,
    Command.DELETE_NOTE: ControlEffect.DELETE_NOTE,
}


@dataclass(frozen=True, slots=True)
class DispatchResult:
    command: Command
    buffer: str
    selection: Selection
    history_changed: bool
    title: str
    effect: Optional[ControlEffect] = None


class CommandEngine:
    """Routes one command per user action.

    Text commands snapshot the incoming buffer, apply their transform, then
    snapshot the result. Undo/redo go to the history stack; the remaining
    control commands only emit a :class:`ControlEffect` on the bus.
    """

    def __init__(
        self,
        history: HistoryStack,
        *,
        bus: EventBus | None = None,
        clock: Callable[[], datetime] = datetime.now,
        timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT,
        title_placeholder: str = DEFAULT_TITLE_PLACEHOLDER,
        title_max_length: int = DEFAULT_TITLE_MAX_LENGTH,
        logger_name: str | None = None,
    ) -> None:
        self.history = history
        self.bus = bus or EventBus()
        self._clock = clock
        self._timestamp_format = timestamp_format
        self._title_placeholder = title_placeholder
        self._title_max_length = title_max_length
        self._logger_name = logger_name

    def title_for(self, buffer: str) -> str:
        return derive_title(
            buffer,
            placeholder=self._title_placeholder,
            max_length=self._title_max_length,
        )

    def dispatch(
        self, command: Command | str, buffer: str, selection: Selection
    ) -> DispatchResult:
        with telemetry.span(
            "commands::dispatch",
            logger_name=self._logger_name,
            component="commands",
            metadata={"command": command},
        ) as handle:
            resolved = parse_command(command)
            ensure_selection(buffer, selection)
            if resolved.is_control:
                result = self._dispatch_control(resolved, buffer, selection)
            else:
                result = self._dispatch_transform(resolved, buffer, selection)
            handle.add_metadata("history_changed", result.history_changed)
            handle.add_metadata("step", self.history.step)
            return result

    def _dispatch_transform(
        self, command: Command, buffer: str, selection: Selection
    ) -> DispatchResult:
        context = TransformContext(now=self._clock(), timestamp_format=self._timestamp_format)
        before = self.history.snapshot(buffer)
        outcome = apply_transform(
            command, buffer, selection.start, selection.end, context=context
        )
        after = self.history.snapshot(outcome.new_text)
        return DispatchResult(
            command=command,
            buffer=outcome.new_text,
            selection=outcome.selection,
            history_changed=before or after,
            title=self.title_for(outcome.new_text),
        )

    def _dispatch_control(
        self, command: Command, buffer: str, selection: Selection
    ) -> DispatchResult:
        match command:
            case Command.UNDO | Command.REDO:
                step = self.history.step
                if command is Command.UNDO:
                    restored = self.history.undo(buffer)
                else:
                    restored = self.history.redo(buffer)
                return DispatchResult(
                    command=command,
                    buffer=restored,
                    selection=Selection.cursor(min(selection.end, len(restored))),
                    history_changed=self.history.step != step,
                    title=self.title_for(restored),
                )
            case _:
                effect = _EFFECTS[command]
                self.bus.emit(effect.value, {"command": command, "selection": selection})
                return DispatchResult(
                    command=command,
                    buffer=buffer,
                    selection=selection,
                    history_changed=False,
                    title=self.title_for(buffer),
                    effect=effect,
                )


__all__ = ["CommandEngine", "ControlEffect", "DispatchResult"]
