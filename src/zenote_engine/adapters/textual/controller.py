"""Adapter that wires EditorSession results and bus events into UI callbacks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional

from zenote_engine.buffer import BufferMirror, Selection
from zenote_engine.commands import Command, ControlEffect, DispatchResult
from zenote_engine.session import EditorSession


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks invoked by the adapter to update Textual widgets."""

    update_buffer: Callable[[BufferMirror], None]
    update_status: Callable[[str], None] = _noop
    handle_event: Callable[[str, object | None], None] = _noop
    log: Callable[[str], None] = _noop


_FORWARDED_EVENTS = (
    ControlEffect.SEARCH_TOGGLE.value,
    ControlEffect.FONT_SIZE.value,
    ControlEffect.HIDE_KEYBOARD.value,
    ControlEffect.DELETE_NOTE.value,
    "font_size.changed",
    "toolbar.changed",
)


class TextualNoteAdapter:
    """Bridges an EditorSession + its bus to a Textual-friendly surface."""

    def __init__(self, session: EditorSession, hooks: TextualUIHooks) -> None:
        self.session = session
        self.hooks = hooks
        self._subscribe_events()
        self._refresh_buffer()

    def run_command(self, command: Command | str) -> DispatchResult:
        self._log_state("command ->", command=str(command))
        result = self.session.dispatch(command)
        self.hooks.update_status(self._status_for(result))
        self._refresh_buffer()
        self._log_state(
            "result <-",
            history_changed=result.history_changed,
            effect=result.effect.value if result.effect else None,
        )
        return result

    def text_changed(self, text: str, selection: Optional[Selection] = None) -> None:
        """Forward a host-side keystroke edit (plain typing)."""

        self.session.type_text(text, selection)
        self.hooks.update_status(self.session.title)

    def selection_changed(self, selection: Selection) -> None:
        self.session.set_selection(selection)

    def process_timeouts(self) -> bool:
        committed = self.session.process_timeouts()
        if committed:
            self._log_state("snapshot ->")
            self.hooks.update_status(f"saved step {self.session.history.step}")
        return committed

    def _status_for(self, result: DispatchResult) -> str:
        if result.effect is not None:
            return result.effect.value
        return f"{result.command.description}: {result.title}"

    def _subscribe_events(self) -> None:
        bus = self.session.bus
        for event in _FORWARDED_EVENTS:
            bus.subscribe(
                event, lambda payload, name=event: self._handle_event(name, payload)
            )

    def _handle_event(self, name: str, payload: object | None) -> None:
        self._log_state("event ->", event=name)
        if name == ControlEffect.DELETE_NOTE.value:
            payload = {"note_id": self.session.note_id}
        self.hooks.handle_event(name, payload)

    def _refresh_buffer(self) -> None:
        self.hooks.update_buffer(self.session.mirror())

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot = self._state_metadata()
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix]
        for key, value in snapshot.items():
            parts.append(f"{key}={value!r}")
        self.hooks.log(" ".join(parts))

    def _state_metadata(self) -> Dict[str, object]:
        session = self.session
        return {
            "note": session.note_id,
            "selection": (session.selection.start, session.selection.end),
            "step": session.history.step,
            "history": len(session.history),
            "search": session.search_active,
            "pending_snapshot": session.debouncer.pending,
        }


__all__ = ["TextualNoteAdapter", "TextualUIHooks"]
