"""Editing session for one open note at a time."""

from __future__ import annotations

import time
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, List, Optional, Protocol

from zenote_engine.buffer import (
    BufferMirror,
    HistoryStack,
    Selection,
    SnapshotDebouncer,
    ensure_selection,
)
from zenote_engine.commands import (
    Command,
    CommandEngine,
    ControlEffect,
    DispatchResult,
    EventBus,
    ToolbarConfig,
    parse_command,
)
from zenote_engine.config import EditorConfig, FontSizeSettings
from zenote_engine.pagination import PageLayout, paginate
from zenote_engine.runtime import telemetry
from zenote_engine.search import Match, SearchIndex


@dataclass(frozen=True, slots=True)
class NoteRecord:
    """What the storage collaborator receives after each committed change."""

    note_id: str
    content: str
    title: str
    updated_at: datetime


class NoteStorage(Protocol):
    def save_note(self, record: NoteRecord) -> None:
        """Persist ``record``; the session never writes anywhere itself."""
        ...


class EditorSession:
    """Owns history, search, and debounce state for the open note.

    Switching notes resets history to the freshly loaded content and cancels
    any pending typing snapshot.
    """

    def __init__(
        self,
        *,
        config: EditorConfig | None = None,
        storage: NoteStorage | None = None,
        bus: EventBus | None = None,
        clock: Callable[[], datetime] = datetime.now,
        monotonic: Callable[[], float] = time.monotonic,
        logger_name: str | None = None,
    ) -> None:
        self.config = config or EditorConfig()
        self.storage = storage
        self.bus = bus or EventBus()
        self.history = HistoryStack()
        self.engine = CommandEngine(
            self.history,
            bus=self.bus,
            clock=clock,
            timestamp_format=self.config.timestamp_format,
            title_placeholder=self.config.title_placeholder,
            title_max_length=self.config.title_max_length,
            logger_name=logger_name,
        )
        self.debouncer = SnapshotDebouncer(
            self.history,
            delay_ms=self.config.history_debounce_ms,
            clock=monotonic,
        )
        self.search = SearchIndex()
        self.search_active = False
        self.font_size: FontSizeSettings = self.config.font_size
        self.toolbar: ToolbarConfig = self.config.toolbar
        self._clock = clock
        self._logger_name = logger_name
        self._note_id: Optional[str] = None
        self._buffer = ""
        self._selection = Selection.cursor(0)
        self._title = self.config.title_placeholder
        self.bus.subscribe(ControlEffect.SEARCH_TOGGLE.value, self._on_search_toggle)

    @property
    def note_id(self) -> Optional[str]:
        return self._note_id

    @property
    def buffer(self) -> str:
        return self._buffer

    @property
    def selection(self) -> Selection:
        return self._selection

    @property
    def title(self) -> str:
        return self._title

    def mirror(self) -> BufferMirror:
        return BufferMirror(
            text=self._buffer,
            selection=self._selection,
            title=self._title,
            attributes={
                "note_id": self._note_id or "",
                "font_size": str(self.font_size.size),
                "history_step": str(self.history.step),
            },
        )

    # ------------------------------------------------------------------ notes

    def open_note(self, note_id: str, content: str) -> None:
        self.debouncer.cancel()
        self.history.reset(content)
        self._note_id = note_id
        self._buffer = content
        self._selection = Selection.cursor(0)
        self._title = self.engine.title_for(content)
        self._refresh_search()
        telemetry.record_event(
            "note.open",
            data={"note_id": note_id, "length": len(content)},
            logger_name=self._logger_name,
        )

    def close(self) -> None:
        self.debouncer.cancel()
        if self._note_id is not None:
            telemetry.record_event(
                "note.close",
                data={"note_id": self._note_id, "history": len(self.history)},
                logger_name=self._logger_name,
            )
        self._note_id = None
        self._buffer = ""
        self._selection = Selection.cursor(0)
        self._title = self.config.title_placeholder
        self.history.reset("")
        self.search.clear()
        self.search_active = False

    def _require_note(self) -> str:
        if self._note_id is None:
            raise RuntimeError("No note is open in this session")
        return self._note_id

    # ---------------------------------------------------------------- editing

    def set_selection(self, selection: Selection) -> None:
        self._require_note()
        self._selection = ensure_selection(self._buffer, selection)

    def type_text(self, text: str, selection: Selection | None = None) -> None:
        """Accept free-form typing; history catches up after the idle window."""

        self._require_note()
        target = selection or Selection.cursor(len(text))
        ensure_selection(text, target)
        self._commit_content(text)
        self._selection = target
        self.debouncer.schedule(text)

    def dispatch(
        self, command: Command | str, selection: Selection | None = None
    ) -> DispatchResult:
        self._require_note()
        resolved = parse_command(command)
        if not resolved.is_control or resolved in (Command.UNDO, Command.REDO):
            # Discrete edits snapshot immediately; a late typing commit would
            # resurrect text the command already superseded.
            self.debouncer.cancel()
        result = self.engine.dispatch(resolved, self._buffer, selection or self._selection)
        if result.buffer != self._buffer:
            self._commit_content(result.buffer)
        self._selection = result.selection
        return result

    def apply_external_edit(self, text: str) -> None:
        """Adopt a programmatic replacement (e.g. AI output) as one undo step."""

        self._require_note()
        self.debouncer.cancel()
        self.history.snapshot(self._buffer)
        self.history.snapshot(text)
        self._commit_content(text)
        self._selection = Selection.cursor(min(self._selection.end, len(text)))

    def process_timeouts(self) -> bool:
        return self.debouncer.process()

    def can_undo(self) -> bool:
        return self.history.can_undo(self._buffer)

    def can_redo(self) -> bool:
        return self.history.can_redo()

    def _commit_content(self, text: str) -> None:
        note_id = self._require_note()
        self._buffer = text
        self._title = self.engine.title_for(text)
        self._refresh_search()
        if self.storage is not None:
            self.storage.save_note(
                NoteRecord(
                    note_id=note_id,
                    content=text,
                    title=self._title,
                    updated_at=self._clock(),
                )
            )

    # ----------------------------------------------------------------- search

    def set_search_active(self, active: bool) -> None:
        self.search_active = active
        if active:
            self._refresh_search()
        else:
            self.search.clear()

    def find(self, query: str) -> List[Match]:
        self._require_note()
        matches = self.search.find(query, self._buffer)
        self._select_match(self.search.current)
        return matches

    def next_match(self) -> Optional[Match]:
        return self._select_match(self.search.next())

    def previous_match(self) -> Optional[Match]:
        return self._select_match(self.search.previous())

    def _select_match(self, match: Optional[Match]) -> Optional[Match]:
        if match is not None:
            self._selection = Selection(match.start, match.end)
        return match

    def _refresh_search(self) -> None:
        if self.search_active and self.search.query:
            self.search.refresh(self._buffer)
        else:
            self.search.invalidate()

    def _on_search_toggle(self, payload: object | None) -> None:
        del payload
        self.set_search_active(not self.search_active)

    # ---------------------------------------------------------- presentation

    def increase_font_size(self) -> int:
        return self._set_font_size(self.font_size.increased())

    def decrease_font_size(self) -> int:
        return self._set_font_size(self.font_size.decreased())

    def _set_font_size(self, settings: FontSizeSettings) -> int:
        self.font_size = settings
        self.bus.emit("font_size.changed", settings.size)
        return settings.size

    def update_toolbar(self, toolbar: ToolbarConfig) -> None:
        self.toolbar = toolbar
        self.bus.emit("toolbar.changed", toolbar.to_list())

    def export_pages(
        self,
        layout: PageLayout = PageLayout.FULL,
        capacity: float | None = None,
    ) -> List[str]:
        return paginate(self._buffer, capacity, layout)


__all__ = ["EditorSession", "NoteRecord", "NoteStorage"]
