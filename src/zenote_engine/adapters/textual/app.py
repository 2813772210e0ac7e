"""Executable Textual app that hosts the note editing core."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional, Sequence

try:  # pragma: no cover - imported only when demo is run
    from textual.app import App, ComposeResult
    from textual.widgets import Footer, Header, Static, TextArea
    from textual.widgets.text_area import Selection as AreaSelection
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use zenote_engine.adapters.textual.app"
    ) from exc

from zenote_engine.buffer import BufferMirror, Selection
from zenote_engine.config import EditorConfig
from zenote_engine.runtime import telemetry
from zenote_engine.session import EditorSession, NoteRecord

from .controller import TextualNoteAdapter, TextualUIHooks


class FileNoteStorage:
    """Writes every committed change straight back to the opened file."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def save_note(self, record: NoteRecord) -> None:
        self.path.write_text(record.content, encoding="utf-8")


@dataclass
class UIState:
    title: str = ""
    status_text: str = ""


class NoteEditorApp(App[None]):
    """Minimal Textual UI embedding the note editor."""

    CSS = """
    #note-area {
        height: 1fr;
        border: tall $primary;
    }

    #status-line {
        height: 1;
        color: $text-muted;
        padding: 0 2;
    }
    """

    BINDINGS = [
        ("ctrl+b", "command('bold')", "Bold"),
        ("ctrl+t", "command('italic')", "Italic"),
        ("ctrl+k", "command('link')", "Link"),
        ("ctrl+l", "command('bullet-list')", "List"),
        ("ctrl+z", "command('undo')", "Undo"),
        ("ctrl+y", "command('redo')", "Redo"),
        ("ctrl+d", "command('timestamp-insert')", "Time"),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, path: Path, *, config: EditorConfig | None = None) -> None:
        super().__init__()
        self._path = path
        self._state = UIState()
        self.session = EditorSession(
            config=config or EditorConfig.from_env(),
            storage=FileNoteStorage(path),
        )
        self.adapter: TextualNoteAdapter | None = None
        self._area: TextArea | None = None
        self._status_widget: Static | None = None
        self._syncing = False

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        self._area = TextArea("", id="note-area")
        yield self._area
        self._status_widget = Static("", id="status-line")
        yield self._status_widget
        yield Footer()

    async def on_mount(self) -> None:
        content = self._path.read_text(encoding="utf-8") if self._path.exists() else ""
        self.session.open_note(str(self._path), content)
        hooks = TextualUIHooks(
            update_buffer=self._update_buffer,
            update_status=self._update_status,
            handle_event=self._handle_event,
            log=self._log_line,
        )
        self.adapter = TextualNoteAdapter(self.session, hooks)
        self.set_interval(0.1, self._process_timeouts)

    def on_unmount(self) -> None:
        self.session.close()

    def _process_timeouts(self) -> None:
        if self.adapter:
            self.adapter.process_timeouts()

    def on_text_area_changed(self, event: TextArea.Changed) -> None:
        if self._syncing or not self.adapter:
            return
        area = event.text_area
        self.adapter.text_changed(area.text, self._selection_from_area(area))

    def on_text_area_selection_changed(self, event: TextArea.SelectionChanged) -> None:
        if self._syncing or not self.adapter:
            return
        selection = self._selection_from_area(event.text_area)
        if selection.end <= len(self.session.buffer):
            self.adapter.selection_changed(selection)

    def action_command(self, command: str) -> None:
        if self.adapter:
            self.adapter.run_command(command)

    def _update_buffer(self, mirror: BufferMirror) -> None:
        self._state.title = mirror.title
        self.title = mirror.title
        area = self._area
        if area is None:
            return
        self._syncing = True
        try:
            if area.text != mirror.text:
                area.load_text(mirror.text)
            document = area.document
            area.selection = AreaSelection(
                document.get_location_from_index(mirror.selection.start),
                document.get_location_from_index(mirror.selection.end),
            )
        finally:
            self._syncing = False

    def _update_status(self, status: str) -> None:
        self._state.status_text = status
        if self._status_widget:
            self._status_widget.update(status)

    def _handle_event(self, name: str, payload: Any | None) -> None:
        if name == "search.toggle":
            state = "on" if self.session.search_active else "off"
            self._update_status(f"search {state}")
        elif name == "note.delete_requested":
            self._update_status("delete requested (not handled by the demo)")
        elif name == "font_size.open":
            self._update_status(f"font size {self.session.font_size.size}")
        else:
            self._update_status(f"{name}: {payload}")

    def _log_line(self, line: str) -> None:
        telemetry.record_event("textual.log", level="debug", data={"line": line})

    @staticmethod
    def _selection_from_area(area: TextArea) -> Selection:
        document = area.document
        start = document.get_index_from_location(area.selection.start)
        end = document.get_index_from_location(area.selection.end)
        return Selection(min(start, end), max(start, end))


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Edit a markdown note in the terminal.")
    parser.add_argument("path", type=Path, help="Note file to open (created on save)")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    NoteEditorApp(args.path).run()


if __name__ == "__main__":  # pragma: no cover - manual demo
    main()
