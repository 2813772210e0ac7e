from __future__ import annotations

from typing import List

from zenote_engine.adapters.textual import TextualNoteAdapter, TextualUIHooks
from zenote_engine.buffer import Selection
from zenote_engine.session import EditorSession


class FakeMonotonic:
    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


def make_session(content: str = "") -> tuple[EditorSession, FakeMonotonic]:
    clock = FakeMonotonic()
    session = EditorSession(monotonic=clock)
    session.open_note("demo", content)
    return session, clock


def test_adapter_updates_buffer_and_status() -> None:
    session, _ = make_session("word")
    updates: List[str] = []
    statuses: List[str] = []
    hooks = TextualUIHooks(
        update_buffer=lambda mirror: updates.append(mirror.text),
        update_status=statuses.append,
    )
    adapter = TextualNoteAdapter(session, hooks)

    adapter.selection_changed(Selection(0, 4))
    adapter.run_command("bold")

    assert updates == ["word", "**word**"]
    assert statuses[-1] == "Bold: word"


def test_adapter_relays_control_events() -> None:
    session, _ = make_session("text")
    events: List[tuple[str, object | None]] = []
    statuses: List[str] = []
    hooks = TextualUIHooks(
        update_buffer=lambda mirror: None,
        update_status=statuses.append,
        handle_event=lambda name, payload: events.append((name, payload)),
    )
    adapter = TextualNoteAdapter(session, hooks)

    adapter.run_command("search-toggle")
    adapter.run_command("delete-note")

    assert events[0][0] == "search.toggle"
    assert session.search_active is True
    assert ("note.delete_requested", {"note_id": "demo"}) in events
    assert statuses == ["search.toggle", "note.delete_requested"]


def test_adapter_forwards_font_size_changes() -> None:
    session, _ = make_session()
    events: List[tuple[str, object | None]] = []
    hooks = TextualUIHooks(
        update_buffer=lambda mirror: None,
        handle_event=lambda name, payload: events.append((name, payload)),
    )
    TextualNoteAdapter(session, hooks)

    session.increase_font_size()

    assert events == [("font_size.changed", 18)]


def test_adapter_reports_debounced_snapshot() -> None:
    session, clock = make_session("")
    statuses: List[str] = []
    lines: List[str] = []
    hooks = TextualUIHooks(
        update_buffer=lambda mirror: None,
        update_status=statuses.append,
        log=lines.append,
    )
    adapter = TextualNoteAdapter(session, hooks)

    adapter.text_changed("# Plan\nsteps")
    assert statuses[-1] == "Plan"
    assert adapter.process_timeouts() is False

    clock.now = 1.0
    assert adapter.process_timeouts() is True
    assert statuses[-1] == "saved step 1"
    assert any(line.startswith("snapshot ->") for line in lines)


def test_adapter_logs_command_round_trip() -> None:
    session, _ = make_session("a")
    lines: List[str] = []
    hooks = TextualUIHooks(update_buffer=lambda mirror: None, log=lines.append)
    adapter = TextualNoteAdapter(session, hooks)

    adapter.run_command("tag")

    assert lines[0].startswith("command ->")
    assert lines[-1].startswith("result <-")
    assert "history_changed=True" in lines[-1]
