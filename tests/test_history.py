from zenote_engine.buffer import HistoryStack, SnapshotDebouncer


class FakeMonotonic:
    def __init__(self) -> None:
        self.now = 100.0

    def __call__(self) -> float:
        return self.now

    def advance(self, ms: float) -> None:
        self.now += ms / 1000.0


def make_history(*snapshots: str) -> HistoryStack:
    history = HistoryStack(snapshots[0] if snapshots else "")
    for text in snapshots[1:]:
        history.snapshot(text)
    return history


def test_same_snapshot_twice_does_not_grow() -> None:
    history = make_history("a")

    assert history.snapshot("b") is True
    assert history.snapshot("b") is False
    assert len(history) == 2


def test_undo_and_redo_walk_the_whole_log() -> None:
    states = ["s0", "s1", "s2", "s3"]
    history = make_history(*states)

    live = history.current
    for _ in range(len(states) - 1):
        live = history.undo(live)
    assert live == "s0"
    assert history.step == 0

    for _ in range(len(states) - 1):
        live = history.redo(live)
    assert live == "s3"


def test_new_snapshot_after_undo_discards_redo_branch() -> None:
    history = make_history("a", "b", "c")

    live = history.undo("c")
    assert live == "b"
    history.snapshot("x")

    for _ in range(5):
        live = history.redo(live)
    assert live == "x"
    assert "c" not in history.entries()


def test_first_undo_reverts_uncommitted_edit_only() -> None:
    history = make_history("a", "b")

    restored = history.undo("b plus typing")

    assert restored == "b"
    assert history.step == 1


def test_undo_at_start_returns_live_text() -> None:
    history = make_history("only")

    assert history.undo("only") == "only"
    assert history.step == 0
    assert history.can_undo("only") is False


def test_redo_at_end_is_noop() -> None:
    history = make_history("a", "b")

    assert history.redo("b") == "b"
    assert history.can_redo() is False


def test_reset_replaces_everything() -> None:
    history = make_history("a", "b", "c")

    history.reset("fresh")

    assert history.entries() == ("fresh",)
    assert history.step == 0


def test_debouncer_commits_after_idle_window() -> None:
    clock = FakeMonotonic()
    history = HistoryStack("")
    debouncer = SnapshotDebouncer(history, delay_ms=800, clock=clock)

    debouncer.schedule("hel")
    clock.advance(500)
    debouncer.schedule("hello")
    clock.advance(500)
    assert debouncer.process() is False

    clock.advance(400)
    assert debouncer.process() is True
    assert history.entries() == ("", "hello")
    assert debouncer.pending is False


def test_debouncer_cancel_drops_pending_text() -> None:
    clock = FakeMonotonic()
    history = HistoryStack("")
    debouncer = SnapshotDebouncer(history, delay_ms=800, clock=clock)

    debouncer.schedule("stale")
    debouncer.cancel()
    clock.advance(1000)

    assert debouncer.process() is False
    assert len(history) == 1


def test_debouncer_flush_ignores_deadline() -> None:
    history = HistoryStack("")
    debouncer = SnapshotDebouncer(history, delay_ms=800, clock=FakeMonotonic())

    debouncer.schedule("now")

    assert debouncer.flush() is True
    assert history.current == "now"
