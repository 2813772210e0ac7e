"""Idle-timer that commits typed text to the history stack."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable, Optional

from zenote_engine.runtime import telemetry

from .undo import HistoryStack

Clock = Callable[[], float]


@dataclass
class PendingSnapshot:
    deadline: float
    text: str
    generation: int


class SnapshotDebouncer:
    """Commits the latest typed buffer once the editor has been idle.

    The host drives it by calling :meth:`process` periodically (the Textual
    adapter uses ``set_interval``); nothing here runs on its own thread.
    """

    def __init__(
        self,
        history: HistoryStack,
        *,
        delay_ms: int = 800,
        clock: Clock = time.monotonic,
    ) -> None:
        if delay_ms < 0:
            raise ValueError("delay_ms must be >= 0")
        self.history = history
        self.delay_ms = delay_ms
        self._clock = clock
        self._pending: Optional[PendingSnapshot] = None
        self._generation = 0

    @property
    def pending(self) -> bool:
        return self._pending is not None

    def schedule(self, text: str) -> None:
        """Restart the idle window for ``text``."""

        self._generation += 1
        self._pending = PendingSnapshot(
            deadline=self._clock() + self.delay_ms / 1000.0,
            text=text,
            generation=self._generation,
        )

    def cancel(self) -> None:
        self._pending = None

    def process(self) -> bool:
        """Commit the pending text if its deadline passed."""

        pending = self._pending
        if pending is None or pending.deadline > self._clock():
            return False
        return self._commit(pending.generation)

    def flush(self) -> bool:
        """Commit the pending text immediately, regardless of its deadline."""

        if self._pending is None:
            return False
        return self._commit(self._pending.generation)

    def _commit(self, generation: int) -> bool:
        pending = self._pending
        if pending is None or pending.generation != generation:
            return False
        self._pending = None
        grew = self.history.snapshot(pending.text)
        telemetry.record_event(
            "history.debounced_snapshot",
            level="debug",
            data={"grew": grew, "step": self.history.step},
        )
        return grew
