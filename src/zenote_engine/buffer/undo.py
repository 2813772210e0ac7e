"""Linear undo/redo history of full-buffer snapshots."""

from __future__ import annotations

from typing import List, Sequence


class HistoryStack:
    """Snapshot log plus a step pointer into it.

    Entries are complete buffer copies; a new snapshot taken while the
    pointer sits below the newest entry discards the redo branch.
    """

    def __init__(self, initial: str = "") -> None:
        self._entries: List[str] = [initial]
        self._step: int = 0

    @property
    def step(self) -> int:
        return self._step

    @property
    def current(self) -> str:
        return self._entries[self._step]

    def __len__(self) -> int:
        return len(self._entries)

    def entries(self) -> Sequence[str]:
        return tuple(self._entries)

    def reset(self, initial: str) -> None:
        self._entries = [initial]
        self._step = 0

    def snapshot(self, text: str) -> bool:
        """Append ``text`` after the step pointer; return ``True`` if it grew."""

        if text == self._entries[self._step]:
            return False
        del self._entries[self._step + 1 :]
        self._entries.append(text)
        self._step = len(self._entries) - 1
        return True

    def can_undo(self, live_text: str) -> bool:
        return live_text != self.current or self._step > 0

    def can_redo(self) -> bool:
        return self._step < len(self._entries) - 1

    def undo(self, live_text: str) -> str:
        # Uncommitted edits are reverted first, without moving the pointer.
        if live_text != self.current:
            return self.current
        if self._step == 0:
            return live_text
        self._step -= 1
        return self.current

    def redo(self, live_text: str) -> str:
        if not self.can_redo():
            return live_text
        self._step += 1
        return self.current
