"""Case-insensitive substring search with a circular current-match cursor."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional, Sequence


@dataclass(frozen=True, slots=True)
class Match:
    start: int
    end: int

    def __post_init__(self) -> None:
        if self.end <= self.start:
            raise ValueError("Match end must be greater than start")


@dataclass(frozen=True, slots=True)
class Segment:
    """Run of text used to render highlights."""

    text: str
    is_match: bool = False
    is_current: bool = False


def find_matches(query: str, text: str) -> list[Match]:
    """Non-overlapping, left-to-right occurrences of ``query`` in ``text``."""

    if not query:
        return []
    needle = query.lower()
    haystack = text.lower()
    # Offsets are only valid when lowering keeps lengths (true for most text).
    if len(haystack) != len(text) or len(needle) != len(query):
        return _find_casefold_slow(query, text)
    matches: list[Match] = []
    position = haystack.find(needle)
    while position != -1:
        end = position + len(needle)
        matches.append(Match(position, end))
        position = haystack.find(needle, end)
    return matches


def _find_casefold_slow(query: str, text: str) -> list[Match]:
    needle = query.lower()
    width = len(query)
    matches: list[Match] = []
    position = 0
    while position + width <= len(text):
        if text[position : position + width].lower() == needle:
            matches.append(Match(position, position + width))
            position += width
        else:
            position += 1
    return matches


class SearchIndex:
    """Match list for one query against one exact text version."""

    def __init__(self) -> None:
        self._query = ""
        self._text: Optional[str] = None
        self._matches: list[Match] = []
        self._current = -1

    @property
    def query(self) -> str:
        return self._query

    @property
    def matches(self) -> Sequence[Match]:
        return tuple(self._matches)

    @property
    def current_index(self) -> int:
        """Index of the current match, ``-1`` when there is none."""

        return self._current

    @property
    def current(self) -> Optional[Match]:
        if self._current < 0:
            return None
        return self._matches[self._current]

    def __len__(self) -> int:
        return len(self._matches)

    def __iter__(self) -> Iterator[Match]:
        return iter(self._matches)

    def find(self, query: str, text: str) -> list[Match]:
        self._query = query
        self._text = text
        self._matches = find_matches(query, text)
        self._current = 0 if self._matches else -1
        return list(self._matches)

    def refresh(self, text: str) -> list[Match]:
        """Recompute the current query against a new text version."""

        return self.find(self._query, text)

    def is_valid_for(self, text: str) -> bool:
        return self._text is not None and self._text == text

    def clear(self) -> None:
        self._query = ""
        self._text = None
        self._matches = []
        self._current = -1

    def invalidate(self) -> None:
        """Drop matches after an edit but keep the query for :meth:`refresh`."""

        self._text = None
        self._matches = []
        self._current = -1

    def next(self) -> Optional[Match]:
        if not self._matches:
            return None
        self._current = (self._current + 1) % len(self._matches)
        return self._matches[self._current]

    def previous(self) -> Optional[Match]:
        if not self._matches:
            return None
        self._current = (self._current - 1) % len(self._matches)
        return self._matches[self._current]

    def segments(self, text: str) -> list[Segment]:
        if not self.is_valid_for(text):
            raise ValueError("Matches are stale; call find() for this text first")
        pieces: list[Segment] = []
        cursor = 0
        for index, match in enumerate(self._matches):
            if match.start > cursor:
                pieces.append(Segment(text[cursor : match.start]))
            pieces.append(
                Segment(
                    text[match.start : match.end],
                    is_match=True,
                    is_current=index == self._current,
                )
            )
            cursor = match.end
        if cursor < len(text):
            pieces.append(Segment(text[cursor:]))
        return pieces


__all__ = ["Match", "Segment", "SearchIndex", "find_matches"]
