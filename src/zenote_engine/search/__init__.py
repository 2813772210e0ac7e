"""In-note substring search."""

from .index import Match, SearchIndex, Segment, find_matches

__all__ = ["Match", "SearchIndex", "Segment", "find_matches"]
