"""Weighted, sentence-aware pagination of note text into export cards."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from zenote_engine.runtime import telemetry

SENTENCE_BREAKS = (".\n", "!\n", "?\n")
PARAGRAPH_BREAK = "\n\n"
SENTENCE_ENDINGS = (".", "!", "?")


class PageLayout(str, Enum):
    FULL = "full"
    PORTRAIT_3_4 = "3:4"


@dataclass(frozen=True, slots=True)
class WeightPreset:
    """Approximate vertical space of special lines, in character units."""

    heading_1: int
    heading_2: int
    heading_3: int
    blank_line: int
    list_item_bonus: int


WEIGHT_PRESETS: dict[PageLayout, WeightPreset] = {
    PageLayout.FULL: WeightPreset(
        heading_1=150, heading_2=120, heading_3=100, blank_line=50, list_item_bonus=30
    ),
    PageLayout.PORTRAIT_3_4: WeightPreset(
        heading_1=180, heading_2=150, heading_3=130, blank_line=60, list_item_bonus=40
    ),
}

LAYOUT_CAPACITY: dict[PageLayout, float] = {
    PageLayout.FULL: math.inf,
    PageLayout.PORTRAIT_3_4: 950,
}


def line_weight(line: str, preset: WeightPreset) -> int:
    if line.startswith("# "):
        return preset.heading_1
    if line.startswith("## "):
        return preset.heading_2
    if line.startswith("### "):
        return preset.heading_3
    if not line.strip():
        return preset.blank_line
    if line.startswith("- ") or line.startswith("1. "):
        return len(line) + preset.list_item_bonus
    return len(line)


def _clean_break(page: str) -> int:
    """Offset just past the last sentence or paragraph boundary, or -1."""

    sentence = max(page.rfind(marker) for marker in SENTENCE_BREAKS)
    if sentence != -1:
        return sentence + 2
    paragraph = page.rfind(PARAGRAPH_BREAK)
    if paragraph != -1:
        return paragraph + 2
    return -1


def _ends_cleanly(line: str) -> bool:
    stripped = line.strip()
    return not stripped or stripped.endswith(SENTENCE_ENDINGS)


def paginate(
    text: str,
    capacity: Optional[float] = None,
    layout: PageLayout = PageLayout.FULL,
) -> list[str]:
    """Split ``text`` into pages whose weight stays within ``capacity``.

    ``capacity=None`` uses the layout default (unbounded for
    :attr:`PageLayout.FULL`). Pages concatenate back to ``text``. A line is
    never split, and an oversized line still gets a page of its own.
    """

    if capacity is None:
        capacity = LAYOUT_CAPACITY[layout]
    if capacity <= 0:
        raise ValueError("capacity must be positive")

    with telemetry.span(
        "pagination::paginate",
        component="pagination",
        metadata={"layout": layout.value, "capacity": capacity, "length": len(text)},
    ) as handle:
        pages = _paginate(text, capacity, WEIGHT_PRESETS[layout])
        handle.add_metadata("pages", len(pages))
        return pages


def _paginate(text: str, capacity: float, preset: WeightPreset) -> list[str]:
    if not text:
        return [""]

    lines = text.split("\n")
    last = len(lines) - 1
    pages: list[str] = []
    page = ""
    weight_so_far = 0

    for index, line in enumerate(lines):
        chunk = line if index == last else line + "\n"
        weight = line_weight(line, preset)

        if weight_so_far + weight <= capacity or not page.strip():
            page += chunk
            weight_so_far += weight
            continue

        if index > 0 and not _ends_cleanly(lines[index - 1]):
            split_at = _clean_break(page)
            if split_at != -1:
                pages.append(page[:split_at])
                page = page[split_at:] + chunk
                weight_so_far = weight
                continue

        pages.append(page)
        page = chunk
        weight_so_far = weight

    if page:
        pages.append(page)
    if len(pages) > 1 and not pages[-1].strip():
        pages.pop()
    return pages


__all__ = [
    "PageLayout",
    "WeightPreset",
    "WEIGHT_PRESETS",
    "LAYOUT_CAPACITY",
    "line_weight",
    "paginate",
]
