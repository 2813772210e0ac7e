import math

import pytest

from zenote_engine.pagination import (
    WEIGHT_PRESETS,
    PageLayout,
    line_weight,
    paginate,
)

LONG_NOTE = "\n".join(
    [
        "# Weekly review",
        "",
        "This week went fine. Most of the work landed on time!",
        "Some of it did not, and the reasons deserve a few notes",
        "spread over more than one line",
        "",
        "## Wins",
        "- shipped the exporter",
        "- fixed the sync loop",
        "1. write the changelog",
        "",
        "### Misses",
        "The search bar still flickers when typing fast?",
        "x" * 400,
        "Closing thoughts go here.",
    ]
)


def test_empty_text_gives_one_empty_page() -> None:
    assert paginate("", 100, PageLayout.PORTRAIT_3_4) == [""]
    assert paginate("") == [""]


def test_full_layout_is_one_page() -> None:
    assert paginate(LONG_NOTE) == [LONG_NOTE]
    assert paginate(LONG_NOTE, math.inf, PageLayout.PORTRAIT_3_4) == [LONG_NOTE]


def test_headings_and_paragraphs_fit_one_page() -> None:
    text = "# Title\n\nSome text.\n\nMore text."

    assert paginate(text, 10_000, PageLayout.FULL) == [text]


@pytest.mark.parametrize("capacity", [60, 150, 300, 950])
def test_pages_concatenate_back_to_text(capacity: int) -> None:
    pages = paginate(LONG_NOTE, capacity, PageLayout.PORTRAIT_3_4)

    assert "".join(pages) == LONG_NOTE
    assert len(pages) >= 1


def test_oversized_line_gets_its_own_page() -> None:
    text = "x" * 100 + "\nshort"

    pages = paginate(text, 10, PageLayout.FULL)

    assert pages == ["x" * 100 + "\n", "short"]
    assert paginate("y" * 500, 10) == ["y" * 500]


def test_prefers_sentence_boundary_inside_paragraph() -> None:
    text = "One.\nTwo words\nthree more\nfour"

    pages = paginate(text, 20, PageLayout.FULL)

    assert pages == ["One.\n", "Two words\nthree more\nfour"]


def test_falls_back_to_paragraph_break_without_sentence_end() -> None:
    text = "alpha beta\n\ngamma delta\nepsilon zeta\neta"

    pages = paginate(text, 75, PageLayout.FULL)

    assert pages == ["alpha beta\n\n", "gamma delta\nepsilon zeta\neta"]


def test_hard_split_when_no_clean_break_exists() -> None:
    text = "First sentence.\nsecond part of it\nthird line here"

    pages = paginate(text, 30, PageLayout.FULL)

    assert pages == ["First sentence.\n", "second part of it\n", "third line here"]


def test_trailing_whitespace_page_is_dropped() -> None:
    assert paginate("abc\n\n", 5, PageLayout.FULL) == ["abc\n"]


def test_line_weights_follow_layout_preset() -> None:
    portrait = WEIGHT_PRESETS[PageLayout.PORTRAIT_3_4]
    full = WEIGHT_PRESETS[PageLayout.FULL]

    assert line_weight("# Big", portrait) == 180
    assert line_weight("## Mid", full) == 120
    assert line_weight("### Small", portrait) == 130
    assert line_weight("   ", full) == 50
    assert line_weight("- item", portrait) == len("- item") + 40
    assert line_weight("1. first", full) == len("1. first") + 30
    assert line_weight("plain", full) == 5


def test_rejects_non_positive_capacity() -> None:
    with pytest.raises(ValueError):
        paginate("text", 0)
