from datetime import datetime

import pytest

from zenote_engine.transforms import (
    TransformResult,
    indent,
    insert_line_prefix,
    insert_link,
    insert_math_block,
    insert_tag,
    insert_timestamp,
    outdent,
    wrap_selection,
)


def test_bold_wrap_keeps_word_selected() -> None:
    result = wrap_selection("Hello world.", 6, 11, "**")

    assert result.new_text == "Hello **world**."
    assert result.selection.extract(result.new_text) == "world"


@pytest.mark.parametrize(
    ("text", "start", "end", "marker"),
    [
        ("", 0, 0, "**"),
        ("abc", 0, 3, "_"),
        ("line one\nline two", 5, 13, "`"),
        ("tail", 4, 4, "**"),
    ],
)
def test_wrap_inserts_marker_on_both_sides(
    text: str, start: int, end: int, marker: str
) -> None:
    result = wrap_selection(text, start, end, marker)

    expected = text[:end] + marker + text[end:]
    expected = expected[:start] + marker + expected[start:]
    assert result.new_text == expected
    assert result.selection.extract(result.new_text) == text[start:end]


def test_line_prefix_opens_new_line_after_cursor() -> None:
    text = "Intro"

    result = insert_line_prefix(text, 5, 5, "##")

    assert result.new_text == "Intro\n## "
    assert result.new_text.count("\n") == text.count("\n") + 1
    assert result.cursor_start == len(result.new_text)
    assert result.cursor_length == 0


def test_line_prefix_moves_trailing_text_onto_new_line() -> None:
    result = insert_line_prefix("abcdef", 3, 3, "-")

    assert result.new_text == "abc\n- def"
    assert result.new_text[result.cursor_start :] == "def"


def test_line_prefix_inserts_after_selection_end() -> None:
    text = "first\nsecond"

    result = insert_line_prefix(text, 0, 12, "- [ ]")

    assert result.new_text == "first\nsecond\n- [ ] "
    assert result.new_text.count("\n") == text.count("\n") + 1


def test_math_block_places_cursor_between_fences() -> None:
    result = insert_math_block("ab", 1, 1)

    assert result.new_text == "a$$\n\n$$b"
    assert result.cursor_start == 4
    assert result.new_text[: result.cursor_start] == "a$$\n"


def test_timestamp_uses_given_clock_and_format() -> None:
    now = datetime(2024, 5, 1, 9, 30, 0)

    result = insert_timestamp("at ", 3, 3, now=now)

    assert result.new_text == "at 2024-05-01 09:30:00"
    assert result.cursor_start == len(result.new_text)

    custom = insert_timestamp("", 0, 0, now=now, fmt="%d/%m")
    assert custom.new_text == "01/05"


def test_link_highlights_selected_label() -> None:
    result = insert_link("see docs", 4, 8)

    assert result.new_text == "see [docs](url)"
    assert result.selection.extract(result.new_text) == "docs"


def test_link_without_selection_highlights_placeholder() -> None:
    result = insert_link("", 0, 0)

    assert result.new_text == "[text](url)"
    assert result.cursor_start == 1
    assert result.cursor_length == 4


def test_tag_inserts_bare_hash() -> None:
    result = insert_tag("note ", 5, 5)

    assert result.new_text == "note #"
    assert result.cursor_start == 6


def test_indent_is_a_whitespace_line_prefix() -> None:
    result = indent("item", 4, 4)

    assert result.new_text == "item\n   "
    assert result.cursor_start == 8


def test_outdent_reverses_indent() -> None:
    indented = indent("item", 4, 4)
    text = indented.new_text + "child"

    result = outdent(text, len(text), len(text))

    assert result.new_text == "item\nchild"
    assert result.cursor_start == len(result.new_text)


def test_outdent_touches_every_selected_line() -> None:
    text = "  a\n  b\nc"

    result = outdent(text, 0, 7)

    assert result.new_text == "a\nb\nc"
    assert result.selection.extract(result.new_text) == "a\nb"


def test_outdent_stops_at_newline_ending_selection() -> None:
    text = "  a\n  b"

    result = outdent(text, 2, 4)

    assert result.new_text == "a\n  b"
    assert (result.cursor_start, result.cursor_length) == (0, 2)


def test_outdent_without_indent_is_identity() -> None:
    result = outdent("plain", 2, 2)

    assert result.new_text == "plain"
    assert result.cursor_start == 2


def test_transform_result_rejects_out_of_range_cursor() -> None:
    with pytest.raises(ValueError):
        TransformResult(new_text="abc", cursor_start=2, cursor_length=5)
    with pytest.raises(ValueError):
        TransformResult(new_text="abc", cursor_start=0, cursor_length=-1)
