"""Display-title derivation from the first line of a buffer."""

from __future__ import annotations

import re

DEFAULT_TITLE_PLACEHOLDER = "Untitled Note"
DEFAULT_TITLE_MAX_LENGTH = 100

_LEADING_MARKUP = re.compile(r"^[#\s]+")
_INLINE_MARKUP = re.compile(r"[*_`]")


def derive_title(
    text: str,
    *,
    placeholder: str = DEFAULT_TITLE_PLACEHOLDER,
    max_length: int = DEFAULT_TITLE_MAX_LENGTH,
) -> str:
    first_line = text.split("\n", 1)[0]
    cleaned = _INLINE_MARKUP.sub("", _LEADING_MARKUP.sub("", first_line)).strip()
    return cleaned[:max_length] or placeholder


__all__ = ["DEFAULT_TITLE_PLACEHOLDER", "DEFAULT_TITLE_MAX_LENGTH", "derive_title"]
