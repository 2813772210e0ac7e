"""``zenote-paginate``: print the export pages of a note file."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence, TextIO

from zenote_engine.pagination import PageLayout, paginate

DEFAULT_SEPARATOR = "\n----- page {number} / {total} -----\n"


def _positive_float(raw: str) -> float:
    try:
        value = float(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number: '{raw}'") from None
    if not value > 0:
        raise argparse.ArgumentTypeError(f"capacity must be positive, got {raw}")
    return value


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="zenote-paginate",
        description="Split a markdown note into export cards.",
    )
    parser.add_argument("path", type=Path, help="Note file to paginate")
    parser.add_argument(
        "--layout",
        choices=[layout.value for layout in PageLayout],
        default=PageLayout.PORTRAIT_3_4.value,
        help="Card layout (default: 3:4)",
    )
    parser.add_argument(
        "--capacity",
        type=_positive_float,
        default=None,
        help="Weight budget per card (default: the layout's own)",
    )
    parser.add_argument(
        "--separator",
        default=DEFAULT_SEPARATOR,
        help="Text printed before each page; may use {number} and {total}",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None, *, out: TextIO | None = None) -> int:
    args = _parse_args(argv)
    stream = out or sys.stdout
    text = args.path.read_text(encoding="utf-8")
    pages = paginate(text, args.capacity, PageLayout(args.layout))
    total = len(pages)
    for number, page in enumerate(pages, start=1):
        stream.write(args.separator.format(number=number, total=total))
        stream.write(page)
        if not page.endswith("\n"):
            stream.write("\n")
    return 0


if __name__ == "__main__":  # pragma: no cover - manual entry point
    raise SystemExit(main())
