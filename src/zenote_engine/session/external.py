"""Buffer builders for replacements produced by the AI text collaborator."""

from __future__ import annotations


def prepend_section(content: str, heading: str, body: str) -> str:
    """Place a generated section (e.g. a summary) above the note."""

    return f"## {heading}\n{body}\n\n{content}"


def append_section(content: str, heading: str, body: str) -> str:
    """Add a generated section (e.g. polished or continued text) below the note."""

    if not body:
        return content
    return f"{content}\n\n## {heading}\n{body}"


__all__ = ["prepend_section", "append_section"]
