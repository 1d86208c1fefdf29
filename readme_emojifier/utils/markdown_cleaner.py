"""Utilities for cleaning markdown text from LLM artifacts."""

from __future__ import annotations

OPENING_FENCE = "```markdown"
CLOSING_FENCE = "```"


def strip_code_fences(markdown_text: str) -> str:
    """
    Remove one leading ```markdown marker and one trailing ``` marker.

    Only these two literals are recognized; fences with other languages and
    fences inside the text are left untouched.
    """
    text = markdown_text.strip()
    if text.startswith(OPENING_FENCE):
        text = text[len(OPENING_FENCE):]
    if text.endswith(CLOSING_FENCE):
        text = text[: -len(CLOSING_FENCE)]
    return text.strip()


def sanitize_markdown(markdown_text: str) -> str:
    """
    Return Gemini output without surrounding whitespace or fence markers.

    Stripping repeats until nothing changes, so the result is stable under
    a second pass.
    """
    cleaned = strip_code_fences(markdown_text)
    while True:
        again = strip_code_fences(cleaned)
        if again == cleaned:
            return cleaned
        cleaned = again


__all__ = ["OPENING_FENCE", "CLOSING_FENCE", "strip_code_fences", "sanitize_markdown"]
