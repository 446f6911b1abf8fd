"""Terminator-aware string helpers."""

from __future__ import annotations

__all__ = ["TERMINATOR", "effective_length", "truncate"]

TERMINATOR = "\0"


def effective_length(text: str) -> int:
    """Return the length of ``text`` up to its first NUL character.

    Strings coming from fixed-size character buffers mark end-of-data with
    a NUL even when the buffer is longer; everything from the first NUL on
    is not part of the value.
    """
    idx = text.find(TERMINATOR)
    if idx == -1:
        return len(text)
    return idx


def truncate(text: str) -> str:
    """Return ``text`` cut at its first NUL character (exclusive)."""
    return text[: effective_length(text)]
