"""Wildcard pattern matching for strings."""

from __future__ import annotations

from collections.abc import Iterable

from patternfit.segment import parse_segment
from patternfit.utils.text import TERMINATOR, effective_length, truncate

__all__ = [
    "TERMINATOR",
    "effective_length",
    "truncate",
    "fits",
    "fits_any",
    "fits_all",
    "select",
]


def fits(subject: str, pattern: str) -> bool:
    """Check whether ``subject`` fits a wildcard ``pattern``.

    ``?`` matches exactly one character and ``*`` matches any run of
    characters, including an empty one. Every other character is literal;
    there is no escaping. Both strings are cut at their first NUL
    character before matching.

    The pattern is consumed segment by segment. Each literal is located at
    its leftmost occurrence at or after the current subject position, and
    the distance skipped to reach it must satisfy the wildcard run in front
    of it. A failed distance check rejects the subject outright; later
    occurrences of the literal are never tried, so e.g. ``fits("bb", "?b")``
    is False. The end of the pattern anchors the end of the subject.

    Args:
        subject: The string to test.
        pattern: The pattern to match against.

    Returns:
        True if the subject fits the pattern, False otherwise.
    """
    subject = truncate(subject)
    subject_len = len(subject)
    pattern_len = effective_length(pattern)

    p = 0
    s = 0
    while p < pattern_len:
        segment, p = parse_segment(pattern, p, pattern_len)

        if not segment.literal:
            found_pos = subject_len
        else:
            found_pos = subject.find(segment.literal, s)
            if found_pos == -1:
                return False

        if not segment.accepts(found_pos - s):
            return False
        s = found_pos + len(segment.literal)

    return s >= subject_len


def fits_any(subject: str, patterns: Iterable[str]) -> bool:
    """Return True if ``subject`` fits at least one of ``patterns``."""
    return any(fits(subject, pattern) for pattern in patterns)


def fits_all(subject: str, patterns: Iterable[str]) -> bool:
    """Return True if ``subject`` fits every one of ``patterns``."""
    return all(fits(subject, pattern) for pattern in patterns)


def select(subjects: Iterable[str], pattern: str) -> list[str]:
    """Return the subjects that fit ``pattern``, in their original order."""
    return [subject for subject in subjects if fits(subject, pattern)]
