"""Pattern segments: a wildcard run followed by a literal run."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from patternfit.utils.text import effective_length

__all__ = [
    "SINGLE_WILDCARD",
    "UNBOUNDED_WILDCARD",
    "WILDCARDS",
    "Segment",
    "parse_segment",
    "iter_segments",
]

SINGLE_WILDCARD = "?"
UNBOUNDED_WILDCARD = "*"
WILDCARDS = frozenset((SINGLE_WILDCARD, UNBOUNDED_WILDCARD))


@dataclass(frozen=True)
class Segment:
    """One parsed unit of a pattern.

    Attributes:
        min_gap: Number of ``?`` in the wildcard run.
        max_gap: Upper bound on the gap, or None when the run contains a
            ``*`` anywhere in it.
        literal: The literal text following the wildcard run. Empty only
            for a trailing wildcard run.
    """

    min_gap: int = 0
    max_gap: int | None = 0
    literal: str = ""

    @property
    def unbounded(self) -> bool:
        return self.max_gap is None

    def accepts(self, gap: int) -> bool:
        """Whether ``gap`` skipped subject characters satisfy the wildcard run."""
        if gap < self.min_gap:
            return False
        return self.max_gap is None or gap <= self.max_gap


def parse_segment(pattern: str, pos: int, end: int) -> tuple[Segment, int]:
    """Parse the segment of ``pattern`` starting at ``pos``.

    Nothing at or past ``end`` is read.

    Returns:
        The parsed segment and the position just past it.
    """
    min_gap = 0
    max_gap: int | None = 0
    while pos < end and pattern[pos] in WILDCARDS:
        if pattern[pos] == SINGLE_WILDCARD:
            min_gap += 1
            if max_gap is not None:
                max_gap += 1
        else:
            # stays unbounded for the rest of the run
            max_gap = None
        pos += 1

    start = pos
    while pos < end and pattern[pos] not in WILDCARDS:
        pos += 1

    return Segment(min_gap=min_gap, max_gap=max_gap, literal=pattern[start:pos]), pos


def iter_segments(pattern: str) -> Iterator[Segment]:
    """Yield the segments of ``pattern`` left to right, honoring NUL truncation."""
    end = effective_length(pattern)
    pos = 0
    while pos < end:
        segment, pos = parse_segment(pattern, pos, end)
        yield segment
