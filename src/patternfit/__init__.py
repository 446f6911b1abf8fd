"""patternfit - Wildcard string matching with '?' and '*'."""

from __future__ import annotations

# Matching
from patternfit.matcher import (
    TERMINATOR,
    effective_length,
    fits,
    fits_all,
    fits_any,
    select,
    truncate,
)

# Segments
from patternfit.segment import (
    SINGLE_WILDCARD,
    UNBOUNDED_WILDCARD,
    WILDCARDS,
    Segment,
    iter_segments,
    parse_segment,
)

__version__ = "0.1.0"

__all__ = [
    # Matching
    "fits",
    "fits_any",
    "fits_all",
    "select",
    "effective_length",
    "truncate",
    "TERMINATOR",
    # Segments
    "Segment",
    "parse_segment",
    "iter_segments",
    "SINGLE_WILDCARD",
    "UNBOUNDED_WILDCARD",
    "WILDCARDS",
]
