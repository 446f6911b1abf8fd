"""Tests for the patternfit public API surface.

Verifies that all expected names are importable from the top-level
``patternfit`` package and that ``__all__`` is comprehensive.
"""

import patternfit


class TestPublicAPIImports:
    """Every public component must be importable from ``import patternfit``."""

    def test_fits_importable(self):
        from patternfit import fits

        assert fits("ab", "a?") is True

    def test_helpers_importable(self):
        from patternfit import effective_length, fits_all, fits_any, select, truncate

        assert callable(fits_any)
        assert callable(fits_all)
        assert callable(select)
        assert effective_length("a\0b") == 1
        assert truncate("a\0b") == "a"

    def test_segment_api_importable(self):
        from patternfit import Segment, iter_segments, parse_segment

        assert list(iter_segments("a")) == [Segment(0, 0, "a")]
        assert callable(parse_segment)

    def test_wildcard_constants_importable(self):
        from patternfit import SINGLE_WILDCARD, UNBOUNDED_WILDCARD, WILDCARDS

        assert SINGLE_WILDCARD == "?"
        assert UNBOUNDED_WILDCARD == "*"
        assert WILDCARDS == {"?", "*"}


class TestAllExports:
    def test_all_names_resolve(self):
        """Every name in ``__all__`` is an attribute of the package."""
        for name in patternfit.__all__:
            assert hasattr(patternfit, name), name

    def test_all_has_no_duplicates(self):
        assert len(patternfit.__all__) == len(set(patternfit.__all__))

    def test_version(self):
        assert isinstance(patternfit.__version__, str)

    def test_submodule_exports_are_reexported(self):
        """Every name a submodule exports is also exported by the package."""
        from patternfit import matcher, segment

        for module in (matcher, segment):
            for name in module.__all__:
                assert name in patternfit.__all__, f"{module.__name__}.{name}"
