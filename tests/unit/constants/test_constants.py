"""Tests for twofloats constants modules."""

from __future__ import annotations

import sys


class TestMathConstants:
    """Tests for math constants module."""

    def test_limits_match_float_info(self) -> None:
        """Limits come from sys.float_info."""
        from twofloats.constants.math import FLOAT_DIG, FLOAT_EPSILON, FLOAT_MAX, FLOAT_MIN

        assert FLOAT_EPSILON == sys.float_info.epsilon
        assert FLOAT_MIN == sys.float_info.min
        assert FLOAT_MAX == sys.float_info.max
        assert FLOAT_DIG == sys.float_info.dig

    def test_machine_epsilon_is_gap_above_one(self) -> None:
        """FLOAT_EPSILON is the gap between 1.0 and the next float."""
        from twofloats.constants.math import FLOAT_EPSILON

        assert 1.0 + FLOAT_EPSILON > 1.0
        assert 1.0 + FLOAT_EPSILON / 2 == 1.0

    def test_ordering_signals(self) -> None:
        """Ordering signals are 1, -1 and 0."""
        from twofloats.constants.math import EQUAL, GREATER, LESS

        assert (GREATER, LESS, EQUAL) == (1, -1, 0)

    def test_math_constants_all_exported(self) -> None:
        """All math constants should be in __all__."""
        from twofloats.constants import math as math_module

        for name in ("FLOAT_EPSILON", "FLOAT_MIN", "FLOAT_MAX", "FLOAT_DIG", "GREATER", "LESS", "EQUAL"):
            assert name in math_module.__all__

    def test_package_reexports(self) -> None:
        """The package root exposes the public surface."""
        import twofloats

        for name in twofloats.__all__:
            assert hasattr(twofloats, name)
