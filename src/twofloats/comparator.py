"""
Tolerant equality and ordering for native floats.

Two algorithm families are exposed:

- relative epsilon (``same_relative`` / ``compare_relative``): precision adapts
  to the magnitude of the operands, following the comparison described in the
  Floating-Point Guide (https://floating-point-gui.de/errors/comparison/).
- absolute epsilon (``equal`` / ``compare_equal``): a fixed deviation below which
  values are considered the same, regardless of their magnitude.

``same`` and ``compare`` pick between them: omit the epsilon for maximum
precision, pass one to cut off at a fixed decimal resolution (see
``twofloats.scale.epsilon_from_scale``).

Any comparison involving NaN is never "same" and its ordering is ``None``.
"""

from __future__ import annotations

import math
from typing import Optional

from .constants.math import EQUAL, FLOAT_EPSILON, FLOAT_MAX, FLOAT_MIN, GREATER, LESS


def _resolve_epsilon(epsilon: Optional[float]) -> float:
    if epsilon is None:
        return FLOAT_EPSILON
    return abs(epsilon)


def _has_nan(a: float, b: float) -> bool:
    return math.isnan(a) or math.isnan(b)


def _order(a: float, b: float) -> int:
    return GREATER if a > b else LESS


def same(a: float, b: float, epsilon: Optional[float] = None) -> bool:
    """
    Are these two floats "same"?

    When epsilon is None the relative algorithm is used, so the numbers are
    compared with the maximum precision native floats allow. Otherwise epsilon
    is the minimum absolute deviation at which the numbers are considered
    different.

    Args:
        a: Left operand
        b: Right operand
        epsilon: None for maximum precision, or an absolute tolerance

    Returns:
        True when the operands are the same under the selected tolerance

    Examples:
        >>> same(0.1 + 0.2, 0.3)
        True
        >>> same(0.0095, 0.0094, 0.001)
        True
    """
    if epsilon is None:
        return same_relative(a, b)
    return equal(a, b, epsilon)


def compare(a: float, b: float, epsilon: Optional[float] = None) -> Optional[int]:
    """
    Compare two floats.

    Dispatches exactly like ``same``.

    Returns:
        1 when ``a`` is greater, -1 when ``b`` is greater, 0 when they are the
        same, None when either operand is NaN
    """
    if epsilon is None:
        return compare_relative(a, b)
    return compare_equal(a, b, epsilon)


def equal(a: float, b: float, epsilon: Optional[float] = None) -> bool:
    """
    Absolute-epsilon comparison.

    The operands are the same when they differ by less than ``|epsilon|``
    (``FLOAT_EPSILON`` when None). The tolerance ignores operand magnitude, so
    it stops being meaningful once the operands dwarf it; use the relative
    algorithm for large values.
    """
    if a == b:
        return True
    if _has_nan(a, b):
        return False
    return abs(a - b) < _resolve_epsilon(epsilon)


def compare_equal(a: float, b: float, epsilon: Optional[float] = None) -> Optional[int]:
    """Order two floats using ``equal`` for the equality test."""
    if _has_nan(a, b):
        return None
    if equal(a, b, epsilon):
        return EQUAL
    return _order(a, b)


def same_relative(a: float, b: float, epsilon: Optional[float] = None) -> bool:
    """
    Relative-epsilon comparison.

    With the default ``FLOAT_EPSILON`` this yields the best precision native
    floats can offer. The epsilon is the minimum relative deviation at which the
    operands are considered different. To limit precision on purpose, ``equal``
    is usually the better fit.

    When either operand is zero, or both are so small that their magnitudes sum
    below ``FLOAT_MIN``, the relative difference is meaningless and the
    absolute difference is checked against ``epsilon * FLOAT_MIN`` instead.
    Subnormal values are not handled with any more care than that.

    Args:
        a: Left operand
        b: Right operand
        epsilon: Relative tolerance, ``FLOAT_EPSILON`` when None

    Returns:
        True when the operands are the same within the relative tolerance

    Examples:
        >>> same_relative(0.1e-300 + 0.2e-300, 0.3e-300)
        True
        >>> same_relative(0.1e-299, 0.1e-300)
        False
    """
    if a == b:
        return True
    if _has_nan(a, b):
        return False
    tolerance = _resolve_epsilon(epsilon)
    diff = abs(a - b)
    magnitude = abs(a) + abs(b)
    if a == 0 or b == 0 or magnitude < FLOAT_MIN:
        return diff < tolerance * FLOAT_MIN
    return diff / min(magnitude, FLOAT_MAX) < tolerance


def compare_relative(a: float, b: float, epsilon: Optional[float] = None) -> Optional[int]:
    """Order two floats using ``same_relative`` for the equality test."""
    if _has_nan(a, b):
        return None
    if same_relative(a, b, epsilon):
        return EQUAL
    return _order(a, b)


def less_or_same(a: float, b: float, epsilon: Optional[float] = None) -> bool:
    """True when ``a`` is below ``b`` or the two are the same."""
    result = compare(a, b, epsilon)
    return result is not None and result <= EQUAL


def greater_or_same(a: float, b: float, epsilon: Optional[float] = None) -> bool:
    """True when ``a`` is above ``b`` or the two are the same."""
    result = compare(a, b, epsilon)
    return result is not None and result >= EQUAL


__all__ = [
    "same",
    "compare",
    "equal",
    "compare_equal",
    "same_relative",
    "compare_relative",
    "less_or_same",
    "greater_or_same",
]
