"""Vectorised comparisons over numpy arrays.

Each function mirrors its scalar counterpart in ``twofloats.comparator`` and
broadcasts its operands. NaN positions are never "same" and order as 0.
"""

from __future__ import annotations

from typing import Optional

import numpy as np
from numpy.typing import ArrayLike

from .constants.math import EQUAL, FLOAT_EPSILON, FLOAT_MAX, FLOAT_MIN, GREATER, LESS


def _operands(a: ArrayLike, b: ArrayLike) -> tuple[np.ndarray, np.ndarray]:
    left = np.asarray(a, dtype=np.float64)
    right = np.asarray(b, dtype=np.float64)
    return left, right


def _tolerance(epsilon: Optional[float]) -> float:
    return FLOAT_EPSILON if epsilon is None else abs(epsilon)


def same_relative_array(a: ArrayLike, b: ArrayLike, epsilon: Optional[float] = None) -> np.ndarray:
    """Elementwise ``same_relative``."""
    left, right = _operands(a, b)
    tolerance = _tolerance(epsilon)
    with np.errstate(over="ignore", invalid="ignore", divide="ignore"):
        diff = np.abs(left - right)
        magnitude = np.abs(left) + np.abs(right)
        tiny = (left == 0) | (right == 0) | (magnitude < FLOAT_MIN)
        near_zero = diff < tolerance * FLOAT_MIN
        # zero denominators only occur at tiny positions
        relative = diff / np.minimum(magnitude, FLOAT_MAX) < tolerance
    return (left == right) | np.where(tiny, near_zero, relative)


def equal_array(a: ArrayLike, b: ArrayLike, epsilon: Optional[float] = None) -> np.ndarray:
    """Elementwise ``equal``."""
    left, right = _operands(a, b)
    with np.errstate(over="ignore", invalid="ignore"):
        return (left == right) | (np.abs(left - right) < _tolerance(epsilon))


def same_array(a: ArrayLike, b: ArrayLike, epsilon: Optional[float] = None) -> np.ndarray:
    """Elementwise ``same``: relative without an epsilon, absolute with one."""
    if epsilon is None:
        return same_relative_array(a, b)
    return equal_array(a, b, epsilon)


def compare_array(a: ArrayLike, b: ArrayLike, epsilon: Optional[float] = None) -> np.ndarray:
    """
    Elementwise ``compare``.

    Returns an ``int8`` array of 1, -1 and 0. Unlike the scalar version, NaN
    positions come back as 0; check them with ``np.isnan`` or ``same_array``
    when the distinction matters.
    """
    left, right = _operands(a, b)
    matches = same_array(left, right, epsilon)
    with np.errstate(invalid="ignore"):
        result = np.where(left > right, GREATER, LESS)
    result = np.where(matches | np.isnan(left) | np.isnan(right), EQUAL, result)
    return result.astype(np.int8)


__all__ = [
    "same_relative_array",
    "equal_array",
    "same_array",
    "compare_array",
]
