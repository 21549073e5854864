"""Tolerant comparison of native floating-point numbers."""

from .array_comparator import compare_array, equal_array, same_array, same_relative_array
from .comparator import (
    compare,
    compare_equal,
    compare_relative,
    equal,
    greater_or_same,
    less_or_same,
    same,
    same_relative,
)
from .constants import EQUAL, FLOAT_DIG, FLOAT_EPSILON, FLOAT_MAX, FLOAT_MIN, GREATER, LESS
from .scale import epsilon, epsilon_from_scale, scale_from_epsilon
from .tolerance import Tolerance

__all__ = [
    "same",
    "compare",
    "equal",
    "compare_equal",
    "same_relative",
    "compare_relative",
    "less_or_same",
    "greater_or_same",
    "epsilon",
    "epsilon_from_scale",
    "scale_from_epsilon",
    "same_array",
    "same_relative_array",
    "equal_array",
    "compare_array",
    "Tolerance",
    "FLOAT_EPSILON",
    "FLOAT_MIN",
    "FLOAT_MAX",
    "FLOAT_DIG",
    "GREATER",
    "LESS",
    "EQUAL",
]
