"""Constants package for platform float limits."""

from .math import (
    EQUAL,
    FLOAT_DIG,
    FLOAT_EPSILON,
    FLOAT_MAX,
    FLOAT_MIN,
    GREATER,
    LESS,
)

__all__ = [
    "FLOAT_EPSILON",
    "FLOAT_MIN",
    "FLOAT_MAX",
    "FLOAT_DIG",
    "GREATER",
    "LESS",
    "EQUAL",
]
