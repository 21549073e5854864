"""Binary64 limits and ordering signals.

These constants drive the default tolerances of every comparison in the
package. They come straight from ``sys.float_info`` so they always describe
the interpreter's native ``float``.
"""

import sys

# Smallest relative gap between 1.0 and the next representable float
FLOAT_EPSILON = sys.float_info.epsilon

# Smallest positive normal float
FLOAT_MIN = sys.float_info.min

# Largest finite float
FLOAT_MAX = sys.float_info.max

# Decimal digits a float can carry without loss (15 for binary64)
FLOAT_DIG = sys.float_info.dig

# Ordering signals returned by the compare functions
GREATER = 1
LESS = -1
EQUAL = 0

__all__ = [
    "FLOAT_EPSILON",
    "FLOAT_MIN",
    "FLOAT_MAX",
    "FLOAT_DIG",
    "GREATER",
    "LESS",
    "EQUAL",
]
