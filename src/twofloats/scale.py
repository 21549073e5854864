"""
Conversion between a scale and an epsilon.

"Scale" is the number of fraction digits after which a deviation is tolerated.
"Epsilon" is the tolerated deviation itself.

    scale        epsilon
    0       -->  1
    1       -->  0.1
    3       -->  0.001
    FLOAT_DIG -> FLOAT_EPSILON  (platform specific, 15 for binary64)
    42      -->  1e-42
"""

from __future__ import annotations

import logging
import math

from .constants.math import FLOAT_DIG, FLOAT_EPSILON

logger = logging.getLogger(__name__)


def epsilon_from_scale(scale: int = FLOAT_DIG) -> float:
    """
    Calculate the epsilon for a number of fraction digits.

    ``FLOAT_DIG`` maps to ``FLOAT_EPSILON`` exactly rather than to
    ``10 ** -FLOAT_DIG``.

    Args:
        scale: Number of fraction digits, a non-negative integer

    Returns:
        Epsilon value usable with ``same``, ``compare`` or ``equal``

    Examples:
        >>> epsilon_from_scale(0)
        1.0
        >>> epsilon_from_scale(3)
        0.001
    """
    if scale == FLOAT_DIG:
        return FLOAT_EPSILON
    return 1 / 10**scale if scale >= 0 else float(10 ** -scale)


def epsilon(scale: int = FLOAT_DIG) -> float:
    """Shorthand for ``epsilon_from_scale``."""
    return epsilon_from_scale(scale)


def scale_from_epsilon(epsilon: float) -> int:
    """
    Calculate the scale for an epsilon, the inverse of ``epsilon_from_scale``.

    This is not a true inverse for every input: ``100`` yields ``-2``. Pass
    epsilons produced by ``epsilon_from_scale`` or small positive fractions.
    Epsilons that have no logarithm (zero, negative, NaN, infinite) yield 0.

    Examples:
        >>> scale_from_epsilon(0.001)
        3
        >>> scale_from_epsilon(FLOAT_EPSILON)
        15
    """
    if epsilon == FLOAT_EPSILON:
        return FLOAT_DIG
    if not 0 < epsilon < math.inf:
        logger.debug("No scale for epsilon %r; using 0", epsilon)
        return 0
    return -math.floor(math.log10(epsilon))


__all__ = ["epsilon_from_scale", "epsilon", "scale_from_epsilon"]
