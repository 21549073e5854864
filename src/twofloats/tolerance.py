"""Reusable comparison tolerance."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Optional

from . import comparator
from .config import ConfigurationError, env_float, env_int
from .scale import epsilon_from_scale, scale_from_epsilon

logger = logging.getLogger(__name__)

DEFAULT_ENV_PREFIX = "TWOFLOATS"


@dataclass(frozen=True)
class Tolerance:
    """
    A comparison tolerance bound to ``same`` and ``compare``.

    ``epsilon=None`` selects the relative algorithm (maximum precision); any
    other value is an absolute tolerance.
    """

    epsilon: Optional[float] = None

    def __post_init__(self):
        if self.epsilon is None:
            return
        if not 0 < self.epsilon < math.inf:
            raise ValueError(f"Tolerance epsilon must be positive and finite, got {self.epsilon!r}")

    @classmethod
    def relative(cls) -> "Tolerance":
        return cls()

    @classmethod
    def from_scale(cls, scale: int) -> "Tolerance":
        """Tolerance that ignores deviations beyond ``scale`` fraction digits."""
        if scale < 0:
            raise ValueError(f"Scale must be non-negative, got {scale}")
        epsilon = epsilon_from_scale(scale)
        if epsilon == 0.0:
            raise ValueError(f"Scale {scale} is finer than the smallest representable float")
        return cls(epsilon)

    @classmethod
    def from_env(cls, prefix: str = DEFAULT_ENV_PREFIX) -> "Tolerance":
        """
        Build a tolerance from ``<prefix>_SCALE`` or ``<prefix>_EPSILON``.

        Neither set gives the relative tolerance.

        Raises:
            ConfigurationError: If both are set or either holds an unusable value
        """
        scale_name = f"{prefix}_SCALE"
        epsilon_name = f"{prefix}_EPSILON"
        scale = env_int(scale_name)
        epsilon = env_float(epsilon_name)

        if scale is not None and epsilon is not None:
            logger.warning("Both %s and %s are set", scale_name, epsilon_name)
            raise ConfigurationError.conflicting_values(scale_name, epsilon_name)
        if scale is not None:
            if scale < 0:
                raise ConfigurationError.invalid_value(scale_name, scale, "Scale must be non-negative")
            if epsilon_from_scale(scale) == 0.0:
                raise ConfigurationError.invalid_value(
                    scale_name, scale, "Scale is finer than the smallest representable float"
                )
            logger.debug("Using tolerance scale %d from %s", scale, scale_name)
            return cls.from_scale(scale)
        if epsilon is not None:
            if not 0 < epsilon < math.inf:
                raise ConfigurationError.invalid_value(epsilon_name, epsilon, "Epsilon must be positive and finite")
            logger.debug("Using tolerance epsilon %r from %s", epsilon, epsilon_name)
            return cls(epsilon)
        return cls.relative()

    @property
    def is_relative(self) -> bool:
        return self.epsilon is None

    @property
    def scale(self) -> Optional[int]:
        """Number of fraction digits the tolerance resolves, None when relative."""
        if self.epsilon is None:
            return None
        return scale_from_epsilon(self.epsilon)

    def same(self, a: float, b: float) -> bool:
        return comparator.same(a, b, self.epsilon)

    def compare(self, a: float, b: float) -> Optional[int]:
        return comparator.compare(a, b, self.epsilon)


__all__ = ["Tolerance", "DEFAULT_ENV_PREFIX"]
