"""
Seeded random source consumed by every generator.

Wraps a numpy ``Generator`` so that draws are reproducible from a seed and a
source can be cloned at its current position.
"""

from __future__ import annotations

import copy
from typing import Optional

import numpy as np

from ..errors import ConfigurationError

INT32_MIN = -(2 ** 31)
INT32_MAX = 2 ** 31 - 1
INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


def check_int_bounds(min_value: int, max_value: int) -> None:
    """
    Validate an inclusive integer range before drawing from it.

    Raises:
        ConfigurationError: If min_value > max_value or either bound falls
            outside the signed 64-bit range numpy draws from
    """
    for name, bound in (("min_value", min_value), ("max_value", max_value)):
        if not INT64_MIN <= bound <= INT64_MAX:
            raise ConfigurationError(f"{name} ({bound}) must lie in [{INT64_MIN}, {INT64_MAX}]")
    if min_value > max_value:
        raise ConfigurationError(f"min_value ({min_value}) must not exceed max_value ({max_value})")


class RandomSource:
    """Deterministic random source; one instance per property run."""

    def __init__(self, seed: Optional[int] = None) -> None:
        if seed is not None and seed < 0:
            raise ConfigurationError(f"Seed must be non-negative, got {seed}")
        self._seed = seed
        self._rng = np.random.default_rng(seed)

    @property
    def seed(self) -> Optional[int]:
        return self._seed

    def next_int(self, min_value: int = INT32_MIN, max_value: int = INT32_MAX) -> int:
        """
        Draw an integer uniformly from ``[min_value, max_value]``.

        Args:
            min_value: Inclusive lower bound
            max_value: Inclusive upper bound

        Returns:
            A Python int inside the bounds

        Raises:
            ConfigurationError: If the bounds are inverted or exceed 64 bits
        """
        check_int_bounds(min_value, max_value)
        if min_value == max_value:
            return min_value
        return int(self._rng.integers(min_value, max_value, endpoint=True))

    def next_double(self) -> float:
        """Draw a float uniformly from [0, 1)."""
        return float(self._rng.random())

    def next_boolean(self) -> bool:
        return self.next_int(0, 1) == 1

    def clone(self) -> RandomSource:
        """Return an independent copy positioned at the same cursor."""
        duplicate = RandomSource.__new__(RandomSource)
        duplicate._seed = self._seed
        duplicate._rng = copy.deepcopy(self._rng)
        return duplicate

    def __repr__(self) -> str:
        return f"RandomSource(seed={self._seed!r})"
