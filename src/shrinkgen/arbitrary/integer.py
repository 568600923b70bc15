"""Integer shrinking by repeated halving, and the bounded integer generator."""

from __future__ import annotations

from typing import Iterator

from ..random import RandomSource, INT32_MIN, INT32_MAX, check_int_bounds
from ..stream import Stream
from .definition import ArbitraryMixin
from .shrinkable import Shrinkable


def half_toward_zero(value: int) -> int:
    """Halve ``value``, rounding toward zero (sign preserved)."""
    return value // 2 if value >= 0 else -((-value) // 2)


def shrink_integer(value: int, target: int) -> Stream[int]:
    """
    Candidates between ``target`` and ``value``, biggest jump first.

    Starts at ``target`` and closes half of the remaining distance to
    ``value`` at each step. ``value`` itself is never produced.
    """
    def candidates() -> Iterator[int]:
        delta = value - target
        while delta != 0:
            yield value - delta
            delta = half_toward_zero(delta)

    return Stream(candidates)


def halving_shrinkable(value: int) -> Shrinkable[int]:
    """
    Shrink tree that halves toward zero.

    Children of ``v`` are ``v/2, v/4, ..., 0``; each child restarts the
    halving from its own magnitude.
    """
    def children() -> Iterator[Shrinkable[int]]:
        current = value
        while current != 0:
            current = half_toward_zero(current)
            yield halving_shrinkable(current)

    return Shrinkable(value, lambda: Stream(children))


class IntegerArbitrary(ArbitraryMixin):
    """Uniform integers in ``[min_value, max_value]`` shrinking toward zero."""

    def __init__(self, min_value: int = INT32_MIN, max_value: int = INT32_MAX):
        check_int_bounds(min_value, max_value)
        self.min_value = min_value
        self.max_value = max_value

    @property
    def target(self) -> int:
        """Value in range closest to zero."""
        return min(max(0, self.min_value), self.max_value)

    def shrinkable_for(self, value: int) -> Shrinkable[int]:
        target = self.target
        return Shrinkable(value, lambda: shrink_integer(value, target).map(self.shrinkable_for))

    def generate(self, random: RandomSource) -> Shrinkable[int]:
        return self.shrinkable_for(random.next_int(self.min_value, self.max_value))

    def __repr__(self) -> str:
        return f"IntegerArbitrary({self.min_value}, {self.max_value})"


def integer(min_value: int = INT32_MIN, max_value: int = INT32_MAX) -> IntegerArbitrary:
    return IntegerArbitrary(min_value, max_value)
