"""
Variable-length arrays with bounded size.

Shrinking removes elements from the front first, then shrinks elements one
position at a time. Every candidate keeps at least ``min_length`` elements
(before any pre-filter runs).
"""

from __future__ import annotations

from typing import Callable, List, Optional, TypeVar

from ..errors import ConfigurationError
from ..logging import get_logger
from ..random import RandomSource
from ..stream import Stream
from .definition import Arbitrary, ArbitraryMixin
from .integer import IntegerArbitrary, shrink_integer
from .shrinkable import Shrinkable

logger = get_logger(__name__)

T = TypeVar("T")

PreFilter = Callable[[List[Shrinkable[T]]], List[Shrinkable[T]]]


def max_length_from_min_length(min_length: int) -> int:
    """Default upper bound when only a lower bound is known."""
    return 2 * min_length + 10


def check_length(name: str, bound: int) -> None:
    if isinstance(bound, bool) or not isinstance(bound, int):
        raise ConfigurationError(f"{name} must be an integer, got {bound!r}")
    if bound < 0:
        raise ConfigurationError(f"{name} must be non-negative, got {bound}")


def validate_length_bounds(min_length: int, max_length: int) -> None:
    """
    Check array length bounds.

    Raises:
        ConfigurationError: If a bound is not a non-negative int or min > max
    """
    check_length("min_length", min_length)
    check_length("max_length", max_length)
    if min_length > max_length:
        raise ConfigurationError(f"min_length ({min_length}) must not exceed max_length ({max_length})")


class ArrayArbitrary(ArbitraryMixin):
    """
    Arrays of values drawn from ``arb`` with length in ``[min_length, max_length]``.

    ``pre_filter`` receives the element Shrinkables of every generated array
    and of every shrink candidate, and may drop some of them before the value
    is built.
    """

    def __init__(
        self,
        arb: Arbitrary[T],
        min_length: int = 0,
        max_length: Optional[int] = None,
        pre_filter: Optional[PreFilter] = None,
    ):
        if max_length is None:
            check_length("min_length", min_length)
            max_length = max_length_from_min_length(min_length)
        validate_length_bounds(min_length, max_length)
        self.arb = arb
        self.min_length = min_length
        self.max_length = max_length
        self.pre_filter = pre_filter
        self.length_arb = IntegerArbitrary(min_length, max_length)

    def generate(self, random: RandomSource) -> Shrinkable[List[T]]:
        length = self.length_arb.generate(random).value
        items = [self.arb.generate(random) for _ in range(length)]
        logger.debug(f"Generated array of {length} items in [{self.min_length}, {self.max_length}]")
        return self._wrap(items)

    def _wrap(self, items: List[Shrinkable[T]]) -> Shrinkable[List[T]]:
        if self.pre_filter is not None:
            items = self.pre_filter(items)
        return Shrinkable(
            [item.value for item in items],
            lambda: self._shrink_items(items, self.min_length).map(self._wrap),
        )

    def _shrink_items(self, items: List[Shrinkable[T]], min_length: int) -> Stream[List[Shrinkable[T]]]:
        if not items:
            return Stream.nil()

        size = len(items)
        head, tail = items[0], items[1:]

        if size > min_length:
            removals = shrink_integer(size, min_length).map(lambda length: items[size - length:])
        else:
            removals = Stream.nil()

        head_shrinks = head.shrink().map(lambda shrunk: [shrunk] + tail)
        tail_shrinks = Stream.lazy(
            lambda: self._shrink_items(tail, max(min_length - 1, 0)).map(lambda rest: [head] + rest)
        )
        return removals.join(head_shrinks, tail_shrinks)

    def __repr__(self) -> str:
        return f"ArrayArbitrary({self.arb!r}, {self.min_length}, {self.max_length})"


def array_of(arb: Arbitrary[T], min_length: int = 0, max_length: Optional[int] = None) -> ArrayArbitrary:
    """
    Arrays of values coming from ``arb``.

    Args:
        arb: Generator used for each element
        min_length: Lower bound of the array size
        max_length: Upper bound; defaults to max_length_from_min_length(min_length)
    """
    return ArrayArbitrary(arb, min_length, max_length)
