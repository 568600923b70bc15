"""
The generator capability and its derived combinators.

Anything with a ``generate(random)`` method returning a Shrinkable is an
Arbitrary. ``filter_arbitrary`` and ``map_arbitrary`` work over any such
object; ``ArbitraryMixin`` exposes them as methods on the package's own
generators.
"""

from __future__ import annotations

from typing import Any, Callable, Optional, Protocol, TypeVar, runtime_checkable

from ..config import get_settings
from ..errors import ConfigurationError, GenerationExhaustedError
from ..logging import get_logger
from ..random import RandomSource
from .shrinkable import Shrinkable

logger = get_logger(__name__)

T = TypeVar("T")
U = TypeVar("U")
T_co = TypeVar("T_co", covariant=True)


@runtime_checkable
class Arbitrary(Protocol[T_co]):
    """Produces a value of type T together with its shrink tree."""

    def generate(self, random: RandomSource) -> Shrinkable[T_co]:
        ...


class ArbitraryMixin:
    """Fluent ``filter``/``map`` for generators defined in this package."""

    def filter(self, predicate: Callable[[Any], bool], max_attempts: Optional[int] = None) -> "FilterArbitrary":
        return filter_arbitrary(self, predicate, max_attempts=max_attempts)

    def map(self, fn: Callable[[Any], Any]) -> "MapArbitrary":
        return map_arbitrary(self, fn)


class FilterArbitrary(ArbitraryMixin):
    """
    Redraws from the wrapped generator until the predicate accepts a value.

    The shrink tree of the accepted value is pruned so that every child also
    satisfies the predicate.
    """

    def __init__(self, arb: Arbitrary[T], predicate: Callable[[T], bool], max_attempts: int):
        if max_attempts < 1:
            raise ConfigurationError(f"max_attempts must be >= 1, got {max_attempts}")
        self.arb = arb
        self.predicate = predicate
        self.max_attempts = max_attempts

    def generate(self, random: RandomSource) -> Shrinkable[T]:
        for attempt in range(1, self.max_attempts + 1):
            candidate = self.arb.generate(random)
            if self.predicate(candidate.value):
                if attempt > 1:
                    logger.debug(f"Filter accepted a value after {attempt} attempts")
                return candidate.filter(self.predicate)

        logger.error(f"Filter rejected {self.max_attempts} consecutive values from {self.arb!r}")
        raise GenerationExhaustedError(
            f"No value satisfied the filter after {self.max_attempts} attempts",
            attempts=self.max_attempts,
        )


class MapArbitrary(ArbitraryMixin):
    """Applies a pure transform to generated values and their shrink trees."""

    def __init__(self, arb: Arbitrary[T], fn: Callable[[T], U]):
        self.arb = arb
        self.fn = fn

    def generate(self, random: RandomSource) -> Shrinkable[U]:
        return self.arb.generate(random).map(self.fn)


def filter_arbitrary(
    arb: Arbitrary[T],
    predicate: Callable[[T], bool],
    max_attempts: Optional[int] = None,
) -> FilterArbitrary:
    """
    Restrict ``arb`` to values satisfying ``predicate``.

    Args:
        arb: Any object implementing ``generate``
        predicate: Condition every produced value (and shrink) must meet
        max_attempts: Retry budget; defaults to Settings.max_filter_attempts

    Returns:
        A generator raising GenerationExhaustedError once the budget is spent
    """
    if max_attempts is None:
        max_attempts = get_settings().max_filter_attempts
    return FilterArbitrary(arb, predicate, max_attempts)


def map_arbitrary(arb: Arbitrary[T], fn: Callable[[T], U]) -> MapArbitrary:
    """Transform every value ``arb`` produces, shrinks included."""
    return MapArbitrary(arb, fn)
