"""
Arrays of unique values.

``set_of`` builds a bounded ArrayArbitrary whose raw arrays (and every shrink
candidate) are passed through ``build_compare_filter`` before use. Since
deduplication may leave fewer than ``min_length`` elements, a positive
minimum is re-enforced with a filter that redraws until enough values
survive.
"""

from __future__ import annotations

import operator
import warnings
from dataclasses import dataclass
from typing import Any, Callable, Generic, Mapping, Optional, Sequence, TypeVar

from ..errors import ConfigurationError
from ..logging import get_logger
from .array import ArrayArbitrary, check_length, max_length_from_min_length, validate_length_bounds
from .definition import Arbitrary, filter_arbitrary
from .unique import build_compare_filter

logger = get_logger(__name__)

T = TypeVar("T")

_CONSTRAINT_KEYS = ("min_length", "max_length", "compare")


@dataclass(frozen=True)
class SetConstraints(Generic[T]):
    """Constraints for ``set_of``; unset fields take their defaults."""
    min_length: Optional[int] = None              # lower bound of the array size
    max_length: Optional[int] = None              # upper bound of the array size
    compare: Optional[Callable[[T, T], bool]] = None  # True when two values are equal

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> SetConstraints:
        unknown = set(values) - set(_CONSTRAINT_KEYS)
        if unknown:
            raise ConfigurationError(f"Unknown set constraint(s): {', '.join(sorted(unknown))}")
        return cls(**values)


def build_complete_set_constraints(constraints: SetConstraints) -> SetConstraints:
    """
    Fill every unset field and validate the result.

    Args:
        constraints: Possibly partial constraints

    Returns:
        SetConstraints with min_length, max_length and compare all set

    Raises:
        ConfigurationError: On negative or non-integer lengths, min > max,
            or a non-callable compare
    """
    min_length = constraints.min_length if constraints.min_length is not None else 0
    check_length("min_length", min_length)
    max_length = (
        constraints.max_length
        if constraints.max_length is not None
        else max_length_from_min_length(min_length)
    )
    validate_length_bounds(min_length, max_length)
    compare = constraints.compare if constraints.compare is not None else operator.eq
    if not callable(compare):
        raise ConfigurationError(f"compare must be callable, got {compare!r}")
    return SetConstraints(min_length=min_length, max_length=max_length, compare=compare)


def _is_length(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_compare(value: Any) -> bool:
    return callable(value) and not isinstance(value, (SetConstraints, Mapping))


def _warn_positional(shape: str, replacement: str) -> None:
    warnings.warn(
        f"set_of(arb, {shape}) is deprecated, use set_of(arb, {replacement}) instead",
        DeprecationWarning,
        stacklevel=5,
    )


def constraints_from_legacy_args(args: Sequence[Any]) -> SetConstraints:
    """
    Map the positional argument shapes accepted by ``set_of`` to SetConstraints.

    Supported shapes::

        ()                          -> no constraints
        (constraints,)              -> SetConstraints or mapping, as is
        (max_length,)               -> deprecated
        (compare,)                  -> deprecated
        (min_length, max_length)    -> deprecated
        (max_length, compare)       -> deprecated
        (min_length, max_length, compare) -> deprecated

    Raises:
        ConfigurationError: For any other shape
    """
    if len(args) == 0:
        return SetConstraints()

    if len(args) == 1:
        (first,) = args
        if isinstance(first, SetConstraints):
            return first
        if isinstance(first, Mapping):
            return SetConstraints.from_mapping(first)
        if _is_length(first):
            _warn_positional("max_length", "max_length=...")
            return SetConstraints(max_length=first)
        if _is_compare(first):
            _warn_positional("compare", "compare=...")
            return SetConstraints(compare=first)

    elif len(args) == 2:
        first, second = args
        if _is_length(first) and _is_length(second):
            _warn_positional("min_length, max_length", "min_length=..., max_length=...")
            return SetConstraints(min_length=first, max_length=second)
        if _is_length(first) and _is_compare(second):
            _warn_positional("max_length, compare", "max_length=..., compare=...")
            return SetConstraints(max_length=first, compare=second)

    elif len(args) == 3:
        first, second, third = args
        if _is_length(first) and _is_length(second) and _is_compare(third):
            _warn_positional("min_length, max_length, compare", "min_length=..., max_length=..., compare=...")
            return SetConstraints(min_length=first, max_length=second, compare=third)

    shape = ", ".join(type(arg).__name__ for arg in args)
    raise ConfigurationError(f"Unsupported set_of argument shape: ({shape})")


def normalize_set_constraints(
    *args: Any,
    min_length: Optional[int] = None,
    max_length: Optional[int] = None,
    compare: Optional[Callable[[T, T], bool]] = None,
) -> SetConstraints:
    """Turn any accepted ``set_of`` argument surface into complete SetConstraints."""
    keywords_given = any(value is not None for value in (min_length, max_length, compare))
    if args and keywords_given:
        raise ConfigurationError("Pass set constraints either positionally or as keywords, not both")

    if args:
        constraints = constraints_from_legacy_args(args)
    else:
        constraints = SetConstraints(min_length=min_length, max_length=max_length, compare=compare)
    return build_complete_set_constraints(constraints)


def set_of(
    arb: Arbitrary[T],
    *args: Any,
    min_length: Optional[int] = None,
    max_length: Optional[int] = None,
    compare: Optional[Callable[[T, T], bool]] = None,
) -> Arbitrary:
    """
    Arrays of unique values coming from ``arb``.

    Two values are considered equal when ``compare(a, b)`` returns True
    (``==`` by default). The generated arrays and all their shrinks contain no
    pair of equal values.

    Args:
        arb: Generator used for the values inside the array
        *args: A SetConstraints instance or mapping, or one of the deprecated
            positional shapes handled by constraints_from_legacy_args
        min_length: Lower bound of the array size
        max_length: Upper bound of the array size
        compare: Equality predicate deciding uniqueness

    Returns:
        A generator of lists

    Raises:
        ConfigurationError: If the constraints are invalid
    """
    constraints = normalize_set_constraints(*args, min_length=min_length, max_length=max_length, compare=compare)
    minimum = constraints.min_length
    logger.debug(f"Building set_of with length in [{minimum}, {constraints.max_length}]")

    array_arb = ArrayArbitrary(arb, minimum, constraints.max_length, build_compare_filter(constraints.compare))
    if minimum == 0:
        return array_arb
    return filter_arbitrary(array_arb, lambda tab: len(tab) >= minimum)
