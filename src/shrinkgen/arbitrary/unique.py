"""
Order-preserving removal of equivalent elements.

Equivalence is any caller-supplied binary predicate. Nothing is hashed, so
the predicate does not need to be transitive or consistent with ``__hash__``;
every element is compared against the elements before it.
"""

from typing import Callable, List, Sequence, TypeVar

from .shrinkable import Shrinkable

T = TypeVar("T")

Compare = Callable[[T, T], bool]


def _has_earlier_equivalent(values: Sequence[T], index: int, compare: Compare) -> bool:
    current = values[index]
    for earlier in range(index):
        if compare(values[earlier], current):
            return True
    return False


def deduplicate(sequence: Sequence[T], compare: Compare) -> List[T]:
    """
    Keep the first representative of each group of equivalent elements.

    An element is dropped when ``compare(earlier, element)`` holds for some
    element at a smaller index of the input. Survivors keep their relative
    order. The input is left untouched.

    Args:
        sequence: Values to filter
        compare: Returns True when its two arguments are equivalent

    Returns:
        New list holding the surviving elements
    """
    return [value for index, value in enumerate(sequence) if not _has_earlier_equivalent(sequence, index, compare)]


def build_compare_filter(compare: Compare) -> Callable[[List[Shrinkable[T]]], List[Shrinkable[T]]]:
    """Lift ``deduplicate`` to lists of Shrinkables, comparing their values."""
    def compare_filter(items: List[Shrinkable[T]]) -> List[Shrinkable[T]]:
        values = [item.value for item in items]
        return [item for index, item in enumerate(items) if not _has_earlier_equivalent(values, index, compare)]

    return compare_filter
