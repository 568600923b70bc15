"""
Shrink tree nodes.

A Shrinkable pairs a generated value with a recipe producing its simpler
candidates. Calling the recipe twice yields the same children, so a runner
can come back to a node after exploring some of its siblings.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Generic, TypeVar

from ..stream import Stream

T = TypeVar("T")
U = TypeVar("U")


def _no_shrink() -> Stream:
    return Stream.nil()


@dataclass(frozen=True)
class Shrinkable(Generic[T]):
    """A generated value and the recipe for its shrink children."""
    value: T
    shrink: Callable[[], Stream["Shrinkable[T]"]] = field(default=_no_shrink, compare=False, repr=False)

    def has_shrinks(self) -> bool:
        return not self.shrink().is_empty()

    def map(self, fn: Callable[[T], U]) -> Shrinkable[U]:
        """Transform this node and every descendant, keeping the tree shape."""
        return Shrinkable(fn(self.value), lambda: self.shrink().map(lambda child: child.map(fn)))

    def filter(self, predicate: Callable[[T], bool]) -> Shrinkable[T]:
        """
        Drop every descendant whose value fails ``predicate``.

        The root value is kept as is; callers are expected to have checked it.
        """
        return Shrinkable(
            self.value,
            lambda: self.shrink()
            .filter(lambda child: predicate(child.value))
            .map(lambda child: child.filter(predicate)),
        )
