"""
Restartable lazy sequences used to describe shrink candidates.

A Stream never holds an iterator. It holds a factory that builds a fresh
iterator, so the same Stream can be walked any number of times and always
yields the same elements.
"""

from __future__ import annotations

import itertools
from typing import Any, Callable, Generic, Iterable, Iterator, List, Optional, TypeVar

T = TypeVar("T")
U = TypeVar("U")


class Stream(Generic[T]):
    """
    Possibly infinite, lazily produced ordered sequence.

    Every combinator returns a new Stream wrapping the recipe of its source;
    nothing is evaluated until the Stream is iterated.
    """

    __slots__ = ("_factory",)

    def __init__(self, factory: Callable[[], Iterator[T]]):
        """
        Args:
            factory: Zero-argument callable returning a fresh iterator on each call
        """
        self._factory = factory

    @staticmethod
    def nil() -> Stream[Any]:
        return Stream(lambda: iter(()))

    @staticmethod
    def of(*values: T) -> Stream[T]:
        return Stream(lambda: iter(values))

    @staticmethod
    def from_iterable(iterable: Iterable[T]) -> Stream[T]:
        """
        Wrap a re-iterable collection (list, tuple, range, ...).

        Passing a one-shot iterator breaks restartability, since the second
        walk would find it already consumed.
        """
        return Stream(lambda: iter(iterable))

    @staticmethod
    def lazy(producer: Callable[[], Stream[T]]) -> Stream[T]:
        """Defer building a Stream until it is first iterated."""
        return Stream(lambda: iter(producer()))

    def __iter__(self) -> Iterator[T]:
        return self._factory()

    def map(self, fn: Callable[[T], U]) -> Stream[U]:
        return Stream(lambda: map(fn, self._factory()))

    def filter(self, predicate: Callable[[T], bool]) -> Stream[T]:
        return Stream(lambda: filter(predicate, self._factory()))

    def join(self, *others: Stream[T]) -> Stream[T]:
        """Concatenate this Stream with others, keeping each one lazy."""
        streams = (self,) + others
        return Stream(lambda: itertools.chain.from_iterable(streams))

    def take(self, n: int) -> Stream[T]:
        return Stream(lambda: itertools.islice(self._factory(), max(n, 0)))

    def drop(self, n: int) -> Stream[T]:
        return Stream(lambda: itertools.islice(self._factory(), max(n, 0), None))

    def take_while(self, predicate: Callable[[T], bool]) -> Stream[T]:
        return Stream(lambda: itertools.takewhile(predicate, self._factory()))

    def first(self, default: Optional[T] = None) -> Optional[T]:
        return next(self._factory(), default)

    def get_nth(self, index: int, default: Optional[T] = None) -> Optional[T]:
        if index < 0:
            return default
        return next(itertools.islice(self._factory(), index, None), default)

    def every(self, predicate: Callable[[T], bool]) -> bool:
        return all(predicate(v) for v in self._factory())

    def has(self, predicate: Callable[[T], bool]) -> bool:
        return any(predicate(v) for v in self._factory())

    def is_empty(self) -> bool:
        sentinel = object()
        return next(self._factory(), sentinel) is sentinel

    def to_list(self, limit: Optional[int] = None) -> List[T]:
        """Materialize the Stream, stopping after ``limit`` elements if given."""
        if limit is None:
            return list(self._factory())
        return list(itertools.islice(self._factory(), max(limit, 0)))

    def __repr__(self) -> str:
        return f"Stream({self._factory!r})"
