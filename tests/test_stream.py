"""Tests for restartable lazy streams."""

import itertools

import pytest

from shrinkgen.stream import Stream


def explode():
    raise AssertionError("stream was evaluated too early")


class TestStreamConstruction:
    def test_nil_is_empty(self):
        assert Stream.nil().is_empty()
        assert Stream.nil().to_list() == []

    def test_of(self):
        assert Stream.of(1, 2, 3).to_list() == [1, 2, 3]

    def test_from_iterable(self):
        assert Stream.from_iterable([4, 5]).to_list() == [4, 5]

    def test_lazy_defers_producer(self):
        stream = Stream.lazy(lambda: explode())
        with pytest.raises(AssertionError):
            stream.to_list()


class TestRestartability:
    def test_iterating_twice_yields_same_elements(self):
        stream = Stream.of(1, 2, 3).map(lambda x: x * 10).filter(lambda x: x != 20)

        assert list(stream) == [10, 30]
        assert list(stream) == [10, 30]

    def test_partial_consumption_does_not_exhaust(self):
        stream = Stream(lambda: itertools.count())
        iterator = iter(stream)
        next(iterator)
        next(iterator)

        assert stream.first() == 0

    def test_generator_factory_restarts(self):
        calls = []

        def produce():
            calls.append(1)
            yield "a"
            yield "b"

        stream = Stream(produce)

        assert stream.to_list() == ["a", "b"]
        assert stream.to_list() == ["a", "b"]
        assert len(calls) == 2


class TestStreamCombinators:
    def test_infinite_stream_with_take(self):
        evens = Stream(lambda: itertools.count()).filter(lambda x: x % 2 == 0)
        assert evens.take(4).to_list() == [0, 2, 4, 6]

    def test_drop(self):
        assert Stream.of(1, 2, 3, 4).drop(2).to_list() == [3, 4]
        assert Stream.of(1, 2).drop(5).to_list() == []

    def test_take_negative_is_empty(self):
        assert Stream.of(1, 2).take(-1).to_list() == []

    def test_take_while(self):
        assert Stream(lambda: itertools.count()).take_while(lambda x: x < 3).to_list() == [0, 1, 2]

    def test_join_concatenates(self):
        joined = Stream.of(1).join(Stream.of(2, 3), Stream.nil(), Stream.of(4))
        assert joined.to_list() == [1, 2, 3, 4]
        assert joined.to_list() == [1, 2, 3, 4]

    def test_join_is_lazy(self):
        joined = Stream.of(1).join(Stream.lazy(lambda: explode()))
        assert joined.first() == 1

    def test_map_is_lazy(self):
        mapped = Stream(lambda: itertools.count()).map(lambda x: 1 // (3 - x))
        assert mapped.take(3).to_list() == [0, 0, 1]

    def test_first_and_get_nth(self):
        stream = Stream.of("x", "y", "z")
        assert stream.first() == "x"
        assert stream.get_nth(2) == "z"
        assert stream.get_nth(3, default="none") == "none"
        assert stream.get_nth(-1, default="none") == "none"
        assert Stream.nil().first(default=0) == 0

    def test_every_and_has(self):
        stream = Stream.of(2, 4, 6)
        assert stream.every(lambda x: x % 2 == 0)
        assert not stream.every(lambda x: x > 2)
        assert stream.has(lambda x: x == 4)
        assert not stream.has(lambda x: x == 5)

    def test_is_empty_with_none_element(self):
        assert not Stream.of(None).is_empty()

    def test_to_list_limit(self):
        assert Stream(lambda: itertools.count(5)).to_list(limit=3) == [5, 6, 7]
