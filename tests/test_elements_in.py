"""Tests for the strict elements_in."""

import pytest

from advanced_slicing import (
    Index,
    IndexOutOfRangeError,
    NullSourceError,
    Range,
    RangeOutOfBoundsError,
    RangeOverflowError,
    elements_in,
)

DATA = list(range(10))

SCENARIOS = [
    (Range(0, Index.from_end(0)), [0, 1, 2, 3, 4, 5, 6, 7, 8, 9]),
    (Range(1, 5), [1, 2, 3, 4]),
    (Range(1, Index.from_end(5)), [1, 2, 3, 4]),
    (Range(Index.from_end(9), Index.from_end(5)), [1, 2, 3, 4]),
    (Range(Index.from_end(9), 5), [1, 2, 3, 4]),
    (Range(Index.from_end(10), Index.from_end(0)), DATA),
    (Range(Index.from_end(3), 10), [7, 8, 9]),
    (Range(5, 5), []),
    (Range(Index.from_end(3), Index.from_end(3)), []),
    (Range(9, Index.from_end(1)), []),
    (Range(9, 10), [9]),
]


@pytest.mark.parametrize(("range_", "expected"), SCENARIOS)
def test_random_access(range_: Range, expected: list) -> None:
    assert [*elements_in(DATA, range_)] == expected
    assert [*elements_in(range(10), range_)] == expected


@pytest.mark.parametrize(("range_", "expected"), SCENARIOS)
def test_forward_only(range_: Range, expected: list, forward_only) -> None:
    source = forward_only(10)
    assert [*elements_in(source, range_)] == expected
    assert source.iterations == 1


def test_python_slices() -> None:
    assert [*elements_in(DATA, slice(1, 5))] == [1, 2, 3, 4]
    assert [*elements_in(iter(DATA), slice(-9, -5))] == [1, 2, 3, 4]
    assert [*elements_in(iter(DATA), slice(None))] == DATA


def test_full_range_of_empty_sources(forward_only) -> None:
    assert [*elements_in([], Range.all())] == []
    assert [*elements_in(forward_only(0), Range.all())] == []
    assert [*elements_in(forward_only(0), Range(Index.end(), Index.end()))] == []


@pytest.mark.parametrize(
    ("range_", "error"),
    [
        (Range(5, 3), RangeOverflowError),
        (Range(Index.from_end(2), Index.from_end(5)), RangeOverflowError),
        (Range(Index.from_end(11), 5), IndexOutOfRangeError),
        (Range(0, 0), IndexOutOfRangeError),
        (Range(5, 11), RangeOutOfBoundsError),
        (Range(10, 10), RangeOutOfBoundsError),
        (Range(20, 25), RangeOutOfBoundsError),
    ],
)
def test_random_access_errors(range_: Range, error: type) -> None:
    with pytest.raises(error):
        [*elements_in(DATA, range_)]


@pytest.mark.parametrize(
    ("range_", "error"),
    [
        (Range(5, 3), RangeOverflowError),
        (Range(Index.from_end(2), Index.from_end(5)), RangeOverflowError),
        (Range(Index.from_end(11), 5), IndexOutOfRangeError),
        (Range(Index.from_end(3), 11), IndexOutOfRangeError),
        (Range(20, 25), IndexOutOfRangeError),
        (Range(8, Index.from_end(5)), RangeOverflowError),
        (Range(15, 12), IndexOutOfRangeError),
    ],
)
def test_forward_only_errors(range_: Range, error: type, forward_only) -> None:
    source = forward_only(10)
    with pytest.raises(error):
        [*elements_in(source, range_)]


@pytest.mark.parametrize(
    ("range_", "error"),
    [
        (Range(0, 5), RangeOutOfBoundsError),
        (Range(Index.from_end(1), Index.end()), IndexOutOfRangeError),
        (Range(0, Index.from_end(2)), RangeOverflowError),
        (Range(Index.from_end(1), Index.from_end(3)), RangeOverflowError),
    ],
)
def test_empty_source_errors(range_: Range, error: type, forward_only) -> None:
    with pytest.raises(error):
        [*elements_in([], range_)]
    with pytest.raises(error):
        [*elements_in(forward_only(0), range_)]


def test_error_raised_after_partial_output(forward_only) -> None:
    iterator = elements_in(forward_only(10), Range(5, 20))
    assert [next(iterator) for _ in range(5)] == [5, 6, 7, 8, 9]
    with pytest.raises(IndexOutOfRangeError):
        next(iterator)


def test_null_source_raises_immediately() -> None:
    with pytest.raises(NullSourceError):
        elements_in(None, Range.all())


def test_bad_range_type_raises_immediately() -> None:
    with pytest.raises(TypeError):
        elements_in(DATA, (1, 5))


def test_nothing_is_read_until_iterated(forward_only) -> None:
    source = forward_only(10)
    iterator = elements_in(source, Range(5, 3))
    assert source.iterations == 0
    with pytest.raises(RangeOverflowError):
        next(iterator)


def test_cursor_released_when_consumer_stops_early(forward_only) -> None:
    source = forward_only(100)
    iterator = elements_in(source, Range(1, Index.from_end(5)))
    assert next(iterator) == 1
    assert next(iterator) == 2
    iterator.close()
    assert source.released == 1
    assert source.read < 100


@pytest.mark.parametrize(
    ("range_", "first"),
    [
        (Range(Index.from_end(5), Index.end()), 95),
        (Range(3, 50), 3),
    ],
)
def test_cursor_released_when_consumer_stops_after_one(range_: Range, first: int, forward_only) -> None:
    source = forward_only(100)
    iterator = elements_in(source, range_)
    assert next(iterator) == first
    iterator.close()
    assert source.released == 1


def test_cursor_released_on_error(forward_only) -> None:
    source = forward_only(10)
    with pytest.raises(IndexOutOfRangeError):
        [*elements_in(source, Range(5, 20))]
    assert source.released == 1


def test_only_reads_as_far_as_needed(forward_only) -> None:
    source = forward_only(100)
    assert [*elements_in(source, Range(2, 4))] == [2, 3]
    assert source.read == 4
    assert source.released == 1
