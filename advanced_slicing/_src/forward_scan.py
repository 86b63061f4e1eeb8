"""
Indexing and windowing over sources which may only be read once.

From-end positions are resolved in a single pass by keeping a bounded
window of the most recent elements, so memory use depends only on the
from-end offsets involved and never on the length of the source.
"""
from collections.abc import Iterator
from itertools import islice
from typing import Any, Final, TypeVar

import advanced_slicing._src as src
from advanced_slicing.queue import BoundedFifo

from .errors import IndexOutOfRangeError, RangeOverflowError
from .index import Index
from .policy import Policy
from .random_access import resolve_window
from .range import Range

__all__ = ["element_at", "window"]

T = TypeVar("T")

MISSING: Final[Any] = object()


def element_at(handle: "src.sequence_handle.SequentialOnly[T]", index: Index, policy: Policy, default: T, /) -> T:
    if index.is_from_end:
        return element_from_end(handle, index, policy, default)
    with handle.cursor() as cursor:
        element = next(islice(cursor, index.value, None), MISSING)
        count = cursor.count
    if element is not MISSING:
        return element
    policy.reject(IndexOutOfRangeError(f"index {index} is out of range for {count} elements"))
    return default


def element_from_end(handle: "src.sequence_handle.SequentialOnly[T]", index: Index, policy: Policy, default: T, /) -> T:
    # ^0 is one past the last element, so it never holds an element.
    if index.value == 0:
        policy.reject(IndexOutOfRangeError(f"index {index} is out of range"))
        return default
    with handle.cursor() as cursor:
        trailing = BoundedFifo(index.value, cursor)
        count = cursor.count
    if len(trailing) < index.value:
        policy.reject(IndexOutOfRangeError(f"index {index} is out of range for {count} elements"))
        return default
    return trailing.peek()


def window(handle: "src.sequence_handle.SequentialOnly[T]", range_: Range, policy: Policy, /) -> Iterator[T]:
    with handle.cursor() as cursor:
        if range_.start.is_from_end:
            yield from take_last(cursor, range_, policy)
        elif range_.end.is_from_end:
            yield from skip_last(cursor, range_, policy)
        else:
            yield from take_between(cursor, range_, policy)


def skip_to_start(cursor: "src.sequence_handle.Cursor[T]", range_: Range, policy: Policy, /) -> Any:
    """
    Reads up to and including the element at the start of the range.

    Returns the element, or `MISSING` if the source ends first. An empty
    source has a known length of 0 and is checked the same way as a
    sequence of length 0 would be.
    """
    start = range_.start.value
    element = next(islice(cursor, start, None), MISSING)
    if element is not MISSING:
        return element
    elif cursor.count == 0:
        resolve_window(start, range_.end.get_offset(0) - 1, 0, policy)
    else:
        policy.reject(IndexOutOfRangeError(f"range {range_} starts past {cursor.count} elements"))
    return MISSING


def take_between(cursor: "src.sequence_handle.Cursor[T]", range_: Range, policy: Policy, /) -> Iterator[T]:
    start = range_.start.value
    stop = range_.end.value
    element = skip_to_start(cursor, range_, policy)
    if element is MISSING:
        return
    elif stop < start:
        policy.reject(RangeOverflowError(f"range {range_} ends before it starts"))
        return
    elif stop == start:
        return
    yield element
    yield from islice(cursor, stop - start - 1)
    if cursor.count < stop:
        policy.reject(IndexOutOfRangeError(f"range {range_} ends past {cursor.count} elements"))


def skip_last(cursor: "src.sequence_handle.Cursor[T]", range_: Range, policy: Policy, /) -> Iterator[T]:
    start = range_.start.value
    skipped = range_.end.value
    element = skip_to_start(cursor, range_, policy)
    if element is MISSING:
        return
    elif skipped == 0:
        yield element
        yield from cursor
    else:
        # Each element is held back until `skipped` newer ones are read,
        # so the last `skipped` elements are never emitted.
        delayed = BoundedFifo(skipped)
        delayed.append(element)
        for element in cursor:
            if delayed.is_full:
                yield delayed.pop()
            delayed.append(element)
    if start + skipped > cursor.count:
        policy.reject(RangeOverflowError(f"range {range_} ends before it starts for {cursor.count} elements"))


def take_last(cursor: "src.sequence_handle.Cursor[T]", range_: Range, policy: Policy, /) -> Iterator[T]:
    taken = range_.start.value
    trailing = BoundedFifo(taken, cursor)
    count = cursor.count
    first = count - taken
    last = range_.end.get_offset(count) - 1
    if count == 0 and last < first - 1:
        policy.reject(RangeOverflowError(f"range {range_} ends before it starts for 0 elements"))
        return
    elif count < taken:
        policy.reject(IndexOutOfRangeError(f"range {range_} starts before the first of {count} elements"))
        return
    elif last < first - 1:
        policy.reject(RangeOverflowError(f"range {range_} ends before it starts for {count} elements"))
        return
    elif last >= count:
        policy.reject(IndexOutOfRangeError(f"range {range_} ends past {count} elements"))
        last = count - 1
    for _ in range(last - first + 1):
        yield trailing.pop()
