from collections.abc import Iterator
from typing import Optional, TypeVar

import advanced_slicing._src as src
from .errors import IndexOutOfRangeError, RangeOutOfBoundsError, RangeOverflowError
from .index import Index
from .policy import Policy
from .range import Range

__all__ = ["element_at", "resolve_window", "window"]

T = TypeVar("T")


def element_at(handle: "src.sequence_handle.RandomAccess[T]", index: Index, policy: Policy, default: T, /) -> T:
    count = handle.count
    offset = index.get_offset(count)
    if 0 <= offset < count:
        return handle.get(offset)
    policy.reject(IndexOutOfRangeError(f"index {index} is out of range for {count} elements"))
    return default


def resolve_window(first: int, last: int, count: int, policy: Policy, /) -> Optional[tuple[int, int]]:
    """
    Checks the inclusive window `first..last` against `count` elements.

    Returns the window to emit, or `None` if nothing should be emitted.
    Past the end, the window is intersected with the elements available
    once the policy lets the violation through.
    """
    if count == 0 and first == 0 and last == -1:
        return None
    elif last < first - 1:
        policy.reject(RangeOverflowError(f"range {first}..{last + 1} ends before it starts"))
        return None
    elif first < 0 or last < 0:
        policy.reject(IndexOutOfRangeError(f"range {first}..{last + 1} is out of range for {count} elements"))
        return None
    elif first >= count or last >= count:
        policy.reject(RangeOutOfBoundsError(f"range {first}..{last + 1} exceeds {count} elements"))
        if first >= count:
            return None
        last = count - 1
    return first, last


def window(handle: "src.sequence_handle.RandomAccess[T]", range_: Range, policy: Policy, /) -> Iterator[T]:
    count = handle.count
    bounds = resolve_window(range_.start.get_offset(count), range_.end.get_offset(count) - 1, count, policy)
    if bounds is None:
        return
    first, last = bounds
    for index in range(first, last + 1):
        yield handle.get(index)
