import operator
from collections.abc import Iterable, Iterator
from itertools import chain
from typing import Any, Generic, Optional, TypeVar

from .abc_queue import AbstractQueue

__all__ = ["BoundedFifo"]

T = TypeVar("T")

Self = TypeVar("Self", bound="BoundedFifo")

reprs_seen: set[int] = set()


class BoundedFifo(AbstractQueue[T], Generic[T]):
    """
    A first-in first-out queue holding at most `capacity` elements.

    Appending to a full queue evicts the oldest element first, so the
    queue always holds the most recent `capacity` elements appended.
    A capacity of 0 retains nothing.
    """
    _back: list[T]
    _capacity: int
    _front: list[T]

    __slots__ = {
        "_back":
            "A list that contains the back of the data in order.",
        "_capacity":
            "The maximum amount of elements retained.",
        "_front":
            "A list that contains the front of the data in reversed order.",
    }

    def __init__(self: Self, capacity: int, iterable: Optional[Iterable[T]] = None, /) -> None:
        capacity = operator.index(capacity)
        if capacity < 0:
            raise ValueError(f"capacity must be non-negative, got {capacity!r}")
        self._back = []
        self._capacity = capacity
        self._front = []
        if iterable is not None:
            self.extend(iterable)

    def __contains__(self: Self, element: Any, /) -> bool:
        return element in self._front or element in self._back

    def __getitem__(self: Self, index: int, /) -> T:
        index = range(len(self))[index]
        if index < len(self._front):
            return self._front[~index]
        else:
            return self._back[index - len(self._front)]

    def __iter__(self: Self, /) -> Iterator[T]:
        return chain(reversed(self._front), self._back)

    def __len__(self: Self, /) -> int:
        return len(self._front) + len(self._back)

    def __repr__(self: Self, /) -> str:
        if id(self) in reprs_seen:
            return "..."
        elif len(self) == 0:
            return f"{type(self).__name__}({self._capacity!r})"
        reprs_seen.add(id(self))
        try:
            data = ", ".join([repr(x) for x in self])
            return f"{type(self).__name__}({self._capacity!r}, [{data}])"
        finally:
            reprs_seen.remove(id(self))

    def __reversed__(self: Self, /) -> Iterator[T]:
        return chain(reversed(self._back), self._front)

    def append(self: Self, element: T, /) -> None:
        if self._capacity == 0:
            return
        elif len(self) == self._capacity:
            self.pop()
        self._back.append(element)

    @property
    def capacity(self: Self, /) -> int:
        return self._capacity

    def clear(self: Self, /) -> None:
        self._back.clear()
        self._front.clear()

    @property
    def is_full(self: Self, /) -> bool:
        return len(self) == self._capacity

    def peek(self: Self, /) -> T:
        if len(self._front) > 0:
            return self._front[-1]
        elif len(self._back) > 0:
            return self._back[0]
        else:
            raise IndexError("cannot peek from empty queue")

    def pop(self: Self, /) -> T:
        if len(self._front) == 0:
            if len(self._back) == 0:
                raise IndexError("cannot pop from empty queue")
            # Move the back over to the front, reversing it in place.
            self._back.reverse()
            self._back, self._front = self._front, self._back
        return self._front.pop()
