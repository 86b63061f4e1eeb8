import logging
from abc import ABC, abstractmethod
from collections import deque
from collections.abc import Iterable, Iterator, Sequence
from types import TracebackType
from typing import Final, Generic, Optional, Type, TypeVar

from . import forward_scan, random_access
from .errors import NullSourceError
from .index import Index
from .policy import Policy
from .range import Range

__all__ = ["Cursor", "RandomAccess", "SequenceHandle", "SequentialOnly", "probe"]

logger = logging.getLogger(__name__)

ET = TypeVar("ET", bound=BaseException)
T = TypeVar("T")

Self = TypeVar("Self", bound="SequenceHandle")
CursorSelf = TypeVar("CursorSelf", bound="Cursor")


class Cursor(Iterator[T], Generic[T]):
    """
    A one-shot iterator over a source that counts the elements read.

    Closing the cursor releases the underlying iterator exactly once,
    calling its `close()` if it has one (e.g. generators). Use it as a
    context manager so it is released on every exit path.
    """
    _count: int
    _iterator: Optional[Iterator[T]]

    __slots__ = {
        "_count":
            "The amount of elements read so far.",
        "_iterator":
            "The underlying iterator, or `None` once released.",
    }

    def __init__(self: CursorSelf, iterable: Iterable[T], /) -> None:
        self._count = 0
        self._iterator = iter(iterable)

    def __enter__(self: CursorSelf, /) -> CursorSelf:
        return self

    def __exit__(
        self: CursorSelf,
        exc_type: Optional[Type[ET]],
        exc_val: Optional[ET],
        exc_traceback: Optional[TracebackType],
        /,
    ) -> None:
        self.close()

    def __iter__(self: CursorSelf, /) -> CursorSelf:
        return self

    def __next__(self: CursorSelf, /) -> T:
        if self._iterator is None:
            raise ValueError("cannot read from a released cursor")
        element = next(self._iterator)
        self._count += 1
        return element

    def close(self: CursorSelf, /) -> None:
        iterator, self._iterator = self._iterator, None
        if iterator is None:
            return
        close = getattr(iterator, "close", None)
        if close is not None:
            close()

    @property
    def closed(self: CursorSelf, /) -> bool:
        return self._iterator is None

    @property
    def count(self: CursorSelf, /) -> int:
        return self._count


class SequenceHandle(ABC, Generic[T]):
    """A source classified by what it can do, either `RandomAccess` or `SequentialOnly`."""

    __slots__ = ()

    @abstractmethod
    def element_at(self: Self, index: Index, policy: Policy, default: T, /) -> T:
        raise NotImplementedError

    @abstractmethod
    def window(self: Self, range_: Range, policy: Policy, /) -> Iterator[T]:
        raise NotImplementedError


class RandomAccess(SequenceHandle[T], Generic[T]):
    _sequence: Final[Sequence[T]]

    __slots__ = {
        "_sequence":
            "A sequence with constant time `len` and indexing.",
    }

    def __init__(self: Self, sequence: Sequence[T], /) -> None:
        self._sequence = sequence

    def __repr__(self: Self, /) -> str:
        return f"{type(self).__name__}({self._sequence!r})"

    @property
    def count(self: Self, /) -> int:
        return len(self._sequence)

    def element_at(self: Self, index: Index, policy: Policy, default: T, /) -> T:
        return random_access.element_at(self, index, policy, default)

    def get(self: Self, index: int, /) -> T:
        return self._sequence[index]

    def window(self: Self, range_: Range, policy: Policy, /) -> Iterator[T]:
        return random_access.window(self, range_, policy)


class SequentialOnly(SequenceHandle[T], Generic[T]):
    _iterable: Final[Iterable[T]]

    __slots__ = {
        "_iterable":
            "An iterable which may only be read once, in order.",
    }

    def __init__(self: Self, iterable: Iterable[T], /) -> None:
        self._iterable = iterable

    def __repr__(self: Self, /) -> str:
        return f"{type(self).__name__}({self._iterable!r})"

    def cursor(self: Self, /) -> Cursor[T]:
        return Cursor(self._iterable)

    def element_at(self: Self, index: Index, policy: Policy, default: T, /) -> T:
        return forward_scan.element_at(self, index, policy, default)

    def window(self: Self, range_: Range, policy: Policy, /) -> Iterator[T]:
        return forward_scan.window(self, range_, policy)


def probe(source: Optional[Iterable[T]], /) -> SequenceHandle[T]:
    """
    Classifies the source for a single call.

    Sequences support constant time `len` and indexing and are read by
    position. Every other iterable is read once, front to back. Deques
    only index their ends in constant time, so they are read in order.
    """
    if source is None:
        raise NullSourceError("source must not be None")
    elif isinstance(source, Sequence) and not isinstance(source, deque):
        logger.debug("random access path for %s", type(source).__name__)
        return RandomAccess(source)
    elif isinstance(source, Iterable):
        logger.debug("sequential path for %s", type(source).__name__)
        return SequentialOnly(source)
    else:
        raise TypeError(f"expected an iterable source, got {source!r}")
