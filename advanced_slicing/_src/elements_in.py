from collections.abc import Iterable, Iterator
from typing import TypeVar, Union

from .policy import STRICT
from .range import Range, as_range
from .sequence_handle import probe

__all__ = ["elements_in"]

T = TypeVar("T")


def elements_in(source: Iterable[T], range_: Union[Range, slice], /) -> Iterator[T]:
    """
    Lazily iterates over the elements of the source within the range.

    The source and range are checked immediately. Bounds are checked as
    the elements are iterated over, and for iterables which are not
    sequences a violation may only be discovered after some elements
    were already produced, e.g. `Range(5, 20)` over an iterator of 10
    elements produces 5 through 9 before raising.

    Raises
    ------
        NullSourceError:
            The source is `None`, raised immediately.
        RangeOverflowError:
            The range ends before it starts.
        IndexOutOfRangeError:
            The range starts before the source or reaches past the end of
            a source read once.
        RangeOutOfBoundsError:
            The range reaches past the end of a sequence.

    Examples
    --------
        >>> [*elements_in(range(10), Range(1, 5))]
        [1, 2, 3, 4]
        >>> [*elements_in(iter(range(10)), Range(Index.from_end(9), 5))]
        [1, 2, 3, 4]
    """
    handle = probe(source)
    return handle.window(as_range(range_), STRICT)
