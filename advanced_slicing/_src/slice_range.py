from collections.abc import Iterable, Iterator
from typing import TypeVar, Union

from .policy import LENIENT
from .range import Range, as_range
from .sequence_handle import probe

__all__ = ["slice_range"]

T = TypeVar("T")


def slice_range(source: Iterable[T], range_: Union[Range, slice], /) -> Iterator[T]:
    """
    Lazily iterates over the elements of the source within the range,
    limited to the elements which are actually available.

    Never raises for the range itself: an inverted range or one starting
    outside of the source produces nothing, and one running past the end
    stops at the end. Only a `None` source raises (`NullSourceError`).

    Examples
    --------
        >>> [*slice_range(range(10), Range(8, 20))]
        [8, 9]
        >>> [*slice_range(range(10), Range(20, 25))]
        []
    """
    handle = probe(source)
    return handle.window(as_range(range_), LENIENT)
