import operator
from collections.abc import Iterable
from typing import Optional, TypeVar, Union

from .errors import IndexOutOfRangeError
from .index import Index
from .policy import LENIENT, STRICT, Policy
from .sequence_handle import probe

__all__ = ["element_at", "element_at_or_default"]

T = TypeVar("T")


def locate(source: Optional[Iterable[T]], position: Union[Index, int], policy: Policy, default: T, /) -> T:
    handle = probe(source)
    if isinstance(position, Index):
        return handle.element_at(position, policy, default)
    try:
        position = operator.index(position)
    except TypeError:
        raise TypeError(f"expected an Index or an integer position, got {position!r}") from None
    if position < 0:
        policy.reject(IndexOutOfRangeError(f"index {position} is negative"))
        return default
    return handle.element_at(Index(position), policy, default)


def element_at(source: Iterable[T], position: Union[Index, int], /) -> T:
    """
    Returns the element at the given position of the source.

    The position is either a non-negative integer counted from the start
    or an `Index`, which may count from the end. Sequences are indexed
    directly. Other iterables are read once, keeping at most `n` elements
    for `Index.from_end(n)`.

    Raises
    ------
        NullSourceError:
            The source is `None`.
        IndexOutOfRangeError:
            The position is negative or not in the source.

    Examples
    --------
        >>> element_at(range(10), 3)
        3
        >>> element_at(iter(range(10)), Index.from_end(1))
        9
    """
    return locate(source, position, STRICT, None)


def element_at_or_default(source: Iterable[T], position: Union[Index, int], /, default: Optional[T] = None) -> Optional[T]:
    """Same as `element_at`, but returns the default instead of raising for a missing position."""
    return locate(source, position, LENIENT, default)
