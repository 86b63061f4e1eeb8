from __future__ import annotations
import operator
from typing import Any, Final, Type, TypeVar, Union

from .index import Index

__all__ = ["Range"]

Self = TypeVar("Self", bound="Range")


def as_index(index: Union[Index, int], /) -> Index:
    if isinstance(index, Index):
        return index
    try:
        return Index(operator.index(index))
    except TypeError:
        raise TypeError(f"expected an Index or an integer, got {index!r}") from None


class Range:
    """
    A half-open window `start..end` over a sequence.

    `start` is inclusive and `end` is exclusive. Either may be counted
    from the end, e.g. `Range(1, Index.from_end(1))` drops the first and
    last elements. Plain integers are taken as offsets from the start.
    """
    _end: Final[Index]
    _start: Final[Index]

    __slots__ = {
        "_end":
            "The exclusive end index.",
        "_start":
            "The inclusive start index.",
    }

    def __init__(self: Self, start: Union[Index, int], end: Union[Index, int], /) -> None:
        self._end = as_index(end)
        self._start = as_index(start)

    def __eq__(self: Self, other: Any, /) -> bool:
        if isinstance(other, Range):
            return self._start == other._start and self._end == other._end
        else:
            return NotImplemented

    def __hash__(self: Self, /) -> int:
        return hash((type(self).__name__, self._start, self._end))

    def __repr__(self: Self, /) -> str:
        return f"{type(self).__name__}({self._start!r}, {self._end!r})"

    def __str__(self: Self, /) -> str:
        return f"{self._start}..{self._end}"

    @classmethod
    def all(cls: Type[Self], /) -> Self:
        return cls(Index.start(), Index.end())

    @property
    def end(self: Self, /) -> Index:
        return self._end

    @classmethod
    def end_at(cls: Type[Self], end: Union[Index, int], /) -> Self:
        return cls(Index.start(), end)

    @classmethod
    def from_slice(cls: Type[Self], index: slice, /) -> Self:
        """
        Converts `sequence[start:stop]` notation into a range.

        Negative bounds count from the end and missing bounds extend to
        the start or end of the sequence. Only steps of `None` or `1`
        describe a contiguous window.
        """
        if not isinstance(index, slice):
            raise TypeError(f"expected a slice, got {index!r}")
        elif index.step is not None and operator.index(index.step) != 1:
            raise ValueError(f"ranges only support a step of 1, got {index.step!r}")
        start = Index.start() if index.start is None else from_int(index.start)
        end = Index.end() if index.stop is None else from_int(index.stop)
        return cls(start, end)

    @property
    def start(self: Self, /) -> Index:
        return self._start

    @classmethod
    def start_at(cls: Type[Self], start: Union[Index, int], /) -> Self:
        return cls(start, Index.end())


def from_int(value: int, /) -> Index:
    value = operator.index(value)
    return Index.from_end(-value) if value < 0 else Index(value)


def as_range(range_: Union[Range, slice], /) -> Range:
    if isinstance(range_, Range):
        return range_
    elif isinstance(range_, slice):
        return Range.from_slice(range_)
    else:
        raise TypeError(f"expected a Range or a slice, got {range_!r}")
