from __future__ import annotations
import operator
from typing import Any, Final, Type, TypeVar

__all__ = ["Index"]

Self = TypeVar("Self", bound="Index")


class Index:
    """
    A position in a sequence, counted either from the start or from the end.

    From the start, `Index(0)` is the first element. From the end, the
    count starts one past the last element, so `Index(1, from_end=True)`
    is the last element and `Index(0, from_end=True)` is the end itself.

    Examples
    --------
        >>> Index(3)
        Index(3)
        >>> str(Index.from_end(1))
        '^1'
        >>> Index.from_end(2).get_offset(10)
        8
    """
    _from_end: Final[bool]
    _value: Final[int]

    __slots__ = {
        "_from_end":
            "If the value is counted backwards from the end.",
        "_value":
            "The non-negative offset.",
    }

    def __init__(self: Self, value: int, /, from_end: bool = False) -> None:
        value = operator.index(value)
        if value < 0:
            raise ValueError(f"index value must be non-negative, got {value!r}")
        self._from_end = bool(from_end)
        self._value = value

    def __eq__(self: Self, other: Any, /) -> bool:
        if isinstance(other, Index):
            return self._value == other._value and self._from_end == other._from_end
        else:
            return NotImplemented

    def __hash__(self: Self, /) -> int:
        return hash((type(self).__name__, self._value, self._from_end))

    def __repr__(self: Self, /) -> str:
        if self._from_end:
            return f"{type(self).__name__}({self._value!r}, from_end=True)"
        else:
            return f"{type(self).__name__}({self._value!r})"

    def __str__(self: Self, /) -> str:
        return f"^{self._value}" if self._from_end else str(self._value)

    @classmethod
    def end(cls: Type[Self], /) -> Self:
        return cls(0, from_end=True)

    @classmethod
    def from_end(cls: Type[Self], value: int, /) -> Self:
        return cls(value, from_end=True)

    @classmethod
    def from_start(cls: Type[Self], value: int, /) -> Self:
        return cls(value)

    def get_offset(self: Self, length: int, /) -> int:
        """Returns the offset from the start for a sequence of the given length, without bounds checks."""
        return length - self._value if self._from_end else self._value

    @property
    def is_from_end(self: Self, /) -> bool:
        return self._from_end

    @classmethod
    def start(cls: Type[Self], /) -> Self:
        return cls(0)

    @property
    def value(self: Self, /) -> int:
        return self._value
