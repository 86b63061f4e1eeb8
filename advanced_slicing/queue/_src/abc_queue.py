from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator
from typing import Generic, TypeVar

from .queue_protocol import QueueProtocol

T = TypeVar("T")

Self = TypeVar("Self", bound="AbstractQueue")


class AbstractQueue(QueueProtocol[T], ABC, Generic[T]):

    __slots__ = ()

    def __iadd__(self: Self, other: Iterable[T], /) -> Self:
        if not isinstance(other, Iterable):
            return NotImplemented
        self.extend(other)
        return self

    @abstractmethod
    def __iter__(self: Self, /) -> Iterator[T]:
        raise NotImplementedError

    @abstractmethod
    def __len__(self: Self, /) -> int:
        raise NotImplementedError

    @abstractmethod
    def append(self: Self, element: T, /) -> None:
        raise NotImplementedError

    def clear(self: Self, /) -> None:
        try:
            while True:
                self.pop()
        except IndexError:
            pass

    def extend(self: Self, iterable: Iterable[T], /) -> None:
        if isinstance(iterable, Iterable):
            for element in iterable:
                self.append(element)
        else:
            raise TypeError(f"expected iterable, got {iterable!r}")

    def get(self: Self, /) -> T:
        return self.pop()

    @abstractmethod
    def peek(self: Self, /) -> T:
        raise NotImplementedError

    @abstractmethod
    def pop(self: Self, /) -> T:
        raise NotImplementedError

    def push(self: Self, element: T, /) -> None:
        self.append(element)

    def put(self: Self, element: T, /) -> None:
        self.append(element)
