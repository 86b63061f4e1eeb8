from __future__ import annotations

from collections.abc import Iterator

import pytest


class ForwardOnly:
    """An iterable which may only be iterated over once and records when it is released."""

    def __init__(self, n: int) -> None:
        self.n = n
        self.iterations = 0
        self.read = 0
        self.released = 0

    def __iter__(self) -> Iterator[int]:
        self.iterations += 1
        if self.iterations > 1:
            raise RuntimeError("source iterated over more than once")
        return self._generate()

    def _generate(self) -> Iterator[int]:
        try:
            for i in range(self.n):
                self.read += 1
                yield i
        finally:
            self.released += 1


class Tracked:
    """An element which counts how many instances are alive at once."""

    alive = 0
    peak = 0

    def __init__(self, value: int) -> None:
        self.value = value
        type(self).alive += 1
        type(self).peak = max(type(self).peak, type(self).alive)

    def __del__(self) -> None:
        type(self).alive -= 1

    @classmethod
    def reset(cls) -> None:
        cls.alive = 0
        cls.peak = 0


@pytest.fixture
def forward_only():
    return ForwardOnly


@pytest.fixture
def tracked():
    Tracked.reset()
    yield Tracked
    Tracked.reset()
