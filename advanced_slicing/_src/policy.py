import logging
from abc import ABC, abstractmethod
from typing import Final, TypeVar

from .errors import SlicingError

__all__ = ["LENIENT", "Lenient", "Policy", "STRICT", "Strict"]

logger = logging.getLogger(__name__)

Self = TypeVar("Self", bound="Policy")


class Policy(ABC):
    """
    Decides what happens when a position or range cannot be satisfied.

    The paths call `policy.reject(error)` at the point a violation is
    found and then carry on with the empty, truncated or default outcome.
    That outcome is only reached when `reject` returns.
    """

    __slots__ = ()

    def __repr__(self: Self, /) -> str:
        return f"{type(self).__name__}()"

    @abstractmethod
    def reject(self: Self, error: SlicingError, /) -> None:
        raise NotImplementedError


class Strict(Policy):

    __slots__ = ()

    def reject(self: Self, error: SlicingError, /) -> None:
        raise error


class Lenient(Policy):

    __slots__ = ()

    def reject(self: Self, error: SlicingError, /) -> None:
        logger.debug("suppressed %s: %s", type(error).__name__, error)


STRICT: Final[Strict] = Strict()
LENIENT: Final[Lenient] = Lenient()
