from ._src.errors import (
    IndexOutOfRangeError,
    NullSourceError,
    RangeOutOfBoundsError,
    RangeOverflowError,
    SlicingError,
)

__all__ = [
    "IndexOutOfRangeError",
    "NullSourceError",
    "RangeOutOfBoundsError",
    "RangeOverflowError",
    "SlicingError",
]
