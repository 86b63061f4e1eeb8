__all__ = [
    "IndexOutOfRangeError",
    "NullSourceError",
    "RangeOutOfBoundsError",
    "RangeOverflowError",
    "SlicingError",
]


class SlicingError(Exception):
    """Base class for every error raised while indexing or slicing a source."""


class NullSourceError(SlicingError, TypeError):
    """The source is missing (`None`). Raised regardless of the policy."""


class IndexOutOfRangeError(SlicingError, IndexError):
    """A position or range boundary lies outside the source or was never reached."""


class RangeOverflowError(SlicingError, ValueError):
    """The end of a range resolves to before its start."""


class RangeOutOfBoundsError(SlicingError, IndexError):
    """The start or end of a range lies past the end of a source of known length."""
