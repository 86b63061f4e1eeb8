"""
Position and range based access over any iterable, in the style of
`sequence[index]` and `sequence[start:stop]` but with positions which
may be counted from the end even when the iterable can only be read
once. Sequences are indexed directly, while other iterables are read a
single time, holding only as many elements as the from-end offsets
require.

Strict operations (`element_at`, `elements_in`) raise for positions and
ranges which cannot be satisfied. Lenient operations
(`element_at_or_default`, `slice_range`) return a default, or as much of
the range as is available, instead.
"""
import logging

from . import errors
from ._src.element_at import element_at, element_at_or_default
from ._src.elements_in import elements_in
from ._src.errors import IndexOutOfRangeError, NullSourceError, RangeOutOfBoundsError, RangeOverflowError, SlicingError
from ._src.index import Index
from ._src.range import Range
from ._src.slice_range import slice_range

__all__ = [
    "Index",
    "IndexOutOfRangeError",
    "NullSourceError",
    "Range",
    "RangeOutOfBoundsError",
    "RangeOverflowError",
    "SlicingError",
    "element_at",
    "element_at_or_default",
    "elements_in",
    "errors",
    "slice_range",
]

__version__ = "1.0.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())
