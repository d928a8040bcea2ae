"""
Range primitives: single-axis and multi-axis geometry, iterators and builder.
"""

from ._axis import AxisDescriptor, SingleAxisRange, SingleAxisRangeIter
from ._range_iter import RangeIterator
from ._range import MultiAxisRange, canonical_strides
from ._range_builder import RangeBuilder
from ._functions import (
    normalize,
    offset_of,
    total_count,
    is_contiguous,
    is_normal,
    offsets_array,
)

__all__ = [
    AxisDescriptor.__name__,
    SingleAxisRange.__name__,
    SingleAxisRangeIter.__name__,
    RangeIterator.__name__,
    MultiAxisRange.__name__,
    canonical_strides.__name__,
    RangeBuilder.__name__,
    normalize.__name__,
    offset_of.__name__,
    total_count.__name__,
    is_contiguous.__name__,
    is_normal.__name__,
    offsets_array.__name__,
]
