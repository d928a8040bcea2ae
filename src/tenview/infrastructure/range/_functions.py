"""
Free functions over ranges.

These mirror the range methods so algorithms can be written against any
`IRange` without caring whether it is a single- or multi-axis range.
"""

from __future__ import annotations

from typing import Union

import numpy as np

from ...domain._range import IRange
from ._axis import SingleAxisRange
from ._range import MultiAxisRange

AnyRange = Union[SingleAxisRange, MultiAxisRange]


def normalize(r: AnyRange) -> AnyRange:
    """Return a unit-stride (canonical) range with the same extents."""
    return r.normalized()


def offset_of(r: AnyRange, *inds: int) -> int:
    """Linear offset of the 1-based index (or multi-index) `inds` in `r`."""
    return r.offset(*inds)


def total_count(r: AnyRange) -> int:
    return r.total_count()


def is_contiguous(r: AnyRange) -> bool:
    return r.is_contiguous()


def is_normal(r: AnyRange) -> bool:
    return r.is_contiguous()


def offsets_array(r: IRange) -> np.ndarray:
    """
    Return every linear offset of `r` in traversal order as an int array.

    This is the vectorized equivalent of ``list(RangeIterator walk)``: axis 1
    varies fastest. Used wherever whole-range gathers or scatters are needed.
    """
    offsets = np.zeros(1, dtype=np.intp)
    for n in range(1, r.rank() + 1):
        steps = np.arange(r.extent(n), dtype=np.intp) * r.stride(n)
        # Outer axis goes first so the C-order ravel keeps earlier axes fastest.
        offsets = np.add.outer(steps, offsets).ravel()
    return offsets
