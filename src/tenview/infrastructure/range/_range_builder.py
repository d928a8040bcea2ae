"""
Incremental construction of multi-axis ranges.

`RangeBuilder` is the collaborator used when a view is materialized into a
container: given the target rank it accepts extents one axis at a time, in
axis order, and produces a canonical contiguous `MultiAxisRange`.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from ...domain._errors import AxisIndexError
from ._range import MultiAxisRange


class RangeBuilder:
    """
    Build a range axis by axis.

    Parameters
    ----------
    rank : int
        Number of axes the finished range will have.

    Notes
    -----
    - `next_extent` assigns the canonical column-major stride (the product of
      all previous extents).
    - `next_axis` accepts an explicit stride; ranges built with it are only
      contiguous if the strides happen to be canonical.
    """

    def __init__(self, rank: int) -> None:
        if rank < 0:
            raise ValueError(f"RangeBuilder rank must be non-negative, got {rank}")
        self._rank = rank
        self._axes: List[Tuple[int, int]] = []
        self._next_stride = 1

    @property
    def rank(self) -> int:
        return self._rank

    def _push(self, extent: int, stride: Optional[int]) -> "RangeBuilder":
        if len(self._axes) >= self._rank:
            raise AxisIndexError(len(self._axes) + 1, self._rank)
        if stride is None:
            stride = self._next_stride
        self._axes.append((extent, stride))
        self._next_stride *= extent
        return self

    def next_extent(self, extent: int) -> "RangeBuilder":
        """Append an axis with the canonical stride."""
        return self._push(extent, None)

    def next_axis(self, extent: int, stride: int) -> "RangeBuilder":
        """Append an axis with an explicit stride."""
        return self._push(extent, stride)

    def build(self) -> MultiAxisRange:
        """
        Return the finished range.

        Raises
        ------
        ValueError
            If fewer than `rank` axes have been supplied.
        """
        if len(self._axes) != self._rank:
            raise ValueError(
                f"RangeBuilder expected {self._rank} axes, got {len(self._axes)}"
            )
        return MultiAxisRange(self._axes)
