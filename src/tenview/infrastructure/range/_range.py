"""
Multi-axis range: the geometry of an N-dimensional strided index space.

`MultiAxisRange` is an immutable, ordered sequence of `AxisDescriptor`s.
It maps a 1-based multi-index ``(i1, ..., iN)`` to the linear offset
``sum(stride_k * (i_k - 1))``.

Canonical layout
----------------
The canonical (contiguous) packing is column-major: axis 1 has stride 1 and
each following axis strides over the full extent of the previous ones::

    stride(1) = 1
    stride(k) = stride(k - 1) * extent(k - 1)

Iteration always walks axis 1 fastest; custom strides change the offsets
produced, never the order in which index tuples are visited.
"""

from __future__ import annotations

import math
from typing import Iterable, Iterator, Sequence, Tuple, Union

from ...domain._access_mode import is_checked
from ...domain._errors import AxisIndexError, IndexOutOfRangeError, RankMismatchError
from ._axis import AxisDescriptor, SingleAxisRange
from ._range_iter import RangeIterator

AxisLike = Union[AxisDescriptor, SingleAxisRange, Tuple[int, int]]


def _as_axis(a: AxisLike) -> AxisDescriptor:
    if isinstance(a, AxisDescriptor):
        return a
    if isinstance(a, SingleAxisRange):
        return a.axis
    extent, stride = a
    return AxisDescriptor(extent, stride)


def canonical_strides(extents: Sequence[int]) -> Tuple[int, ...]:
    """
    Compute column-major strides for `extents`.

    Example: extents (2, 3, 4) -> strides (1, 2, 6).
    """
    strides = []
    step = 1
    for e in extents:
        strides.append(step)
        step *= e
    return tuple(strides)


class MultiAxisRange:
    """
    Rank-N range built from an ordered sequence of axes.

    Parameters
    ----------
    axes : Iterable[AxisDescriptor | SingleAxisRange | tuple[int, int]]
        Axes in order. ``(extent, stride)`` tuples are accepted.
    """

    __slots__ = ("_axes",)

    def __init__(self, axes: Iterable[AxisLike] = ()) -> None:
        self._axes: Tuple[AxisDescriptor, ...] = tuple(_as_axis(a) for a in axes)

    @classmethod
    def from_dims(cls, *dims: int) -> "MultiAxisRange":
        """Build the canonical contiguous range for extents `dims`."""
        if len(dims) == 1 and isinstance(dims[0], (tuple, list)):
            dims = tuple(dims[0])
        return cls(zip(dims, canonical_strides(dims)))

    @classmethod
    def from_extents_strides(
        cls, extents: Sequence[int], strides: Sequence[int]
    ) -> "MultiAxisRange":
        if len(extents) != len(strides):
            raise RankMismatchError(len(extents), len(strides), op="range construction")
        return cls(zip(extents, strides))

    # ------------------------------------------------------------------
    # Geometry
    # ------------------------------------------------------------------
    @property
    def axes(self) -> Tuple[AxisDescriptor, ...]:
        return self._axes

    def rank(self) -> int:
        return len(self._axes)

    def _axis(self, i: int) -> AxisDescriptor:
        if not 1 <= i <= len(self._axes):
            raise AxisIndexError(i, len(self._axes))
        return self._axes[i - 1]

    def extent(self, i: int) -> int:
        return self._axis(i).extent

    def stride(self, i: int) -> int:
        return self._axis(i).stride

    def extents(self) -> Tuple[int, ...]:
        return tuple(a.extent for a in self._axes)

    def strides(self) -> Tuple[int, ...]:
        return tuple(a.stride for a in self._axes)

    def total_count(self) -> int:
        return math.prod(a.extent for a in self._axes)

    def is_contiguous(self) -> bool:
        return self.strides() == canonical_strides(self.extents())

    def normalized(self) -> "MultiAxisRange":
        """Return the canonical contiguous range with the same extents."""
        return MultiAxisRange.from_dims(*self.extents())

    def max_offset(self) -> int:
        """Largest linear offset reachable through this range (0 if empty)."""
        if self.total_count() == 0:
            return 0
        return sum(max(0, a.stride * (a.extent - 1)) for a in self._axes)

    # ------------------------------------------------------------------
    # Index arithmetic
    # ------------------------------------------------------------------
    def offset(self, *inds: int) -> int:
        """
        Linear offset of the 1-based multi-index `inds`.

        A single sequence argument is accepted in place of separate indices.

        Raises
        ------
        RankMismatchError
            If the number of indices differs from the rank.
        IndexOutOfRangeError
            In checked mode, if any index is outside its axis extent.
        """
        if len(inds) == 1 and isinstance(inds[0], (tuple, list)):
            inds = tuple(inds[0])
        if len(inds) != len(self._axes):
            raise RankMismatchError(len(self._axes), len(inds))
        off = 0
        checked = is_checked()
        for n, (i, a) in enumerate(zip(inds, self._axes), start=1):
            if checked and not 1 <= i <= a.extent:
                raise IndexOutOfRangeError(n, i, a.extent)
            off += a.stride * (i - 1)
        return off

    def begin(self) -> RangeIterator:
        return RangeIterator(self)

    def end(self) -> RangeIterator:
        return RangeIterator.make_end(self)

    def __iter__(self) -> Iterator[int]:
        it = self.begin()
        end = self.end()
        while it != end:
            yield it.offset
            it.advance()

    def __len__(self) -> int:
        return self.total_count()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MultiAxisRange):
            return NotImplemented
        return self._axes == other._axes

    def __hash__(self) -> int:
        return hash(self._axes)

    def __copy__(self) -> "MultiAxisRange":
        return MultiAxisRange(self._axes)

    def copy(self) -> "MultiAxisRange":
        return self.__copy__()

    def __str__(self) -> str:
        return "".join(str(a) for a in self._axes) if self._axes else "()"

    def __repr__(self) -> str:
        return f"MultiAxisRange({list(zip(self.extents(), self.strides()))})"
