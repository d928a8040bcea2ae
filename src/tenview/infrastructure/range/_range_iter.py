"""
Rank-N range iterator.

`RangeIterator` generalizes `SingleAxisRangeIter` to any range satisfying
`IRange`. It walks the cartesian product of the per-axis index ranges like an
odometer with axis 1 as the fastest-turning wheel, keeping the current
1-based index tuple and linear offset up to date incrementally.

Sentinel
--------
Iterators are ordered by *position* (how many steps from begin). The end
sentinel sits at position ``total_count()``; its index tuple is
``(1, ..., 1, extent(rank) + 1)``, i.e. the last wheel rolled past its
extent. Position-based comparison stays meaningful for ranges whose strides
alias (zero or overlapping strides), where offsets alone are not unique.
"""

from __future__ import annotations

from typing import List, Tuple

from ...domain._access_mode import is_checked
from ...domain._range import IRange


class RangeIterator:
    """
    Forward iterator over the index space of a range.

    Parameters
    ----------
    rng : IRange
        Range to walk. Any object with `rank`, `extent(i)`, `stride(i)` and
        `total_count` works, including `SingleAxisRange`.
    """

    __slots__ = ("_range", "_extents", "_strides", "_inds", "_offset", "_pos", "_total")

    def __init__(self, rng: IRange) -> None:
        r = rng.rank()
        self._range = rng
        self._extents: Tuple[int, ...] = tuple(rng.extent(i) for i in range(1, r + 1))
        self._strides: Tuple[int, ...] = tuple(rng.stride(i) for i in range(1, r + 1))
        self._inds: List[int] = [1] * r
        self._offset = 0
        self._pos = 0
        self._total = rng.total_count()
        if self._total == 0:
            self._set_end()

    @classmethod
    def make_end(cls, rng: IRange) -> "RangeIterator":
        it = cls(rng)
        it._set_end()
        return it

    def _set_end(self) -> None:
        self._pos = self._total
        if not self._inds:
            self._offset = 0
            return
        self._inds = [1] * len(self._inds)
        self._inds[-1] = self._extents[-1] + 1
        self._offset = self._strides[-1] * self._extents[-1]

    @property
    def offset(self) -> int:
        return self._offset

    @property
    def index(self) -> Tuple[int, ...]:
        return tuple(self._inds)

    @property
    def position(self) -> int:
        return self._pos

    @property
    def range(self) -> IRange:
        return self._range

    def at_end(self) -> bool:
        return self._pos >= self._total

    def _step(self) -> None:
        self._pos += 1
        if self._pos >= self._total:
            self._set_end()
            return
        inds = self._inds
        for k, (ext, st) in enumerate(zip(self._extents, self._strides)):
            inds[k] += 1
            self._offset += st
            if inds[k] <= ext:
                return
            # Wheel k rolled over: rewind it and carry into the next axis.
            self._offset -= st * ext
            inds[k] = 1

    def advance(self, n: int = 1) -> "RangeIterator":
        if n < 0:
            raise ValueError("RangeIterator is forward-only")
        for _ in range(n):
            if self.at_end():
                break
            self._step()
        return self

    def __iadd__(self, n: int) -> "RangeIterator":
        return self.advance(n)

    def copy(self) -> "RangeIterator":
        it = RangeIterator.__new__(RangeIterator)
        it._range = self._range
        it._extents = self._extents
        it._strides = self._strides
        it._inds = list(self._inds)
        it._offset = self._offset
        it._pos = self._pos
        it._total = self._total
        return it

    def _check_comparable(self, other: "RangeIterator") -> None:
        if is_checked() and (
            self._extents != other._extents or self._strides != other._strides
        ):
            raise ValueError("Cannot compare iterators over different ranges")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RangeIterator):
            return NotImplemented
        self._check_comparable(other)
        return self._pos == other._pos

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __lt__(self, other: "RangeIterator") -> bool:
        if not isinstance(other, RangeIterator):
            return NotImplemented
        self._check_comparable(other)
        return self._pos < other._pos

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"RangeIterator(index={self.index}, offset={self._offset}, "
            f"position={self._pos}/{self._total})"
        )
