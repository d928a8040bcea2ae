"""
Single-axis range primitive and its forward iterator.

`AxisDescriptor` is the (extent, stride) pair describing one dimension.
`SingleAxisRange` wraps one descriptor and behaves as a rank-1 range: it maps
a 1-based index ``i`` to the linear offset ``stride * (i - 1)`` and can be
walked with `SingleAxisRangeIter`.

Iterator contract
-----------------
- The iterator value is the current 1-based index; ``offset == index - 1``.
- Advancing moves the index by ``stride`` (or ``n * stride``).
- The end sentinel has index ``1 + stride * extent``, one stride past the
  last valid position, giving a half-open ``[begin, end)`` walk.
- Equality and ordering compare offsets and assume both iterators share a
  stride. Mixing strides raises ``ValueError`` in checked access mode and is
  unspecified otherwise.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional

from ...domain._access_mode import is_checked
from ...domain._errors import AxisIndexError, IndexOutOfRangeError


@dataclass(frozen=True)
class AxisDescriptor:
    """
    One dimension of a range.

    Parameters
    ----------
    extent : int
        Number of valid indices (``1..extent``). Must be non-negative.
    stride : int
        Linear-offset contribution of a unit index increment.
    """

    extent: int
    stride: int = 1

    def __post_init__(self) -> None:
        if int(self.extent) != self.extent or self.extent < 0:
            raise ValueError(f"Axis extent must be a non-negative integer, got {self.extent!r}")
        if int(self.stride) != self.stride:
            raise ValueError(f"Axis stride must be an integer, got {self.stride!r}")
        object.__setattr__(self, "extent", int(self.extent))
        object.__setattr__(self, "stride", int(self.stride))

    def __str__(self) -> str:
        return f"(extent={self.extent},stride={self.stride})"


class SingleAxisRange:
    """
    Rank-1 range over a single strided axis.

    Parameters
    ----------
    extent : int
        Number of elements along the axis.
    stride : int, optional
        Offset step per index increment. Defaults to 1 (unit stride).
    """

    __slots__ = ("_axis",)

    def __init__(self, extent: int = 0, stride: int = 1) -> None:
        self._axis = AxisDescriptor(extent, stride)

    @classmethod
    def from_axis(cls, axis: AxisDescriptor) -> "SingleAxisRange":
        return cls(axis.extent, axis.stride)

    @property
    def axis(self) -> AxisDescriptor:
        return self._axis

    def rank(self) -> int:
        return 1

    def extent(self, i: Optional[int] = None) -> int:
        """Return the extent; `i`, when given, must be 1."""
        if i is not None and i != 1:
            raise AxisIndexError(i, 1)
        return self._axis.extent

    def stride(self, i: Optional[int] = None) -> int:
        """Return the stride; `i`, when given, must be 1."""
        if i is not None and i != 1:
            raise AxisIndexError(i, 1)
        return self._axis.stride

    def total_count(self) -> int:
        return self._axis.extent

    def is_contiguous(self) -> bool:
        return self._axis.stride == 1

    is_normal = is_contiguous

    def normalized(self) -> "SingleAxisRange":
        """Return a unit-stride range with the same extent."""
        return SingleAxisRange(self._axis.extent)

    def offset(self, index: int) -> int:
        """
        Convert a 1-based index into a linear offset.

        Raises
        ------
        IndexOutOfRangeError
            In checked mode, if `index` is outside ``1..extent``.
        """
        if is_checked() and not 1 <= index <= self._axis.extent:
            raise IndexOutOfRangeError(1, index, self._axis.extent)
        return self._axis.stride * (index - 1)

    def begin(self) -> "SingleAxisRangeIter":
        return SingleAxisRangeIter(self._axis.stride)

    def end(self) -> "SingleAxisRangeIter":
        return SingleAxisRangeIter.make_end(self)

    def __iter__(self) -> Iterator[int]:
        # Counted, so zero and negative strides still yield `extent` offsets.
        it = self.begin()
        for _ in range(self._axis.extent):
            yield it.offset
            it.advance()

    def __len__(self) -> int:
        return self._axis.extent

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SingleAxisRange):
            return NotImplemented
        return self._axis == other._axis

    def __hash__(self) -> int:
        return hash(self._axis)

    def __copy__(self) -> "SingleAxisRange":
        return SingleAxisRange.from_axis(self._axis)

    def copy(self) -> "SingleAxisRange":
        return self.__copy__()

    def __str__(self) -> str:
        return str(self._axis)

    def __repr__(self) -> str:
        return f"SingleAxisRange(extent={self._axis.extent}, stride={self._axis.stride})"


class SingleAxisRangeIter:
    """
    Forward iterator over a `SingleAxisRange`.

    The iterator is also usable as a bidirectional cursor through `retreat`
    and ``-=``; the Python iterator protocol only walks forward.
    """

    __slots__ = ("_ind", "_stride")

    def __init__(self, stride: int = 0, index: int = 1) -> None:
        self._ind = index
        self._stride = stride

    @classmethod
    def make_end(cls, r: SingleAxisRange) -> "SingleAxisRangeIter":
        return cls(r.stride(), 1 + r.stride() * r.extent())

    @property
    def offset(self) -> int:
        return self._ind - 1

    @property
    def index(self) -> int:
        return self._ind

    @property
    def stride(self) -> int:
        return self._stride

    def advance(self, n: int = 1) -> "SingleAxisRangeIter":
        self._ind += n * self._stride
        return self

    def retreat(self, n: int = 1) -> "SingleAxisRangeIter":
        self._ind -= n * self._stride
        return self

    def __iadd__(self, n: int) -> "SingleAxisRangeIter":
        return self.advance(n)

    def __isub__(self, n: int) -> "SingleAxisRangeIter":
        return self.retreat(n)

    def __add__(self, n: int) -> "SingleAxisRangeIter":
        return self.copy().advance(n)

    def __sub__(self, n: int) -> "SingleAxisRangeIter":
        return self.copy().retreat(n)

    def copy(self) -> "SingleAxisRangeIter":
        return SingleAxisRangeIter(self._stride, self._ind)

    def _check_comparable(self, other: "SingleAxisRangeIter") -> None:
        if is_checked() and self._stride != other._stride:
            raise ValueError(
                f"Cannot compare iterators with different strides "
                f"({self._stride} vs {other._stride})"
            )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SingleAxisRangeIter):
            return NotImplemented
        self._check_comparable(other)
        return self.offset == other.offset

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __lt__(self, other: "SingleAxisRangeIter") -> bool:
        if not isinstance(other, SingleAxisRangeIter):
            return NotImplemented
        self._check_comparable(other)
        return self.offset < other.offset

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"SingleAxisRangeIter(index={self._ind}, stride={self._stride})"
