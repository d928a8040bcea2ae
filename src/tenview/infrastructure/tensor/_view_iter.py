"""
Element iterators over tensor views.

`TensorIterator` pairs a data span with a `RangeIterator`: the range iterator
supplies the current multi-index and linear offset, the span turns the offset
into an element. `MutableTensorIterator` additionally lets the current
element be assigned.

Both also implement the Python iterator protocol, yielding element values
from the current position until the end of the range.
"""

from __future__ import annotations

from typing import Any, Tuple

from ...domain._range import IRange
from ..range._range_iter import RangeIterator
from ..storage._data_span import ConstDataSpan, DataSpan


class TensorIterator:
    """
    Read-only element iterator.

    Parameters
    ----------
    span : ConstDataSpan
        Storage addressed by the iterator.
    rng : IRange
        Range walked by the iterator.
    """

    __slots__ = ("_span", "_it")

    def __init__(self, span: ConstDataSpan, rng: IRange) -> None:
        self._span = span
        self._it = RangeIterator(rng)

    @classmethod
    def make_end(cls, span: ConstDataSpan, rng: IRange) -> "TensorIterator":
        it = cls(span, rng)
        it._it = RangeIterator.make_end(rng)
        return it

    @property
    def offset(self) -> int:
        return self._it.offset

    @property
    def index(self) -> Tuple[int, ...]:
        return self._it.index

    @property
    def position(self) -> int:
        return self._it.position

    @property
    def value(self) -> Any:
        return self._span.read(self._it.offset)

    def at_end(self) -> bool:
        return self._it.at_end()

    def advance(self, n: int = 1) -> "TensorIterator":
        self._it.advance(n)
        return self

    def __iadd__(self, n: int) -> "TensorIterator":
        return self.advance(n)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TensorIterator):
            return NotImplemented
        return self._it == other._it

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, TensorIterator):
            return NotImplemented
        return self._it != other._it

    def __lt__(self, other: "TensorIterator") -> bool:
        return self._it < other._it

    __hash__ = None  # type: ignore[assignment]

    def __iter__(self) -> "TensorIterator":
        return self

    def __next__(self) -> Any:
        if self._it.at_end():
            raise StopIteration
        v = self._span.read(self._it.offset)
        self._it.advance()
        return v

    def __repr__(self) -> str:
        return f"{type(self).__name__}(index={self.index}, offset={self.offset})"


class MutableTensorIterator(TensorIterator):
    """Element iterator whose current element can be written."""

    __slots__ = ()

    def __init__(self, span: DataSpan, rng: IRange) -> None:
        super().__init__(span, rng)

    @property
    def value(self) -> Any:
        return self._span.read(self._it.offset)

    @value.setter
    def value(self, v: Any) -> None:
        self._span.write(self._it.offset, v)
