"""
Read-only and mutable tensor views.

A tensor view pairs a data span with a range. It never owns storage, and the
range it uses is either *owned* (a private copy held by the view) or
*aliased* (a range owned by a container or by the caller).

Construction modes
------------------
- ``View(span, rng)``: the view keeps a private copy of `rng`.
- ``View(span, rng, transfer=True)``: the view adopts the `rng` object
  itself without copying.
- ``View(span, ExternalRange(rng))``: the view aliases `rng`;
  ``owns_range()`` is False.
- ``View.from_container(c)`` (or `make_ref` / `make_refc`): aliases the
  container's storage and range. The view holds only a weak,
  generation-stamped reference to the container (see `LifetimeTag`).

Copy semantics
--------------
Copying a view that owns its range gives the copy its own range copy over the
same storage. Copying a view that aliases a range re-aliases the *same*
range object. Code relies on ``owns_range()`` to decide whether re-pointing
the range is safe, so the distinction is preserved exactly.

Capabilities
------------
`MutableTensorView` subclasses `ReadOnlyTensorView`, so every mutable view is
usable wherever a read-only one is expected. Read-only views are backed by a
`ConstDataSpan` whose NumPy windows are flagged non-writeable.
"""

from __future__ import annotations

import copy as _copy
from typing import Any, Optional, Tuple, Union

import numpy as np

from ...domain._access_mode import is_checked
from ...domain._errors import (
    EmptyViewError,
    ExtentMismatchError,
    RankMismatchError,
    TemporarySourceError,
)
from ...domain._range import IRange
from ..range._axis import SingleAxisRange
from ..range._functions import offsets_array
from ..range._range import MultiAxisRange
from ..storage._data_span import ConstDataSpan, DataSpan
from ._lifetime import LifetimeTag
from ._view_iter import MutableTensorIterator, TensorIterator
from .mixins import TensorMixinAccess


class ExternalRange:
    """
    Non-owning handle to a range owned elsewhere.

    Passing ``ExternalRange(rng)`` to a view constructor makes the view alias
    `rng` instead of copying it. The caller keeps `rng` meaningful for as long
    as the view is used.
    """

    __slots__ = ("target",)

    def __init__(self, target: IRange) -> None:
        if not isinstance(target, (MultiAxisRange, SingleAxisRange)):
            raise TypeError(
                f"ExternalRange expects a range, got {type(target).__name__}"
            )
        self.target = target

    def __repr__(self) -> str:
        return f"ExternalRange({self.target!r})"


RangeArg = Union[MultiAxisRange, SingleAxisRange, ExternalRange]


def _offset_bounds(rng: IRange) -> Tuple[int, int]:
    lo = hi = 0
    for n in range(1, rng.rank() + 1):
        reach = rng.stride(n) * (rng.extent(n) - 1)
        lo += min(0, reach)
        hi += max(0, reach)
    return lo, hi


class ElementRef:
    """
    Write-through reference to one element of a mutable tensor.

    Returned by `MutableTensorView.at`; reading or assigning ``.value`` goes
    straight to the underlying storage.
    """

    __slots__ = ("_span", "_offset")

    def __init__(self, span: DataSpan, offset: int) -> None:
        self._span = span
        self._offset = offset

    @property
    def offset(self) -> int:
        return self._offset

    @property
    def value(self) -> Any:
        return self._span.read(self._offset)

    @value.setter
    def value(self, v: Any) -> None:
        self._span.write(self._offset, v)

    def __float__(self) -> float:
        return float(self.value)

    def __repr__(self) -> str:
        return f"ElementRef(offset={self._offset}, value={self.value!r})"


class ReadOnlyTensorView(TensorMixinAccess):
    """
    Read-only view over strided storage.

    Parameters
    ----------
    store : ConstDataSpan or np.ndarray, optional
        Storage addressed by the view. Arrays are wrapped in a span.
    rng : MultiAxisRange, SingleAxisRange or ExternalRange, optional
        Geometry of the view. Required whenever `store` is given.
    transfer : bool, optional
        Adopt `rng` itself instead of copying it. Defaults to False.

    Raises
    ------
    ExtentMismatchError
        Checked mode: the range addresses offsets outside the span.
    """

    def __init__(
        self,
        store: Any = None,
        rng: Optional[RangeArg] = None,
        *,
        transfer: bool = False,
    ) -> None:
        self._span = self._adopt_span(store)
        self._range: Optional[IRange] = None
        self._prange: Optional[IRange] = None
        self._source: Optional[LifetimeTag] = None

        if rng is None:
            if self._span:
                raise ValueError(f"{type(self).__name__} needs a range for its storage")
            return
        if isinstance(rng, ExternalRange):
            self._prange = rng.target
        elif isinstance(rng, (MultiAxisRange, SingleAxisRange)):
            self._range = rng if transfer else _copy.copy(rng)
            self._prange = self._range
        else:
            raise TypeError(f"Expected a range, got {type(rng).__name__}")
        self._check_fits()

    @classmethod
    def from_container(cls, container: Any) -> "ReadOnlyTensorView":
        view = cls()
        view.point_to(container)
        return view

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------
    @staticmethod
    def _adopt_span(store: Any) -> ConstDataSpan:
        if store is None:
            return ConstDataSpan()
        if isinstance(store, ConstDataSpan):
            return store.as_const()
        return ConstDataSpan(store)

    @staticmethod
    def _container_span(container: Any) -> ConstDataSpan:
        return container.const_store()

    def _check_fits(self) -> None:
        if not is_checked() or not self._span or self._prange.total_count() == 0:
            return
        lo, hi = _offset_bounds(self._prange)
        if lo < 0 or hi >= self._span.size:
            raise ExtentMismatchError(
                (self._span.size,), (hi + 1,), op="view construction"
            )

    def point_to(self, container: Any) -> None:
        """
        Re-point this view at `container`'s storage and range.

        Raises
        ------
        TemporarySourceError
            If `container` holds no storage.
        """
        if not container:
            raise TemporarySourceError(container, "container holds no storage")
        self._span = self._adopt_span(self._container_span(container))
        self._range = None
        self._prange = container.range()
        self._source = LifetimeTag(container)

    # ------------------------------------------------------------------
    # Host contract for TensorMixinAccess
    # ------------------------------------------------------------------
    def _range_or_none(self) -> Optional[IRange]:
        return self._prange if self._span else None

    def _is_empty(self) -> bool:
        return not self._span or self._prange is None

    def _assert_live(self) -> None:
        if self._source is not None:
            self._source.check()

    def _assert_source_exists(self) -> None:
        if self._source is not None:
            self._source.check_exists()

    def _read_at(self, off: int) -> Any:
        return self._span.read(off)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def owns_range(self) -> bool:
        return self._prange is not None and self._prange is self._range

    def size(self) -> int:
        rng = self._range_or_none()
        return 0 if rng is None else rng.total_count()

    def store(self) -> ConstDataSpan:
        return self._span

    def data(self) -> Optional[np.ndarray]:
        """Return the span's NumPy window (read-only for read-only views)."""
        return self._span.data

    def source(self) -> Optional[Any]:
        """Return the aliased container, or None if none or released."""
        return None if self._source is None else self._source.owner()

    def is_alive(self) -> bool:
        return self._source is None or self._source.is_alive()

    def __bool__(self) -> bool:
        return not self._is_empty()

    def clear(self) -> None:
        """Drop the span and range reference; the memory is not touched."""
        self._span = type(self._span)()
        self._range = None
        self._prange = None
        self._source = None

    # ------------------------------------------------------------------
    # Copying
    # ------------------------------------------------------------------
    def _copy_into(self, new: "ReadOnlyTensorView", span: ConstDataSpan) -> None:
        new._span = span
        new._source = self._source
        if self.owns_range():
            new._range = _copy.copy(self._range)
            new._prange = new._range
        else:
            new._range = None
            new._prange = self._prange

    def __copy__(self) -> "ReadOnlyTensorView":
        new = type(self).__new__(type(self))
        self._copy_into(new, self._span)
        return new

    def copy(self) -> "ReadOnlyTensorView":
        return self.__copy__()

    def as_readonly(self) -> "ReadOnlyTensorView":
        new = ReadOnlyTensorView.__new__(ReadOnlyTensorView)
        self._copy_into(new, self._span.as_const())
        return new

    # ------------------------------------------------------------------
    # Iteration and bulk reads
    # ------------------------------------------------------------------
    def begin(self) -> TensorIterator:
        self._ensure_usable("iterate")
        return TensorIterator(self._span, self._prange)

    def end(self) -> TensorIterator:
        self._ensure_usable("iterate")
        return TensorIterator.make_end(self._span, self._prange)

    def cbegin(self) -> TensorIterator:
        self._ensure_usable("iterate")
        return TensorIterator(self._span.as_const(), self._prange)

    def cend(self) -> TensorIterator:
        self._ensure_usable("iterate")
        return TensorIterator.make_end(self._span.as_const(), self._prange)

    def __iter__(self) -> TensorIterator:
        return self.cbegin()

    def values(self) -> np.ndarray:
        """Return a fresh 1-D array of the elements in iteration order."""
        self._ensure_usable("read")
        offsets = offsets_array(self._prange)
        return self._span.buffer[self._span.offset + offsets]

    def to_numpy(self) -> np.ndarray:
        """Return a fresh array shaped by the extents (axis 1 fastest)."""
        return self.values().reshape(self.extents(), order="F")

    # ------------------------------------------------------------------
    # Diagnostics
    # ------------------------------------------------------------------
    def debug_storage_repr(self) -> str:
        if not self._span:
            return f"{type(self).__name__}(empty)"
        return (
            f"{type(self).__name__}(span={self._span!r}, "
            f"owns_range={self.owns_range()}, alive={self.is_alive()})"
        )

    def __repr__(self) -> str:
        if self._is_empty():
            return f"{type(self).__name__}(empty)"
        return (
            f"{type(self).__name__}(rank={self._prange.rank()}, "
            f"range={self._prange}, owns_range={self.owns_range()})"
        )

    def __str__(self) -> str:
        if self._is_empty():
            return f"{type(self).__name__}(empty)"
        vals = " ".join(f"{v:.6g}" for v in self.values())
        return f"r={self._prange.rank()} {self._prange}\n{{{vals}}}"


class MutableTensorView(ReadOnlyTensorView):
    """
    Mutable view: a `ReadOnlyTensorView` that also writes through.

    Parameters
    ----------
    store : DataSpan or np.ndarray, optional
        Writeable storage addressed by the view.
    rng : MultiAxisRange, SingleAxisRange or ExternalRange, optional
    transfer : bool, optional

    Notes
    -----
    - ``v[i, j] = x`` and ``v.set(x, i, j)`` write one element.
    - ``v.assign_from(b)`` (or ``v &= b``) copies `b` into the storage this
      view addresses, element by element, leaving other storage untouched.
    """

    @staticmethod
    def _adopt_span(store: Any) -> DataSpan:
        if store is None:
            return DataSpan()
        if isinstance(store, DataSpan):
            return store
        if isinstance(store, ConstDataSpan):
            raise TypeError("Read-only storage cannot back a MutableTensorView")
        return DataSpan(store)

    @staticmethod
    def _container_span(container: Any) -> DataSpan:
        return container.store()

    def data(self) -> Optional[np.ndarray]:
        """Return the span's writeable NumPy window."""
        return self._span.data

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------
    def at(self, *inds: Any) -> ElementRef:
        """Return a write-through reference to the addressed element."""
        self._ensure_usable("write")
        return ElementRef(self._span, self._element_offset(self._normalize_inds(inds)))

    def __setitem__(self, key: Any, value: Any) -> None:
        if not isinstance(key, tuple):
            key = (key,)
        self.set(value, *key)

    def set(self, value: Any, *inds: Any) -> None:
        self._ensure_usable("write")
        self._span.write(self._element_offset(self._normalize_inds(inds)), value)

    def fill(self, value: Any) -> None:
        """Write `value` into every element addressed by this view."""
        self._ensure_usable("write")
        offsets = offsets_array(self._prange)
        self._span.buffer[self._span.offset + offsets] = value

    def assign_from(self, other: Any) -> None:
        """
        Referenced assignment: copy `other` into the storage this view addresses.

        Parameters
        ----------
        other : ReadOnlyTensorView or TensorContainer
            Source with the same rank and per-axis extents.

        Raises
        ------
        EmptyViewError
            If either side is empty.
        RankMismatchError
            If the ranks differ.
        ExtentMismatchError
            If any per-axis extent differs.

        Notes
        -----
        Validation completes before the first element is written, so a
        mismatch never leaves a partial copy behind. Overlapping source and
        destination are handled by gathering the source first.
        """
        if self._is_empty():
            raise EmptyViewError("assign to")
        if not other:
            raise EmptyViewError("assign from")
        self._ensure_usable("assign to")

        if self.rank() != other.rank():
            raise RankMismatchError(self.rank(), other.rank(), op="referenced assignment")
        if self.extents() != other.extents():
            raise ExtentMismatchError(
                self.extents(), other.extents(), op="referenced assignment"
            )

        src = other.values()
        offsets = offsets_array(self._prange)
        self._span.buffer[self._span.offset + offsets] = src

    def __iand__(self, other: Any) -> "MutableTensorView":
        self.assign_from(other)
        return self

    # ------------------------------------------------------------------
    # Mutable iteration
    # ------------------------------------------------------------------
    def begin(self) -> MutableTensorIterator:
        self._ensure_usable("iterate")
        return MutableTensorIterator(self._span, self._prange)

    def end(self) -> MutableTensorIterator:
        self._ensure_usable("iterate")
        return MutableTensorIterator.make_end(self._span, self._prange)
