"""
Owning tensor container (NumPy backend).

`TensorContainer` is the only object in tenview that allocates element
storage. It owns a contiguous `MultiAxisRange` and a flat NumPy buffer whose
length equals the range's total element count. Views created from it alias
both.

Construction
------------
- ``TensorContainer(d1, d2, ...)``: canonical column-major range,
  zero-filled storage.
- ``TensorContainer.from_storage(buffer, rng)``: adopt an existing buffer and
  a contiguous range without copying.
- ``TensorContainer(view)`` / ``TensorContainer.from_view(view)``:
  materialize any view, whatever its strides, into fresh contiguous storage.

Design notes
------------
- The container range is contiguous at all times: construction, `resize`
  and `assign_from_view` reject or rebuild anything else.
- Every operation that replaces the storage or range bumps ``_generation``.
  Views made from the container carry the generation they saw, so checked
  access detects views that outlived the geometry they were built for.
- Read-only versus mutable access is chosen by the view factory used
  (`make_refc` / `make_ref`), never by a runtime flag on the container.
"""

from __future__ import annotations

from typing import Any, Iterator, Optional, Sequence, Union

import numpy as np

from ...domain._errors import (
    ContiguityError,
    ExtentMismatchError,
    TemporarySourceError,
    ZeroSizeError,
)
from ...domain._range import IRange
from ..range._axis import SingleAxisRange
from ..range._range import MultiAxisRange
from ..range._range_builder import RangeBuilder
from ..storage._data_span import ConstDataSpan, DataSpan
from .mixins import TensorMixinAccess


def _as_multi_axis(rng: Union[MultiAxisRange, SingleAxisRange]) -> MultiAxisRange:
    if isinstance(rng, MultiAxisRange):
        return rng
    if isinstance(rng, SingleAxisRange):
        return MultiAxisRange([rng.axis])
    raise TypeError(f"Expected a range, got {type(rng).__name__}")


class TensorContainer(TensorMixinAccess):
    """
    Dense tensor owning contiguous storage.

    Parameters
    ----------
    *dims : int or tensor view
        Extents of each axis, or a single view/container to materialize.
        No arguments makes an empty (falsy) container.
    dtype : np.dtype, optional
        Element dtype for freshly allocated storage. Defaults to float64.

    Raises
    ------
    ZeroSizeError
        If the product of `dims` is zero.
    ContiguityError
        If the assembled range is not contiguous.
    """

    def __init__(self, *dims: Any, dtype: Any = np.float64) -> None:
        self._range: Optional[MultiAxisRange] = None
        self._data: Optional[np.ndarray] = None
        self._generation = 0
        self._dtype = np.dtype(dtype)

        if len(dims) == 1 and isinstance(dims[0], (tuple, list)):
            dims = tuple(dims[0])
        if not dims:
            return
        if len(dims) == 1 and hasattr(dims[0], "values") and hasattr(dims[0], "rank"):
            self.assign_from_view(dims[0])
            return

        rng = MultiAxisRange.from_dims(*dims)
        self._init_storage(rng)

    def _init_storage(self, rng: MultiAxisRange) -> None:
        if not rng.is_contiguous():
            raise ContiguityError(rng, where="TensorContainer")
        total = rng.total_count()
        if total == 0:
            raise ZeroSizeError(rng.extents())
        self._range = rng
        self._data = np.zeros(total, dtype=self._dtype)

    @classmethod
    def from_storage(
        cls,
        storage: Any,
        rng: Union[MultiAxisRange, SingleAxisRange],
    ) -> "TensorContainer":
        """
        Take ownership of an existing (storage, range) pair.

        Parameters
        ----------
        storage : array-like
            Flat element storage. NumPy arrays are adopted without copying.
        rng : MultiAxisRange or SingleAxisRange
            Contiguous range describing `storage`.

        Raises
        ------
        ContiguityError
            If `rng` is not contiguous.
        ExtentMismatchError
            If the storage length differs from the range's total count.
        """
        rng = _as_multi_axis(rng)
        if not rng.is_contiguous():
            raise ContiguityError(rng, where="TensorContainer.from_storage")
        data = storage if isinstance(storage, np.ndarray) else np.asarray(storage, dtype=np.float64)
        data = data.reshape(-1, order="A") if data.ndim != 1 else data
        if data.shape[0] != rng.total_count():
            raise ExtentMismatchError(
                (rng.total_count(),), (data.shape[0],), op="TensorContainer.from_storage"
            )
        out = cls(dtype=data.dtype)
        out._range = rng
        out._data = data
        return out

    @classmethod
    def from_view(cls, view: Any) -> "TensorContainer":
        """Materialize `view` into a fresh contiguous container."""
        out = cls()
        out.assign_from_view(view)
        return out

    def assign_from_view(self, view: Any) -> None:
        """
        Replace this container's contents with a contiguous copy of `view`.

        The view's extents are fed axis by axis into a `RangeBuilder`, so the
        result keeps rank and extents but discards the source strides.
        Element values are copied in the view's iteration order.

        Raises
        ------
        TemporarySourceError
            If `view` is not a tensor view or container.
        ZeroSizeError
            If the view addresses no elements.
        """
        if not (hasattr(view, "values") and hasattr(view, "rank")):
            raise TemporarySourceError(view, "expected a tensor view or container")
        r = view.rank()
        rb = RangeBuilder(r)
        for n in range(1, r + 1):
            rb.next_extent(view.extent(n))
        rng = rb.build()
        if rng.total_count() == 0:
            raise ZeroSizeError(rng.extents())
        values = np.array(view.values(), copy=True)

        self._range = rng
        self._data = values
        self._dtype = values.dtype
        self._generation += 1

    # ------------------------------------------------------------------
    # Host contract for TensorMixinAccess
    # ------------------------------------------------------------------
    def _range_or_none(self) -> Optional[MultiAxisRange]:
        return self._range

    def _is_empty(self) -> bool:
        return self._data is None or self._range is None

    def _assert_live(self) -> None:
        return None

    def _assert_source_exists(self) -> None:
        return None

    def _read_at(self, off: int) -> Any:
        return self._data[off]

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    @property
    def dtype(self) -> np.dtype:
        return self._dtype

    def size(self) -> int:
        return 0 if self._data is None else int(self._data.shape[0])

    def store(self) -> DataSpan:
        return DataSpan(self._data) if self._data is not None else DataSpan()

    def const_store(self) -> ConstDataSpan:
        return ConstDataSpan(self._data) if self._data is not None else ConstDataSpan()

    def data(self) -> Optional[np.ndarray]:
        return self._data

    def __bool__(self) -> bool:
        return self._data is not None and self._data.shape[0] > 0

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------
    def __setitem__(self, key: Any, value: Any) -> None:
        if not isinstance(key, tuple):
            key = (key,)
        self.set(value, *key)

    def set(self, value: Any, *inds: Any) -> None:
        self._ensure_usable("write")
        self._data[self._element_offset(self._normalize_inds(inds))] = value

    def fill(self, value: Any) -> None:
        self._ensure_usable("write")
        self._data.fill(value)

    # ------------------------------------------------------------------
    # Geometry changes
    # ------------------------------------------------------------------
    def resize(self, rng: Union[MultiAxisRange, SingleAxisRange, Sequence[int]]) -> None:
        """
        Replace the range and reallocate storage for the new element count.

        Existing values are not remapped to the new geometry: the flat prefix
        that fits is kept, the rest is zero-filled.

        Raises
        ------
        ContiguityError
            If `rng` is not contiguous.
        ZeroSizeError
            If `rng` addresses no elements.
        """
        if isinstance(rng, (tuple, list)):
            rng = MultiAxisRange.from_dims(*rng)
        rng = _as_multi_axis(rng)
        if not rng.is_contiguous():
            raise ContiguityError(rng, where="TensorContainer.resize")
        if rng.total_count() == 0:
            raise ZeroSizeError(rng.extents())
        new = np.zeros(rng.total_count(), dtype=self._dtype)
        if self._data is not None:
            n = min(new.shape[0], self._data.shape[0])
            new[:n] = self._data[:n]
        self._range = rng
        self._data = new
        self._generation += 1

    def clear(self) -> None:
        self._range = None
        self._data = None
        self._generation += 1

    def clone(self) -> "TensorContainer":
        if self._is_empty():
            return TensorContainer(dtype=self._dtype)
        return TensorContainer.from_storage(self._data.copy(), self._range)

    # ------------------------------------------------------------------
    # Iteration and bulk reads
    # ------------------------------------------------------------------
    def __iter__(self) -> Iterator[Any]:
        # Storage order is iteration order for a contiguous range.
        return iter(()) if self._data is None else iter(self._data)

    def values(self) -> np.ndarray:
        self._ensure_usable("read")
        return self._data.copy()

    def to_numpy(self) -> np.ndarray:
        return self.values().reshape(self.extents(), order="F")

    # ------------------------------------------------------------------
    # Diagnostics
    # ------------------------------------------------------------------
    def debug_storage_repr(self) -> str:
        if self._data is None:
            return "TensorContainer(storage=None)"
        return (
            f"TensorContainer(storage=ndarray(len={self._data.shape[0]}, "
            f"dtype={self._data.dtype}), generation={self._generation})"
        )

    def __repr__(self) -> str:
        if self._is_empty():
            return "TensorContainer(empty)"
        return f"TensorContainer(extents={self.extents()}, dtype={self._dtype})"

    def __str__(self) -> str:
        if self._is_empty():
            return "TensorContainer(empty)"
        vals = " ".join(f"{v:.6g}" for v in self._data)
        return f"r={self._range.rank()} {self._range}\n{{{vals}}}"
