"""
Element access mixin shared by tensor views and containers.

This module defines `TensorMixinAccess`, the read side of multi-index element
access. Both `ReadOnlyTensorView` (and therefore `MutableTensorView`) and
`TensorContainer` inherit it, so index normalization, rank checks and offset
computation behave identically for every tensor-like object.

Two methods are access-mode dependent and are *declared* here but
*implemented* as control paths in sibling modules:

- `_ensure_usable(op)`: emptiness and liveness validation.
- `_element_offset(inds)`: multi-index -> linear offset, with or without
  bounds checks.

Host contract
-------------
The inheriting class must provide:

- ``_range_or_none()``: the active range, or ``None`` when empty.
- ``_is_empty()``: True if there is no storage or range.
- ``_assert_live()``: raise `DanglingViewError` if the source was released
  or reshaped.
- ``_assert_source_exists()``: raise `DanglingViewError` if the source was
  collected. Runs in every access mode.
- ``_read_at(off)``: read the element at a linear offset.
"""

from __future__ import annotations

import operator
from abc import ABC
from typing import Any, Optional, Tuple

import numpy as np

from .....domain._access_mode import AccessMode, get_access_mode
from .....domain._errors import EmptyViewError
from .....domain._range import IRange


class TensorMixinAccess(ABC):
    """
    Abstract mixin implementing 1-based multi-index reads.

    Notes
    -----
    - ``t()`` reads the sole element of a rank-0 tensor.
    - ``t(i, j, ...)``, ``t((i, j, ...))`` and ``t[i, j, ...]`` are
      equivalent.
    - The index count must equal the rank in every access mode.
    """

    @property
    def access_mode(self) -> AccessMode:
        """Access mode used to select checked or unchecked control paths."""
        return get_access_mode()

    # ------------------------------------------------------------------
    # Access-mode dependent hooks (control paths)
    # ------------------------------------------------------------------
    def _ensure_usable(self, op: str = "access") -> None:
        """
        Validate that the tensor may be dereferenced.

        Raises
        ------
        EmptyViewError
            Checked mode: the tensor has no storage or range.
        DanglingViewError
            The source container was collected (every mode), or was
            resized, cleared or reassigned (checked mode).
        """
        ...

    def _element_offset(self, inds: Tuple[int, ...]) -> int:
        """
        Compute the linear offset of a normalized 1-based multi-index.

        Raises
        ------
        RankMismatchError
            If ``len(inds) != rank()``.
        IndexOutOfRangeError
            Checked mode: an index lies outside its axis extent.
        """
        ...

    # ------------------------------------------------------------------
    # Shared helpers
    # ------------------------------------------------------------------
    @staticmethod
    def _normalize_inds(inds: Tuple[Any, ...]) -> Tuple[int, ...]:
        """Flatten a single sequence argument; non-integer indices raise TypeError."""
        if len(inds) == 1 and isinstance(inds[0], (tuple, list, np.ndarray)):
            inds = tuple(inds[0])
        return tuple(operator.index(i) for i in inds)

    def _active_range(self, op: str = "access") -> IRange:
        rng = self._range_or_none()
        if rng is None:
            raise EmptyViewError(op)
        return rng

    # ------------------------------------------------------------------
    # Geometry
    # ------------------------------------------------------------------
    def rank(self) -> int:
        return self._active_range("query the rank of").rank()

    def extent(self, i: int) -> int:
        return self._active_range("query an extent of").extent(i)

    def stride(self, i: int) -> int:
        return self._active_range("query a stride of").stride(i)

    def extents(self) -> Tuple[int, ...]:
        rng = self._active_range("query the extents of")
        return tuple(rng.extent(i) for i in range(1, rng.rank() + 1))

    def range(self) -> Optional[IRange]:
        return self._range_or_none()

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------
    def __call__(self, *inds: Any) -> Any:
        self._ensure_usable("read")
        return self._read_at(self._element_offset(self._normalize_inds(inds)))

    def __getitem__(self, key: Any) -> Any:
        if not isinstance(key, tuple):
            key = (key,)
        return self(*key)
