"""
Bounded, non-owning descriptors over contiguous element storage.

A data span names a window ``[offset, offset + size)`` of a flat NumPy
buffer. Spans never allocate and never free: the buffer belongs to a
`TensorContainer` or to the caller. Two flavors exist:

- `ConstDataSpan` only hands out read-only NumPy views, so code holding it
  cannot write through it even by accident.
- `DataSpan` extends it with write access.

Design notes
------------
- Multi-dimensional input buffers are flattened without copying; a buffer
  that cannot be flattened as a view is rejected.
- Holding a span keeps the NumPy buffer object reachable, but the span says
  nothing about whether the owning container still considers that buffer
  current. Lifetime tracking lives on the views.
"""

from __future__ import annotations

from typing import Any, Optional

import numpy as np


def _flat_view(buffer: Any) -> np.ndarray:
    if not isinstance(buffer, np.ndarray):
        raise TypeError(
            f"Data span requires a numpy.ndarray buffer, got {type(buffer).__name__}"
        )
    if buffer.ndim == 1:
        return buffer
    flat = buffer.reshape(-1, order="A")
    if not np.shares_memory(flat, buffer):
        raise ValueError("Data span buffer must be contiguous to be addressed flatly")
    return flat


class ConstDataSpan:
    """
    Read-only span over a flat buffer.

    Parameters
    ----------
    buffer : np.ndarray, optional
        Backing storage. ``None`` makes an empty span.
    offset : int, optional
        First addressable element. Defaults to 0.
    size : int, optional
        Maximum addressable element count past `offset`. Defaults to the
        remainder of the buffer.

    Raises
    ------
    ValueError
        If the window does not fit inside the buffer.
    """

    __slots__ = ("_buffer", "_offset", "_size")

    def __init__(
        self,
        buffer: Optional[np.ndarray] = None,
        offset: int = 0,
        size: Optional[int] = None,
    ) -> None:
        if buffer is None:
            self._buffer = None
            self._offset = 0
            self._size = 0
            return
        flat = _flat_view(buffer)
        if size is None:
            size = flat.shape[0] - offset
        if offset < 0 or size < 0 or offset + size > flat.shape[0]:
            raise ValueError(
                f"Span window [{offset}, {offset + size}) does not fit buffer "
                f"of length {flat.shape[0]}"
            )
        self._buffer = flat
        self._offset = int(offset)
        self._size = int(size)

    @property
    def buffer(self) -> Optional[np.ndarray]:
        return self._buffer

    @property
    def offset(self) -> int:
        return self._offset

    @property
    def size(self) -> int:
        return self._size

    @property
    def dtype(self) -> Optional[np.dtype]:
        return None if self._buffer is None else self._buffer.dtype

    @property
    def data(self) -> Optional[np.ndarray]:
        """
        Return the addressed window as a read-only NumPy view (no copy).
        """
        if self._buffer is None:
            return None
        window = self._buffer[self._offset : self._offset + self._size]
        window.flags.writeable = False
        return window

    def read(self, off: int) -> Any:
        """Read the element at linear offset `off` within the span."""
        return self._buffer[self._offset + off]

    def clear(self) -> None:
        self._buffer = None
        self._offset = 0
        self._size = 0

    def as_const(self) -> "ConstDataSpan":
        return ConstDataSpan(self._buffer, self._offset, self._size) if self else ConstDataSpan()

    def same_memory(self, other: "ConstDataSpan") -> bool:
        return (
            self._buffer is not None
            and other._buffer is not None
            and np.shares_memory(self._buffer, other._buffer)
        )

    def __bool__(self) -> bool:
        return self._buffer is not None

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        if self._buffer is None:
            return f"{type(self).__name__}(empty)"
        return (
            f"{type(self).__name__}(offset={self._offset}, size={self._size}, "
            f"dtype={self._buffer.dtype})"
        )


class DataSpan(ConstDataSpan):
    """
    Mutable span: a `ConstDataSpan` that also allows writes.

    Raises
    ------
    ValueError
        If the buffer itself is not writeable.
    """

    __slots__ = ()

    def __init__(
        self,
        buffer: Optional[np.ndarray] = None,
        offset: int = 0,
        size: Optional[int] = None,
    ) -> None:
        super().__init__(buffer, offset, size)
        if self._buffer is not None and not self._buffer.flags.writeable:
            raise ValueError("DataSpan requires a writeable buffer; use ConstDataSpan")

    @property
    def data(self) -> Optional[np.ndarray]:
        """Return the addressed window as a writeable NumPy view (no copy)."""
        if self._buffer is None:
            return None
        return self._buffer[self._offset : self._offset + self._size]

    def write(self, off: int, value: Any) -> None:
        """Write `value` at linear offset `off` within the span."""
        self._buffer[self._offset + off] = value
