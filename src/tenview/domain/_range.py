"""
Range interface definitions.

A *range* is the geometry descriptor of a tensor: per-axis extents and
strides that map a 1-based multi-index to a linear offset into storage. Both
the single-axis and the multi-axis range implementations satisfy `IRange`,
so views, iterators and the free functions in
``tenview.infrastructure.range`` can be written against this protocol.
"""

from __future__ import annotations

from typing import Iterator, Protocol, runtime_checkable


@runtime_checkable
class IRange(Protocol):
    """
    Structural contract shared by every range type.

    Notes
    -----
    - Axis numbers passed to `extent` and `stride` are 1-based.
    - `total_count` is the number of addressable index tuples, i.e. the
      product of the extents (1 for a rank-0 range).
    """

    def rank(self) -> int:
        """Return the number of axes."""
        ...

    def extent(self, i: int) -> int:
        """Return the extent of axis `i` (1-based)."""
        ...

    def stride(self, i: int) -> int:
        """Return the stride of axis `i` (1-based)."""
        ...

    def total_count(self) -> int:
        """Return the product of all extents."""
        ...

    def offset(self, *inds: int) -> int:
        """Return the linear offset of the 1-based multi-index `inds`."""
        ...

    def is_contiguous(self) -> bool:
        """Return True if the axes pack densely with unit innermost stride."""
        ...

    def __iter__(self) -> Iterator[int]:
        """Iterate the linear offsets of the index space in traversal order."""
        ...
