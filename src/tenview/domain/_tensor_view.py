"""
Tensor view interface definitions.

This module defines the domain-level capability sets for tensor views using
structural typing:

- `ITensorView` is the read capability: geometry queries, element reads and
  iteration.
- `IMutableTensorView` extends it with write access and referenced
  assignment.

Every object satisfying `IMutableTensorView` also satisfies `ITensorView`, so
algorithms that only read accept mutable views unchanged. Owning containers
satisfy both protocols as well.
"""

from __future__ import annotations

from typing import Any, Iterator, Protocol, runtime_checkable

from ._range import IRange


@runtime_checkable
class ITensorView(Protocol):
    """
    Read-only tensor capability.

    Notes
    -----
    - Indices are 1-based.
    - Calling with no index reads the sole element of a rank-0 tensor.
    """

    def rank(self) -> int:
        """Return the number of axes of the active range."""
        ...

    def extent(self, i: int) -> int:
        """Return the extent of axis `i` (1-based)."""
        ...

    def stride(self, i: int) -> int:
        """Return the stride of axis `i` (1-based)."""
        ...

    def size(self) -> int:
        """Return the total element count of the active range."""
        ...

    def range(self) -> IRange:
        """Return the active range."""
        ...

    def __call__(self, *inds: Any) -> float:
        """Read the element addressed by `inds`."""
        ...

    def __iter__(self) -> Iterator[float]:
        """Iterate element values in range traversal order."""
        ...

    def __bool__(self) -> bool:
        ...


@runtime_checkable
class IMutableTensorView(ITensorView, Protocol):
    """
    Mutable tensor capability: everything in `ITensorView` plus writes.
    """

    def __setitem__(self, key: Any, value: float) -> None:
        """Write `value` to the element addressed by `key`."""
        ...

    def assign_from(self, other: ITensorView) -> None:
        """
        Copy `other` element-by-element into the storage this view addresses.

        Raises
        ------
        RankMismatchError
            If the ranks differ.
        ExtentMismatchError
            If any per-axis extent differs.
        """
        ...
