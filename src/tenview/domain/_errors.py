"""
Range-, view- and container-related exceptions for tenview.

This module defines the error taxonomy used across the strided tensor memory
model. Errors fall into three groups:

- configuration errors that are always raised (zero-size containers,
  non-contiguous ranges where contiguity is required, rank/extent mismatches,
  axis indices outside ``[1, rank]``);
- access errors that are only raised in checked access mode (out-of-range
  multi-indices, use of empty views, use of views whose source container has
  been released or re-shaped);
- construction-time rejects (building a view from something that is not a
  live, named container).

Every exception carries the offending values as attributes so callers can
report them without parsing messages.
"""

from __future__ import annotations

from typing import Sequence


class TenviewError(RuntimeError):
    """Base class for all tenview errors."""


class ZeroSizeError(TenviewError):
    """
    Raised when a container would be built with zero elements.

    Attributes
    ----------
    dims : tuple[int, ...]
        The extents that produced a zero total element count.
    """

    def __init__(self, dims: Sequence[int]) -> None:
        super().__init__(f"Zero area in tensor: dims={tuple(dims)}.")
        self.dims = tuple(dims)


class ContiguityError(TenviewError):
    """
    Raised when a non-contiguous range is supplied where contiguity is required.

    Attributes
    ----------
    range : object
        The offending range.
    """

    def __init__(self, rng: object, where: str = "tensor") -> None:
        super().__init__(f"{where} requires a contiguous range, got {rng}.")
        self.range = rng


class RankMismatchError(TenviewError, ValueError):
    """
    Raised when two ranks that must agree do not.

    This covers referenced assignment between views of different rank and
    element access with an index count different from the view's rank.

    Attributes
    ----------
    expected : int
    actual : int
    """

    def __init__(self, expected: int, actual: int, op: str = "access") -> None:
        super().__init__(
            f"Rank mismatch in {op}: expected {expected}, got {actual}."
        )
        self.expected = expected
        self.actual = actual
        self.op = op


class ExtentMismatchError(TenviewError, ValueError):
    """
    Raised when per-axis extents (or storage length) do not agree.

    Attributes
    ----------
    expected : tuple[int, ...]
    actual : tuple[int, ...]
    """

    def __init__(
        self, expected: Sequence[int], actual: Sequence[int], op: str = "assign"
    ) -> None:
        super().__init__(
            f"Extent mismatch in {op}: expected {tuple(expected)}, "
            f"got {tuple(actual)}."
        )
        self.expected = tuple(expected)
        self.actual = tuple(actual)
        self.op = op


class AxisIndexError(TenviewError, IndexError):
    """
    Raised when an axis number falls outside ``[1, rank]``.

    Attributes
    ----------
    axis : int
    rank : int
    """

    def __init__(self, axis: int, rank: int) -> None:
        super().__init__(f"Axis {axis} out of range [1, {rank}].")
        self.axis = axis
        self.rank = rank


class IndexOutOfRangeError(TenviewError, IndexError):
    """
    Raised in checked mode when a 1-based index exceeds its axis extent.

    Attributes
    ----------
    axis : int
        1-based axis number.
    index : int
        The offending 1-based index.
    extent : int
        Extent of that axis.
    """

    def __init__(self, axis: int, index: int, extent: int) -> None:
        super().__init__(
            f"Index {index} out of bounds on axis {axis} (valid range 1..{extent})."
        )
        self.axis = axis
        self.index = index
        self.extent = extent


class EmptyViewError(TenviewError):
    """Raised in checked mode when an empty or cleared view is dereferenced."""

    def __init__(self, op: str = "access") -> None:
        super().__init__(f"Cannot {op} an empty tensor view.")
        self.op = op


class DanglingViewError(TenviewError):
    """
    Raised in checked mode when a view outlives the container it aliases.

    The container may have been garbage collected (for example a temporary
    passed straight into a view factory), cleared, or resized since the view
    was created.
    """

    def __init__(self, reason: str) -> None:
        super().__init__(f"Tensor view refers to released storage: {reason}.")
        self.reason = reason


class TemporarySourceError(TenviewError, TypeError):
    """
    Raised when a view is requested from something that cannot back it.

    Attributes
    ----------
    source : object
        The rejected source object.
    """

    def __init__(self, source: object, reason: str) -> None:
        super().__init__(f"Cannot make a tensor view from {type(source).__name__}: {reason}.")
        self.source = source
