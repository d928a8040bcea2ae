"""
View factories.

These are the entry points higher-level code uses to turn containers, other
views, or raw buffers plus a range into tensor views:

- `make_ref(t)`: mutable view of a container, or a copy of a view.
- `make_refc(t)`: read-only view of a container or view.
- `make_ten_ref(buffer, rng, ...)`: view over caller-managed memory. The
  flavor follows the buffer: a writeable array gives a `MutableTensorView`,
  a read-only array gives a `ReadOnlyTensorView`.

A view made from a container only borrows it. Passing a container that
nobody else holds (``make_ref(TensorContainer(2, 3))``) produces a view
whose first checked access raises `DanglingViewError`, because the
container is gone as soon as the expression finishes.
"""

from __future__ import annotations

import copy as _copy
from typing import Any, Optional, Union

import numpy as np

from ...domain._errors import TemporarySourceError
from ..range._axis import SingleAxisRange
from ..range._range import MultiAxisRange
from ..storage._data_span import ConstDataSpan, DataSpan
from ._container import TensorContainer
from ._view import ExternalRange, MutableTensorView, ReadOnlyTensorView

RangeArg = Union[MultiAxisRange, SingleAxisRange, ExternalRange]


def make_ref(t: Any) -> MutableTensorView:
    """
    Return a mutable view of `t`.

    Parameters
    ----------
    t : TensorContainer or MutableTensorView
        A live container, or a mutable view to copy.

    Raises
    ------
    TemporarySourceError
        If `t` is a read-only view, an empty container, or not a tensor.
    """
    if isinstance(t, TensorContainer):
        return MutableTensorView.from_container(t)
    if isinstance(t, MutableTensorView):
        return _copy.copy(t)
    if isinstance(t, ReadOnlyTensorView):
        raise TemporarySourceError(t, "a read-only view cannot give a mutable view")
    raise TemporarySourceError(t, "expected a TensorContainer or tensor view")


def make_refc(t: Any) -> ReadOnlyTensorView:
    """
    Return a read-only view of `t`.

    Parameters
    ----------
    t : TensorContainer or ReadOnlyTensorView
        A live container or any view (mutable views are narrowed).

    Raises
    ------
    TemporarySourceError
        If `t` is an empty container or not a tensor.
    """
    if isinstance(t, TensorContainer):
        return ReadOnlyTensorView.from_container(t)
    if isinstance(t, ReadOnlyTensorView):
        return t.as_readonly()
    raise TemporarySourceError(t, "expected a TensorContainer or tensor view")


def make_ten_ref(
    buffer: Any,
    rng: RangeArg,
    *,
    offset: int = 0,
    size: Optional[int] = None,
    readonly: bool = False,
    transfer: bool = False,
) -> ReadOnlyTensorView:
    """
    Build a view over caller-managed memory.

    Parameters
    ----------
    buffer : np.ndarray, ConstDataSpan or DataSpan
        Storage to address. Spans are used as given; arrays are wrapped with
        `offset` and `size`.
    rng : MultiAxisRange, SingleAxisRange or ExternalRange
        Geometry. Wrap in `ExternalRange` to alias instead of copy.
    offset : int, optional
        First addressable element of `buffer`.
    size : int, optional
        Maximum addressable element count past `offset`.
    readonly : bool, optional
        Force a read-only view even over writeable memory.
    transfer : bool, optional
        Adopt `rng` without copying.

    Returns
    -------
    ReadOnlyTensorView or MutableTensorView
    """
    if isinstance(buffer, ConstDataSpan):
        span = buffer
    elif isinstance(buffer, np.ndarray):
        if readonly or not buffer.flags.writeable:
            span = ConstDataSpan(buffer, offset, size)
        else:
            span = DataSpan(buffer, offset, size)
    else:
        raise TemporarySourceError(buffer, "expected a numpy.ndarray or data span")

    if isinstance(span, DataSpan) and not readonly:
        return MutableTensorView(span, rng, transfer=transfer)
    return ReadOnlyTensorView(span, rng, transfer=transfer)
