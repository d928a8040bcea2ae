"""
tenview: zero-copy strided tensor views over NumPy storage.

Quick tour
----------
    >>> from tenview import TensorContainer, make_ref
    >>> t = TensorContainer(2, 3)
    >>> v = make_ref(t)
    >>> v[2, 3] = 9.0
    >>> float(t(2, 3))
    9.0

Indices are 1-based and axis 1 varies fastest (column-major).
"""

from .domain import (
    AccessMode,
    access_mode,
    get_access_mode,
    set_access_mode,
    TenviewError,
    ZeroSizeError,
    ContiguityError,
    RankMismatchError,
    ExtentMismatchError,
    AxisIndexError,
    IndexOutOfRangeError,
    EmptyViewError,
    DanglingViewError,
    TemporarySourceError,
    IRange,
    ITensorView,
    IMutableTensorView,
)
from .infrastructure.range import (
    AxisDescriptor,
    SingleAxisRange,
    SingleAxisRangeIter,
    MultiAxisRange,
    RangeIterator,
    RangeBuilder,
    normalize,
    offset_of,
    total_count,
    is_contiguous,
    is_normal,
)
from .infrastructure.storage import ConstDataSpan, DataSpan
from .infrastructure.tensor import (
    ExternalRange,
    ElementRef,
    ReadOnlyTensorView,
    MutableTensorView,
    TensorIterator,
    MutableTensorIterator,
    TensorContainer,
    make_ref,
    make_refc,
    make_ten_ref,
)

__version__ = "0.1.0"

__all__ = [
    "AccessMode",
    "access_mode",
    "get_access_mode",
    "set_access_mode",
    "TenviewError",
    "ZeroSizeError",
    "ContiguityError",
    "RankMismatchError",
    "ExtentMismatchError",
    "AxisIndexError",
    "IndexOutOfRangeError",
    "EmptyViewError",
    "DanglingViewError",
    "TemporarySourceError",
    "IRange",
    "ITensorView",
    "IMutableTensorView",
    "AxisDescriptor",
    "SingleAxisRange",
    "SingleAxisRangeIter",
    "MultiAxisRange",
    "RangeIterator",
    "RangeBuilder",
    "normalize",
    "offset_of",
    "total_count",
    "is_contiguous",
    "is_normal",
    "ConstDataSpan",
    "DataSpan",
    "ExternalRange",
    "ElementRef",
    "ReadOnlyTensorView",
    "MutableTensorView",
    "TensorIterator",
    "MutableTensorIterator",
    "TensorContainer",
    "make_ref",
    "make_refc",
    "make_ten_ref",
]
