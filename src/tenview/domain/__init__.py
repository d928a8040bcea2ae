"""
Domain layer for tenview: interfaces, error taxonomy and access-mode policy.

Nothing in this package depends on NumPy; concrete ranges, spans, views and
containers live in ``tenview.infrastructure``.
"""

from ._errors import (
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
)
from ._access_mode import (
    AccessMode,
    access_mode,
    get_access_mode,
    set_access_mode,
    is_checked,
)
from ._range import IRange
from ._tensor_view import ITensorView, IMutableTensorView

__all__ = [
    TenviewError.__name__,
    ZeroSizeError.__name__,
    ContiguityError.__name__,
    RankMismatchError.__name__,
    ExtentMismatchError.__name__,
    AxisIndexError.__name__,
    IndexOutOfRangeError.__name__,
    EmptyViewError.__name__,
    DanglingViewError.__name__,
    TemporarySourceError.__name__,
    AccessMode.__name__,
    access_mode.__name__,
    get_access_mode.__name__,
    set_access_mode.__name__,
    is_checked.__name__,
    IRange.__name__,
    ITensorView.__name__,
    IMutableTensorView.__name__,
]
