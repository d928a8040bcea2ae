"""
Tensor views, element iterators and the owning container.
"""

from ._lifetime import LifetimeTag
from ._view_iter import TensorIterator, MutableTensorIterator
from ._view import ExternalRange, ElementRef, ReadOnlyTensorView, MutableTensorView
from ._container import TensorContainer
from ._factories import make_ref, make_refc, make_ten_ref

__all__ = [
    LifetimeTag.__name__,
    TensorIterator.__name__,
    MutableTensorIterator.__name__,
    ExternalRange.__name__,
    ElementRef.__name__,
    ReadOnlyTensorView.__name__,
    MutableTensorView.__name__,
    TensorContainer.__name__,
    make_ref.__name__,
    make_refc.__name__,
    make_ten_ref.__name__,
]
