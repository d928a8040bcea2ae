from .access import TensorMixinAccess

__all__ = [
    TensorMixinAccess.__name__,
]
