from ._data_span import ConstDataSpan, DataSpan

__all__ = [
    ConstDataSpan.__name__,
    DataSpan.__name__,
]
