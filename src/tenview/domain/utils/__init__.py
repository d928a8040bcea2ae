from ._control_path import create_path_builder, MethodKey

__all__ = [
    create_path_builder.__name__,
    "MethodKey",
]
