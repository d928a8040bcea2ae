"""
Element access mixin and its access-mode specific control paths.

Implementation modules are imported for their side effects: registering the
checked and unchecked paths with the tensor control-path manager.

Public API
----------
Only the base mixin class is exported:

- ``TensorMixinAccess``
"""

from ._checked_access import *
from ._unchecked_access import *
from ._base import TensorMixinAccess

__all__ = [
    TensorMixinAccess.__name__,
]
