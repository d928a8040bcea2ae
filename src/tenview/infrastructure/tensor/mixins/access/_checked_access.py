"""
Checked-mode implementations of tensor element access.

Registered under ``AccessMode.CHECKED`` via `tensor_control_path_manager`.
In this mode every dereference validates that:

- the tensor is non-empty,
- a container-aliasing view's source is still alive and unchanged,
- the index count matches the rank, and
- every index lies in ``1..extent`` for its axis.

Bounds checks and offset arithmetic are the range's own `offset`, which
validates indices whenever checked mode is active.
"""

from typing import Tuple

from ..._tensor_builder import tensor_control_path_manager

from .....domain._access_mode import AccessMode
from .....domain._errors import EmptyViewError, RankMismatchError

from ._base import TensorMixinAccess as TMA


@tensor_control_path_manager(TMA, TMA._ensure_usable, AccessMode.CHECKED)
def tensor_ensure_usable_checked(self: TMA, op: str = "access") -> None:
    if self._is_empty():
        raise EmptyViewError(op)
    self._assert_live()


@tensor_control_path_manager(TMA, TMA._element_offset, AccessMode.CHECKED)
def tensor_element_offset_checked(self: TMA, inds: Tuple[int, ...]) -> int:
    rng = self._active_range()
    r = rng.rank()
    # SingleAxisRange.offset takes exactly one index, so the count is checked here.
    if len(inds) != r:
        raise RankMismatchError(r, len(inds))
    return rng.offset(*inds)
