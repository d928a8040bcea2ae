"""
Unchecked-mode implementations of tensor element access.

Registered under ``AccessMode.UNCHECKED`` via `tensor_control_path_manager`.
Two checks survive: the index count, and that a container-aliasing view's
source still exists (a view made from a temporary is never usable).
Out-of-range indices, empty views and resized or cleared sources are the
caller's responsibility; reading through them either raises whatever NumPy
raises or returns an unrelated element.
"""

from typing import Tuple

from ..._tensor_builder import tensor_control_path_manager

from .....domain._access_mode import AccessMode
from .....domain._errors import RankMismatchError

from ._base import TensorMixinAccess as TMA


@tensor_control_path_manager(TMA, TMA._ensure_usable, AccessMode.UNCHECKED)
def tensor_ensure_usable_unchecked(self: TMA, op: str = "access") -> None:
    self._assert_source_exists()


@tensor_control_path_manager(TMA, TMA._element_offset, AccessMode.UNCHECKED)
def tensor_element_offset_unchecked(self: TMA, inds: Tuple[int, ...]) -> int:
    rng = self._range_or_none()
    r = rng.rank()
    if len(inds) != r:
        raise RankMismatchError(r, len(inds))
    return sum(rng.stride(n) * (i - 1) for n, i in enumerate(inds, start=1))
