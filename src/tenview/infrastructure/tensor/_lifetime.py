"""
Lifetime tags for views that alias a container.

A view built from a `TensorContainer` borrows both the container's storage
and its range. Python keeps the NumPy buffer reachable through the view's
span, but the *container* may still be garbage collected (the usual case when
a temporary is passed straight into a view factory), cleared, or resized to a
new geometry. Any of those leaves the view describing storage its owner no
longer vouches for.

`LifetimeTag` records a weak reference to the container together with the
container's generation counter at borrow time. Checked access calls
`LifetimeTag.check`, turning use-after-release into a `DanglingViewError`
instead of silently reading stale memory. Unchecked access still calls
`LifetimeTag.check_exists`, so a view whose container was collected is
rejected in every mode; only the generation comparison is skipped.
"""

from __future__ import annotations

import weakref
from typing import Any, Optional

from ...domain._errors import DanglingViewError


class LifetimeTag:
    """
    Weak, generation-stamped reference to a view's source container.

    Parameters
    ----------
    owner : Any
        The container. Must be weak-referenceable and expose an integer
        ``_generation`` attribute that changes whenever its storage or range
        is replaced.
    """

    __slots__ = ("_ref", "_generation")

    def __init__(self, owner: Any) -> None:
        self._ref = weakref.ref(owner)
        self._generation = owner._generation

    @property
    def generation(self) -> int:
        return self._generation

    def owner(self) -> Optional[Any]:
        return self._ref()

    def is_alive(self) -> bool:
        owner = self._ref()
        return owner is not None and owner._generation == self._generation

    def check_exists(self) -> Any:
        """
        Return the owner.

        Raises
        ------
        DanglingViewError
            If the owner was collected.
        """
        owner = self._ref()
        if owner is None:
            raise DanglingViewError(
                "source container no longer exists (was the view made from a temporary?)"
            )
        return owner

    def check(self) -> None:
        """
        Raises
        ------
        DanglingViewError
            If the owner was collected, or its generation moved on.
        """
        owner = self.check_exists()
        if owner._generation != self._generation:
            raise DanglingViewError("source container was resized, cleared or reassigned")

    def __repr__(self) -> str:
        return f"LifetimeTag(alive={self.is_alive()}, generation={self._generation})"
