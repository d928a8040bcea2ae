"""
Access-mode configuration for tenview.

Bounds checks on element access, emptiness checks and lifetime checks on
views cost time on every access. This module exposes them as a switchable
policy instead of hard-wiring one behavior:

- ``AccessMode.CHECKED``: every access validates index count, bounds, view
  emptiness and source liveness, raising the errors in
  :mod:`tenview.domain._errors`.
- ``AccessMode.UNCHECKED``: only the index-count check remains; everything
  else is left to the caller.

The initial mode is read from the ``TENVIEW_ACCESS_MODE`` environment
variable (``"checked"`` or ``"unchecked"``). Anything else falls back to
checked mode with a ``RuntimeWarning``.

Typical usage
-------------
    with access_mode(AccessMode.UNCHECKED):
        for i in range(1, n + 1):
            total += view(i)
"""

from __future__ import annotations

import os
import warnings
from contextlib import contextmanager
from enum import Enum
from typing import Iterator, Union

ENV_VAR = "TENVIEW_ACCESS_MODE"


class AccessMode(Enum):
    """
    Element access policy.

    Attributes
    ----------
    CHECKED : AccessMode
        Validate bounds, emptiness and liveness on every access.
    UNCHECKED : AccessMode
        Skip those validations.
    """

    CHECKED = "checked"
    UNCHECKED = "unchecked"


def _parse_mode(value: Union[str, AccessMode]) -> AccessMode:
    if isinstance(value, AccessMode):
        return value
    try:
        return AccessMode(str(value).strip().lower())
    except ValueError:
        raise ValueError(
            f"Unknown access mode {value!r}; expected one of "
            f"{[m.value for m in AccessMode]}"
        ) from None


def _mode_from_env() -> AccessMode:
    raw = os.environ.get(ENV_VAR, "")
    if not raw:
        return AccessMode.CHECKED
    try:
        return _parse_mode(raw)
    except ValueError:
        warnings.warn(
            f"Ignoring {ENV_VAR}={raw!r}; falling back to checked access mode.",
            RuntimeWarning,
            stacklevel=2,
        )
        return AccessMode.CHECKED


_current_mode: AccessMode = _mode_from_env()


def get_access_mode() -> AccessMode:
    """Return the access mode currently in effect."""
    return _current_mode


def set_access_mode(mode: Union[str, AccessMode]) -> AccessMode:
    """
    Set the process-wide access mode.

    Parameters
    ----------
    mode : str or AccessMode
        ``AccessMode`` member or its string value.

    Returns
    -------
    AccessMode
        The previously active mode, so callers can restore it.
    """
    global _current_mode
    previous = _current_mode
    _current_mode = _parse_mode(mode)
    return previous


@contextmanager
def access_mode(mode: Union[str, AccessMode]) -> Iterator[AccessMode]:
    """Temporarily switch the access mode inside a ``with`` block."""
    previous = set_access_mode(mode)
    try:
        yield _current_mode
    finally:
        set_access_mode(previous)


def is_checked() -> bool:
    return _current_mode is AccessMode.CHECKED
