"""Opt-in output validation for the derivative routines.

Iterative solvers call the gradient and Hessian routines in tight loops, so
the checks here are off by default. Set ``OPTBENCH_DEBUG=1`` (or call
:func:`set_debug_enabled`) to have :func:`check_derivative_output` verify that
every returned derivative is finite, and that Hessians are symmetric.
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Iterator, Optional

from ..logging import get_logger
from .core import assert_finite, assert_symmetric

logger = get_logger(__name__)

DEBUG_ENV_VAR = "OPTBENCH_DEBUG"
_TRUTHY = frozenset({"1", "true", "yes", "on"})


def _flag_from_env(value: Optional[str]) -> bool:
    return value is not None and value.strip().lower() in _TRUTHY


_debug_enabled: bool = _flag_from_env(os.environ.get(DEBUG_ENV_VAR))


def is_debug_enabled() -> bool:
    """Return whether derivative outputs are validated before being returned."""
    return _debug_enabled


def set_debug_enabled(enabled: bool) -> None:
    """Globally enable or disable derivative output validation."""
    global _debug_enabled
    _debug_enabled = bool(enabled)


def reload_from_env() -> bool:
    """Re-read ``OPTBENCH_DEBUG`` and return the resulting setting.

    The variable is read once at import time; call this after changing it in a
    running process.
    """
    set_debug_enabled(_flag_from_env(os.environ.get(DEBUG_ENV_VAR)))
    return _debug_enabled


@contextmanager
def debug_context(enabled: bool = True) -> Iterator[None]:
    """
    Temporarily enable or disable validation, restoring the previous setting.

    Example
    -------
    >>> with debug_context(True):
    ...     pass
    """
    prev = _debug_enabled
    set_debug_enabled(enabled)
    try:
        yield
    finally:
        set_debug_enabled(prev)


def check_derivative_output(values, name: str, symmetric: bool = False) -> None:
    """Validate a derivative result when debug mode is on.

    Parameters
    ----------
    values:
        Gradient vector or Hessian matrix (numpy array or torch tensor).
    name:
        Routine name used in log and error messages.
    symmetric:
        Also require ``values`` to be a symmetric matrix.

    Raises
    ------
    ValueError
        If debug mode is on and ``values`` is not finite, or not symmetric when
        ``symmetric`` is set.
    """
    if not _debug_enabled:
        return
    logger.debug("%s: checking result of shape %s", name, tuple(values.shape))
    assert_finite(values, name=name)
    if symmetric:
        assert_symmetric(values)
