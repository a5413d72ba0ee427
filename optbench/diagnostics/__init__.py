"""Diagnostics and debugging utilities for optbench."""

from .core import (
    assert_finite,
    assert_symmetric,
    is_finite,
    is_symmetric,
)
from .debug_mode import (
    DEBUG_ENV_VAR,
    check_derivative_output,
    debug_context,
    is_debug_enabled,
    reload_from_env,
    set_debug_enabled,
)

__all__ = [
    "is_finite",
    "assert_finite",
    "is_symmetric",
    "assert_symmetric",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
    "reload_from_env",
    "check_derivative_output",
    "DEBUG_ENV_VAR",
]
