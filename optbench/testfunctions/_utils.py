"""Parameter validation and precision helpers for the benchmark functions.

Every function accepts either a numpy array-like or a ``torch.Tensor``. The
helpers here return the validated vector together with the array namespace
(``numpy`` or ``torch``) so the formulas can be written once.
"""

from __future__ import annotations

from types import ModuleType
from typing import Tuple, Union

import numpy as np
import torch

Array = Union[np.ndarray, torch.Tensor]


def check_param(param, name: str = "param") -> Tuple[Array, ModuleType]:
    """Validate a parameter vector and return it with its namespace.

    Integer and boolean input is promoted to the default floating dtype
    (float64 for numpy, ``torch.get_default_dtype()`` for torch). Floating
    input keeps its precision.

    Args:
        param: 1D array-like or tensor.
        name: Name used in error messages.

    Returns:
        Tuple of (vector, namespace).

    Raises:
        TypeError: If the input is complex.
        ValueError: If the input is not 1D.
    """
    if isinstance(param, torch.Tensor):
        if param.is_complex():
            raise TypeError(f"{name} must be real, got dtype {param.dtype}")
        x = param if param.is_floating_point() else param.to(torch.get_default_dtype())
        xp = torch
    else:
        x = np.asarray(param)
        if np.iscomplexobj(x):
            raise TypeError(f"{name} must be real, got dtype {x.dtype}")
        if not np.issubdtype(x.dtype, np.floating):
            x = x.astype(np.float64)
        xp = np
    if x.ndim != 1:
        raise ValueError(f"{name} must be a 1D vector, got shape {tuple(x.shape)}")
    return x, xp


def check_length(x: Array, expected: int, func_name: str) -> None:
    """Raise ValueError unless ``x`` has exactly ``expected`` entries."""
    if x.shape[0] != expected:
        raise ValueError(
            f"{func_name} expects a parameter of length {expected}, got {x.shape[0]}"
        )


def check_nonempty(n: int, func_name: str) -> None:
    """Raise ValueError for an empty parameter vector."""
    if n == 0:
        raise ValueError(f"{func_name} requires a parameter of length >= 1, got 0")


def const(x: Array, value: float):
    """Materialize a literal in the precision (and device) of ``x``."""
    if isinstance(x, torch.Tensor):
        return torch.as_tensor(value, dtype=x.dtype, device=x.device)
    return x.dtype.type(value)


def zeros(x: Array, shape) -> Array:
    """Allocate a zero array with the dtype (and device) of ``x``."""
    if isinstance(x, torch.Tensor):
        return x.new_zeros(shape)
    return np.zeros(shape, dtype=x.dtype)


__all__ = ["Array", "check_length", "check_nonempty", "check_param", "const", "zeros"]
