"""Core diagnostic checks for derivative outputs."""

from __future__ import annotations

import numpy as np
import torch


def _max_abs(values) -> float:
    if isinstance(values, torch.Tensor):
        if values.numel() == 0:
            return 0.0
        return float(values.detach().abs().max())
    values = np.asarray(values)
    if values.size == 0:
        return 0.0
    return float(np.max(np.abs(values)))


def is_finite(values) -> bool:
    """
    Check whether every entry of an array or tensor is finite.

    Parameters
    ----------
    values:
        numpy array (or array-like) or torch tensor.

    Returns
    -------
    bool
        True if no entry is NaN or infinite.
    """
    if isinstance(values, torch.Tensor):
        return bool(torch.all(torch.isfinite(values.detach())))
    return bool(np.all(np.isfinite(np.asarray(values))))


def assert_finite(values, name: str = "array") -> None:
    """
    Assert that every entry of an array or tensor is finite.

    Raises
    ------
    ValueError
        If any entry is NaN or infinite.
    """
    if not is_finite(values):
        raise ValueError(f"{name} contains non-finite values.")


def is_symmetric(mat, atol: float = 1e-12) -> bool:
    """
    Check whether a square matrix equals its transpose.

    Parameters
    ----------
    mat:
        numpy array (or nested sequence) or torch tensor with shape (n, n).
    atol:
        Absolute tolerance for the largest deviation |M - M^T|.

    Returns
    -------
    bool
        True if mat is square and symmetric within the tolerance.
    """
    if not isinstance(mat, torch.Tensor):
        mat = np.asarray(mat)
    if mat.ndim != 2 or mat.shape[0] != mat.shape[1]:
        return False

    max_dev = _max_abs(mat - mat.T)
    if not np.isfinite(max_dev):
        return False

    return max_dev <= atol


def assert_symmetric(mat, atol: float = 1e-12) -> None:
    """
    Assert that a square matrix is symmetric.

    Raises
    ------
    ValueError
        If the matrix is not square or not symmetric within the tolerance.
    """
    if not is_symmetric(mat, atol=atol):
        raise ValueError(f"Matrix is not symmetric within tolerance {atol}.")
