"""Rosenbrock function, its gradient and its Hessian.

In 2D the function is

    f(x_1, x_2) = (a - x_1)^2 + b (x_2 - x_1^2)^2

and the multidimensional generalization sums that term over adjacent pairs:

    f(x_1, ..., x_n) = sum_{i=1}^{n-1} (a - x_i)^2 + b (x_{i+1} - x_i^2)^2

The usual coefficients are a = 1 and b = 100, which put the global minimum at
f(1, ..., 1) = 0. Coefficients are always passed explicitly.

Two code paths are provided:

* ``rosenbrock_derivative`` / ``rosenbrock_hessian`` take a numpy array or a
  torch tensor of any length and are vectorized.
* ``rosenbrock_derivative_const`` / ``rosenbrock_hessian_const`` take a
  fixed-length sequence of scalars and return tuples of the same length. They
  run a plain scalar loop, which is cheaper than array dispatch for the small
  dimensions optimizer test problems usually have.

Both paths produce identical numbers for identical inputs. A vector of length
0 is rejected; length 1 gives value 0, gradient ``[0]`` and Hessian ``[[0]]``.

Example
-------
>>> import numpy as np
>>> float(rosenbrock(np.ones(4), 1.0, 100.0))
0.0
>>> rosenbrock_derivative(np.array([1.0, 1.0]), 1.0, 100.0).tolist()
[0.0, 0.0]
"""

from __future__ import annotations

from typing import Sequence, Tuple

import numpy as np
import torch

from ..diagnostics import check_derivative_output
from ._utils import check_nonempty, check_param, const, zeros


def rosenbrock(param, a, b):
    """Evaluate the multidimensional Rosenbrock function.

    Args:
        param: 1D array-like or tensor of length >= 1.
        a: First coefficient, usually 1.
        b: Second coefficient, usually 100.

    Returns:
        Scalar of the input dtype (0-d tensor for torch input).

    Raises:
        ValueError: If ``param`` is empty or not 1D.
    """
    x, _ = check_param(param)
    check_nonempty(x.shape[0], "rosenbrock")
    a = const(x, a)
    b = const(x, b)
    xi = x[:-1]
    xi1 = x[1:]
    return ((a - xi) ** 2 + b * (xi1 - xi**2) ** 2).sum()


def rosenbrock_derivative(param, a, b):
    """Gradient of the multidimensional Rosenbrock function.

    Every adjacent pair (i, i+1) contributes
    ``-4 b x_i (x_{i+1} - x_i^2) + 2 (x_i - a)`` to entry i and
    ``2 b (x_{i+1} - x_i^2)`` to entry i+1, so interior entries are the sum
    of the two pairs they belong to.

    Args:
        param: 1D array-like or tensor of length >= 1.
        a: First coefficient.
        b: Second coefficient.

    Returns:
        Vector with the shape and dtype of ``param``.

    Raises:
        ValueError: If ``param`` is empty or not 1D.
    """
    x, _ = check_param(param)
    check_nonempty(x.shape[0], "rosenbrock_derivative")
    a = const(x, a)
    b = const(x, b)
    n2 = const(x, 2.0)
    n4 = const(x, 4.0)

    xi = x[:-1]
    xi1 = x[1:]
    t = xi1 - xi * xi

    grad = zeros(x, x.shape)
    grad[:-1] += -n4 * b * xi * t + n2 * (xi - a)
    grad[1:] += n2 * b * t
    return grad


def rosenbrock_hessian(param, a, b):
    """Hessian of the multidimensional Rosenbrock function.

    The matrix is tridiagonal. Entries are assigned in closed form:

    * ``H[i, i] = 12 b x_i^2 - 4 b x_{i+1} + 2`` for i < n-1, plus ``2 b``
      for i > 0;
    * ``H[i, i+1] = H[i+1, i] = -4 b x_i``.

    Args:
        param: 1D array-like or tensor of length >= 1.
        a: First coefficient. The Hessian does not depend on it; it is
            accepted so all three forms share one signature.
        b: Second coefficient.

    Returns:
        Dense symmetric (n, n) matrix with the dtype of ``param``.

    Raises:
        ValueError: If ``param`` is empty or not 1D, or in debug mode if the
            result is not finite and symmetric.
    """
    x, xp = check_param(param)
    n = x.shape[0]
    check_nonempty(n, "rosenbrock_hessian")
    b = const(x, b)
    n2 = const(x, 2.0)
    n4 = const(x, 4.0)
    n12 = const(x, 12.0)

    xi = x[:-1]
    xi1 = x[1:]

    diag = zeros(x, (n,))
    diag[:-1] += n12 * b * (xi * xi) - n4 * b * xi1 + n2
    diag[1:] += n2 * b
    off = -n4 * b * xi

    hessian = xp.diag(diag) + xp.diag(off, 1) + xp.diag(off, -1)

    check_derivative_output(hessian, "rosenbrock_hessian", symmetric=True)
    return hessian


def _const_scalars(param: Sequence, func_name: str):
    if isinstance(param, torch.Tensor):
        raise TypeError(f"{func_name} expects a sequence of scalars, got a torch.Tensor")
    ndim = np.ndim(param)
    if ndim != 1:
        raise ValueError(f"{func_name} parameter must be a 1D vector, got ndim={ndim}")
    x = tuple(param)
    check_nonempty(len(x), func_name)
    if any(np.iscomplexobj(v) for v in x):
        raise TypeError(f"{func_name} expects real scalars")
    # Non-floating elements (ints, bools) are evaluated as Python floats.
    t = type(x[0])
    if not issubclass(t, (float, np.floating)):
        t = float
    return tuple(t(v) for v in x), t


def rosenbrock_derivative_const(param: Sequence, a, b) -> Tuple:
    """Gradient of the Rosenbrock function for a fixed-length parameter.

    Same numbers as :func:`rosenbrock_derivative`, computed with a scalar loop
    over the adjacent pairs.

    Args:
        param: Sequence of n >= 1 real scalars of one type (Python floats or
            numpy floating scalars).
        a: First coefficient.
        b: Second coefficient.

    Returns:
        Tuple of n scalars of the element type of ``param``.
    """
    x, t = _const_scalars(param, "rosenbrock_derivative_const")
    n = len(x)
    a = t(a)
    b = t(b)
    n0 = t(0.0)
    n2 = t(2.0)
    n4 = t(4.0)

    result = [n0] * n
    for i in range(n - 1):
        xi = x[i]
        xi1 = x[i + 1]
        t1 = -n4 * b * xi * (xi1 - xi * xi)
        t2 = n2 * b * (xi1 - xi * xi)
        result[i] += t1 + n2 * (xi - a)
        result[i + 1] += t2
    return tuple(result)


def rosenbrock_hessian_const(param: Sequence, a, b) -> Tuple[Tuple, ...]:
    """Hessian of the Rosenbrock function for a fixed-length parameter.

    Walks the adjacent pairs left to right. Each pair adds its share to the
    diagonal entry of its left coordinate and overwrites the trailing diagonal
    entry and the two off-diagonal entries it owns. The next pair then adds
    onto the trailing entry it inherited.

    Args:
        param: Sequence of n >= 1 real scalars of one type.
        a: First coefficient (unused, see :func:`rosenbrock_hessian`).
        b: Second coefficient.

    Returns:
        Tuple of n rows, each a tuple of n scalars.
    """
    x, t = _const_scalars(param, "rosenbrock_hessian_const")
    n = len(x)
    b = t(b)
    n0 = t(0.0)
    n2 = t(2.0)
    n4 = t(4.0)
    n12 = t(12.0)

    hessian = [[n0] * n for _ in range(n)]
    for i in range(n - 1):
        xi = x[i]
        xi1 = x[i + 1]
        hessian[i][i] += n12 * b * (xi * xi) - n4 * b * xi1 + n2
        hessian[i + 1][i + 1] = n2 * b
        hessian[i][i + 1] = -n4 * b * xi
        hessian[i + 1][i] = -n4 * b * xi
    return tuple(tuple(row) for row in hessian)


__all__ = [
    "rosenbrock",
    "rosenbrock_derivative",
    "rosenbrock_derivative_const",
    "rosenbrock_hessian",
    "rosenbrock_hessian_const",
]
