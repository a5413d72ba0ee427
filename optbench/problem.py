"""Optimizer-facing problem descriptions built from the benchmark functions.

An optimizer consumes a benchmark as three callbacks: cost, gradient and
Hessian. :class:`Problem` bundles them with the dimension they accept.

Example
-------
>>> import numpy as np
>>> from optbench.problem import rosenbrock_problem
>>> problem = rosenbrock_problem(a=1.0, b=100.0, dim=2)
>>> problem.fun(np.array([1.0, 1.0]))
0.0
>>> problem.hess(np.array([0.0, 0.0])).shape
(2, 2)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

import numpy as np

from .logging import get_logger
from .testfunctions import (
    himmelblau,
    rosenbrock,
    rosenbrock_derivative,
    rosenbrock_hessian,
    schaffer_n2,
    schaffer_n4,
)

logger = get_logger(__name__)

Array = np.ndarray
Objective = Callable[[Array], float]
Gradient = Callable[[Array], Array]
Hessian = Callable[[Array], Array]


@dataclass(frozen=True)
class Problem:
    """Container describing an optimization problem."""

    fun: Objective
    grad: Optional[Gradient] = None
    hess: Optional[Hessian] = None
    dim: Optional[int] = None
    name: str = ""


def _as_point(x, dim: int, name: str) -> Array:
    x = np.asarray(x, dtype=float)
    if x.ndim != 1 or x.shape[0] != dim:
        raise ValueError(f"{name} expects a parameter of shape ({dim},), got {x.shape}")
    return x


def rosenbrock_problem(a: float, b: float, dim: int) -> Problem:
    """Rosenbrock problem with cost, gradient and Hessian callbacks.

    Args:
        a: First coefficient, usually 1.
        b: Second coefficient, usually 100.
        dim: Dimension every callback accepts.

    Raises:
        ValueError: If ``dim`` < 1. Callbacks raise ValueError when called
            with a parameter of another dimension.
    """
    if dim < 1:
        raise ValueError(f"dim must be >= 1, got {dim}")
    logger.debug("rosenbrock_problem(a=%s, b=%s, dim=%d)", a, b, dim)

    def fun(x: Array) -> float:
        return float(rosenbrock(_as_point(x, dim, "rosenbrock"), a, b))

    def grad(x: Array) -> Array:
        return rosenbrock_derivative(_as_point(x, dim, "rosenbrock"), a, b)

    def hess(x: Array) -> Array:
        return rosenbrock_hessian(_as_point(x, dim, "rosenbrock"), a, b)

    return Problem(fun=fun, grad=grad, hess=hess, dim=dim, name="rosenbrock")


def _two_dim_problem(func: Callable, name: str) -> Problem:
    def fun(x: Array) -> float:
        return float(func(_as_point(x, 2, name)))

    return Problem(fun=fun, dim=2, name=name)


def himmelblau_problem() -> Problem:
    """Himmelblau problem; cost callback only."""
    return _two_dim_problem(himmelblau, "himmelblau")


def schaffer_n2_problem() -> Problem:
    """Schaffer No. 2 problem; cost callback only."""
    return _two_dim_problem(schaffer_n2, "schaffer_n2")


def schaffer_n4_problem() -> Problem:
    """Schaffer No. 4 problem; cost callback only."""
    return _two_dim_problem(schaffer_n4, "schaffer_n4")


__all__ = [
    "Array",
    "Gradient",
    "Hessian",
    "Objective",
    "Problem",
    "himmelblau_problem",
    "rosenbrock_problem",
    "schaffer_n2_problem",
    "schaffer_n4_problem",
]
