"""Analytic benchmark functions for validating optimizers.

Example
-------
>>> import numpy as np
>>> from optbench.testfunctions import himmelblau, rosenbrock
>>> float(himmelblau(np.array([3.0, 2.0])))
0.0
>>> float(rosenbrock(np.ones(8), 1.0, 100.0))
0.0
"""

from .himmelblau import HIMMELBLAU_MINIMA, HIMMELBLAU_MINIMUM_VALUE, himmelblau
from .rosenbrock import (
    rosenbrock,
    rosenbrock_derivative,
    rosenbrock_derivative_const,
    rosenbrock_hessian,
    rosenbrock_hessian_const,
)
from .schaffer import (
    SCHAFFER_N2_MINIMUM,
    SCHAFFER_N4_MINIMUM,
    schaffer_n2,
    schaffer_n4,
)

__all__ = [
    "HIMMELBLAU_MINIMA",
    "HIMMELBLAU_MINIMUM_VALUE",
    "SCHAFFER_N2_MINIMUM",
    "SCHAFFER_N4_MINIMUM",
    "himmelblau",
    "rosenbrock",
    "rosenbrock_derivative",
    "rosenbrock_derivative_const",
    "rosenbrock_hessian",
    "rosenbrock_hessian_const",
    "schaffer_n2",
    "schaffer_n4",
]
