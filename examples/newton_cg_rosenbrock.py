"""
Example: Newton-CG on the Rosenbrock function

This example hands the optbench Rosenbrock cost, gradient and Hessian to
SciPy's Newton-CG solver, starting from the classic point (-1.2, 1.0).
Requires SciPy (``pip install optbench[examples]``).
"""

import logging

import numpy as np
from scipy.optimize import minimize

from optbench import configure_logging, get_logger, rosenbrock_problem

logger = get_logger(__name__)


def run(init_param: np.ndarray, max_iters: int = 100):
    problem = rosenbrock_problem(a=1.0, b=100.0, dim=init_param.size)
    logger.info("starting Newton-CG from %s", init_param)
    return minimize(
        problem.fun,
        init_param,
        jac=problem.grad,
        hess=problem.hess,
        method="Newton-CG",
        options={"maxiter": max_iters, "xtol": 1e-10},
    )


def main() -> None:
    configure_logging(level=logging.INFO)
    res = run(np.array([-1.2, 1.0]))
    print("=" * 60)
    print("Newton-CG on Rosenbrock (a=1, b=100)")
    print("=" * 60)
    print(f"Success:     {res.success}")
    print(f"Iterations:  {res.nit}")
    print(f"Final param: {res.x}")
    print(f"Final cost:  {res.fun:.3e}")


if __name__ == "__main__":
    main()
