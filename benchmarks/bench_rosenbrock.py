"""Benchmark Rosenbrock derivative call overhead, array path vs fixed-length path."""

import time
from typing import Callable, Dict

import numpy as np

from optbench.testfunctions import (
    rosenbrock_derivative,
    rosenbrock_derivative_const,
    rosenbrock_hessian,
    rosenbrock_hessian_const,
)


def _time_calls(func: Callable, arg, n_calls: int) -> float:
    # Warmup
    for _ in range(10):
        func(arg, 1.0, 100.0)

    start = time.perf_counter()
    for _ in range(n_calls):
        func(arg, 1.0, 100.0)
    return (time.perf_counter() - start) / n_calls


def benchmark_rosenbrock(n_dim: int, n_calls: int = 2000) -> Dict[str, float]:
    """Benchmark gradient and Hessian evaluation for one dimension.

    Args:
        n_dim: Number of parameters.
        n_calls: Number of timed calls per function.

    Returns:
        Dictionary with seconds per call for each code path.
    """
    rng = np.random.default_rng(0)
    x = rng.uniform(-1.0, 1.0, size=n_dim)
    x_tuple = tuple(float(v) for v in x)

    return {
        "n_dim": n_dim,
        "grad_array_sec": _time_calls(rosenbrock_derivative, x, n_calls),
        "grad_const_sec": _time_calls(rosenbrock_derivative_const, x_tuple, n_calls),
        "hess_array_sec": _time_calls(rosenbrock_hessian, x, n_calls),
        "hess_const_sec": _time_calls(rosenbrock_hessian_const, x_tuple, n_calls),
    }


if __name__ == "__main__":
    print("Benchmarking Rosenbrock derivatives...")
    for n in [2, 4, 8, 32, 128]:
        result = benchmark_rosenbrock(n)
        print(
            f"n={n:4d}  grad array {result['grad_array_sec'] * 1e6:8.2f} us  "
            f"grad const {result['grad_const_sec'] * 1e6:8.2f} us  "
            f"hess array {result['hess_array_sec'] * 1e6:8.2f} us  "
            f"hess const {result['hess_const_sec'] * 1e6:8.2f} us"
        )
