"""Pytest configuration and shared fixtures for optbench tests.

This module provides:
- Deterministic RNG fixtures for numpy and torch
- Finite-difference helpers used to cross-check analytic derivatives
"""

import os
from typing import Callable

import numpy as np
import pytest
import torch


def _seed() -> int:
    return int(os.environ.get("TEST_RNG_SEED", "0"))


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).
    """
    return np.random.default_rng(_seed())


@pytest.fixture(scope="function", autouse=True)
def set_random_seeds() -> None:
    """Set global numpy and torch seeds before every test."""
    np.random.seed(_seed())
    torch.manual_seed(_seed())


def _central_diff(fun: Callable, x: np.ndarray, eps: float = 1e-6) -> np.ndarray:
    """Central-difference gradient of a scalar function."""
    x = np.asarray(x, dtype=float)
    grad = np.zeros_like(x)
    for i in range(x.size):
        ei = np.zeros_like(x)
        ei[i] = eps
        grad[i] = (float(fun(x + ei)) - float(fun(x - ei))) / (2.0 * eps)
    return grad


def _central_jacobian(fun: Callable, x: np.ndarray, eps: float = 1e-5) -> np.ndarray:
    """Central-difference Jacobian of a vector function, J[i, j] = d f_i / d x_j."""
    x = np.asarray(x, dtype=float)
    cols = []
    for j in range(x.size):
        ej = np.zeros_like(x)
        ej[j] = eps
        f_plus = np.asarray(fun(x + ej), dtype=float)
        f_minus = np.asarray(fun(x - ej), dtype=float)
        cols.append((f_plus - f_minus) / (2.0 * eps))
    return np.stack(cols, axis=1)


@pytest.fixture
def central_diff() -> Callable:
    return _central_diff


@pytest.fixture
def central_jacobian() -> Callable:
    return _central_jacobian


@pytest.fixture
def random_params(rng: np.random.Generator) -> np.ndarray:
    """Twenty random points in [-1, 1]^8."""
    return rng.uniform(-1.0, 1.0, size=(20, 8))
