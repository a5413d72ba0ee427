"""Tests for core diagnostic functions."""

import numpy as np
import pytest
import torch

from optbench.diagnostics import (
    assert_finite,
    assert_symmetric,
    is_finite,
    is_symmetric,
)


def test_is_symmetric_numpy_and_torch() -> None:
    mat = np.array([[2.0, -1.0], [-1.0, 3.0]])
    assert is_symmetric(mat)
    assert is_symmetric(torch.tensor(mat))
    assert is_symmetric([[1.0]])


def test_is_symmetric_rejects_asymmetric_and_non_square() -> None:
    assert not is_symmetric(np.array([[1.0, 2.0], [0.0, 1.0]]))
    assert not is_symmetric(np.ones((2, 3)))
    assert not is_symmetric(np.ones(3))
    assert not is_symmetric(torch.tensor([[1.0, 2.0], [0.0, 1.0]]))


def test_is_symmetric_tolerance() -> None:
    mat = np.array([[1.0, 1.0 + 1e-9], [1.0, 1.0]])
    assert not is_symmetric(mat)
    assert is_symmetric(mat, atol=1e-8)


def test_is_symmetric_non_finite() -> None:
    mat = np.array([[np.nan, 0.0], [0.0, 1.0]])
    assert not is_symmetric(mat)


def test_assert_symmetric_raises() -> None:
    with pytest.raises(ValueError, match="not symmetric"):
        assert_symmetric(np.array([[1.0, 2.0], [0.0, 1.0]]))
    assert_symmetric(np.eye(3))


def test_is_finite_and_assert_finite() -> None:
    assert is_finite(np.array([1.0, 2.0]))
    assert is_finite(torch.zeros(3))
    assert not is_finite(np.array([1.0, np.inf]))
    assert not is_finite(torch.tensor([float("nan")]))

    with pytest.raises(ValueError, match="hessian contains non-finite"):
        assert_finite(np.array([np.nan]), name="hessian")
    assert_finite(np.array([]))
