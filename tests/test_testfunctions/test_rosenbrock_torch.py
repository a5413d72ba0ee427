"""Cross-check the analytic Rosenbrock derivatives against torch autograd."""

import numpy as np
import pytest
import torch

from optbench.testfunctions import (
    rosenbrock,
    rosenbrock_derivative,
    rosenbrock_hessian,
)


def _value(a, b):
    return lambda t: rosenbrock(t, a, b)


@pytest.mark.parametrize("coeffs", [(1.0, 100.0), (2.5, 10.0)])
def test_autograd_gradient_matches_derivative(coeffs):
    a, b = coeffs
    x = torch.empty(8, dtype=torch.float64).uniform_(-1.0, 1.0)
    x_local = x.clone().requires_grad_(True)
    value = rosenbrock(x_local, a, b)
    assert value.ndim == 0
    (grad_auto,) = torch.autograd.grad(value, x_local)

    grad = rosenbrock_derivative(x, a, b)
    assert isinstance(grad, torch.Tensor)
    assert torch.allclose(grad, grad_auto, rtol=1e-12, atol=1e-12)


@pytest.mark.parametrize("coeffs", [(1.0, 100.0), (2.5, 10.0)])
def test_autograd_hessian_matches_hessian(coeffs):
    a, b = coeffs
    x = torch.empty(6, dtype=torch.float64).uniform_(-1.0, 1.0)
    hess_auto = torch.autograd.functional.hessian(_value(a, b), x)
    hess = rosenbrock_hessian(x, a, b)
    assert hess.shape == (6, 6)
    assert torch.allclose(hess, hess_auto, rtol=1e-12, atol=1e-10)


def test_autograd_jacobian_of_derivative_matches_hessian():
    x = torch.empty(5, dtype=torch.float64).uniform_(-1.0, 1.0)
    jac = torch.autograd.functional.jacobian(lambda t: rosenbrock_derivative(t, 1.0, 100.0), x)
    hess = rosenbrock_hessian(x, 1.0, 100.0)
    assert torch.allclose(hess, jac, rtol=1e-12, atol=1e-10)


def test_torch_matches_numpy():
    x = torch.empty(7, dtype=torch.float64).uniform_(-1.0, 1.0)
    x_np = x.numpy()
    assert float(rosenbrock(x, 1.0, 100.0)) == pytest.approx(
        float(rosenbrock(x_np, 1.0, 100.0)), rel=1e-14
    )
    np.testing.assert_allclose(
        rosenbrock_derivative(x, 1.0, 100.0).numpy(),
        rosenbrock_derivative(x_np, 1.0, 100.0),
        rtol=1e-14,
        atol=1e-14,
    )
    np.testing.assert_allclose(
        rosenbrock_hessian(x, 1.0, 100.0).numpy(),
        rosenbrock_hessian(x_np, 1.0, 100.0),
        rtol=1e-14,
        atol=1e-14,
    )


def test_torch_keeps_dtype():
    x = torch.tensor([0.1, 0.2, 0.3], dtype=torch.float32)
    assert rosenbrock(x, 1.0, 100.0).dtype == torch.float32
    assert rosenbrock_derivative(x, 1.0, 100.0).dtype == torch.float32
    assert rosenbrock_hessian(x, 1.0, 100.0).dtype == torch.float32


def test_torch_integer_input_uses_default_dtype():
    x = torch.tensor([1, 1, 1])
    value = rosenbrock(x, 1.0, 100.0)
    assert value.dtype == torch.get_default_dtype()
    assert float(value) == 0.0


def test_torch_optimum_gradient_is_zero():
    grad = rosenbrock_derivative(torch.ones(8, dtype=torch.float64), 1.0, 100.0)
    assert torch.all(grad == 0.0)
