"""Himmelblau test function.

Defined as

    f(x_1, x_2) = (x_1^2 + x_2 - 11)^2 + (x_1 + x_2^2 - 7)^2

where x_i in [-5, 5]. The four global minima all have value 0:

* f(3, 2) = 0
* f(-2.805118, 3.131312) = 0
* f(-3.779310, -3.283186) = 0
* f(3.584428, -1.848126) = 0
"""

from __future__ import annotations

from ._utils import check_length, check_param, const

HIMMELBLAU_MINIMA: tuple[tuple[float, float], ...] = (
    (3.0, 2.0),
    (-2.805118, 3.131312),
    (-3.779310, -3.283186),
    (3.584428, -1.848126),
)
HIMMELBLAU_MINIMUM_VALUE = 0.0


def himmelblau(param):
    """Evaluate the Himmelblau function.

    Args:
        param: Length-2 array-like or tensor ``(x_1, x_2)``. Floating input
            keeps its precision.

    Returns:
        Scalar of the input dtype (0-d tensor for torch input).

    Raises:
        ValueError: If ``param`` does not hold exactly two coordinates.
    """
    x, _ = check_param(param)
    check_length(x, 2, "himmelblau")
    x1, x2 = x[0], x[1]
    n7 = const(x, 7.0)
    n11 = const(x, 11.0)
    return (x1**2 + x2 - n11) ** 2 + (x1 + x2**2 - n7) ** 2


__all__ = ["HIMMELBLAU_MINIMA", "HIMMELBLAU_MINIMUM_VALUE", "himmelblau"]
