"""Schaffer test functions No. 2 and No. 4.

Schaffer No. 2:

    f(x_1, x_2) = 0.5 + (sin^2(x_1^2 - x_2^2) - 0.5) / (1 + 0.0001 (x_1^2 + x_2^2))^2

with the global minimum f(0, 0) = 0.

Schaffer No. 4:

    f(x_1, x_2) = 0.5 + (cos^2(sin(|x_1^2 - x_2^2|)) - 0.5) / (1 + 0.0001 (x_1^2 + x_2^2))^2

with the global minimum f(0, +-1.25313) = 0.291992.

Both are usually evaluated on x_i in [-100, 100].
"""

from __future__ import annotations

from ._utils import check_length, check_param, const

SCHAFFER_N2_MINIMUM: tuple[tuple[float, float], float] = ((0.0, 0.0), 0.0)
SCHAFFER_N4_MINIMUM: tuple[tuple[float, float], float] = ((0.0, 1.25313), 0.291992)


def _denominator(x, x1, x2):
    n1 = const(x, 1.0)
    n0001 = const(x, 0.0001)
    return (n1 + n0001 * (x1**2 + x2**2)) ** 2


def schaffer_n2(param):
    """Evaluate the Schaffer function No. 2.

    Args:
        param: Length-2 array-like or tensor ``(x_1, x_2)``.

    Returns:
        Scalar of the input dtype (0-d tensor for torch input).

    Raises:
        ValueError: If ``param`` does not hold exactly two coordinates.
    """
    x, xp = check_param(param)
    check_length(x, 2, "schaffer_n2")
    x1, x2 = x[0], x[1]
    n05 = const(x, 0.5)
    return n05 + (xp.sin(x1**2 - x2**2) ** 2 - n05) / _denominator(x, x1, x2)


def schaffer_n4(param):
    """Evaluate the Schaffer function No. 4.

    Args:
        param: Length-2 array-like or tensor ``(x_1, x_2)``.

    Returns:
        Scalar of the input dtype (0-d tensor for torch input).

    Raises:
        ValueError: If ``param`` does not hold exactly two coordinates.
    """
    x, xp = check_param(param)
    check_length(x, 2, "schaffer_n4")
    x1, x2 = x[0], x[1]
    n05 = const(x, 0.5)
    return n05 + (xp.cos(xp.sin(xp.abs(x1**2 - x2**2))) ** 2 - n05) / _denominator(
        x, x1, x2
    )


__all__ = ["SCHAFFER_N2_MINIMUM", "SCHAFFER_N4_MINIMUM", "schaffer_n2", "schaffer_n4"]
