"""optbench - analytic benchmark functions for validating optimizers."""

__version__ = "0.1.0"

# Diagnostics
from .diagnostics import (
    assert_finite,
    assert_symmetric,
    debug_context,
    is_debug_enabled,
    is_finite,
    is_symmetric,
    set_debug_enabled,
)

# Logging
from .logging import configure_logging, get_logger, set_log_level

# Ordering primitive
from .math import Complex, is_supported, maximum, minimum

# Optimizer-facing problems
from .problem import (
    Problem,
    himmelblau_problem,
    rosenbrock_problem,
    schaffer_n2_problem,
    schaffer_n4_problem,
)

# Benchmark functions
from .testfunctions import (
    HIMMELBLAU_MINIMA,
    HIMMELBLAU_MINIMUM_VALUE,
    SCHAFFER_N2_MINIMUM,
    SCHAFFER_N4_MINIMUM,
    himmelblau,
    rosenbrock,
    rosenbrock_derivative,
    rosenbrock_derivative_const,
    rosenbrock_hessian,
    rosenbrock_hessian_const,
    schaffer_n2,
    schaffer_n4,
)

__all__ = [
    "__version__",
    # Diagnostics
    "assert_finite",
    "assert_symmetric",
    "debug_context",
    "is_debug_enabled",
    "is_finite",
    "is_symmetric",
    "set_debug_enabled",
    # Logging
    "configure_logging",
    "get_logger",
    "set_log_level",
    # Ordering primitive
    "Complex",
    "is_supported",
    "maximum",
    "minimum",
    # Problems
    "Problem",
    "himmelblau_problem",
    "rosenbrock_problem",
    "schaffer_n2_problem",
    "schaffer_n4_problem",
    # Benchmark functions
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
