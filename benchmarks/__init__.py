"""Performance benchmarks for optbench.

The benchmark functions are called millions of times by iterative solvers, so
these microbenchmarks track per-call overhead of the derivative code paths.
"""
