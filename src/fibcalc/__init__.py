"""
fibcalc — Fibonacci numbers of arbitrary magnitude.

Several independent engines (fast doubling, Lucas doubling, Fibonacci/Lucas
recursion, Binet in arbitrary-precision floating point) plus a harness that
cross-validates and times them.
"""

__version__ = "1.0.0"
