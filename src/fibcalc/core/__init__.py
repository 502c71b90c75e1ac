"""
Core algorithms, result models, and output contracts.

This package is independent of the timing harness: engines are pure
functions of n and hold no state between calls.
"""
