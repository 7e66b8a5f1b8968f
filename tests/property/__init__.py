"""Property-based tests.

Hypothesis checks the functor and monad laws, swap involution, fold
determinism and the Result round trip over generated values.
"""
