"""
Errors raised by the function catalog.

All of them derive from ValueError, so callers catching ValueError
keep working.
"""

from __future__ import annotations


class FinaError(ValueError):
    """Base class for all errors raised by Fina."""


class EmptyInputError(FinaError):
    """The operation requires at least one element."""

    def __init__(self, what: str = "Data"):
        self.what = what
        super().__init__(f"{what} cannot be empty")

    def __reduce__(self):
        return type(self), (self.what,)


class LengthMismatchError(FinaError):
    """A two-sequence operation was given sequences of unequal length."""

    def __init__(self, len_a: int, len_b: int):
        self.lengths = (len_a, len_b)
        super().__init__(f"Vectors must be same length ({len_a} vs {len_b})")

    def __reduce__(self):
        return type(self), self.lengths


class DegenerateRangeError(FinaError):
    """The scale used as a divisor (range or standard deviation) is zero."""


class ZeroNormError(FinaError):
    """At least one vector has zero norm."""
