"""
Input conversion and validation shared by all modules.
"""

from __future__ import annotations

import numpy as np

from ._typing import Values, Vector
from .exceptions import EmptyInputError, LengthMismatchError

#: Smallest difference treated as non-zero when a computed scale is used as a divisor.
MACHINE_EPSILON = float(np.finfo(np.float64).eps)


def as_vector(data: Values, *, allow_empty: bool = True) -> Vector:
    """Convert a sequence of reals to a one dimensional float64 array.

    The caller's object is never modified; functions in this package only
    read from the returned array.

    Parameters
    ----------
    data: sequence of float or numpy array
        Input values.
    allow_empty: bool, optional (default=True)
        If False, raise `EmptyInputError` for an empty input.

    Returns
    -------
    numpy array (shape=(N, ))
    """

    arr = np.asarray(data, dtype=np.float64)

    if arr.ndim != 1:
        raise ValueError(
            f"Expected a one dimensional sequence, got an array with {arr.ndim} dimensions"
        )

    if not allow_empty and arr.size == 0:
        raise EmptyInputError()

    return arr


def as_vector_pair(
    a: Values, b: Values, *, allow_empty: bool = True
) -> tuple[Vector, Vector]:
    """Convert two sequences to float64 arrays of the same length."""

    va = as_vector(a)
    vb = as_vector(b)

    if va.size != vb.size:
        raise LengthMismatchError(va.size, vb.size)

    if not allow_empty and va.size == 0:
        raise EmptyInputError("Vectors")

    return va, vb
