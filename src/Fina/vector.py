"""
Metrics between pairs of vectors of equal length.
"""

from __future__ import annotations

import numpy as np

from ._typing import Scalar, Values
from .exceptions import ZeroNormError
from .util import MACHINE_EPSILON, as_vector, as_vector_pair


def dot(a: Values, b: Values) -> Scalar:
    """Calculate the dot product, sum(a[i] * b[i]).

    Parameters
    ----------
    a, b: sequence of float
        Vectors of equal length.

    Returns
    -------
    dot: float

    Raises
    ------
    LengthMismatchError
        If `a` and `b` have different lengths.
    """

    va, vb = as_vector_pair(a, b)

    return float(np.sum(va * vb))


def norm(v: Values) -> Scalar:
    """Euclidean norm, sqrt(dot(v, v))."""

    x = as_vector(v)

    return float(np.sqrt(np.sum(x * x)))


def euclidean(a: Values, b: Values) -> Scalar:
    """Calculate the euclidean distance, sqrt(sum((a[i] - b[i])**2)).

    Raises
    ------
    LengthMismatchError
        If `a` and `b` have different lengths.
    """

    va, vb = as_vector_pair(a, b)

    return float(np.sqrt(np.sum((va - vb) ** 2)))


def cosine_similarity(a: Values, b: Values) -> Scalar:
    """Calculate the cosine of the angle between two vectors.

    Parameters
    ----------
    a, b: sequence of float
        Non-empty vectors of equal length.

    Returns
    -------
    similarity: float
        dot(a, b) / (norm(a) * norm(b)), in [-1, 1].

    Raises
    ------
    LengthMismatchError
        If `a` and `b` have different lengths.
    EmptyInputError
        If the vectors are empty.
    ZeroNormError
        If either vector has zero norm, as the angle is undefined.
    """

    va, vb = as_vector_pair(a, b, allow_empty=False)

    norm_a = norm(va)
    norm_b = norm(vb)

    if norm_a < MACHINE_EPSILON or norm_b < MACHINE_EPSILON:
        raise ZeroNormError("Cannot compute cosine similarity for zero vectors")

    # rounding can push the ratio just past +-1
    return float(np.clip(dot(va, vb) / (norm_a * norm_b), -1.0, 1.0))
