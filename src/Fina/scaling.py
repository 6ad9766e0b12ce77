"""
Normalization and scaling of values.
"""

from __future__ import annotations

import math

import numpy as np

from ._typing import Scalar, Values, Vector
from .exceptions import DegenerateRangeError
from .statistics import mean, std_dev
from .util import MACHINE_EPSILON, as_vector


def min_max_normalize(data: Values) -> Vector:
    """Rescale values linearly to the [0, 1] range.

    Parameters
    ----------
    data: sequence of float
        Input values.

    Returns
    -------
    numpy array (shape=(N, ))
        (x - min) / (max - min) for each element.

    Raises
    ------
    EmptyInputError
        If `data` is empty.
    DegenerateRangeError
        If all elements are equal, as the range would be zero.
    """

    x = as_vector(data, allow_empty=False)

    lo = np.min(x)
    hi = np.max(x)

    if hi - lo < MACHINE_EPSILON:
        raise DegenerateRangeError("All elements are equal, cannot normalize")

    return (x - lo) / (hi - lo)


def z_score_normalize(data: Values) -> Vector:
    """Standardize values to zero mean and unit (population) standard deviation.

    Raises
    ------
    EmptyInputError
        If `data` is empty.
    DegenerateRangeError
        If the standard deviation is zero.
    """

    x = as_vector(data, allow_empty=False)

    m = mean(x)
    s = std_dev(x)

    if s < MACHINE_EPSILON:
        raise DegenerateRangeError("Standard deviation is zero, cannot normalize")

    return (x - m) / s


def clamp(x: Scalar, lo: Scalar, hi: Scalar) -> Scalar:
    """Limit x to the [lo, hi] interval, max(lo, min(x, hi)).

    Bounds are not swapped: `lo` greater than `hi` raises ValueError.
    NaN is returned unchanged.
    """

    if lo > hi:
        raise ValueError(f"Lower bound cannot be greater than upper bound ({lo} > {hi})")

    if math.isnan(x):
        return float(x)

    return float(max(lo, min(x, hi)))
