"""
Descriptive statistics of a sequence of reals.

Variance and standard deviation are population statistics,
i.e. the divisor is the number of samples N (not N - 1).
"""

from __future__ import annotations

from typing import NamedTuple

import numpy as np

from ._typing import Scalar, Values
from .util import as_vector


def mean(data: Values) -> Scalar:
    """Calculate the arithmetic mean.

    Parameters
    ----------
    data: sequence of float
        Input values.

    Returns
    -------
    mean: float
        sum(data) / N

    Raises
    ------
    EmptyInputError
        If `data` is empty.
    """

    x = as_vector(data, allow_empty=False)

    return float(np.sum(x) / x.size)


def variance(data: Values) -> Scalar:
    """Calculate the population variance.

    Parameters
    ----------
    data: sequence of float
        Input values.

    Returns
    -------
    variance: float
        sum((x - mean)**2) / N

    Raises
    ------
    EmptyInputError
        If `data` is empty.

    See Also
    --------
    std_dev
    """

    x = as_vector(data, allow_empty=False)
    m = mean(x)

    return float(np.sum((x - m) ** 2) / x.size)


def std_dev(data: Values) -> Scalar:
    """Calculate the population standard deviation.

    This is the square root of `variance`, and fails under the same conditions.
    """

    return float(np.sqrt(variance(data)))


def rms(data: Values) -> Scalar:
    """Calculate the root mean square, sqrt(sum(x**2) / N).

    Raises
    ------
    EmptyInputError
        If `data` is empty.
    """

    x = as_vector(data, allow_empty=False)

    return float(np.sqrt(np.sum(x**2) / x.size))


class Description(NamedTuple):
    n: int
    mean: float
    variance: float
    std_dev: float
    rms: float
    minimum: float
    maximum: float


def describe(data: Values) -> Description:
    """Summarize a sequence with all the statistics of this module.

    Parameters
    ----------
    data: sequence of float
        Input values.

    Returns
    -------
    Description
        Number of samples, mean, population variance and standard deviation,
        root mean square, minimum and maximum.

    Raises
    ------
    EmptyInputError
        If `data` is empty.
    """

    x = as_vector(data, allow_empty=False)
    var = variance(x)

    return Description(
        n=x.size,
        mean=mean(x),
        variance=var,
        std_dev=float(np.sqrt(var)),
        rms=rms(x),
        minimum=float(np.min(x)),
        maximum=float(np.max(x)),
    )
