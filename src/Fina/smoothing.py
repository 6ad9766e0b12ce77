"""
Smoothing of ordered values.
"""

from __future__ import annotations

import warnings

import numpy as np

from ._typing import Scalar, Values, Vector
from .util import as_vector


def ema(data: Values, alpha: Scalar) -> Vector:
    """Calculate the exponential moving average.

    ema[0] = data[0]
    ema[i] = alpha * data[i] + (1 - alpha) * ema[i - 1]

    Parameters
    ----------
    data: sequence of float
        Ordered input values.
    alpha: float
        Smoothing factor, expected in [0, 1]. Higher values follow the data
        more closely. Values outside the interval are accepted, but a
        UserWarning is issued.

    Returns
    -------
    numpy array (shape=(N, ))
        Smoothed values.

    Raises
    ------
    EmptyInputError
        If `data` is empty.
    """

    x = as_vector(data, allow_empty=False)

    if not 0.0 <= alpha <= 1.0:
        warnings.warn(
            f"Smoothing factor alpha={alpha} is outside [0, 1].",
            UserWarning,
            stacklevel=2,
        )

    out = np.empty_like(x)
    out[0] = x[0]
    for ndx in range(1, x.size):
        out[ndx] = alpha * x[ndx] + (1.0 - alpha) * out[ndx - 1]

    return out
