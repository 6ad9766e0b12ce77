"""
Neural network activation functions.
"""

from __future__ import annotations

import math

import numpy as np
from scipy import special

from ._typing import Scalar, Values, Vector
from .util import as_vector

#: Slope commonly used for the negative side of `leaky_relu`.
#: It is a convention for callers and is never applied implicitly.
LEAKY_RELU_ALPHA = 0.01


def sigmoid(x: Scalar) -> Scalar:
    """Logistic function 1 / (1 + exp(-x)).

    Stable for any x: very negative inputs do not overflow exp(-x).
    """

    return float(special.expit(x))


def relu(x: Scalar) -> Scalar:
    return float(max(0.0, x))


def leaky_relu(x: Scalar, alpha: Scalar) -> Scalar:
    """Return x if x > 0 else alpha * x.

    Parameters
    ----------
    x: float
        Input value.
    alpha: float
        Slope for non-positive inputs. Typical values are 0.01 to 0.1,
        see `LEAKY_RELU_ALPHA`.
    """

    return float(x) if x > 0 else float(alpha * x)


def tanh_act(x: Scalar) -> Scalar:
    return math.tanh(x)


def softmax(data: Values) -> Vector:
    """Normalized exponential of a vector.

    The maximum is subtracted before exponentiation, so large inputs
    do not overflow.

    Parameters
    ----------
    data: sequence of float
        Input logits.

    Returns
    -------
    numpy array (shape=(N, ))
        Non-negative values adding up to 1.

    Raises
    ------
    EmptyInputError
        If `data` is empty.
    """

    x = as_vector(data, allow_empty=False)

    return np.asarray(special.softmax(x), dtype=np.float64)
