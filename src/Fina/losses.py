"""
Loss functions comparing a prediction against a target.

All functions take the prediction first and the target second.
Log based losses clamp predictions to `EPSILON` so that log(0) is never taken.
"""

from __future__ import annotations

import logging

import numpy as np

from ._typing import Scalar, Values, Vector
from .util import as_vector_pair

logger = logging.getLogger(__name__)

#: Floor applied to predictions before taking the logarithm.
EPSILON = 1e-12


def _clip_predictions(y_pred: Vector, lo: float, hi: float) -> Vector:
    clipped = np.clip(y_pred, lo, hi)

    if logger.isEnabledFor(logging.DEBUG):
        n_clipped = int(np.count_nonzero(clipped != y_pred))
        if n_clipped:
            logger.debug(
                "Clamped %d of %d predictions to [%g, %g]",
                n_clipped,
                y_pred.size,
                lo,
                hi,
            )

    return clipped


def mse(y_pred: Values, y_true: Values) -> Scalar:
    """Calculate the mean squared error.

    Parameters
    ----------
    y_pred: sequence of float
        Predicted values.
    y_true: sequence of float
        Target values.

    Returns
    -------
    mse: float
        mean((y_pred - y_true)**2)

    Raises
    ------
    LengthMismatchError
        If `y_pred` and `y_true` have different lengths.
    EmptyInputError
        If the inputs are empty.
    """

    p, t = as_vector_pair(y_pred, y_true, allow_empty=False)

    return float(np.sum((p - t) ** 2) / p.size)


def cross_entropy(y_pred: Values, y_true: Values) -> Scalar:
    """Calculate the categorical cross entropy.

    The result is the plain sum -sum(y_true * log(y_pred)), it is NOT divided
    by the number of elements. For example, cross_entropy([0.8, 0.2], [1, 0])
    is -log(0.8) ~ 0.2231.

    Parameters
    ----------
    y_pred: sequence of float
        Predicted probabilities.
        Values below `EPSILON` are raised to `EPSILON` before taking the log.
    y_true: sequence of float
        Target probabilities, typically one-hot encoded.

    Returns
    -------
    cross_entropy: float

    Raises
    ------
    LengthMismatchError
        If `y_pred` and `y_true` have different lengths.
    EmptyInputError
        If the inputs are empty.

    See Also
    --------
    log_loss for the binary, averaged version.
    """

    p, t = as_vector_pair(y_pred, y_true, allow_empty=False)
    p = _clip_predictions(p, EPSILON, np.inf)

    return float(-np.sum(t * np.log(p)))


def log_loss(y_pred: Values, y_true: Values) -> Scalar:
    """Calculate the binary cross entropy averaged over elements.

    -mean(y_true * log(y_pred) + (1 - y_true) * log(1 - y_pred))

    Parameters
    ----------
    y_pred: sequence of float
        Predicted probabilities.
        Values are clamped to [EPSILON, 1 - EPSILON] so both logs are finite.
    y_true: sequence of float
        Target labels, typically 0 or 1.

    Returns
    -------
    log_loss: float

    Raises
    ------
    LengthMismatchError
        If `y_pred` and `y_true` have different lengths.
    EmptyInputError
        If the inputs are empty.
    """

    p, t = as_vector_pair(y_pred, y_true, allow_empty=False)
    p = _clip_predictions(p, EPSILON, 1.0 - EPSILON)

    loss = t * np.log(p) + (1.0 - t) * np.log(1.0 - p)

    return float(-np.sum(loss) / p.size)
