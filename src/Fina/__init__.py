"""
Fina
~~~~

Stateless numeric functions: statistics, vector metrics,
activations, losses, scaling and smoothing.


"""

from . import activations, losses, scaling, smoothing, statistics, vector
from .activations import (
    LEAKY_RELU_ALPHA,
    leaky_relu,
    relu,
    sigmoid,
    softmax,
    tanh_act,
)
from .exceptions import (
    DegenerateRangeError,
    EmptyInputError,
    FinaError,
    LengthMismatchError,
    ZeroNormError,
)
from .losses import EPSILON, cross_entropy, log_loss, mse
from .scaling import clamp, min_max_normalize, z_score_normalize
from .smoothing import ema
from .statistics import Description, describe, mean, rms, std_dev, variance
from .vector import cosine_similarity, dot, euclidean, norm

__all__ = [
    "activations",
    "losses",
    "scaling",
    "smoothing",
    "statistics",
    "vector",
    "mean",
    "variance",
    "std_dev",
    "rms",
    "describe",
    "Description",
    "dot",
    "norm",
    "euclidean",
    "cosine_similarity",
    "sigmoid",
    "relu",
    "leaky_relu",
    "tanh_act",
    "softmax",
    "LEAKY_RELU_ALPHA",
    "mse",
    "cross_entropy",
    "log_loss",
    "EPSILON",
    "min_max_normalize",
    "z_score_normalize",
    "clamp",
    "ema",
    "FinaError",
    "EmptyInputError",
    "LengthMismatchError",
    "DegenerateRangeError",
    "ZeroNormError",
]
