from collections import abc
from typing import TypeAlias

import numpy as np

Scalar: TypeAlias = float | int | np.float64
Vector: TypeAlias = np.ndarray[tuple[int,], np.dtype[np.float64]]
Values: TypeAlias = abc.Sequence[Scalar] | Vector
