"""Configuration constants."""

from typing import Union

import numpy as np


DType = Union[str, np.dtype, type]
DEFAULT_DTYPE: DType = np.float64


# Parameter state. Any floating-point array works: a column vector, a row vector or a matrix.
Coordinates = np.ndarray
