"""Array helpers shared by the optimizers."""

from typing import Tuple, Union

import numpy as np

from numopt.constants import DType
from numopt.exceptions import ConfigurationError


Bound = Union[float, np.ndarray]


def broadcast_bound(bound: Bound, shape: Tuple[int, ...], dtype: DType, name: str = "bound") -> np.ndarray:
    """Expand a scalar or per-coordinate bound to `shape`.

    A bound with a single element applies to every coordinate. Any other bound must have exactly one
    element per coordinate; its own shape (row, column, flat) is not significant.
    """
    values = np.asarray(bound, dtype=dtype)
    size = int(np.prod(shape))
    if values.size == 1:
        return np.full(shape, values.reshape(-1)[0], dtype=dtype)
    if values.size != size:
        raise ConfigurationError(f"`{name}` has {values.size} elements but the iterate has {size}")
    return values.reshape(shape).copy()
