from __future__ import annotations
from typing import Tuple, Union

import numpy as np
from numpy.typing import NDArray

Scalar = int | float
Point = Tuple[float, float]
Coordinate = Union[Scalar, NDArray[np.floating]]

ndarray_fraction = NDArray[np.float64]
ndarray_mask = NDArray[np.bool_]
ndarray_channels = NDArray[np.uint8]
