from __future__ import annotations

from collections.abc import Callable

import numpy as np
from numpy.typing import NDArray

# typing only
FloatArray = NDArray[np.floating]
ArrayLike = float | np.ndarray | np.floating
ScalarFn = Callable[[float], float]
