"""Internal type aliases used in type hints."""
from typing import Sequence, Union

import numpy as np

#: Anything that can be converted into a 3D vector
_Vector = Union[np.ndarray, Sequence[float]]
