from enum import Enum
from numpy.typing import NDArray
import numpy as np


BitArray = NDArray[np.bool_]  # little-endian, bits[i] has weight 2**i

# Decoded values live in a signed 64-bit integer; the sign bit is never written.
INT_MAX = int(np.iinfo(np.int64).max)
INT_MIN = int(np.iinfo(np.int64).min)
MAX_BITS = 63


class Result(Enum):
    """Outcome of a single binary measurement."""

    Zero = 0
    One = 1

    def __str__(self) -> str:
        return self.name
