import numpy as np
import numba as nb


## ======================================================================================
## bool array <-> int64, little-endian
## ======================================================================================


@nb.njit
def pack_le(mask: np.ndarray) -> int:
    """
    Accumulate a bool mask into an integer.
    mask[0] is the least significant bit.

    Caller keeps mask.shape[0] <= 63 so the result stays a non-negative int64.
    """
    value = 0
    for i in range(mask.shape[0]):
        if mask[i]:
            value |= 1 << i
    return value


@nb.njit
def unpack_le(number: int, width: int):
    """
    Split the low `width` bits of a non-negative `number` into a bool array.
    out[0] is the least significant bit.

    Returns:
        (out, rest) where rest is what remains of `number` after `width` shifts;
        rest == 0 iff number fits into `width` bits.
    """
    out = np.zeros(width, dtype=np.bool_)
    rest = number
    for k in range(width):
        out[k] = (rest & 1) != 0
        rest >>= 1
    return out, rest
