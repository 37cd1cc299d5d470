from typing import Callable, Iterable, List, Sequence
import numpy as np

from ._interface import BitArray, INT_MAX, MAX_BITS, Result
from ._utils.packing import pack_le, unpack_le
from .errors import BitOverflowError, InvalidArgumentError, RangeError, fact


def _integer(value, name: str) -> int:
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, (int, np.integer)):
        raise TypeError(f"`{name}` must be an int, got {type(value).__name__}")
    return int(value)


def _decode(items: Sequence, is_set: Callable[[object], bool]) -> int:
    """
    Shared little-endian decode: items[i] contributes 2**i when `is_set(items[i])`.
    """
    n = len(items)
    fact(
        n <= MAX_BITS,
        RangeError,
        f"`bits` must be less than {MAX_BITS + 1}, but was {n}",
    )
    mask = np.fromiter((is_set(item) for item in items), dtype=np.bool_, count=n)
    return int(pack_le(mask))


## ======================================================================================
## int <-> bits
## ======================================================================================


def bits_to_int(bits: Sequence[bool]) -> int:
    """
    Convert a little-endian bool sequence to a non-negative integer.
    bits[0] is the least significant bit.

    Raises RangeError if the sequence has 64 or more elements.

    >>> bits_to_int([True, False, True])
    5
    """
    return _decode(bits, bool)


def int_to_bits(number: int, bits: int) -> BitArray:
    """
    Convert a non-negative integer to a little-endian bool array of exactly `bits`
    elements.

    Raises:
        InvalidArgumentError: `number` or `bits` is negative, or `number` is not a
            64-bit integer.
        BitOverflowError: `number` needs more than `bits` bits.

    >>> int_to_bits(6, 4).tolist()
    [False, True, True, False]
    """
    number = _integer(number, "number")
    bits = _integer(bits, "bits")
    fact(bits >= 0, InvalidArgumentError, f"`bits` must be non-negative, but was {bits}")
    fact(
        number >= 0,
        InvalidArgumentError,
        f"`number` must be non-negative, but was {number}",
    )
    fact(
        number <= INT_MAX,
        InvalidArgumentError,
        f"`number` must fit into a 64-bit integer, but was {number}",
    )

    out, rest = unpack_le(number, bits)
    fact(
        rest == 0,
        BitOverflowError,
        f"`number` ({number}) is too large to fit into {bits} bits",
    )
    return out


def measurements_to_int(results: Sequence[Result]) -> int:
    """
    Convert a little-endian sequence of measurement results to a non-negative
    integer. results[0] is the least significant bit; an element counts as set
    only if it equals Result.One.

    Raises RangeError if the sequence has 64 or more elements.

    >>> measurements_to_int([Result.One, Result.Zero])
    1
    """
    return _decode(results, result_as_bool)


## ======================================================================================
## Result <-> bool
## ======================================================================================


def result_as_bool(result: Result) -> bool:
    return result == Result.One


def bool_as_result(value: bool) -> Result:
    return Result.One if value else Result.Zero


def result_array_as_bool_array(results: Iterable[Result]) -> BitArray:
    """
    Element-wise Result -> bool. No length limit applies.
    """
    return np.array([result_as_bool(r) for r in results], dtype=np.bool_)


def bool_array_as_result_array(bits: Iterable[bool]) -> List[Result]:
    """
    Element-wise bool -> Result. No length limit applies.
    """
    return [bool_as_result(b) for b in bits]


## ======================================================================================
## Widening
## ======================================================================================


def int_as_double(number: int) -> float:
    """
    Exact for |number| <= 2**53, rounded to nearest beyond that.
    """
    return float(_integer(number, "number"))


def int_as_big_int(number: int) -> int:
    return _integer(number, "number")
