from ._interface import BitArray, INT_MAX, INT_MIN, MAX_BITS, Result
from .convert import (
    bits_to_int,
    bool_array_as_result_array,
    bool_as_result,
    int_as_big_int,
    int_as_double,
    int_to_bits,
    measurements_to_int,
    result_array_as_bool_array,
    result_as_bool,
)
from .errors import (
    BitOverflowError,
    ConversionError,
    InvalidArgumentError,
    RangeError,
)

__all__ = [
    "BitArray",
    "INT_MAX",
    "INT_MIN",
    "MAX_BITS",
    "Result",
    "bits_to_int",
    "bool_array_as_result_array",
    "bool_as_result",
    "int_as_big_int",
    "int_as_double",
    "int_to_bits",
    "measurements_to_int",
    "result_array_as_bool_array",
    "result_as_bool",
    "BitOverflowError",
    "ConversionError",
    "InvalidArgumentError",
    "RangeError",
]
