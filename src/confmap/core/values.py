"""
Type narrowing for parsed JSON values.

Every function takes a value as produced by ``json.loads`` and returns it
converted to the requested type, or None when the value is of any other
JSON type. Nothing here raises on a mismatch.
"""

import copy
import math
import struct
from typing import Any, Callable, Dict, List, Optional, TypeVar

T = TypeVar("T")

INT64_RANGE = (-(2 ** 63), 2 ** 63 - 1)
INT32_RANGE = (-(2 ** 31), 2 ** 31 - 1)
INT16_RANGE = (-(2 ** 15), 2 ** 15 - 1)
INT8_RANGE = (-(2 ** 7), 2 ** 7 - 1)


def _is_int(value: Any) -> bool:
    # bool is a subclass of int
    return isinstance(value, int) and not isinstance(value, bool)


def _is_number(value: Any) -> bool:
    return _is_int(value) or isinstance(value, float)


def as_string(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


def as_bool(value: Any) -> Optional[bool]:
    return value if isinstance(value, bool) else None


def as_int(value: Any, bounds=INT64_RANGE) -> Optional[int]:
    """Integer literal within ``bounds`` (inclusive). Floats are never truncated."""
    if not _is_int(value):
        return None
    low, high = bounds
    if low <= value <= high:
        return value
    return None


def as_float64(value: Any) -> Optional[float]:
    if not _is_number(value):
        return None
    try:
        return float(value)
    except OverflowError:
        # integer literal too large for a double
        return None


def as_float32(value: Any) -> Optional[float]:
    """Number rounded to single precision; None if it does not fit."""
    number = as_float64(value)
    if number is None:
        return None
    try:
        rounded = struct.unpack("f", struct.pack("f", number))[0]
    except OverflowError:
        return None
    if math.isinf(rounded) and not math.isinf(number):
        return None
    return rounded


def as_map(value: Any) -> Optional[Dict[str, Any]]:
    return copy.deepcopy(value) if isinstance(value, dict) else None


def as_array(value: Any) -> Optional[List[Any]]:
    return copy.deepcopy(value) if isinstance(value, list) else None


def as_array_of(value: Any, convert: Callable[[Any], Optional[T]]) -> Optional[List[T]]:
    """
    Convert every element of a JSON array with ``convert``.

    The whole array is rejected as soon as one element fails to convert;
    partial results are never returned.
    """
    if not isinstance(value, list):
        return None
    result: List[T] = []
    for element in value:
        converted = convert(element)
        if converted is None:
            return None
        result.append(converted)
    return result
