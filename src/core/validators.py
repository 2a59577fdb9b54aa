"""
Input Validators - Operand type checks.

JSON has a single number type, so "integer" here means a number with
no fractional part: 7 and 7.0 are both the integer 7. Booleans are
never integers even though bool subclasses int in Python.
"""
import math
from typing import Any


def is_json_integer(value: Any) -> bool:
    """
    Check whether a decoded JSON value is an integer.

    Args:
        value: Any value produced by json.loads

    Returns:
        True for ints and for finite floats with no fractional part
    """
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    if isinstance(value, float):
        return math.isfinite(value) and value.is_integer()
    return False


def coerce_json_integer(value: Any) -> int:
    """
    Convert a JSON integer to a Python int.

    Used as a pydantic before-validator so that 5.0 arrives as 5.

    Raises:
        ValueError: If the value is not an integer
    """
    if not is_json_integer(value):
        raise ValueError("value must be an integer")
    return int(value)
