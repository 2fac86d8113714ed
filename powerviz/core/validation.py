"""
Scalar input validation utilities for powerviz.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent coercion beyond float()/int() of real numbers
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import math
from numbers import Real

import numpy as np

from powerviz.core.exceptions import ValidationError


def check_scalar(value, name: str) -> float:
    """
    Validate that value is a real number and convert it to float.

    Booleans are rejected even though they are ints in Python; a checkbox
    value leaking into a numeric field is a caller bug.

    Args:
        value: Input to validate
        name: Parameter name for error messages

    Returns:
        The value as a Python float (may be NaN or infinite)

    Raises:
        ValidationError: If value is not a real number
    """
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, (Real, np.number)):
        raise ValidationError(
            f"{name}: expected a real number, got {type(value).__name__} {value!r}"
        )
    if isinstance(value, np.complexfloating):
        raise ValidationError(f"{name}: expected a real number, got complex {value!r}")
    return float(value)


def check_finite_scalar(value: float, name: str) -> None:
    """
    Verify a scalar is neither NaN nor infinite.

    Raises:
        ValidationError: If value is not finite
    """
    if not math.isfinite(value):
        raise ValidationError(f"{name}: must be finite, got {value}")


def check_positive(value: float, name: str) -> None:
    """
    Verify a scalar is strictly positive and finite.

    NaN fails this check (NaN > 0 is False).

    Raises:
        ValidationError: If value <= 0, NaN or infinite
    """
    if not (value > 0.0 and math.isfinite(value)):
        raise ValidationError(f"{name}: must be positive and finite, got {value}")


def check_open_interval(value: float, low: float, high: float, name: str) -> None:
    """
    Verify low < value < high.

    Raises:
        ValidationError: If value is outside the open interval or NaN
    """
    if not (low < value < high):
        raise ValidationError(
            f"{name}: must be in the open interval ({low:g}, {high:g}), got {value}"
        )


def check_positive_integer(value, name: str) -> int:
    """
    Validate a count and convert it to int.

    Integral floats (30.0) are accepted; fractional, NaN and infinite
    values are not.

    Args:
        value: Input to validate
        name: Parameter name for error messages

    Returns:
        The value as a Python int

    Raises:
        ValidationError: If value is not a positive whole number
    """
    if isinstance(value, (bool, np.bool_)):
        raise ValidationError(f"{name}: expected an integer, got bool {value!r}")
    if isinstance(value, (int, np.integer)):
        count = int(value)
    else:
        as_float = check_scalar(value, name)
        if not (math.isfinite(as_float) and as_float.is_integer()):
            raise ValidationError(f"{name}: expected a whole number, got {value}")
        count = int(as_float)
    if count <= 0:
        raise ValidationError(f"{name}: must be positive, got {count}")
    return count
