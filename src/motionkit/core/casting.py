"""Numeric casting helpers."""

from __future__ import annotations

import math
import numbers
from decimal import Decimal, InvalidOperation
from typing import Any

from .exceptions import CastError


def is_struct_value(value: Any) -> bool:
    """Check if value is a named-tuple value struct."""
    return isinstance(value, tuple) and hasattr(value, "_fields")


def is_boxed_value(value: Any) -> bool:
    """Check if value is a raw boxed value.

    Boxed values are plain scalars and value structs. They have no settable
    sub-properties of their own and are always replaced wholesale.
    """
    if isinstance(value, bool):
        return False
    return isinstance(value, numbers.Real) or is_struct_value(value)


def to_number(value: Any) -> float:
    """Convert a boxed scalar to a float.

    Args:
        value: bool, real number, Decimal, or numeric string

    Returns:
        The value as a float

    Raises:
        CastError: If the value has no numeric representation
    """
    if isinstance(value, bool):
        return 1.0 if value else 0.0

    if isinstance(value, (numbers.Real, Decimal)):
        return float(value)

    if isinstance(value, str):
        try:
            number = float(Decimal(value.strip()))
        except (InvalidOperation, ValueError) as e:
            raise CastError(f"Not a numeric string: {value!r}") from e
        if math.isnan(number):
            raise CastError(f"Not a numeric string: {value!r}")
        return number

    raise CastError(
        "Value has no numeric representation",
        {"type": type(value).__name__},
    )
