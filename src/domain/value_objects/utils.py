"""Utility functions for value objects."""

# Standard library imports
from decimal import Decimal, InvalidOperation

from ..exceptions import OutOfRangeInputException


def ensure_decimal(value: Decimal | float | int | str, name: str = "value") -> Decimal:
    """Convert value to Decimal if not already.

    Floats go through ``str`` so that ``0.07`` becomes ``Decimal("0.07")``.

    Args:
        value: Value to convert to Decimal
        name: Parameter name reported if the value is not numeric

    Returns:
        Decimal representation of the value

    Raises:
        OutOfRangeInputException: If the value is not a finite number
    """
    if isinstance(value, bool):
        raise OutOfRangeInputException(name, "must be numeric", value)
    if isinstance(value, Decimal):
        result = value
    else:
        try:
            result = Decimal(str(value))
        except (InvalidOperation, ValueError, TypeError):
            raise OutOfRangeInputException(name, "must be numeric", value) from None
    if not result.is_finite():
        raise OutOfRangeInputException(name, "must be numeric", value)
    return result


def require_rate(value: Decimal | float | int | str, name: str) -> Decimal:
    """Return value as a Decimal rate, enforcing the closed interval [0, 1]."""
    rate = ensure_decimal(value, name)
    if rate < 0:
        raise OutOfRangeInputException(name, "cannot be less than 0", value)
    if rate > 1:
        raise OutOfRangeInputException(name, "cannot be greater than 1", value)
    return rate


def require_non_negative(value: Decimal | float | int | str, name: str) -> Decimal:
    """Return value as a Decimal amount, rejecting negatives."""
    amount = ensure_decimal(value, name)
    if amount < 0:
        raise OutOfRangeInputException(name, "cannot be less than 0", value)
    return amount


def require_positive(value: Decimal | float | int | str, name: str) -> Decimal:
    """Return value as a Decimal, rejecting zero and negatives."""
    amount = ensure_decimal(value, name)
    if amount <= 0:
        raise OutOfRangeInputException(name, "cannot be less than or equal to 0", value)
    return amount


def require_unit_rate(value: Decimal | float | int | str, name: str) -> Decimal:
    """Return value as a Decimal rate in the half-open interval (0, 1]."""
    rate = require_positive(value, name)
    if rate > 1:
        raise OutOfRangeInputException(name, "cannot be greater than 1", value)
    return rate


def require_period_count(value: int, name: str) -> int:
    """Return value as a whole number of periods, rejecting zero and negatives."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise OutOfRangeInputException(name, "must be a whole number", value)
    if value <= 0:
        raise OutOfRangeInputException(name, "cannot be less than or equal to 0", value)
    return value
