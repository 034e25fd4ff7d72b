"""Decimal conversion and bounds checks shared by entities and services."""

from .utils import (
    ensure_decimal,
    require_non_negative,
    require_period_count,
    require_positive,
    require_rate,
    require_unit_rate,
)

__all__ = [
    "ensure_decimal",
    "require_rate",
    "require_non_negative",
    "require_positive",
    "require_unit_rate",
    "require_period_count",
]
