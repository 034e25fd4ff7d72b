"""
Invoice Validation Service

Non-raising pre-validation for invoice and annuity inputs. Presentation
layers call these before constructing entities so every problem with a form
can be reported at once; the entities themselves still validate eagerly and
raise on the first violation.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Any

from ..exceptions import OutOfRangeInputException
from ..value_objects.utils import (
    require_non_negative,
    require_period_count,
    require_positive,
    require_rate,
    require_unit_rate,
)


@dataclass
class ValidationResult:
    """Result of a validation operation."""

    is_valid: bool
    errors: list[str]
    warnings: list[str]

    @classmethod
    def success(cls, warnings: list[str] | None = None) -> "ValidationResult":
        """Create a successful validation result."""
        return cls(is_valid=True, errors=[], warnings=warnings or [])

    @classmethod
    def failure(cls, errors: list[str], warnings: list[str] | None = None) -> "ValidationResult":
        """Create a failed validation result."""
        return cls(is_valid=False, errors=errors, warnings=warnings or [])

    @classmethod
    def from_lists(cls, errors: list[str], warnings: list[str]) -> "ValidationResult":
        if errors:
            return cls.failure(errors, warnings)
        return cls.success(warnings)


def _collect(errors: list[str], check: Any, value: Any, name: str) -> Any:
    try:
        return check(value, name)
    except OutOfRangeInputException as e:
        errors.append(str(e))
        return None


class InvoiceValidationService:
    """Validation of raw invoice and financing inputs without raising."""

    @staticmethod
    def validate_tax_rates(
        provincial_sales_tax_rate: Any, goods_and_services_tax_rate: Any
    ) -> ValidationResult:
        """Validate both tax rates against [0, 1]."""
        errors: list[str] = []
        _collect(errors, require_rate, provincial_sales_tax_rate, "provincial_sales_tax_rate")
        _collect(errors, require_rate, goods_and_services_tax_rate, "goods_and_services_tax_rate")
        return ValidationResult.from_lists(errors, [])

    @staticmethod
    def validate_car_wash_inputs(
        provincial_sales_tax_rate: Any,
        goods_and_services_tax_rate: Any,
        package_cost: Any = Decimal("0"),
        fragrance_cost: Any = Decimal("0"),
    ) -> ValidationResult:
        """Validate car wash invoice inputs in constructor order.

        Warns when a provincial rate is supplied, since car washes never
        charge it.
        """
        errors: list[str] = []
        warnings: list[str] = []

        pst_rate = _collect(
            errors, require_rate, provincial_sales_tax_rate, "provincial_sales_tax_rate"
        )
        _collect(errors, require_rate, goods_and_services_tax_rate, "goods_and_services_tax_rate")
        _collect(errors, require_non_negative, package_cost, "package_cost")
        _collect(errors, require_non_negative, fragrance_cost, "fragrance_cost")

        if pst_rate is not None and pst_rate > 0:
            warnings.append("Provincial sales tax is not charged on car washes")

        return ValidationResult.from_lists(errors, warnings)

    @staticmethod
    def validate_annuity_inputs(
        rate: Any, number_of_periods: Any, present_value: Any
    ) -> ValidationResult:
        """Validate annuity payment inputs."""
        errors: list[str] = []
        _collect(errors, require_unit_rate, rate, "rate")
        _collect(errors, require_period_count, number_of_periods, "number_of_periods")
        _collect(errors, require_positive, present_value, "present_value")
        return ValidationResult.from_lists(errors, [])
