"""
Car Wash Invoice Entity - Invoice for car wash packages and fragrances
"""

from __future__ import annotations

# Standard library imports
from decimal import Decimal

from ..events import ChangeEvent
from ..value_objects.utils import require_non_negative, require_rate
from .invoice import Invoice


class CarWashInvoice(Invoice):
    """
    Invoice for a car wash.

    The subtotal is the package cost plus the fragrance cost. Car washes are
    exempt from provincial sales tax, so only goods and services tax is
    charged, on the full subtotal.
    """

    def __init__(
        self,
        provincial_sales_tax_rate: Decimal | float | int | str,
        goods_and_services_tax_rate: Decimal | float | int | str,
        package_cost: Decimal | float | int | str = Decimal("0"),
        fragrance_cost: Decimal | float | int | str = Decimal("0"),
    ) -> None:
        """Initialize a car wash invoice.

        Omitting both costs gives the convenience form with zero costs.

        Args:
            provincial_sales_tax_rate: Provincial sales tax rate in [0, 1]
            goods_and_services_tax_rate: Goods and services tax rate in [0, 1]
            package_cost: Amount charged for the chosen package, >= 0
            fragrance_cost: Amount charged for the chosen fragrance, >= 0

        Raises:
            OutOfRangeInputException: For the first failing check, in the order
                provincial rate, goods/services rate, package cost, fragrance cost
        """
        require_rate(provincial_sales_tax_rate, "provincial_sales_tax_rate")
        require_rate(goods_and_services_tax_rate, "goods_and_services_tax_rate")
        package = require_non_negative(package_cost, "package_cost")
        fragrance = require_non_negative(fragrance_cost, "fragrance_cost")

        super().__init__(provincial_sales_tax_rate, goods_and_services_tax_rate)

        self.package_cost_changed = ChangeEvent("package_cost")
        self.fragrance_cost_changed = ChangeEvent("fragrance_cost")

        self._package_cost = package
        self._fragrance_cost = fragrance

    @property
    def package_cost(self) -> Decimal:
        """Get the amount charged for the chosen package."""
        return self._package_cost

    @package_cost.setter
    def package_cost(self, value: Decimal | float | int | str) -> None:
        """Set the package cost.

        Raises:
            OutOfRangeInputException: If value is negative
        """
        cost = require_non_negative(value, "package_cost")
        if cost != self._package_cost:
            self._on_package_cost_changed(cost)
        self._package_cost = cost

    @property
    def fragrance_cost(self) -> Decimal:
        """Get the amount charged for the chosen fragrance."""
        return self._fragrance_cost

    @fragrance_cost.setter
    def fragrance_cost(self, value: Decimal | float | int | str) -> None:
        """Set the fragrance cost.

        Raises:
            OutOfRangeInputException: If value is negative
        """
        cost = require_non_negative(value, "fragrance_cost")
        if cost != self._fragrance_cost:
            self._on_fragrance_cost_changed(cost)
        self._fragrance_cost = cost

    def _on_package_cost_changed(self, new_cost: Decimal) -> None:
        self.package_cost_changed.emit(self, self._package_cost, new_cost)

    def _on_fragrance_cost_changed(self, new_cost: Decimal) -> None:
        self.fragrance_cost_changed.emit(self, self._fragrance_cost, new_cost)

    @property
    def provincial_sales_tax_charged(self) -> Decimal:
        """No provincial sales tax is charged for a car wash."""
        return Decimal("0")

    @property
    def goods_and_services_tax_charged(self) -> Decimal:
        """Goods and services tax on the package and fragrance."""
        return (self._fragrance_cost + self._package_cost) * self.goods_and_services_tax_rate

    @property
    def sub_total(self) -> Decimal:
        """Package cost plus fragrance cost."""
        return self._fragrance_cost + self._package_cost

    def __repr__(self) -> str:
        return (
            f"CarWashInvoice(provincial_sales_tax_rate={self.provincial_sales_tax_rate}, "
            f"goods_and_services_tax_rate={self.goods_and_services_tax_rate}, "
            f"package_cost={self._package_cost}, fragrance_cost={self._fragrance_cost})"
        )
