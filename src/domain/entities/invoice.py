"""
Invoice Entity - Abstract base for service invoices
"""

from __future__ import annotations

# Standard library imports
from abc import ABC, abstractmethod
from decimal import Decimal

from ..events import ChangeEvent
from ..value_objects.utils import require_rate


class Invoice(ABC):
    """
    Abstract invoice holding provincial and goods/services tax rates.

    Concrete invoices supply the subtotal and the tax charged for each
    jurisdiction; the total is always derived from those three amounts.
    All financial values use Decimal for precision and nothing is cached.
    """

    def __init__(
        self,
        provincial_sales_tax_rate: Decimal | float | int | str,
        goods_and_services_tax_rate: Decimal | float | int | str,
    ) -> None:
        """Initialize the invoice with both tax rates.

        Args:
            provincial_sales_tax_rate: Provincial sales tax rate in [0, 1]
            goods_and_services_tax_rate: Goods and services tax rate in [0, 1]

        Raises:
            OutOfRangeInputException: If either rate is outside [0, 1]
        """
        pst_rate = require_rate(provincial_sales_tax_rate, "provincial_sales_tax_rate")
        gst_rate = require_rate(goods_and_services_tax_rate, "goods_and_services_tax_rate")

        self.provincial_sales_tax_changed = ChangeEvent("provincial_sales_tax_rate")
        self.goods_and_services_tax_changed = ChangeEvent("goods_and_services_tax_rate")

        self._provincial_sales_tax_rate = pst_rate
        self._goods_and_services_tax_rate = gst_rate

    @property
    def provincial_sales_tax_rate(self) -> Decimal:
        """Get the provincial sales tax rate."""
        return self._provincial_sales_tax_rate

    @provincial_sales_tax_rate.setter
    def provincial_sales_tax_rate(self, value: Decimal | float | int | str) -> None:
        """Set the provincial sales tax rate.

        Raises:
            OutOfRangeInputException: If value is outside [0, 1]
        """
        rate = require_rate(value, "provincial_sales_tax_rate")
        if rate != self._provincial_sales_tax_rate:
            self._on_provincial_sales_tax_changed(rate)
        self._provincial_sales_tax_rate = rate

    @property
    def goods_and_services_tax_rate(self) -> Decimal:
        """Get the goods and services tax rate."""
        return self._goods_and_services_tax_rate

    @goods_and_services_tax_rate.setter
    def goods_and_services_tax_rate(self, value: Decimal | float | int | str) -> None:
        """Set the goods and services tax rate.

        Raises:
            OutOfRangeInputException: If value is outside [0, 1]
        """
        rate = require_rate(value, "goods_and_services_tax_rate")
        if rate != self._goods_and_services_tax_rate:
            self._on_goods_and_services_tax_changed(rate)
        self._goods_and_services_tax_rate = rate

    def _on_provincial_sales_tax_changed(self, new_rate: Decimal) -> None:
        """Raise provincial_sales_tax_changed while the old rate is still stored."""
        self.provincial_sales_tax_changed.emit(self, self._provincial_sales_tax_rate, new_rate)

    def _on_goods_and_services_tax_changed(self, new_rate: Decimal) -> None:
        """Raise goods_and_services_tax_changed while the old rate is still stored."""
        self.goods_and_services_tax_changed.emit(
            self, self._goods_and_services_tax_rate, new_rate
        )

    @property
    @abstractmethod
    def provincial_sales_tax_charged(self) -> Decimal:
        """Amount of provincial sales tax charged to the customer."""

    @property
    @abstractmethod
    def goods_and_services_tax_charged(self) -> Decimal:
        """Amount of goods and services tax charged to the customer."""

    @property
    @abstractmethod
    def sub_total(self) -> Decimal:
        """Pre-tax amount of the invoice."""

    @property
    def total(self) -> Decimal:
        """Sum of subtotal and both taxes, recomputed on every read."""
        return (
            self.sub_total
            + self.provincial_sales_tax_charged
            + self.goods_and_services_tax_charged
        )

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(provincial_sales_tax_rate={self._provincial_sales_tax_rate}, "
            f"goods_and_services_tax_rate={self._goods_and_services_tax_rate})"
        )
