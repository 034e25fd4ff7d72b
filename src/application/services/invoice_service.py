"""Invoice Service - Application layer orchestration for invoice operations."""

import logging
from dataclasses import dataclass
from decimal import Decimal

from ...domain.entities.car_wash_invoice import CarWashInvoice
from ...domain.entities.invoice import Invoice
from ...domain.exceptions import OutOfRangeInputException
from ...domain.services.financial import compute_annuity_payment
from ...domain.services.invoice_validation_service import (
    InvoiceValidationService,
    ValidationResult,
)
from ..config import TaxConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InvoiceSummary:
    """Point-in-time snapshot of an invoice's computed amounts."""

    invoice_type: str
    sub_total: Decimal
    provincial_sales_tax_charged: Decimal
    goods_and_services_tax_charged: Decimal
    total: Decimal

    def to_dict(self) -> dict[str, str]:
        return {
            "invoice_type": self.invoice_type,
            "sub_total": str(self.sub_total),
            "provincial_sales_tax_charged": str(self.provincial_sales_tax_charged),
            "goods_and_services_tax_charged": str(self.goods_and_services_tax_charged),
            "total": str(self.total),
        }


class InvoiceService:
    """Application layer service for creating and reading invoices.

    This service coordinates between:
    - Configuration (tax rates applied to new invoices)
    - Domain entities (CarWashInvoice)
    - Domain services (annuity payment formula, input pre-validation)
    """

    def __init__(self, tax_config: TaxConfig | None = None) -> None:
        """Initialize the invoice service.

        Args:
            tax_config: Rates for new invoices; defaults to the loaded application config
        """
        if tax_config is None:
            from ..config import get_config

            tax_config = get_config().tax
        self.tax_config = tax_config
        self.validator = InvoiceValidationService()

    def validate_car_wash(
        self,
        package_cost: Decimal | float | int | str = Decimal("0"),
        fragrance_cost: Decimal | float | int | str = Decimal("0"),
    ) -> ValidationResult:
        """Pre-validate car wash costs against the configured rates."""
        return self.validator.validate_car_wash_inputs(
            self.tax_config.provincial_sales_tax_rate,
            self.tax_config.goods_and_services_tax_rate,
            package_cost,
            fragrance_cost,
        )

    def create_car_wash_invoice(
        self,
        package_cost: Decimal | float | int | str = Decimal("0"),
        fragrance_cost: Decimal | float | int | str = Decimal("0"),
    ) -> CarWashInvoice:
        """Create a car wash invoice using the configured tax rates.

        Raises:
            OutOfRangeInputException: If a configured rate or a cost is out of range
        """
        try:
            invoice = CarWashInvoice(
                self.tax_config.provincial_sales_tax_rate,
                self.tax_config.goods_and_services_tax_rate,
                package_cost,
                fragrance_cost,
            )
        except OutOfRangeInputException as e:
            logger.warning(f"Rejected car wash invoice input: {e}")
            raise

        logger.info(
            f"Created car wash invoice: package={invoice.package_cost}, "
            f"fragrance={invoice.fragrance_cost}, total={invoice.total}"
        )
        return invoice

    def summarize(self, invoice: Invoice) -> InvoiceSummary:
        """Snapshot the computed amounts of any invoice."""
        return InvoiceSummary(
            invoice_type=type(invoice).__name__,
            sub_total=invoice.sub_total,
            provincial_sales_tax_charged=invoice.provincial_sales_tax_charged,
            goods_and_services_tax_charged=invoice.goods_and_services_tax_charged,
            total=invoice.total,
        )

    def quote_payment(
        self,
        rate: Decimal | float | int | str,
        number_of_periods: int,
        present_value: Decimal | float | int | str,
    ) -> Decimal:
        """Quote the periodic payment for financing present_value.

        Raises:
            OutOfRangeInputException: If any argument is out of range
        """
        try:
            payment = compute_annuity_payment(rate, number_of_periods, present_value)
        except OutOfRangeInputException as e:
            logger.warning(f"Rejected payment quote input: {e}")
            raise

        logger.info(
            f"Quoted payment {payment} for {present_value} over {number_of_periods} periods"
        )
        return payment
