"""Domain services for business logic that spans entities."""

from .financial import compute_annuity_payment
from .invoice_validation_service import InvoiceValidationService, ValidationResult

__all__ = [
    "compute_annuity_payment",
    "InvoiceValidationService",
    "ValidationResult",
]
