"""Application services."""

from .invoice_service import InvoiceService, InvoiceSummary

__all__ = ["InvoiceService", "InvoiceSummary"]
