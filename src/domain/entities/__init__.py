"""Domain entities with business logic."""

from .car_wash_invoice import CarWashInvoice
from .invoice import Invoice

__all__ = ["Invoice", "CarWashInvoice"]
