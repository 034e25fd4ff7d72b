"""
Domain-level exceptions for the invoicing system.

This module defines exceptions that are specific to domain logic and business rules.
These exceptions are raised within domain entities and services.
"""

from typing import Any


class DomainException(Exception):
    """Base exception for all domain-level errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.details = details or {}


class OutOfRangeInputException(DomainException, ValueError):
    """
    Raised when a constructor argument or property value violates its bounds.

    Carries the offending parameter name and the violated constraint so that
    callers can build actionable messages. Also a ValueError, so generic
    argument handling keeps working.
    """

    def __init__(self, parameter_name: str, constraint: str, value: Any = None) -> None:
        message = f"{parameter_name} {constraint}, got {value!r}"
        super().__init__(
            message,
            details={
                "parameter_name": parameter_name,
                "constraint": constraint,
                "value": str(value),
            },
        )
        self.parameter_name = parameter_name
        self.constraint = constraint
        self.value = value
