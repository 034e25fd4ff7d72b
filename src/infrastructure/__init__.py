"""Infrastructure Layer for the invoicing system.

Concrete runtime concerns that sit outside the domain:
- logging_setup: applies LoggingConfig to the root logger
"""

from .logging_setup import configure_logging

__all__ = ["configure_logging"]
