"""
Application Configuration - Central configuration management.

This module provides configuration management for the application,
including environment variables and runtime settings such as the tax
rates applied to newly created invoices.
"""

import os
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Any


class Environment(Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    STAGING = "staging"
    PRODUCTION = "production"


@dataclass
class TaxConfig:
    """Tax rates applied to new invoices."""

    provincial_sales_tax_rate: Decimal = Decimal("0.07")
    goods_and_services_tax_rate: Decimal = Decimal("0.05")

    @classmethod
    def from_env(cls) -> "TaxConfig":
        """Create configuration from environment variables."""
        return cls(
            provincial_sales_tax_rate=Decimal(os.getenv("INVOICE_PST_RATE", "0.07")),
            goods_and_services_tax_rate=Decimal(os.getenv("INVOICE_GST_RATE", "0.05")),
        )


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    file: str | None = None
    max_bytes: int = 10485760  # 10MB
    backup_count: int = 5

    @classmethod
    def from_env(cls) -> "LoggingConfig":
        """Create configuration from environment variables."""
        file_path = os.getenv("LOG_FILE")
        return cls(
            level=os.getenv("LOG_LEVEL", "INFO"),
            format=os.getenv("LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s"),
            file=file_path if file_path else None,
            max_bytes=int(os.getenv("LOG_MAX_BYTES", "10485760")),
            backup_count=int(os.getenv("LOG_BACKUP_COUNT", "5")),
        )


@dataclass
class ApplicationConfig:
    """Main application configuration."""

    environment: Environment = Environment.DEVELOPMENT
    tax: TaxConfig = field(default_factory=TaxConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            "environment": self.environment.value,
            "tax": {
                "provincial_sales_tax_rate": str(self.tax.provincial_sales_tax_rate),
                "goods_and_services_tax_rate": str(self.tax.goods_and_services_tax_rate),
            },
            "logging": {
                "level": self.logging.level,
                "format": self.logging.format,
                "file": self.logging.file,
                "max_bytes": self.logging.max_bytes,
                "backup_count": self.logging.backup_count,
            },
        }

    def validate(self) -> bool:
        """
        Validate the configuration.

        Returns:
            True if valid, raises exception otherwise
        """
        for name, rate in (
            ("Provincial sales tax rate", self.tax.provincial_sales_tax_rate),
            ("Goods and services tax rate", self.tax.goods_and_services_tax_rate),
        ):
            if rate < 0 or rate > 1:
                raise ValueError(f"{name} must be between 0 and 1")

        if self.environment == Environment.PRODUCTION and self.logging.level.upper() == "DEBUG":
            raise ValueError("Debug logging should be disabled in production")

        return True


# Global configuration singleton
_config: ApplicationConfig | None = None


def get_config() -> ApplicationConfig:
    """
    Get the application configuration singleton.

    Returns:
        ApplicationConfig: The application configuration
    """
    global _config
    if _config is None:
        from src.application import config_loader

        _config = config_loader.ConfigLoader.from_env()
    return _config


def set_config(config: ApplicationConfig) -> None:
    """
    Set the application configuration.

    Args:
        config: The new configuration
    """
    global _config
    _config = config


def reset_config() -> None:
    """Reset the configuration singleton."""
    global _config
    _config = None
