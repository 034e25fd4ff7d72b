"""
Configuration Loader - Handles IO operations for configuration management.

This module is responsible for loading and saving configuration from/to
various sources (YAML files, environment variables, dotenv files) while
keeping the ApplicationConfig class focused on data representation and
validation.
"""

import os
from decimal import Decimal

import yaml
from dotenv import load_dotenv

from src.application.config import ApplicationConfig, Environment, LoggingConfig, TaxConfig


class ConfigLoader:
    """Handles loading and saving of configuration from various sources."""

    @classmethod
    def from_env(cls, env_file: str | None = None) -> ApplicationConfig:
        """
        Create configuration from environment variables.

        Args:
            env_file: Optional dotenv file loaded first; existing variables win

        Returns:
            ApplicationConfig: Configuration loaded from environment
        """
        if env_file is not None:
            load_dotenv(env_file, override=False)

        env_str = os.getenv("ENVIRONMENT", "development")
        try:
            environment = Environment(env_str)
        except ValueError:
            raise ValueError(f"Invalid environment: {env_str}")

        return ApplicationConfig(
            environment=environment,
            tax=TaxConfig.from_env(),
            logging=LoggingConfig.from_env(),
        )

    @classmethod
    def from_yaml(cls, path: str) -> ApplicationConfig:
        """
        Load configuration from YAML file.

        Args:
            path: Path to YAML configuration file

        Returns:
            ApplicationConfig: Configuration loaded from YAML file
        """
        with open(path) as f:
            data = yaml.safe_load(f)

        config = ApplicationConfig()

        # Handle empty or null YAML files
        if not data:
            return config

        if "environment" in data:
            config.environment = Environment(data["environment"])

        if "tax" in data:
            tax_data = data["tax"]
            config.tax = TaxConfig(
                provincial_sales_tax_rate=Decimal(
                    str(
                        tax_data.get(
                            "provincial_sales_tax_rate", config.tax.provincial_sales_tax_rate
                        )
                    )
                ),
                goods_and_services_tax_rate=Decimal(
                    str(
                        tax_data.get(
                            "goods_and_services_tax_rate", config.tax.goods_and_services_tax_rate
                        )
                    )
                ),
            )

        if "logging" in data:
            log_data = data["logging"]
            config.logging = LoggingConfig(
                level=log_data.get("level", config.logging.level),
                format=log_data.get("format", config.logging.format),
                file=log_data.get("file", config.logging.file),
                max_bytes=log_data.get("max_bytes", config.logging.max_bytes),
                backup_count=log_data.get("backup_count", config.logging.backup_count),
            )

        return config

    @classmethod
    def to_yaml(cls, config: ApplicationConfig) -> str:
        """
        Convert configuration to YAML string.

        Args:
            config: ApplicationConfig instance to convert

        Returns:
            str: YAML representation of the configuration
        """
        return yaml.dump(config.to_dict(), default_flow_style=False)

    @classmethod
    def save_to_yaml(cls, config: ApplicationConfig, path: str) -> None:
        """
        Save configuration to YAML file.

        Args:
            config: ApplicationConfig instance to save
            path: Path to save the YAML file to
        """
        yaml_content = cls.to_yaml(config)
        with open(path, "w") as f:
            f.write(yaml_content)
