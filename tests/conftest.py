"""Global pytest configuration and fixtures."""

# Standard library imports
import sys
from decimal import Decimal
from pathlib import Path
from unittest.mock import Mock

# Load test environment variables
from dotenv import load_dotenv

test_env_path = Path(__file__).parent.parent / ".env.test"
if test_env_path.exists():
    load_dotenv(test_env_path, override=True)

# Third-party imports
import pytest

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

# Local imports
from src.application.config import reset_config
from src.domain.entities import CarWashInvoice


@pytest.fixture(autouse=True)
def _reset_config_singleton():
    """Keep the configuration singleton from leaking between tests."""
    reset_config()
    yield
    reset_config()


@pytest.fixture
def car_wash_invoice() -> CarWashInvoice:
    """Car wash invoice with a $20 package and a $5 fragrance."""
    return CarWashInvoice(
        provincial_sales_tax_rate=Decimal("0.07"),
        goods_and_services_tax_rate=Decimal("0.05"),
        package_cost=Decimal("20.00"),
        fragrance_cost=Decimal("5.00"),
    )


@pytest.fixture
def empty_car_wash_invoice() -> CarWashInvoice:
    """Car wash invoice built with the convenience constructor."""
    return CarWashInvoice(Decimal("0.07"), Decimal("0.05"))


@pytest.fixture
def change_handler() -> Mock:
    """Observer mock for field-change events."""
    return Mock()
