"""
Test suite for the CarWashInvoice entity.
Covers construction order of validation, cost setters, derived amounts
and change notifications.
"""

# Standard library imports
from decimal import Decimal
from unittest.mock import Mock

# Third-party imports
import pytest

# Local imports
from src.domain.entities import CarWashInvoice, Invoice
from src.domain.exceptions import OutOfRangeInputException


class TestCarWashInvoiceCreation:
    """Test CarWashInvoice creation"""

    def test_full_constructor(self, car_wash_invoice):
        """Test creating an invoice with package and fragrance"""
        assert isinstance(car_wash_invoice, Invoice)
        assert car_wash_invoice.provincial_sales_tax_rate == Decimal("0.07")
        assert car_wash_invoice.goods_and_services_tax_rate == Decimal("0.05")
        assert car_wash_invoice.package_cost == Decimal("20.00")
        assert car_wash_invoice.fragrance_cost == Decimal("5.00")

    def test_convenience_constructor_defaults_costs_to_zero(self, empty_car_wash_invoice):
        """Test costs default to zero"""
        assert empty_car_wash_invoice.package_cost == Decimal("0")
        assert empty_car_wash_invoice.fragrance_cost == Decimal("0")
        assert empty_car_wash_invoice.sub_total == Decimal("0")
        assert empty_car_wash_invoice.total == Decimal("0")

    def test_float_inputs(self):
        """Test floats are converted to exact decimals"""
        invoice = CarWashInvoice(0.07, 0.05, 20.00, 5.00)

        assert invoice.sub_total == Decimal("25.00")
        assert invoice.provincial_sales_tax_charged == Decimal("0")
        assert invoice.goods_and_services_tax_charged == Decimal("1.25")
        assert invoice.total == Decimal("26.25")

    def test_zero_costs_accepted(self):
        """Test exactly zero is a valid cost"""
        invoice = CarWashInvoice(Decimal("0.07"), Decimal("0.05"), Decimal("0"), Decimal("0"))

        assert invoice.package_cost == Decimal("0")
        assert invoice.fragrance_cost == Decimal("0")


class TestCarWashInvoiceValidation:
    """Test constructor validation order"""

    def test_provincial_rate_too_high(self):
        """Test provincial rate of 1.5 names the provincial rate"""
        with pytest.raises(OutOfRangeInputException) as exc_info:
            CarWashInvoice(Decimal("1.5"), Decimal("0.05"))

        assert exc_info.value.parameter_name == "provincial_sales_tax_rate"
        assert "cannot be greater than 1" in str(exc_info.value)

    def test_negative_package_cost(self):
        """Test negative package cost is rejected"""
        with pytest.raises(OutOfRangeInputException, match="package_cost cannot be less than 0"):
            CarWashInvoice(Decimal("0.07"), Decimal("0.05"), Decimal("-0.01"), Decimal("5"))

    def test_negative_fragrance_cost(self):
        """Test negative fragrance cost is rejected"""
        with pytest.raises(OutOfRangeInputException, match="fragrance_cost cannot be less than 0"):
            CarWashInvoice(Decimal("0.07"), Decimal("0.05"), Decimal("5"), Decimal("-1"))

    @pytest.mark.parametrize(
        "args,expected",
        [
            (("-1", "-1", "-1", "-1"), "provincial_sales_tax_rate"),
            (("0.07", "2", "-1", "-1"), "goods_and_services_tax_rate"),
            (("0.07", "0.05", "-1", "-1"), "package_cost"),
            (("0.07", "0.05", "1", "-1"), "fragrance_cost"),
        ],
    )
    def test_first_failing_check_is_reported(self, args, expected):
        """Test rates are checked before costs, package before fragrance"""
        with pytest.raises(OutOfRangeInputException) as exc_info:
            CarWashInvoice(*(Decimal(a) for a in args))

        assert exc_info.value.parameter_name == expected

    def test_exception_details(self):
        """Test the error carries parameter, bound and value"""
        with pytest.raises(OutOfRangeInputException) as exc_info:
            CarWashInvoice(Decimal("0.07"), Decimal("0.05"), Decimal("-3"))

        assert exc_info.value.details == {
            "parameter_name": "package_cost",
            "constraint": "cannot be less than 0",
            "value": "-3",
        }


class TestCarWashInvoiceCosts:
    """Test cost setters"""

    def test_set_package_cost(self, car_wash_invoice):
        """Test updating the package cost"""
        car_wash_invoice.package_cost = Decimal("30.00")

        assert car_wash_invoice.package_cost == Decimal("30.00")
        assert car_wash_invoice.sub_total == Decimal("35.00")

    def test_set_fragrance_cost(self, car_wash_invoice):
        """Test updating the fragrance cost"""
        car_wash_invoice.fragrance_cost = Decimal("0")

        assert car_wash_invoice.fragrance_cost == Decimal("0")
        assert car_wash_invoice.sub_total == Decimal("20.00")

    def test_rejected_package_cost_keeps_old_value(self, car_wash_invoice, change_handler):
        """Test negative package cost leaves state and observers untouched"""
        car_wash_invoice.package_cost_changed.subscribe(change_handler)

        with pytest.raises(OutOfRangeInputException, match="package_cost"):
            car_wash_invoice.package_cost = Decimal("-5")

        assert car_wash_invoice.package_cost == Decimal("20.00")
        change_handler.assert_not_called()

    def test_rejected_fragrance_cost_keeps_old_value(self, car_wash_invoice, change_handler):
        """Test negative fragrance cost leaves state and observers untouched"""
        car_wash_invoice.fragrance_cost_changed.subscribe(change_handler)

        with pytest.raises(OutOfRangeInputException, match="fragrance_cost"):
            car_wash_invoice.fragrance_cost = -0.5

        assert car_wash_invoice.fragrance_cost == Decimal("5.00")
        change_handler.assert_not_called()


class TestCarWashInvoiceAmounts:
    """Test derived amounts"""

    def test_scenario_with_package_and_fragrance(self, car_wash_invoice):
        """Test $20 package and $5 fragrance at 5% GST"""
        assert car_wash_invoice.sub_total == Decimal("25.00")
        assert car_wash_invoice.provincial_sales_tax_charged == Decimal("0")
        assert car_wash_invoice.goods_and_services_tax_charged == Decimal("1.25")
        assert car_wash_invoice.total == Decimal("26.25")

    @pytest.mark.parametrize("pst_rate", ["0", "0.07", "0.5", "1"])
    def test_provincial_tax_never_charged(self, pst_rate):
        """Test provincial tax is always zero"""
        invoice = CarWashInvoice(Decimal(pst_rate), Decimal("0.13"), Decimal("40"), Decimal("9.99"))

        assert invoice.provincial_sales_tax_charged == Decimal("0")

    def test_amounts_follow_every_mutation(self, car_wash_invoice):
        """Test GST formula and total identity after a sequence of changes"""
        mutations = [
            ("package_cost", Decimal("12.49")),
            ("goods_and_services_tax_rate", Decimal("0.13")),
            ("fragrance_cost", Decimal("3.33")),
            ("provincial_sales_tax_rate", Decimal("1")),
            ("goods_and_services_tax_rate", Decimal("0")),
            ("package_cost", Decimal("0")),
            ("goods_and_services_tax_rate", Decimal("1")),
        ]

        for name, value in mutations:
            setattr(car_wash_invoice, name, value)

            expected_gst = (
                car_wash_invoice.fragrance_cost + car_wash_invoice.package_cost
            ) * car_wash_invoice.goods_and_services_tax_rate
            assert car_wash_invoice.goods_and_services_tax_charged == expected_gst
            assert car_wash_invoice.total == (
                car_wash_invoice.sub_total
                + car_wash_invoice.provincial_sales_tax_charged
                + car_wash_invoice.goods_and_services_tax_charged
            )

    def test_gst_rate_change_updates_total(self, car_wash_invoice):
        """Test total responds to a new GST rate"""
        car_wash_invoice.goods_and_services_tax_rate = Decimal("0.10")

        assert car_wash_invoice.goods_and_services_tax_charged == Decimal("2.50")
        assert car_wash_invoice.total == Decimal("27.50")


class TestCarWashInvoiceEvents:
    """Test cost change notifications"""

    def test_package_cost_change_notifies_before_store(self, car_wash_invoice):
        """Test handler runs while the old package cost is still stored"""
        seen = []
        car_wash_invoice.package_cost_changed.subscribe(
            lambda sender, change: seen.append((sender.package_cost, change.new_value))
        )

        car_wash_invoice.package_cost = Decimal("25")

        assert seen == [(Decimal("20.00"), Decimal("25"))]

    def test_fragrance_cost_change_notifies_once(self, car_wash_invoice, change_handler):
        """Test a new fragrance cost fires one notification"""
        car_wash_invoice.fragrance_cost_changed.subscribe(change_handler)

        car_wash_invoice.fragrance_cost = Decimal("7.50")

        change_handler.assert_called_once()
        _, change = change_handler.call_args.args
        assert change.field_name == "fragrance_cost"
        assert change.old_value == Decimal("5.00")
        assert change.new_value == Decimal("7.50")

    def test_same_cost_does_not_notify(self, car_wash_invoice, change_handler):
        """Test unchanged costs fire nothing"""
        car_wash_invoice.package_cost_changed.subscribe(change_handler)
        car_wash_invoice.fragrance_cost_changed.subscribe(change_handler)

        car_wash_invoice.package_cost = Decimal("20")
        car_wash_invoice.fragrance_cost = 5

        change_handler.assert_not_called()

    def test_unsubscribed_handler_not_called(self, car_wash_invoice, change_handler):
        """Test unsubscribe stops notifications"""
        car_wash_invoice.package_cost_changed.subscribe(change_handler)
        car_wash_invoice.package_cost_changed.unsubscribe(change_handler)

        car_wash_invoice.package_cost = Decimal("1")

        change_handler.assert_not_called()

    def test_cost_events_independent_of_rate_events(self, car_wash_invoice):
        """Test cost changes do not fire rate events"""
        rate_handler = Mock()
        car_wash_invoice.provincial_sales_tax_changed.subscribe(rate_handler)
        car_wash_invoice.goods_and_services_tax_changed.subscribe(rate_handler)

        car_wash_invoice.package_cost = Decimal("99")
        car_wash_invoice.fragrance_cost = Decimal("1")

        rate_handler.assert_not_called()

    def test_repr(self, car_wash_invoice):
        """Test repr lists rates and costs"""
        assert repr(car_wash_invoice) == (
            "CarWashInvoice(provincial_sales_tax_rate=0.07, goods_and_services_tax_rate=0.05, "
            "package_cost=20.00, fragrance_cost=5.00)"
        )
