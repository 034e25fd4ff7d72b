"""
Financial formulas used when quoting payment plans.

The annuity payment is the fixed amount paid each period that amortizes a
present value at a constant periodic rate:

    payment = rate * pv / (1 - (1 + rate) ** -n)

Example:
    >>> from decimal import Decimal
    >>> compute_annuity_payment(Decimal("0.01"), 12, Decimal("1000")).quantize(Decimal("0.01"))
    Decimal('88.85')
"""

from decimal import Decimal, Overflow

from ..exceptions import OutOfRangeInputException
from ..value_objects.utils import require_period_count, require_positive, require_unit_rate


def compute_annuity_payment(
    rate: Decimal | float | int | str,
    number_of_periods: int,
    present_value: Decimal | float | int | str,
) -> Decimal:
    """Return the payment per period for a fixed-rate annuity.

    Future value and payment timing are fixed at zero and end-of-period, so
    those terms drop out of the formula. It is evaluated in the discount form
    ``rate * pv / (1 - (1 + rate) ** -n)``: for very long terms the discount
    factor underflows to zero and the payment tends to ``rate * pv``. A rate
    too small to change ``1 + rate`` at the context precision is treated as
    zero, giving ``pv / n``.

    Args:
        rate: Interest rate per period, in (0, 1]
        number_of_periods: Number of payment periods, > 0
        present_value: Lump sum the payments are worth now, > 0

    Returns:
        Unrounded payment amount per period

    Raises:
        OutOfRangeInputException: For the first failing check, in the order
            rate > 0, rate <= 1, number_of_periods > 0, present_value > 0;
            or if present_value is too large for the payment to be represented
    """
    periodic_rate = require_unit_rate(rate, "rate")
    periods = require_period_count(number_of_periods, "number_of_periods")
    principal = require_positive(present_value, "present_value")

    try:
        discount = (Decimal("1") + periodic_rate) ** -periods
        if discount == Decimal("1"):
            return principal / periods
        return periodic_rate * principal / (Decimal("1") - discount)
    except Overflow:
        raise OutOfRangeInputException(
            "present_value", "is too large for the payment to be represented", present_value
        ) from None
