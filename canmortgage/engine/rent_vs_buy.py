"""Cumulative cost of renting versus owning over a comparison horizon."""

from decimal import Decimal, ROUND_HALF_UP

from canmortgage.engine.errors import InvalidInputError
from canmortgage.engine.validation import to_decimal
from canmortgage.models.planning import RentVsBuyResult, RentVsBuyYear

TWO_PLACES = Decimal("0.01")


def calculate_rent_vs_buy(
    monthly_rent,
    annual_rent_increase_pct,
    comparison_years: int,
    down_payment,
    monthly_payment,
) -> RentVsBuyResult:
    """Compare rent paid against down payment plus mortgage payments, year by year.

    Rent grows by `annual_rent_increase_pct` at the start of each year after
    the first. Ownership cost ignores equity built and appreciation.
    """
    rent = to_decimal(monthly_rent, "monthly_rent")
    increase = to_decimal(annual_rent_increase_pct, "annual_rent_increase_pct")
    down = to_decimal(down_payment, "down_payment")
    payment = to_decimal(monthly_payment, "monthly_payment")

    if isinstance(comparison_years, bool) or not isinstance(comparison_years, int) or comparison_years <= 0:
        raise InvalidInputError("Comparison period must be a positive whole number of years", "comparison_years")
    for name, value in (("monthly_rent", rent), ("down_payment", down), ("monthly_payment", payment)):
        if value < 0:
            raise InvalidInputError(f"{name} cannot be negative", name)

    yearly: list[RentVsBuyYear] = []
    total_rent = Decimal("0")
    current_rent = rent

    for year in range(1, comparison_years + 1):
        total_rent += current_rent * 12
        ownership = down + payment * 12 * year
        yearly.append(RentVsBuyYear(
            year=year,
            cumulative_rent=total_rent.quantize(TWO_PLACES, ROUND_HALF_UP),
            cumulative_ownership=ownership.quantize(TWO_PLACES, ROUND_HALF_UP),
            difference=(ownership - total_rent).quantize(TWO_PLACES, ROUND_HALF_UP),
        ))
        current_rent *= 1 + increase / 100

    total_ownership = down + payment * 12 * comparison_years

    return RentVsBuyResult(
        total_rent_paid=total_rent.quantize(TWO_PLACES, ROUND_HALF_UP),
        total_ownership_cost=total_ownership.quantize(TWO_PLACES, ROUND_HALF_UP),
        net_benefit=(total_rent - total_ownership).quantize(TWO_PLACES, ROUND_HALF_UP),
        yearly_comparison=yearly,
    )
